import os, argparse
import imageio

from anneal import TSPInstance, SAConfig, SimulatedAnnealing, parse_tsp_file
from anneal.report import plot_tour

def visualize(inst, cfg, outdir, step=20):
    os.makedirs(outdir, exist_ok=True)
    res = SimulatedAnnealing(inst, cfg).run()

    frames = []
    for k in range(0, len(res.history_best_tours), step):
        L = res.history_best_lengths[k]
        frame_path = os.path.join(outdir, f"{inst.name}_frame_{k:04d}.png")
        plot_tour(inst, res.history_best_tours[k], frame_path,
                  title=f"{inst.name} best-so-far\niter={res.history_iterations[k]}  length={L:.2f}")
        frames.append(frame_path)

    gif_path = os.path.join(outdir, f"{inst.name}_convergence.gif")
    with imageio.get_writer(gif_path, mode="I", duration=0.6) as writer:
        for fp in frames:
            writer.append_data(imageio.v2.imread(fp))

    print("Saved:", gif_path)
    return gif_path

def main():
    p = argparse.ArgumentParser()
    p.add_argument("--file", default=None, help="TSPLIB instance; a random one is generated when omitted")
    p.add_argument("--n", type=int, default=50, help="number of cities")
    p.add_argument("--square", type=float, default=100.0)
    p.add_argument("--seed", type=int, default=321)
    p.add_argument("--cooling-rate", type=float, default=0.9995)
    p.add_argument("--outdir", default="viz")
    p.add_argument("--step", type=int, default=20, help="frame every k history samples")
    args = p.parse_args()

    if args.file:
        inst = parse_tsp_file(args.file)
    else:
        inst = TSPInstance.random_euclidean(n=args.n, seed=args.seed, square_size=args.square, name=f"viz{args.n}")
    cfg = SAConfig(cooling_rate=args.cooling_rate, seed=args.seed)
    visualize(inst, cfg, args.outdir, step=args.step)

if __name__ == "__main__":
    main()
