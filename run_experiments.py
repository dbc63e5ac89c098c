# run_experiments.py
import os, json, argparse, tempfile, shutil
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
import imageio

from anneal import TSPInstance, SAConfig, SimulatedAnnealing
from anneal.experiments import run_repeated_trials, run_parameter_sweep
from anneal.report import plot_tour

OUTDIR = os.path.dirname(__file__)


def ensure(path: str) -> str:
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    return path


def build_configs(t0=10000.0, t_min=1e-5):
    """Named cooling schedules compared in the trials (fast to slow)."""
    return {
        "fast": SAConfig(t0=t0, cooling_rate=0.999, t_min=t_min),
        "medium": SAConfig(t0=t0, cooling_rate=0.9995, t_min=t_min),
        "slow": SAConfig(t0=t0, cooling_rate=0.9999, t_min=t_min),
    }


def plot_scatter(details_by_schedule, save_path):
    plt.figure()
    names = list(details_by_schedule.keys())
    for i, name in enumerate(names, start=1):
        lengths = [L for (L, t, tour) in details_by_schedule[name]]
        x = np.random.normal(loc=i, scale=0.03, size=len(lengths))
        plt.plot(x, lengths, "o")
    plt.xticks(range(1, len(names) + 1), names)
    plt.ylabel("Best tour length")
    plt.title("Best lengths across runs")
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()


def plot_convergence(inst, name, cfg, save_path):
    solver = SimulatedAnnealing(inst, cfg)
    res = solver.run()
    steps = np.asarray(res.history_iterations)
    plt.figure()
    plt.plot(steps, res.history_best_lengths)
    plt.xlabel("Iteration")
    plt.ylabel("Best-so-far tour length")
    plt.title(f"{name} cooling (r={cfg.cooling_rate}) convergence")
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()
    return res


def make_gif(inst, name, cfg, save_gif, step=20, frames_dir=None, keep_frames=False):
    """Render a convergence GIF. By default, writes frames to a temp folder and deletes them."""
    res = SimulatedAnnealing(inst, cfg).run()

    tmpdir_was_auto = False
    if frames_dir is None:
        frames_dir = tempfile.mkdtemp(prefix=f"{name}_frames_")
        tmpdir_was_auto = True
    else:
        os.makedirs(frames_dir, exist_ok=True)

    frames = []
    for k in range(0, len(res.history_best_tours), step):
        L = res.history_best_lengths[k]
        frame_path = os.path.join(frames_dir, f"{name}_{k:04d}.png")
        plot_tour(inst, res.history_best_tours[k], frame_path,
                  title=f"{name} best-so-far\niter={res.history_iterations[k]} length={L:.2f}")
        frames.append(frame_path)

    ensure(save_gif)
    with imageio.get_writer(save_gif, mode="I", duration=0.6) as w:
        for fp in frames:
            w.append_data(imageio.v2.imread(fp))

    if not keep_frames and tmpdir_was_auto:
        shutil.rmtree(frames_dir, ignore_errors=True)
    elif keep_frames:
        print("Frames saved in:", frames_dir)
    return save_gif


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--n", type=int, default=50)
    ap.add_argument("--square", type=float, default=100.0)
    ap.add_argument("--runs", type=int, default=5)
    ap.add_argument("--t0", type=float, default=10000.0)
    ap.add_argument("--t-min", type=float, default=1e-5)
    ap.add_argument("--visualize", action="store_true", help="save a convergence GIF per schedule")
    ap.add_argument("--keep-frames", action="store_true", help="keep the PNG frames used for the GIF(s)")
    ap.add_argument("--frames-dir", default=None, help="where to store frames (if keeping them)")
    args = ap.parse_args()

    inst = TSPInstance.random_euclidean(n=args.n, seed=123, square_size=args.square, name=f"demo{args.n}")
    configs = build_configs(t0=args.t0, t_min=args.t_min)

    # repeated trials
    records = []
    details_by_schedule = {}
    for name, cfg in configs.items():
        stats, details = run_repeated_trials(inst, cfg, n_runs=args.runs)
        print(name, json.dumps(stats, indent=2))
        records.append({"schedule": name, "cooling_rate": cfg.cooling_rate, **stats})
        details_by_schedule[name] = details

    # summary CSV + scatter plot
    df_summary = pd.DataFrame.from_records(records)
    summary_csv = os.path.join(OUTDIR, "results_summary.csv")
    df_summary.to_csv(summary_csv, index=False)
    scatter_png = os.path.join(OUTDIR, "results_distribution.png")
    plot_scatter(details_by_schedule, scatter_png)

    # convergence plots (per schedule)
    for name, cfg in configs.items():
        conv_png = os.path.join(OUTDIR, f"convergence_{name}.png")
        plot_convergence(inst, name, cfg, conv_png)

    # cooling schedule sweep
    grid = {"cooling_rate": [0.999, 0.9995, 0.9999], "t0": [100.0, 10000.0]}
    rows = run_parameter_sweep(
        inst, grid, base_cfg=configs["medium"],
        n_runs=3, base_seed=500, csv_path=os.path.join(OUTDIR, "cooling_grid.csv")
    )
    print("Grid search evaluated:", len(rows))
    print(pd.DataFrame(rows).sort_values("mean_length").to_string(index=False))

    if args.visualize:
        for name, cfg in configs.items():
            gif_path = os.path.join(OUTDIR, f"{name}_convergence.gif")
            make_gif(inst, name, cfg, gif_path,
                     frames_dir=args.frames_dir, keep_frames=args.keep_frames)
            print("Saved GIF:", gif_path)


if __name__ == "__main__":
    main()
