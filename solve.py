# solve.py
# Pick a TSPLIB instance from a dataset folder, anneal it, and compare the
# result with the reference lengths listed in solutions.txt.
#
# Usage:
#   python solve.py --dataset dataset              # interactive selection
#   python solve.py --dataset dataset --choice 2 --seed 7
#   python solve.py --file dataset/berlin52.tsp --plot berlin52.png
#
import os
import sys
import logging
import argparse

from anneal import SAConfig, SimulatedAnnealing, parse_tsp_file, read_solutions, list_tsp_files
from anneal.report import format_report, lookup_reference, plot_tour


def build_parser():
    p = argparse.ArgumentParser(description="Simulated annealing for Euclidean TSP instances.")
    p.add_argument("--dataset", default="dataset", help="folder holding .tsp files and solutions.txt")
    p.add_argument("--choice", type=int, default=None, help="1-based index into the listed files (prompts if omitted)")
    p.add_argument("--file", default=None, help="solve this .tsp file instead of choosing from --dataset")
    p.add_argument("--solutions", default=None, help="reference table (default: <dataset>/solutions.txt)")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--t0", type=float, default=10000.0)
    p.add_argument("--cooling-rate", type=float, default=0.9999)
    p.add_argument("--t-min", type=float, default=1e-5)
    p.add_argument("--max-iterations", type=int, default=None)
    p.add_argument("--plot", default=None, help="save a PNG of the best tour here")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def select_file(dataset, choice):
    """Return the chosen .tsp path, or None after reporting why nothing was chosen."""
    try:
        tsp_files = list_tsp_files(dataset)
    except OSError as e:
        print(f"Cannot read dataset folder {dataset}: {e}", file=sys.stderr)
        return None
    if not tsp_files:
        print("No .tsp files found in dataset folder.")
        return None

    print("Available .tsp files:")
    for i, path in enumerate(tsp_files, start=1):
        print(f"{i}: {path}")
    if choice is None:
        try:
            choice = int(input("Select a file by entering its number: "))
        except (ValueError, EOFError):
            choice = 0
    if choice < 1 or choice > len(tsp_files):
        print("Invalid selection.")
        return None
    selected = tsp_files[choice - 1]
    print(f"You selected: {selected}")
    return selected


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    selected = args.file or select_file(args.dataset, args.choice)
    if selected is None:
        return 1

    try:
        inst = parse_tsp_file(selected)
    except OSError as e:
        print(f"Cannot open file {selected}: {e}", file=sys.stderr)
        return 1
    if inst.n_cities() == 0:
        print("Failed to parse the selected file.", file=sys.stderr)
        return 1

    try:
        cfg = SAConfig(t0=args.t0, cooling_rate=args.cooling_rate, t_min=args.t_min,
                       seed=args.seed, max_iterations=args.max_iterations)
        cfg.validate()
    except ValueError as e:
        print(f"Invalid annealing parameters: {e}", file=sys.stderr)
        return 1

    result = SimulatedAnnealing(inst, cfg).run()

    solutions_path = args.solutions or os.path.join(os.path.dirname(selected) if args.file else args.dataset,
                                                    "solutions.txt")
    try:
        table = read_solutions(solutions_path)
    except OSError:
        print(f"Cannot open solutions file {solutions_path}", file=sys.stderr)
        table = {}

    print(format_report(inst, result, lookup_reference(table, selected)))
    if args.plot:
        plot_tour(inst, result.best_tour, args.plot)
        print("Saved:", args.plot)
    return 0


if __name__ == "__main__":
    sys.exit(main())
