from __future__ import annotations
import itertools, statistics, os
from typing import Dict, Any, List, Optional
from dataclasses import asdict, replace
import csv
from .tsp import TSPInstance
from .sa_base import SAConfig, SimulatedAnnealing

def run_repeated_trials(instance: TSPInstance, cfg: SAConfig, n_runs: int = 10, base_seed: int = 42):
    lengths = []
    times = []
    best_tours = []
    iterations = []
    for r in range(n_runs):
        cfg_r = replace(cfg, seed=base_seed + r)
        res = SimulatedAnnealing(instance, cfg_r).run()
        lengths.append(res.best_length)
        times.append(res.elapsed_sec)
        best_tours.append(res.best_tour)
        iterations.append(res.n_iterations)
    stats = {
        "mean_length": statistics.mean(lengths),
        "std_length": statistics.stdev(lengths) if len(lengths) > 1 else 0.0,
        "min_length": min(lengths),
        "max_length": max(lengths),
        "median_length": statistics.median(lengths),
        "mean_time": statistics.mean(times),
        "mean_iterations": statistics.mean(iterations),
        "n_runs": n_runs,
    }
    return stats, list(zip(lengths, times, best_tours))

def run_parameter_sweep(instance: TSPInstance, param_grid: Dict[str, List[Any]],
                        base_cfg: Optional[SAConfig] = None, n_runs: int = 5, base_seed: int = 100,
                        csv_path: Optional[str] = None):
    base_cfg = base_cfg or SAConfig()
    unknown = set(param_grid) - set(asdict(base_cfg))
    if unknown:
        raise ValueError(f"Unknown SAConfig fields {sorted(unknown)}")
    keys = sorted(param_grid.keys())
    rows = []
    for values in itertools.product(*[param_grid[k] for k in keys]):
        cfg = replace(base_cfg, **dict(zip(keys, values)))
        stats, _ = run_repeated_trials(instance, cfg, n_runs=n_runs, base_seed=base_seed)
        row = {**{k: getattr(cfg, k) for k in keys}, **stats}
        rows.append(row)
        if csv_path is not None:
            write_header = not os.path.exists(csv_path)
            with open(csv_path, "a", newline="") as f:
                w = csv.DictWriter(f, fieldnames=row.keys())
                if write_header:
                    w.writeheader()
                w.writerow(row)
    return rows
