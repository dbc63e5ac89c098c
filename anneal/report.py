from __future__ import annotations
from typing import Dict, Optional

import matplotlib.pyplot as plt

from .tsp import TSPInstance
from .sa_base import SAResult
from .tsplib import instance_key

def lookup_reference(table: Dict[str, float], instance: str) -> Optional[float]:
    """Reference length for an instance path or name, None when the table has no entry."""
    return table.get(instance_key(instance))

def gap_percent(length: float, reference: float) -> float:
    return 100.0 * (length - reference) / reference if reference else float("nan")

def format_report(instance: TSPInstance, result: SAResult, reference: Optional[float]) -> str:
    lines = [
        f"Initial distance: {result.initial_length:g}",
        f"Final distance: {result.best_length:g}",
        "Tour: " + " ".join(str(i) for i in instance.labels(result.best_tour)),
    ]
    if reference is None:
        lines.append("Correct Answer: Not available in solutions.txt")
    else:
        lines.append(f"Correct Answer: {reference:g}")
        lines.append(f"Gap: {gap_percent(result.best_length, reference):.2f}%")
    return "\n".join(lines)

def plot_tour(instance: TSPInstance, tour, save_path: str, title: Optional[str] = None):
    coords = instance.coords
    xs = [coords[i][0] for i in tour] + [coords[tour[0]][0]]
    ys = [coords[i][1] for i in tour] + [coords[tour[0]][1]]
    plt.figure(figsize=(5, 5))
    plt.plot([c[0] for c in coords], [c[1] for c in coords], "o")
    plt.plot(xs, ys, "-")
    plt.title(title or f"{instance.name} length={instance.tour_length(tour):.2f}")
    plt.axis("equal")
    plt.tight_layout()
    plt.savefig(save_path, dpi=120, bbox_inches="tight")
    plt.close()
