from __future__ import annotations
import math
import random
from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Sequence

def euclidean(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])

@dataclass
class TSPInstance:
    coords: List[Tuple[float, float]]
    name: str = "euclidean_tsp"
    # external labels, parallel to coords; defaults to 0..n-1
    ids: List[int] = field(default_factory=list)

    def __post_init__(self):
        if not self.ids:
            self.ids = list(range(len(self.coords)))
        if len(self.ids) != len(self.coords):
            raise ValueError(f"{len(self.ids)} ids given for {len(self.coords)} points")

    @staticmethod
    def random_euclidean(n: int, seed: Optional[int] = None, square_size: float = 100.0, name: str = "random_euclidean"):
        rng = random.Random(seed)
        coords = [(rng.uniform(0, square_size), rng.uniform(0, square_size)) for _ in range(n)]
        return TSPInstance(coords=coords, name=name)

    def n_cities(self) -> int:
        return len(self.coords)

    def distance(self, i: int, j: int) -> float:
        return euclidean(self.coords[i], self.coords[j])

    def distance_matrix(self) -> List[List[float]]:
        n = self.n_cities()
        D = [[0.0]*n for _ in range(n)]
        for i in range(n):
            for j in range(i+1, n):
                d = self.distance(i, j)
                D[i][j] = D[j][i] = d
        return D

    def tour_length(self, tour: Sequence[int]) -> float:
        """Closed tour length, wrap-around edge included. 0.0 for fewer than two points."""
        n = len(tour)
        if n < 2:
            return 0.0
        dist = 0.0
        for k in range(n):
            i, j = tour[k], tour[(k + 1) % n]
            dist += self.distance(i, j)
        return dist

    def labels(self, tour: Sequence[int]) -> List[int]:
        return [self.ids[i] for i in tour]
