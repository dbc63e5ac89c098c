from __future__ import annotations
import logging
import math
import random
import time
from dataclasses import dataclass, field
from typing import List, Optional

from .tsp import TSPInstance
from .moves import draw_segment, reverse_segment, reversal_delta, is_permutation

logger = logging.getLogger(__name__)

@dataclass
class SAConfig:
    t0: float = 10000.0             # starting temperature
    cooling_rate: float = 0.9999    # T <- T * cooling_rate each iteration
    t_min: float = 1e-5             # stop once T <= t_min
    seed: Optional[int] = None
    max_iterations: Optional[int] = None  # optional hard cap on top of the schedule
    incremental: bool = True        # delta from the two swapped edges instead of a full recompute
    record_every: int = 100         # history sampling stride (iterations)
    check_tour: bool = False        # verify the permutation after every accepted move

    def validate(self):
        if self.t0 <= 0:
            raise ValueError("t0 must be > 0.")
        if self.t_min <= 0:
            raise ValueError("t_min must be > 0.")
        if self.t_min >= self.t0:
            raise ValueError("t_min must be < t0.")
        if not 0.0 < self.cooling_rate < 1.0:
            raise ValueError("cooling_rate must be in (0, 1).")
        if self.record_every < 1:
            raise ValueError("record_every must be >= 1.")
        if self.max_iterations is not None and self.max_iterations < 0:
            raise ValueError("max_iterations must be >= 0.")

    def expected_iterations(self) -> int:
        return max(0, math.ceil(math.log(self.t_min / self.t0) / math.log(self.cooling_rate)))

@dataclass
class SAResult:
    best_tour: List[int]
    best_length: float
    initial_length: float
    config: SAConfig
    elapsed_sec: float
    n_iterations: int = 0
    n_accepted: int = 0
    final_temperature: float = 0.0
    history_best_lengths: List[float] = field(default_factory=list)
    history_best_tours: List[List[int]] = field(default_factory=list)
    history_iterations: List[int] = field(default_factory=list)

class SimulatedAnnealing:
    """Simulated annealing over segment reversals with geometric cooling.

    One random.Random, seeded from cfg.seed, drives the initial shuffle, the
    move draws and the acceptance draws, so a fixed seed reproduces a run.
    """
    def __init__(self, instance: TSPInstance, cfg: Optional[SAConfig] = None):
        self.instance = instance
        self.n = instance.n_cities()
        self.cfg = cfg or SAConfig()
        self.cfg.validate()
        self.rng = random.Random(self.cfg.seed)
        self.D = instance.distance_matrix()

        # per-sample history for visualization
        self.history_best_lengths: List[float] = []
        self.history_best_tours: List[List[int]] = []
        self.history_iterations: List[int] = []

    def _dist(self, i: int, j: int) -> float:
        return self.D[i][j]

    def _tour_length(self, tour: List[int]) -> float:
        if self.n < 2:
            return 0.0
        dist = 0.0
        for k in range(self.n):
            i, j = tour[k], tour[(k+1)%self.n]
            dist += self.D[i][j]
        return dist

    def _initial_tour(self, initial_tour: Optional[List[int]]) -> List[int]:
        if initial_tour is not None:
            if not is_permutation(list(initial_tour), self.n):
                raise ValueError(f"initial tour is not a permutation of 0..{self.n - 1}")
            return list(initial_tour)
        tour = list(range(self.n))
        self.rng.shuffle(tour)
        return tour

    def _record(self, iteration: int, best_length: float, best_tour: List[int]):
        self.history_best_lengths.append(best_length)
        self.history_best_tours.append(list(best_tour))
        self.history_iterations.append(iteration)

    def _accept(self, delta: float, T: float) -> bool:
        if delta < 0:
            return True
        return self.rng.random() < math.exp(-delta / T)

    def _step(self, tour: List[int], current: float, T: float):
        """Try one segment reversal on `tour` in place; undo it if rejected.

        Returns (accepted, length of `tour` after the step).
        """
        i, j = draw_segment(self.rng, self.n)
        if self.cfg.incremental:
            delta = reversal_delta(tour, i, j, self._dist)
            reverse_segment(tour, i, j)
            candidate = current + delta
        else:
            reverse_segment(tour, i, j)
            candidate = self._tour_length(tour)
            delta = candidate - current
        if self._accept(delta, T):
            return True, candidate
        reverse_segment(tour, i, j)
        return False, current

    def run(self, initial_tour: Optional[List[int]] = None) -> SAResult:
        start = time.time()
        cfg = self.cfg
        self.history_best_lengths = []
        self.history_best_tours = []
        self.history_iterations = []

        if self.n < 2:
            tour = list(range(self.n))
            self._record(0, 0.0, tour)
            return SAResult(best_tour=tour, best_length=0.0, initial_length=0.0, config=cfg,
                            elapsed_sec=time.time() - start, final_temperature=cfg.t0,
                            history_best_lengths=self.history_best_lengths,
                            history_best_tours=self.history_best_tours,
                            history_iterations=self.history_iterations)

        tour = self._initial_tour(initial_tour)
        current = self._tour_length(tour)
        initial_length = current
        best_tour = list(tour)
        best = current
        self._record(0, best, best_tour)

        T = cfg.t0
        iterations = 0
        accepted = 0
        # with three or fewer points every permutation is the same cycle
        if self.n > 3:
            logger.info("annealing %s: n=%d, initial length %.4f, ~%d iterations",
                        self.instance.name, self.n, current, cfg.expected_iterations())
            while T > cfg.t_min:
                if cfg.max_iterations is not None and iterations >= cfg.max_iterations:
                    logger.info("stopping at iteration cap %d (T=%.6g)", cfg.max_iterations, T)
                    break
                moved, current = self._step(tour, current, T)
                if moved:
                    accepted += 1
                    if cfg.check_tour and not is_permutation(tour, self.n):
                        raise RuntimeError(f"tour is no longer a permutation at iteration {iterations}")
                    if current < best:
                        if cfg.incremental:
                            # resync the cached length so accumulated deltas do not drift
                            current = self._tour_length(tour)
                        if current < best:
                            best = current
                            best_tour = list(tour)

                T *= cfg.cooling_rate
                iterations += 1
                if iterations % cfg.record_every == 0:
                    self._record(iterations, best, best_tour)
                    if iterations % (cfg.record_every * 100) == 0:
                        logger.debug("iter %d T=%.6g current=%.4f best=%.4f", iterations, T, current, best)
            if iterations % cfg.record_every != 0:
                self._record(iterations, best, best_tour)

        elapsed = time.time() - start
        logger.info("done after %d iterations (%d accepted): best length %.4f in %.2fs",
                    iterations, accepted, best, elapsed)
        return SAResult(best_tour=best_tour, best_length=best, initial_length=initial_length, config=cfg,
                        elapsed_sec=elapsed, n_iterations=iterations, n_accepted=accepted,
                        final_temperature=T, history_best_lengths=self.history_best_lengths,
                        history_best_tours=self.history_best_tours,
                        history_iterations=self.history_iterations)
