"""
Algorithm interfaces for iterative ranking.

Keeps the solver separate from graph construction and from the CLI.
"""

from abc import ABC, abstractmethod
from typing import Optional

from graph import RankGraph

DEFAULT_THRESHOLD = 0.01


class ConvergenceError(RuntimeError):
    """
    Raised when a bounded run exhausts its iteration ceiling.
    """

    def __init__(self, iterations: int, metric: float, threshold: float) -> None:
        super().__init__(
            f"no convergence below {threshold} after {iterations} iterations "
            f"(last metric {metric:.6g})"
        )
        self.iterations = iterations
        self.metric = metric
        self.threshold = threshold


class RankEngine(ABC):
    """
    Interface for a synchronous, step-wise ranking solver.
    """

    @abstractmethod
    def step(self, graph: RankGraph) -> float:
        """
        Perform one full update sweep over graph.

        Returns:
            Convergence metric for the sweep (always >= 0).
        """
        raise NotImplementedError

    def run_until(
        self,
        graph: RankGraph,
        threshold: float,
        max_iterations: Optional[int] = None,
    ) -> int:
        """
        Step until a sweep's metric is strictly below threshold.

        Returns the number of sweeps that missed the threshold before the
        first one that met it. Without max_iterations the loop is unbounded.

        Raises:
            ValueError: max_iterations is less than 1.
            ConvergenceError: max_iterations sweeps in a row missed the
                threshold.
        """
        if max_iterations is not None and max_iterations < 1:
            raise ValueError(f"max_iterations must be at least 1, got {max_iterations}")

        iterations = 0
        while True:
            metric = self.step(graph)
            if metric < threshold:
                return iterations
            iterations += 1
            if max_iterations is not None and iterations >= max_iterations:
                raise ConvergenceError(iterations, metric, threshold)

    def run_default(self, graph: RankGraph) -> int:
        return self.run_until(graph, DEFAULT_THRESHOLD)
