"""
Graph abstraction for iterative ranking.

Solvers only see dense integer positions and numpy views; identifier
resolution stays inside the concrete graph.
"""

from abc import ABC, abstractmethod
from typing import Tuple

import numpy as np


class RankGraph(ABC):
    """Directed multigraph with one score per node."""

    @property
    @abstractmethod
    def damping(self) -> float:
        """Damping factor in [0, 1)."""
        raise NotImplementedError

    @abstractmethod
    def node_count(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def scores(self) -> np.ndarray:
        """
        Current scores indexed by position.

        Returns a copy; callers may keep it as a snapshot.
        """
        raise NotImplementedError

    @abstractmethod
    def replace_scores(self, new_scores: np.ndarray) -> None:
        """Overwrite every score at once with new_scores (one per position)."""
        raise NotImplementedError

    @abstractmethod
    def edge_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Edge endpoints as parallel position arrays.

        Returns:
            (sources, targets) in edge-insertion order.
        """
        raise NotImplementedError

    @abstractmethod
    def outgoing_counts(self) -> np.ndarray:
        """Outgoing edge count per position."""
        raise NotImplementedError

    @abstractmethod
    def nodes_with_incoming(self) -> int:
        """Number of nodes that have at least one incoming edge."""
        raise NotImplementedError
