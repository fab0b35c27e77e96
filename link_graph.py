"""
Concrete rank graph built incrementally from an edge stream.

Identifiers are resolved to dense positions in first-seen order; positions
are never reused. Scores live in a growable numpy buffer next to the node
records so a solver sweep can work on whole arrays.
"""

from typing import Dict, Generic, Iterator, List, Optional, Tuple

import numpy as np

from graph import RankGraph
from nodes import GraphNode, K

DEFAULT_DAMPING = 0.85
_MIN_CAPACITY = 16


class LinkGraph(RankGraph, Generic[K]):
    """
    Append-only directed multigraph keyed by hashable identifiers.
    """

    def __init__(self) -> None:
        self._damping: float = DEFAULT_DAMPING
        self._nodes: List[GraphNode[K]] = []
        self._positions: Dict[K, int] = {}
        self._edges = 0
        self._sources: List[int] = []
        self._targets: List[int] = []
        self._scores = np.empty(_MIN_CAPACITY, dtype=np.float64)

        # Derived values, rebuilt on demand.
        self._nodes_with_incoming: Optional[int] = None
        self._edge_cache: Optional[Tuple[np.ndarray, np.ndarray]] = None
        self._outgoing_cache: Optional[np.ndarray] = None

    # --- Configuration -------------------------------------------------------

    @property
    def damping(self) -> float:
        return self._damping

    def set_damping(self, percent: int) -> None:
        """
        Set the damping factor as a whole percentage in [0, 100).

        Existing node scores are left as they are; only nodes created later
        and subsequent steps see the new value.
        """
        if percent >= 100:
            raise ValueError(f"damping percent {percent} needs to be below 100")
        if percent < 0:
            raise ValueError(f"damping percent {percent} must not be negative")
        self._damping = percent / 100

    # --- Mutation API --------------------------------------------------------

    def resolve_or_create(self, key: K) -> int:
        """Return the position of key, appending a fresh node if unseen."""
        pos = self._positions.get(key)
        if pos is not None:
            return pos

        pos = len(self._nodes)
        self._grow_scores(pos + 1)
        self._scores[pos] = 1.0 - self._damping
        self._nodes.append(GraphNode(key))
        self._positions[key] = pos
        self._nodes_with_incoming = None
        self._outgoing_cache = None
        return pos

    def add_edge(self, source: K, target: K) -> None:
        """
        Add a directed edge source -> target.

        Endpoints are created on demand. Repeated pairs are distinct edges.
        """
        src = self.resolve_or_create(source)
        dst = self.resolve_or_create(target)

        target_node = self._nodes[dst]
        if not target_node.incoming:
            self._nodes_with_incoming = None
        self._nodes[src].outgoing += 1
        target_node.incoming.append(src)

        self._sources.append(src)
        self._targets.append(dst)
        self._edges += 1
        self._edge_cache = None
        self._outgoing_cache = None

    def _grow_scores(self, size: int) -> None:
        capacity = self._scores.shape[0]
        if size <= capacity:
            return
        grown = np.empty(max(size, 2 * capacity), dtype=np.float64)
        grown[:capacity] = self._scores
        self._scores = grown

    # --- Lookups -------------------------------------------------------------

    def position_of(self, key: K) -> Optional[int]:
        return self._positions.get(key)

    def key_at(self, pos: int) -> K:
        return self._nodes[pos].key

    def keys(self) -> Iterator[K]:
        """Identifiers in position order."""
        return (node.key for node in self._nodes)

    def score_of(self, key: K) -> Optional[float]:
        pos = self._positions.get(key)
        if pos is None:
            return None
        return float(self._scores[pos])

    def incoming_count_of(self, key: K) -> Optional[int]:
        pos = self._positions.get(key)
        if pos is None:
            return None
        return len(self._nodes[pos].incoming)

    def outgoing_count_of(self, key: K) -> Optional[int]:
        pos = self._positions.get(key)
        if pos is None:
            return None
        return self._nodes[pos].outgoing

    def edge_count(self) -> int:
        return self._edges

    def is_empty(self) -> bool:
        return not self._nodes

    def __contains__(self, key: object) -> bool:
        return key in self._positions

    def __len__(self) -> int:
        return len(self._nodes)

    # --- RankGraph interface -------------------------------------------------

    def node_count(self) -> int:
        return len(self._nodes)

    def scores(self) -> np.ndarray:
        return self._scores[: len(self._nodes)].copy()

    def replace_scores(self, new_scores: np.ndarray) -> None:
        n = len(self._nodes)
        if new_scores.shape != (n,):
            raise ValueError(f"expected {n} scores, got shape {new_scores.shape}")
        self._scores[:n] = new_scores

    def edge_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        if self._edge_cache is None:
            self._edge_cache = (
                np.asarray(self._sources, dtype=np.intp),
                np.asarray(self._targets, dtype=np.intp),
            )
        return self._edge_cache

    def outgoing_counts(self) -> np.ndarray:
        if self._outgoing_cache is None:
            self._outgoing_cache = np.fromiter(
                (node.outgoing for node in self._nodes),
                dtype=np.float64,
                count=len(self._nodes),
            )
        return self._outgoing_cache

    def nodes_with_incoming(self) -> int:
        if self._nodes_with_incoming is None:
            self._nodes_with_incoming = sum(1 for node in self._nodes if node.incoming)
        return self._nodes_with_incoming
