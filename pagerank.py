"""
PageRank over an edge stream.

Pagerank wires a LinkGraph to a RankEngine and exposes the whole workflow
as one object: add edges, tune damping, iterate, read the ranking.

    pr = Pagerank()
    pr.add_edge("D", "A")
    pr.add_edge("B", "C")
    pr.run_default()
    pr.ranked_nodes()
"""

from typing import Dict, Generic, Iterator, List, Optional, Tuple

from algorithms import DEFAULT_THRESHOLD, RankEngine
from link_graph import LinkGraph
from nodes import K
from pagerank_engine import PowerIterationEngine
from ranking import ranked_nodes


class Pagerank(Generic[K]):
    """
    Single-owner, in-memory PageRank solver over one graph.
    """

    def __init__(self, engine: Optional[RankEngine] = None) -> None:
        self._graph: LinkGraph[K] = LinkGraph()
        self._engine: RankEngine = engine or PowerIterationEngine()

    @property
    def damping(self) -> float:
        return self._graph.damping

    def set_damping(self, percent: int) -> None:
        """Set damping to percent / 100; raises ValueError unless 0 <= percent < 100."""
        self._graph.set_damping(percent)

    def add_edge(self, source: K, target: K) -> None:
        self._graph.add_edge(source, target)

    def score_of(self, key: K) -> Optional[float]:
        return self._graph.score_of(key)

    def incoming_count_of(self, key: K) -> Optional[int]:
        return self._graph.incoming_count_of(key)

    def outgoing_count_of(self, key: K) -> Optional[int]:
        return self._graph.outgoing_count_of(key)

    def node_count(self) -> int:
        return self._graph.node_count()

    def edge_count(self) -> int:
        return self._graph.edge_count()

    def is_empty(self) -> bool:
        return self._graph.is_empty()

    def nodes(self) -> Iterator[K]:
        return self._graph.keys()

    def scores(self) -> Dict[K, float]:
        """Current scores keyed by identifier, in insertion order."""
        values = self._graph.scores()
        return {key: float(values[pos]) for pos, key in enumerate(self._graph.keys())}

    def step(self) -> float:
        return self._engine.step(self._graph)

    def run_until(self, threshold: float, max_iterations: Optional[int] = None) -> int:
        return self._engine.run_until(self._graph, threshold, max_iterations)

    def run_default(self) -> int:
        return self.run_until(DEFAULT_THRESHOLD)

    def ranked_nodes(self, limit: Optional[int] = None) -> List[Tuple[K, float]]:
        return ranked_nodes(self._graph, limit)

    def __contains__(self, key: object) -> bool:
        return key in self._graph

    def __len__(self) -> int:
        return self._graph.node_count()
