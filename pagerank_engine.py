"""
Power-iteration PageRank engine.

Uses numpy to run each sweep over whole score arrays of any RankGraph.
"""

import math

import numpy as np

from algorithms import RankEngine
from graph import RankGraph


class PowerIterationEngine(RankEngine):
    """
    Synchronous (Jacobi) PageRank sweep.

    Every new score reads only the previous sweep's scores:

        new[v] = (1 - d) + d * sum(old[u] / out[u] for u in incoming[v])

    Nodes without outgoing edges never contribute, so their mass is not
    redistributed (they act as rank sinks).

    Complexity:
        O(V + E) per sweep.
    """

    def step(self, graph: RankGraph) -> float:
        """
        Run one sweep and return the convergence metric.

        The metric is sqrt(sum((old - new) ** 2)) divided by the number of
        nodes that have at least one incoming edge. Every node's difference
        enters the sum, including nodes nobody links to. A graph where no
        node has an incoming edge reports 0.0.
        """
        n = graph.node_count()
        damping = graph.damping
        old = graph.scores()

        sources, targets = graph.edge_arrays()
        if sources.size:
            shares = old[sources] / graph.outgoing_counts()[sources]
            # bincount adds each target's shares in edge-insertion order
            inflow = np.bincount(targets, weights=shares, minlength=n)
        else:
            inflow = np.zeros(n, dtype=np.float64)

        new = (1.0 - damping) + damping * inflow
        graph.replace_scores(new)

        with_incoming = graph.nodes_with_incoming()
        if with_incoming == 0:
            return 0.0
        diff = old - new
        return math.sqrt(float(np.dot(diff, diff))) / with_incoming
