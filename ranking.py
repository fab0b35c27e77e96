"""
Ranked view over a LinkGraph, plus CSV export.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Tuple
import csv

from link_graph import LinkGraph
from nodes import K


def ranked_nodes(graph: LinkGraph[K], limit: Optional[int] = None) -> List[Tuple[K, float]]:
    """
    Identifiers paired with their current score, highest score first.

    Equal scores keep insertion order (sorted() is stable), so the result is
    reproducible. The graph is not modified.
    """
    scores = graph.scores()
    order = sorted(range(len(scores)), key=lambda pos: -scores[pos])
    if limit is not None:
        order = order[:limit]
    return [(graph.key_at(pos), float(scores[pos])) for pos in order]


def write_ranking_csv(rows: Iterable[Tuple[object, float]], path: Path) -> None:
    """
    Write (rank, node, score) rows to CSV.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=["rank", "node", "score"])
        writer.writeheader()
        for rank, (key, score) in enumerate(rows, start=1):
            writer.writerow({"rank": rank, "node": key, "score": score})
