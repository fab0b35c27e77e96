"""
Unit tests for the ranked view and CSV export.
"""

import csv
from pathlib import Path

from link_graph import LinkGraph
from pagerank_engine import PowerIterationEngine
from ranking import ranked_nodes, write_ranking_csv


def test_ranked_nodes_sorted_descending():
    g = LinkGraph()
    g.add_edge("a", "b")
    g.add_edge("c", "b")
    PowerIterationEngine().step(g)

    ranking = ranked_nodes(g)

    assert ranking[0][0] == "b"
    scores = [score for _, score in ranking]
    assert scores == sorted(scores, reverse=True)


def test_ties_keep_insertion_order():
    g = LinkGraph()
    g.add_edge("z", "m")
    g.add_edge("y", "m")
    g.add_edge("x", "m")

    # Before any step every node holds the same baseline score
    assert [key for key, _ in ranked_nodes(g)] == ["z", "m", "y", "x"]


def test_ranked_nodes_does_not_mutate_graph():
    g = LinkGraph()
    g.add_edge("a", "b")
    before = g.scores().tolist()

    ranked_nodes(g)
    ranked_nodes(g, limit=1)

    assert g.scores().tolist() == before


def test_write_ranking_csv(tmp_path: Path):
    out = tmp_path / "nested" / "ranking.csv"
    write_ranking_csv([("b", 0.5), ("a", 0.25)], out)

    with out.open() as f:
        rows = list(csv.DictReader(f))

    assert [r["node"] for r in rows] == ["b", "a"]
    assert [r["rank"] for r in rows] == ["1", "2"]
    assert float(rows[0]["score"]) == 0.5
