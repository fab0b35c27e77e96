"""
End-to-end tests for the Pagerank facade.
"""

import pytest

from pagerank import Pagerank

EXAMPLE_EDGES = [
    ("D", "A"),
    ("D", "B"),
    ("B", "C"),
    ("C", "B"),
    ("E", "B"),
    ("E", "F"),
    ("F", "B"),
    ("F", "E"),
    ("G", "B"),
    ("G", "E"),
    ("H", "B"),
    ("H", "E"),
    ("I", "B"),
    ("I", "E"),
    ("J", "E"),
    ("K", "E"),
]


def _example() -> Pagerank:
    pr = Pagerank()
    for src, dst in EXAMPLE_EDGES:
        pr.add_edge(src, dst)
    return pr


def test_new_instance_is_empty():
    pr = Pagerank()
    assert pr.is_empty()
    assert pr.node_count() == 0
    assert pr.edge_count() == 0
    assert pr.damping == pytest.approx(0.85)
    assert pr.ranked_nodes() == []


def test_example_graph_converges_in_eighteen_iterations():
    pr = _example()

    assert pr.node_count() == 11
    assert pr.edge_count() == 16
    assert pr.run_default() == 18


def test_example_graph_ranking_order():
    pr = _example()
    pr.run_default()

    ranked = [key for key, _ in pr.ranked_nodes()]
    assert ranked == ["B", "C", "E", "F", "A", "D", "G", "H", "I", "J", "K"]


def test_example_graph_scores():
    pr = _example()
    pr.run_default()

    # Nodes nobody links to stay at the baseline
    for key in "DGHIJK":
        assert pr.score_of(key) == pytest.approx(0.15)
    # A only ever receives half of D's baseline
    assert pr.score_of("A") == pytest.approx(0.15 + 0.85 * 0.075)
    assert pr.score_of("B") > pr.score_of("C") > pr.score_of("E")


def test_ranked_nodes_is_idempotent():
    pr = _example()
    pr.run_default()

    assert pr.ranked_nodes() == pr.ranked_nodes()
    assert pr.ranked_nodes(limit=3) == pr.ranked_nodes()[:3]


def test_node_count_matches_distinct_endpoints():
    pr = Pagerank()
    pairs = [(1, 2), (2, 3), (3, 1), (1, 2), (4, 4), (5, 1)]
    for src, dst in pairs:
        pr.add_edge(src, dst)

    distinct = {n for pair in pairs for n in pair}
    assert pr.node_count() == len(distinct) == len(pr)
    assert set(pr.nodes()) == distinct


def test_lookups_on_facade():
    pr = Pagerank()
    pr.add_edge("aaa", "bbb")
    pr.add_edge("ccc", "bbb")

    assert pr.incoming_count_of("bbb") == 2
    assert pr.outgoing_count_of("bbb") == 0
    assert pr.score_of("nope") is None
    assert "aaa" in pr


def test_set_damping_on_facade():
    pr = Pagerank()
    pr.set_damping(22)
    assert abs(pr.damping - 0.22) < 1e-9

    with pytest.raises(ValueError):
        pr.set_damping(100)
    assert abs(pr.damping - 0.22) < 1e-9


def test_scores_dict_follows_insertion_order():
    pr = Pagerank()
    pr.add_edge("x", "y")
    pr.step()

    scores = pr.scores()
    assert list(scores) == ["x", "y"]
    assert scores["y"] == pytest.approx(0.2775)
