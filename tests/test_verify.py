# tests/test_verify.py
import networkx as nx

from lexgraph.baselines import dsatur_coloring, greedy_max_clique, smallest_last_coloring
from lexgraph.greedy import lexbfs_coloring
from lexgraph.loader import build_graph, from_networkx
from lexgraph.verify import print_check_summary, verify_coloring


def test_uncolored_graph_is_not_feasible():
    g = build_graph("P3", "ABC", [("A", "B"), ("B", "C")])
    rep = verify_coloring(g)
    assert not rep["feasible"]
    assert rep["missing_nodes"] == ["A", "B", "C"]
    assert rep["num_conflicts"] == 2


def test_conflicts_and_range_are_reported():
    g = build_graph("P3", "ABC", [("A", "B"), ("B", "C")])
    rep = verify_coloring(g, {"A": 1, "B": 1, "C": 5}, allowed_colors=[1, 2])
    assert not rep["feasible"]
    assert rep["conflicts_sample"] == [("A", "B", 1, 1)]
    assert rep["out_of_range_nodes"] == ["C"]
    assert rep["used_colors"] == [1, 5]


def test_bad_values_are_reported():
    g = build_graph("P2", "AB", [("A", "B")])
    rep = verify_coloring(g, {"A": 1, "B": "red"})
    assert rep["bad_nodes"] == ["B"]
    assert not rep["feasible"]


def test_vertex_colors_checked_by_default():
    g = from_networkx(nx.cycle_graph(6))
    k = lexbfs_coloring(g)
    rep = verify_coloring(g, allowed_colors=range(1, k + 1))
    assert rep["feasible"]
    assert rep["num_used_colors"] == k


def test_summary_prints_samples(capsys):
    g = build_graph("P2", "AB", [("A", "B")])
    print_check_summary(verify_coloring(g, {"A": 2, "B": 2}), prefix="[T] ")
    out = capsys.readouterr().out
    assert "[T] feasible=False|used_colors=1|conflicts=1" in out
    assert "conflicts_sample" in out


def test_baselines_are_one_based_and_proper():
    g = from_networkx(nx.petersen_graph())
    for col in (dsatur_coloring(g), smallest_last_coloring(g)):
        k = len(set(col.values()))
        assert set(col.values()) == set(range(1, k + 1))
        assert verify_coloring(g, col)["feasible"]
    # baselines leave the vertex colours alone
    assert all(v.color == 0 for v in g.vertices)


def test_greedy_clique_on_complete_graph():
    g = from_networkx(nx.complete_graph(5))
    assert len(greedy_max_clique(g)) == 5
