# tests/test_smoke.py
import os, sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import networkx as nx
import pytest

from experiments.runner_basic import random_k_tree, run_one
from lexgraph.baselines import greedy_max_clique
from lexgraph.greedy import lexbfs_coloring
from lexgraph.loader import from_networkx
from lexgraph.verify import verify_coloring


def run_and_check(G, expect_chi=None, name="Graph"):
    g = from_networkx(G, name=name)
    used = lexbfs_coloring(g)
    lb = len(greedy_max_clique(g))

    rep = verify_coloring(g, allowed_colors=range(1, used + 1))
    assert rep["feasible"], f"{name}: verify_coloring says infeasible"
    assert used == rep["num_used_colors"], f"{name}: reported {used}, verified {rep['num_used_colors']}"
    assert used >= lb, f"{name}: UB < LB ({used} < {lb})"

    if expect_chi is not None:
        assert used == expect_chi, f"{name}: expect chi={expect_chi}, got UB={used}"
    print(f"[PASS] {name:20s}  UB={used}  LB={lb}")
    return used


CASES = [
    ("K3", nx.complete_graph(3), 3),
    ("K4", nx.complete_graph(4), 4),
    ("P2", nx.path_graph(2), 2),
    ("C4 (even cycle)", nx.cycle_graph(4), None),
    ("C5 (odd cycle)", nx.cycle_graph(5), None),
    ("K3,4", nx.complete_bipartite_graph(3, 4), None),
    ("Grid 5x5", nx.grid_2d_graph(5, 5), None),
    ("Petersen", nx.petersen_graph(), None),
    ("3-tree", random_k_tree(30, 3, seed=2), None),
    ("ER(40,0.08)", nx.erdos_renyi_graph(40, 0.08, seed=2), None),
]


@pytest.mark.parametrize("name, G, chi", CASES, ids=[c[0] for c in CASES])
def test_smoke(name, G, chi):
    run_and_check(G, expect_chi=chi, name=name)


def test_random_k_tree_is_chordal():
    G = random_k_tree(50, 4, seed=5)
    assert G.number_of_nodes() == 50
    assert nx.is_chordal(G)
    # every vertex after the first clique brings exactly k edges
    assert G.number_of_edges() == 10 + 4 * (50 - 5)


@pytest.mark.parametrize("algo", ["lexbfs", "dsatur", "slo"])
def test_experiment_row(algo):
    row = run_one(nx.petersen_graph(), "Petersen", algo)
    assert row["feasible"] and row["conflicts"] == 0
    assert row["n"] == 10 and row["m"] == 15
    assert row["chordal"] is False
    assert row["UB"] >= row["LB"]


if __name__ == "__main__":
    for name, G, chi in CASES:
        run_and_check(G, expect_chi=chi, name=name)
    print("All smoke tests passed.")
