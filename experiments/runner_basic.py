# experiments/runner_basic.py
import argparse
import random
import time
from itertools import combinations
from typing import Callable, Dict, List, Tuple

import networkx as nx
import pandas as pd

from lexgraph.baselines import dsatur_coloring, greedy_max_clique, smallest_last_coloring
from lexgraph.greedy import coloring_of, lexbfs_coloring
from lexgraph.loader import from_networkx, to_networkx
from lexgraph.store import Graph
from lexgraph.verify import verify_coloring


def random_k_tree(n: int, k: int, seed: int = 0) -> nx.Graph:
    """
    Chordal graph: start from K_{k+1}, then attach every new vertex to all
    members of a k-clique picked among the existing ones.
    """
    rng = random.Random(seed)
    G = nx.complete_graph(k + 1)
    cliques: List[Tuple[int, ...]] = list(combinations(range(k + 1), k))
    for v in range(k + 1, n):
        base = rng.choice(cliques)
        G.add_edges_from((v, u) for u in base)
        for i in range(k):
            cliques.append(tuple(sorted(base[:i] + base[i + 1:] + (v,))))
    return G


def instances() -> List[Tuple[str, nx.Graph]]:
    return [
        ("K6", nx.complete_graph(6)),
        ("P10", nx.path_graph(10)),
        ("C9", nx.cycle_graph(9)),
        ("C10", nx.cycle_graph(10)),
        ("Tree_2_4", nx.balanced_tree(2, 4)),
        ("KTree60_k3", random_k_tree(60, 3, seed=0)),
        ("KTree120_k5", random_k_tree(120, 5, seed=1)),
        ("Petersen", nx.petersen_graph()),
        ("ER60_p006", nx.erdos_renyi_graph(60, 0.06, seed=0)),
        ("RR100_d10", nx.random_regular_graph(10, 100, seed=0)),
    ]


def _run_lexbfs(g: Graph) -> Dict[str, int]:
    lexbfs_coloring(g)
    return coloring_of(g)


ALGOS: Dict[str, Callable[[Graph], Dict[str, int]]] = {
    "lexbfs": _run_lexbfs,
    "dsatur": dsatur_coloring,
    "slo": smallest_last_coloring,
}


def run_one(G: nx.Graph, inst: str, algo: str) -> dict:
    g = from_networkx(G, name=inst)
    t0 = time.time()
    col = ALGOS[algo](g)
    dt = time.time() - t0

    UB = len(set(col.values()))
    rep = verify_coloring(g, col, allowed_colors=range(1, UB + 1))
    LB = len(greedy_max_clique(g))
    return {
        "instance": inst,
        "n": G.number_of_nodes(),
        "m": G.number_of_edges(),
        "chordal": nx.is_chordal(to_networkx(g)),
        "algo": algo,
        "LB": LB,
        "UB": rep["num_used_colors"],
        "gap": rep["num_used_colors"] - LB,
        "feasible": rep["feasible"],
        "conflicts": rep["num_conflicts"],
        "runtime_sec": dt,
    }


def run_all(algos: List[str] = None) -> pd.DataFrame:
    rows = []
    for name, G in instances():
        for algo in algos or list(ALGOS):
            rows.append(run_one(G, name, algo))
    return pd.DataFrame(rows)


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--out", default="results_basic.csv")
    ap.add_argument("--algos", nargs="+", default=list(ALGOS), choices=list(ALGOS))
    args = ap.parse_args()

    df = run_all(args.algos)
    df.to_csv(args.out, index=False)
    print(f"Wrote {len(df)} rows -> {args.out}")

    summary = df.groupby("algo").agg(
        feasible=("feasible", "all"),
        mean_gap=("gap", "mean"),
        total_colors=("UB", "sum"),
        runtime_sec=("runtime_sec", "sum"),
    )
    print(summary.to_string())
    chordal = df[df["chordal"]]
    if not chordal.empty:
        print("[Chordal] colors per instance")
        print(chordal.pivot(index="instance", columns="algo", values="UB").to_string())


if __name__ == "__main__":
    main()
