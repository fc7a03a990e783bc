# experiments/smoke_test.py
import networkx as nx

from lexgraph.baselines import dsatur_coloring, smallest_last_coloring
from lexgraph.greedy import lexbfs_coloring
from lexgraph.lexbfs import compute_order, is_perfect_elimination_order
from lexgraph.loader import from_networkx
from lexgraph.verify import print_check_summary, verify_coloring
from experiments.runner_basic import random_k_tree


def run_one(G: nx.Graph, name: str) -> None:
    g = from_networkx(G, name=name)
    print(f"\n=== {name} === |V|={g.vertex_count()} |E|={g.edge_count()}")

    order = compute_order(g, g.vertex_at(0))
    print(f"[LexBFS] peo={is_perfect_elimination_order(g, order)} chordal={nx.is_chordal(G)}")

    k = lexbfs_coloring(g)
    print_check_summary(verify_coloring(g), prefix="[LexBFS] ")
    print(f"[LexBFS] colors={k}")

    for tag, fn in (("DSATUR", dsatur_coloring), ("SLO", smallest_last_coloring)):
        col = fn(g)
        print_check_summary(verify_coloring(g, col), prefix=f"[{tag}] ")


def main() -> None:
    run_one(nx.complete_graph(6), "K6")
    run_one(nx.cycle_graph(9), "C9")
    run_one(random_k_tree(40, 4, seed=3), "KTree40_k4")
    run_one(nx.erdos_renyi_graph(60, 0.06, seed=0), "ER(60,0.06)")


if __name__ == "__main__":
    main()
