# lexgraph/baselines.py
import networkx as nx
from typing import Dict, List

from lexgraph.loader import to_networkx
from lexgraph.store import Graph


def _networkx_coloring(g: Graph, strategy: str) -> Dict[str, int]:
    raw = nx.coloring.greedy_color(to_networkx(g), strategy=strategy)
    # networkx colours are 0-based and may skip ids; map to 1..k
    used = sorted(set(raw.values()))
    remap = {c: i + 1 for i, c in enumerate(used)}
    return {v: remap[c] for v, c in raw.items()}


def dsatur_coloring(g: Graph) -> Dict[str, int]:
    """NetworkX greedy colouring with strategy='DSATUR', keyed by vertex name."""
    return _networkx_coloring(g, "DSATUR")


def smallest_last_coloring(g: Graph) -> Dict[str, int]:
    return _networkx_coloring(g, "smallest_last")


def greedy_max_clique(g: Graph) -> List[str]:
    """
    Simple greedy heuristic for a maximal clique (not guaranteed to be maximum).
    Its size is a lower bound on the number of colours any proper colouring needs.
    """
    # order vertices by degree (desc); sorted() keeps insertion order on ties
    vertices = sorted(g.vertices, key=lambda v: v.degree(), reverse=True)
    clique = []
    for v in vertices:
        if all(g.has_edge(v, u) for u in clique):
            clique.append(v)
    return [v.name for v in clique]
