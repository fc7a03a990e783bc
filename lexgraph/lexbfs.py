# lexgraph/lexbfs.py
from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from lexgraph.errors import RootNotInGraphError
from lexgraph.store import Graph, Vertex, check_order


def _max_label_unvisited(vertices: Sequence[Vertex]) -> Optional[Vertex]:
    # first unvisited vertex with the strictly greatest label; ties keep insertion order
    best = None
    for v in vertices:
        if v.visited:
            continue
        if best is None or v.label > best.label:
            best = v
    return best


def compute_order(G: Graph, root: Vertex, verbose: bool = False) -> List[Vertex]:
    """
    Priority-labelled breadth-first search from `root`.

    Fills the result from the back: the root lands in the last slot, every
    further pick goes one slot to the left. A picked vertex pushes its
    position number onto its neighbours' labels (the root overwrites them,
    later picks only raise them), and the next pick is the unvisited vertex
    with the highest label, first in insertion order on ties.

    Returns a permutation of all vertices of G with result[-1] == root.
    """
    if G.find_vertex(root) is None:
        raise RootNotInGraphError(root, G.name)

    G.reset_labels()
    vertices = G.vertices
    n = len(vertices)
    order: List[Optional[Vertex]] = [None] * n

    root.label = n
    root.visited = True
    pos = n - 1
    order[pos] = root
    for u in G.neighbors(root):
        u.label = pos
    if verbose:
        print(f"[LexBFS] root={root.name} n={n}")

    while True:
        ve = _max_label_unvisited(vertices)
        if ve is None:
            break
        ve.visited = True
        pos -= 1
        order[pos] = ve
        if verbose:
            print(f"[LexBFS] pos={pos} pick={ve.name} label={ve.label}")

        for u in G.neighbors(ve):
            if pos > u.label:
                u.label = pos

    return order  # type: ignore[return-value]


def order_names(order: Sequence[Vertex]) -> List[str]:
    return [v.name for v in order]


def is_perfect_elimination_order(G: Graph, order: Sequence[Vertex]) -> bool:
    """
    True if, for every vertex of `order`, its neighbours placed after it
    form a clique. Chordal graphs are exactly those that admit one.
    Raises InvalidOrderError unless `order` is a permutation of G.
    """
    check_order(G, order)
    position: Dict[int, int] = {v.index: i for i, v in enumerate(order)}
    for i, v in enumerate(order):
        later = {u.index for u in G.neighbors(v) if position[u.index] > i}
        if len(later) < 2:
            continue
        # enough to check that the earliest later neighbour sees all the others
        first = min(later, key=lambda idx: position[idx])
        seen_by_first = {u.index for u in G.neighbors(G.vertex_at(first))}
        if not (later - {first}) <= seen_by_first:
            return False
    return True
