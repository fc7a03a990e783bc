# lexgraph/greedy.py
from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from lexgraph.errors import ColorCapacityExceededError
from lexgraph.lexbfs import compute_order
from lexgraph.store import Graph, Vertex, check_order


def color(G: Graph, order: Sequence[Vertex], max_colors: Optional[int] = None, verbose: bool = False) -> int:
    """
    Greedy colouring in the given order: each vertex takes the smallest colour
    >= 1 not used by an already coloured neighbour. Colours of a previous run
    are cleared first. Returns the number of colours used.

    With `max_colors` set, needing a larger colour raises
    ColorCapacityExceededError instead of exceeding the bound; the graph is
    left uncoloured in that case.
    """
    check_order(G, order)
    G.reset_colors()
    n = len(order)
    if n == 0:
        return 0

    first = order[0]
    if max_colors is not None and max_colors < 1:
        raise ColorCapacityExceededError(first.name, 1, max_colors)
    first.color = 1
    num_colors = 1

    for v in order[1:]:
        # a vertex with d incident edges always finds a free colour in 1..d+1;
        # index 0 is the "uncoloured" sentinel and never offered
        available = [True] * (v.degree() + 2)
        available[0] = False
        for u in G.neighbors(v):
            if u.color < len(available):
                available[u.color] = False
        c = available.index(True, 1)
        if max_colors is not None and c > max_colors:
            G.reset_colors()
            raise ColorCapacityExceededError(v.name, c, max_colors)
        v.color = c
        if c > num_colors:
            num_colors = c

    if verbose:
        print(f"[Greedy] n={n} colors={num_colors}")
    return num_colors


def lexbfs_coloring(G: Graph, root: Optional[Vertex] = None, verbose: bool = False) -> int:
    """Order from `root` (first inserted vertex by default), then colour."""
    if G.vertex_count() == 0:
        return 0
    if root is None:
        root = G.vertex_at(0)
    order = compute_order(G, root, verbose=verbose)
    return color(G, order, verbose=verbose)


def coloring_of(G: Graph) -> Dict[str, int]:
    return {v.name: v.color for v in G.vertices}


def color_classes(G: Graph) -> Dict[int, List[str]]:
    groups: Dict[int, List[str]] = {}
    for v in G.vertices:
        groups.setdefault(v.color, []).append(v.name)
    return dict(sorted(groups.items()))
