# lexgraph/store.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Set, Tuple

from lexgraph.errors import GraphDestroyedError, InvalidOrderError, SelfLoopError, VertexNotInGraphError


@dataclass(frozen=True)
class Edge:
    """Ordered pair of vertex handles (indices into the graph's vertex list)."""
    origin: int
    destination: int

    def other(self, index: int) -> int:
        return self.destination if index == self.origin else self.origin


class Vertex:
    """
    A vertex owned by exactly one Graph.

    `label` and `visited` are scratch fields of an ordering run, `color` is
    written by the colourer (0 = not coloured yet). `outgoing` / `incoming`
    hold the incident edges where this vertex is origin / destination.
    """

    __slots__ = ("name", "index", "color", "label", "visited", "outgoing", "incoming", "_owner")

    def __init__(self, name: str, index: int, owner: "Graph"):
        self.name = name
        self.index = index
        self.color = 0
        self.label = 0
        self.visited = False
        self.outgoing: List[Edge] = []
        self.incoming: List[Edge] = []
        self._owner = owner

    def degree(self) -> int:
        return len(self.outgoing) + len(self.incoming)

    def __repr__(self) -> str:
        return f"Vertex({self.name!r}, index={self.index}, color={self.color})"


class Graph:
    """
    Adjacency-list graph, undirected in meaning but storing edges as ordered
    pairs. Two edges with the same (origin, destination) are never stored
    twice; (u, v) and (v, u) are different pairs and both are kept.
    """

    def __init__(self, name: str = ""):
        self.name = name
        self._vertices: List[Vertex] = []
        self._edges: List[Edge] = []
        self._by_name: Dict[str, int] = {}
        self._pairs: Set[Tuple[int, int]] = set()
        self._destroyed = False

    # -----------------
    # VERTICES
    # -----------------

    def add_vertex(self, name: str) -> Vertex:
        self._check_alive()
        v = Vertex(name, len(self._vertices), self)
        self._vertices.append(v)
        # lookup by name returns the first vertex inserted under that name
        self._by_name.setdefault(name, v.index)
        return v

    def vertex_by_name(self, name: str) -> Optional[Vertex]:
        self._check_alive()
        idx = self._by_name.get(name)
        return None if idx is None else self._vertices[idx]

    def find_vertex(self, vertex) -> Optional[Vertex]:
        """Return `vertex` if it is a member of this graph, else None."""
        self._check_alive()
        if not isinstance(vertex, Vertex) or vertex._owner is not self:
            return None
        idx = vertex.index
        if 0 <= idx < len(self._vertices) and self._vertices[idx] is vertex:
            return vertex
        return None

    def vertex_count(self) -> int:
        self._check_alive()
        return len(self._vertices)

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        self._check_alive()
        return tuple(self._vertices)

    def vertex_at(self, index: int) -> Vertex:
        return self._vertices[index]

    def color_of(self, vertex: Vertex) -> int:
        return self._member(vertex).color

    # -----------------
    # EDGES
    # -----------------

    def add_edge(self, origin: Vertex, destination: Vertex) -> bool:
        """
        Store the ordered pair (origin, destination).
        Returns False when exactly this ordered pair is already present.
        """
        o = self._member(origin)
        d = self._member(destination)
        if o is d:
            raise SelfLoopError(f"self-loop on vertex {o.name!r} is not supported")

        key = (o.index, d.index)
        if key in self._pairs:
            return False

        e = Edge(o.index, d.index)
        self._pairs.add(key)
        self._edges.append(e)
        o.outgoing.append(e)
        d.incoming.append(e)
        return True

    def has_edge(self, u: Vertex, v: Vertex) -> bool:
        a, b = self._member(u).index, self._member(v).index
        return (a, b) in self._pairs or (b, a) in self._pairs

    def edge_count(self) -> int:
        self._check_alive()
        return len(self._edges)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        self._check_alive()
        return tuple(self._edges)

    def edge_endpoints(self) -> Iterator[Tuple[Vertex, Vertex]]:
        """(origin, destination) vertex pairs in insertion order."""
        self._check_alive()
        for e in self._edges:
            yield self._vertices[e.origin], self._vertices[e.destination]

    def neighbors(self, vertex: Vertex) -> Iterator[Vertex]:
        """Opposite endpoint of every incident edge; repeats once per edge."""
        v = self._member(vertex)
        for e in v.outgoing:
            yield self._vertices[e.destination]
        for e in v.incoming:
            yield self._vertices[e.origin]

    # -----------------
    # SCRATCH STATE
    # -----------------

    def reset_colors(self) -> None:
        self._check_alive()
        for v in self._vertices:
            v.color = 0

    def reset_labels(self) -> None:
        self._check_alive()
        for v in self._vertices:
            v.label = 0
            v.visited = False

    # -----------------
    # LIFECYCLE
    # -----------------

    def destroy(self) -> None:
        self._check_alive()
        for v in self._vertices:
            v.outgoing.clear()
            v.incoming.clear()
            v._owner = None
        self._vertices.clear()
        self._edges.clear()
        self._by_name.clear()
        self._pairs.clear()
        self._destroyed = True

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def _check_alive(self) -> None:
        if self._destroyed:
            raise GraphDestroyedError(f"graph {self.name!r} has been destroyed")

    def _member(self, vertex: Vertex) -> Vertex:
        v = self.find_vertex(vertex)
        if v is None:
            raise VertexNotInGraphError(vertex, self.name)
        return v

    def __len__(self) -> int:
        return self.vertex_count()

    def __repr__(self) -> str:
        if self._destroyed:
            return f"Graph(name={self.name!r}, destroyed)"
        return f"Graph(name={self.name!r}, n={len(self._vertices)}, m={len(self._edges)})"


def check_order(G: Graph, order: Sequence[Vertex]) -> None:
    """Raise InvalidOrderError unless `order` lists every vertex of G exactly once."""
    n = G.vertex_count()
    if len(order) != n:
        raise InvalidOrderError(f"order has {len(order)} vertices, graph {G.name!r} has {n}")
    seen: Set[int] = set()
    for v in order:
        if G.find_vertex(v) is None:
            raise InvalidOrderError(f"vertex {getattr(v, 'name', v)!r} is not in graph {G.name!r}")
        if v.index in seen:
            raise InvalidOrderError(f"vertex {v.name!r} appears twice in the order")
        seen.add(v.index)


# -----------------
# FUNCTIONAL API
# -----------------

def create_graph(name: str) -> Graph:
    return Graph(name)


def add_vertex(graph: Graph, name: str) -> Vertex:
    return graph.add_vertex(name)


def add_edge(graph: Graph, origin: Vertex, destination: Vertex) -> bool:
    return graph.add_edge(origin, destination)


def vertex_count(graph: Graph) -> int:
    return graph.vertex_count()


def edge_count(graph: Graph) -> int:
    return graph.edge_count()


def vertex_by_name(graph: Graph, name: str) -> Optional[Vertex]:
    return graph.vertex_by_name(name)


def find_vertex(graph: Graph, vertex: Vertex) -> Optional[Vertex]:
    return graph.find_vertex(vertex)


def color_of(graph: Graph, vertex: Vertex) -> int:
    return graph.color_of(vertex)


def destroy_graph(graph: Graph) -> None:
    graph.destroy()
