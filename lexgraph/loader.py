# lexgraph/loader.py
"""
Adapters between lexgraph.Graph and the outside world: DOT text (parsed and
written with pydot, every ID double-quoted on output), networkx graphs,
DIMACS .col files and plain edge lists.
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List, Tuple, Union

import networkx as nx
import pydot
from networkx.utils import open_file

from lexgraph.errors import MalformedGraphError
from lexgraph.store import Graph

PathLike = Union[str, Path]

_DIMACS_P_LINE = re.compile(r"^\s*p\s+(\w+)\s+(\d+)\s+(\d+)\s*$", re.IGNORECASE)
_DIMACS_E_LINE = re.compile(r"^\s*e\s+(\d+)\s+(\d+)\s*$", re.IGNORECASE)


def build_graph(name: str, vertex_names: Iterable[str], edges: Iterable[Tuple[str, str]]) -> Graph:
    """
    Build a Graph from a list of names and a list of (origin, destination)
    name pairs. Repeated names are added once; the store drops repeated
    ordered pairs. An edge naming an unknown vertex is an error.
    """
    g = Graph(name)
    for vname in vertex_names:
        if g.vertex_by_name(vname) is None:
            g.add_vertex(vname)

    for tail, head in edges:
        origin = g.vertex_by_name(tail)
        destination = g.vertex_by_name(head)
        if origin is None or destination is None:
            missing = tail if origin is None else head
            raise MalformedGraphError(f"edge ({tail!r}, {head!r}) refers to unknown vertex {missing!r}")
        if origin is destination:
            raise MalformedGraphError(f"self-loop on {tail!r} is not supported")
        g.add_edge(origin, destination)
    return g


def from_networkx(G: nx.Graph, name: str = None) -> Graph:
    if G.is_directed():
        raise MalformedGraphError("directed graphs are not supported")
    if name is None:
        name = str(G.graph.get("name", "") or "")
    names = [str(v) for v in G.nodes()]
    if len(set(names)) != len(names):
        raise MalformedGraphError("node labels collide once converted to strings")
    return build_graph(name, names, ((str(u), str(v)) for u, v in G.edges()))


def to_networkx(g: Graph) -> nx.Graph:
    """Undirected networkx copy; node keys are vertex names, `color` is a node attribute."""
    G = nx.Graph(name=g.name)
    for v in g.vertices:
        G.add_node(v.name, color=v.color)
    G.add_edges_from((u.name, v.name) for u, v in g.edge_endpoints())
    return G


# --------------------------
# DOT
# --------------------------

# bare `node` / `edge` / `graph` statements set defaults, they are not vertices
_DEFAULT_STMTS = {"node", "edge", "graph"}


def _quote(s: str) -> str:
    """Double-quoted DOT ID; keywords and odd characters survive a round trip."""
    return '"' + s.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n") + '"'


def _unquote(s: str) -> str:
    if len(s) < 2 or s[0] != '"' or s[-1] != '"':
        return s
    body = s[1:-1]
    out: List[str] = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == "\\" and i + 1 < len(body):
            nxt = body[i + 1]
            if nxt == "\n":
                pass  # line continuation
            elif nxt == "n":
                out.append("\n")
            elif nxt in '"\\':
                out.append(nxt)
            else:
                out.append(ch + nxt)
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def _endpoint(end) -> str:
    if not isinstance(end, str):
        raise MalformedGraphError("subgraphs as edge endpoints are not supported")
    return _unquote(end)


def _walk(P, names: List[str], edges: List[Tuple[str, str]]) -> None:
    """Collect node statements and edges of P and of its subgraphs, in order."""
    for node in P.get_node_list():
        raw = node.get_name()
        if raw in _DEFAULT_STMTS:
            continue
        names.append(_unquote(raw))
    for e in P.get_edge_list():
        tail, head = _endpoint(e.get_source()), _endpoint(e.get_destination())
        names.extend((tail, head))
        edges.append((tail, head))
    for sub in P.get_subgraph_list():
        _walk(sub, names, edges)


@open_file(0, mode="r")
def load(path) -> Graph:
    """
    Read an undirected DOT graph from a path or an open text stream.

    Every node statement becomes a vertex, endpoints first seen in edges come
    after them. An edge repeated in either orientation is stored once.
    """
    data = path.read()
    try:
        parsed = pydot.graph_from_dot_data(data)
    except Exception as exc:
        raise MalformedGraphError(f"cannot parse DOT input: {exc}") from exc
    if not parsed:
        raise MalformedGraphError("no graph found in DOT input")

    P = parsed[0]
    if P.get_type() == "digraph":
        raise MalformedGraphError("directed graphs are not supported")

    names: List[str] = []
    pairs: List[Tuple[str, str]] = []
    _walk(P, names, pairs)

    unique: List[Tuple[str, str]] = []
    seen = set()
    for tail, head in pairs:
        key = frozenset((tail, head))
        if key not in seen:
            seen.add(key)
            unique.append((tail, head))
    return build_graph(_unquote(P.get_name() or ""), names, unique)


@open_file(0, mode="w")
def save(path, g: Graph) -> Graph:
    """
    Write g as a strict undirected DOT graph: one edge statement per stored
    edge (reciprocal pairs once), then a node statement for every vertex
    without edges so that isolates survive a round trip.
    """
    dot = pydot.Dot(graph_name=_quote(g.name), graph_type="graph", strict=True)
    seen = set()
    for u, v in g.edge_endpoints():
        key = frozenset((u.index, v.index))
        if key in seen:
            continue
        seen.add(key)
        dot.add_edge(pydot.Edge(_quote(u.name), _quote(v.name)))
    for v in g.vertices:
        if v.degree() == 0:
            dot.add_node(pydot.Node(_quote(v.name)))
    path.write(dot.to_string())
    return g


# --------------------------
# DIMACS .col and edge-list
# --------------------------

def load_dimacs_col(path: PathLike, name: str = None) -> Graph:
    """
    DIMACS .col format:
      c comment
      p edge <n> <m>
      e u v
    Vertices are named "1".."n" after their 1-based ids.
    """
    path = Path(path)
    n_decl = None
    edges: List[Tuple[int, int]] = []
    with path.open("r", encoding="utf-8", errors="ignore") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("c"):
                continue
            mp = _DIMACS_P_LINE.match(line)
            if mp:
                n_decl = int(mp.group(2))
                continue
            me = _DIMACS_E_LINE.match(line)
            if me:
                u, v = int(me.group(1)), int(me.group(2))
                if u != v:
                    edges.append((u, v))
                continue
            raise MalformedGraphError(f"{path.name}: unexpected line {line!r}")

    if n_decl is None:
        # Fallback: infer n from max node id
        n_decl = max((max(u, v) for u, v in edges), default=0)

    for u, v in edges:
        if not (1 <= u <= n_decl and 1 <= v <= n_decl):
            raise MalformedGraphError(f"{path.name}: edge ({u}, {v}) outside 1..{n_decl}")

    return build_graph(
        name if name is not None else path.stem,
        (str(i) for i in range(1, n_decl + 1)),
        ((str(u), str(v)) for u, v in edges),
    )


def load_edgelist_txt(path: PathLike, name: str = None) -> Graph:
    """
    Whitespace separated `u v` per line; lines starting with # or a lone c
    token are ignored, as are self-loops. Vertices appear in first-seen order.
    """
    path = Path(path)
    names: List[str] = []
    edges: List[Tuple[str, str]] = []
    with path.open("r", encoding="utf-8", errors="ignore") as f:
        for line in f:
            s = line.strip()
            if not s or s.startswith("#"):
                continue
            parts = s.split()
            if parts[0] == "c":
                continue
            if len(parts) < 2:
                continue
            u, v = parts[0], parts[1]
            names.extend((u, v))
            if u != v:
                edges.append((u, v))
    return build_graph(name if name is not None else path.stem, names, edges)


def load_demo_graph(seed: int = 0, n: int = 100, p: float = 0.08) -> Graph:
    # small random graph for quick tests
    return from_networkx(nx.erdos_renyi_graph(n=n, p=p, seed=seed), name=f"er_{n}_{seed}")
