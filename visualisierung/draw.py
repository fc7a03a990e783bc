# visualisierung/draw.py
from __future__ import annotations
import os, re
from typing import Dict, Tuple, Set, List, Optional
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import networkx as nx

from lexgraph.loader import to_networkx
from lexgraph.store import Graph

# Zähler für Schnappschüsse je Schritt → int
_SHOT_COUNTER: Dict[str, int] = {}

PALETTE = [
    "#E63946", "#457B9D", "#2A9D8F", "#F4A261", "#8E44AD", "#F1C40F",
    "#7F8C8D", "#1ABC9C", "#D35400", "#27AE60", "#C2185B", "#5D6D7E",
]
UNCOLORED = "#DDDDDD"

# Layout-Cache pro Graph-Signatur
_POS_CACHE: Dict[int, Dict] = {}


def _graph_signature(G: nx.Graph) -> int:
    """Stabile Signatur aus Knoten- und Kantenmengen, um Layouts zu cachen."""
    nodes_sig = tuple(sorted(G.nodes()))
    edges_sig = tuple(sorted(tuple(sorted(e)) for e in G.edges()))
    return hash((nodes_sig, edges_sig))


def _sanitize_step(step: str) -> str:
    """Schrittname bereinigen: Kleinbuchstaben, [a-z0-9-_], Mehrfach-Bindestriche zusammenfassen."""
    s = step.strip().lower()
    s = re.sub(r"[^a-z0-9\-_]+", "-", s)
    s = re.sub(r"-+", "-", s).strip("-")
    return s or "step"


def color_for(c: int) -> str:
    """Farbe 1..k aus der Palette (zyklisch); 0 = ungefärbt."""
    if c <= 0:
        return UNCOLORED
    return PALETTE[(c - 1) % len(PALETTE)]


def _get_layout(G: nx.Graph, seed: int = 42) -> Dict:
    sig = _graph_signature(G)
    if sig not in _POS_CACHE:
        _POS_CACHE[sig] = nx.spring_layout(G, seed=seed)
    return _POS_CACHE[sig]


def visualize_coloring(
    g: Graph,
    step: str,
    out_dir: str = "visualisierung/picture",
    layout_seed: int = 42,
    show_labels: bool = True,
    figure_size: Tuple[float, float] = (8.0, 6.0),
    dpi: int = 160,
) -> str:
    """
    Zeichnet die aktuelle Färbung von g als PNG und gibt den Dateipfad zurück.
      - Kanten zwischen gleichfarbigen Nachbarn → schwarz, deren Endknoten schwarz gefüllt
      - ungefärbte Knoten → hellgrau
      - Knotentext: Name und Farbe
    """
    os.makedirs(out_dir, exist_ok=True)
    step_clean = _sanitize_step(step)
    G = to_networkx(g)
    coloring = nx.get_node_attributes(G, "color")

    conflict_edges: List[Tuple[str, str]] = [
        (u, v) for u, v in G.edges() if coloring[u] and coloring[u] == coloring[v]
    ]
    conflict_nodes: Set[str] = {x for e in conflict_edges for x in e}
    other_edges = [e for e in G.edges() if e not in conflict_edges]

    pos = _get_layout(G, seed=layout_seed)
    plt.figure(figsize=figure_size, dpi=dpi)

    if other_edges:
        nx.draw_networkx_edges(G, pos, edgelist=other_edges, width=0.8, alpha=0.4, edge_color="#999999")
    if conflict_edges:
        nx.draw_networkx_edges(G, pos, edgelist=conflict_edges, width=1.6, alpha=0.95, edge_color="black")

    nodes = list(G.nodes())
    if nodes:
        fills = ["black" if v in conflict_nodes else color_for(coloring[v]) for v in nodes]
        nx.draw_networkx_nodes(G, pos, nodelist=nodes, node_color=fills, edgecolors="#555555", linewidths=0.8, node_size=320)
    if show_labels:
        labels = {v: f"{v}:{coloring[v]}" for v in nodes}
        nx.draw_networkx_labels(G, pos, labels=labels, font_size=7)

    cnt = _SHOT_COUNTER.get(step_clean, 0) + 1
    _SHOT_COUNTER[step_clean] = cnt
    k = len({c for c in coloring.values() if c})
    plt.title(f"{g.name or 'graph'} | {step} | colors={k} | conflicts={len(conflict_edges)}")
    plt.axis("off")
    plt.tight_layout()

    fpath = os.path.join(out_dir, f"step-{step_clean}_try-{cnt:03d}_colors-{k:03d}.png")
    plt.savefig(fpath, bbox_inches="tight")
    plt.close()
    return fpath
