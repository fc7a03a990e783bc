# main.py
import argparse
import sys
import time
from dataclasses import dataclass
from typing import Optional

from lexgraph.baselines import dsatur_coloring, greedy_max_clique
from lexgraph.errors import GraphError
from lexgraph.greedy import color
from lexgraph.lexbfs import compute_order, order_names
from lexgraph.loader import load, load_demo_graph, load_dimacs_col, load_edgelist_txt, save
from lexgraph.store import Graph
from lexgraph.verify import print_check_summary, verify_coloring


@dataclass(frozen=True)
class RunConfig:
    input: Optional[str]
    fmt: str
    demo_seed: int
    root: Optional[str]
    output: Optional[str]
    compare: bool
    viz_out: Optional[str]
    viz_layout_seed: int
    verbose: bool


def parse_args(argv=None) -> RunConfig:
    ap = argparse.ArgumentParser(description="LexBFS ordering + greedy colouring of an undirected graph")
    ap.add_argument("--input", help="graph file (default: random demo graph)")
    ap.add_argument("--format", dest="fmt", default="dot", choices=["dot", "dimacs", "edgelist"])
    ap.add_argument("--demo-seed", type=int, default=0)
    ap.add_argument("--root", help="name of the root vertex (default: first vertex)")
    ap.add_argument("--output", help="write the graph back as strict DOT ('-' for stdout)")
    ap.add_argument("--compare", action="store_true", help="also run DSATUR and the clique lower bound")
    ap.add_argument("--viz-out", default=None, help="directory for a PNG of the colouring")
    ap.add_argument("--viz-layout-seed", type=int, default=42)
    ap.add_argument("--verbose", action="store_true")
    a = ap.parse_args(argv)
    return RunConfig(
        input=a.input, fmt=a.fmt, demo_seed=a.demo_seed, root=a.root, output=a.output,
        compare=a.compare, viz_out=a.viz_out, viz_layout_seed=a.viz_layout_seed, verbose=a.verbose,
    )


def read_graph(cfg: RunConfig) -> Graph:
    if cfg.input is None:
        return load_demo_graph(seed=cfg.demo_seed)
    if cfg.fmt == "dimacs":
        return load_dimacs_col(cfg.input)
    if cfg.fmt == "edgelist":
        return load_edgelist_txt(cfg.input)
    return load(cfg.input)


def run(cfg: RunConfig) -> int:
    g = read_graph(cfg)
    print(f"[Main] graph={g.name!r} n={g.vertex_count()} m={g.edge_count()}")
    if g.vertex_count() == 0:
        print("[Main] empty graph, nothing to color")
        return 0

    if cfg.root is None:
        root = g.vertex_at(0)
    else:
        root = g.vertex_by_name(cfg.root)
        if root is None:
            print(f"[Main] root {cfg.root!r} not found", file=sys.stderr)
            return 2

    t0 = time.time()
    order = compute_order(g, root, verbose=cfg.verbose)
    k = color(g, order, verbose=cfg.verbose)
    dt = time.time() - t0
    if cfg.verbose:
        print(f"[Main] order={order_names(order)}")
    print(f"[LexBFS] root={root.name} colors={k} time={dt:.4f}s")

    rep = verify_coloring(g, allowed_colors=range(1, k + 1))
    print_check_summary(rep, prefix="[LexBFS] ")

    if cfg.compare:
        ds = dsatur_coloring(g)
        lb = len(greedy_max_clique(g))
        print(f"[Compare] LexBFS colors={k} vs DSATUR colors={len(set(ds.values()))} | clique LB={lb}")

    if cfg.output == "-":
        save(sys.stdout, g)
    elif cfg.output:
        save(cfg.output, g)
        print(f"[Main] wrote {cfg.output}")

    if cfg.viz_out:
        from visualisierung.draw import visualize_coloring
        path = visualize_coloring(g, step="lexbfs-greedy", out_dir=cfg.viz_out, layout_seed=cfg.viz_layout_seed)
        print(f"[Main] picture={path}")

    return 0 if rep["feasible"] else 1


def main(argv=None) -> int:
    cfg = parse_args(argv)
    try:
        return run(cfg)
    except (GraphError, OSError) as exc:
        print(f"[Main] error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
