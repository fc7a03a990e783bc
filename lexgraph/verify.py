# lexgraph/verify.py
from typing import Dict, Any, List, Tuple, Optional, Iterable

from lexgraph.store import Graph


def verify_coloring(
    G: Graph,
    coloring: Optional[Dict[str, int]] = None,
    allowed_colors: Optional[Iterable[int]] = None,
    sample_conflicts: int = 10,
) -> Dict[str, Any]:
    """
    Check a colouring of G. Without `coloring`, the colours currently stored
    on the vertices are checked. Colour 0 counts as "not coloured".
    """
    if coloring is None:
        coloring = {v.name: v.color for v in G.vertices}

    report: Dict[str, Any] = {}

    # completeness check
    missing_nodes = [v.name for v in G.vertices if not coloring.get(v.name)]
    report["missing_nodes"] = missing_nodes

    bad_nodes = [
        name for name, c in coloring.items()
        if c is None or isinstance(c, bool) or not isinstance(c, int) or c < 0
    ]
    report["bad_nodes"] = bad_nodes

    used_colors = sorted({c for c in coloring.values() if isinstance(c, int) and c > 0})
    report["used_colors"] = used_colors
    report["num_used_colors"] = len(used_colors)

    # color bound check
    out_of_range_nodes: List[str] = []
    if allowed_colors is not None:
        allowed_set = set(allowed_colors)
        out_of_range_nodes = [name for name, c in coloring.items() if c and c not in allowed_set]
    report["out_of_range_nodes"] = out_of_range_nodes

    # conflicts check
    conflicts: List[Tuple[str, str, Optional[int], Optional[int]]] = []
    for u, v in G.edge_endpoints():
        cu = coloring.get(u.name)
        cv = coloring.get(v.name)
        if not cu or not cv or cu == cv:
            conflicts.append((u.name, v.name, cu, cv))
    report["num_conflicts"] = len(conflicts)
    report["conflicts_sample"] = conflicts[:sample_conflicts]

    feasible = (
        len(missing_nodes) == 0 and
        len(bad_nodes) == 0 and
        len(out_of_range_nodes) == 0 and
        len(conflicts) == 0
    )
    report["feasible"] = feasible
    return report


def print_check_summary(report: Dict[str, Any], prefix: str = "[Check] ") -> None:

    feasible = report.get("feasible", False)
    num_conflicts = report.get("num_conflicts", -1)
    num_used = report.get("num_used_colors", -1)
    print(f"{prefix}feasible={feasible}|used_colors={num_used}|conflicts={num_conflicts}")
    if not feasible:
        miss = report.get("missing_nodes", [])
        oor = report.get("out_of_range_nodes", [])
        bad = report.get("bad_nodes", [])
        sample = report.get("conflicts_sample", [])
        if miss:
            print(f"{prefix}missing_nodes(sample) ={miss[:10]}")
        if oor:
            print(f"{prefix}out_of_range_nodes(sample) ={oor[:10]}")
        if bad:
            print(f"{prefix}bad_nodes(sample) ={bad[:10]}")
        if num_conflicts > 0:
            print(f"{prefix}conflicts_sample ={sample}")
