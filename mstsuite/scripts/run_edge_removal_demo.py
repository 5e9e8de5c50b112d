# mstsuite/scripts/run_edge_removal_demo.py
from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from mstsuite.analysis.ensembles import sample_graph
from mstsuite.analysis.scenarios import run_all_removals, simulate_removal, summarize_scenarios
from mstsuite.core.graph import tree_weight
from mstsuite.core.graph_io import read_edge_list
from mstsuite.core.kruskal import is_spanning, kruskal_mst


def build_report(
    graph_path: Optional[str] = None,
    edge_index: int = 2,
    undirected: bool = False,
    exclude_removed: bool = False,
) -> Dict[str, Any]:
    graph = read_edge_list(graph_path) if graph_path else sample_graph()
    mst = kruskal_mst(graph)

    out: Dict[str, Any] = {
        "n_vertices": graph.vertex_count,
        "n_edges": len(graph.edges),
        "mst": [str(e) for e in mst],
        "mst_weight": tree_weight(mst),
        "connected": is_spanning(graph, mst),
    }
    if not out["connected"] or not mst:
        # a forest has no single-edge removal that leaves exactly two parts
        return out

    if not (-len(mst) <= edge_index < len(mst)):
        raise ValueError(f"edge_index {edge_index} out of range for an MST of {len(mst)} edges.")

    chosen = simulate_removal(
        graph, mst, mst[edge_index],
        undirected=undirected, exclude_removed=exclude_removed,
    )
    out["removal"] = chosen.as_dict()
    if chosen.new_tree is not None:
        out["removal"]["new_mst"] = [str(e) for e in chosen.new_tree]

    scenarios = run_all_removals(graph, mst, undirected=undirected, exclude_removed=exclude_removed)
    all_rows: List[Dict[str, Any]] = [s.as_dict() for s in scenarios]
    out["all_removals"] = all_rows
    out["summary"] = summarize_scenarios(scenarios)
    return out


def main() -> None:
    parser = argparse.ArgumentParser(prog='run_edge_removal_demo',
                                     description='Remove MST edges and find their replacements')
    parser.add_argument('-g', '--graph', default=None,
                        help='edge-list file ("<n> <m>" header, then "<u> <v> <w>" lines); '
                             'defaults to the built-in 6-vertex sample')
    parser.add_argument('-e', '--edge-index', default=2, type=int,
                        help='index into the MST of the edge to remove')
    parser.add_argument('--undirected', action='store_true',
                        help='compare edges in canonical (min, max, w) form')
    parser.add_argument('--exclude-removed', action='store_true',
                        help='do not let the removed edge replace itself')
    parser.add_argument('-o', '--outfile', default=None)

    args = parser.parse_args()

    report = build_report(args.graph, args.edge_index, args.undirected, args.exclude_removed)
    text = json.dumps(report, indent=2)
    if args.outfile:
        Path(args.outfile).write_text(text, encoding="utf-8")
    print(text)


if __name__ == "__main__":
    main()
