# mstsuite/core/graph_io.py
from __future__ import annotations

from pathlib import Path
from typing import Any, List, Union

import networkx as nx

from mstsuite.core.graph import Weight, WeightedGraph

'''
Text edge-list format:

<nvertices> <nedges>
<v1> <v2> <w>
<v1> <v2> <w>
...

Blank lines and lines starting with '#' are ignored.
'''


def _parse_weight(token: str) -> Weight:
    try:
        return int(token)
    except ValueError:
        return float(token)


def parse_edge_list(text: str) -> WeightedGraph:
    lines: List[List[str]] = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        lines.append(line.split())

    if not lines:
        raise ValueError("Empty edge list: missing '<nvertices> <nedges>' header.")

    header = lines[0]
    if len(header) != 2:
        raise ValueError(f"Bad header {' '.join(header)!r}: expected '<nvertices> <nedges>'.")
    nvertices, nedges = int(header[0]), int(header[1])

    body = lines[1:]
    if len(body) != nedges:
        raise ValueError(f"Header announces {nedges} edges, found {len(body)}.")

    g = WeightedGraph(nvertices)
    for parts in body:
        if len(parts) != 3:
            raise ValueError(f"Bad edge line {' '.join(parts)!r}: expected '<u> <v> <w>'.")
        g.add_edge(int(parts[0]), int(parts[1]), _parse_weight(parts[2]))
    return g


def read_edge_list(path: Union[str, Path]) -> WeightedGraph:
    return parse_edge_list(Path(path).read_text(encoding="utf-8"))


def format_edge_list(graph: WeightedGraph) -> str:
    out = [f"{graph.vertex_count} {len(graph.edges)}"]
    for e in graph.edges:
        out.append(f"{e.src} {e.dest} {e.weight}")
    return "\n".join(out) + "\n"


def write_edge_list(graph: WeightedGraph, path: Union[str, Path]) -> None:
    Path(path).write_text(format_edge_list(graph), encoding="utf-8")


# --- networkx bridge ---

def to_networkx(graph: WeightedGraph) -> nx.MultiGraph:
    """MultiGraph so that duplicate and reversed entries survive the trip."""
    g = nx.MultiGraph()
    g.add_nodes_from(range(graph.vertex_count))
    for e in graph.edges:
        g.add_edge(e.src, e.dest, weight=e.weight)
    return g


def from_networkx(g: nx.Graph, weight: str = "weight", default_weight: Any = 1) -> WeightedGraph:
    """
    Convert any networkx graph. Nodes are relabelled 0..n-1 in g.nodes order;
    edges missing the weight attribute get default_weight.
    """
    h = nx.convert_node_labels_to_integers(g, ordering="default")
    out = WeightedGraph(h.number_of_nodes())
    for u, v, data in h.edges(data=True):
        out.add_edge(int(u), int(v), data.get(weight, default_weight))
    return out
