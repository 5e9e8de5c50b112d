# mstsuite/analysis/checks.py
from __future__ import annotations

import itertools
from typing import Optional, Sequence

import networkx as nx

from mstsuite.core.graph import Edge, Weight, WeightedGraph, tree_weight
from mstsuite.core.graph_io import to_networkx
from mstsuite.core.kruskal import is_spanning
from mstsuite.core.unionfind import UnionFindInt


def is_acyclic(edges: Sequence[Edge], vertex_count: int) -> bool:
    uf = UnionFindInt(vertex_count)
    return all(uf.union(e.src, e.dest) for e in edges)


def is_spanning_tree(edges: Sequence[Edge], vertex_count: int) -> bool:
    """n-1 edges, no cycle, hence connected over all vertices."""
    if not is_spanning(WeightedGraph(vertex_count), edges):
        return False
    return is_acyclic(edges, vertex_count)


def brute_force_mst_weight(graph: WeightedGraph, max_edges: int = 20) -> Optional[Weight]:
    """
    Exhaustive minimum over all (n-1)-edge subsets that form a spanning tree.
    Only meant for tiny graphs; returns None if the graph is disconnected.
    """
    if len(graph.edges) > max_edges:
        raise ValueError(f"brute force refused: {len(graph.edges)} edges > max_edges={max_edges}.")
    k = max(0, graph.vertex_count - 1)
    best: Optional[Weight] = None
    for subset in itertools.combinations(graph.edges, k):
        if not is_spanning_tree(subset, graph.vertex_count):
            continue
        w = tree_weight(subset)
        if best is None or w < best:
            best = w
    return best


def networkx_mst_weight(graph: WeightedGraph) -> Weight:
    """Kruskal weight from networkx, used as an independent reference."""
    t = nx.minimum_spanning_tree(to_networkx(graph), weight="weight", algorithm="kruskal")
    return t.size(weight="weight")
