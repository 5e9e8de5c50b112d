# mstsuite/core/kruskal.py
from __future__ import annotations

from typing import List, Sequence

from mstsuite.core.graph import Edge, WeightedGraph
from mstsuite.core.unionfind import UnionFindInt


def kruskal_mst(graph: WeightedGraph) -> List[Edge]:
    """
    Kruskal's algorithm over the full edge list.

    Edges are sorted by weight with a stable sort, so equal-weight edges keep
    their input order and the result is deterministic for a fixed edge list.
    A disconnected graph yields a spanning forest (fewer than n-1 edges).
    """
    uf = UnionFindInt(graph.vertex_count)
    mst: List[Edge] = []
    for edge in sorted(graph.edges, key=lambda e: e.weight):
        if uf.union(edge.src, edge.dest):
            mst.append(edge)
    return mst


def is_spanning(graph: WeightedGraph, tree: Sequence[Edge]) -> bool:
    """
    True iff `tree` has the n-1 edges a spanning tree of `graph` needs.

    For a Kruskal result this means the input was connected.
    """
    return len(tree) == max(0, graph.vertex_count - 1)
