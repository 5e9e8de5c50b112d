# mstsuite/core/partition.py
from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from mstsuite.core.graph import Edge
from mstsuite.core.unionfind import UnionFindInt

ComponentMap = Dict[int, List[int]]


class InvalidPartitionError(ValueError):
    """
    Removing an edge from a tree did not leave exactly two components.

    Raised when the removed edge is not part of the tree, when the tree was a
    forest to begin with, or when a component map of the wrong size is handed
    to the replacement search.
    """

    def __init__(self, message: str, removed: Optional[Edge] = None, n_components: Optional[int] = None):
        super().__init__(message)
        self.removed = removed
        self.n_components = n_components


def edge_key(edge: Edge, undirected: bool = False) -> Edge:
    return edge.canonical() if undirected else edge


def find_components(
    tree: Sequence[Edge],
    vertex_count: int,
    removed: Edge,
    undirected: bool = False,
) -> ComponentMap:
    """
    Components of `tree` minus `removed`, as root -> member vertices.

    Every tree edge equal to `removed` is left out of the union pass. Equality
    is the exact (src, dest, weight) triple unless undirected=True, in which
    case both sides are compared in canonical (min, max, weight) form.
    """
    key = edge_key(removed, undirected)
    remaining = [e for e in tree if edge_key(e, undirected) != key]
    if len(remaining) == len(tree):
        raise InvalidPartitionError(
            f"Edge {removed} is not in the spanning tree.",
            removed=removed,
            n_components=None,
        )

    uf = UnionFindInt(vertex_count)
    for e in remaining:
        uf.union(e.src, e.dest)

    components = uf.groups()
    if len(components) != 2:
        raise InvalidPartitionError(
            f"Removing {removed} left {len(components)} components, expected 2.",
            removed=removed,
            n_components=len(components),
        )
    return components
