# mstsuite/core/replacement.py
from __future__ import annotations

from typing import List, Optional, Sequence, Set

from mstsuite.core.graph import Edge, WeightedGraph
from mstsuite.core.partition import ComponentMap, InvalidPartitionError, edge_key


def crossing_edges(
    graph: WeightedGraph,
    tree: Sequence[Edge],
    removed: Edge,
    components: ComponentMap,
    undirected: bool = False,
    exclude_removed: bool = False,
) -> List[Edge]:
    """
    All candidate edges reconnecting the two components, in graph order.

    An edge is skipped when it is still an active tree edge, i.e. it is in
    `tree` and is not `removed` itself. The removed edge therefore competes as
    its own replacement unless exclude_removed=True. A candidate must have one
    endpoint in each component.
    """
    if len(components) != 2:
        raise InvalidPartitionError(
            f"Expected exactly 2 components, got {len(components)}.",
            removed=removed,
            n_components=len(components),
        )

    groups = list(components.values())
    side_a: Set[int] = set(groups[0])
    side_b: Set[int] = set(groups[1])

    removed_key = edge_key(removed, undirected)
    active: Set[Edge] = {edge_key(e, undirected) for e in tree}
    if not exclude_removed:
        active.discard(removed_key)

    out: List[Edge] = []
    for e in graph.edges:
        k = edge_key(e, undirected)
        if k in active or (exclude_removed and k == removed_key):
            continue
        if (e.src in side_a and e.dest in side_b) or (e.src in side_b and e.dest in side_a):
            out.append(e)
    return out


def find_replacement_edge(
    graph: WeightedGraph,
    tree: Sequence[Edge],
    removed: Edge,
    components: ComponentMap,
    undirected: bool = False,
    exclude_removed: bool = False,
) -> Optional[Edge]:
    """
    Minimum-weight edge reconnecting the two components, or None.

    Ties go to the edge that appears first in graph.edges. None means no graph
    edge crosses the cut (the removed edge was a bridge).
    """
    best: Optional[Edge] = None
    for e in crossing_edges(graph, tree, removed, components, undirected, exclude_removed):
        if best is None or e.weight < best.weight:
            best = e
    return best


def replace_edge(
    tree: Sequence[Edge],
    removed: Edge,
    replacement: Edge,
    undirected: bool = False,
) -> List[Edge]:
    """
    Copy of `tree` with the first edge matching `removed` swapped out.

    Matching follows the same equality as find_components: exact triples, or
    canonical form when undirected=True.
    """
    key = edge_key(removed, undirected)
    for i, e in enumerate(tree):
        if edge_key(e, undirected) == key:
            break
    else:
        raise InvalidPartitionError(
            f"Edge {removed} is not in the spanning tree.",
            removed=removed,
            n_components=None,
        )

    new_tree = list(tree)
    del new_tree[i]
    new_tree.append(replacement)
    return new_tree
