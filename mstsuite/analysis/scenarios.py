# mstsuite/analysis/scenarios.py
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from mstsuite.core.graph import Edge, Weight, WeightedGraph, tree_weight
from mstsuite.core.partition import ComponentMap, find_components
from mstsuite.core.replacement import find_replacement_edge, replace_edge


@dataclass
class RemovalScenario:
    removed: Edge
    components: ComponentMap
    replacement: Optional[Edge]
    old_weight: Weight
    new_tree: Optional[List[Edge]] = None

    @property
    def new_weight(self) -> Optional[Weight]:
        if self.new_tree is None:
            return None
        return tree_weight(self.new_tree)

    @property
    def delta(self) -> Optional[Weight]:
        if self.replacement is None:
            return None
        return self.replacement.weight - self.removed.weight

    @property
    def is_bridge(self) -> bool:
        return self.replacement is None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "removed": str(self.removed),
            "components": [sorted(c) for c in self.components.values()],
            "replacement": str(self.replacement) if self.replacement is not None else None,
            "old_weight": self.old_weight,
            "new_weight": self.new_weight,
            "delta": self.delta,
        }


def simulate_removal(
    graph: WeightedGraph,
    tree: Sequence[Edge],
    removed: Edge,
    undirected: bool = False,
    exclude_removed: bool = False,
) -> RemovalScenario:
    """
    One removal-and-replacement cycle against an untouched tree.

    InvalidPartitionError from the partition step is not caught here.
    """
    components = find_components(tree, graph.vertex_count, removed, undirected=undirected)
    replacement = find_replacement_edge(
        graph, tree, removed, components,
        undirected=undirected, exclude_removed=exclude_removed,
    )
    new_tree = (
        replace_edge(tree, removed, replacement, undirected=undirected)
        if replacement is not None else None
    )
    return RemovalScenario(
        removed=removed,
        components=components,
        replacement=replacement,
        old_weight=tree_weight(tree),
        new_tree=new_tree,
    )


def run_all_removals(
    graph: WeightedGraph,
    tree: Sequence[Edge],
    undirected: bool = False,
    exclude_removed: bool = False,
    max_workers: Optional[int] = None,
) -> List[RemovalScenario]:
    """
    Evaluate the removal of every tree edge, each independently of the others.

    With max_workers > 1 the scenarios run on a thread pool; they only read
    graph and tree, and results come back in tree order either way.
    """
    tree = list(tree)

    def one(edge: Edge) -> RemovalScenario:
        return simulate_removal(graph, tree, edge, undirected=undirected, exclude_removed=exclude_removed)

    if max_workers is None or max_workers <= 1:
        return [one(e) for e in tree]

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(one, tree))


def summarize_scenarios(scenarios: Sequence[RemovalScenario]) -> Dict[str, Any]:
    deltas = [s.delta for s in scenarios if s.delta is not None]
    return {
        "n_scenarios": len(scenarios),
        "n_replaced": len(deltas),
        "n_bridges": sum(1 for s in scenarios if s.is_bridge),
        "bridges": [str(s.removed) for s in scenarios if s.is_bridge],
        "mean_delta": sum(deltas) / len(deltas) if deltas else None,
        "max_delta": max(deltas) if deltas else None,
    }
