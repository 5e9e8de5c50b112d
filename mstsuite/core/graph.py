# mstsuite/core/graph.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple, Union

Vertex = int
Weight = Union[int, float]


@dataclass(frozen=True)
class Edge:
    """
    Weighted edge between two vertex indices.

    Equality and hashing use the exact (src, dest, weight) triple, so (a, b, w)
    and (b, a, w) are *different* edges here even though the graph is treated
    as undirected. Use canonical() when direction should not matter.
    """
    src: Vertex
    dest: Vertex
    weight: Weight

    def canonical(self) -> "Edge":
        if self.src <= self.dest:
            return self
        return Edge(self.dest, self.src, self.weight)

    def __str__(self) -> str:
        return f"({self.src}-{self.dest}: {self.weight})"


@dataclass
class WeightedGraph:
    """
    Undirected weighted graph on vertices 0..vertex_count-1, stored as an
    ordered edge list.

    Both directions of an edge and exact duplicates are kept as separate
    entries; the order of the list decides tie-breaks downstream.
    """
    vertex_count: int
    edges: List[Edge] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.vertex_count < 0:
            raise ValueError("vertex_count must be >= 0.")
        for e in self.edges:
            self._check_vertex(e.src)
            self._check_vertex(e.dest)

    def _check_vertex(self, v: Vertex) -> None:
        if not (0 <= v < self.vertex_count):
            raise ValueError(f"Vertex {v!r} out of range [0, {self.vertex_count}).")

    # --- basic construction ---

    def add_edge(self, src: Vertex, dest: Vertex, weight: Weight) -> Edge:
        self._check_vertex(src)
        self._check_vertex(dest)
        e = Edge(src, dest, weight)
        self.edges.append(e)
        return e

    def add_undirected_edge(self, u: Vertex, v: Vertex, weight: Weight) -> Tuple[Edge, Edge]:
        """Store both (u, v, w) and (v, u, w)."""
        return self.add_edge(u, v, weight), self.add_edge(v, u, weight)

    @classmethod
    def from_triples(cls, vertex_count: int, triples: Iterable[Tuple[Vertex, Vertex, Weight]]) -> "WeightedGraph":
        g = cls(vertex_count)
        for u, v, w in triples:
            g.add_edge(u, v, w)
        return g


def tree_weight(edges: Iterable[Edge]) -> Weight:
    return sum(e.weight for e in edges)
