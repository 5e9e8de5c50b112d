# mstsuite/analysis/ensembles.py
from __future__ import annotations

from typing import List, Tuple
import random

from mstsuite.core.graph import WeightedGraph


def sample_graph() -> WeightedGraph:
    """
    The 6-vertex demonstration graph, every edge stored in both directions.
    """
    g = WeightedGraph(6)
    for u, v, w in [
        (0, 1, 4), (0, 2, 4), (1, 2, 2), (1, 0, 4), (2, 0, 4),
        (2, 1, 2), (2, 3, 3), (2, 5, 2), (2, 4, 4), (3, 2, 3),
        (3, 4, 3), (4, 2, 4), (4, 3, 3), (5, 2, 2), (5, 4, 3),
    ]:
        g.add_edge(u, v, w)
    return g


def random_weighted_graph(
    n: int,
    edge_prob: float,
    min_weight: int = 1,
    max_weight: int = 100,
    seed: int = 0,
    connected: bool = True,
    both_directions: bool = False,
) -> WeightedGraph:
    """
    Erdos-Renyi style graph with integer weights in [min_weight, max_weight].

    connected=True first lays a random spanning backbone (each vertex i > 0
    linked to a random earlier vertex), so the result is always connected.
    both_directions=True stores every edge as (u, v, w) followed by (v, u, w).
    """
    if n < 0:
        raise ValueError("n must be >= 0.")
    if not (0.0 <= edge_prob <= 1.0):
        raise ValueError("edge_prob must be in [0,1].")
    if min_weight > max_weight:
        raise ValueError("min_weight must be <= max_weight.")

    rng = random.Random(seed)
    pairs: List[Tuple[int, int]] = []
    seen = set()

    if connected:
        order = list(range(n))
        rng.shuffle(order)
        for i in range(1, n):
            u, v = order[rng.randrange(i)], order[i]
            key = (min(u, v), max(u, v))
            seen.add(key)
            pairs.append(key)

    for i in range(n):
        for j in range(i + 1, n):
            if (i, j) in seen:
                continue
            if rng.random() < edge_prob:
                seen.add((i, j))
                pairs.append((i, j))

    g = WeightedGraph(n)
    for u, v in pairs:
        w = rng.randint(min_weight, max_weight)
        if both_directions:
            g.add_undirected_edge(u, v, w)
        else:
            g.add_edge(u, v, w)
    return g
