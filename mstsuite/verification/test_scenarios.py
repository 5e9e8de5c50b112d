from mstsuite.analysis.ensembles import random_weighted_graph, sample_graph
from mstsuite.analysis.scenarios import run_all_removals, simulate_removal, summarize_scenarios
from mstsuite.core.graph import Edge, WeightedGraph
from mstsuite.core.kruskal import kruskal_mst


def test_simulate_removal_on_sample_graph():
    g = sample_graph()
    mst = kruskal_mst(g)

    sc = simulate_removal(g, mst, mst[2], undirected=True, exclude_removed=True)
    assert sc.removed == Edge(2, 3, 3)
    assert sc.replacement == Edge(5, 4, 3)
    assert sc.old_weight == 14
    assert sc.new_weight == 14
    assert sc.delta == 0
    assert Edge(2, 3, 3) not in sc.new_tree
    # the original tree is untouched
    assert mst[2] == Edge(2, 3, 3) and len(mst) == 5

    d = sc.as_dict()
    assert sorted(d["components"]) == [[0, 1, 2, 5], [3, 4]]
    assert d["replacement"] == "(5-4: 3)"


def test_all_removals_in_default_mode_replace_with_equal_weight():
    g = sample_graph()
    mst = kruskal_mst(g)
    scenarios = run_all_removals(g, mst)

    assert [s.removed for s in scenarios] == mst
    assert all(s.replacement == s.removed for s in scenarios)
    assert all(s.new_weight == 14 for s in scenarios)


def test_bridges_are_reported_not_raised():
    # 0 hangs off the triangle 1-2-3 by a single edge
    g = WeightedGraph.from_triples(4, [(0, 1, 1), (1, 2, 1), (2, 3, 2), (1, 3, 3)])
    mst = kruskal_mst(g)
    scenarios = run_all_removals(g, mst, exclude_removed=True)

    by_edge = {s.removed: s for s in scenarios}
    assert by_edge[Edge(0, 1, 1)].is_bridge
    assert by_edge[Edge(0, 1, 1)].new_weight is None
    assert by_edge[Edge(1, 2, 1)].replacement == Edge(1, 3, 3)
    assert by_edge[Edge(2, 3, 2)].replacement == Edge(1, 3, 3)

    summary = summarize_scenarios(scenarios)
    assert summary["n_scenarios"] == 3
    assert summary["n_bridges"] == 1
    assert summary["bridges"] == ["(0-1: 1)"]
    assert summary["n_replaced"] == 2
    assert summary["mean_delta"] == (2 + 1) / 2
    assert summary["max_delta"] == 2


def test_thread_pool_gives_same_results_in_tree_order():
    """Scenarios share only read-only inputs, so pooling changes nothing."""
    g = random_weighted_graph(25, 0.2, seed=3)
    mst = kruskal_mst(g)

    serial = run_all_removals(g, mst, exclude_removed=True)
    pooled = run_all_removals(g, mst, exclude_removed=True, max_workers=4)

    assert [s.as_dict() for s in serial] == [s.as_dict() for s in pooled]


def test_reversed_removed_edge_in_undirected_mode():
    """
    (3, 2, 3) names the tree edge (2, 3, 3) backwards; undirected mode must
    drop that tree edge from the new tree rather than fail to find it.
    """
    g = sample_graph()
    mst = kruskal_mst(g)

    sc = simulate_removal(g, mst, Edge(3, 2, 3), undirected=True, exclude_removed=True)
    assert sorted(sorted(c) for c in sc.components.values()) == [[0, 1, 2, 5], [3, 4]]
    assert sc.replacement == Edge(5, 4, 3)
    assert Edge(2, 3, 3) not in sc.new_tree
    assert len(sc.new_tree) == len(mst)
    assert sc.new_weight == 14
