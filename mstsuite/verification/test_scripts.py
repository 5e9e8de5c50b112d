import pytest

from mstsuite.core.graph_io import write_edge_list
from mstsuite.core.graph import WeightedGraph
from mstsuite.scripts.run_edge_removal_demo import build_report
from mstsuite.scripts.run_replacement_sweep import SweepConfig, run_sweep


def test_demo_report_on_builtin_sample():
    report = build_report()

    assert report["connected"]
    assert report["mst_weight"] == 14
    assert report["removal"]["removed"] == "(2-3: 3)"
    assert report["removal"]["replacement"] == "(2-3: 3)"
    assert len(report["all_removals"]) == 5
    assert report["summary"]["n_bridges"] == 0


def test_demo_report_stops_at_a_forest(tmp_path):
    path = tmp_path / "forest.txt"
    write_edge_list(WeightedGraph.from_triples(4, [(0, 1, 1), (2, 3, 1)]), path)

    report = build_report(str(path))
    assert not report["connected"]
    assert "removal" not in report


def test_small_sweep_agrees_with_networkx():
    """
    Every sweep graph gets the networkx MST weight, and no replacement is
    cheaper than the edge it replaces.
    """
    cfg = SweepConfig(n_vertices=12, edge_prob=0.3, n_graphs=3, seed=7, plot=False)
    assert cfg.random_seed == 7

    out = run_sweep(cfg)
    assert len(out["rows"]) == 3
    assert out["n_mismatched_weights"] == 0
    assert all(d >= 0 for d in out["deltas"])


def test_sweep_config_validation():
    with pytest.raises(ValueError):
        SweepConfig(edge_prob=1.5)
    with pytest.raises(ValueError):
        SweepConfig(min_weight=10, max_weight=1)
    with pytest.raises(ValueError):
        SweepConfig(n_graphs=0)
