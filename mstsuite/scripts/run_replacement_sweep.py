# mstsuite/scripts/run_replacement_sweep.py
from __future__ import annotations

import json
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import matplotlib.pyplot as plt

from mstsuite.analysis.checks import is_spanning_tree, networkx_mst_weight
from mstsuite.analysis.ensembles import random_weighted_graph
from mstsuite.analysis.scenarios import run_all_removals, summarize_scenarios
from mstsuite.core.graph import tree_weight
from mstsuite.core.kruskal import kruskal_mst


@dataclass
class SweepConfig:
    """
    Random-graph sweep over every single-edge MST removal.

    Compatibility:
      - accepts seed as alias for random_seed
    """
    n_vertices: int = 30
    edge_prob: float = 0.15
    min_weight: int = 1
    max_weight: int = 100
    n_graphs: int = 20

    # store (v, u, w) next to every (u, v, w)
    both_directions: bool = False
    exclude_removed: bool = True
    max_workers: Optional[int] = None

    random_seed: int = 0
    seed: Optional[int] = None  # alias

    out_dir: str = "results/replacement_sweep"
    plot: bool = True

    def __post_init__(self) -> None:
        if self.seed is not None:
            self.random_seed = int(self.seed)
        if self.n_vertices < 2:
            raise ValueError("n_vertices must be >= 2.")
        if not (0.0 <= self.edge_prob <= 1.0):
            raise ValueError("edge_prob must be in [0,1].")
        if self.min_weight > self.max_weight:
            raise ValueError("min_weight must be <= max_weight.")
        if self.n_graphs <= 0:
            raise ValueError("n_graphs must be >= 1.")


def run_sweep(cfg: SweepConfig) -> Dict[str, Any]:
    rows: List[Dict[str, Any]] = []
    deltas: List[float] = []

    for s in range(cfg.n_graphs):
        seed = cfg.random_seed + s
        g = random_weighted_graph(
            cfg.n_vertices, cfg.edge_prob,
            min_weight=cfg.min_weight, max_weight=cfg.max_weight,
            seed=seed, connected=True, both_directions=cfg.both_directions,
        )
        mst = kruskal_mst(g)
        if not is_spanning_tree(mst, g.vertex_count):
            continue

        scenarios = run_all_removals(
            g, mst, exclude_removed=cfg.exclude_removed, max_workers=cfg.max_workers,
        )
        deltas.extend(float(sc.delta) for sc in scenarios if sc.delta is not None)

        row = {
            "seed": seed,
            "n_edges": len(g.edges),
            "mst_weight": tree_weight(mst),
            "reference_weight": networkx_mst_weight(g),
        }
        row.update(summarize_scenarios(scenarios))
        rows.append(row)

    return {
        "config": asdict(cfg),
        "rows": rows,
        "n_mismatched_weights": sum(1 for r in rows if r["mst_weight"] != r["reference_weight"]),
        "total_bridges": sum(r["n_bridges"] for r in rows),
        "deltas": deltas,
    }


def main() -> None:
    cfg = SweepConfig()
    outdir = Path(cfg.out_dir)
    outdir.mkdir(parents=True, exist_ok=True)
    stamp = time.strftime("%Y%m%d_%H%M%S")

    out = run_sweep(cfg)

    json_path = outdir / f"sweep_{stamp}.json"
    json_path.write_text(json.dumps(out, indent=2), encoding="utf-8")

    if cfg.plot and out["deltas"]:
        plt.figure()
        plt.hist(out["deltas"], bins=20)
        plt.title("MST weight increase after single-edge removal")
        plt.xlabel("w(replacement) - w(removed)")
        plt.ylabel("count")
        plt.tight_layout()
        plt.savefig(outdir / f"delta_hist_{stamp}.png", dpi=160)

    summary = {k: v for k, v in out.items() if k != "deltas"}
    print(json.dumps(summary, indent=2))
    print("Saved:", str(json_path))


if __name__ == "__main__":
    main()
