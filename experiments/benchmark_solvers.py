# experiments/benchmark_solvers.py

"""Benchmark solver runtime vs grid size.

Outputs:
- runs/benchmark_solvers/results/latency.json
- runs/benchmark_solvers/figures/runtime_vs_size.png
- runs/benchmark_solvers/reports/technical_report.md
"""

from __future__ import annotations

import argparse
import json

from cranes.utils.config_loader import merge_configs, save_config_snapshot
from cranes.utils.seed import SeedConfig, set_global_seed
from cranes.utils.logger import build_logger

from cranes.evaluation.benchmark import BenchmarkConfig, benchmark_solvers
from cranes.reporting.artifact_registry import ArtifactPaths
from cranes.reporting.run_report import write_markdown_report
from visualization.base_plot import PlotConfig
from visualization.runtime_plots import plot_runtime_vs_size


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--configs", nargs="+", default=["configs/base.yaml", "configs/benchmark.yaml"])
    ap.add_argument("--out", default="runs/benchmark_solvers")
    args = ap.parse_args()

    cfg = merge_configs(args.configs)
    gen = set_global_seed(SeedConfig(value=cfg["seed"]["value"], deterministic=cfg["project"]["deterministic"]))
    logger = build_logger("cranes", cfg["logging"]["level"], f"{args.out}/run.log" if cfg["logging"]["log_to_file"] else None)

    paths = ArtifactPaths.make(args.out)
    save_config_snapshot(cfg, paths.root / "config_merged.yaml")

    b = cfg["benchmark"]
    sizes = [tuple(s) for s in b["grid_sizes"]]
    bcfg = BenchmarkConfig(warmup_iters=b["warmup_iters"],
                           measure_iters=b["measure_iters"],
                           exhaustive_max_steps=b["exhaustive_max_steps"],
                           building_prob=b["building_prob"],
                           crane_prob=b["crane_prob"])

    timings = benchmark_solvers(sizes, methods=b["methods"], cfg=bcfg, generator=gen)
    for method, per_size in timings.items():
        for size, ms in per_size.items():
            logger.info(f"{method:>10s} {size:>7s}: {ms:.3f} ms")

    with open(paths.results / "latency.json", "w", encoding="utf-8") as f:
        json.dump({"latency_ms": timings}, f, indent=2)

    pcfg = PlotConfig(formats=tuple(cfg["plots"]["formats"]), dpi=cfg["plots"]["dpi"])
    plot_runtime_vs_size(timings, paths.figures, cfg=pcfg)

    write_markdown_report(args.out, "Solver runtime benchmark",
                          {"grid_sizes": len(sizes), "methods": ", ".join(b["methods"])},
                          timings_ms=timings)
    logger.info(f"saved latency.json under {paths.results}")


if __name__ == "__main__":
    main()
