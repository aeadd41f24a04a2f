# experiments/compare_solvers.py

"""Check the dynamic solver against the exhaustive oracle on random grids.

Outputs (under --out):
- config_merged.yaml, run.log
- results/summary.json       match rate and crane statistics
- results/mismatches.txt     offending grids, if any
- figures/example_*.png      a few grids with their dynamic-programming path
- reports/technical_report.md
"""

from __future__ import annotations

import argparse
import json

from cranes.utils.config_loader import merge_configs, save_config_snapshot, get_section
from cranes.utils.seed import SeedConfig, set_global_seed, get_torch_device
from cranes.utils.logger import build_logger

from cranes.grid.generator import GridConfig, generate_grids
from cranes.grid.text_format import format_grid
from cranes.evaluation.compare import compare_solvers
from cranes.reporting.artifact_registry import ArtifactPaths
from cranes.reporting.run_report import write_markdown_report
from cranes.solvers import solve_dynamic
from visualization.base_plot import PlotConfig
from visualization.path_plots import plot_grid_path


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--configs", nargs="+", default=["configs/base.yaml", "configs/grid.yaml"])
    ap.add_argument("--out", default="runs/compare_solvers")
    ap.add_argument("--num_grids", type=int, default=None, help="overrides compare.num_grids")
    args = ap.parse_args()

    cfg = merge_configs(args.configs)
    device = get_torch_device(cfg["device"]["prefer"])
    gen = set_global_seed(SeedConfig(value=cfg["seed"]["value"], deterministic=cfg["project"]["deterministic"]))
    logger = build_logger("cranes", cfg["logging"]["level"], f"{args.out}/run.log" if cfg["logging"]["log_to_file"] else None)

    paths = ArtifactPaths.make(args.out)
    save_config_snapshot(cfg, paths.root / "config_merged.yaml")

    gcfg = GridConfig(**cfg["grid"])
    n = args.num_grids if args.num_grids is not None else cfg["compare"]["num_grids"]
    grids = generate_grids(n, gcfg, device, generator=gen if device.type == "cpu" else None)  # generator lives on CPU
    logger.info(f"comparing solvers on {n} grids of size {gcfg.rows}x{gcfg.columns}")

    result = compare_solvers(grids)
    summary = result.summary()
    logger.info(f"match rate: {summary['match_rate']:.4f} ({len(result.mismatches)} mismatches)")

    with open(paths.results / "summary.json", "w", encoding="utf-8") as f:
        json.dump({"device": str(device), "grid": cfg["grid"], **summary}, f, indent=2)

    if result.mismatches:
        with open(paths.results / "mismatches.txt", "w", encoding="utf-8") as f:
            for i in result.mismatches:
                f.write(f"# grid {i}: exhaustive={int(result.exhaustive_cranes[i])} "
                        f"dynamic={int(result.dynamic_cranes[i])}\n")
                f.write(format_grid(grids[i]) + "\n")

    pcfg = PlotConfig(formats=tuple(cfg["plots"]["formats"]), dpi=cfg["plots"]["dpi"])
    for i, g in enumerate(grids[:get_section(cfg, "compare.render_examples", 0)]):
        plot_grid_path(g, solve_dynamic(g), paths.figures, name=f"example_{i}", cfg=pcfg)

    report = write_markdown_report(args.out, "Exhaustive vs dynamic programming", summary)
    logger.info(f"report written to {report}")


if __name__ == "__main__":
    main()
