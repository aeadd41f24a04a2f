# experiments/render_path.py

"""Solve a grid read from a text file and render the result.

Grid file format: one line per row, '.' empty, 'X' building, 'C' crane.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from cranes.utils.logger import build_logger
from cranes.grid.text_format import parse_grid, format_path
from cranes.solvers import SOLVERS, solve, build_table
from visualization.path_plots import plot_grid_path, plot_dp_table


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--grid", required=True, help="path to a grid text file")
    ap.add_argument("--method", choices=sorted(SOLVERS), default="dynamic")
    ap.add_argument("--out", default="runs/render_path")
    ap.add_argument("--log_level", default="INFO")
    args = ap.parse_args()

    logger = build_logger("cranes", args.log_level)
    grid = parse_grid(Path(args.grid).read_text(encoding="utf-8"))
    logger.info(f"loaded {grid!r}")

    path = solve(grid, args.method)
    logger.info(f"{args.method}: {path!r}")
    print(format_path(path), end="")

    plot_grid_path(grid, path, args.out, name=f"{args.method}_path")
    if args.method == "dynamic":
        plot_dp_table(grid, build_table(grid), args.out)


if __name__ == "__main__":
    main()
