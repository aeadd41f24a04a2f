from __future__ import annotations

from pathlib import Path as FsPath
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns

from cranes.grid.types import CellKind, Grid, Path
from cranes.solvers.dynamic import Table
from visualization.base_plot import PlotConfig, setup_theme, cell_colormap, save_figure


def plot_grid_path(grid: Grid,
                   path: Optional[Path],
                   out_dir: str | FsPath,
                   name: str = "grid_path",
                   cfg: PlotConfig = PlotConfig(),
                   title: Optional[str] = None) -> list:
    """Draw the grid cells and, if given, the path as a polyline through cell centres."""
    setup_theme(cfg)
    cells = grid.as_tensor().numpy().astype(np.int64)

    fig = plt.figure(figsize=(0.6 * grid.columns() + 1.5, 0.6 * grid.rows() + 1.0))
    ax = fig.add_subplot(111)
    ax.imshow(cells, cmap=cell_colormap(cfg), vmin=0, vmax=len(CellKind) - 1)
    ax.set_xticks(np.arange(-0.5, grid.columns(), 1), minor=True)
    ax.set_yticks(np.arange(-0.5, grid.rows(), 1), minor=True)
    ax.grid(which="minor", color="white", linewidth=1.0)
    ax.tick_params(which="both", length=0)

    if path is not None:
        coords = np.array(path.cells())
        ax.plot(coords[:, 1], coords[:, 0], color=cfg.path_color, linewidth=2.5, marker="o")
        if title is None:
            title = f"{len(path)} steps, {path.total_cranes()} cranes"
    if title:
        ax.set_title(title)

    written = save_figure(fig, out_dir, name, cfg)
    plt.close(fig)
    return written


def plot_dp_table(grid: Grid,
                  table: Table,
                  out_dir: str | FsPath,
                  name: str = "dp_table",
                  cfg: PlotConfig = PlotConfig()) -> list:
    """Heatmap of the best crane count reaching each cell (blank = unreachable)."""
    setup_theme(cfg)
    scores = np.full((grid.rows(), grid.columns()), np.nan)
    for r, row in enumerate(table):
        for c, p in enumerate(row):
            if p is not None:
                scores[r, c] = p.total_cranes()

    fig = plt.figure()
    ax = fig.add_subplot(111)
    sns.heatmap(scores, annot=True, fmt=".0f", cmap="YlOrBr", cbar=True, ax=ax,
                linewidths=0.5, mask=np.isnan(scores))
    ax.set_xlabel("column")
    ax.set_ylabel("row")
    ax.set_title("Best cranes reaching each cell")
    written = save_figure(fig, out_dir, name, cfg)
    plt.close(fig)
    return written
