# visualization/base_plot.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import matplotlib.pyplot as plt
import seaborn as sns
from matplotlib.colors import ListedColormap

from cranes.grid.types import CellKind


@dataclass(frozen=True)
class PlotConfig:
    formats: tuple = ("png",)
    dpi: int = 150
    seaborn_theme: str = "white"
    cell_colors: tuple = ("#f4f1ea", "#4a4a4a", "#e0a526")  # EMPTY, BUILDING, CRANE
    path_color: str = "#1f5fa8"


def setup_theme(cfg: PlotConfig) -> None:
    sns.set_theme(style=cfg.seaborn_theme)


def cell_colormap(cfg: PlotConfig) -> ListedColormap:
    """Colormap indexed by CellKind value."""
    assert len(cfg.cell_colors) == len(CellKind)
    return ListedColormap(list(cfg.cell_colors))


def ensure_dir(path: str | Path) -> Path:
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def save_figure(fig: plt.Figure, out_dir: str | Path, name: str, cfg: PlotConfig) -> list:
    out = ensure_dir(out_dir)
    written = []
    for fmt in cfg.formats:
        p = out / f"{name}.{fmt}"
        fig.savefig(p, dpi=cfg.dpi, bbox_inches="tight")
        written.append(p)
    return written
