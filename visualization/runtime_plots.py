from __future__ import annotations

from pathlib import Path
from typing import Dict

import matplotlib.pyplot as plt

from visualization.base_plot import PlotConfig, setup_theme, save_figure


def plot_runtime_vs_size(timings_ms: Dict[str, Dict[str, float]],
                         out_dir: str | Path,
                         cfg: PlotConfig = PlotConfig(),
                         title: str = "Solver runtime vs grid size") -> list:
    """One curve per solver; x axis is max_steps (rows + columns - 2)."""
    setup_theme(cfg)
    fig = plt.figure()
    ax = fig.add_subplot(111)
    for method, per_size in timings_ms.items():
        pts = []
        for size, ms in per_size.items():
            rows, columns = (int(x) for x in size.split("x"))
            pts.append((rows + columns - 2, ms))
        pts.sort()
        if not pts:
            continue
        ax.plot([p[0] for p in pts], [p[1] for p in pts], marker="o", label=method)
    ax.set_xlabel("max steps (rows + columns - 2)")
    ax.set_ylabel("ms per grid")
    ax.set_yscale("log")
    ax.set_title(title)
    ax.grid(True, which="both")
    ax.legend()
    written = save_figure(fig, out_dir, "runtime_vs_size", cfg)
    plt.close(fig)
    return written
