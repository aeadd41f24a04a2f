# cranes/evaluation/benchmark.py

"""Solver runtime benchmark.

Reports mean wall-clock milliseconds per solve for each (method, grid size),
averaged over `measure_iters` freshly sampled grids after `warmup_iters`
untimed solves. The exhaustive solver is skipped above `exhaustive_max_steps`.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

import torch

from cranes.grid.generator import GridConfig, generate_grids
from cranes.solvers import SOLVERS


@dataclass(frozen=True)
class BenchmarkConfig:
    warmup_iters: int = 1
    measure_iters: int = 5
    exhaustive_max_steps: int = 16
    building_prob: float = 0.15
    crane_prob: float = 0.25


def benchmark_solvers(grid_sizes: Sequence[Tuple[int, int]],
                      methods: Sequence[str] = ("exhaustive", "dynamic"),
                      cfg: BenchmarkConfig = BenchmarkConfig(),
                      generator: Optional[torch.Generator] = None) -> Dict[str, Dict[str, float]]:
    """Return {method: {"RxC": mean_ms}}."""
    for m in methods:
        if m not in SOLVERS:
            raise ValueError(f"Unknown solver: {m}")

    results_ms: Dict[str, Dict[str, float]] = {m: {} for m in methods}
    for rows, columns in grid_sizes:
        gcfg = GridConfig(rows=rows, columns=columns,
                          building_prob=cfg.building_prob, crane_prob=cfg.crane_prob)
        grids = generate_grids(cfg.warmup_iters + cfg.measure_iters, gcfg, generator=generator)
        warm, timed = grids[:cfg.warmup_iters], grids[cfg.warmup_iters:]
        key = f"{rows}x{columns}"

        for m in methods:
            if m == "exhaustive" and rows + columns - 2 > cfg.exhaustive_max_steps:
                continue
            solver = SOLVERS[m]
            for g in warm:
                solver(g)

            t0 = time.perf_counter()
            for g in timed:
                solver(g)
            t1 = time.perf_counter()
            results_ms[m][key] = (t1 - t0) * 1000.0 / max(len(timed), 1)

    return results_ms
