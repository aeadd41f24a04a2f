# cranes/solvers/__init__.py

"""Crane unloading solvers (exhaustive reference, dynamic programming)."""

from __future__ import annotations

from typing import Callable, Dict

from cranes.grid.types import Grid, Path

from .exhaustive import solve_exhaustive
from .dynamic import solve_dynamic, build_table


SOLVERS: Dict[str, Callable[[Grid], Path]] = {
    "exhaustive": solve_exhaustive,
    "dynamic": solve_dynamic,
}


def solve(grid: Grid, method: str = "dynamic") -> Path:
    """Dispatch to a solver by name."""
    method = method.lower()
    if method not in SOLVERS:
        raise ValueError(f"Unknown solver: {method}")
    return SOLVERS[method](grid)
