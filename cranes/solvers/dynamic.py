# cranes/solvers/dynamic.py

"""Dynamic-programming crane unloading search.

A[r][c] holds the best path ending at (r, c), or None when no path reaches it.
Cells are filled row-major, so the cell above and the cell to the left are
final before (r, c) is visited.

When both predecessors exist the one with strictly more cranes is extended
(ties go to the left neighbour). If that extension is not a valid step the
cell stays empty; the other neighbour is not tried.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from cranes.grid.types import CellKind, Grid, Path, StepDirection

logger = logging.getLogger(__name__)

Table = List[List[Optional[Path]]]


def _extend(pred: Path, direction: StepDirection) -> Optional[Path]:
    if not pred.is_step_valid(direction):
        return None
    out = pred.copy()
    out.add_step(direction)
    return out


def build_table(grid: Grid) -> Table:
    """Fill the DP table for `grid`."""
    assert grid.rows() > 0, "grid must have rows"
    assert grid.columns() > 0, "grid must have columns"

    A: Table = [[None] * grid.columns() for _ in range(grid.rows())]
    A[0][0] = Path(grid)

    for r in range(grid.rows()):
        for c in range(grid.columns()):
            if grid.get(r, c) == CellKind.BUILDING:
                A[r][c] = None
                continue

            from_above = A[r - 1][c] if r > 0 else None
            from_left = A[r][c - 1] if c > 0 else None

            if from_above is not None and from_left is not None:
                if from_above.total_cranes() > from_left.total_cranes():
                    A[r][c] = _extend(from_above, StepDirection.SOUTH)
                else:
                    A[r][c] = _extend(from_left, StepDirection.EAST)
            elif from_left is not None:
                A[r][c] = _extend(from_left, StepDirection.EAST)
            elif from_above is not None:
                A[r][c] = _extend(from_above, StepDirection.SOUTH)

    return A


def best_in_table(A: Table) -> Path:
    """First path (row-major) with the highest crane count."""
    best: Optional[Path] = None
    for row in A:
        for cell in row:
            if cell is not None and (best is None or cell.total_cranes() > best.total_cranes()):
                best = cell
    assert best is not None, "dynamic programming table has no reachable cell"
    return best


def solve_dynamic(grid: Grid) -> Path:
    """Best path by dynamic programming, O(rows * columns)."""
    best = best_in_table(build_table(grid))
    logger.debug("dynamic search: best end=(%d, %d) cranes=%d",
                 best.final_row(), best.final_column(), best.total_cranes())
    return best
