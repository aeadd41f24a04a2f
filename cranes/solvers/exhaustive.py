# cranes/solvers/exhaustive.py

"""Exhaustive (reference) crane unloading search.

Every South/East sequence of length 0..max_steps is encoded as a bitmask
(bit j = step j, 0 -> SOUTH, 1 -> EAST) and replayed against the grid.
Exponential in rows + columns; intended as the oracle for small grids.
"""

from __future__ import annotations

import logging

from cranes.grid.types import Grid, Path, StepDirection

logger = logging.getLogger(__name__)

MAX_ENUMERATION_BITS = 63


def solve_exhaustive(grid: Grid) -> Path:
    """Best path over every South/East sequence of up to rows + columns - 2 steps.

    Candidates run in order of length, then bitmask value; a candidate that hits
    a building or the edge is scored as far as it got. Only a strictly higher
    crane count replaces the current best, so the first of equal paths is kept.
    """
    assert grid.rows() > 0, "grid must have rows"
    assert grid.columns() > 0, "grid must have columns"

    max_steps = grid.rows() + grid.columns() - 2
    assert max_steps < MAX_ENUMERATION_BITS, f"max_steps={max_steps} exceeds the bitmask width"
    logger.debug("exhaustive search: max_steps=%d", max_steps)

    best = Path(grid)
    for steps in range(max_steps + 1):
        for bits in range(1 << steps):
            candidate = Path(grid)
            for j in range(steps):
                direction = StepDirection.EAST if (bits >> j) & 1 else StepDirection.SOUTH
                if not candidate.is_step_valid(direction):
                    break  # keep the partial path, it is still scored
                candidate.add_step(direction)

            if candidate.total_cranes() > best.total_cranes():
                best = candidate

    return best
