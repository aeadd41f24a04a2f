# cranes/grid/types.py

"""Grid, path and step types consumed by the solvers.

- Grid: immutable rows x columns table of cell kinds (torch int8 storage)
- Path: monotone South/East walk from the origin, with a running crane count
- StepDirection: the only two admissible moves
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, List, Sequence, Tuple

import torch


class CellKind(IntEnum):
    EMPTY = 0
    BUILDING = 1
    CRANE = 2


class StepDirection(IntEnum):
    SOUTH = 0
    EAST = 1


Coordinate = Tuple[int, int]


class Grid:
    """Rectangular crane grid.

    The backing tensor is cloned on construction and never written again,
    so a grid can be shared freely between solver calls.
    """

    def __init__(self, cells: torch.Tensor | Sequence[Sequence[int]]):
        raw = torch.as_tensor(cells).detach().to("cpu")
        if raw.is_floating_point() or raw.is_complex() or raw.dtype == torch.bool:
            raise ValueError(f"grid cell codes must be integers, got {raw.dtype}")
        if raw.dim() != 2:
            raise ValueError(f"grid must be 2-D, got shape {tuple(raw.shape)}")
        if raw.shape[0] == 0 or raw.shape[1] == 0:
            raise ValueError("grid must have at least one row and one column")

        # membership is checked before narrowing, so out-of-range codes cannot wrap
        valid = torch.zeros_like(raw, dtype=torch.bool)
        for kind in CellKind:
            valid |= (raw == int(kind))
        if not bool(valid.all()):
            raise ValueError("grid contains unknown cell codes")
        if int(raw[0, 0]) == CellKind.BUILDING:
            raise ValueError("grid origin (0, 0) cannot be a building")
        self._cells = raw.to(torch.int8).clone()
        self._rows, self._columns = int(raw.shape[0]), int(raw.shape[1])

    @classmethod
    def filled(cls, rows: int, columns: int, kind: CellKind = CellKind.EMPTY) -> "Grid":
        return cls(torch.full((rows, columns), int(kind), dtype=torch.int8))

    def rows(self) -> int:
        return self._rows

    def columns(self) -> int:
        return self._columns

    def get(self, row: int, column: int) -> CellKind:
        return CellKind(int(self._cells[row, column]))

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self._rows and 0 <= column < self._columns

    def count(self, kind: CellKind) -> int:
        return int((self._cells == int(kind)).sum().item())

    def as_tensor(self) -> torch.Tensor:
        """Copy of the cell codes (callers may mutate it)."""
        return self._cells.clone()

    def with_cell(self, row: int, column: int, kind: CellKind) -> "Grid":
        """New grid with one cell replaced."""
        t = self._cells.clone()
        t[row, column] = int(kind)
        return Grid(t)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return torch.equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash((self._rows, self._columns, self._cells.numpy().tobytes()))

    def __repr__(self) -> str:
        return (f"Grid(rows={self._rows}, columns={self._columns}, "
                f"cranes={self.count(CellKind.CRANE)}, buildings={self.count(CellKind.BUILDING)})")


class Path:
    """Monotone walk on a grid, starting at (0, 0) with zero steps taken."""

    def __init__(self, grid: Grid):
        self._grid = grid
        self._steps: List[StepDirection] = []
        self._row = 0
        self._column = 0
        self._total_cranes = 1 if grid.get(0, 0) == CellKind.CRANE else 0  # origin counts

    def grid(self) -> Grid:
        return self._grid

    def total_cranes(self) -> int:
        return self._total_cranes

    def final_row(self) -> int:
        return self._row

    def final_column(self) -> int:
        return self._column

    def steps(self) -> Tuple[StepDirection, ...]:
        return tuple(self._steps)

    def _target(self, direction: StepDirection) -> Coordinate:
        if direction == StepDirection.SOUTH:
            return self._row + 1, self._column
        return self._row, self._column + 1

    def is_step_valid(self, direction: StepDirection) -> bool:
        r, c = self._target(direction)
        return self._grid.in_bounds(r, c) and self._grid.get(r, c) != CellKind.BUILDING

    def add_step(self, direction: StepDirection) -> None:
        assert self.is_step_valid(direction), f"invalid step {direction.name} from ({self._row}, {self._column})"
        self._row, self._column = self._target(direction)
        self._steps.append(direction)
        if self._grid.get(self._row, self._column) == CellKind.CRANE:
            self._total_cranes += 1

    def cells(self) -> List[Coordinate]:
        """Visited coordinates, origin first."""
        r, c = 0, 0
        out = [(r, c)]
        for d in self._steps:
            if d == StepDirection.SOUTH:
                r += 1
            else:
                c += 1
            out.append((r, c))
        return out

    def copy(self) -> "Path":
        p = Path.__new__(Path)
        p._grid = self._grid
        p._steps = list(self._steps)
        p._row = self._row
        p._column = self._column
        p._total_cranes = self._total_cranes
        return p

    __copy__ = copy

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        route = "".join("S" if d == StepDirection.SOUTH else "E" for d in self._steps) or "-"
        return f"Path(steps={route}, end=({self._row}, {self._column}), cranes={self._total_cranes})"


def path_from_steps(grid: Grid, steps: Iterable[StepDirection]) -> Path:
    """Build a path by applying each step in order (every step must be valid)."""
    p = Path(grid)
    for d in steps:
        p.add_step(StepDirection(d))
    return p
