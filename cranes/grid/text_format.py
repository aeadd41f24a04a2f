# cranes/grid/text_format.py

"""Plain-text grid format.

One line per row: '.' empty, 'X' building, 'C' crane. Blank lines are ignored.
When rendering a path, visited cells are drawn as '*' ('@' on a crane).
"""

from __future__ import annotations

from typing import Dict, List

from cranes.grid.types import CellKind, Grid, Path


CHAR_TO_KIND: Dict[str, CellKind] = {".": CellKind.EMPTY, "X": CellKind.BUILDING, "C": CellKind.CRANE}
KIND_TO_CHAR: Dict[CellKind, str] = {k: ch for ch, k in CHAR_TO_KIND.items()}


def parse_grid(text: str) -> Grid:
    rows: List[List[int]] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        try:
            rows.append([int(CHAR_TO_KIND[ch]) for ch in line])
        except KeyError as e:
            raise ValueError(f"line {lineno}: unknown cell character {e.args[0]!r}") from None
        if len(rows[-1]) != len(rows[0]):
            raise ValueError(f"line {lineno}: expected {len(rows[0])} cells, got {len(rows[-1])}")
    if not rows:
        raise ValueError("grid text contains no rows")
    return Grid(rows)


def format_grid(grid: Grid) -> str:
    lines = []
    for r in range(grid.rows()):
        lines.append("".join(KIND_TO_CHAR[grid.get(r, c)] for c in range(grid.columns())))
    return "\n".join(lines) + "\n"


def format_path(path: Path) -> str:
    grid = path.grid()
    canvas = [[KIND_TO_CHAR[grid.get(r, c)] for c in range(grid.columns())] for r in range(grid.rows())]
    for r, c in path.cells():
        canvas[r][c] = "@" if grid.get(r, c) == CellKind.CRANE else "*"
    return "\n".join("".join(row) for row in canvas) + "\n"
