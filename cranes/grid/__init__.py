# cranes/grid/__init__.py

"""Grid and path types, random generation and the text format."""

from .types import CellKind, StepDirection, Grid, Path, path_from_steps
from .generator import GridConfig, generate_grid, generate_grids
from .text_format import parse_grid, format_grid, format_path
