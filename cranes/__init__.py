# cranes/__init__.py

"""Crane unloading path search.

Find a South/East path from the top-left cell of a grid that avoids buildings
and passes the most cranes, either exhaustively or by dynamic programming.
"""

from cranes.grid.types import CellKind, StepDirection, Grid, Path
from cranes.solvers import solve, solve_exhaustive, solve_dynamic

__version__ = "0.1.0"
