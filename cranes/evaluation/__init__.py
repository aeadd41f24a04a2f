"""Solver evaluation.

- Equivalence of the dynamic solver with the exhaustive oracle
- Runtime vs grid size
"""

from .compare import ComparisonResult, compare_solvers
from .benchmark import BenchmarkConfig, benchmark_solvers
