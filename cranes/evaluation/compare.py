# cranes/evaluation/compare.py

"""Cross-check the dynamic solver against the exhaustive oracle.

Both solvers must agree on the crane count for every grid; which of several
equally good paths each returns is allowed to differ.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence

import torch

from cranes.grid.types import Grid
from cranes.solvers.exhaustive import solve_exhaustive
from cranes.solvers.dynamic import solve_dynamic

logger = logging.getLogger(__name__)


@dataclass
class ComparisonResult:
    exhaustive_cranes: torch.Tensor   # [N] int64
    dynamic_cranes: torch.Tensor      # [N] int64
    path_lengths: torch.Tensor        # [N] int64, dynamic solver

    @property
    def matches(self) -> torch.Tensor:
        return self.exhaustive_cranes == self.dynamic_cranes

    @property
    def match_rate(self) -> float:
        if self.matches.numel() == 0:
            return 1.0
        return float(self.matches.float().mean().item())

    @property
    def mismatches(self) -> List[int]:
        return [int(i) for i in torch.nonzero(~self.matches).flatten().tolist()]

    def summary(self) -> Dict[str, float]:
        n = self.exhaustive_cranes.numel()
        if n == 0:
            return {"num_grids": 0.0, "match_rate": 1.0}
        return {
            "num_grids": float(n),
            "match_rate": self.match_rate,
            "num_mismatches": float(len(self.mismatches)),
            "exhaustive_cranes_mean": float(self.exhaustive_cranes.float().mean().item()),
            "dynamic_cranes_mean": float(self.dynamic_cranes.float().mean().item()),
            "dynamic_cranes_max": float(self.dynamic_cranes.max().item()),
            "path_length_mean": float(self.path_lengths.float().mean().item()),
        }


def compare_solvers(grids: Sequence[Grid]) -> ComparisonResult:
    ex, dp, lengths = [], [], []
    for idx, grid in enumerate(grids):
        p_ex = solve_exhaustive(grid)
        p_dp = solve_dynamic(grid)
        ex.append(p_ex.total_cranes())
        dp.append(p_dp.total_cranes())
        lengths.append(len(p_dp))
        if ex[-1] != dp[-1]:
            logger.warning("grid %d: exhaustive=%d dynamic=%d", idx, ex[-1], dp[-1])

    return ComparisonResult(
        exhaustive_cranes=torch.tensor(ex, dtype=torch.int64),
        dynamic_cranes=torch.tensor(dp, dtype=torch.int64),
        path_lengths=torch.tensor(lengths, dtype=torch.int64),
    )
