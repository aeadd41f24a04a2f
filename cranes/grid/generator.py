# cranes/grid/generator.py

"""Random grid generation.

Each cell draws one uniform sample u:
- u < building_prob                  -> BUILDING
- u < building_prob + crane_prob     -> CRANE
- otherwise                          -> EMPTY
The origin is always EMPTY so every grid admits the zero-step path.

Sampling is pure torch so a whole batch can be drawn on the GPU in one call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import torch

from cranes.grid.types import CellKind, Grid


@dataclass(frozen=True)
class GridConfig:
    rows: int = 4
    columns: int = 5
    building_prob: float = 0.15
    crane_prob: float = 0.25


def _validate(cfg: GridConfig) -> None:
    if cfg.rows <= 0 or cfg.columns <= 0:
        raise ValueError(f"grid size must be positive, got {cfg.rows}x{cfg.columns}")
    if cfg.building_prob < 0.0 or cfg.crane_prob < 0.0:
        raise ValueError("cell probabilities must be non-negative")
    if cfg.building_prob + cfg.crane_prob > 1.0:
        raise ValueError("building_prob + crane_prob must not exceed 1")


def sample_cells(batch: int,
                 cfg: GridConfig,
                 device: torch.device,
                 generator: Optional[torch.Generator] = None) -> torch.Tensor:
    """Cell codes for `batch` grids, shape [B, rows, columns], int8."""
    _validate(cfg)
    u = torch.rand(batch, cfg.rows, cfg.columns, device=device, generator=generator)
    cells = torch.full_like(u, int(CellKind.EMPTY), dtype=torch.int8)
    cells = torch.where(u < cfg.building_prob + cfg.crane_prob,
                        torch.full_like(cells, int(CellKind.CRANE)), cells)
    cells = torch.where(u < cfg.building_prob,
                        torch.full_like(cells, int(CellKind.BUILDING)), cells)
    cells[:, 0, 0] = int(CellKind.EMPTY)  # start cell stays clear
    return cells


def generate_grids(batch: int,
                   cfg: GridConfig,
                   device: torch.device = torch.device("cpu"),
                   generator: Optional[torch.Generator] = None) -> List[Grid]:
    cells = sample_cells(batch, cfg, device, generator)
    return [Grid(cells[b]) for b in range(batch)]


def generate_grid(cfg: GridConfig, generator: Optional[torch.Generator] = None) -> Grid:
    return generate_grids(1, cfg, generator=generator)[0]
