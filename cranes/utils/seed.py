# cranes/utils/seed.py

"""Reproducibility helpers.

Grid sampling draws from torch; seeding python and numpy as well keeps any
downstream shuffling or plotting jitter stable between runs.
"""

from __future__ import annotations

import os
import random
from dataclasses import dataclass

import numpy as np
import torch


@dataclass(frozen=True)
class SeedConfig:
    value: int = 12345
    deterministic: bool = True


def set_global_seed(cfg: SeedConfig) -> torch.Generator:
    """Seed python, numpy and torch; return a torch.Generator seeded with the same value."""
    os.environ["PYTHONHASHSEED"] = str(cfg.value)  # stable python hashing
    random.seed(cfg.value)                         # python RNG
    np.random.seed(cfg.value)                      # numpy RNG
    torch.manual_seed(cfg.value)                   # torch RNG (all devices)
    if cfg.deterministic:
        # process-wide flag; stays set until switched off again
        torch.use_deterministic_algorithms(True, warn_only=True)

    gen = torch.Generator(device="cpu")  # explicit generator for grid sampling
    gen.manual_seed(cfg.value)
    return gen


def get_torch_device(prefer: str = "cpu") -> torch.device:
    """Resolve the sampling device; 'cuda' falls back to CPU when unavailable."""
    if prefer == "cuda" and torch.cuda.is_available():
        return torch.device("cuda")
    return torch.device("cpu")
