# cranes/utils/logger.py

"""Logging setup.

All package modules log under the "cranes" namespace, so configuring the
root "cranes" logger once (console + optional run log file) covers the
solvers, the evaluation layer and the experiment scripts.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_logger(name: str = "cranes",
                 level: str = "INFO",
                 log_file: Optional[str | Path] = None) -> logging.Logger:
    """Configure and return the named logger (idempotent)."""
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if logger.handlers:
        return logger

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(fmt)
    logger.addHandler(console)

    if log_file is not None:
        p = Path(log_file)
        p.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(p, encoding="utf-8")
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    logger.propagate = False
    return logger
