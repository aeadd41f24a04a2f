# cranes/utils/config_loader.py

"""YAML config loading.

Experiments take an ordered list of YAML files; later files override earlier
ones key by key (nested mappings are merged, leaves replaced). The merged
result is written next to the run outputs so a run can be repeated exactly.
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping

import yaml


def _deep_update(base: Dict[str, Any], other: Mapping[str, Any]) -> Dict[str, Any]:
    for k, v in other.items():
        if isinstance(v, Mapping) and isinstance(base.get(k), Mapping):
            base[k] = _deep_update(dict(base[k]), v)
        else:
            base[k] = copy.deepcopy(v)
    return base


def load_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{p}: top level of a config must be a mapping")
    return dict(data)


def merge_configs(paths: Iterable[str | Path]) -> Dict[str, Any]:
    """Merge YAML configs in order (later wins)."""
    merged: Dict[str, Any] = {}
    for p in paths:
        merged = _deep_update(merged, load_yaml(p))
    return merged


def get_section(cfg: Mapping[str, Any], dotted: str, default: Any = None) -> Any:
    """Look up 'a.b.c' in a nested config, returning `default` if any key is missing."""
    node: Any = cfg
    for key in dotted.split("."):
        if not isinstance(node, Mapping) or key not in node:
            return default
        node = node[key]
    return node


def save_config_snapshot(cfg: Mapping[str, Any], out_path: str | Path) -> None:
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8") as f:
        yaml.safe_dump(dict(cfg), f, sort_keys=False)
