from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from typing import Any, Dict

import yaml


def load_config(path: str) -> Dict[str, Any]:
    """Load a JSON or YAML config file into a dict.

    YAML is chosen by the `.yaml`/`.yml` extension, everything else is read as JSON.
    The top level must be a mapping.
    """
    path = str(path)
    with open(path, "r") as f:
        if path.endswith((".yaml", ".yml")):
            data = yaml.safe_load(f) or {}
        else:
            data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"config {path} must contain a mapping, got {type(data).__name__}")
    return data


def dump_config(obj: Any) -> Dict[str, Any]:
    """Convert dataclass or object to plain dict for logging/serialization."""
    if is_dataclass(obj):
        return asdict(obj)
    if isinstance(obj, dict):
        return obj
    return {k: getattr(obj, k) for k in dir(obj) if not k.startswith("_")}
