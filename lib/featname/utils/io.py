"""Serialization helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import yaml


def load_yaml_mapping(path: Path) -> Dict[str, Any]:
    """Load a YAML document whose top level is a mapping.

    An empty file yields an empty dict. Raises ``ValueError`` for malformed
    YAML or a non-mapping document.
    """
    with path.open("r", encoding="utf-8") as handle:
        try:
            loaded = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise ValueError(f"Malformed YAML in {path}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Expected a mapping at the top of {path}, got {type(loaded).__name__}.")
    return loaded


def save_json(obj: Any, path: Path) -> None:
    """Write ``obj`` as indented JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(obj, indent=2) + "\n", encoding="utf-8")
