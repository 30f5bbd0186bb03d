"""Utility helpers."""

from __future__ import annotations

from .io import load_yaml_mapping, save_json

__all__ = ["load_yaml_mapping", "save_json"]
