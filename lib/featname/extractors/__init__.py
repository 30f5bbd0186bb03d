"""Built-in feature extractor declarations."""

from __future__ import annotations

from .adm import AdmExtractor, AdmParams
from .motion import MotionExtractor, MotionParams
from .vif import VifExtractor, VifParams

__all__ = [
    "AdmExtractor",
    "AdmParams",
    "MotionExtractor",
    "MotionParams",
    "VifExtractor",
    "VifParams",
]
