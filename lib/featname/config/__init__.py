"""Configuration models for featname."""

from __future__ import annotations

from .extractor import ExtractorConfig
from .options import OptionDescriptor, OptionKind, OptionTable, OptionValue
from .run import CanonicalizeConfig, FeatureRequest

__all__ = [
    "CanonicalizeConfig",
    "ExtractorConfig",
    "FeatureRequest",
    "OptionDescriptor",
    "OptionKind",
    "OptionTable",
    "OptionValue",
]
