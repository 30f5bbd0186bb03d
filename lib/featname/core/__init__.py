"""Feature name canonicalization primitives."""

from __future__ import annotations

from .aliases import ALIASES, lookup_alias
from .batch import BatchResult, canonicalize_all
from .buffer import DEFAULT_BUFFER_SIZE, NameBuffer
from .defaults import is_default, render_value
from .errors import AllocationError, ErrorKind, FeatureNameError, InvalidArgumentError
from .extractor import DeclaredExtractor, FeatureExtractor
from .names import build_name_from_dict, build_name_from_object, build_name_with_key
from .registry import EXTRACTORS, register_extractor
from .run import canonicalize_config, resolve_extractor

__all__ = [
    "ALIASES",
    "AllocationError",
    "BatchResult",
    "DEFAULT_BUFFER_SIZE",
    "DeclaredExtractor",
    "EXTRACTORS",
    "ErrorKind",
    "FeatureExtractor",
    "FeatureNameError",
    "InvalidArgumentError",
    "NameBuffer",
    "build_name_from_dict",
    "build_name_from_object",
    "build_name_with_key",
    "canonicalize_all",
    "canonicalize_config",
    "is_default",
    "lookup_alias",
    "register_extractor",
    "render_value",
    "resolve_extractor",
]
