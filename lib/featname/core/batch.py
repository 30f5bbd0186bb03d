"""Canonicalize every feature an extractor provides in one pass."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from featname.config.options import OptionTable
from featname.core.buffer import DEFAULT_BUFFER_SIZE
from featname.core.errors import (
    AllocationError,
    ErrorKind,
    FeatureNameError,
    error_for_kind,
)
from featname.core.names import build_name_from_object


@dataclass(frozen=True)
class BatchResult:
    """Outcome of :func:`canonicalize_all`.

    Exactly one of ``names`` and ``error`` is set. A failed batch never
    carries the names built before the failure.
    """

    names: Optional[Dict[str, str]] = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Dict[str, str]:
        if self.error is not None:
            raise error_for_kind(self.error, self.message)
        return dict(self.names or {})


def canonicalize_all(
    feature_names: Iterable[Optional[str]],
    options: Optional[OptionTable],
    obj: Any,
    *,
    capacity: int = DEFAULT_BUFFER_SIZE,
) -> BatchResult:
    """Map each raw feature name to its canonical name.

    Iteration stops at the first ``None`` entry. All features share
    ``options`` and ``obj``.
    """
    names: Dict[str, str] = {}
    for feature_name in feature_names:
        if feature_name is None:
            break
        try:
            names[feature_name] = build_name_from_object(
                feature_name, options, obj, capacity=capacity
            )
        except FeatureNameError as exc:
            logging.warning("Failed to canonicalize '%s': %s", feature_name, exc)
            return BatchResult(error=exc.kind, message=str(exc))
        except MemoryError as exc:
            logging.warning("Out of memory while canonicalizing '%s'.", feature_name)
            return BatchResult(error=AllocationError.kind, message=str(exc) or "out of memory")
    return BatchResult(names=names)


__all__ = ["BatchResult", "canonicalize_all"]
