"""Error types raised while building feature names."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "invalid-argument"
    ALLOCATION_FAILURE = "allocation-failure"


class FeatureNameError(Exception):
    """Base class for feature name failures."""

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT


class InvalidArgumentError(FeatureNameError, ValueError):
    """A required argument is missing or an option kind is unrecognized."""

    kind = ErrorKind.INVALID_ARGUMENT


class AllocationError(FeatureNameError, MemoryError):
    """The interpreter could not allocate memory for a name."""

    kind = ErrorKind.ALLOCATION_FAILURE


def error_for_kind(kind: ErrorKind, message: str) -> FeatureNameError:
    if kind is ErrorKind.ALLOCATION_FAILURE:
        return AllocationError(message)
    return InvalidArgumentError(message)


__all__ = [
    "AllocationError",
    "ErrorKind",
    "FeatureNameError",
    "InvalidArgumentError",
    "error_for_kind",
]
