"""Default detection and textual rendering of option values."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from featname.config.options import OptionDescriptor, OptionKind, OptionValue, coerce_option_value
from featname.core.errors import InvalidArgumentError

_MISSING = object()


def _kind_of(option: OptionDescriptor) -> OptionKind:
    try:
        return OptionKind(option.kind)
    except ValueError as exc:
        raise InvalidArgumentError(
            f"Option '{option.name}' has unrecognized kind {option.kind!r}."
        ) from exc


def is_default(option: Optional[OptionDescriptor], value: Any) -> bool:
    """Return whether ``value`` equals the declared default of ``option``.

    Floating-point options compare with plain ``==``: ``-0.0`` matches a
    ``0.0`` default and ``nan`` never matches anything.
    """
    if option is None:
        raise InvalidArgumentError("Option descriptor is required.")
    if value is None:
        raise InvalidArgumentError(f"No value supplied for option '{option.name}'.")

    kind = _kind_of(option)
    return typed_value(kind, option.default, option.name) == typed_value(kind, value, option.name)


def typed_value(kind: OptionKind, value: Any, name: str = "value") -> OptionValue:
    """Convert ``value`` to ``kind`` without losing information."""
    try:
        return coerce_option_value(kind, value)
    except ValueError as exc:
        raise InvalidArgumentError(f"Invalid {kind.value} for option '{name}': {exc}") from exc


def render_value(kind: Any, value: Any, *, name: str = "value") -> str:
    """Render a typed value the way it appears inside a feature name."""
    try:
        kind = OptionKind(kind)
    except ValueError as exc:
        raise InvalidArgumentError(f"Unrecognized option kind {kind!r}.") from exc

    typed = typed_value(kind, value, name)
    if kind is OptionKind.DOUBLE:
        return "%g" % typed
    return "%d" % typed


def render_loose(value: Any) -> str:
    """Render a value whose option kind is not known."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return render_value(OptionKind.BOOL, value)
    if isinstance(value, int):
        return render_value(OptionKind.INT, value)
    if isinstance(value, float):
        return render_value(OptionKind.DOUBLE, value)
    return str(value)


def read_option(obj: Any, option: OptionDescriptor) -> Any:
    """Fetch the live value of ``option`` from a parameter object."""
    attribute = option.attribute
    if isinstance(obj, Mapping):
        value = obj.get(attribute, _MISSING)
    else:
        value = getattr(obj, attribute, _MISSING)
    if value is _MISSING:
        raise InvalidArgumentError(
            f"Parameter object {type(obj).__name__} has no value for option '{option.name}'."
        )
    return value


__all__ = ["is_default", "read_option", "render_loose", "render_value", "typed_value"]
