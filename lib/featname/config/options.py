"""Typed option descriptors declared by feature extractors."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

OptionValue = Union[bool, int, float]


class OptionKind(str, Enum):
    BOOL = "bool"
    INT = "int"
    DOUBLE = "double"


def coerce_option_value(kind: OptionKind, value: object) -> OptionValue:
    """Convert ``value`` to the Python type backing ``kind``.

    Raises ``ValueError`` for anything that does not represent ``kind``
    exactly, including values of the wrong type.
    """
    try:
        return _coerce(kind, value)
    except TypeError as exc:
        raise ValueError(f"Cannot interpret {value!r} as {kind.value}: {exc}") from exc


def _coerce(kind: OptionKind, value: object) -> OptionValue:
    if kind is OptionKind.BOOL:
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in ("1", "true", "yes", "on"):
                return True
            if lowered in ("0", "false", "no", "off"):
                return False
            raise ValueError(f"Cannot interpret {value!r} as a boolean.")
        if isinstance(value, (bool, int)):
            return bool(value)
        raise ValueError(f"Cannot interpret {value!r} as a boolean.")
    if kind is OptionKind.INT:
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError(f"Expected an integer, got {value!r}.")
            return int(value)
        return int(value)  # type: ignore[arg-type]
    if kind is OptionKind.DOUBLE:
        if isinstance(value, bool):
            raise ValueError(f"Expected a floating-point number, got {value!r}.")
        return float(value)  # type: ignore[arg-type]
    raise ValueError(f"Unsupported option kind {kind!r}.")


class OptionDescriptor(BaseModel):
    """One tunable parameter of a feature extractor."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Option name, unique within a table.")
    alias: Optional[str] = Field(
        default=None, description="Short token used in feature names instead of the name."
    )
    kind: OptionKind
    default: OptionValue = Field(..., description="Declared default value.")
    field: Optional[str] = Field(
        default=None,
        description="Attribute holding the live value on the parameter object. Defaults to name.",
    )
    feature_param: bool = Field(
        default=False,
        description="Whether a non-default value changes the extracted feature.",
    )
    help: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _coerce_default(cls, data: Any) -> Any:
        if isinstance(data, dict) and "kind" in data and "default" in data:
            kind = OptionKind(data["kind"])
            data = {**data, "kind": kind, "default": coerce_option_value(kind, data["default"])}
        return data

    @property
    def key(self) -> str:
        return self.alias or self.name

    @property
    def attribute(self) -> str:
        return self.field or self.name


OptionTable = Sequence[OptionDescriptor]


def check_unique_names(options: OptionTable) -> None:
    seen: set[str] = set()
    for option in options:
        if option.name in seen:
            raise ValueError(f"Duplicate option name '{option.name}'.")
        seen.add(option.name)


__all__ = [
    "OptionDescriptor",
    "OptionKind",
    "OptionTable",
    "OptionValue",
    "check_unique_names",
    "coerce_option_value",
]
