"""Tests for default detection and value rendering."""

from __future__ import annotations

import math

import pytest

from featname.config import OptionDescriptor, OptionKind
from featname.core.defaults import is_default, read_option, render_value
from featname.core.errors import InvalidArgumentError


def _option(kind: OptionKind, default) -> OptionDescriptor:
    return OptionDescriptor(name="opt", kind=kind, default=default, feature_param=True)


def test_bool_default():
    option = _option(OptionKind.BOOL, False)
    assert is_default(option, False)
    assert not is_default(option, True)


def test_int_default():
    option = _option(OptionKind.INT, 1080)
    assert is_default(option, 1080)
    assert not is_default(option, 2160)


def test_double_default_is_exact():
    option = _option(OptionKind.DOUBLE, 0.3)
    assert is_default(option, 0.3)
    assert not is_default(option, 0.1 + 0.2)


def test_negative_zero_matches_zero_default():
    option = _option(OptionKind.DOUBLE, 0.0)
    assert is_default(option, -0.0)


def test_nan_never_matches():
    option = _option(OptionKind.DOUBLE, math.nan)
    assert not is_default(option, math.nan)


def test_missing_arguments_are_invalid():
    option = _option(OptionKind.INT, 1)
    with pytest.raises(InvalidArgumentError):
        is_default(None, 1)
    with pytest.raises(InvalidArgumentError):
        is_default(option, None)


def test_unrecognized_kind_is_invalid():
    option = OptionDescriptor.model_construct(name="opt", kind="string", default="x", feature_param=True)
    with pytest.raises(InvalidArgumentError):
        is_default(option, "x")
    with pytest.raises(InvalidArgumentError):
        render_value("string", "x")


def test_render_value():
    assert render_value(OptionKind.BOOL, True) == "1"
    assert render_value(OptionKind.BOOL, False) == "0"
    assert render_value(OptionKind.INT, 2160) == "2160"
    assert render_value(OptionKind.DOUBLE, 1.5) == "1.5"
    assert render_value(OptionKind.DOUBLE, 100.0) == "100"
    assert render_value(OptionKind.DOUBLE, 1e-7) == "1e-07"
    assert render_value(OptionKind.DOUBLE, -0.0) == "-0"


def test_read_option_from_mapping_and_attributes():
    option = OptionDescriptor(name="gain", field="gain_value", kind=OptionKind.DOUBLE, default=1.0)

    class Params:
        gain_value = 2.0

    assert read_option(Params(), option) == 2.0
    assert read_option({"gain_value": 3.0}, option) == 3.0
    with pytest.raises(InvalidArgumentError):
        read_option({"gain": 3.0}, option)


def test_int_values_are_not_truncated():
    option = _option(OptionKind.INT, 1080)
    with pytest.raises(InvalidArgumentError):
        is_default(option, 1080.5)
    with pytest.raises(InvalidArgumentError):
        render_value(OptionKind.INT, 720.9, name="height")
    assert is_default(option, 1080.0)
    assert render_value(OptionKind.INT, "720") == "720"


def test_bool_strings_keep_their_meaning():
    option = _option(OptionKind.BOOL, False)
    assert is_default(option, "0")
    assert not is_default(option, "true")
    assert render_value(OptionKind.BOOL, "0") == "0"
    assert render_value(OptionKind.BOOL, "yes") == "1"
    with pytest.raises(InvalidArgumentError):
        is_default(option, "maybe")


@pytest.mark.parametrize(
    "kind, value",
    [
        (OptionKind.INT, "abc"),
        (OptionKind.INT, []),
        (OptionKind.DOUBLE, "fast"),
        (OptionKind.DOUBLE, True),
        (OptionKind.BOOL, 0.5),
    ],
)
def test_unconvertible_values_are_invalid(kind, value):
    with pytest.raises(InvalidArgumentError):
        render_value(kind, value)
