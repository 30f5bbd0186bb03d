"""Build canonical feature names from option tables and parameter values.

A canonical name is the base feature name followed by ``_<key>_<value>`` for
every feature-affecting option whose value differs from its default, in the
order the options are declared. Two extractions with the same parameters map
to the same name.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from featname.config.options import OptionTable
from featname.core.aliases import lookup_alias
from featname.core.buffer import DEFAULT_BUFFER_SIZE, NameBuffer
from featname.core.defaults import is_default, read_option, render_loose, render_value
from featname.core.errors import InvalidArgumentError


def build_name_with_key(
    name: str,
    key: Optional[str],
    value: float,
    *,
    capacity: int = DEFAULT_BUFFER_SIZE,
) -> str:
    """Qualify ``name`` with an aliased key, e.g. ``adm2`` -> ``adm2_egl_1.5``.

    Keys without an alias leave the name untouched.
    """
    alias = lookup_alias(key)
    if alias is None:
        return name

    buffer = NameBuffer(capacity)
    buffer.append("%s_%s_%g", name, alias, value)
    return buffer.value


def build_name_from_dict(
    name: str,
    options: Optional[OptionTable],
    values: Optional[Mapping[str, Any]],
    *,
    capacity: int = DEFAULT_BUFFER_SIZE,
) -> str:
    """Append every feature-affecting entry of ``values`` to ``name``.

    Output order follows ``options``, never the mapping's insertion order.
    """
    buffer = NameBuffer(capacity)
    buffer.append("%s", name)
    if options is None or values is None:
        return buffer.value

    for option in options:
        if not option.feature_param or option.name not in values:
            continue
        buffer.append("_%s_%s", option.key, render_loose(values[option.name]))
    return buffer.value


def build_name_from_object(
    name: Optional[str],
    options: Optional[OptionTable],
    obj: Any,
    *,
    capacity: int = DEFAULT_BUFFER_SIZE,
) -> str:
    """Build the canonical name for the current values held by ``obj``."""
    if name is None:
        raise InvalidArgumentError("Feature name is required.")
    if options is None:
        raise InvalidArgumentError(f"Option table is required for feature '{name}'.")
    if obj is None:
        raise InvalidArgumentError(f"Parameter object is required for feature '{name}'.")

    non_default: Dict[str, str] = {}
    for option in options:
        if not option.feature_param:
            continue
        value = read_option(obj, option)
        if is_default(option, value):
            continue
        non_default[option.name] = render_value(option.kind, value, name=option.name)

    if non_default:
        logging.debug("Feature '%s' has non-default options: %s", name, ", ".join(non_default))
    return build_name_from_dict(name, options, non_default, capacity=capacity)


__all__ = ["build_name_from_dict", "build_name_from_object", "build_name_with_key"]
