"""Base class for components that declare feature options."""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Tuple

from featname.config.extractor import ExtractorConfig
from featname.config.options import OptionDescriptor, coerce_option_value
from featname.core.batch import BatchResult, canonicalize_all
from featname.core.errors import InvalidArgumentError
from featname.core.names import build_name_from_object


class FeatureExtractor:
    """Declares the options of a feature extractor and holds its live parameters.

    Subclasses set ``options`` and ``provided_features`` and usually a
    dataclass ``params_type`` whose attributes back the options. Without one
    the parameters are kept in a plain dict keyed by option attribute.
    """

    name: str = "extractor"
    options: Tuple[OptionDescriptor, ...] = ()
    provided_features: Tuple[str, ...] = ()
    params_type: Optional[type] = None

    def __init__(self, params: Any = None) -> None:
        self.params = self.default_params() if params is None else params

    def default_params(self) -> Any:
        if self.params_type is not None:
            return self.params_type()
        return {option.attribute: option.default for option in self.options}

    def option(self, name: str) -> OptionDescriptor:
        for option in self.options:
            if option.name == name or option.alias == name:
                return option
        available = ", ".join(option.name for option in self.options) or "<none>"
        raise InvalidArgumentError(
            f"Extractor '{self.name}' has no option '{name}'. Available: {available}"
        )

    def configure(self, overrides: Mapping[str, Any]) -> "FeatureExtractor":
        """Apply option overrides, keyed by option name or alias."""
        updates: Dict[str, Any] = {}
        for key, raw in overrides.items():
            option = self.option(key)
            try:
                updates[option.attribute] = coerce_option_value(option.kind, raw)
            except (TypeError, ValueError) as exc:
                raise InvalidArgumentError(
                    f"Invalid value {raw!r} for option '{option.name}': {exc}"
                ) from exc

        if dataclasses.is_dataclass(self.params) and not isinstance(self.params, type):
            self.params = dataclasses.replace(self.params, **updates)
        elif isinstance(self.params, dict):
            self.params = {**self.params, **updates}
        else:
            for attribute, value in updates.items():
                setattr(self.params, attribute, value)
        logging.debug("Configured extractor '%s' with %s", self.name, updates)
        return self

    def feature_name(self, feature: str) -> str:
        return build_name_from_object(feature, self.options, self.params)

    def canonical_names(self, features: Optional[Iterable[str]] = None) -> BatchResult:
        return canonicalize_all(
            self.provided_features if features is None else features,
            self.options,
            self.params,
        )


class DeclaredExtractor(FeatureExtractor):
    """Extractor whose options come from configuration rather than code."""

    def __init__(self, config: ExtractorConfig, params: Any = None) -> None:
        self.name = config.name
        self.options = tuple(config.options)
        self.provided_features = tuple(config.provided_features)
        super().__init__(params)


def option_summary(options: Sequence[OptionDescriptor]) -> list[Dict[str, Any]]:
    return [
        {
            "name": option.name,
            "alias": option.alias,
            "kind": option.kind.value,
            "default": option.default,
            "feature_param": option.feature_param,
        }
        for option in options
    ]


__all__ = ["DeclaredExtractor", "FeatureExtractor", "option_summary"]
