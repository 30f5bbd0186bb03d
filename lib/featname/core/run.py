"""Resolve canonicalization requests against the extractor registry."""

from __future__ import annotations

import logging
from typing import Dict

from featname.config import CanonicalizeConfig, FeatureRequest
from featname.core.batch import canonicalize_all
from featname.core.extractor import DeclaredExtractor, FeatureExtractor
from featname.core.registry import EXTRACTORS


def resolve_extractor(request: FeatureRequest) -> FeatureExtractor:
    """Instantiate the extractor a request names and apply its overrides."""
    if request.type == "inline":
        assert request.extractor is not None
        extractor: FeatureExtractor = DeclaredExtractor(request.extractor)
    else:
        extractor = EXTRACTORS.get(request.type)()
    return extractor.configure(request.params)


def canonicalize_config(config: CanonicalizeConfig) -> Dict[str, Dict[str, str]]:
    """Canonicalize every request, keyed by request label.

    Raises the first :class:`~featname.core.errors.FeatureNameError` met;
    no mapping is returned for a partially successful run.
    """
    results: Dict[str, Dict[str, str]] = {}
    for request in config.features:
        extractor = resolve_extractor(request)
        features = request.features if request.features is not None else extractor.provided_features
        result = canonicalize_all(features, extractor.options, extractor.params, capacity=config.buffer_size)
        names = result.unwrap()
        logging.info("Canonicalized %d feature(s) for '%s'", len(names), request.label)
        if request.label in results:
            logging.warning("Duplicate request label '%s'; merging names.", request.label)
            results[request.label].update(names)
        else:
            results[request.label] = names
    return results


__all__ = ["canonicalize_config", "resolve_extractor"]
