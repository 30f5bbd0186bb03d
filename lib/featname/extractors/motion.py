"""Temporal motion extractor options."""

from __future__ import annotations

from dataclasses import dataclass

from featname.config import OptionDescriptor, OptionKind
from featname.core.extractor import FeatureExtractor
from featname.core.registry import register_extractor


@dataclass
class MotionParams:
    motion_force_zero: bool = False
    debug: bool = False


@register_extractor("motion")
class MotionExtractor(FeatureExtractor):
    params_type = MotionParams
    options = (
        OptionDescriptor(
            name="motion_force_zero",
            alias="force",
            kind=OptionKind.BOOL,
            default=False,
            feature_param=True,
            help="forcing motion score to zero",
        ),
        OptionDescriptor(
            name="debug",
            kind=OptionKind.BOOL,
            default=False,
            help="debug mode: enable additional output",
        ),
    )
    provided_features = (
        "VMAF_feature_motion_score",
        "VMAF_feature_motion2_score",
    )


__all__ = ["MotionExtractor", "MotionParams"]
