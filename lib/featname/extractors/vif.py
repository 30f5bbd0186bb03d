"""Visual information fidelity extractor options."""

from __future__ import annotations

from dataclasses import dataclass

from featname.config import OptionDescriptor, OptionKind
from featname.core.extractor import FeatureExtractor
from featname.core.registry import register_extractor


@dataclass
class VifParams:
    vif_enhn_gain_limit: float = 100.0
    debug: bool = False


@register_extractor("vif")
class VifExtractor(FeatureExtractor):
    """Per-scale VIF scores; the gain limit changes every score."""

    params_type = VifParams
    options = (
        OptionDescriptor(
            name="vif_enhn_gain_limit",
            alias="egl",
            kind=OptionKind.DOUBLE,
            default=100.0,
            feature_param=True,
            help="enhancement gain imposed on vif, must be >= 1.0, where 1.0 means the gain is completely disabled",
        ),
        OptionDescriptor(
            name="debug",
            kind=OptionKind.BOOL,
            default=False,
            help="debug mode: enable additional output",
        ),
    )
    provided_features = (
        "VMAF_feature_vif_scale0_score",
        "VMAF_feature_vif_scale1_score",
        "VMAF_feature_vif_scale2_score",
        "VMAF_feature_vif_scale3_score",
    )


__all__ = ["VifExtractor", "VifParams"]
