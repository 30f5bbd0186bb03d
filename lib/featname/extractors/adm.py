"""Detail loss (ADM) extractor options."""

from __future__ import annotations

from dataclasses import dataclass

from featname.config import OptionDescriptor, OptionKind
from featname.core.extractor import FeatureExtractor
from featname.core.registry import register_extractor


@dataclass
class AdmParams:
    adm_enhn_gain_limit: float = 100.0
    adm_norm_view_dist: float = 3.0
    adm_ref_display_height: int = 1080
    debug: bool = False


@register_extractor("adm")
class AdmExtractor(FeatureExtractor):
    params_type = AdmParams
    options = (
        OptionDescriptor(
            name="adm_enhn_gain_limit",
            alias="egl",
            kind=OptionKind.DOUBLE,
            default=100.0,
            feature_param=True,
            help="enhancement gain imposed on adm, must be >= 1.0",
        ),
        OptionDescriptor(
            name="adm_norm_view_dist",
            alias="nvd",
            kind=OptionKind.DOUBLE,
            default=3.0,
            feature_param=True,
            help="normalized viewing distance = viewing distance / ref display's physical height",
        ),
        OptionDescriptor(
            name="adm_ref_display_height",
            alias="rdh",
            kind=OptionKind.INT,
            default=1080,
            feature_param=True,
            help="reference display height in pixels",
        ),
        OptionDescriptor(
            name="debug",
            kind=OptionKind.BOOL,
            default=False,
            help="debug mode: enable additional output",
        ),
    )
    provided_features = (
        "VMAF_feature_adm2_score",
        "integer_adm_scale0",
        "integer_adm_scale1",
        "integer_adm_scale2",
        "integer_adm_scale3",
    )


__all__ = ["AdmExtractor", "AdmParams"]
