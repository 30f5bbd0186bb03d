"""Top-level canonicalization request."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

from .extractor import ExtractorConfig


class FeatureRequest(BaseModel):
    """One extractor invocation whose feature names should be canonicalized."""

    type: str = Field(
        default="inline",
        description="Registered extractor name, or 'inline' together with 'extractor'.",
    )
    name: Optional[str] = Field(
        default=None, description="Label for the result; defaults to the extractor name."
    )
    params: Dict[str, Any] = Field(
        default_factory=dict, description="Option overrides keyed by option name or alias."
    )
    extractor: Optional[ExtractorConfig] = Field(
        default=None, description="Inline option table used when type is 'inline'."
    )
    features: Optional[List[str]] = Field(
        default=None,
        description="Raw feature names. Defaults to every feature the extractor provides.",
    )

    @model_validator(mode="after")
    def _check_inline(self) -> "FeatureRequest":
        if self.type == "inline" and self.extractor is None:
            raise ValueError("Inline feature requests need an 'extractor' declaration.")
        return self

    @property
    def label(self) -> str:
        if self.name:
            return self.name
        if self.type == "inline" and self.extractor is not None:
            return self.extractor.name
        return self.type


class CanonicalizeConfig(BaseModel):
    """Aggregates the extractor invocations of one run."""

    description: Optional[str] = Field(default=None, description="Optional description.")
    buffer_size: int = Field(
        default=256, gt=0, description="Maximum length of a canonical name."
    )
    features: List[FeatureRequest] = Field(default_factory=list)
