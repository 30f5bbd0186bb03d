"""Inline extractor declarations."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator

from .options import OptionDescriptor, check_unique_names


class ExtractorConfig(BaseModel):
    """Option table and provided features of an extractor declared in YAML."""

    name: str = Field(..., min_length=1, description="Extractor name.")
    options: List[OptionDescriptor] = Field(default_factory=list)
    provided_features: List[str] = Field(
        default_factory=list, description="Raw feature names the extractor produces."
    )

    @field_validator("options")
    @classmethod
    def _unique_options(cls, value: List[OptionDescriptor]) -> List[OptionDescriptor]:
        check_unique_names(value)
        return value
