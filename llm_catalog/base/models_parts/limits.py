"""Numeric and modality descriptors attached to a model."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Limits(BaseModel):
    """Token limits: context window and maximum output tokens."""

    model_config = ConfigDict(frozen=True)

    context: Optional[int] = Field(default=None, ge=0)
    output: Optional[int] = Field(default=None, ge=0)


class Cost(BaseModel):
    """Prices in currency units per million tokens."""

    model_config = ConfigDict(frozen=True)

    input: Optional[float] = Field(default=None, ge=0)
    output: Optional[float] = Field(default=None, ge=0)
    cache_read: Optional[float] = Field(default=None, ge=0)
    cache_write: Optional[float] = Field(default=None, ge=0)


class Modalities(BaseModel):
    """Input and output modality tags such as ``text`` or ``image``."""

    model_config = ConfigDict(frozen=True)

    input: List[str] = Field(default_factory=list)
    output: List[str] = Field(default_factory=list)

    @field_validator("input", "output")
    @classmethod
    def _lowercase(cls, value: List[str]) -> List[str]:
        return [v.strip().lower() for v in value]


__all__ = ["Limits", "Cost", "Modalities"]
