"""Provider record schema."""
from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..constants import PROVIDER_ID_PATTERN
from .record import CatalogRecord


class ConfigField(BaseModel):
    """Descriptor for one provider configuration option.

    Attributes:
        name: Option name (e.g. ``"api_key"``).
        type: Free-form type label (``"string"``, ``"integer"``...).
        required: Whether callers must supply a value.
        default: Default value when not required.
        doc: Human-readable description.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    type: str = "string"
    required: bool = False
    default: Any = None
    doc: Optional[str] = None


class Provider(CatalogRecord):
    """An upstream model vendor.

    ``id`` must already be in canonical form (lower snake case); the
    normalizer coerces raw identifiers before validation.
    """

    id: str = Field(..., pattern=PROVIDER_ID_PATTERN)
    name: Optional[str] = None
    base_url: Optional[str] = None
    env: List[str] = Field(default_factory=list)
    config_schema: List[ConfigField] = Field(default_factory=list)
    doc: Optional[str] = None
    exclude_models: List[str] = Field(default_factory=list)


__all__ = ["ConfigField", "Provider"]
