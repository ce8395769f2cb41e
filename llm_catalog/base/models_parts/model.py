"""Model record schema."""
from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import Field, field_validator

from ..constants import PROVIDER_ID_PATTERN
from .capabilities import Capabilities
from .limits import Cost, Limits, Modalities
from .record import CatalogRecord

ModelKey = Tuple[str, str]


class Model(CatalogRecord):
    """A specific offering of a provider.

    Attributes:
        id: Catalog id, unique per provider.
        provider: Canonical provider id.
        provider_model_id: Native id used against the provider API
            (defaults to ``id`` during enrichment).
        family: Model family; derived from ``id`` when absent.
        release_date / last_updated / knowledge: Plain date strings, never
            parsed.
        capabilities: Capability tree, ``None`` when upstream declares none.
        aliases: Alternate ids resolving to ``id``.
    """

    id: str = Field(..., min_length=1)
    provider: str = Field(..., pattern=PROVIDER_ID_PATTERN)
    provider_model_id: Optional[str] = None
    name: Optional[str] = None
    family: Optional[str] = None
    release_date: Optional[str] = None
    last_updated: Optional[str] = None
    knowledge: Optional[str] = None
    limits: Optional[Limits] = None
    cost: Optional[Cost] = None
    modalities: Optional[Modalities] = None
    capabilities: Optional[Capabilities] = None
    tags: List[str] = Field(default_factory=list)
    deprecated: bool = False
    aliases: List[str] = Field(default_factory=list)

    @field_validator("id")
    @classmethod
    def _non_blank_id(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("model id must be a non-empty string")
        return value

    @property
    def key(self) -> ModelKey:
        """``(provider, id)`` pair identifying the model in the catalog."""
        return (self.provider, self.id)

    @property
    def spec(self) -> str:
        return f"{self.provider}:{self.id}"


__all__ = ["Model", "ModelKey"]
