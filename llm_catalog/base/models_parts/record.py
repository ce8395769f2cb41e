"""Shared base for provider and model records.

Upstream data carries many fields the catalog does not model. Rather than
rejecting such records, unknown top-level keys are folded into ``extra``
before field validation runs. Explicit ``extra`` entries take precedence over
folded keys with the same name.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Set

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CatalogRecord(BaseModel):
    """Frozen pydantic record with an open-ended ``extra`` map."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    extra: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def known_keys(cls) -> Set[str]:
        """Return field names and aliases accepted at the top level."""
        keys: Set[str] = set()
        for name, info in cls.model_fields.items():
            keys.add(name)
            if info.alias:
                keys.add(info.alias)
        return keys

    @model_validator(mode="before")
    @classmethod
    def _collect_extra(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        known = cls.known_keys()
        unknown = {k: v for k, v in data.items() if k not in known}
        if not unknown:
            return data
        kept = {k: v for k, v in data.items() if k in known}
        explicit = kept.get("extra")
        if explicit is None:
            kept["extra"] = unknown
        elif isinstance(explicit, Mapping):
            kept["extra"] = {**unknown, **explicit}
        # a non-mapping ``extra`` is left for field validation to reject
        return kept


__all__ = ["CatalogRecord"]
