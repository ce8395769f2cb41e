"""Validator: check normalized records against the declared schema.

Valid records continue through the pipeline as plain mappings holding only
the fields the source actually set, so schema defaults never mask values from
a lower-precedence source during merge.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Sequence, Tuple, Type

from pydantic import ValidationError

from ..errors import CatalogError, ErrorCode
from ..models import CatalogRecord, Model, Provider

Record = Dict[str, Any]


def _validate(schema: Type[CatalogRecord], records: Iterable[Any]) -> Tuple[List[Record], int]:
    valid: List[Record] = []
    dropped = 0
    for raw in records:
        try:
            parsed = schema.model_validate(raw)
        except ValidationError:
            dropped += 1
            continue
        valid.append(parsed.model_dump(exclude_unset=True, by_alias=True))
    return valid, dropped


def validate_providers(records: Iterable[Any]) -> Tuple[List[Record], int]:
    """Return ``(valid_providers, dropped_count)``."""
    return _validate(Provider, records)


def validate_models(records: Iterable[Any]) -> Tuple[List[Record], int]:
    """Return ``(valid_models, dropped_count)``."""
    return _validate(Model, records)


def ensure_viable(providers: Sequence[Any], models: Sequence[Any]) -> None:
    """Raise ``CatalogError(empty_catalog)`` when either list is empty."""
    if not providers or not models:
        raise CatalogError(
            code=ErrorCode.EMPTY_CATALOG,
            message=f"catalog is empty ({len(providers)} providers, {len(models)} models)",
            stage="ensure_viable",
        )


__all__ = ["validate_providers", "validate_models", "ensure_viable"]
