"""Ingestion: collect raw records from the three precedence-ordered sources."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ...config import CatalogConfig
from ..constants import SOURCE_BEHAVIOUR, SOURCE_CONFIG, SOURCE_ORDER, SOURCE_PACKAGED
from ..errors import CatalogError, ErrorCode
from ..overrides import OverrideSet


@dataclass(frozen=True)
class SourceSet:
    """Raw records contributed by one source.

    Attributes:
        name: ``packaged``, ``config`` or ``behaviour``.
        providers: Provider records in any mapping shape.
        models: Model records in any mapping shape.
        excludes: ``{provider: [globs]}`` declared by the source itself.
    """

    name: str
    providers: List[Any] = field(default_factory=list)
    models: List[Any] = field(default_factory=list)
    excludes: Dict[Any, Any] = field(default_factory=dict)


def _invalid(source: str, message: str) -> CatalogError:
    return CatalogError(
        code=ErrorCode.INVALID_SOURCE,
        message=f"{source} source: {message}",
        stage="ingest",
    )


def _list(source: str, key: str, value: Any) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise _invalid(source, f"{key} must be a list, got {type(value).__name__}")
    return list(value)


def _mapping(source: str, key: str, value: Any) -> Dict[Any, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise _invalid(source, f"{key} must be a mapping, got {type(value).__name__}")
    return dict(value)


def source_from_payload(name: str, payload: Optional[Mapping[str, Any]], excludes_key: str) -> SourceSet:
    if payload is None:
        return SourceSet(name=name)
    if not isinstance(payload, Mapping):
        raise _invalid(name, f"expected a mapping, got {type(payload).__name__}")
    return SourceSet(
        name=name,
        providers=_list(name, "providers", payload.get("providers")),
        models=_list(name, "models", payload.get("models")),
        excludes=_mapping(name, excludes_key, payload.get(excludes_key)),
    )


def ingest(
    config: CatalogConfig,
    packaged: Optional[Mapping[str, Any]],
    overrides: OverrideSet,
) -> List[SourceSet]:
    """Return the sources ordered lowest to highest precedence.

    Raises:
        CatalogError: ``invalid_source`` when a source has a malformed shape.
    """
    behaviour = {
        "providers": overrides.providers,
        "models": overrides.models,
        "excludes": overrides.excludes,
    }
    # config files spell the key "exclude"
    inputs = {
        SOURCE_PACKAGED: (packaged, "excludes"),
        SOURCE_CONFIG: (config.overrides, "exclude"),
        SOURCE_BEHAVIOUR: (behaviour, "excludes"),
    }
    return [source_from_payload(name, *inputs[name]) for name in SOURCE_ORDER]


__all__ = ["SourceSet", "ingest", "source_from_payload"]
