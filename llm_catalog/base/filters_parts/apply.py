"""Filter engine: allow/deny evaluation over model records."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, List, TypeVar

from .compiled_filters import CompiledFilters
from .glob_pattern import GlobPattern

T = TypeVar("T")


def matches_any(patterns: Iterable[GlobPattern], text: str) -> bool:
    return any(p.matches(text) for p in patterns)


def is_allowed(filters: CompiledFilters, provider: str, model_id: str) -> bool:
    """Return whether ``provider:model_id`` passes the filters.

    Deny is evaluated first and always wins. An empty allow map restricts
    nothing, while a non-empty allow map with no patterns for ``provider``
    excludes every model of that provider.
    """
    if matches_any(filters.deny.get(provider, ()), model_id):
        return False
    if filters.allow_all:
        return True
    allow_patterns = filters.allow.get(provider, ())
    if not allow_patterns:
        return len(filters.allow) == 0
    return matches_any(allow_patterns, model_id)


def _field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def apply_filters(models: Iterable[T], filters: CompiledFilters) -> List[T]:
    """Keep the models (mappings or ``Model`` objects) that pass ``filters``."""
    return [m for m in models if is_allowed(filters, _field(m, "provider"), _field(m, "id"))]


__all__ = ["matches_any", "is_allowed", "apply_filters"]
