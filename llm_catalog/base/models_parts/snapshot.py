"""Published catalog snapshot.

A ``Snapshot`` is built once at the end of a successful pipeline run and is
never edited afterwards; ``with_epoch`` returns a copy carrying the epoch
assigned by the store.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..filters_parts import CompiledFilters
from .model import Model, ModelKey
from .provider import Provider


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _empty() -> Mapping:
    return MappingProxyType({})


@dataclass(frozen=True)
class SnapshotMeta:
    """Build metadata.

    Attributes:
        generated_at: ISO-8601 UTC timestamp of the build.
        epoch: Store epoch; ``None`` until published.
    """

    generated_at: str = field(default_factory=utc_now_iso)
    epoch: Optional[int] = None


@dataclass(frozen=True)
class Snapshot:
    """Immutable, fully indexed catalog.

    Attributes:
        providers_by_id: Provider id -> ``Provider``.
        models_by_key: ``(provider, id)`` -> ``Model``.
        aliases_by_key: ``(provider, alias)`` -> canonical model id.
        models_by_provider: Provider id -> models in source order.
        providers: All providers in source order.
        models: All filtered models in source order.
        filters: Compiled allow/deny filters used for the build.
        prefer: Configured provider preference order.
        meta: Build metadata.
    """

    providers_by_id: Mapping[str, Provider] = field(default_factory=_empty)
    models_by_key: Mapping[ModelKey, Model] = field(default_factory=_empty)
    aliases_by_key: Mapping[ModelKey, str] = field(default_factory=_empty)
    models_by_provider: Mapping[str, Tuple[Model, ...]] = field(default_factory=_empty)
    providers: Tuple[Provider, ...] = ()
    models: Tuple[Model, ...] = ()
    filters: CompiledFilters = field(default_factory=CompiledFilters)
    prefer: Tuple[str, ...] = ()
    meta: SnapshotMeta = field(default_factory=SnapshotMeta)

    @property
    def epoch(self) -> Optional[int]:
        return self.meta.epoch

    def with_epoch(self, epoch: int) -> "Snapshot":
        """Return a copy stamped with ``epoch``."""
        return replace(self, meta=replace(self.meta, epoch=epoch))

    def to_payload(self) -> Dict[str, List[Dict[str, Any]]]:
        """Return the ``{providers, models}`` exchange structure.

        Field names use their upstream spelling (``json``, ``schema``) and
        ``None`` values are omitted so the result round-trips through JSON.
        """
        dump = {"mode": "json", "by_alias": True, "exclude_none": True}
        return {
            "providers": [p.model_dump(**dump) for p in self.providers],
            "models": [m.model_dump(**dump) for m in self.models],
        }


__all__ = ["Snapshot", "SnapshotMeta", "utc_now_iso"]
