"""Indexer: lookup structures over the filtered provider/model lists."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from ..logging import get_logger, log_event
from ..log_support import LogContext
from ..models import Model, ModelKey, Provider

_LOGGER_NAME = "llm_catalog.index"


@dataclass(frozen=True)
class Indexes:
    """Read-only lookup maps consumed by ``Snapshot``."""

    providers_by_id: Mapping[str, Provider]
    models_by_key: Mapping[ModelKey, Model]
    models_by_provider: Mapping[str, Tuple[Model, ...]]
    aliases_by_key: Mapping[ModelKey, str]


def build_aliases_index(
    models: Sequence[Model], logger: Optional[logging.Logger] = None
) -> Mapping[ModelKey, str]:
    """Map ``(provider, alias)`` to the canonical model id.

    An alias equal to a canonical id under the same provider is skipped so it
    can never shadow that model. Duplicate aliases resolve to the later model.
    """
    canonical = {m.key for m in models}
    aliases: Dict[ModelKey, str] = {}
    for model in models:
        for alias in model.aliases:
            key = (model.provider, alias)
            if key in canonical:
                if alias != model.id:
                    log_event(
                        logger or get_logger(_LOGGER_NAME),
                        "catalog.index.alias_collision",
                        LogContext(provider=model.provider, model=model.id),
                        level=logging.WARNING,
                        alias=alias,
                    )
                continue
            aliases[key] = model.id
    return MappingProxyType(aliases)


def build_indexes(
    providers: Sequence[Provider],
    models: Sequence[Model],
    logger: Optional[logging.Logger] = None,
) -> Indexes:
    providers_by_id = {p.id: p for p in providers}
    models_by_key = {m.key: m for m in models}
    grouped: Dict[str, List[Model]] = {}
    for model in models:
        grouped.setdefault(model.provider, []).append(model)
    return Indexes(
        providers_by_id=MappingProxyType(providers_by_id),
        models_by_key=MappingProxyType(models_by_key),
        models_by_provider=MappingProxyType({k: tuple(v) for k, v in grouped.items()}),
        aliases_by_key=build_aliases_index(models, logger),
    )


__all__ = ["Indexes", "build_indexes", "build_aliases_index"]
