"""Catalog build orchestrator.

Stages run in strict order; the first failing stage aborts the build:

1. ingest    - collect packaged, config and behaviour sources
2. normalize - canonical provider ids, trimmed model ids
3. validate  - drop and count records failing the schema
4. merge     - precedence fold with per-level excludes
5. enrich    - derived ``family`` and ``provider_model_id``
6. filter    - allow/deny patterns, deny wins
7. index     - lookup maps and the immutable ``Snapshot``
8. viable    - reject an empty catalog

The returned snapshot carries no epoch; publishing is the store's job.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence

from pydantic import ValidationError

from ...config import CatalogConfig, get_config
from ..errors import CatalogError, ErrorCode
from ..filters import apply_filters, compile_filters, compile_pattern_map
from ..log_support import LogContext
from ..logging import get_logger, log_event
from ..models import Model, Provider, Snapshot, SnapshotMeta
from ..overrides import OverrideSet, get_overrides
from ..repositories.packaged import load_packaged
from .enrich import enrich_models
from .index import build_indexes
from .merge import merge_model_layers, merge_providers
from .normalize import normalize_models, normalize_pattern_map, normalize_providers
from .sources import SourceSet, ingest
from .validate import ensure_viable, validate_models, validate_providers

_LOGGER_NAME = "llm_catalog.engine"

Record = Dict[str, Any]


@dataclass
class _Layer:
    """Validated records of one source plus its effective excludes."""

    name: str
    providers: List[Record]
    models: List[Record]
    excludes: Dict[str, List[str]]


def _log_dropped(logger: logging.Logger, source: str, kind: str, dropped: int) -> None:
    if dropped > 0:
        log_event(
            logger,
            "catalog.validate.dropped",
            LogContext(source=source, stage="validate"),
            level=logging.WARNING,
            kind=kind,
            dropped=dropped,
        )


def _layer_excludes(source_excludes: Dict[str, List[str]], providers: Sequence[Record]) -> Dict[str, List[str]]:
    out = {k: list(v) for k, v in source_excludes.items()}
    for provider in providers:
        patterns = provider.get("exclude_models") or []
        if patterns:
            out.setdefault(provider["id"], []).extend(patterns)
    return out


def _prepare(source: SourceSet, logger: logging.Logger) -> _Layer:
    providers, dropped_p = validate_providers(normalize_providers(source.providers))
    models, dropped_m = validate_models(normalize_models(source.models))
    _log_dropped(logger, source.name, "providers", dropped_p)
    _log_dropped(logger, source.name, "models", dropped_m)
    excludes = _layer_excludes(normalize_pattern_map(source.excludes), providers)
    return _Layer(source.name, providers, models, excludes)


def _materialize(schema, records: Sequence[Record], kind: str, logger: logging.Logger) -> List[Any]:
    out: List[Any] = []
    dropped = 0
    for record in records:
        try:
            out.append(schema.model_validate(record))
        except ValidationError:
            dropped += 1
    _log_dropped(logger, "merged", kind, dropped)
    return out


def _load_packaged_source(config: CatalogConfig) -> Optional[Mapping[str, Any]]:
    try:
        return load_packaged(config.packaged_path)
    except (ValueError, OSError) as exc:
        # JSONDecodeError and UnicodeDecodeError are both ValueError
        raise CatalogError(
            code=ErrorCode.INVALID_SOURCE,
            message=f"packaged snapshot is unreadable: {exc}",
            stage="ingest",
        ) from exc


def build(
    config: CatalogConfig,
    packaged: Optional[Mapping[str, Any]],
    overrides: OverrideSet,
    logger: Optional[logging.Logger] = None,
) -> Snapshot:
    """Run stages 1-8 over explicit inputs and return the unpublished snapshot.

    Raises:
        CatalogError: ``invalid_source`` or ``empty_catalog``.
    """
    logger = logger or get_logger(_LOGGER_NAME)
    layers = [_prepare(source, logger) for source in ingest(config, packaged, overrides)]

    merged_providers: List[Record] = []
    for layer in layers:
        merged_providers = merge_providers(merged_providers, layer.providers)
    merged_models = merge_model_layers(
        [(layer.models, compile_pattern_map(layer.excludes)) for layer in layers]
    )

    enriched = enrich_models(merged_models)
    providers: List[Provider] = _materialize(Provider, merged_providers, "providers", logger)
    models: List[Model] = _materialize(Model, enriched, "models", logger)

    filters = compile_filters(config.allow, config.deny)
    filtered = apply_filters(models, filters)

    indexes = build_indexes(providers, filtered, logger)
    snapshot = Snapshot(
        providers_by_id=indexes.providers_by_id,
        models_by_key=indexes.models_by_key,
        aliases_by_key=indexes.aliases_by_key,
        models_by_provider=indexes.models_by_provider,
        providers=tuple(providers),
        models=tuple(filtered),
        filters=filters,
        prefer=tuple(config.prefer),
        meta=SnapshotMeta(),
    )
    ensure_viable(snapshot.providers, snapshot.models)
    return snapshot


def run(
    config: Optional[CatalogConfig] = None,
    *,
    packaged: Optional[Mapping[str, Any]] = None,
    overrides: Optional[OverrideSet] = None,
) -> Snapshot:
    """Build a catalog snapshot.

    Args:
        config: Catalog configuration; ``get_config()`` when omitted.
        packaged: Packaged payload; read from ``config.packaged_path`` or the
            bundled dataset when omitted.
        overrides: Behaviour overrides; resolved from
            ``config.overrides_module`` when omitted.

    Returns:
        The built snapshot (epoch ``None``).

    Raises:
        CatalogError: On the first failing stage, including ``empty_catalog``.
    """
    logger = get_logger(_LOGGER_NAME)
    config = config or get_config()
    try:
        if packaged is None:
            packaged = _load_packaged_source(config)
        if overrides is None:
            overrides = get_overrides(config.overrides_module)
        snapshot = build(config, packaged, overrides, logger)
    except CatalogError as exc:
        log_event(
            logger,
            "catalog.build.failed",
            LogContext(stage=exc.stage),
            level=logging.WARNING,
            code=exc.code.value,
            message=exc.message,
        )
        raise
    log_event(
        logger,
        "catalog.build.complete",
        providers=len(snapshot.providers),
        models=len(snapshot.models),
        generated_at=snapshot.meta.generated_at,
    )
    return snapshot


__all__ = ["build", "run"]
