"""Spec resolver: ``"provider:model"`` parsing and model resolution.

All functions read a single snapshot value passed by the caller and never
raise for domain failures; they return :class:`CatalogResult` values.

Examples (against a snapshot containing ``openai:gpt-4o`` with alias
``gpt4o``):

```
parse_spec("openai:gpt-4o-mini", snap).value      # ("openai", "gpt-4o-mini")
parse_spec("gpt-4o", snap).error                  # ErrorCode.INVALID_FORMAT
resolve("openai:gpt4o", snap).value.model_id       # "gpt-4o"
resolve("gpt-4o", snap, scope="openai").ok         # True
```
"""
from __future__ import annotations

from typing import Any, List, NamedTuple, Optional, Tuple

from .constants import SPEC_DELIMITER
from .errors import CatalogResult, ErrorCode
from .models import Model, Snapshot
from .pipeline.normalize import normalize_provider_id


class Resolution(NamedTuple):
    """A resolved model: provider id, canonical model id and the record."""

    provider: str
    model_id: str
    model: Model


def parse_provider(value: Any, snapshot: Optional[Snapshot]) -> CatalogResult[str]:
    """Coerce ``value`` to a provider id present in ``snapshot``.

    Returns ``bad_provider`` when coercion fails and ``unknown_provider`` when
    the id is absent (or nothing is published).
    """
    provider = normalize_provider_id(value)
    if provider is None:
        return CatalogResult.failure(ErrorCode.BAD_PROVIDER, f"cannot coerce provider {value!r}")
    if snapshot is None or provider not in snapshot.providers_by_id:
        return CatalogResult.failure(ErrorCode.UNKNOWN_PROVIDER, f"unknown provider {provider!r}")
    return CatalogResult.success(provider)


def parse_spec(spec: Any, snapshot: Optional[Snapshot]) -> CatalogResult[Tuple[str, str]]:
    """Split ``spec`` on its first colon into ``(provider, model_id)``.

    Model ids may themselves contain colons. A missing delimiter or an empty
    model part is ``invalid_format``.
    """
    if not isinstance(spec, str) or SPEC_DELIMITER not in spec:
        return CatalogResult.failure(ErrorCode.INVALID_FORMAT, f"expected 'provider:model', got {spec!r}")
    provider_part, _, model_part = spec.partition(SPEC_DELIMITER)
    model_id = model_part.strip()
    if not model_id:
        return CatalogResult.failure(ErrorCode.INVALID_FORMAT, f"empty model id in {spec!r}")
    parsed = parse_provider(provider_part, snapshot)
    if not parsed.ok:
        return parsed
    return CatalogResult.success((parsed.value, model_id))


def _lookup(snapshot: Snapshot, provider: str, model_id: str) -> Optional[Resolution]:
    canonical = snapshot.aliases_by_key.get((provider, model_id), model_id)
    model = snapshot.models_by_key.get((provider, canonical))
    if model is None:
        return None
    return Resolution(provider, canonical, model)


def resolve_model(provider: Any, model_id: str, snapshot: Optional[Snapshot]) -> CatalogResult[Resolution]:
    """Resolve a ``(provider, id)`` pair, substituting aliases first."""
    canonical_provider = normalize_provider_id(provider)
    if canonical_provider is None:
        return CatalogResult.failure(ErrorCode.BAD_PROVIDER, f"cannot coerce provider {provider!r}")
    found = _lookup(snapshot, canonical_provider, model_id) if snapshot is not None else None
    if found is None:
        return CatalogResult.failure(ErrorCode.NOT_FOUND, f"{canonical_provider}:{model_id} not found")
    return CatalogResult.success(found)


def resolve_bare(model_id: str, snapshot: Optional[Snapshot]) -> CatalogResult[Resolution]:
    """Resolve an unqualified id against every provider of ``snapshot``."""
    if snapshot is None:
        return CatalogResult.failure(ErrorCode.NOT_FOUND, f"{model_id} not found")
    matches: List[Resolution] = []
    for provider in snapshot.providers_by_id:
        found = _lookup(snapshot, provider, model_id)
        if found is not None:
            matches.append(found)
    if not matches:
        return CatalogResult.failure(ErrorCode.NOT_FOUND, f"{model_id} not found")
    if len(matches) > 1:
        providers = ", ".join(sorted(m.provider for m in matches))
        return CatalogResult.failure(ErrorCode.AMBIGUOUS, f"{model_id} exists under {providers}")
    return CatalogResult.success(matches[0])


def resolve(
    value: Any,
    snapshot: Optional[Snapshot],
    *,
    scope: Any = None,
) -> CatalogResult[Resolution]:
    """Resolve a colon spec, a ``(provider, id)`` pair or a bare id.

    Args:
        value: ``"provider:model"``, ``(provider, model)`` or ``"model"``.
        snapshot: Snapshot to resolve against.
        scope: Provider restriction for a bare id.

    Returns:
        ``Resolution`` on success; otherwise ``invalid_format``,
        ``bad_provider``, ``unknown_provider``, ``not_found`` or ``ambiguous``.
    """
    if isinstance(value, str):
        if SPEC_DELIMITER in value:
            parsed = parse_spec(value, snapshot)
            if not parsed.ok:
                return parsed
            provider, model_id = parsed.value
            return resolve_model(provider, model_id, snapshot)
        model_id = value.strip()
        if not model_id:
            return CatalogResult.failure(ErrorCode.INVALID_FORMAT, "empty model id")
        if scope is None:
            return resolve_bare(model_id, snapshot)
        return resolve_model(scope, model_id, snapshot)
    if isinstance(value, (tuple, list)) and len(value) == 2 and isinstance(value[1], str):
        return resolve_model(value[0], value[1], snapshot)
    return CatalogResult.failure(ErrorCode.INVALID_FORMAT, f"unsupported spec {value!r}")


__all__ = [
    "Resolution",
    "parse_provider",
    "parse_spec",
    "resolve_model",
    "resolve_bare",
    "resolve",
]
