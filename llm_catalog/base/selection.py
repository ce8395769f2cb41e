"""Capability-based model selection.

Predicate keys map onto the nested capability tree:

* ``chat`` / ``embeddings``: top-level flags
* ``reasoning``: ``reasoning.enabled``
* ``tools`` and ``tools_streaming`` / ``tools_strict`` / ``tools_parallel``
* ``json_native`` / ``json_schema`` / ``json_strict``
* ``streaming_text`` / ``streaming_tool_calls``

A model with no capability tree satisfies no ``require`` key and every
``forbid`` key.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from .constants import CAPABILITY_KEYS
from .errors import CatalogResult, ErrorCode
from .models import Capabilities, Model, Snapshot
from .pipeline.normalize import normalize_provider_id

Predicate = Callable[[Capabilities], bool]

PREDICATES: Dict[str, Predicate] = {
    "chat": lambda c: c.chat,
    "embeddings": lambda c: c.embeddings,
    "reasoning": lambda c: c.reasoning.enabled,
    "tools": lambda c: c.tools.enabled,
    "tools_streaming": lambda c: c.tools.streaming,
    "tools_strict": lambda c: c.tools.strict,
    "tools_parallel": lambda c: c.tools.parallel,
    "json_native": lambda c: c.json_output.native,
    "json_schema": lambda c: c.json_output.json_schema,
    "json_strict": lambda c: c.json_output.strict,
    "streaming_text": lambda c: c.streaming.text,
    "streaming_tool_calls": lambda c: c.streaming.tool_calls,
}


def capability_keys(value: Any) -> Tuple[str, ...]:
    """Normalize a ``require``/``forbid`` argument into a tuple of keys.

    Accepts ``None``, a single key, an iterable of keys or a ``{key: bool}``
    mapping (falsy entries ignored).

    Raises:
        ValueError: For keys outside the supported predicate set.
    """
    if value is None:
        return ()
    if isinstance(value, str):
        keys: Iterable[Any] = (value,)
    elif isinstance(value, Mapping):
        keys = [k for k, flag in value.items() if flag]
    else:
        keys = value
    out = tuple(str(k) for k in keys)
    unknown = [k for k in out if k not in PREDICATES]
    if unknown:
        raise ValueError(
            f"unknown capability keys: {', '.join(unknown)}; expected one of {', '.join(CAPABILITY_KEYS)}"
        )
    return out


def has_capability(model: Model, key: str) -> bool:
    caps = model.capabilities
    if caps is None:
        return False
    return bool(PREDICATES[key](caps))


def matches(model: Model, require: Sequence[str] = (), forbid: Sequence[str] = ()) -> bool:
    return all(has_capability(model, k) for k in require) and not any(
        has_capability(model, k) for k in forbid
    )


def filter_models(models: Iterable[Model], require: Any = None, forbid: Any = None) -> List[Model]:
    """Return the models satisfying every ``require`` and no ``forbid`` key."""
    req = capability_keys(require)
    forb = capability_keys(forbid)
    return [m for m in models if matches(m, req, forb)]


def order_by_preference(models: Iterable[Model], prefer: Sequence[str]) -> List[Model]:
    """Stable-sort ``models`` so preferred providers come first."""
    rank = {p: i for i, p in enumerate(prefer)}
    fallback = len(rank)
    return sorted(models, key=lambda m: rank.get(m.provider, fallback))


def select(
    snapshot: Optional[Snapshot],
    *,
    require: Any = None,
    forbid: Any = None,
    prefer: Optional[Sequence[Any]] = None,
    scope: Any = None,
) -> CatalogResult[Model]:
    """Return the first model, in preference order, matching the predicates.

    Args:
        snapshot: Snapshot to select from.
        require: Capability keys that must hold.
        forbid: Capability keys that must not hold.
        prefer: Provider ids in preference order; defaults to the snapshot's.
        scope: Restrict candidates to one provider.

    Returns:
        The selected ``Model``; ``no_match`` when nothing qualifies,
        ``bad_provider`` for an uncoercible scope.

    Raises:
        ValueError: For unknown capability keys.
    """
    req = capability_keys(require)
    forb = capability_keys(forbid)
    if snapshot is None:
        return CatalogResult.failure(ErrorCode.NO_MATCH, "catalog not loaded")
    if scope is None:
        candidates: Sequence[Model] = snapshot.models
    else:
        provider = normalize_provider_id(scope)
        if provider is None:
            return CatalogResult.failure(ErrorCode.BAD_PROVIDER, f"cannot coerce provider {scope!r}")
        candidates = snapshot.models_by_provider.get(provider, ())
    order = snapshot.prefer if prefer is None else [p for p in map(normalize_provider_id, prefer) if p]
    for model in order_by_preference(candidates, order):
        if matches(model, req, forb):
            return CatalogResult.success(model)
    return CatalogResult.failure(ErrorCode.NO_MATCH, "no model satisfies the requested capabilities")


__all__ = [
    "PREDICATES",
    "capability_keys",
    "has_capability",
    "matches",
    "filter_models",
    "order_by_preference",
    "select",
]
