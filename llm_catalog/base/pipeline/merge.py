"""Merger: precedence-ordered combination of validated records.

One generic deep merge is shared by providers and models:

* mapping + mapping: merged key by key, recursively;
* sequence + sequence: concatenated, duplicates removed (first seen wins);
* anything else: the higher-precedence value replaces the lower one.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from ..filters import PatternMap, matches_any

Record = Dict[str, Any]
ModelLayer = Tuple[Sequence[Record], PatternMap]

MAPPING = "mapping"
SEQUENCE = "sequence"
SCALAR = "scalar"


def value_kind(value: Any) -> str:
    if isinstance(value, Mapping):
        return MAPPING
    if isinstance(value, (list, tuple)):
        return SEQUENCE
    return SCALAR


def _dedupe(items: Iterable[Any]) -> List[Any]:
    out: List[Any] = []
    for item in items:
        if item not in out:
            out.append(item)
    return out


def deep_merge(lower: Any, higher: Any) -> Any:
    """Merge ``higher`` onto ``lower`` and return a new value."""
    kind = value_kind(higher)
    if kind != value_kind(lower) or kind == SCALAR:
        return higher
    if kind == SEQUENCE:
        return _dedupe([*lower, *higher])
    merged = dict(lower)
    for key, value in higher.items():
        merged[key] = deep_merge(merged[key], value) if key in merged else value
    return merged


def _merge_keyed(base: Iterable[Record], incoming: Iterable[Record], key) -> List[Record]:
    merged: Dict[Any, Record] = {}
    for record in base:
        merged[key(record)] = record
    for record in incoming:
        k = key(record)
        merged[k] = deep_merge(merged[k], record) if k in merged else record
    return list(merged.values())


def merge_providers(base: Iterable[Record], incoming: Iterable[Record]) -> List[Record]:
    """Fold ``incoming`` providers onto ``base``, keyed by provider id."""
    return _merge_keyed(base, incoming, lambda r: r["id"])


def merge_models(base: Iterable[Record], incoming: Iterable[Record]) -> List[Record]:
    """Fold ``incoming`` models onto ``base``, keyed by ``(provider, id)``."""
    return _merge_keyed(base, incoming, lambda r: (r["provider"], r["id"]))


def drop_excluded(models: Iterable[Record], excludes: PatternMap) -> List[Record]:
    """Remove models whose id matches an exclude pattern for their provider."""
    if not excludes:
        return list(models)
    return [m for m in models if not matches_any(excludes.get(m["provider"], ()), m["id"])]


def merge_model_layers(layers: Sequence[ModelLayer]) -> List[Record]:
    """Merge model layers ordered lowest to highest precedence.

    Each layer is ``(models, excludes)``. Excludes of a layer are applied to
    that layer and every lower one before merging; higher layers are left
    alone, so they can re-introduce an excluded model.
    """
    contributions = [list(models) for models, _ in layers]
    for level, (_, excludes) in enumerate(layers):
        for lower in range(level + 1):
            contributions[lower] = drop_excluded(contributions[lower], excludes)
    merged: List[Record] = []
    for models in contributions:
        merged = merge_models(merged, models)
    return merged


__all__ = [
    "value_kind",
    "deep_merge",
    "merge_providers",
    "merge_models",
    "drop_excluded",
    "merge_model_layers",
]
