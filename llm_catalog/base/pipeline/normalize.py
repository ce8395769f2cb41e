"""Normalizer: coerce raw records into canonical key shapes.

Normalization never fails. Records that are not mappings, or whose ids cannot
be coerced, pass through unchanged so the validator can reject and count them.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional

from ..constants import PROVIDER_ID_RE


def normalize_provider_id(value: Any) -> Optional[str]:
    """Coerce a provider identifier to its canonical lower snake case form.

    Returns ``None`` when ``value`` cannot be coerced.

    Examples:
        >>> normalize_provider_id("google-vertex")
        'google_vertex'
        >>> normalize_provider_id(" OpenAI ")
        'openai'
        >>> normalize_provider_id("bad provider!") is None
        True
    """
    if not isinstance(value, str):
        return None
    candidate = value.strip().lower().replace("-", "_")
    return candidate if PROVIDER_ID_RE.match(candidate) else None


def normalize_value(value: Any) -> Any:
    """Recursively convert mapping keys to strings and sequences to lists."""
    if isinstance(value, Mapping):
        return {str(k): normalize_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [normalize_value(v) for v in value]
    return value


def _coerce_id(record: Dict[str, Any], key: str) -> None:
    raw = record.get(key)
    canonical = normalize_provider_id(raw)
    if canonical is not None:
        record[key] = canonical


def _trim(record: Dict[str, Any], key: str) -> None:
    raw = record.get(key)
    if isinstance(raw, str):
        record[key] = raw.strip()


def normalize_provider(record: Any) -> Any:
    if not isinstance(record, Mapping):
        return record
    out = normalize_value(record)
    _coerce_id(out, "id")
    return out


def normalize_model(record: Any) -> Any:
    if not isinstance(record, Mapping):
        return record
    out = normalize_value(record)
    _coerce_id(out, "provider")
    _trim(out, "id")
    _trim(out, "provider_model_id")
    return out


def normalize_providers(records: Iterable[Any]) -> List[Any]:
    return [normalize_provider(r) for r in records]


def normalize_models(records: Iterable[Any]) -> List[Any]:
    return [normalize_model(r) for r in records]


def normalize_pattern_map(mapping: Mapping[Any, Any] | None) -> Dict[str, List[str]]:
    """Canonicalize provider keys of a ``{provider: [globs]}`` map.

    Uncoercible keys are dropped; a bare string value counts as one pattern.
    """
    out: Dict[str, List[str]] = {}
    for key, patterns in (mapping or {}).items():
        provider = normalize_provider_id(key)
        if provider is None:
            continue
        if isinstance(patterns, str):
            patterns = [patterns]
        out.setdefault(provider, []).extend(p for p in patterns if isinstance(p, str))
    return out


__all__ = [
    "normalize_provider_id",
    "normalize_value",
    "normalize_provider",
    "normalize_model",
    "normalize_providers",
    "normalize_models",
    "normalize_pattern_map",
]
