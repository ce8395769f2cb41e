"""Enricher: derive fields that are absent from merged model records."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from ..constants import FAMILY_SEPARATOR


def derive_family(model_id: str) -> Optional[str]:
    """Derive a family by dropping the last ``-`` separated segment.

    Date and version suffixes are treated like any other segment.

    Examples:
        >>> derive_family("gpt-4o-mini")
        'gpt-4o'
        >>> derive_family("claude-3-opus")
        'claude-3'
        >>> derive_family("gpt4") is None
        True
    """
    parts = model_id.split(FAMILY_SEPARATOR)
    if len(parts) < 2:
        return None
    return FAMILY_SEPARATOR.join(parts[:-1])


def enrich_model(model: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(model)
    if not out.get("family"):
        family = derive_family(out["id"])
        if family is not None:
            out["family"] = family
    if not out.get("provider_model_id"):
        out["provider_model_id"] = out["id"]
    return out


def enrich_models(models: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [enrich_model(m) for m in models]


__all__ = ["derive_family", "enrich_model", "enrich_models"]
