"""Conversion of upstream metadata into the catalog exchange shape.

Two input shapes are accepted:

* the catalog's own ``{"providers": [...], "models": [...]}`` payload, passed
  through unchanged;
* the models.dev ``api.json`` shape, keyed by provider id, each provider
  carrying a ``models`` mapping keyed by model id.

models.dev field mapping: ``api`` -> ``base_url``, ``limit`` -> ``limits``,
``tool_call`` -> ``capabilities.tools.enabled``, ``reasoning`` ->
``capabilities.reasoning.enabled``. Fields without a catalog counterpart are
kept under ``extra``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List

_PROVIDER_FIELDS = ("name", "env", "doc")
_MODEL_FIELDS = (
    "name",
    "family",
    "knowledge",
    "release_date",
    "last_updated",
    "cost",
    "modalities",
    "aliases",
    "tags",
    "deprecated",
)
_MODEL_MAPPED = ("id", "limit", "tool_call", "reasoning")


def is_catalog_payload(data: Any) -> bool:
    return isinstance(data, Mapping) and (
        isinstance(data.get("providers"), list) or isinstance(data.get("models"), list)
    )


def _provider_from_upstream(key: str, raw: Mapping[str, Any]) -> Dict[str, Any]:
    provider: Dict[str, Any] = {"id": raw.get("id") or key}
    for field in _PROVIDER_FIELDS:
        if field in raw:
            provider[field] = raw[field]
    if "api" in raw:
        provider["base_url"] = raw["api"]
    extra = {
        k: v for k, v in raw.items() if k not in ("id", "api", "models", *_PROVIDER_FIELDS)
    }
    if extra:
        provider["extra"] = extra
    return provider


def _model_from_upstream(provider_id: str, key: str, raw: Mapping[str, Any]) -> Dict[str, Any]:
    model: Dict[str, Any] = {"id": raw.get("id") or key, "provider": provider_id}
    for field in _MODEL_FIELDS:
        if field in raw:
            model[field] = raw[field]
    if "limit" in raw:
        model["limits"] = raw["limit"]
    capabilities: Dict[str, Any] = {}
    if "tool_call" in raw:
        capabilities["tools"] = {"enabled": bool(raw["tool_call"])}
    if "reasoning" in raw:
        capabilities["reasoning"] = {"enabled": bool(raw["reasoning"])}
    if capabilities:
        model["capabilities"] = capabilities
    extra = {k: v for k, v in raw.items() if k not in (*_MODEL_FIELDS, *_MODEL_MAPPED)}
    if extra:
        model["extra"] = extra
    return model


def to_catalog_payload(data: Any) -> Dict[str, List[Dict[str, Any]]]:
    """Return ``{"providers": [...], "models": [...]}`` for upstream ``data``.

    Raises:
        ValueError: If ``data`` is not a mapping.
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"upstream data must be a JSON object, got {type(data).__name__}")
    if is_catalog_payload(data):
        return {
            "providers": list(data.get("providers") or []),
            "models": list(data.get("models") or []),
        }
    providers: List[Dict[str, Any]] = []
    models: List[Dict[str, Any]] = []
    for key, raw in data.items():
        if not isinstance(raw, Mapping):
            continue
        provider = _provider_from_upstream(str(key), raw)
        providers.append(provider)
        raw_models = raw.get("models") or {}
        if isinstance(raw_models, Mapping):
            items = raw_models.items()
        else:
            items = ((m.get("id"), m) for m in raw_models if isinstance(m, Mapping))
        for model_key, raw_model in items:
            if isinstance(raw_model, Mapping):
                models.append(_model_from_upstream(provider["id"], str(model_key), raw_model))
    return {"providers": providers, "models": models}


__all__ = ["to_catalog_payload", "is_catalog_payload"]
