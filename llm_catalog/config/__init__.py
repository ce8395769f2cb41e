"""Unified configuration layer for the catalog.

Goals
-----
* Describe every option consumed by catalog ingestion in one validated model
  (``CatalogConfig``).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by
       ``LLM_CATALOG_CONFIG_FILE``
    3. Environment variables (``LLM_CATALOG_PREFER``,
       ``LLM_CATALOG_OVERRIDES_MODULE``, ``LLM_CATALOG_PACKAGED_PATH``)
    4. In-code overrides passed to ``get_config``
* Provide a single call site: ``get_config()``.

External Config File
--------------------
JSON is attempted first, then YAML. Structure example:

```
prefer: [anthropic, openai]
allow:
  openai: ["gpt-4*"]
deny:
  openai: ["gpt-4-32k"]
overrides:
  models:
    - {id: gpt-4o, provider: openai, tags: [flagship]}
  exclude:
    openai: ["gpt-3*"]
```

Provider keys in ``allow``/``deny``/``overrides.exclude`` and ``prefer`` entries
are coerced to canonical provider ids; uncoercible entries are dropped with a
``catalog.config.invalid`` warning.
"""
from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator

from ..base.constants import ALLOW_ALL
from ..base.filters import is_allow_all
from ..base.logging import get_logger, log_event
from ..base.pipeline.normalize import normalize_provider_id
from .defaults import (
    CONFIG_FILE_ENV,
    OVERRIDES_MODULE_ENV,
    PACKAGED_PATH_ENV,
    PREFER_ENV,
)

_LOGGER_NAME = "llm_catalog.config"


def empty_overrides() -> Dict[str, Any]:
    return {"providers": [], "models": [], "exclude": {}}


def _warn_invalid(option: str, value: Any, reason: str) -> None:
    log_event(
        get_logger(_LOGGER_NAME),
        "catalog.config.invalid",
        level=logging.WARNING,
        option=option,
        value=repr(value),
        reason=reason,
    )


def _pattern_map(option: str, value: Mapping[Any, Any]) -> Dict[str, List[str]]:
    out: Dict[str, List[str]] = {}
    for key, patterns in value.items():
        provider = normalize_provider_id(key)
        if provider is None:
            _warn_invalid(option, key, "provider id cannot be coerced")
            continue
        if isinstance(patterns, str):
            patterns = [patterns]
        if not isinstance(patterns, (list, tuple)):
            _warn_invalid(option, patterns, "patterns must be a list of strings")
            continue
        out.setdefault(provider, []).extend(str(p) for p in patterns)
    return out


class CatalogConfig(BaseModel):
    """Options consumed by catalog ingestion.

    Attributes:
        overrides: ``{providers: [], models: [], exclude: {}}`` applied above
            the packaged dataset.
        overrides_module: Override provider object, class or import reference
            (``"pkg.module"``, ``"pkg.module:Attr"``); highest precedence.
        allow: ``"all"`` or ``{provider: [globs]}``.
        deny: ``{provider: [globs]}``; deny always wins over allow.
        prefer: Provider ids in preference order for selection.
        packaged_path: Alternative packaged snapshot file.
    """

    overrides: Dict[str, Any] = Field(default_factory=empty_overrides)
    overrides_module: Any = None
    allow: Union[str, Dict[str, List[str]]] = ALLOW_ALL
    deny: Dict[str, List[str]] = Field(default_factory=dict)
    prefer: List[str] = Field(default_factory=list)
    packaged_path: Optional[str] = None

    @field_validator("overrides", mode="before")
    @classmethod
    def _normalize_overrides(cls, value: Any) -> Dict[str, Any]:
        out = empty_overrides()
        if value is None:
            return out
        if not isinstance(value, Mapping):
            _warn_invalid("overrides", value, "expected a mapping")
            return out
        for key in ("providers", "models"):
            if value.get(key) is not None:
                out[key] = value[key]
        exclude = value.get("exclude")
        if isinstance(exclude, Mapping):
            out["exclude"] = _pattern_map("overrides.exclude", exclude)
        elif exclude is not None:
            # left as-is so ingestion reports the malformed source
            out["exclude"] = exclude
        return out

    @field_validator("allow", mode="before")
    @classmethod
    def _normalize_allow(cls, value: Any) -> Any:
        if is_allow_all(value):
            return ALLOW_ALL
        if isinstance(value, Mapping):
            return _pattern_map("allow", value)
        raise ValueError(f"allow must be {ALLOW_ALL!r} or a mapping of provider to patterns")

    @field_validator("deny", mode="before")
    @classmethod
    def _normalize_deny(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, Mapping):
            return _pattern_map("deny", value)
        raise ValueError("deny must be a mapping of provider to patterns")

    @field_validator("prefer", mode="before")
    @classmethod
    def _normalize_prefer(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            value = [v for v in value.split(",") if v.strip()]
        if not isinstance(value, (list, tuple)):
            raise ValueError("prefer must be a list of provider ids")
        out: List[str] = []
        for item in value:
            provider = normalize_provider_id(item)
            if provider is None:
                _warn_invalid("prefer", item, "provider id cannot be coerced")
            elif provider not in out:
                out.append(provider)
        return out

    @field_validator("packaged_path", mode="before")
    @classmethod
    def _path_to_str(cls, value: Any) -> Any:
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        return value


def _load_external_config() -> Dict[str, Any]:
    path = os.getenv(CONFIG_FILE_ENV)
    if not path:
        return {}
    p = Path(path)
    if not p.exists():
        _warn_invalid(CONFIG_FILE_ENV, path, "file not found")
        return {}
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError:
            _warn_invalid(CONFIG_FILE_ENV, path, "neither JSON nor YAML")
            return {}
    if not isinstance(data, dict):
        _warn_invalid(CONFIG_FILE_ENV, path, "top level must be a mapping")
        return {}
    return data


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    if (prefer := os.getenv(PREFER_ENV)) is not None:
        out["prefer"] = prefer
    if module := os.getenv(OVERRIDES_MODULE_ENV):
        out["overrides_module"] = module
    if packaged := os.getenv(PACKAGED_PATH_ENV):
        out["packaged_path"] = packaged
    return out


def get_config(overrides: Optional[Dict[str, Any]] = None) -> CatalogConfig:
    """Return the merged catalog configuration.

    Merge order (later wins): defaults -> external config -> env vars -> overrides

    Raises:
        pydantic.ValidationError: If ``allow``/``deny``/``prefer`` have an
            unusable shape.
    """
    cfg: Dict[str, Any] = {}
    cfg |= _load_external_config()
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return CatalogConfig.model_validate(cfg)


__all__ = [
    "CatalogConfig",
    "get_config",
    "empty_overrides",
]
