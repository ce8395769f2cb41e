"""Runtime override extension point.

Applications subclass :class:`CatalogOverrides` (or supply any object, class
or module exposing ``providers()``, ``models()`` and/or ``excludes()``) and
register it through ``CatalogConfig.overrides_module``. Its records take
precedence over both the packaged dataset and config overrides.

Example:

```
class MyOverrides(CatalogOverrides):
    def models(self):
        return [{"id": "gpt-4o-mini", "provider": "openai",
                 "capabilities": {"tools": {"enabled": True}}}]

    def excludes(self):
        return {"openai": ["gpt-5-pro", "o3-*"]}
```
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from importlib import import_module
from typing import Any, Dict, List, Optional

from .logging import get_logger, log_event

_LOGGER_NAME = "llm_catalog.overrides"
_OPERATIONS = ("providers", "models", "excludes")


class CatalogOverrides:
    """Default override provider contributing nothing."""

    def providers(self) -> List[Dict[str, Any]]:
        return []

    def models(self) -> List[Dict[str, Any]]:
        return []

    def excludes(self) -> Dict[str, List[str]]:
        return {}


@dataclass(frozen=True)
class OverrideSet:
    """Materialized result of an override provider."""

    providers: List[Any] = field(default_factory=list)
    models: List[Any] = field(default_factory=list)
    excludes: Dict[Any, Any] = field(default_factory=dict)


def _unavailable(ref: Any, reason: str) -> None:
    log_event(
        get_logger(_LOGGER_NAME),
        "catalog.overrides.unavailable",
        level=logging.WARNING,
        ref=repr(ref),
        reason=reason,
    )


def _import_ref(ref: str) -> Any:
    """Import ``pkg.module``, ``pkg.module:Attr`` or ``pkg.module.Attr``."""
    if ":" in ref:
        module_name, _, attr = ref.partition(":")
        return getattr(import_module(module_name), attr)
    try:
        return import_module(ref)
    except ImportError:
        module_name, _, attr = ref.rpartition(".")
        if not module_name:
            raise
        return getattr(import_module(module_name), attr)


def resolve_overrides_provider(ref: Any) -> Optional[Any]:
    """Turn a configured overrides reference into a provider object.

    Returns ``None`` (with a ``catalog.overrides.unavailable`` warning) when
    the reference cannot be imported or exposes none of the operations.
    """
    if ref is None:
        return None
    target = ref
    if isinstance(ref, str):
        try:
            target = _import_ref(ref)
        except (ImportError, AttributeError) as exc:
            _unavailable(ref, f"import failed: {exc}")
            return None
    if isinstance(target, type):
        target = target()
    if not any(callable(getattr(target, op, None)) for op in _OPERATIONS):
        _unavailable(ref, "no providers/models/excludes operation")
        return None
    return target


def _call(provider: Any, op: str, default: Any) -> Any:
    fn = getattr(provider, op, None)
    if not callable(fn):
        return default
    result = fn()
    return default if result is None else result


def get_overrides(ref: Any) -> OverrideSet:
    """Collect providers, models and excludes from an override reference.

    Missing operations default to empty values.

    Raises:
        TypeError: If ``providers()``/``models()`` return a non-sequence or
            ``excludes()`` returns a non-mapping.
    """
    provider = resolve_overrides_provider(ref)
    if provider is None:
        return OverrideSet()
    providers = _call(provider, "providers", [])
    models = _call(provider, "models", [])
    excludes = _call(provider, "excludes", {})
    for name, value in (("providers", providers), ("models", models)):
        if not isinstance(value, (list, tuple)):
            raise TypeError(f"{name}() must return a list, got {type(value).__name__}")
    if not isinstance(excludes, Mapping):
        raise TypeError(f"excludes() must return a mapping, got {type(excludes).__name__}")
    return OverrideSet(providers=list(providers), models=list(models), excludes=dict(excludes))


__all__ = [
    "CatalogOverrides",
    "OverrideSet",
    "resolve_overrides_provider",
    "get_overrides",
]
