"""Public query facade over the published catalog snapshot.

Every function reads the snapshot once from a :class:`SnapshotStore` (the
process-wide store unless ``store=`` is given) and works on that value only,
so a concurrent ``load`` never affects an in-flight query.

Lookups that can fail for domain reasons return :class:`CatalogResult`;
convenience accessors return ``None``/``False``/``[]`` instead.

Example:

```
import llm_catalog

llm_catalog.load()
llm_catalog.resolve("openai:gpt-4o-mini").value.model.limits
llm_catalog.select(require=["tools", "json_native"], prefer=["anthropic"])
```
"""
from __future__ import annotations

import threading
import weakref
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from .base import spec as _spec
from .base import selection as _selection
from .base.errors import CatalogResult
from .base.models import Capabilities, Model, Provider, Snapshot
from .base.pipeline import engine
from .base.pipeline.normalize import normalize_provider_id
from .base.spec import Resolution
from .base.store import SnapshotStore, default_store
from .config import CatalogConfig

_last_load_lock = threading.Lock()
LoadArgs = Tuple[Optional[CatalogConfig], Optional[Mapping[str, Any]]]

# last ``load`` arguments per store, consumed by ``reload``
_last_load: "weakref.WeakKeyDictionary[SnapshotStore, LoadArgs]" = weakref.WeakKeyDictionary()


def _store(store: Optional[SnapshotStore]) -> SnapshotStore:
    return store if store is not None else default_store()


# ---- lifecycle ----


def load(
    config: Optional[CatalogConfig] = None,
    *,
    store: Optional[SnapshotStore] = None,
    packaged: Optional[Mapping[str, Any]] = None,
) -> Snapshot:
    """Build the catalog and publish it.

    Args:
        config: Catalog configuration; ``get_config()`` when omitted.
        store: Target store.
        packaged: Explicit packaged payload instead of the bundled dataset.

    Returns:
        The published snapshot, epoch assigned.

    Raises:
        CatalogError: When the build fails; the current snapshot is kept.
    """
    target = _store(store)
    snap = engine.run(config, packaged=packaged)
    published = target.publish_snapshot(snap)
    with _last_load_lock:
        _last_load[target] = (config, packaged)
    return published


def reload(*, store: Optional[SnapshotStore] = None) -> Snapshot:
    """Rebuild with the arguments of the last ``load`` into the same store."""
    target = _store(store)
    with _last_load_lock:
        config, packaged = _last_load.get(target, (None, None))
    return load(config, store=target, packaged=packaged)


def snapshot(store: Optional[SnapshotStore] = None) -> Optional[Snapshot]:
    return _store(store).get()


def epoch(store: Optional[SnapshotStore] = None) -> int:
    return _store(store).epoch


# ---- providers ----


def list_providers(store: Optional[SnapshotStore] = None) -> List[str]:
    """Return the provider ids of the published catalog, sorted."""
    snap = _store(store).get()
    return sorted(snap.providers_by_id) if snap is not None else []


def get_provider(provider: Any, store: Optional[SnapshotStore] = None) -> Optional[Provider]:
    snap = _store(store).get()
    key = normalize_provider_id(provider)
    if snap is None or key is None:
        return None
    return snap.providers_by_id.get(key)


# ---- models ----


def list_models(
    provider: Any,
    *,
    require: Any = None,
    forbid: Any = None,
    store: Optional[SnapshotStore] = None,
) -> List[Model]:
    """Return a provider's models (source order) filtered by capabilities.

    Raises:
        ValueError: For unknown capability keys.
    """
    snap = _store(store).get()
    key = normalize_provider_id(provider)
    models = snap.models_by_provider.get(key, ()) if snap is not None and key else ()
    return _selection.filter_models(models, require=require, forbid=forbid)


def get_model(provider: Any, model_id: str, store: Optional[SnapshotStore] = None) -> Optional[Model]:
    """Return a model by provider and id or alias, ``None`` when absent."""
    result = _spec.resolve_model(provider, model_id, _store(store).get())
    return result.value.model if result.ok else None


def capabilities(value: Any, store: Optional[SnapshotStore] = None) -> Optional[Capabilities]:
    """Return the capability tree of a resolvable spec, else ``None``."""
    result = _spec.resolve(value, _store(store).get())
    return result.value.model.capabilities if result.ok else None


def allowed(value: Any, store: Optional[SnapshotStore] = None) -> bool:
    """Return whether a spec resolves to a model that passed allow/deny."""
    return _spec.resolve(value, _store(store).get()).ok


# ---- spec resolution and selection ----


def parse_provider(value: Any, *, store: Optional[SnapshotStore] = None) -> CatalogResult[str]:
    return _spec.parse_provider(value, _store(store).get())


def parse_spec(value: Any, *, store: Optional[SnapshotStore] = None) -> CatalogResult[Tuple[str, str]]:
    return _spec.parse_spec(value, _store(store).get())


def resolve(
    value: Any,
    *,
    scope: Any = None,
    store: Optional[SnapshotStore] = None,
) -> CatalogResult[Resolution]:
    return _spec.resolve(value, _store(store).get(), scope=scope)


def select(
    *,
    require: Any = None,
    forbid: Any = None,
    prefer: Optional[Sequence[Any]] = None,
    scope: Any = None,
    store: Optional[SnapshotStore] = None,
) -> CatalogResult[Model]:
    """Select the first qualifying model; see :func:`llm_catalog.base.selection.select`."""
    return _selection.select(
        _store(store).get(), require=require, forbid=forbid, prefer=prefer, scope=scope
    )


__all__ = [
    "load",
    "reload",
    "snapshot",
    "epoch",
    "list_providers",
    "get_provider",
    "list_models",
    "get_model",
    "capabilities",
    "allowed",
    "parse_provider",
    "parse_spec",
    "resolve",
    "select",
]
