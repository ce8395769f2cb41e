"""Minimal dependency injection container for the catalog.

Goals:
- Compose the snapshot store and configuration once at startup.
- Let tests and embedding applications run against a private store without
  touching the process-wide one.
"""

from __future__ import annotations

from typing import Any, Dict

from .. import catalog
from ..base.models import Snapshot
from ..base.store import SnapshotStore, default_store
from ..config import CatalogConfig, get_config


class CatalogContainer:
    """Composition root holding the catalog store and configuration.

    Args:
        config: ``CatalogConfig``, a mapping of config overrides passed to
            ``get_config``, or ``None`` for the environment-derived config.
        isolated: Use a private ``SnapshotStore`` instead of the process-wide one.
    """

    def __init__(self, config: CatalogConfig | Dict[str, Any] | None = None, isolated: bool = False) -> None:
        self._config = config
        self._isolated = isolated
        self._singletons: Dict[str, Any] = {}

    # ---- Shared singletons ----
    def store(self) -> SnapshotStore:
        if "store" not in self._singletons:
            self._singletons["store"] = SnapshotStore() if self._isolated else default_store()
        return self._singletons["store"]

    def config(self) -> CatalogConfig:
        """Return the resolved configuration, computing it on first use."""
        if "config" not in self._singletons:
            cfg = self._config
            self._singletons["config"] = cfg if isinstance(cfg, CatalogConfig) else get_config(cfg)
        return self._singletons["config"]

    # ---- Lifecycle ----
    def load(self) -> Snapshot:
        """Build the catalog with this container's config and publish it to its store."""
        return catalog.load(self.config(), store=self.store())

    def clear(self) -> None:  # testing convenience
        """Drop cached singletons; the next access rebuilds them."""
        self._singletons.clear()


def build_container(config: CatalogConfig | Dict[str, Any] | None = None, isolated: bool = False) -> CatalogContainer:
    return CatalogContainer(config=config, isolated=isolated)


__all__ = ["CatalogContainer", "build_container"]
