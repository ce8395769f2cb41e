"""DI container for the catalog.

Acts as the composition root wiring the snapshot store and configuration.
"""
from __future__ import annotations

from .container import CatalogContainer, build_container

__all__ = ["CatalogContainer", "build_container"]
