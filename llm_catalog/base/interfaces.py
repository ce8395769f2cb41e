"""
Catalog extension and storage interfaces (Protocols).

Re-exports Protocols split into single-class modules under
``llm_catalog.base.interfaces_parts``.
"""

from __future__ import annotations

from .interfaces_parts import OverridesProvider, SnapshotSource

__all__ = ["OverridesProvider", "SnapshotSource"]
