"""
Catalog Base Package

Exports the pipeline-independent building blocks of the catalog:

- Errors: normalized error taxonomy and query result values
- Models: pydantic record schemas and the immutable ``Snapshot``
- Filters: glob compiler and allow/deny engine
- Interfaces: override provider and snapshot store contracts
- Store: the process-wide published snapshot holder

The build pipeline lives in ``llm_catalog.base.pipeline``; resolution and
selection in ``llm_catalog.base.spec`` and ``llm_catalog.base.selection``.
"""

from .errors import CatalogError, CatalogResult, ErrorCode
from .filters import CompiledFilters, GlobPattern, compile_filters
from .interfaces import OverridesProvider, SnapshotSource
from .models import Capabilities, Model, Provider, Snapshot
from .store import SnapshotStore, default_store

__all__ = [
    "CatalogError",
    "CatalogResult",
    "ErrorCode",
    "CompiledFilters",
    "GlobPattern",
    "compile_filters",
    "OverridesProvider",
    "SnapshotSource",
    "Capabilities",
    "Model",
    "Provider",
    "Snapshot",
    "SnapshotStore",
    "default_store",
]
