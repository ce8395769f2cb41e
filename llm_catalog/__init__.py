"""llm_catalog package

In-memory catalog of AI model metadata (providers, models, capabilities,
limits, costs) built from a packaged dataset, configuration overrides and an
optional override provider, then queried through read-only lookups.

Public API (re-exported):
    - Version: ``__version__``
    - Lifecycle: :func:`load`, :func:`reload`, :func:`snapshot`, :func:`epoch`
    - Queries: :func:`list_providers`, :func:`get_provider`, :func:`list_models`,
      :func:`get_model`, :func:`capabilities`, :func:`allowed`
    - Resolution: :func:`parse_provider`, :func:`parse_spec`, :func:`resolve`,
      :func:`select`
    - Types: :class:`CatalogConfig`, :class:`CatalogError`, :class:`CatalogResult`,
      :class:`ErrorCode`, :class:`CatalogOverrides`, :class:`Snapshot`,
      :class:`SnapshotStore`
"""

from .base.errors import CatalogError, CatalogResult, ErrorCode
from .base.models import Capabilities, Model, Provider, Snapshot
from .base.overrides import CatalogOverrides
from .base.store import SnapshotStore, default_store
from .config import CatalogConfig, get_config
from .catalog import (
    allowed,
    capabilities,
    epoch,
    get_model,
    get_provider,
    list_models,
    list_providers,
    load,
    parse_provider,
    parse_spec,
    reload,
    resolve,
    select,
    snapshot,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CatalogError",
    "CatalogResult",
    "ErrorCode",
    "Capabilities",
    "Model",
    "Provider",
    "Snapshot",
    "CatalogOverrides",
    "SnapshotStore",
    "default_store",
    "CatalogConfig",
    "get_config",
    "allowed",
    "capabilities",
    "epoch",
    "get_model",
    "get_provider",
    "list_models",
    "list_providers",
    "load",
    "parse_provider",
    "parse_spec",
    "reload",
    "resolve",
    "select",
    "snapshot",
]
