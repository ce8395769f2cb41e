"""Catalog build pipeline stages.

Each stage is a pure function over plain records; ``engine.run`` wires them
together. The engine and ingestion modules are imported directly
(``llm_catalog.base.pipeline.engine``) because they depend on configuration.
"""

from .normalize import normalize_models, normalize_provider_id, normalize_providers
from .validate import ensure_viable, validate_models, validate_providers
from .merge import deep_merge, merge_model_layers, merge_models, merge_providers
from .enrich import derive_family, enrich_models
from .index import Indexes, build_aliases_index, build_indexes

__all__ = [
    "normalize_models",
    "normalize_provider_id",
    "normalize_providers",
    "ensure_viable",
    "validate_models",
    "validate_providers",
    "deep_merge",
    "merge_model_layers",
    "merge_models",
    "merge_providers",
    "derive_family",
    "enrich_models",
    "Indexes",
    "build_aliases_index",
    "build_indexes",
]
