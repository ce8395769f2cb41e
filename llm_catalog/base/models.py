"""
Catalog record schemas public surface.

This module re-exports the one-class-per-file implementations under
``llm_catalog.base.models_parts``. Pydantic models double as the declared
validation schema for provider and model records.
"""

from .models_parts.capabilities import Capabilities, JsonCaps, Reasoning, Streaming, Tools
from .models_parts.limits import Cost, Limits, Modalities
from .models_parts.record import CatalogRecord
from .models_parts.provider import ConfigField, Provider
from .models_parts.model import Model, ModelKey
from .models_parts.snapshot import Snapshot, SnapshotMeta

__all__ = [
    "Capabilities",
    "JsonCaps",
    "Reasoning",
    "Streaming",
    "Tools",
    "Cost",
    "Limits",
    "Modalities",
    "CatalogRecord",
    "ConfigField",
    "Provider",
    "Model",
    "ModelKey",
    "Snapshot",
    "SnapshotMeta",
]
