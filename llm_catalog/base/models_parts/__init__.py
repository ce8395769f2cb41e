"""Models parts package public surface.

Re-exports the individual record schemas so callers can import from
``llm_catalog.base.models_parts`` if needed, while ``llm_catalog.base.models``
remains the primary stable import path.
"""

from .capabilities import Capabilities, JsonCaps, Reasoning, Streaming, Tools
from .limits import Cost, Limits, Modalities
from .record import CatalogRecord
from .provider import ConfigField, Provider
from .model import Model, ModelKey
from .snapshot import Snapshot, SnapshotMeta, utc_now_iso

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
    "utc_now_iso",
]
