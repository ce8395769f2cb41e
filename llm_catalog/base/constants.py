"""Base shared constants for the catalog core.

Central location to avoid scattering magic strings across the pipeline,
the resolver and the selector.
"""
from __future__ import annotations

import re

# Canonical provider id shape after normalization (e.g. "google_vertex").
PROVIDER_ID_PATTERN = r"^[a-z0-9][a-z0-9_]*$"
PROVIDER_ID_RE = re.compile(PROVIDER_ID_PATTERN)

# Sentinel for an unrestricted allow filter.
ALLOW_ALL = "all"

# Source names in precedence order, lowest first.
SOURCE_PACKAGED = "packaged"
SOURCE_CONFIG = "config"
SOURCE_BEHAVIOUR = "behaviour"
SOURCE_ORDER = (SOURCE_PACKAGED, SOURCE_CONFIG, SOURCE_BEHAVIOUR)

# Separator used to derive a model family from its id.
FAMILY_SEPARATOR = "-"

# Delimiter between provider and model id in a spec string.
SPEC_DELIMITER = ":"

# Capability predicate keys accepted by list/select operations.
CAPABILITY_KEYS = (
    "chat",
    "embeddings",
    "reasoning",
    "tools",
    "tools_streaming",
    "tools_strict",
    "tools_parallel",
    "json_native",
    "json_schema",
    "json_strict",
    "streaming_text",
    "streaming_tool_calls",
)

__all__ = [
    "PROVIDER_ID_PATTERN",
    "PROVIDER_ID_RE",
    "ALLOW_ALL",
    "SOURCE_PACKAGED",
    "SOURCE_CONFIG",
    "SOURCE_BEHAVIOUR",
    "SOURCE_ORDER",
    "FAMILY_SEPARATOR",
    "SPEC_DELIMITER",
    "CAPABILITY_KEYS",
]
