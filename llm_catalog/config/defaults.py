"""llm_catalog.config.defaults
===========================

Central place for small, stable default values used across the catalog core,
the upstream workflows and the CLI. These defaults can be overridden via
environment variables or an external configuration file.

This module avoids importing from other catalog packages to prevent circular
dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Environment variables ----
CONFIG_FILE_ENV = "LLM_CATALOG_CONFIG_FILE"
PREFER_ENV = "LLM_CATALOG_PREFER"
OVERRIDES_MODULE_ENV = "LLM_CATALOG_OVERRIDES_MODULE"
PACKAGED_PATH_ENV = "LLM_CATALOG_PACKAGED_PATH"

# ---- Packaged dataset ----
# Resource directory and file name inside the ``llm_catalog`` package.
PACKAGED_DATA_DIR = "data"
PACKAGED_SNAPSHOT_FILE = "snapshot.json"

# ---- Upstream pull / activate ----
DEFAULT_UPSTREAM_URL = "https://models.dev/api.json"
# Default location of pulled upstream payloads (relative to the working dir).
DEFAULT_UPSTREAM_DIR = "priv/llm_catalog/upstream"
DEFAULT_UPSTREAM_FILE = "models-dev.json"
MANIFEST_SUFFIX = ".manifest.json"
# Single attempt, no retries; seconds.
UPSTREAM_TIMEOUT_SECONDS = 30.0

__all__ = [
    "CONFIG_FILE_ENV",
    "PREFER_ENV",
    "OVERRIDES_MODULE_ENV",
    "PACKAGED_PATH_ENV",
    "PACKAGED_DATA_DIR",
    "PACKAGED_SNAPSHOT_FILE",
    "DEFAULT_UPSTREAM_URL",
    "DEFAULT_UPSTREAM_DIR",
    "DEFAULT_UPSTREAM_FILE",
    "MANIFEST_SUFFIX",
    "UPSTREAM_TIMEOUT_SECONDS",
]
