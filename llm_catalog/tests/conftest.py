"""Pytest configuration for the catalog test suite.

Every test runs with the ``LLM_CATALOG_*`` environment cleared and the
process-wide snapshot store emptied afterwards, so tests never observe each
other's catalogs.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator

import pytest

from llm_catalog.tests.utils import model_record, payload

_ENV_VARS = (
    "LLM_CATALOG_CONFIG_FILE",
    "LLM_CATALOG_PREFER",
    "LLM_CATALOG_OVERRIDES_MODULE",
    "LLM_CATALOG_PACKAGED_PATH",
    "LLM_CATALOG_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove catalog environment variables for the duration of a test."""

    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def reset_default_store() -> Iterator[None]:
    """Clear the process-wide store after each test."""

    # Lazy import to avoid import-time side effects during collection
    from llm_catalog.base.store import default_store

    yield
    default_store().clear()


@pytest.fixture()
def store():
    """Yield a private ``SnapshotStore``."""

    from llm_catalog.base.store import SnapshotStore

    return SnapshotStore()


@pytest.fixture()
def two_provider_payload() -> Dict[str, Any]:
    """Two providers whose models differ in tool and JSON support."""

    return payload(
        ["provider_a", "provider_b"],
        [
            model_record(
                "provider_a",
                "model-a1",
                capabilities={"tools": {"enabled": True}, "json": {"native": True}},
                aliases=["a1"],
            ),
            model_record("provider_a", "model-a2", capabilities={"chat": True}),
            model_record(
                "provider_b",
                "model-b1",
                capabilities={"tools": {"enabled": True}, "json": {"native": True}},
            ),
            model_record("provider_b", "shared", capabilities={}),
            model_record("provider_a", "shared", capabilities={}),
        ],
    )
