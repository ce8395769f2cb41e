"""Capability predicates and preference-ordered selection."""

from __future__ import annotations

import pytest

from llm_catalog.base.constants import CAPABILITY_KEYS
from llm_catalog.base.errors import ErrorCode
from llm_catalog.base.models import Model
from llm_catalog.base.overrides import OverrideSet
from llm_catalog.base.pipeline import engine
from llm_catalog.base.selection import (
    PREDICATES,
    capability_keys,
    filter_models,
    has_capability,
    order_by_preference,
    select,
)
from llm_catalog.config import CatalogConfig
from llm_catalog.tests.utils import assert_true


@pytest.fixture()
def snap(two_provider_payload):
    return engine.run(CatalogConfig(prefer=["provider_b"]), packaged=two_provider_payload, overrides=OverrideSet())


def test_predicates_cover_every_capability_key() -> None:
    assert_true(set(PREDICATES) == set(CAPABILITY_KEYS), "predicate table matches capability keys")


def test_capability_keys_shapes() -> None:
    assert_true(capability_keys(None) == (), "None is empty")
    assert_true(capability_keys("tools") == ("tools",), "single key")
    assert_true(capability_keys(["tools", "json_native"]) == ("tools", "json_native"), "list")
    assert_true(capability_keys({"tools": True, "reasoning": False}) == ("tools",), "mapping keeps truthy keys")
    with pytest.raises(ValueError):
        capability_keys(["telepathy"])


def test_nested_flags_and_defaults() -> None:
    model = Model(
        id="m",
        provider="p",
        capabilities={
            "reasoning": {"enabled": True},
            "tools": {"enabled": True, "parallel": True},
            "json": {"schema": True},
        },
    )
    for key in ("chat", "reasoning", "tools", "tools_parallel", "json_schema", "streaming_text"):
        assert_true(has_capability(model, key), f"{key} should hold")
    for key in ("embeddings", "tools_strict", "json_native", "streaming_tool_calls"):
        assert_true(not has_capability(model, key), f"{key} should not hold")


def test_model_without_capabilities_fails_require_passes_forbid() -> None:
    bare = Model(id="m", provider="p")
    assert_true(not has_capability(bare, "chat"), "no tree means no capability")
    assert_true(filter_models([bare], forbid=["tools"]) == [bare], "forbid passes without a tree")
    assert_true(filter_models([bare], require=["chat"]) == [], "require fails without a tree")


def test_order_by_preference_is_stable() -> None:
    models = [Model(id=i, provider=p) for i, p in (("1", "a"), ("2", "b"), ("3", "c"), ("4", "b"))]
    ordered = [m.id for m in order_by_preference(models, ["b"])]
    assert_true(ordered == ["2", "4", "1", "3"], f"unexpected order {ordered}")


def test_select_uses_explicit_preference(snap) -> None:
    result = select(snap, require=["tools", "json_native"], prefer=["provider_b", "provider_a"])
    assert_true(result.ok and result.value.id == "model-b1", f"unexpected {result}")
    result = select(snap, require=["tools"], prefer=["Provider-A"])
    assert_true(result.value.id == "model-a1", "prefer entries are coerced")


def test_select_falls_back_to_configured_preference(snap) -> None:
    result = select(snap, require=["tools"])
    assert_true(result.value.provider == "provider_b", "snapshot prefer order applies")
    result = select(snap, require=["tools"], prefer=[])
    assert_true(result.value.provider == "provider_a", "empty prefer keeps source order")


def test_select_with_scope_and_forbid(snap) -> None:
    result = select(snap, forbid=["tools"], scope="provider_a")
    assert_true(result.value.id == "model-a2", f"unexpected {result}")
    assert_true(select(snap, scope="bad provider!").error is ErrorCode.BAD_PROVIDER, "bad scope")
    assert_true(select(snap, scope="nobody").error is ErrorCode.NO_MATCH, "unknown scope has no candidates")


def test_select_no_match(snap) -> None:
    assert_true(select(snap, require=["reasoning"]).error is ErrorCode.NO_MATCH, "nothing reasons")
    assert_true(select(None, require=["tools"]).error is ErrorCode.NO_MATCH, "nothing published")


def test_select_rejects_unknown_keys(snap) -> None:
    with pytest.raises(ValueError):
        select(snap, require=["telepathy"])
