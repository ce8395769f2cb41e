"""Allow/deny filter evaluation."""

from __future__ import annotations

import pytest

from llm_catalog.base.filters import apply_filters, compile_filters, is_allowed
from llm_catalog.tests.utils import assert_true, model_record


def test_allow_all_keeps_everything() -> None:
    filters = compile_filters("all", {})
    assert_true(filters.allow_all, "sentinel compiles to allow-all")
    assert_true(is_allowed(filters, "openai", "anything"), "allow-all passes any model")
    assert_true(compile_filters(":all").allow_all, "':all' is accepted too")
    assert_true(compile_filters(None).allow_all, "None is allow-all")


def test_deny_wins_over_allow() -> None:
    filters = compile_filters({"openai": ["gpt-4*"]}, {"openai": ["gpt-4-32k"]})
    assert_true(is_allowed(filters, "openai", "gpt-4o"), "allowed by pattern")
    assert_true(not is_allowed(filters, "openai", "gpt-4-32k"), "deny takes precedence")


def test_empty_allow_map_restricts_nothing() -> None:
    filters = compile_filters({}, {})
    assert_true(not filters.allow_all, "an empty map is not the sentinel")
    assert_true(is_allowed(filters, "anthropic", "claude-3-opus"), "empty allow map includes all")


def test_non_empty_allow_map_excludes_unlisted_providers() -> None:
    filters = compile_filters({"openai": ["gpt-*"]}, {})
    assert_true(is_allowed(filters, "openai", "gpt-4o"), "listed provider passes")
    assert_true(not is_allowed(filters, "anthropic", "claude-3-opus"), "unlisted provider excluded")


def test_allow_entry_with_no_patterns_excludes_that_provider() -> None:
    filters = compile_filters({"openai": [], "anthropic": ["*"]}, {})
    assert_true(not is_allowed(filters, "openai", "gpt-4o"), "empty pattern list excludes provider")
    assert_true(is_allowed(filters, "anthropic", "claude-3-opus"), "wildcard provider passes")


def test_apply_filters_accepts_records_and_preserves_order() -> None:
    models = [model_record("openai", "gpt-4o"), model_record("openai", "o1"), model_record("openai", "gpt-4")]
    kept = apply_filters(models, compile_filters({"openai": ["gpt-*"]}, {"openai": ["gpt-4"]}))
    assert_true([m["id"] for m in kept] == ["gpt-4o"], f"unexpected {kept}")


def test_describe_returns_source_globs() -> None:
    filters = compile_filters({"openai": "gpt-*"}, {"openai": ["gpt-4"]})
    assert_true(
        filters.describe() == {"allow": {"openai": ["gpt-*"]}, "deny": {"openai": ["gpt-4"]}},
        f"unexpected {filters.describe()}",
    )


def test_invalid_allow_shape_raises() -> None:
    with pytest.raises(TypeError):
        compile_filters(["openai"])
