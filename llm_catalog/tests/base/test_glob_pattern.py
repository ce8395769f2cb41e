"""Glob compilation: ``*`` is the only wildcard and matching is anchored."""

from __future__ import annotations

import pytest

from llm_catalog.base.filters import GlobPattern, compile_patterns
from llm_catalog.tests.utils import assert_true


@pytest.mark.parametrize(
    "glob,text,expected",
    [
        ("gpt-4*", "gpt-4", True),
        ("gpt-4*", "gpt-4-turbo", True),
        ("gpt-4*", "gpt-3.5-turbo", False),
        ("*-mini", "gpt-4o-mini", True),
        ("*", "", True),
        ("gpt-4o", "gpt-4o-mini", False),
        ("o1", "o1", True),
        ("claude-*-latest", "claude-3-opus-latest", True),
    ],
)
def test_star_matches_any_run(glob: str, text: str, expected: bool) -> None:
    assert_true(GlobPattern(glob).matches(text) is expected, f"{glob!r} vs {text!r}")


def test_regex_metacharacters_are_literal() -> None:
    dotted = GlobPattern("gpt-3.5-turbo")
    assert_true(dotted.matches("gpt-3.5-turbo"), "literal dot should match itself")
    assert_true(not dotted.matches("gpt-3x5-turbo"), "dot must not act as a wildcard")
    assert_true(GlobPattern("a?b").matches("a?b"), "question mark is literal")
    assert_true(not GlobPattern("a?b").matches("acb"), "question mark is not a wildcard")
    assert_true(GlobPattern("[x]").matches("[x]"), "brackets are literal")


def test_matching_is_case_sensitive() -> None:
    assert_true(not GlobPattern("GPT-*").matches("gpt-4o"), "case must be respected")


def test_compile_patterns_accepts_single_string() -> None:
    compiled = compile_patterns("gpt-*")
    assert_true(len(compiled) == 1, "a bare string is a one-item list")
    assert_true(compiled[0].source == "gpt-*", "source glob is kept")
    assert_true(compile_patterns(None) == (), "None compiles to no patterns")
