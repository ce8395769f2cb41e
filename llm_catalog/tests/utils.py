"""Shared testing utilities for catalog tests.

Purpose:
    Avoid duplication of simple assertion helpers across test modules while
    retaining explicit AssertionError semantics (no bare ``assert``, to
    satisfy Bandit B101).

Exports:
    - assert_true(condition: bool, message: str) -> None
    - model_record(provider, model_id, **fields) -> dict
    - payload(providers, models) -> dict
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List


def assert_true(condition: bool, message: str) -> None:
    """Raise AssertionError with the provided message if condition is False.

    Parameters
    ----------
    condition: bool
        Boolean expression under test.
    message: str
        Rich, contextual diagnostic message to display on failure.

    Raises
    ------
    AssertionError
        If `condition` evaluates false.
    """
    if not condition:
        raise AssertionError(message)


def model_record(provider: str, model_id: str, **fields: Any) -> Dict[str, Any]:
    record: Dict[str, Any] = {"id": model_id, "provider": provider}
    record.update(fields)
    return record


def payload(providers: Iterable[str], models: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Build a packaged ``{providers, models}`` payload from provider ids."""
    return {"providers": [{"id": p} for p in providers], "models": models}
