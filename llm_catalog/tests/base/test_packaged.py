"""Packaged dataset location and loading."""

from __future__ import annotations

import json

import pytest

from llm_catalog.base.repositories import load_packaged, packaged_path
from llm_catalog.tests.utils import assert_true


def test_packaged_file_ships_with_package() -> None:
    path = packaged_path()
    assert_true(path.is_file(), f"expected bundled snapshot at {path}")
    data = load_packaged()
    assert_true(isinstance(data["providers"], list) and isinstance(data["models"], list), "exchange shape")


def test_missing_file_returns_none(tmp_path) -> None:
    assert_true(load_packaged(tmp_path / "nope.json") is None, "absent file is not an error")


def test_invalid_json_raises(tmp_path) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text("", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        load_packaged(bad)
