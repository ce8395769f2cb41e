"""Activation of pulled upstream data as the packaged snapshot."""

from __future__ import annotations

import json

import pytest

import llm_catalog
from llm_catalog import CatalogConfig, CatalogError
from llm_catalog.service.activate import activate
from llm_catalog.tests.utils import assert_true


def _write(path, data) -> None:
    path.write_text(json.dumps(data), encoding="utf-8")


def test_activate_writes_pretty_snapshot(tmp_path) -> None:
    source = tmp_path / "upstream.json"
    _write(
        source,
        {
            "providers": [{"id": "openai"}, {"id": "anthropic"}],
            "models": [
                {"id": "gpt-4o", "provider": "openai"},
                {"id": "claude-3-opus", "provider": "anthropic"},
                {"id": "", "provider": "openai"},
            ],
        },
    )
    out = tmp_path / "snapshot.json"
    snap = activate(source=source, out=out, config=CatalogConfig())

    assert_true(len(snap.providers) == 2 and len(snap.models) == 2, "invalid record dropped")
    text = out.read_text(encoding="utf-8")
    assert_true(text.startswith("{\n  "), "pretty printed with indent 2")
    written = json.loads(text)
    assert_true([m["id"] for m in written["models"]] == ["gpt-4o", "claude-3-opus"], "models written")
    assert_true(written["models"][1]["family"] == "claude-3", "enriched fields persisted")


def test_activated_snapshot_loads(tmp_path, store) -> None:
    source = tmp_path / "models-dev.json"
    _write(source, {"local": {"name": "Local", "models": {"llama-3-8b": {"tool_call": True}}}})
    out = tmp_path / "snapshot.json"
    activate(source=source, out=out, config=CatalogConfig())

    llm_catalog.load(CatalogConfig(packaged_path=out), store=store)
    model = llm_catalog.get_model("local", "llama-3-8b", store)
    assert_true(model is not None and model.capabilities.tools.enabled, "round trip through packaged path")


def test_activate_applies_config_filters(tmp_path) -> None:
    source = tmp_path / "upstream.json"
    _write(source, {"providers": [{"id": "p"}], "models": [{"id": "a", "provider": "p"}, {"id": "b", "provider": "p"}]})
    snap = activate(source=source, out=tmp_path / "s.json", config=CatalogConfig(deny={"p": ["b"]}))
    assert_true([m.id for m in snap.models] == ["a"], "deny applied")


def test_activate_errors(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        activate(source=tmp_path / "missing.json", out=tmp_path / "s.json")
    bad = tmp_path / "bad.json"
    bad.write_text("{oops", encoding="utf-8")
    with pytest.raises(ValueError):
        activate(source=bad, out=tmp_path / "s.json")
    empty = tmp_path / "empty.json"
    _write(empty, {"providers": [], "models": []})
    with pytest.raises(CatalogError):
        activate(source=empty, out=tmp_path / "s.json", config=CatalogConfig())
    assert_true(not (tmp_path / "s.json").exists(), "nothing written on failure")


def test_activate_rejects_non_utf8_source(tmp_path) -> None:
    bad = tmp_path / "bad.json"
    bad.write_bytes(b'{"openai": {"name": "\xff"}}')
    with pytest.raises(ValueError, match="Failed to parse JSON"):
        activate(source=bad, out=tmp_path / "s.json")
