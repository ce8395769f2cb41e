"""Upstream download and manifest writing."""

from __future__ import annotations

import hashlib
import json
from pathlib import Path

import pytest
import requests

from llm_catalog.service.pull import manifest_path_for, pull
from llm_catalog.tests.utils import assert_true


class FakeResponse:
    def __init__(self, body: bytes, status: int = 200) -> None:
        self.content = body
        self.status_code = status

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)


def test_pull_writes_body_and_manifest(tmp_path, monkeypatch) -> None:
    body = b'{"openai": {"models": {}}}'
    calls = {}

    def fake_get(url, headers=None, timeout=None):
        calls["url"] = url
        calls["timeout"] = timeout
        return FakeResponse(body)

    monkeypatch.setattr(requests, "get", fake_get)
    out = tmp_path / "upstream" / "models-dev.json"
    result = pull("https://example.test/api.json", out=out, timeout=5)

    assert_true(out.read_bytes() == body, "raw body written")
    assert_true(calls == {"url": "https://example.test/api.json", "timeout": 5}, f"unexpected {calls}")
    manifest = json.loads(result.manifest_path.read_text(encoding="utf-8"))
    assert_true(result.manifest_path == tmp_path / "upstream" / "models-dev.manifest.json", "manifest location")
    assert_true(manifest["sha256"] == hashlib.sha256(body).hexdigest(), "sha256 recorded")
    assert_true(manifest["size_bytes"] == len(body), "size recorded")
    assert_true(manifest["source_url"] == "https://example.test/api.json", "source recorded")
    assert_true(manifest["downloaded_at"].endswith("Z"), "UTC timestamp")


def test_http_error_raises_runtime_error(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(requests, "get", lambda *a, **k: FakeResponse(b"", status=503))
    with pytest.raises(RuntimeError, match="Failed to download"):
        pull("https://example.test/api.json", out=tmp_path / "x.json")
    assert_true(not (tmp_path / "x.json").exists(), "nothing written on failure")


def test_network_error_raises_runtime_error(tmp_path, monkeypatch) -> None:
    def boom(*args, **kwargs):
        raise requests.ConnectionError("unreachable")

    monkeypatch.setattr(requests, "get", boom)
    with pytest.raises(RuntimeError):
        pull("https://example.test/api.json", out=tmp_path / "x.json")


def test_manifest_path_for() -> None:
    assert_true(manifest_path_for(Path("a/up.json")) == Path("a/up.manifest.json"), "json suffix replaced")
    assert_true(manifest_path_for(Path("a/up")) == Path("a/up.manifest.json"), "suffix appended")
