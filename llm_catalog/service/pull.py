"""Upstream pull: download model metadata and record a manifest.

Behavior
- One ``GET`` to the source URL (models.dev ``api.json`` by default); no
  retries.
- Writes the raw body to ``out`` and a companion ``<name>.manifest.json`` with
  ``source_url``, ``downloaded_at``, ``sha256`` and ``size_bytes``.
- HTTP and network failures raise ``RuntimeError``.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import requests

from ..base.logging import get_logger, log_event
from ..base.models_parts.snapshot import utc_now_iso
from ..config.defaults import (
    DEFAULT_UPSTREAM_DIR,
    DEFAULT_UPSTREAM_FILE,
    DEFAULT_UPSTREAM_URL,
    MANIFEST_SUFFIX,
    UPSTREAM_TIMEOUT_SECONDS,
)

_LOGGER_NAME = "llm_catalog.pull"


@dataclass(frozen=True)
class PullResult:
    """Where the payload landed and what was downloaded."""

    path: Path
    manifest_path: Path
    source_url: str
    sha256: str
    size_bytes: int


def default_upstream_path() -> Path:
    return Path(DEFAULT_UPSTREAM_DIR) / DEFAULT_UPSTREAM_FILE


def manifest_path_for(path: Path) -> Path:
    """``upstream.json`` -> ``upstream.manifest.json``."""
    if path.suffix == ".json":
        return path.with_name(path.stem + MANIFEST_SUFFIX)
    return path.with_name(path.name + MANIFEST_SUFFIX)


def download(url: str, timeout: float = UPSTREAM_TIMEOUT_SECONDS) -> bytes:
    """Fetch ``url`` and return the raw body.

    Raises:
        RuntimeError: On HTTP error status or network failure.
    """
    try:
        resp = requests.get(url, headers={"Accept": "application/json"}, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise RuntimeError(f"Failed to download from {url}: {exc}") from exc
    return resp.content


def pull(
    url: str = DEFAULT_UPSTREAM_URL,
    out: Optional[Union[str, Path]] = None,
    timeout: float = UPSTREAM_TIMEOUT_SECONDS,
) -> PullResult:
    """Download upstream metadata to ``out`` and write its manifest."""
    path = Path(out) if out is not None else default_upstream_path()
    body = download(url, timeout=timeout)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(body)

    digest = hashlib.sha256(body).hexdigest()
    manifest = {
        "source_url": url,
        "downloaded_at": utc_now_iso(),
        "sha256": digest,
        "size_bytes": len(body),
    }
    manifest_path = manifest_path_for(path)
    manifest_path.write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")

    log_event(
        get_logger(_LOGGER_NAME),
        "catalog.pull.complete",
        url=url,
        path=str(path),
        sha256=digest,
        size_bytes=len(body),
    )
    return PullResult(
        path=path,
        manifest_path=manifest_path,
        source_url=url,
        sha256=digest,
        size_bytes=len(body),
    )


__all__ = ["PullResult", "pull", "download", "manifest_path_for", "default_upstream_path"]
