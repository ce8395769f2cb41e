"""Activate pulled upstream data as the packaged catalog snapshot.

Runs the full build pipeline with the upstream payload in the packaged slot
plus configured overrides and filters (the override provider is not consulted)
and writes the resulting snapshot payload, pretty-printed, to the packaged
dataset location. Call ``llm_catalog.reload()`` afterwards to serve it.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Union

from ..base.logging import get_logger, log_event
from ..base.models import Snapshot
from ..base.overrides import OverrideSet
from ..base.pipeline import engine
from ..base.repositories.packaged import packaged_path
from ..config import CatalogConfig, get_config
from .pull import default_upstream_path
from .upstream import to_catalog_payload

_LOGGER_NAME = "llm_catalog.activate"


def read_upstream(path: Path) -> object:
    """Read and decode an upstream JSON file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the file is not UTF-8 or not valid JSON.
    """
    if not path.is_file():
        raise FileNotFoundError(f"Upstream file not found: {path}")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except ValueError as exc:
        raise ValueError(f"Failed to parse JSON from {path}: {exc}") from exc


def write_snapshot(snapshot: Snapshot, out: Path) -> None:
    out.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(snapshot.to_payload(), indent=2, ensure_ascii=False)
    out.write_text(text + "\n", encoding="utf-8")


def activate(
    source: Optional[Union[str, Path]] = None,
    out: Optional[Union[str, Path]] = None,
    config: Optional[CatalogConfig] = None,
) -> Snapshot:
    """Build a snapshot from upstream data and write it as the packaged dataset.

    Args:
        source: Pulled upstream file; defaults to the ``pull`` output path.
        out: Destination; defaults to the packaged snapshot location.
        config: Overrides and filters to apply; ``get_config()`` when omitted.

    Returns:
        The built (unpublished) snapshot.

    Raises:
        FileNotFoundError: Missing source file.
        ValueError: Source is not JSON or not a JSON object.
        CatalogError: ``empty_catalog`` or ``invalid_source`` from the build.
    """
    src = Path(source) if source is not None else default_upstream_path()
    dest = Path(out) if out is not None else packaged_path()
    payload = to_catalog_payload(read_upstream(src))
    cfg = (config or get_config()).model_copy(update={"overrides_module": None})

    snapshot = engine.run(cfg, packaged=payload, overrides=OverrideSet())
    write_snapshot(snapshot, dest)

    log_event(
        get_logger(_LOGGER_NAME),
        "catalog.activate.complete",
        source=str(src),
        out=str(dest),
        providers=len(snapshot.providers),
        models=len(snapshot.models),
    )
    return snapshot


__all__ = ["activate", "read_upstream", "write_snapshot"]
