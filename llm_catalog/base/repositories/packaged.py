"""Packaged catalog dataset.

The default catalog ships inside the package as ``llm_catalog/data/snapshot.json``
in the ``{providers, models}`` exchange shape. ``activate`` rewrites this file
from upstream data.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ...config.defaults import PACKAGED_DATA_DIR, PACKAGED_SNAPSHOT_FILE


def packaged_path() -> Path:
    """Return the location of the packaged snapshot file."""
    # This file lives under .../llm_catalog/base/repositories/; the package
    # root is two levels above.
    return Path(__file__).resolve().parents[2] / PACKAGED_DATA_DIR / PACKAGED_SNAPSHOT_FILE


def load_packaged(path: Optional[Union[str, Path]] = None) -> Optional[Dict[str, Any]]:
    """Load the packaged snapshot payload.

    Args:
        path: Alternative file; defaults to :func:`packaged_path`.

    Returns:
        The parsed payload, or ``None`` when the file does not exist.

    Raises:
        json.JSONDecodeError: If the file is empty or not valid JSON.
        UnicodeDecodeError: If the file is not UTF-8.
    """
    p = Path(path) if path is not None else packaged_path()
    if not p.is_file():
        return None
    return json.loads(p.read_text(encoding="utf-8"))


__all__ = ["packaged_path", "load_packaged"]
