"""CLI action handlers.

Each handler takes the parsed ``argparse.Namespace`` and returns a process
exit code: ``0`` on success, ``1`` on domain errors (unknown spec, no match,
empty catalog, failed download). Data goes to stdout, either as plain lines
or, with ``--json``, as a single JSON document; errors go to stderr as JSON.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, Optional

from ... import catalog
from ...base.errors import CatalogError, CatalogResult
from ...base.models import Model
from ...base.store import SnapshotStore
from ..activate import activate
from ..pull import pull


def _emit(data: Any, as_json: bool, lines: Optional[list] = None) -> None:
    if as_json:
        print(json.dumps(data, indent=2, ensure_ascii=False, default=str))
        return
    for line in lines if lines is not None else [data]:
        print(line)


def _error(code: str, message: str) -> int:
    print(json.dumps({"error": code, "message": message}), file=sys.stderr)
    return 1


def _failure(result: CatalogResult) -> int:
    return _error(result.error.value if result.error else "error", result.detail or "")


def model_summary(model: Model) -> Dict[str, Any]:
    """Return a JSON-ready view of ``model`` using upstream field names."""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def _model_line(model: Model) -> str:
    parts = [model.spec]
    if model.name:
        parts.append(model.name)
    if model.limits is not None and model.limits.context is not None:
        parts.append(f"context={model.limits.context}")
    return "  ".join(parts)


def _load(store: Optional[SnapshotStore]) -> Optional[int]:
    """Load the configured catalog; return an exit code on failure."""
    try:
        catalog.load(store=store)
    except CatalogError as exc:
        return _error(exc.code.value, exc.message)
    return None


def handle_pull(args: argparse.Namespace) -> int:
    try:
        result = pull(url=args.url, out=args.out)
    except RuntimeError as exc:
        return _error("download_failed", str(exc))
    data = {
        "path": str(result.path),
        "manifest": str(result.manifest_path),
        "sha256": result.sha256,
        "size_bytes": result.size_bytes,
    }
    _emit(data, args.json, [f"Pulled {result.size_bytes} bytes to {result.path}", f"SHA256: {result.sha256}"])
    return 0


def handle_activate(args: argparse.Namespace) -> int:
    try:
        snap = activate(source=args.source, out=args.out)
    except FileNotFoundError as exc:
        return _error("not_found", str(exc))
    except ValueError as exc:
        return _error("invalid_source", str(exc))
    except CatalogError as exc:
        return _error(exc.code.value, exc.message)
    data = {"providers": len(snap.providers), "models": len(snap.models)}
    _emit(
        data,
        args.json,
        [f"Providers: {data['providers']}", f"Models: {data['models']}", "Call llm_catalog.reload() to serve it."],
    )
    return 0


def handle_providers(args: argparse.Namespace, store: Optional[SnapshotStore] = None) -> int:
    if (code := _load(store)) is not None:
        return code
    providers = catalog.list_providers(store=store)
    _emit(providers, args.json, providers)
    return 0


def handle_models(args: argparse.Namespace, store: Optional[SnapshotStore] = None) -> int:
    if (code := _load(store)) is not None:
        return code
    parsed = catalog.parse_provider(args.provider, store=store)
    if not parsed.ok:
        return _failure(parsed)
    models = catalog.list_models(parsed.value, require=args.require, forbid=args.forbid, store=store)
    _emit([model_summary(m) for m in models], args.json, [_model_line(m) for m in models])
    return 0


def handle_resolve(args: argparse.Namespace, store: Optional[SnapshotStore] = None) -> int:
    if (code := _load(store)) is not None:
        return code
    result = catalog.resolve(args.spec, scope=args.scope, store=store)
    if not result.ok:
        return _failure(result)
    _emit(model_summary(result.value.model), args.json, [_model_line(result.value.model)])
    return 0


def handle_select(args: argparse.Namespace, store: Optional[SnapshotStore] = None) -> int:
    if (code := _load(store)) is not None:
        return code
    result = catalog.select(
        require=args.require,
        forbid=args.forbid,
        prefer=args.prefer,
        scope=args.scope,
        store=store,
    )
    if not result.ok:
        return _failure(result)
    _emit(model_summary(result.value), args.json, [_model_line(result.value)])
    return 0


__all__ = [
    "handle_pull",
    "handle_activate",
    "handle_providers",
    "handle_models",
    "handle_resolve",
    "handle_select",
    "model_summary",
]
