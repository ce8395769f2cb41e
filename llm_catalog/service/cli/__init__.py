"""llm-catalog CLI (package entrypoint).

This package wires argument parsing to action handlers kept in small, focused
modules. It performs no catalog logic directly.

Public API re-exports:
- ``main``: CLI entrypoint callable
"""

from __future__ import annotations

import sys
from typing import Optional

from .cli_actions import (
    handle_activate,
    handle_models,
    handle_providers,
    handle_pull,
    handle_resolve,
    handle_select,
)
from .cli_parser import build_parser

_HANDLERS = {
    "pull": handle_pull,
    "activate": handle_activate,
    "providers": handle_providers,
    "models": handle_models,
    "resolve": handle_resolve,
    "select": handle_select,
}


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit code (0 success, 1 on catalog errors, 2 on usage errors).
    """
    args = build_parser().parse_args(list(sys.argv[1:] if argv is None else argv))
    return _HANDLERS[args.cmd](args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
