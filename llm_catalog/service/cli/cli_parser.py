"""CLI parser construction for llm-catalog.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse

from ...base.constants import CAPABILITY_KEYS
from ...config.defaults import DEFAULT_UPSTREAM_URL


def add_capability_flags(parser: argparse.ArgumentParser) -> None:
    """Attach repeatable ``--require``/``--forbid`` capability flags."""
    parser.add_argument("--require", action="append", default=[], choices=CAPABILITY_KEYS, metavar="KEY")
    parser.add_argument("--forbid", action="append", default=[], choices=CAPABILITY_KEYS, metavar="KEY")


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser and subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Parser with ``pull``, ``activate``, ``providers``, ``models``,
        ``resolve`` and ``select`` subcommands. No I/O happens here.
    """
    p = argparse.ArgumentParser(prog="llm-catalog", description="LLM model catalog tooling")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_pull = sub.add_parser("pull", help="Download upstream model metadata and write a manifest")
    p_pull.add_argument("--url", default=DEFAULT_UPSTREAM_URL)
    p_pull.add_argument("--out", default=None, help="Output file (default: priv/llm_catalog/upstream/models-dev.json)")
    p_pull.add_argument("--json", action="store_true")

    p_act = sub.add_parser("activate", help="Build the packaged snapshot from pulled upstream data")
    p_act.add_argument("--from", dest="source", default=None, help="Upstream file produced by 'pull'")
    p_act.add_argument("--out", default=None, help="Snapshot destination (default: packaged dataset)")
    p_act.add_argument("--json", action="store_true")

    p_prov = sub.add_parser("providers", help="List provider ids of the catalog")
    p_prov.add_argument("--json", action="store_true")

    p_models = sub.add_parser("models", help="List models of a provider")
    p_models.add_argument("provider")
    add_capability_flags(p_models)
    p_models.add_argument("--json", action="store_true")

    p_res = sub.add_parser("resolve", help="Resolve 'provider:model', an alias or a bare id")
    p_res.add_argument("spec")
    p_res.add_argument("--scope", default=None, help="Provider for a bare model id")
    p_res.add_argument("--json", action="store_true")

    p_sel = sub.add_parser("select", help="Pick the first model matching capability requirements")
    add_capability_flags(p_sel)
    p_sel.add_argument("--prefer", nargs="+", default=None, metavar="PROVIDER")
    p_sel.add_argument("--scope", default=None)
    p_sel.add_argument("--json", action="store_true")

    return p


__all__ = ["build_parser", "add_capability_flags"]
