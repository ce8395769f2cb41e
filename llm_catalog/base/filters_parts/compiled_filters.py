"""Compiled allow/deny filter sets.

``allow`` is either the ``ALLOW_ALL`` sentinel or a read-only mapping of
provider id to compiled patterns; ``deny`` is always a mapping. Both are
built once per catalog build.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Tuple, Union

from ..constants import ALLOW_ALL
from .glob_pattern import GlobPattern

PatternMap = Mapping[str, Tuple[GlobPattern, ...]]

_ALLOW_ALL_ALIASES = (ALLOW_ALL, f":{ALLOW_ALL}")


def compile_patterns(patterns: Union[str, Iterable[str], None]) -> Tuple[GlobPattern, ...]:
    """Compile a pattern list; a single string counts as a one-item list."""
    if patterns is None:
        return ()
    if isinstance(patterns, str):
        patterns = [patterns]
    return tuple(GlobPattern(p) for p in patterns if isinstance(p, str))


def compile_pattern_map(mapping: Mapping[str, Any] | None) -> PatternMap:
    """Compile ``{provider: [globs]}`` into a read-only pattern map."""
    if not mapping:
        return MappingProxyType({})
    return MappingProxyType({str(k): compile_patterns(v) for k, v in mapping.items()})


def is_allow_all(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value in _ALLOW_ALL_ALIASES)


@dataclass(frozen=True)
class CompiledFilters:
    """Immutable allow/deny filter pair."""

    allow: Union[str, PatternMap] = ALLOW_ALL
    deny: PatternMap = field(default_factory=lambda: MappingProxyType({}))

    @property
    def allow_all(self) -> bool:
        return isinstance(self.allow, str)

    def describe(self) -> dict:
        """Return the source globs, suitable for logs and payloads."""
        allow = (
            ALLOW_ALL
            if self.allow_all
            else {k: [p.source for p in v] for k, v in self.allow.items()}
        )
        deny = {k: [p.source for p in v] for k, v in self.deny.items()}
        return {"allow": allow, "deny": deny}


def compile_filters(allow: Any = ALLOW_ALL, deny: Mapping[str, Any] | None = None) -> CompiledFilters:
    """Build ``CompiledFilters`` from raw configuration values.

    Args:
        allow: ``"all"``/``":all"``/``None`` for no restriction, otherwise a
            mapping of provider id to glob list.
        deny: Mapping of provider id to glob list.

    Raises:
        TypeError: If ``allow`` is neither the sentinel nor a mapping.
    """
    if is_allow_all(allow):
        compiled_allow: Union[str, PatternMap] = ALLOW_ALL
    elif isinstance(allow, Mapping):
        compiled_allow = compile_pattern_map(allow)
    else:
        raise TypeError(f"allow must be {ALLOW_ALL!r} or a mapping, got {type(allow).__name__}")
    return CompiledFilters(allow=compiled_allow, deny=compile_pattern_map(deny))


__all__ = [
    "PatternMap",
    "CompiledFilters",
    "compile_patterns",
    "compile_pattern_map",
    "compile_filters",
    "is_allow_all",
]
