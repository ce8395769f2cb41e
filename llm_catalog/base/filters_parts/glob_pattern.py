"""Compiled glob pattern value type.

A glob here is deliberately tiny: ``*`` matches any run of characters
(including none) and every other character matches itself literally. Matching
is case-sensitive and anchored at both ends.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Pattern


def glob_to_regex(glob: str) -> Pattern[str]:
    """Compile ``glob`` into an anchored regular expression."""
    return re.compile(re.escape(glob).replace(r"\*", ".*"), re.DOTALL)


@dataclass(frozen=True)
class GlobPattern:
    """A glob compiled once and reused for every match.

    Example:
        >>> GlobPattern("gpt-4*").matches("gpt-4o-mini")
        True
    """

    source: str
    _regex: Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_regex", glob_to_regex(self.source))

    def matches(self, text: str) -> bool:
        return self._regex.fullmatch(text) is not None


__all__ = ["GlobPattern", "glob_to_regex"]
