"""Filter parts package: glob compiler, compiled filter sets and engine."""

from .glob_pattern import GlobPattern, glob_to_regex
from .compiled_filters import (
    CompiledFilters,
    PatternMap,
    compile_filters,
    compile_pattern_map,
    compile_patterns,
    is_allow_all,
)
from .apply import apply_filters, is_allowed, matches_any

__all__ = [
    "GlobPattern",
    "glob_to_regex",
    "CompiledFilters",
    "PatternMap",
    "compile_filters",
    "compile_pattern_map",
    "compile_patterns",
    "is_allow_all",
    "apply_filters",
    "is_allowed",
    "matches_any",
]
