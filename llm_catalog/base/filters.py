"""
Pattern compiler and allow/deny filter engine public surface.

Re-exports the single-purpose modules under ``llm_catalog.base.filters_parts``.
"""

from .filters_parts import (
    CompiledFilters,
    GlobPattern,
    PatternMap,
    apply_filters,
    compile_filters,
    compile_pattern_map,
    compile_patterns,
    glob_to_regex,
    is_allow_all,
    is_allowed,
    matches_any,
)

__all__ = [
    "CompiledFilters",
    "GlobPattern",
    "PatternMap",
    "apply_filters",
    "compile_filters",
    "compile_pattern_map",
    "compile_patterns",
    "glob_to_regex",
    "is_allow_all",
    "is_allowed",
    "matches_any",
]
