"""
Normalized catalog error codes (taxonomy).

Defines the `ErrorCode` enumeration shared by the build pipeline, the spec
resolver and the selector. Values are lowercase snake_case and are considered a
stable public contract for logging and for callers that branch on failures.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    BAD_PROVIDER = "bad_provider"
    UNKNOWN_PROVIDER = "unknown_provider"
    INVALID_FORMAT = "invalid_format"
    NOT_FOUND = "not_found"
    AMBIGUOUS = "ambiguous"
    NO_MATCH = "no_match"
    EMPTY_CATALOG = "empty_catalog"
    INVALID_SOURCE = "invalid_source"


__all__ = ["ErrorCode"]
