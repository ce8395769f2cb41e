"""
Structured catalog error exception type.

Raised by the build pipeline (empty catalog, malformed source shapes) and by
``CatalogResult.unwrap`` for callers that prefer exceptions over result values.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class CatalogError(Exception):
    """Represents a structured catalog error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        provider: Provider id involved in the failure, when known.
        model: Model id involved in the failure, when known.
        stage: Pipeline stage that failed (``"ingest"``, ``"ensure_viable"``...).
    """

    code: ErrorCode
    message: str
    provider: Optional[str] = None
    model: Optional[str] = None
    stage: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining provider, model, code, and message."""
        return f"{self.provider or '-'}:{self.model or '-'} {self.code.value}: {self.message}"


__all__ = ["CatalogError"]
