"""
Explicit success/failure value returned by catalog queries.

Lookups, resolution and selection never raise for domain failures (unknown
provider, missing model, ambiguity, no match). They return a ``CatalogResult``
so callers branch on ``ok``/``error`` the same way they would on a refresh
result, and may call :meth:`CatalogResult.unwrap` to opt into exceptions.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from .catalog_error import CatalogError
from .error_code import ErrorCode

T = TypeVar("T")


@dataclass(frozen=True)
class CatalogResult(Generic[T]):
    """Outcome of a catalog query.

    Attributes:
        ok: ``True`` when ``value`` holds the query result.
        value: Result payload on success, ``None`` on failure.
        error: Normalized error code on failure, ``None`` on success.
        detail: Optional human-readable context for the failure.
    """

    ok: bool
    value: Optional[T] = None
    error: Optional[ErrorCode] = None
    detail: Optional[str] = None

    @classmethod
    def success(cls, value: Any) -> "CatalogResult[Any]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: ErrorCode, detail: Optional[str] = None) -> "CatalogResult[Any]":
        return cls(ok=False, error=error, detail=detail)

    def unwrap(self) -> T:
        """Return ``value`` or raise :class:`CatalogError` for a failed result."""
        if not self.ok or self.error is not None:
            code = self.error or ErrorCode.NOT_FOUND
            raise CatalogError(code=code, message=self.detail or code.value)
        return self.value  # type: ignore[return-value]


__all__ = ["CatalogResult"]
