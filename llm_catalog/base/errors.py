"""Unified catalog error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``llm_catalog.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.catalog_error import CatalogError
from .errors_parts.catalog_result import CatalogResult

__all__ = ["ErrorCode", "CatalogError", "CatalogResult"]
