"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `llm_catalog.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .catalog_error import CatalogError
from .catalog_result import CatalogResult

__all__ = ["ErrorCode", "CatalogError", "CatalogResult"]
