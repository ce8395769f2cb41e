"""
Repositories package for the catalog core.

Exports:
- packaged_path / load_packaged: bundled default dataset
"""

from .packaged import load_packaged, packaged_path

__all__ = ["packaged_path", "load_packaged"]
