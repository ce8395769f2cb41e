"""Service layer: upstream pull/activate workflows and the CLI.

Only this layer performs network I/O (via ``requests``); the catalog core in
``llm_catalog.base`` never imports it.
"""

from .activate import activate
from .pull import PullResult, pull
from .upstream import to_catalog_payload

__all__ = ["activate", "pull", "PullResult", "to_catalog_payload"]
