"""OverridesProvider Protocol (single-class module).

Runtime extension point for applications that customize the catalog without
editing configuration files.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Protocol, runtime_checkable


@runtime_checkable
class OverridesProvider(Protocol):
    """Supplies highest-precedence providers, models and exclude patterns."""

    def providers(self) -> List[Dict[str, Any]]:  # pragma: no cover - trivial
        """Return provider records merged over packaged and config data."""
        ...

    def models(self) -> List[Dict[str, Any]]:  # pragma: no cover - trivial
        """Return model records merged over packaged and config data."""
        ...

    def excludes(self) -> Mapping[str, List[str]]:  # pragma: no cover - trivial
        """Return ``{provider: [globs]}`` of model ids to exclude."""
        ...
