"""Structured logging context object for catalog events.

:class:`LogContext` carries the fields shared by most catalog log events
(provider, model, source and pipeline stage) plus an ``extra`` mapping, and
offers ``to_dict`` which merges ``extra`` and prunes ``None`` values.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for catalog logging events."""

    provider: Optional[str] = None
    model: Optional[str] = None
    source: Optional[str] = None
    stage: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
