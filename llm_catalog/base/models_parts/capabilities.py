"""Capability schema for catalog models.

Each sub-object carries its own defaults so that an upstream record which
only mentions ``tools.enabled`` still produces complete ``json``,
``streaming`` and ``reasoning`` blocks.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Reasoning(BaseModel):
    """Reasoning support.

    Attributes:
        enabled: Whether the model exposes a reasoning/thinking mode.
        token_budget: Optional upper bound for reasoning tokens.
    """

    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    token_budget: Optional[int] = Field(default=None, ge=0)


class Tools(BaseModel):
    """Tool (function) calling flags."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    streaming: bool = False
    strict: bool = False
    parallel: bool = False


class JsonCaps(BaseModel):
    """Structured JSON output flags.

    Upstream records use the key ``schema``; it is exposed as ``json_schema``
    to avoid shadowing ``BaseModel`` attributes.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    native: bool = False
    json_schema: bool = Field(default=False, alias="schema")
    strict: bool = False


class Streaming(BaseModel):
    """Streaming flags; plain text streaming is assumed unless disabled."""

    model_config = ConfigDict(frozen=True)

    text: bool = True
    tool_calls: bool = False


class Capabilities(BaseModel):
    """Complete capability tree of a model.

    Attributes:
        chat: Conversational completion support (default ``True``).
        embeddings: Embedding generation support.
        reasoning: Reasoning block.
        tools: Tool calling block.
        json_output: JSON output block (upstream key ``json``).
        streaming: Streaming block.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    chat: bool = True
    embeddings: bool = False
    reasoning: Reasoning = Field(default_factory=Reasoning)
    tools: Tools = Field(default_factory=Tools)
    json_output: JsonCaps = Field(default_factory=JsonCaps, alias="json")
    streaming: Streaming = Field(default_factory=Streaming)


__all__ = ["Reasoning", "Tools", "JsonCaps", "Streaming", "Capabilities"]
