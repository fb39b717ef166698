from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Type

from mcp.types import CallToolResult
from pydantic import BaseModel

from taskmaster.clickup import ClickUpClient
from taskmaster.config import Settings

ToolResponse = CallToolResult


@dataclass(frozen=True)
class ToolContext:
    """Per-call context handed to a tool handler."""

    settings: Settings
    client: ClickUpClient
    token: Optional[str]
    credential_source: Optional[str] = None


ToolHandler = Callable[[ToolContext, Any], Awaitable[Any]]


@dataclass(frozen=True)
class ToolSpec:
    """Registration entry: validator and handler for one tool name."""

    name: str
    description: str
    input_model: Type[BaseModel]
    handler: ToolHandler
    requires_credential: bool = True
