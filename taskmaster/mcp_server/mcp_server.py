#!/usr/bin/env python3
"""ClickUp MCP server.

Exposes ClickUp tasks, custom fields, comments and docs as MCP tools. Each call
resolves a ClickUp credential (the stored OAuth token, else the static
``CLICKUP_API_TOKEN``), validates its arguments, performs one ClickUp API call
and returns the JSON result as text. Failures come back as error results
(``isError=True``) carrying ``{status, error_code, message, recovery_strategy,
details}``; no exception reaches the MCP client.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx
from mcp.server import Server
from mcp.types import CallToolResult, Tool

from taskmaster.config import Settings
from taskmaster.logger import Logger, session_logger
from taskmaster.mcp_server.components import initialize_components
from taskmaster.mcp_server.routing import dispatch_tool_call
from taskmaster.mcp_server.state import ensure_components, get_components, set_components
from taskmaster.mcp_server.tool_schemas import build_tools
from taskmaster.storage import KeyValueStore

app = Server("clickup-taskmaster")
logger: Logger = session_logger

# Set by main_mcp.py (or tests) before the server starts
settings_override: Optional[Settings] = None


async def initialize_server(
    store: Optional[KeyValueStore] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> None:
    """Initialize server components (idempotent)."""
    if get_components() is not None:
        return
    logger.info("Initialising ClickUp MCP server")
    settings = settings_override or Settings.from_env()
    set_components(
        initialize_components(
            settings=settings,
            logger=logger,
            store=store,
            transport=transport,
        )
    )


@app.list_tools()
async def handle_list_tools() -> List[Tool]:
    return build_tools()


@app.call_tool(validate_input=False)
async def handle_call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> CallToolResult:
    await initialize_server()
    return await dispatch_tool_call(
        name=name,
        arguments=arguments,
        components=ensure_components(),
        logger=logger,
    )
