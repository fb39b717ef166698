"""Doc and page tool handlers."""

from __future__ import annotations

from typing import List

from taskmaster.clickup import create_doc, get_doc, update_page
from taskmaster.mcp_server.responses import _success
from taskmaster.mcp_server.tool_types import ToolContext, ToolResponse, ToolSpec
from taskmaster.validation.models import CreateDocInput, GetDocInput, UpdatePageInput


async def _tool_create_doc(ctx: ToolContext, payload: CreateDocInput) -> ToolResponse:
    return _success(await create_doc(ctx.client, payload, ctx.token))


async def _tool_get_doc(ctx: ToolContext, payload: GetDocInput) -> ToolResponse:
    return _success(await get_doc(ctx.client, payload, ctx.token))


async def _tool_update_page(ctx: ToolContext, payload: UpdatePageInput) -> ToolResponse:
    return _success(await update_page(ctx.client, payload, ctx.token))


DOC_TOOLS: List[ToolSpec] = [
    ToolSpec(
        name="create_doc",
        description=(
            "Create a ClickUp Doc in a workspace (defaults to the configured workspace). "
            "Optional initial Markdown content and a parent folder or list id."
        ),
        input_model=CreateDocInput,
        handler=_tool_create_doc,
    ),
    ToolSpec(
        name="get_doc",
        description="Get a ClickUp Doc and its pages.",
        input_model=GetDocInput,
        handler=_tool_get_doc,
    ),
    ToolSpec(
        name="update_page",
        description="Replace the content of a page inside a ClickUp Doc.",
        input_model=UpdatePageInput,
        handler=_tool_update_page,
    ),
]
