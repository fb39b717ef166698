"""Comment tool handlers."""

from __future__ import annotations

from typing import List

from taskmaster.clickup import get_comments, post_comment
from taskmaster.mcp_server.responses import _success
from taskmaster.mcp_server.tool_types import ToolContext, ToolResponse, ToolSpec
from taskmaster.validation.models import GetCommentsInput, PostCommentInput


async def _tool_post_comment(ctx: ToolContext, payload: PostCommentInput) -> ToolResponse:
    return _success(await post_comment(ctx.client, payload, ctx.token))


async def _tool_get_comments(ctx: ToolContext, payload: GetCommentsInput) -> ToolResponse:
    return _success(await get_comments(ctx.client, payload, ctx.token))


COMMENT_TOOLS: List[ToolSpec] = [
    ToolSpec(
        name="post_comment",
        description=(
            "Post a comment on a ClickUp task. Optionally assign the comment to a user; "
            "notify_all defaults to true."
        ),
        input_model=PostCommentInput,
        handler=_tool_post_comment,
    ),
    ToolSpec(
        name="get_comments",
        description="Get all comments on a ClickUp task, as returned by ClickUp.",
        input_model=GetCommentsInput,
        handler=_tool_get_comments,
    ),
]
