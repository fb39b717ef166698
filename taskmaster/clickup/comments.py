"""Task comments."""

from typing import Any

from taskmaster.clickup.client import ClickUpClient
from taskmaster.validation.models import GetCommentsInput, PostCommentInput


async def post_comment(client: ClickUpClient, args: PostCommentInput, token: str) -> Any:
    body = args.model_dump(exclude={"task_id"}, exclude_none=True)
    return await client.post(f"/task/{args.task_id}/comment", token, json=body)


async def get_comments(client: ClickUpClient, args: GetCommentsInput, token: str) -> Any:
    return await client.get(f"/task/{args.task_id}/comment", token)
