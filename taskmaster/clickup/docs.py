"""Docs and pages."""

from typing import Any

from taskmaster.clickup.client import ClickUpClient
from taskmaster.validation.models import CreateDocInput, GetDocInput, UpdatePageInput


async def create_doc(client: ClickUpClient, args: CreateDocInput, token: str) -> Any:
    body = args.model_dump(exclude={"workspace_id"}, exclude_none=True)
    return await client.post(f"/workspace/{args.workspace_id}/doc", token, json=body)


async def get_doc(client: ClickUpClient, args: GetDocInput, token: str) -> Any:
    return await client.get(f"/doc/{args.doc_id}", token)


async def update_page(client: ClickUpClient, args: UpdatePageInput, token: str) -> Any:
    return await client.put(f"/page/{args.page_id}", token, json={"content": args.content})
