"""Task tool handlers."""

from __future__ import annotations

from typing import List

from taskmaster.clickup import create_task, get_task, list_tasks, update_task
from taskmaster.mcp_server.responses import _success
from taskmaster.mcp_server.tool_types import ToolContext, ToolResponse, ToolSpec
from taskmaster.validation.models import (
    CreateTaskInput,
    GetTaskInput,
    ListTasksInput,
    UpdateTaskInput,
)


async def _tool_list_tasks(ctx: ToolContext, payload: ListTasksInput) -> ToolResponse:
    return _success(await list_tasks(ctx.client, payload, ctx.token))


async def _tool_get_task(ctx: ToolContext, payload: GetTaskInput) -> ToolResponse:
    return _success(await get_task(ctx.client, payload, ctx.token))


async def _tool_create_task(ctx: ToolContext, payload: CreateTaskInput) -> ToolResponse:
    return _success(await create_task(ctx.client, payload, ctx.token))


async def _tool_update_task(ctx: ToolContext, payload: UpdateTaskInput) -> ToolResponse:
    return _success(await update_task(ctx.client, payload, ctx.token))


TASK_TOOLS: List[ToolSpec] = [
    ToolSpec(
        name="list_tasks",
        description=(
            "List tasks in a ClickUp list. Defaults to the configured list when list_id is omitted. "
            "Returns {total, returned, tasks} where each task is a compact summary "
            "(id, name, status, priority, due_date, assignees). "
            "Use get_task for the full record of a single task."
        ),
        input_model=ListTasksInput,
        handler=_tool_list_tasks,
    ),
    ToolSpec(
        name="get_task",
        description=(
            "Get full details of a single ClickUp task, including description, custom fields, "
            "assignees and dates. Set custom_task_ids=true to look the task up by its custom id."
        ),
        input_model=GetTaskInput,
        handler=_tool_get_task,
    ),
    ToolSpec(
        name="create_task",
        description=(
            "Create a new task in a ClickUp list (defaults to the configured list). "
            "Priority: 1=Urgent, 2=High, 3=Normal, 4=Low. due_date is a Unix timestamp in milliseconds. "
            "Returns the created task as reported by ClickUp."
        ),
        input_model=CreateTaskInput,
        handler=_tool_create_task,
    ),
    ToolSpec(
        name="update_task",
        description=(
            "Update an existing ClickUp task. Only the fields you supply are changed; at least one "
            "field besides task_id is required. Assignees take {add: [ids], rem: [ids]}."
        ),
        input_model=UpdateTaskInput,
        handler=_tool_update_task,
    ),
]
