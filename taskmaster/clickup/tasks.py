"""Task operations: list, get, create, update."""

from typing import Any, Dict, List, Tuple

from taskmaster.clickup.client import ClickUpClient
from taskmaster.validation.models import (
    CreateTaskInput,
    GetTaskInput,
    ListTasksInput,
    ListTasksOutput,
    TaskSummary,
    UpdateTaskInput,
)


def _flag(value: bool) -> str:
    return "true" if value else "false"


def _list_params(args: ListTasksInput) -> List[Tuple[str, str]]:
    params: List[Tuple[str, str]] = [
        ("archived", _flag(args.archived)),
        ("page", str(args.page)),
        ("subtasks", _flag(args.subtasks)),
    ]
    if args.order_by:
        params.append(("order_by", args.order_by))
    if args.reverse is not None:
        params.append(("reverse", _flag(args.reverse)))
    for status in args.statuses or []:
        params.append(("statuses[]", status))
    for assignee in args.assignees or []:
        params.append(("assignees[]", str(assignee)))
    return params


def summarize_task(task: Dict[str, Any]) -> TaskSummary:
    """Keep only id, name, status, priority, due date and assignee names."""
    status = task.get("status") or {}
    priority = task.get("priority") or {}
    assignees = task.get("assignees")
    return TaskSummary(
        id=task.get("id"),
        name=task.get("name"),
        status=status.get("status") if isinstance(status, dict) else status,
        priority=priority.get("priority") if isinstance(priority, dict) else priority,
        due_date=task.get("due_date"),
        assignees=(
            [a.get("username") or a.get("email") for a in assignees]
            if isinstance(assignees, list)
            else None
        ),
    )


async def list_tasks(client: ClickUpClient, args: ListTasksInput, token: str) -> Dict[str, Any]:
    data = await client.get(f"/list/{args.list_id}/task", token, params=_list_params(args))
    tasks = data.get("tasks") or []
    trimmed = [summarize_task(task) for task in tasks[: args.limit]]
    output = ListTasksOutput(total=len(tasks), returned=len(trimmed), tasks=trimmed)
    return output.model_dump(mode="json")


async def get_task(client: ClickUpClient, args: GetTaskInput, token: str) -> Any:
    params = None
    if args.custom_task_ids:
        params = {"custom_task_ids": "true", "team_id": args.team_id}
    return await client.get(f"/task/{args.task_id}", token, params=params)


async def create_task(client: ClickUpClient, args: CreateTaskInput, token: str) -> Any:
    body = args.model_dump(exclude={"list_id"}, exclude_none=True)
    return await client.post(f"/list/{args.list_id}/task", token, json=body)


async def update_task(client: ClickUpClient, args: UpdateTaskInput, token: str) -> Any:
    return await client.put(f"/task/{args.task_id}", token, json=args.changes())
