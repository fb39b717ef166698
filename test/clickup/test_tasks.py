"""Tests for task operations"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import pytest

from taskmaster.clickup import ClickUpClient, create_task, get_task, list_tasks, update_task
from taskmaster.clickup.tasks import summarize_task
from taskmaster.validation.models import (
    CreateTaskInput,
    GetTaskInput,
    ListTasksInput,
    UpdateTaskInput,
)

API = "/api/v2"


def make_task(index: int) -> dict:
    return {
        "id": f"task-{index}",
        "name": f"Task {index}",
        "status": {"status": "open", "color": "#d3d3d3"},
        "priority": {"priority": "high", "color": "#ffcc00"},
        "due_date": "1735689600000",
        "assignees": [{"id": 1, "username": "alice", "email": "alice@example.com"}],
        "description": "long text",
        "custom_fields": [],
    }


@pytest.fixture
def client(settings, fake_clickup):
    return ClickUpClient(settings, transport=fake_clickup.transport)


class TestSummarizeTask:
    def test_keeps_only_summary_fields(self):
        summary = summarize_task(make_task(1)).model_dump()
        assert summary == {
            "id": "task-1",
            "name": "Task 1",
            "status": "open",
            "priority": "high",
            "due_date": "1735689600000",
            "assignees": ["alice"],
        }

    def test_missing_priority_and_assignee_username(self):
        task = {
            "id": "x",
            "name": "n",
            "status": {"status": "done"},
            "priority": None,
            "assignees": [{"id": 2, "email": "bob@example.com"}],
        }
        summary = summarize_task(task)
        assert summary.priority is None
        assert summary.due_date is None
        assert summary.assignees == ["bob@example.com"]


class TestListTasks:
    @pytest.mark.asyncio
    async def test_limit_trims_upstream_page(self, settings, client, fake_clickup):
        fake_clickup.add(
            "GET",
            f"{API}/list/list-default/task",
            {"tasks": [make_task(i) for i in range(20)]},
        )
        args = ListTasksInput.model_validate({"limit": 5}, context={"settings": settings})

        result = await list_tasks(client, args, "tok")

        assert result["total"] == 20
        assert result["returned"] == 5
        assert [task["id"] for task in result["tasks"]] == [f"task-{i}" for i in range(5)]
        for task in result["tasks"]:
            assert set(task) == {"id", "name", "status", "priority", "due_date", "assignees"}

    @pytest.mark.asyncio
    async def test_returned_never_exceeds_total(self, settings, client, fake_clickup):
        fake_clickup.add("GET", f"{API}/list/L/task", {"tasks": [make_task(1), make_task(2)]})
        args = ListTasksInput.model_validate({"list_id": "L", "limit": 50})

        result = await list_tasks(client, args, "tok")

        assert result["total"] == 2
        assert result["returned"] == 2

    @pytest.mark.asyncio
    async def test_query_parameters(self, client, fake_clickup):
        fake_clickup.add("GET", f"{API}/list/L/task", {"tasks": []})
        args = ListTasksInput.model_validate(
            {
                "list_id": "L",
                "page": 2,
                "archived": True,
                "order_by": "due_date",
                "reverse": True,
                "statuses": ["open", "in progress"],
                "assignees": [11, "22"],
            }
        )

        result = await list_tasks(client, args, "tok")

        assert result == {"total": 0, "returned": 0, "tasks": []}
        params = fake_clickup.requests[0].url.params
        assert params["archived"] == "true"
        assert params["page"] == "2"
        assert params["subtasks"] == "false"
        assert params["order_by"] == "due_date"
        assert params["reverse"] == "true"
        assert params.get_list("statuses[]") == ["open", "in progress"]
        assert params.get_list("assignees[]") == ["11", "22"]

    @pytest.mark.asyncio
    async def test_missing_tasks_key_is_empty(self, client, fake_clickup):
        fake_clickup.add("GET", f"{API}/list/L/task", {})
        args = ListTasksInput.model_validate({"list_id": "L"})

        result = await list_tasks(client, args, "tok")

        assert result["total"] == 0


class TestGetTask:
    @pytest.mark.asyncio
    async def test_returns_full_record(self, client, fake_clickup):
        fake_clickup.add("GET", f"{API}/task/t1", make_task(1))

        result = await get_task(client, GetTaskInput.model_validate({"task_id": "t1"}), "tok")

        assert result["description"] == "long text"
        assert not fake_clickup.requests[0].url.params

    @pytest.mark.asyncio
    async def test_custom_task_ids_send_team(self, settings, client, fake_clickup):
        fake_clickup.add("GET", f"{API}/task/DEV-12", make_task(1))
        args = GetTaskInput.model_validate(
            {"task_id": "DEV-12", "custom_task_ids": True}, context={"settings": settings}
        )

        await get_task(client, args, "tok")

        params = fake_clickup.requests[0].url.params
        assert params["custom_task_ids"] == "true"
        assert params["team_id"] == "team-default"


class TestCreateAndUpdateTask:
    @pytest.mark.asyncio
    async def test_create_targets_default_list(self, settings, client, fake_clickup):
        fake_clickup.add("POST", f"{API}/list/list-default/task", {"id": "new"})
        args = CreateTaskInput.model_validate(
            {"name": "Ship it", "priority": 2, "tags": ["release"]},
            context={"settings": settings},
        )

        result = await create_task(client, args, "tok")

        assert result == {"id": "new"}
        assert fake_clickup.last_json() == {
            "name": "Ship it",
            "priority": 2,
            "tags": ["release"],
            "notify_all": True,
        }

    @pytest.mark.asyncio
    async def test_update_sends_only_changes(self, client, fake_clickup):
        fake_clickup.add("PUT", f"{API}/task/t1", {"id": "t1", "status": {"status": "done"}})
        args = UpdateTaskInput.model_validate({"task_id": "t1", "status": "done"})

        await update_task(client, args, "tok")

        assert fake_clickup.last_json() == {"status": "done"}
