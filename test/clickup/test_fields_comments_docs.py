"""Tests for custom field, comment and doc operations"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import pytest

from taskmaster.clickup import (
    ClickUpClient,
    create_doc,
    get_comments,
    get_doc,
    get_list_custom_fields,
    post_comment,
    set_custom_field,
    update_page,
)
from taskmaster.validation.models import (
    CreateDocInput,
    GetCommentsInput,
    GetDocInput,
    GetListCustomFieldsInput,
    PostCommentInput,
    SetCustomFieldInput,
    UpdatePageInput,
)

API = "/api/v2"

FIELDS = {
    "fields": [
        {
            "id": "f-priority",
            "name": "Severity",
            "type": "drop_down",
            "type_config": {
                "options": [
                    {"id": "o1", "name": "Low", "color": "#00ff00", "orderindex": 0},
                    {"id": "o2", "name": "High", "color": "#ff0000", "orderindex": 1},
                ]
            },
            "required": False,
        },
        {"id": "f-points", "name": "Points", "type": "number", "type_config": {}},
    ]
}


@pytest.fixture
def client(settings, fake_clickup):
    return ClickUpClient(settings, transport=fake_clickup.transport)


class TestCustomFields:
    @pytest.mark.asyncio
    async def test_list_custom_fields_summary(self, settings, client, fake_clickup):
        fake_clickup.add("GET", f"{API}/list/list-default/field", FIELDS)
        args = GetListCustomFieldsInput.model_validate({}, context={"settings": settings})

        result = await get_list_custom_fields(client, args, "tok")

        assert result["list_id"] == "list-default"
        assert result["summary"] == "Found 2 custom fields: Severity, Points"
        severity, points = result["fields"]
        assert severity["options"] == [
            {"id": "o1", "name": "Low", "color": "#00ff00"},
            {"id": "o2", "name": "High", "color": "#ff0000"},
        ]
        assert points["options"] is None
        assert points["type"] == "number"

    @pytest.mark.asyncio
    async def test_set_custom_field_posts_value(self, client, fake_clickup):
        fake_clickup.add("POST", f"{API}/task/t1/field/f-points", {})
        args = SetCustomFieldInput.model_validate(
            {"task_id": "t1", "field_id": "f-points", "value": 8, "field_type": "number"}
        )

        await set_custom_field(client, args, "tok")

        assert fake_clickup.last_json() == {"value": 8}

    @pytest.mark.asyncio
    async def test_set_labels_value(self, client, fake_clickup):
        fake_clickup.add("POST", f"{API}/task/t1/field/f-labels", {})
        args = SetCustomFieldInput.model_validate(
            {"task_id": "t1", "field_id": "f-labels", "value": ["a", "b"]}
        )

        await set_custom_field(client, args, "tok")

        assert fake_clickup.last_json() == {"value": ["a", "b"]}


class TestComments:
    @pytest.mark.asyncio
    async def test_post_comment_body(self, client, fake_clickup):
        fake_clickup.add("POST", f"{API}/task/t1/comment", {"id": 99, "hist_id": "h"})
        args = PostCommentInput.model_validate(
            {"task_id": "t1", "comment_text": "Looks good", "assignee": 7}
        )

        result = await post_comment(client, args, "tok")

        assert result["id"] == 99
        assert fake_clickup.last_json() == {
            "comment_text": "Looks good",
            "assignee": 7,
            "notify_all": True,
        }

    @pytest.mark.asyncio
    async def test_get_comments_passthrough(self, client, fake_clickup):
        payload = {"comments": [{"id": "1", "comment_text": "hello"}]}
        fake_clickup.add("GET", f"{API}/task/t1/comment", payload)

        result = await get_comments(client, GetCommentsInput(task_id="t1"), "tok")

        assert result == payload


class TestDocs:
    @pytest.mark.asyncio
    async def test_create_doc_in_default_workspace(self, settings, client, fake_clickup):
        fake_clickup.add("POST", f"{API}/workspace/team-default/doc", {"id": "doc-1"})
        args = CreateDocInput.model_validate(
            {"name": "Runbook", "content": "# Steps"}, context={"settings": settings}
        )

        result = await create_doc(client, args, "tok")

        assert result == {"id": "doc-1"}
        assert fake_clickup.last_json() == {"name": "Runbook", "content": "# Steps"}

    @pytest.mark.asyncio
    async def test_get_doc(self, client, fake_clickup):
        fake_clickup.add("GET", f"{API}/doc/doc-1", {"id": "doc-1", "pages": []})

        result = await get_doc(client, GetDocInput(doc_id="doc-1"), "tok")

        assert result["pages"] == []

    @pytest.mark.asyncio
    async def test_update_page_replaces_content(self, client, fake_clickup):
        fake_clickup.add("PUT", f"{API}/page/p-1", {"id": "p-1"})

        await update_page(client, UpdatePageInput(page_id="p-1", content="new body"), "tok")

        assert fake_clickup.requests[0].method == "PUT"
        assert fake_clickup.last_json() == {"content": "new body"}
