"""Custom field tool handlers."""

from __future__ import annotations

from typing import List

from taskmaster.clickup import get_list_custom_fields, set_custom_field
from taskmaster.mcp_server.responses import _success
from taskmaster.mcp_server.tool_types import ToolContext, ToolResponse, ToolSpec
from taskmaster.validation.models import GetListCustomFieldsInput, SetCustomFieldInput


async def _tool_get_list_custom_fields(
    ctx: ToolContext, payload: GetListCustomFieldsInput
) -> ToolResponse:
    return _success(await get_list_custom_fields(ctx.client, payload, ctx.token))


async def _tool_set_custom_field(ctx: ToolContext, payload: SetCustomFieldInput) -> ToolResponse:
    return _success(await set_custom_field(ctx.client, payload, ctx.token))


CUSTOM_FIELD_TOOLS: List[ToolSpec] = [
    ToolSpec(
        name="get_list_custom_fields",
        description=(
            "List the custom fields available on a ClickUp list (defaults to the configured list). "
            "WORKFLOW: Call this before set_custom_field to learn each field's id, type and, for "
            "dropdowns, the option ids."
        ),
        input_model=GetListCustomFieldsInput,
        handler=_tool_get_list_custom_fields,
    ),
    ToolSpec(
        name="set_custom_field",
        description=(
            "Set a custom field value on a task. Value types: text/email/url/phone -> string, "
            "number/currency/date/progress -> number, checkbox -> boolean, drop_down -> option id "
            "string, labels -> array of label ids. Pass field_type from get_list_custom_fields to "
            "have mismatched values rejected before ClickUp is called."
        ),
        input_model=SetCustomFieldInput,
        handler=_tool_set_custom_field,
    ),
]
