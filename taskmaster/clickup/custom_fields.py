"""Custom field discovery and updates."""

from typing import Any, Dict, List, Optional

from taskmaster.clickup.client import ClickUpClient
from taskmaster.validation.models import (
    CustomFieldOption,
    CustomFieldSummary,
    GetListCustomFieldsInput,
    ListCustomFieldsOutput,
    SetCustomFieldInput,
)


def _options(type_config: Any) -> Optional[List[CustomFieldOption]]:
    if not isinstance(type_config, dict):
        return None
    options = type_config.get("options")
    if not isinstance(options, list):
        return None
    return [
        CustomFieldOption(id=opt.get("id"), name=opt.get("name"), color=opt.get("color"))
        for opt in options
        if isinstance(opt, dict)
    ]


def summarize_field(field: Dict[str, Any]) -> CustomFieldSummary:
    type_config = field.get("type_config")
    return CustomFieldSummary(
        id=field.get("id"),
        name=field.get("name"),
        type=field.get("type"),
        type_config=type_config if isinstance(type_config, dict) else None,
        options=_options(type_config),
        required=field.get("required"),
    )


async def get_list_custom_fields(
    client: ClickUpClient, args: GetListCustomFieldsInput, token: str
) -> Dict[str, Any]:
    data = await client.get(f"/list/{args.list_id}/field", token)
    fields = [summarize_field(field) for field in data.get("fields") or []]
    names = ", ".join(str(field.name) for field in fields)
    output = ListCustomFieldsOutput(
        list_id=args.list_id,
        fields=fields,
        summary=f"Found {len(fields)} custom fields: {names}",
    )
    return output.model_dump(mode="json")


async def set_custom_field(client: ClickUpClient, args: SetCustomFieldInput, token: str) -> Any:
    return await client.post(
        f"/task/{args.task_id}/field/{args.field_id}",
        token,
        json={"value": args.typed_value.value},
    )
