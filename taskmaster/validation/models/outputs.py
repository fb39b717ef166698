"""Output models for the tools that reshape ClickUp responses.

Field values are relayed as ClickUp sends them (ids and due dates arrive as
strings or numbers depending on the endpoint), so they are not coerced.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class TaskSummary(BaseModel):
    """Trimmed task as returned by list_tasks."""

    id: Any = None
    name: Any = None
    status: Any = None
    priority: Any = None
    due_date: Any = None
    assignees: Optional[List[Any]] = None


class ListTasksOutput(BaseModel):
    """list_tasks result: upstream page size, returned count, trimmed tasks."""

    total: int
    returned: int
    tasks: List[TaskSummary]


class CustomFieldOption(BaseModel):
    id: Any = None
    name: Any = None
    color: Any = None


class CustomFieldSummary(BaseModel):
    """Custom field definition as returned by get_list_custom_fields."""

    id: Any = None
    name: Any = None
    type: Any = None
    type_config: Optional[Dict[str, Any]] = None
    options: Optional[List[CustomFieldOption]] = None
    required: Any = None


class ListCustomFieldsOutput(BaseModel):
    list_id: str
    fields: List[CustomFieldSummary]
    summary: str
