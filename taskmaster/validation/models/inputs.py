"""Input models for MCP server tools.

Each tool validates its arguments with one of these models before any call to
ClickUp is made. Defaults that depend on configuration (the default list and
workspace) are taken from the ``Settings`` passed as validation context:

    ListTasksInput.model_validate(arguments, context={"settings": settings})
"""

from typing import List, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationInfo,
    field_validator,
    model_validator,
)

from taskmaster.config_docs import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from taskmaster.validation.field_values import FieldValue, TypedFieldValue
from taskmaster.validation.models.common import NonEmptyStr, settings_from


class ToolInput(BaseModel):
    """Base for tool inputs: unknown keys sent by MCP clients are ignored."""

    model_config = ConfigDict(extra="ignore")


# ---------------------------------------------------------------------------
# Tasks
# ---------------------------------------------------------------------------


class ListTasksInput(ToolInput):
    """Input for list_tasks.

    Args:
        list_id: List to read (defaults to the configured list)
        archived: Include archived tasks
        page: Upstream page number, starting at 0
        limit: Maximum tasks returned (default 20, capped at 100)
        order_by: Sort key
        reverse: Reverse the sort order
        subtasks: Include subtasks
        statuses: Only tasks in these statuses
        assignees: Only tasks assigned to these user ids
    """

    list_id: Optional[NonEmptyStr] = Field(
        default=None, description="List ID (defaults to the configured list)"
    )
    archived: StrictBool = False
    page: StrictInt = Field(default=0, ge=0)
    limit: StrictInt = Field(
        default=DEFAULT_PAGE_SIZE,
        ge=1,
        description=f"Max tasks to return (default {DEFAULT_PAGE_SIZE}, max {MAX_PAGE_SIZE})",
    )
    order_by: Optional[Literal["created", "updated", "id", "due_date"]] = None
    reverse: Optional[StrictBool] = None
    subtasks: StrictBool = False
    statuses: Optional[List[StrictStr]] = None
    assignees: Optional[List[Union[StrictInt, StrictStr]]] = None

    @field_validator("limit")
    @classmethod
    def _cap_limit(cls, value: int) -> int:
        return min(value, MAX_PAGE_SIZE)

    @model_validator(mode="after")
    def _default_list(self, info: ValidationInfo) -> "ListTasksInput":
        if self.list_id is None:
            self.list_id = settings_from(info).default_list_id
        return self


class GetTaskInput(ToolInput):
    """Input for get_task.

    Args:
        task_id: Task to retrieve
        custom_task_ids: Treat ``task_id`` as a custom task id (requires team_id)
        team_id: Workspace for custom task ids (defaults to the configured workspace)
    """

    task_id: NonEmptyStr = Field(description="The ID of the task to retrieve")
    custom_task_ids: Optional[StrictBool] = None
    team_id: Optional[NonEmptyStr] = None

    @model_validator(mode="after")
    def _default_team(self, info: ValidationInfo) -> "GetTaskInput":
        if self.team_id is None:
            self.team_id = settings_from(info).default_team_id
        return self


class CreateTaskInput(ToolInput):
    """Input for create_task."""

    list_id: Optional[NonEmptyStr] = Field(
        default=None, description="List ID (defaults to the configured list)"
    )
    name: NonEmptyStr = Field(description="Task name (required)")
    description: Optional[StrictStr] = None
    assignees: Optional[List[StrictInt]] = Field(default=None, description="User IDs to assign")
    tags: Optional[List[StrictStr]] = None
    status: Optional[StrictStr] = None
    priority: Optional[StrictInt] = Field(
        default=None, ge=1, le=4, description="1=Urgent, 2=High, 3=Normal, 4=Low"
    )
    due_date: Optional[StrictInt] = Field(
        default=None, ge=0, description="Unix timestamp in milliseconds"
    )
    due_date_time: Optional[StrictBool] = None
    notify_all: StrictBool = True

    @model_validator(mode="after")
    def _default_list(self, info: ValidationInfo) -> "CreateTaskInput":
        if self.list_id is None:
            self.list_id = settings_from(info).default_list_id
        return self


class AssigneeChanges(ToolInput):
    """Assignee delta for update_task."""

    add: List[StrictInt] = Field(default_factory=list)
    rem: List[StrictInt] = Field(default_factory=list)


class UpdateTaskInput(ToolInput):
    """Input for update_task. Only the supplied fields are sent to ClickUp."""

    task_id: NonEmptyStr = Field(description="The ID of the task to update")
    name: Optional[NonEmptyStr] = None
    description: Optional[StrictStr] = None
    status: Optional[StrictStr] = None
    priority: Optional[StrictInt] = Field(
        default=None, ge=1, le=4, description="1=Urgent, 2=High, 3=Normal, 4=Low"
    )
    due_date: Optional[StrictInt] = Field(default=None, ge=0)
    assignees: Optional[AssigneeChanges] = None
    archived: Optional[StrictBool] = None

    def changes(self) -> dict:
        """Fields to send upstream, without the task id and unset values."""
        return self.model_dump(exclude={"task_id"}, exclude_none=True)

    @model_validator(mode="after")
    def _require_change(self) -> "UpdateTaskInput":
        if not self.changes():
            raise ValueError("update_task requires at least one field to change")
        return self


# ---------------------------------------------------------------------------
# Custom fields
# ---------------------------------------------------------------------------


class GetListCustomFieldsInput(ToolInput):
    """Input for get_list_custom_fields."""

    list_id: Optional[NonEmptyStr] = Field(
        default=None, description="List ID to read custom fields from (defaults to the configured list)"
    )

    @model_validator(mode="after")
    def _default_list(self, info: ValidationInfo) -> "GetListCustomFieldsInput":
        if self.list_id is None:
            self.list_id = settings_from(info).default_list_id
        return self


class SetCustomFieldInput(ToolInput):
    """Input for set_custom_field.

    Args:
        task_id: Task to update
        field_id: UUID of the custom field
        value: New value; its JSON type must match the field type
        field_type: Declared field type from get_list_custom_fields; when given,
            a mismatched value is rejected before calling ClickUp
    """

    task_id: NonEmptyStr = Field(description="The ID of the task")
    field_id: NonEmptyStr = Field(description="The UUID of the custom field")
    value: FieldValue = Field(description="The value to set (type depends on field type)")
    field_type: Optional[StrictStr] = Field(
        default=None,
        description="Field type reported by get_list_custom_fields (e.g. 'number', 'checkbox')",
    )

    _typed_value: Optional[TypedFieldValue] = PrivateAttr(default=None)

    @model_validator(mode="after")
    def _check_value_type(self) -> "SetCustomFieldInput":
        self._typed_value = TypedFieldValue.from_value(self.value, self.field_type)
        return self

    @property
    def typed_value(self) -> TypedFieldValue:
        # model_construct skips validators
        if self._typed_value is None:
            self._typed_value = TypedFieldValue.from_value(self.value, self.field_type)
        return self._typed_value


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


class PostCommentInput(ToolInput):
    """Input for post_comment."""

    task_id: NonEmptyStr = Field(description="The ID of the task to comment on")
    comment_text: NonEmptyStr = Field(description="The comment content")
    assignee: Optional[StrictInt] = Field(default=None, description="User ID to assign the comment to")
    notify_all: StrictBool = True


class GetCommentsInput(ToolInput):
    """Input for get_comments."""

    task_id: NonEmptyStr = Field(description="The ID of the task to get comments from")


# ---------------------------------------------------------------------------
# Docs
# ---------------------------------------------------------------------------


class CreateDocInput(ToolInput):
    """Input for create_doc."""

    workspace_id: Optional[NonEmptyStr] = Field(
        default=None, description="Workspace ID (defaults to the configured workspace)"
    )
    name: NonEmptyStr = Field(description="Document name")
    content: Optional[StrictStr] = Field(default=None, description="Initial content (Markdown supported)")
    parent: Optional[NonEmptyStr] = Field(default=None, description="Parent Folder or List ID")

    @model_validator(mode="after")
    def _default_workspace(self, info: ValidationInfo) -> "CreateDocInput":
        if self.workspace_id is None:
            self.workspace_id = settings_from(info).default_team_id
        return self


class GetDocInput(ToolInput):
    """Input for get_doc."""

    doc_id: NonEmptyStr = Field(description="The ID of the document to retrieve")


class UpdatePageInput(ToolInput):
    """Input for update_page. The page content is replaced as a whole."""

    page_id: NonEmptyStr = Field(description="The ID of the page to update")
    content: StrictStr = Field(description="New content for the page")


class PingInput(ToolInput):
    """Input for ping (no arguments)."""
