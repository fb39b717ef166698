"""Pydantic models for tool inputs and reshaped tool outputs."""

from taskmaster.validation.models.common import ErrorResponse, NonEmptyStr, PingOutput, settings_from
from taskmaster.validation.models.inputs import (
    AssigneeChanges,
    CreateDocInput,
    CreateTaskInput,
    GetCommentsInput,
    GetDocInput,
    GetListCustomFieldsInput,
    GetTaskInput,
    ListTasksInput,
    PingInput,
    PostCommentInput,
    SetCustomFieldInput,
    ToolInput,
    UpdatePageInput,
    UpdateTaskInput,
)
from taskmaster.validation.models.outputs import (
    CustomFieldOption,
    CustomFieldSummary,
    ListCustomFieldsOutput,
    ListTasksOutput,
    TaskSummary,
)

__all__ = [
    "ErrorResponse",
    "NonEmptyStr",
    "PingOutput",
    "settings_from",
    "AssigneeChanges",
    "CreateDocInput",
    "CreateTaskInput",
    "GetCommentsInput",
    "GetDocInput",
    "GetListCustomFieldsInput",
    "GetTaskInput",
    "ListTasksInput",
    "PingInput",
    "PostCommentInput",
    "SetCustomFieldInput",
    "ToolInput",
    "UpdatePageInput",
    "UpdateTaskInput",
    "CustomFieldOption",
    "CustomFieldSummary",
    "ListCustomFieldsOutput",
    "ListTasksOutput",
    "TaskSummary",
]
