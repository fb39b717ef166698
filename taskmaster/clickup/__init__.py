"""ClickUp API client and one function per tool operation."""

from taskmaster.clickup.client import ClickUpClient
from taskmaster.clickup.comments import get_comments, post_comment
from taskmaster.clickup.custom_fields import get_list_custom_fields, set_custom_field
from taskmaster.clickup.docs import create_doc, get_doc, update_page
from taskmaster.clickup.tasks import create_task, get_task, list_tasks, update_task

__all__ = [
    "ClickUpClient",
    "list_tasks",
    "get_task",
    "create_task",
    "update_task",
    "get_list_custom_fields",
    "set_custom_field",
    "post_comment",
    "get_comments",
    "create_doc",
    "get_doc",
    "update_page",
]
