"""Tool handlers grouped by ClickUp resource."""

from taskmaster.mcp_server.tools.comments import COMMENT_TOOLS
from taskmaster.mcp_server.tools.custom_fields import CUSTOM_FIELD_TOOLS
from taskmaster.mcp_server.tools.discovery import DISCOVERY_TOOLS
from taskmaster.mcp_server.tools.docs import DOC_TOOLS
from taskmaster.mcp_server.tools.tasks import TASK_TOOLS

__all__ = [
    "COMMENT_TOOLS",
    "CUSTOM_FIELD_TOOLS",
    "DISCOVERY_TOOLS",
    "DOC_TOOLS",
    "TASK_TOOLS",
]
