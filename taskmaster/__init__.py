"""ClickUp Taskmaster - ClickUp tasks, comments, custom fields and docs as MCP tools."""

__version__ = "1.0.0"
