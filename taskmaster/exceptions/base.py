"""Base exception classes for taskmaster.

Every exception carries a machine-readable ``code`` and optional ``details``
so the MCP layer and the web server can turn it into a structured error
payload without inspecting the message text.
"""

from typing import Any, Dict, Optional


class TaskmasterError(Exception):
    """Root of the taskmaster exception hierarchy."""

    default_code = "TASKMASTER_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class InvalidArgumentsError(TaskmasterError):
    """Raised when caller-supplied arguments are rejected before any network call."""

    default_code = "INVALID_ARGUMENTS"


class ConfigurationError(TaskmasterError):
    """Raised when a required setting (e.g. OAuth client id) is absent."""

    default_code = "CONFIGURATION_ERROR"
