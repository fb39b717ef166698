"""Translate taskmaster exceptions into MCP error payloads."""

from typing import Any, Dict

from taskmaster.exceptions import (
    ConfigurationError,
    InvalidArgumentsError,
    InvalidStateError,
    MissingCredentialError,
    TaskmasterError,
    TokenDecryptionError,
    UpstreamError,
)

_UPSTREAM_RECOVERY = {
    400: "ClickUp rejected the request. Check the field values against the tool schema and retry.",
    401: "The ClickUp credential was rejected. Reconnect via /oauth/authorize or update CLICKUP_API_TOKEN.",
    403: "The credential has no access to this resource. Verify the workspace, list or task id.",
    404: "The referenced task, list, doc or page does not exist. Verify the id and retry.",
    429: "ClickUp rate limit reached. Wait before retrying.",
}


def _recovery_for(exc: TaskmasterError) -> str:
    if isinstance(exc, UpstreamError):
        if exc.status_code is None:
            return "ClickUp could not be reached. Check network connectivity and retry."
        return _UPSTREAM_RECOVERY.get(
            exc.status_code,
            "ClickUp returned an error. Review the message and body, then retry.",
        )
    if isinstance(exc, MissingCredentialError):
        return (
            "AUTHENTICATION REQUIRED: Connect a ClickUp account via the web server's "
            "/oauth/authorize endpoint, or configure CLICKUP_API_TOKEN and restart."
        )
    if isinstance(exc, InvalidArgumentsError):
        return "Check the tool's inputSchema for required parameters and their types, then retry."
    if isinstance(exc, InvalidStateError):
        return "Start the OAuth flow again from /oauth/authorize."
    if isinstance(exc, ConfigurationError):
        return "Set the missing configuration (see taskmaster.config_docs) and restart the service."
    if isinstance(exc, TokenDecryptionError):
        return "Reconnect via /oauth/authorize; the stored token cannot be read with the current key."
    return "Review the error message, adjust the request, and try again."


def map_error_for_mcp(exc: TaskmasterError) -> Dict[str, Any]:
    """Return ``{error_code, message, recovery_strategy, details}`` for ``exc``."""
    return {
        "error_code": exc.code,
        "message": exc.message,
        "recovery_strategy": _recovery_for(exc),
        "details": exc.details or None,
    }
