"""MCP server response helpers.

This module holds low-level helpers used by tool routing:
- JSON serialization helpers
- success/error result formatting
- Pydantic validation error formatting

Every tool call ends in a ``CallToolResult`` with a single text item; errors
set ``isError`` and carry a structured JSON error payload.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from mcp.types import CallToolResult, TextContent
from pydantic import ValidationError as PydanticValidationError

from taskmaster.validation.models import ErrorResponse


def _json_serializer(obj: Any) -> Any:
    """Custom JSON serializer for non-standard types."""
    # Handle Pydantic models
    if hasattr(obj, "model_dump"):
        return obj.model_dump(mode="json")
    # Exceptions carried in validation error context
    if isinstance(obj, BaseException):
        return str(obj)
    # Handle dataclasses and regular objects
    if hasattr(obj, "__dict__"):
        return obj.__dict__
    # Fallback
    return str(obj)


def _json_text(payload: Any) -> TextContent:
    return TextContent(
        type="text",
        text=json.dumps(payload, indent=2, ensure_ascii=True, default=_json_serializer),
    )


def _success(data: Any) -> CallToolResult:
    return CallToolResult(content=[_json_text(data)], isError=False)


def _error(
    code: str, message: str, recovery: str, details: Optional[Dict[str, Any]] = None
) -> CallToolResult:
    error_model = ErrorResponse(
        error_code=code,
        message=message,
        recovery_strategy=recovery,
        details=details,
    )
    payload = {"status": "error", **error_model.model_dump(mode="json")}
    return CallToolResult(content=[_json_text(payload)], isError=True)


def _describe_validation_errors(exc: PydanticValidationError) -> str:
    parts = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(part) for part in error["loc"]) or "arguments"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


def _handle_validation_error(exc: PydanticValidationError) -> CallToolResult:
    # ctx may hold the raised ValueError, which is not JSON serializable
    errors = exc.errors(include_url=False, include_context=False)
    details = {"validation_errors": errors}

    # Build helpful recovery message based on error types
    missing_fields = [e["loc"][0] for e in errors if e["type"] == "missing" and e["loc"]]
    invalid_types = [e["loc"][0] for e in errors if "type" in e["type"] and e["loc"]]

    recovery_msg = "Input validation failed. "
    if missing_fields:
        recovery_msg += f"MISSING REQUIRED FIELDS: {', '.join(str(f) for f in missing_fields)}. "
    if invalid_types:
        recovery_msg += f"INCORRECT TYPES: {', '.join(str(f) for f in invalid_types)}. "
    recovery_msg += "Check the tool's inputSchema for required parameters and their types, correct your input, and retry."

    return _error(
        code="INVALID_ARGUMENTS",
        message=f"Invalid arguments: {_describe_validation_errors(exc)}",
        recovery=recovery_msg,
        details=details,
    )
