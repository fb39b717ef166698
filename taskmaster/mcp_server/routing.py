"""Tool routing and dispatch for MCP server."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from taskmaster.errors import map_error_for_mcp
from taskmaster.exceptions import MissingCredentialError, TaskmasterError
from taskmaster.logger import Logger

from taskmaster.mcp_server.components import ServerComponents
from taskmaster.mcp_server.responses import _error, _handle_validation_error
from taskmaster.mcp_server.tool_types import ToolContext, ToolResponse, ToolSpec

from taskmaster.mcp_server.tools import (
    COMMENT_TOOLS,
    CUSTOM_FIELD_TOOLS,
    DISCOVERY_TOOLS,
    DOC_TOOLS,
    TASK_TOOLS,
)


TOOLS: Dict[str, ToolSpec] = {
    spec.name: spec
    for spec in (
        *DISCOVERY_TOOLS,
        *TASK_TOOLS,
        *CUSTOM_FIELD_TOOLS,
        *COMMENT_TOOLS,
        *DOC_TOOLS,
    )
}


def _domain_error(exc: TaskmasterError) -> ToolResponse:
    error_response = map_error_for_mcp(exc)
    return _error(
        code=error_response["error_code"],
        message=error_response["message"],
        recovery=error_response["recovery_strategy"],
        details=error_response["details"],
    )


async def dispatch_tool_call(
    *,
    name: str,
    arguments: Optional[Dict[str, Any]],
    components: ServerComponents,
    logger: Logger,
) -> ToolResponse:
    arguments = arguments or {}
    logger.info("Tool invocation started", tool=name, args_keys=list(arguments.keys()))

    spec = TOOLS.get(name)
    if spec is None:
        logger.error("Unknown tool requested", tool=name, available_tools=list(TOOLS.keys()))
        return _error(
            code="UNKNOWN_TOOL",
            message=f"Tool '{name}' does not exist in this service.",
            recovery=(
                f"Available tools: {', '.join(TOOLS.keys())}. "
                "Call list_tools() to see detailed descriptions and schemas. "
                "Check for typos in the tool name."
            ),
        )

    try:
        token, source = components.credentials.resolve_with_source()
        if token is None and spec.requires_credential:
            raise MissingCredentialError()

        payload = spec.input_model.model_validate(
            arguments, context={"settings": components.settings}
        )
        ctx = ToolContext(
            settings=components.settings,
            client=components.client,
            token=token,
            credential_source=source,
        )
        result = await spec.handler(ctx, payload)
        logger.info("Tool completed successfully", tool=name, credential_source=source)
        return result
    except PydanticValidationError as exc:
        logger.error(
            "Validation error",
            tool=name,
            error_count=len(exc.errors()),
            errors=[{"loc": e["loc"], "msg": e["msg"], "type": e["type"]} for e in exc.errors()],
        )
        return _handle_validation_error(exc)
    except TaskmasterError as exc:
        logger.error(
            "Domain error",
            tool=name,
            error_code=exc.code,
            error_type=type(exc).__name__,
            error_message=exc.message,
        )
        return _domain_error(exc)
    except Exception as exc:
        logger.error(
            "Unexpected tool failure",
            tool=name,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return _error(
            code="UNEXPECTED_ERROR",
            message=f"Unexpected error: {exc}",
            recovery="Check server logs for details and retry the request.",
        )
