"""Discovery tool handlers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List

from taskmaster.mcp_server.responses import _success
from taskmaster.mcp_server.tool_types import ToolContext, ToolResponse, ToolSpec
from taskmaster.validation.models import PingInput, PingOutput


async def _tool_ping(ctx: ToolContext, payload: PingInput) -> ToolResponse:
    if ctx.credential_source:
        message = f"ClickUp adapter is online (credential: {ctx.credential_source})."
    else:
        message = "ClickUp adapter is online, but no ClickUp credential is configured."
    output = PingOutput(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat(),
        message=message,
        credential_source=ctx.credential_source,
    )
    return _success(output.model_dump(mode="json"))


DISCOVERY_TOOLS: List[ToolSpec] = [
    ToolSpec(
        name="ping",
        description=(
            "Health check - Verify service availability. "
            "WORKFLOW: Use this first to confirm the service is responsive and to see which ClickUp "
            "credential (oauth or static) the other tools will use. Does not call ClickUp."
        ),
        input_model=PingInput,
        handler=_tool_ping,
        requires_credential=False,
    ),
]
