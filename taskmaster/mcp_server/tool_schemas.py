"""MCP tool schemas (list_tools).

Every ``inputSchema`` is generated from the tool's pydantic input model, so the
advertised schema and the validation applied by the dispatcher cannot drift.
"""

from __future__ import annotations

from typing import Any, Dict, List

from mcp.types import Tool

from taskmaster.mcp_server.routing import TOOLS


def _input_schema(model) -> Dict[str, Any]:
    schema = model.model_json_schema()
    schema.pop("title", None)
    schema.setdefault("type", "object")
    schema.setdefault("properties", {})
    return schema


def build_tools() -> List[Tool]:
    return [
        Tool(
            name=spec.name,
            description=spec.description,
            inputSchema=_input_schema(spec.input_model),
        )
        for spec in TOOLS.values()
    ]
