"""Argument validation for MCP tools."""

from taskmaster.validation.field_values import (
    FIELD_TYPE_KINDS,
    FieldValueKind,
    TypedFieldValue,
)

__all__ = ["FIELD_TYPE_KINDS", "FieldValueKind", "TypedFieldValue"]
