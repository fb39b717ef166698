"""Typed custom-field values.

A custom-field value travels as one of four JSON shapes. ``TypedFieldValue``
tags the value with its shape so it can be checked against the declared
ClickUp field type before anything is sent upstream.
"""

from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictInt, StrictStr

FieldValue = Union[StrictBool, StrictInt, StrictFloat, StrictStr, List[StrictStr]]


class FieldValueKind(str, Enum):
    """JSON shape of a custom-field value."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    STRING_LIST = "string_list"


# ClickUp field type tag -> accepted value shape. Types not listed here
# (users, tasks, location, ...) take structured values and are left to ClickUp.
FIELD_TYPE_KINDS: Dict[str, FieldValueKind] = {
    "text": FieldValueKind.STRING,
    "short_text": FieldValueKind.STRING,
    "email": FieldValueKind.STRING,
    "phone": FieldValueKind.STRING,
    "url": FieldValueKind.STRING,
    "drop_down": FieldValueKind.STRING,
    "number": FieldValueKind.NUMBER,
    "currency": FieldValueKind.NUMBER,
    "emoji": FieldValueKind.NUMBER,
    "date": FieldValueKind.NUMBER,
    "progress": FieldValueKind.NUMBER,
    "checkbox": FieldValueKind.BOOLEAN,
    "labels": FieldValueKind.STRING_LIST,
}


def kind_of(value: object) -> FieldValueKind:
    """Classify ``value``; raises ValueError for unsupported shapes."""
    # bool before int: True is an int in Python
    if isinstance(value, bool):
        return FieldValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return FieldValueKind.NUMBER
    if isinstance(value, str):
        return FieldValueKind.STRING
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return FieldValueKind.STRING_LIST
    raise ValueError(
        f"Unsupported custom field value {value!r}: expected a string, number, "
        "boolean or list of strings"
    )


def expected_kind(field_type: Optional[str]) -> Optional[FieldValueKind]:
    if not field_type:
        return None
    return FIELD_TYPE_KINDS.get(field_type.strip().lower())


class TypedFieldValue(BaseModel):
    """A custom-field value tagged with its shape."""

    model_config = ConfigDict(frozen=True)

    kind: FieldValueKind
    value: FieldValue

    @classmethod
    def from_value(cls, value: FieldValue, field_type: Optional[str] = None) -> "TypedFieldValue":
        """Tag ``value`` and check it against ``field_type`` when the type is known.

        Raises:
            ValueError: if the value shape is unsupported or does not match the
                declared field type
        """
        kind = kind_of(value)
        expected = expected_kind(field_type)
        if expected is not None and kind is not expected:
            raise ValueError(
                f"Custom field of type '{field_type}' expects a {expected.value} value, "
                f"got {kind.value}"
            )
        return cls(kind=kind, value=value)
