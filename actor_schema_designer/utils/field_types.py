from __future__ import annotations

from typing import Any, Dict

STRING_TYPE = "string"
INTEGER_TYPE = "integer"
NUMBER_TYPE = "number"
BOOLEAN_TYPE = "boolean"
ARRAY_TYPE = "array"
OBJECT_TYPE = "object"
NULL_TYPE = "null"

NUMERIC_TYPES = {INTEGER_TYPE, NUMBER_TYPE}

DEFAULT_EDITOR = "textfield"
EDITOR_BY_TYPE: Dict[str, str] = {
    INTEGER_TYPE: "number",
    NUMBER_TYPE: "number",
    BOOLEAN_TYPE: "checkbox",
    ARRAY_TYPE: "stringList",
}

# Input attributes copied verbatim into an input-schema property when declared.
INPUT_PASSTHROUGH_KEYS = (
    "sectionCaption",
    "prefill",
    "default",
    "minLength",
    "maxLength",
    "minimum",
    "maximum",
    "enum",
)


def is_numeric_type(type_name: Any) -> bool:
    return isinstance(type_name, str) and type_name in NUMERIC_TYPES


def editor_for_type(type_name: Any) -> str:
    if not isinstance(type_name, str):
        return DEFAULT_EDITOR
    return EDITOR_BY_TYPE.get(type_name, DEFAULT_EDITOR)


def zero_value(type_name: Any) -> Any:
    """Return the zero value used for local test input, or ``None`` when there is none.

    Strings and unknown types have no synthesized default; callers must treat
    ``None`` as "omit the field".
    """
    if type_name == BOOLEAN_TYPE:
        return False
    if is_numeric_type(type_name):
        return 0
    if type_name == ARRAY_TYPE:
        return []
    return None
