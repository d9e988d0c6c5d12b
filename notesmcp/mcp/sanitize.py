"""Shared input validation utilities for the MCP layer.

Tool arguments are checked against the tool's JSON Schema first and then
cleaned field by field. This runs on raw input, before any text is escaped
for AppleScript.
"""

import re
from typing import Any, Dict, List

from jsonschema import Draft7Validator

# Null bytes and control characters except newline and tab
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")

_validators: Dict[str, Draft7Validator] = {}


def validate_schema(tool_name: str, schema: Dict[str, Any], arguments: Dict[str, Any]) -> None:
    """Validate ``arguments`` against a tool's input schema.

    Raises:
        ValueError: On the first schema violation, ordered by path.
    """
    validator = _validators.get(tool_name)
    if validator is None:
        Draft7Validator.check_schema(schema)
        validator = Draft7Validator(schema)
        _validators[tool_name] = validator

    errors = sorted(validator.iter_errors(arguments), key=lambda err: list(err.path))
    if errors:
        first = errors[0]
        path = ".".join(str(part) for part in first.path) or "(root)"
        raise ValueError(f"{path}: {first.message}")


def sanitize_string(
    value: Any, field_name: str, max_length: int = 1000, required: bool = True
) -> str:
    """Sanitize and validate string inputs.

    Args:
        value: The value to sanitize.
        field_name: Name of the field for error messages.
        max_length: Maximum allowed string length.
        required: If True, empty strings are rejected.

    Returns:
        Sanitized string.

    Raises:
        ValueError: If validation fails.
    """
    if value is None and not required:
        return ""

    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string, got {type(value).__name__}")

    if required and not value.strip():
        raise ValueError(f"{field_name} cannot be empty")

    if len(value) > max_length:
        raise ValueError(f"{field_name} too long (max {max_length} characters, got {len(value)})")

    return _CONTROL_CHARS.sub("", value)


def sanitize_array(
    value: Any, field_name: str, item_max_length: int = 500, max_items: int = 100
) -> List[str]:
    """Sanitize and validate array inputs.

    Args:
        value: The array to sanitize
        field_name: Name of the field for error messages
        item_max_length: Maximum length for each item
        max_items: Maximum number of items allowed

    Returns:
        List of sanitized strings (empty items removed)

    Raises:
        ValueError: If validation fails
    """
    if value is None:
        return []

    if not isinstance(value, list):
        raise ValueError(f"{field_name} must be an array, got {type(value).__name__}")

    if len(value) > max_items:
        raise ValueError(f"{field_name} too many items (max {max_items}, got {len(value)})")

    if any(item is None for item in value):
        raise ValueError(f"{field_name} must not contain null items")

    sanitized = []
    for i, item in enumerate(value):
        sanitized_item = sanitize_string(
            item, f"{field_name}[{i}]", item_max_length, required=False
        )
        if sanitized_item:
            sanitized.append(sanitized_item)

    return sanitized
