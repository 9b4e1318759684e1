"""
Property Formatter
==================

Renders property maps into Cypher map literals.

    >>> format_properties({"name": "Alice", "age": 30})
    '{name: "Alice", age: 30}'

Keys that are plain identifiers are emitted bare, anything else is
backtick-quoted. Values go through a single recursive serializer.
"""

import json
import math
import re
from typing import Any, Dict, List, Mapping, Optional, Union

PropertyValue = Union[str, int, float, bool, None, List[Any], Dict[str, Any]]

_BARE_KEY = re.compile(r"[^\W\d]\w*")


def format_key(key: str) -> str:
    """Render a property key, quoting it with backticks when it isn't a bare identifier."""
    if not isinstance(key, str):
        raise TypeError(f"Property keys must be strings, got {type(key).__name__}")
    if _BARE_KEY.fullmatch(key):
        return key
    return "`" + key.replace("`", "``") + "`"


def format_value(value: PropertyValue) -> str:
    """
    Render a single value as a Cypher literal.

    Args:
        value: str, int, float, bool, None, list/tuple or dict (nested)

    Returns:
        Literal text

    Raises:
        TypeError: unsupported value type
        ValueError: NaN or infinite float
    """
    # bool first: it is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            raise ValueError(f"Cannot render non-finite float {value!r}")
        # Cypher exponents take no "+" sign
        return repr(value).replace("e+", "e")
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(format_value(item) for item in value) + "]"
    if isinstance(value, Mapping):
        return _format_map(value)
    raise TypeError(f"Unsupported property value type: {type(value).__name__}")


def _format_map(properties: Mapping[str, Any]) -> str:
    items = [f"{format_key(key)}: {format_value(value)}" for key, value in properties.items()]
    return "{" + ", ".join(items) + "}"


def format_properties(properties: Optional[Mapping[str, Any]]) -> str:
    """Render a property map, or an empty string when there is nothing to render."""
    if not properties:
        return ""
    return _format_map(properties)
