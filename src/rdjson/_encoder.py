"""Serialization of value trees back to JSON text."""

import math
from typing import Any

from ._config import EncodeConfig
from ._profiling import ProfileContext

ASCII_LIMIT = 127

# Escapes with a short form; other control characters use \u00XX
SHORT_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

# Renders as an overflowing literal that parses back to infinity
INFINITY_TEXT = "1e999"


def _encode_string(s: str, ensure_ascii: bool) -> str:
    """Encode string with proper escape sequences."""
    result = ['"']
    for char in s:
        if char in SHORT_ESCAPES:
            result.append(SHORT_ESCAPES[char])
        elif char < " ":
            result.append(f"\\u{ord(char):04x}")
        elif ensure_ascii and ord(char) > ASCII_LIMIT:
            code = ord(char)
            if code > 0xFFFF:
                code -= 0x10000
                high = 0xD800 | (code >> 10)
                low = 0xDC00 | (code & 0x3FF)
                result.append(f"\\u{high:04x}\\u{low:04x}")
            else:
                result.append(f"\\u{code:04x}")
        else:
            result.append(char)
    result.append('"')
    return "".join(result)


def _encode_number(n: int | float) -> str:
    """
    Encode numeric values as the shortest text that parses back equal.

    Integral values drop the fractional part. Infinities become an
    overflowing exponent and NaN, which no document can produce, becomes
    null so output is always valid JSON.
    """
    if isinstance(n, int):
        return str(n)
    if math.isnan(n):
        return "null"
    if math.isinf(n):
        return INFINITY_TEXT if n > 0 else "-" + INFINITY_TEXT
    if n.is_integer() and abs(n) < 1e16:
        return str(int(n))
    return repr(n)


def _encode_array(
    arr: list[Any] | tuple[Any, ...], config: EncodeConfig, level: int
) -> str:
    """Encode array with optional formatting."""
    if not arr:
        return "[]"

    encoded_items = [_encode_value(item, config, level + 1) for item in arr]

    if config.indent is not None:
        return _format_indented("[", "]", encoded_items, config, level)
    return "[" + ", ".join(encoded_items) + "]"


def _encode_dict(d: dict[Any, Any], config: EncodeConfig, level: int) -> str:
    """Encode dictionary in iteration order, or sorted by key."""
    if not d:
        return "{}"

    for key in d:
        if not isinstance(key, str):
            msg = f"keys must be str, not {type(key).__name__}"
            raise TypeError(msg)

    keys = sorted(d) if config.sort_keys else list(d)
    members = [
        f"{_encode_string(key, config.ensure_ascii)}: "
        f"{_encode_value(d[key], config, level + 1)}"
        for key in keys
    ]

    if config.indent is not None:
        return _format_indented("{", "}", members, config, level)
    return "{" + ", ".join(members) + "}"


def _format_indented(
    opener: str,
    closer: str,
    items: list[str],
    config: EncodeConfig,
    level: int,
) -> str:
    """Lay out already encoded items one per line."""
    indent_str = _get_indent_string(config.indent, level)
    inner_indent = _get_indent_string(config.indent, level + 1)

    lines = [opener]
    for i, item in enumerate(items):
        line = f"{inner_indent}{item}"
        if i < len(items) - 1:
            line += ","
        lines.append(line)

    lines.append(f"{indent_str}{closer}")
    return "\n".join(lines)


def _get_indent_string(indent: str | int | None, level: int) -> str:
    """Generate indentation string for given level."""
    if indent is None:
        return ""
    elif isinstance(indent, int):
        return " " * (indent * level)
    else:
        return indent * level


def _encode_value(  # noqa: PLR0911
    obj: Any, config: EncodeConfig, level: int = 0
) -> str:
    """Encode any value of the JSON value model."""
    if obj is None:
        return "null"
    elif obj is True:
        return "true"
    elif obj is False:
        return "false"
    elif isinstance(obj, str):
        return _encode_string(obj, config.ensure_ascii)
    elif isinstance(obj, int | float):
        return _encode_number(obj)
    elif isinstance(obj, dict):
        return _encode_dict(obj, config, level)
    elif isinstance(obj, list | tuple):
        return _encode_array(obj, config, level)
    else:
        msg = f"Object of type {type(obj).__name__} is not JSON serializable"
        raise TypeError(msg)


def encode_document(obj: Any, config: EncodeConfig) -> str:
    with ProfileContext("serialize"):
        return _encode_value(obj, config)
