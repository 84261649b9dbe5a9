"""
Strict recursive-descent JSON parser and serializer.

Parses JSON text into plain Python values (None, bool, float, str, list,
dict) with strict grammar checks: no trailing commas, no leading zeros,
no raw control characters in strings and a bounded nesting depth. Every
failure is a typed ParseFailure that carries the position needed to draw
a caret under the offending character.
"""

from typing import IO
from typing import Any

from ._config import EncodeConfig
from ._config import ParseConfig
from ._cursor import Cursor
from ._diagnostics import format_diagnostic
from ._encoder import encode_document
from ._errors import LeadingZero
from ._errors import MaxDepthExceeded
from ._errors import ParseFailure
from ._errors import TrailingComma
from ._errors import UnexpectedEndOfInput
from ._errors import UnexpectedToken
from ._parser import JsonParser
from ._parser import parse_document
from ._profiling import HotPathStats
from ._profiling import clear_hot_path_stats
from ._profiling import format_hot_path_stats
from ._profiling import get_hot_path_stats
from ._types import MAX_DEPTH
from ._types import MAX_DEPTH_CEILING
from ._types import JsonValue
from ._utf8_mapper import UTF8PositionMapper

__version__ = "0.1.0"


def parse(text: str, **kwargs: Any) -> JsonValue:
    """
    Parses a JSON document whose root is an object or an array.

    Keyword arguments are ParseConfig fields. Raises a ParseFailure
    subclass on the first grammar violation, TypeError for non-str input.
    """
    if not isinstance(text, str):
        raise TypeError(
            f"the JSON object must be str, not {type(text).__name__}"
        )

    config = ParseConfig(**kwargs)
    return parse_document(text, config)


def serialize(value: Any, **kwargs: Any) -> str:
    """
    Serializes a value tree to JSON text.

    Defaults give a single line with ", " and ": " separators and strings
    re-escaped, so parse(serialize(v)) == v for any tree parse can build.
    Keyword arguments are EncodeConfig fields.
    """
    config = EncodeConfig(**kwargs)
    return encode_document(value, config)


# Names familiar from the standard library json module
loads = parse
dumps = serialize


def load(fp: IO[str], **kwargs: Any) -> JsonValue:
    """
    Parses JSON from a text file-like object.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return parse(fp.read(), **kwargs)


def dump(value: Any, fp: IO[str], **kwargs: Any) -> None:
    """
    Serializes a value tree to a text file-like object.
    """
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    fp.write(serialize(value, **kwargs))


__all__ = [
    "MAX_DEPTH",
    "MAX_DEPTH_CEILING",
    "Cursor",
    "EncodeConfig",
    "HotPathStats",
    "JsonParser",
    "JsonValue",
    "LeadingZero",
    "MaxDepthExceeded",
    "ParseConfig",
    "ParseFailure",
    "TrailingComma",
    "UTF8PositionMapper",
    "UnexpectedEndOfInput",
    "UnexpectedToken",
    "clear_hot_path_stats",
    "dump",
    "dumps",
    "format_diagnostic",
    "format_hot_path_stats",
    "get_hot_path_stats",
    "load",
    "loads",
    "parse",
    "serialize",
]
