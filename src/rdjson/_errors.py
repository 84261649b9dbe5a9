"""
Parse failure taxonomy.

Every grammar violation surfaces as one subclass of ParseFailure carrying
the original document and a character position, so callers can render a
caret diagnostic without re-scanning the input.
"""

from ._types import Position
from ._utf8_mapper import UTF8PositionMapper


class ParseFailure(ValueError):
    """
    Base class for JSON parse failures with precise position information.

    Error state containing position, line/column numbers, and the UTF-8
    byte offset of the failure to help users identify and fix syntax issues.
    """

    default_msg = "Invalid JSON"

    def __init__(
        self, pos: Position, doc: str = "", msg: str | None = None
    ) -> None:
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")
        if msg is None:
            msg = self.default_msg
        elif not isinstance(msg, str):
            raise TypeError("msg must be a string")

        self.msg = msg
        self.doc = doc
        self.pos = pos

        # Compute line and column numbers from position
        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")

    @property
    def kind(self) -> str:
        """Short name of the failure variant."""
        return type(self).__name__

    @property
    def byte_pos(self) -> int:
        """Offset of the failure in the UTF-8 encoding of the document."""
        return UTF8PositionMapper(self.doc).char_to_byte(self.pos)


class UnexpectedToken(ParseFailure):
    """A character that the grammar does not allow at this position."""

    default_msg = "Unexpected token"


class UnexpectedEndOfInput(ParseFailure):
    """The input ended in the middle of a value."""

    default_msg = "Unexpected end of input"

    def __init__(self, doc: str = "", msg: str | None = None) -> None:
        super().__init__(len(doc), doc, msg)


class TrailingComma(ParseFailure):
    """A comma directly followed by the closing bracket."""

    default_msg = "Trailing comma"


class MaxDepthExceeded(ParseFailure):
    """Objects and arrays nested deeper than the configured limit."""

    default_msg = "Max depth exceeded"


class LeadingZero(ParseFailure):
    """An integer literal with more than one digit starting with zero."""

    default_msg = "Leading zero"


__all__ = [
    "LeadingZero",
    "MaxDepthExceeded",
    "ParseFailure",
    "TrailingComma",
    "UnexpectedEndOfInput",
    "UnexpectedToken",
]
