"""Positioned reader over JSON text."""

from ._types import Position

# JSON insignificant whitespace
WHITESPACE = frozenset(" \t\n\r")


class Cursor:
    """
    Positioned view over input text with single-character lookahead.

    Positions are character indices into the text, never byte offsets,
    so lookahead and advancing always agree on units. The cursor only
    moves forward; end of input is reported as None, not as an error.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos: Position = 0
        self.length = len(text)

    def peek(self) -> str | None:
        """Returns current character without advancing."""
        return self.text[self.pos] if self.pos < self.length else None

    def consume(self) -> str | None:
        """Returns current character and advances position."""
        char = self.peek()
        if char is not None:
            self.pos += 1
        return char

    def skip_whitespace(self) -> None:
        """Skips space, tab, line feed and carriage return."""
        while self.pos < self.length and self.text[self.pos] in WHITESPACE:
            self.pos += 1

    def at_end(self) -> bool:
        return self.pos >= self.length

    def __repr__(self) -> str:
        return f"Cursor(pos={self.pos}, length={self.length})"
