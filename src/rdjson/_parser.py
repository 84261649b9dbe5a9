"""
Recursive descent parser for JSON documents.

One method per grammar production, each driven by a shared Cursor. The
nesting depth is passed explicitly down every recursive entry point and
checked before descending into an object or an array, so hostile input
such as ten thousand open brackets fails fast instead of exhausting the
interpreter stack.
"""

import logging

from ._config import ParseConfig
from ._cursor import Cursor
from ._errors import LeadingZero
from ._errors import MaxDepthExceeded
from ._errors import ParseFailure
from ._errors import TrailingComma
from ._errors import UnexpectedEndOfInput
from ._errors import UnexpectedToken
from ._profiling import ProfileContext
from ._types import CONTAINER_OPENERS
from ._types import JsonValue
from ._types import Position

logger = logging.getLogger(__name__)

DIGITS = frozenset("0123456789")
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
NUMBER_START = DIGITS | {"-"}

# Control characters must be escaped inside a string
RAW_FORBIDDEN = frozenset(chr(code) for code in range(0x20))

ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

BYTE_ORDER_MARK = "\ufeff"


class JsonParser:
    """
    Parses one JSON document from text.

    A parser instance is single-use: it owns its cursor and the tree it
    builds, and keeps nothing once parse() returns or raises. The first
    grammar violation raises a ParseFailure subclass; there is no recovery.
    """

    def __init__(self, text: str, config: ParseConfig | None = None) -> None:
        self.text = text
        self.cursor = Cursor(text)
        self.config = config or ParseConfig()

    def _unexpected(
        self, msg: str | None = None
    ) -> UnexpectedToken | UnexpectedEndOfInput:
        """Failure for the character under the cursor, or for end of input."""
        if self.cursor.at_end():
            return UnexpectedEndOfInput(self.text, msg)
        return UnexpectedToken(self.cursor.pos, self.text, msg)

    def parse(self) -> JsonValue:
        """Parses the whole text as a single document."""
        cursor = self.cursor
        cursor.skip_whitespace()

        char = cursor.peek()
        if char is None:
            raise UnexpectedEndOfInput(self.text, "Expecting value")
        if char == BYTE_ORDER_MARK:
            raise UnexpectedToken(
                cursor.pos, self.text, "Unexpected byte order mark"
            )
        if not self.config.allow_scalar_root and char not in CONTAINER_OPENERS:
            raise UnexpectedToken(
                cursor.pos, self.text, "Expecting object or array"
            )

        value = self.parse_value(0)

        cursor.skip_whitespace()
        if not cursor.at_end():
            raise UnexpectedToken(cursor.pos, self.text, "Extra data")
        return value

    def parse_value(self, depth: int) -> JsonValue:
        """Dispatches on the next significant character."""
        cursor = self.cursor
        cursor.skip_whitespace()

        char = cursor.peek()
        if char is None:
            raise UnexpectedEndOfInput(self.text, "Expecting value")

        if char == "{" or char == "[":
            if depth >= self.config.max_depth:
                raise MaxDepthExceeded(
                    cursor.pos,
                    self.text,
                    f"Nesting deeper than {self.config.max_depth} levels",
                )
            if char == "{":
                return self.parse_object(depth)
            return self.parse_array(depth)
        elif char == '"':
            return self.parse_string()
        elif char == "t" or char == "f":
            return self.parse_boolean()
        elif char == "n":
            return self.parse_null()
        elif char in NUMBER_START:
            return self.parse_number()

        raise UnexpectedToken(cursor.pos, self.text, "Expecting value")

    def _check_trailing_comma(self, closer: str) -> None:
        cursor = self.cursor
        cursor.skip_whitespace()
        if cursor.peek() == closer:
            kind = "object" if closer == "}" else "array"
            raise TrailingComma(
                cursor.pos,
                self.text,
                f"Illegal trailing comma before end of {kind}",
            )

    def parse_object(self, depth: int) -> dict[str, JsonValue]:
        """Parses an object; repeated keys keep their first position."""
        cursor = self.cursor
        with ProfileContext("object", cursor):
            cursor.consume()  # '{'
            cursor.skip_whitespace()

            obj: dict[str, JsonValue] = {}
            if cursor.peek() == "}":
                cursor.consume()
                return obj

            while True:
                cursor.skip_whitespace()
                if cursor.peek() != '"':
                    raise self._unexpected(
                        "Expecting property name enclosed in double quotes"
                    )
                key = self.parse_string()

                cursor.skip_whitespace()
                if cursor.peek() != ":":
                    raise self._unexpected("Expecting ':' delimiter")
                cursor.consume()

                # dict assignment overwrites in place, first position wins
                obj[key] = self.parse_value(depth + 1)

                cursor.skip_whitespace()
                char = cursor.consume()
                if char == "}":
                    return obj
                if char != ",":
                    raise UnexpectedEndOfInput(
                        self.text,
                        "Expecting ',' delimiter",
                    )
                self._check_trailing_comma("}")

    def parse_array(self, depth: int) -> list[JsonValue]:
        """Parses an array, keeping elements in document order."""
        cursor = self.cursor
        with ProfileContext("array", cursor):
            cursor.consume()  # '['
            cursor.skip_whitespace()

            values: list[JsonValue] = []
            if cursor.peek() == "]":
                cursor.consume()
                return values

            while True:
                values.append(self.parse_value(depth + 1))

                cursor.skip_whitespace()
                char = cursor.consume()
                if char == "]":
                    return values
                if char != ",":
                    raise UnexpectedEndOfInput(
                        self.text,
                        "Expecting ',' delimiter",
                    )
                self._check_trailing_comma("]")

    def parse_string(self) -> str:
        """Parses a quoted string, decoding escape sequences."""
        cursor = self.cursor
        with ProfileContext("string", cursor):
            cursor.consume()  # opening quote

            chunks: list[str] = []
            while True:
                char = cursor.consume()
                if char is None:
                    raise UnexpectedEndOfInput(
                        self.text, "Unterminated string"
                    )
                if char == '"':
                    return "".join(chunks)
                if char in RAW_FORBIDDEN:
                    raise UnexpectedToken(
                        cursor.pos - 1,
                        self.text,
                        "Invalid control character in string",
                    )
                if char == "\\":
                    chunks.append(self._parse_escape())
                else:
                    chunks.append(char)

    def _parse_escape(self) -> str:
        """Decodes the escape after a backslash that was just consumed."""
        cursor = self.cursor
        escape_pos = cursor.pos - 1

        char = cursor.consume()
        if char is None:
            raise UnexpectedEndOfInput(self.text, "Unterminated escape")
        if char in ESCAPES:
            return ESCAPES[char]
        if char != "u":
            raise UnexpectedToken(
                cursor.pos - 1, self.text, f"Invalid escape sequence: \\{char}"
            )

        code = self._parse_hex4()
        if 0xDC00 <= code <= 0xDFFF:
            raise UnexpectedToken(
                escape_pos, self.text, "Unpaired low surrogate"
            )
        if not 0xD800 <= code <= 0xDBFF:
            return chr(code)

        # High surrogate: only valid as the first half of a pair
        if cursor.at_end():
            raise UnexpectedEndOfInput(self.text, "Unterminated string")
        pair_pos = cursor.pos
        next_two = self.text[pair_pos : pair_pos + 2]
        if next_two != "\\u":
            raise UnexpectedToken(
                escape_pos, self.text, "Unpaired high surrogate"
            )
        cursor.consume()
        cursor.consume()

        low = self._parse_hex4()
        if not 0xDC00 <= low <= 0xDFFF:
            raise UnexpectedToken(
                escape_pos, self.text, "Unpaired high surrogate"
            )
        return chr(0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00))

    def _parse_hex4(self) -> int:
        cursor = self.cursor
        code = 0
        for _ in range(4):
            char = cursor.consume()
            if char is None:
                raise UnexpectedEndOfInput(
                    self.text, "Incomplete unicode escape sequence"
                )
            if char not in HEX_DIGITS:
                raise UnexpectedToken(
                    cursor.pos - 1,
                    self.text,
                    "Invalid unicode escape sequence",
                )
            code = code * 16 + int(char, 16)
        return code

    def _parse_word(self) -> tuple[Position, str]:
        """Consumes a maximal run of alphabetic characters."""
        cursor = self.cursor
        start = cursor.pos
        while (char := cursor.peek()) is not None and char.isalpha():
            cursor.consume()
        return start, self.text[start : cursor.pos]

    def parse_boolean(self) -> bool:
        start, word = self._parse_word()
        if word == "true":
            return True
        if word == "false":
            return False
        raise UnexpectedToken(start, self.text, f"Invalid literal: {word}")

    def parse_null(self) -> None:
        start, word = self._parse_word()
        if word != "null":
            raise UnexpectedToken(start, self.text, f"Invalid literal: {word}")

    def _consume_digits(self) -> None:
        cursor = self.cursor
        while cursor.peek() in DIGITS:
            cursor.consume()

    def _require_digit(self, what: str) -> None:
        """Fails unless the cursor is on an ASCII digit."""
        char = self.cursor.peek()
        if char is None:
            raise UnexpectedEndOfInput(self.text, f"Expecting digit {what}")
        if char not in DIGITS:
            raise UnexpectedToken(
                self.cursor.pos, self.text, f"Expecting digit {what}"
            )

    def parse_number(self) -> float:
        """
        Parses -?digit+(.digit+)?([eE][+-]?digit+)? into a float.

        Integer digits longer than one that begin with zero are rejected
        unless a fractional part follows.
        """
        cursor = self.cursor
        with ProfileContext("number", cursor):
            start = cursor.pos
            if cursor.peek() == "-":
                cursor.consume()

            int_start = cursor.pos
            if cursor.peek() not in DIGITS:
                raise UnexpectedToken(
                    cursor.pos, self.text, "Expecting digit after '-'"
                )
            self._consume_digits()
            int_digits = self.text[int_start : cursor.pos]

            is_fraction = False
            if cursor.peek() == ".":
                cursor.consume()
                self._require_digit("after decimal point")
                self._consume_digits()
                is_fraction = True

            if cursor.peek() in ("e", "E"):
                cursor.consume()
                if cursor.peek() in ("+", "-"):
                    cursor.consume()
                self._require_digit("in exponent")
                self._consume_digits()

            has_leading_zero = len(int_digits) > 1 and int_digits[0] == "0"
            if has_leading_zero and not is_fraction:
                raise LeadingZero(
                    cursor.pos, self.text, "Leading zeros not allowed"
                )

            return float(self.text[start : cursor.pos])


def parse_document(text: str, config: ParseConfig) -> JsonValue:
    """Runs a fresh parser over text, logging failures at debug level."""
    parser = JsonParser(text, config)
    with ProfileContext("document", parser.cursor):
        try:
            return parser.parse()
        except ParseFailure as exc:
            logger.debug("%s at %d: %s", exc.kind, exc.pos, exc.msg)
            raise
