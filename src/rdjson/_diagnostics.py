"""Human-readable rendering of parse failures."""

from ._errors import ParseFailure
from ._errors import UnexpectedEndOfInput

# Titles per failure kind, as shown on the first line of a diagnostic
TITLES = {
    "UnexpectedToken": "Unexpected token",
    "UnexpectedEndOfInput": "Unexpected end of input",
    "TrailingComma": "Trailing comma",
    "MaxDepthExceeded": "Max depth exceeded",
    "LeadingZero": "Leading zero",
}


def _caret_prefix(line: str, column: int) -> str:
    """Whitespace that puts a caret under the given 0-based column."""
    return "".join("\t" if c == "\t" else " " for c in line[:column])


def format_diagnostic(failure: ParseFailure, text: str | None = None) -> str:
    """
    Renders a failure as a title, the offending line and a caret.

    The document carried by the failure is used unless text is given.
    End-of-input failures point just past the last significant character.
    """
    doc = failure.doc if text is None else text
    title = TITLES.get(failure.kind, failure.kind)

    if isinstance(failure, UnexpectedEndOfInput):
        header = f"{title}:"
    else:
        header = (
            f"{title} at line {failure.lineno}, column {failure.colno} "
            f"(position {failure.pos}):"
        )
    if failure.msg and failure.msg != title:
        header = f"{header} {failure.msg}"

    pos = failure.pos
    if isinstance(failure, UnexpectedEndOfInput):
        pos = len(doc.rstrip())

    line_start = doc.rfind("\n", 0, pos) + 1
    line_end = doc.find("\n", pos)
    if line_end == -1:
        line_end = len(doc)
    line = doc[line_start:line_end].rstrip("\r")
    column = pos - line_start

    return f"{header}\n{line}\n{_caret_prefix(line, column)}^"
