"""Character index to UTF-8 byte offset mapping for diagnostics."""

from __future__ import annotations

from bisect import bisect_right
from typing import Final


def _utf8_width(char: str) -> int:
    """Number of bytes the character occupies in UTF-8."""
    code = ord(char)
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4


class UTF8PositionMapper:
    """Maps parser positions (character indices) to UTF-8 byte offsets.

    The parser counts positions in characters. Callers that hold the raw
    bytes of a document (editors, log viewers) need byte offsets instead.
    Checkpoints are recorded every ``checkpoint_interval`` characters and
    conversions walk forward from the nearest checkpoint.
    """

    def __init__(self, text: str, checkpoint_interval: int = 256) -> None:
        """Initialize position mapper with checkpoint system.

        Args:
            text: The text positions refer to
            checkpoint_interval: Characters between checkpoints
        """
        if checkpoint_interval < 1:
            raise ValueError("checkpoint_interval must be positive")

        self.text: Final = text
        self.checkpoint_interval: Final = checkpoint_interval
        self.is_ascii: Final = text.isascii()
        # Parallel lists: checkpoint k sits at character k * interval
        self._char_marks: list[int] = []
        self._byte_marks: list[int] = []

        if not self.is_ascii:
            self._build_checkpoints()

    def _build_checkpoints(self) -> None:
        byte_pos = 0
        for char_pos, char in enumerate(self.text):
            if char_pos % self.checkpoint_interval == 0:
                self._char_marks.append(char_pos)
                self._byte_marks.append(byte_pos)
            byte_pos += _utf8_width(char)

        self._char_marks.append(len(self.text))
        self._byte_marks.append(byte_pos)

    def char_to_byte(self, char_pos: int) -> int:
        """Convert character position to byte position.

        Positions past the end clamp to the encoded length.
        """
        char_pos = max(0, min(char_pos, len(self.text)))
        if self.is_ascii:
            return char_pos

        idx = bisect_right(self._char_marks, char_pos) - 1
        current_char = self._char_marks[idx]
        byte_pos = self._byte_marks[idx]
        for char in self.text[current_char:char_pos]:
            byte_pos += _utf8_width(char)
        return byte_pos
