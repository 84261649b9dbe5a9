"""Immutable parser and encoder settings plus environment switches."""

import os
from dataclasses import dataclass

from ._types import MAX_DEPTH
from ._types import MAX_DEPTH_CEILING

# Profiling infrastructure - zero-cost when disabled
PROFILE_HOT_PATHS = __debug__ and "RDJSON_PROFILE" in os.environ

# Default level for the command-line front end
LOG_LEVEL = os.environ.get("RDJSON_LOG_LEVEL", "WARNING").upper()


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures JSON parsing behavior with immutable settings.

    max_depth bounds how many objects and arrays may nest inside each
    other, up to MAX_DEPTH_CEILING; the document root sits at depth zero.
    allow_scalar_root lets a bare string, number or literal stand as the
    whole document.
    """

    max_depth: int = MAX_DEPTH
    allow_scalar_root: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(
            self.max_depth, int
        ):
            raise TypeError("max_depth must be an integer")
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        if self.max_depth > MAX_DEPTH_CEILING:
            raise ValueError(f"max_depth must be at most {MAX_DEPTH_CEILING}")
        if not isinstance(self.allow_scalar_root, bool):
            raise TypeError("allow_scalar_root must be a boolean")


@dataclass(frozen=True)
class EncodeConfig:
    """
    Configures JSON encoding behavior with immutable settings.

    Centralized configuration for serialization options including
    formatting and key ordering.
    """

    ensure_ascii: bool = False
    sort_keys: bool = False
    indent: str | int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.ensure_ascii, bool):
            raise TypeError("ensure_ascii must be a boolean")
        if not isinstance(self.sort_keys, bool):
            raise TypeError("sort_keys must be a boolean")
        if self.indent is not None and (
            isinstance(self.indent, bool)
            or not isinstance(self.indent, str | int)
        ):
            raise TypeError("indent must be a string, an integer or None")
