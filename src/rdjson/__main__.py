"""
Command-line validator: ``python -m rdjson PATH``.

Exit status is 0 for a valid document, 1 for a document that fails to
parse and 2 when the file cannot be read, is not UTF-8 or is empty.
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from . import __version__
from . import parse
from . import serialize
from ._config import LOG_LEVEL
from ._config import PROFILE_HOT_PATHS
from ._diagnostics import format_diagnostic
from ._errors import ParseFailure
from ._profiling import format_hot_path_stats
from ._types import MAX_DEPTH
from ._types import MAX_DEPTH_CEILING

logger = logging.getLogger("rdjson")

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_UNUSABLE = 2


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rdjson",
        description="Validate a JSON document and echo it back normalized.",
    )
    parser.add_argument("path", type=Path, help="JSON file to validate")
    parser.add_argument(
        "--max-depth",
        type=int,
        default=MAX_DEPTH,
        help=(
            "maximum nesting of objects and arrays "
            f"(default {MAX_DEPTH}, at most {MAX_DEPTH_CEILING})"
        ),
    )
    parser.add_argument(
        "--allow-scalar-root",
        action="store_true",
        help="accept a bare string, number or literal as the document",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="print nothing on success",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log debug output to stderr",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def _read_text(path: Path) -> str | None:
    """Reads and decodes the file, reporting problems on stderr."""
    try:
        data = path.read_bytes()
    except OSError as exc:
        logger.error("Cannot read %s: %s", path, exc.strerror or exc)
        return None

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        logger.error(
            "Invalid UTF-8 in %s at byte %d: %s", path, exc.start, exc.reason
        )
        return None


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not 1 <= args.max_depth <= MAX_DEPTH_CEILING:
        logger.error("--max-depth must be between 1 and %d", MAX_DEPTH_CEILING)
        return EXIT_UNUSABLE

    text = _read_text(args.path)
    if text is None:
        return EXIT_UNUSABLE
    if not text:
        logger.error("Empty file: %s", args.path)
        return EXIT_UNUSABLE

    logger.debug("Parsing %s (%d characters)", args.path, len(text))
    try:
        value = parse(
            text,
            max_depth=args.max_depth,
            allow_scalar_root=args.allow_scalar_root,
        )
    except ParseFailure as exc:
        print(format_diagnostic(exc), file=sys.stderr)
        status = EXIT_INVALID
    else:
        if not args.quiet:
            print(f"Valid JSON: {serialize(value)}")
        status = EXIT_VALID

    # after serialization so the serialize row is reported
    if PROFILE_HOT_PATHS:
        print(format_hot_path_stats(), file=sys.stderr)
    return status


if __name__ == "__main__":
    sys.exit(main())
