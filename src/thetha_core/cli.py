"""Command-line entry point: parse a ThethaCore file and print its sections.

Provides the ``thetha-core`` console script via ``main()``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import IO

from .document import Document, Section
from .errors import ThethaCoreError
from .options import DEFAULT_MAX_DEPTH, ParserOptions
from .parser import parse_from_source
from .values import Value, VBool, VDict, VFloat, VInteger, VList, VString, _Null

DEFAULT_SOURCE = "example.thtc"


# ---------------------------------------------------------------------------
# Display helpers
# ---------------------------------------------------------------------------

def _fmt_inline(value: Value) -> str:
    """Format a single value for compact one-line display."""
    if isinstance(value, VString):
        return f'"{value.value}"'
    if isinstance(value, (VInteger, VFloat, VBool, _Null)):
        return str(value)
    if isinstance(value, VList):
        return "[" + ", ".join(_fmt_inline(v) for v in value.items) + "]"
    if isinstance(value, VDict):
        pairs = (f"{k} == {_fmt_inline(v)}" for k, v in value.entries.items())
        return "{" + ", ".join(pairs) + "}"
    return repr(value)


def _fmt_section(path: str, entries: Section) -> str:
    """Pretty-print one section with aligned keys."""
    if not entries:
        return f"{path} {{}}"
    width = max(len(k) for k in entries)
    lines = [f"{path} {{"]
    for key, value in entries.items():
        lines.append(f"  {key:<{width}} : {_fmt_inline(value)}")
    lines.append("}")
    return "\n".join(lines)


def _show_document(doc: Document, dest: IO[str]) -> None:
    if not len(doc):
        print("  (no sections defined)", file=dest)
        return
    for path, entries in doc.sections.items():
        print(_fmt_section(path, entries), file=dest)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="thetha-core", description="Parse a ThethaCore configuration file"
    )
    parser.add_argument(
        "path", nargs="?", default=DEFAULT_SOURCE, help="Configuration file to parse"
    )
    parser.add_argument("--section", help="Only print this section path (e.g. database/advanced)")
    parser.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help="Maximum nesting depth for arrays and objects",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse a file and print it (``thetha-core`` / ``python -m thetha_core``)."""
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s %(message)s")

    try:
        options = ParserOptions(max_depth=args.max_depth)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        doc = parse_from_source(args.path, options)
    except ThethaCoreError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.section is None:
        _show_document(doc, sys.stdout)
        return 0

    if args.section not in doc:
        print(f"Error: no section '{args.section}' in {args.path}", file=sys.stderr)
        return 2
    print(_fmt_section(args.section, doc.section(args.section)), file=sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
