"""Parser: line classification and section tracking, ThethaCore text → Document."""

from __future__ import annotations

import logging
import os

from .document import Document, Section
from .errors import (
    KeyOutsideSectionError,
    SourceUnreadableError,
    ThethaSyntaxError,
    UnresolvedSectionError,
    ValueDecodeError,
)
from .options import ParserOptions
from .reader import decode_value
from .values import Value

LOG = logging.getLogger(__name__)

COMMENT_PREFIXES = ("#", "//")
ASSIGN = "=="
NEST_OPEN = "<"
NEST_CLOSE = ">"
PATH_SEP = "/"


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def parse(text: str, options: ParserOptions | None = None) -> Document:
    """Parse ThethaCore *text* and return a Document.

    The first bad line raises a ``ThethaCoreError`` carrying its 1-based
    line number; nothing parsed before it is returned.
    """
    opts = options or ParserOptions()
    sections: dict[str, Section] = {}
    current: str | None = None

    for line_no, raw in enumerate(text.split("\n"), start=1):
        line = raw.strip()
        kind = _classify(line)

        if kind == "ignore":
            continue

        if kind == "section":
            current = parse_section_header(line, line_no)
            _open_section(sections, current)
            continue

        if kind == "key_value":
            if current is None:
                raise KeyOutsideSectionError(
                    "Key-value pair found outside of a section",
                    line=line_no,
                    text=line,
                )
            key, token = _match_key_value(line)
            value = _decode(token, line_no, opts)
            _insert(sections, current, key, value, line_no)
            continue

        raise ThethaSyntaxError(f"'{line}'", line=line_no, text=line)

    LOG.debug(
        "Parsed %d section(s), %d key(s)",
        len(sections),
        sum(len(entries) for entries in sections.values()),
    )
    return Document(sections)


def parse_from_source(
    path: str | os.PathLike[str], options: ParserOptions | None = None
) -> Document:
    """Read *path* and parse its contents.

    Any failure to read or decode the file raises ``SourceUnreadableError``.
    """
    opts = options or ParserOptions()
    try:
        with open(path, encoding=opts.encoding) as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceUnreadableError(os.fspath(path), str(exc)) from exc
    LOG.debug("Read %d characters from %s", len(text), path)
    return parse(text, opts)


# ---------------------------------------------------------------------------
# Line classification
# ---------------------------------------------------------------------------

def _classify(line: str) -> str:
    """Classify a trimmed line.

    Returns one of:
        'ignore'    — blank, ``#`` or ``//`` comment
        'section'   — <name> or <outer<inner>>
        'key_value' — identifier == value
        'unknown'   — anything else
    """
    if not line or line.startswith(COMMENT_PREFIXES):
        return "ignore"
    if line.startswith(NEST_OPEN) and line.endswith(NEST_CLOSE):
        return "section"
    if _match_key_value(line) is not None:
        return "key_value"
    return "unknown"


def _match_key_value(line: str) -> tuple[str, str] | None:
    """Split ``key == value`` into its key and raw value token."""
    end = 0
    while end < len(line) and (line[end].isalnum() or line[end] == "_"):
        end += 1
    if end == 0:
        return None

    rest = line[end:].lstrip()
    if not rest.startswith(ASSIGN):
        return None

    token = rest[len(ASSIGN):].strip()
    if not token:
        return None
    return line[:end], token


# ---------------------------------------------------------------------------
# Section headers
# ---------------------------------------------------------------------------

def parse_section_header(line: str, line_no: int | None = None) -> str:
    """Resolve a header line to its canonical section path.

    ``<database>`` → ``database``; ``<database<advanced>>`` (or the
    single-close form ``<database<advanced>``) → ``database/advanced``.
    """
    inner = line[len(NEST_OPEN):]
    body = inner.rstrip(NEST_CLOSE)
    closing = len(inner) - len(body)
    segments = [seg.strip() for seg in body.split(NEST_OPEN)]

    if any(not seg or NEST_CLOSE in seg for seg in segments):
        raise ThethaSyntaxError(
            f"Invalid section header '{line}'", line=line_no, text=line
        )
    if closing not in (1, len(segments)):
        raise ThethaSyntaxError(
            f"Unbalanced section header '{line}'", line=line_no, text=line
        )
    return PATH_SEP.join(segments)


# ---------------------------------------------------------------------------
# Document building
# ---------------------------------------------------------------------------

def _open_section(sections: dict[str, Section], path: str) -> None:
    if path not in sections:
        LOG.debug("Opened section %s", path)
        sections[path] = {}


def _insert(
    sections: dict[str, Section], path: str, key: str, value: Value, line_no: int
) -> None:
    # keys only go into sections opened by a header
    entries = sections.get(path)
    if entries is None:
        raise UnresolvedSectionError(
            f"Section '{path}' not initialized", line=line_no, text=path
        )
    entries[key] = value


def _decode(token: str, line_no: int, opts: ParserOptions) -> Value:
    try:
        return decode_value(token, max_depth=opts.max_depth)
    except ValueDecodeError as exc:
        raise exc.with_line(line_no) from exc
