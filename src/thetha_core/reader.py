"""Reader layer: decodes raw value tokens into typed Values."""

from __future__ import annotations

import re
from collections.abc import Iterator

from .errors import ErrorKind, ValueDecodeError
from .options import DEFAULT_MAX_DEPTH
from .values import Null, Value, VBool, VDict, VFloat, VInteger, VList, VString


_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

_BOOLEANS = {"True": True, "False": False}

PAIR_MARKER = "=="

_OPENERS = "[{"
_CLOSERS = "]}"


# ---------------------------------------------------------------------------
# Top-level splitting
# ---------------------------------------------------------------------------

def _top_level_positions(text: str, marker: str) -> Iterator[int]:
    """Yield indices of *marker* that sit outside brackets and quotes."""
    depth = 0
    in_string = False
    i = 0
    while i < len(text):
        ch = text[i]
        if in_string:
            if ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth -= 1
        elif depth == 0 and text.startswith(marker, i):
            yield i
            i += len(marker)
            continue
        i += 1


def split_top_level(text: str, sep: str = ",") -> list[str]:
    """Split *text* on *sep*, ignoring separators nested in ``[]``, ``{}`` or ``"..."``.

    Pieces are returned untrimmed::

        split_top_level('1, [2, 3], "a,b"')  ->  ['1', ' [2, 3]', ' "a,b"']
    """
    parts: list[str] = []
    start = 0
    for pos in _top_level_positions(text, sep):
        parts.append(text[start:pos])
        start = pos + len(sep)
    parts.append(text[start:])
    return parts


def find_top_level(text: str, marker: str) -> int:
    """Index of the first top-level *marker* in *text*, or -1."""
    return next(_top_level_positions(text, marker), -1)


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

def is_quoted(token: str) -> bool:
    return len(token) >= 2 and token.startswith('"') and token.endswith('"')


def unquote_key(key: str) -> str:
    """Strip one pair of surrounding double quotes from an object key."""
    return key[1:-1] if is_quoted(key) else key


def _parse_integer(token: str) -> VInteger | None:
    if not _INT_RE.fullmatch(token):
        return None
    n = int(token)
    if n < _I64_MIN or n > _I64_MAX:
        # too wide for 64 bits; let the float rule take it
        return None
    return VInteger(n)


def _parse_float(token: str) -> VFloat | None:
    if not _FLOAT_RE.fullmatch(token):
        return None
    return VFloat(float(token))


# ---------------------------------------------------------------------------
# decode_value
# ---------------------------------------------------------------------------

def decode_value(
    token: str,
    line: int | None = None,
    *,
    depth: int = 0,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Value:
    """Decode a trimmed value token into a Value.

    Shapes are tried in a fixed order, first match wins:

        True / False / Null  ->  VBool / Null
        "..."                ->  VString (verbatim, no escapes)
        42, -7               ->  VInteger
        1.0, 2e3             ->  VFloat
        [a, b]               ->  VList
        {k == v}             ->  VDict

    Array and object elements are decoded recursively with ``depth + 1``.
    Raises ``ValueDecodeError`` when nothing matches; ``line`` is only
    used for error attribution. Nesting beyond ``max_depth``, or beyond
    what the interpreter stack allows, raises with kind
    ``NESTING_TOO_DEEP``.
    """
    try:
        return _decode_token(token, line, depth, max_depth)
    except RecursionError as exc:
        raise ValueDecodeError(
            "Value nested too deeply for the interpreter stack",
            line=line,
            text=token,
            kind=ErrorKind.NESTING_TOO_DEEP,
        ) from exc


def _decode_token(token: str, line: int | None, depth: int, max_depth: int) -> Value:
    if not token:
        raise ValueDecodeError("Empty value", line=line, text=token)

    if token in _BOOLEANS:
        return VBool(_BOOLEANS[token])
    if token == "Null":
        return Null

    if is_quoted(token):
        return VString(token[1:-1])

    number: Value | None = _parse_integer(token)
    if number is None:
        number = _parse_float(token)
    if number is not None:
        return number

    if token.startswith("[") and token.endswith("]"):
        _check_depth(token, line, depth, max_depth)
        return _decode_array(token[1:-1], line, depth, max_depth)

    if token.startswith("{") and token.endswith("}"):
        _check_depth(token, line, depth, max_depth)
        return _decode_object(token[1:-1], line, depth, max_depth)

    raise ValueDecodeError(f"Unable to parse value '{token}'", line=line, text=token)


def _check_depth(token: str, line: int | None, depth: int, max_depth: int) -> None:
    if depth >= max_depth:
        raise ValueDecodeError(
            f"Value nested deeper than {max_depth} levels",
            line=line,
            text=token,
            kind=ErrorKind.NESTING_TOO_DEEP,
        )


def _decode_array(inner: str, line: int | None, depth: int, max_depth: int) -> VList:
    if not inner.strip():
        return VList([])
    return VList([
        _decode_token(item.strip(), line, depth + 1, max_depth)
        for item in split_top_level(inner)
    ])


def _decode_object(inner: str, line: int | None, depth: int, max_depth: int) -> VDict:
    entries: dict[str, Value] = {}
    if not inner.strip():
        return VDict(entries)

    for pair in split_top_level(inner):
        pos = find_top_level(pair, PAIR_MARKER)
        if pos < 0:
            raise ValueDecodeError(
                f"Invalid object pair '{pair.strip()}'", line=line, text=pair
            )
        key = unquote_key(pair[:pos].strip())
        raw = pair[pos + len(PAIR_MARKER):].strip()
        entries[key] = _decode_token(raw, line, depth + 1, max_depth)

    return VDict(entries)
