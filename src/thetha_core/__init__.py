"""ThethaCore — parser for the ThethaCore configuration language."""

from .document import Document
from .errors import (
    ErrorKind,
    KeyOutsideSectionError,
    SourceUnreadableError,
    ThethaCoreError,
    ThethaSyntaxError,
    UnresolvedSectionError,
    ValueDecodeError,
)
from .options import ParserOptions
from .parser import parse, parse_from_source
from .reader import decode_value
from .values import (
    Null,
    Value,
    VBool,
    VDict,
    VFloat,
    VInteger,
    VList,
    VString,
    _Null,
    to_python,
)

__all__ = [
    "parse",
    "parse_from_source",
    "decode_value",
    "Document",
    "ParserOptions",
    "Null",
    "Value",
    "VBool",
    "VDict",
    "VFloat",
    "VInteger",
    "VList",
    "VString",
    "to_python",
    "ErrorKind",
    "ThethaCoreError",
    "SourceUnreadableError",
    "ThethaSyntaxError",
    "KeyOutsideSectionError",
    "UnresolvedSectionError",
    "ValueDecodeError",
]
