"""Error hierarchy for ThethaCore parsing.

Every error carries a structured form (``kind``, ``line``, ``text``,
``detail``) next to its human-readable message. Callers should branch on
the class or on ``kind``; the message wording is presentation only.
"""

from __future__ import annotations

from enum import Enum, auto


class ErrorKind(Enum):
    SOURCE_UNREADABLE = auto()
    SYNTAX = auto()
    KEY_OUTSIDE_SECTION = auto()
    UNRESOLVED_SECTION = auto()
    VALUE_DECODE = auto()
    NESTING_TOO_DEEP = auto()


class ThethaCoreError(Exception):
    """Base class for all parse failures."""

    kind: ErrorKind = ErrorKind.SYNTAX

    def __init__(
        self,
        detail: str,
        *,
        line: int | None = None,
        text: str | None = None,
        kind: ErrorKind | None = None,
    ) -> None:
        if kind is not None:
            self.kind = kind
        self.detail = detail
        self.line = line
        self.text = text
        super().__init__(self.message)

    @property
    def message(self) -> str:
        if self.line is None:
            return self.detail
        return f"{self._label()} on line {self.line}: {self.detail}"

    def _label(self) -> str:
        return "Error"

    def with_line(self, line: int) -> "ThethaCoreError":
        """Return a copy of this error attributed to *line*."""
        return type(self)(self.detail, line=line, text=self.text, kind=self.kind)

    def __str__(self) -> str:
        return self.message


class SourceUnreadableError(ThethaCoreError):
    kind = ErrorKind.SOURCE_UNREADABLE

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        detail = f"Could not read file '{path}'"
        if reason:
            detail += f" ({reason})"
        super().__init__(detail, text=path)

    def with_line(self, line: int) -> "SourceUnreadableError":
        return self


class ThethaSyntaxError(ThethaCoreError):
    kind = ErrorKind.SYNTAX

    def _label(self) -> str:
        return "Syntax error"


class KeyOutsideSectionError(ThethaCoreError):
    kind = ErrorKind.KEY_OUTSIDE_SECTION


class UnresolvedSectionError(ThethaCoreError):
    kind = ErrorKind.UNRESOLVED_SECTION


class ValueDecodeError(ThethaSyntaxError):
    kind = ErrorKind.VALUE_DECODE
