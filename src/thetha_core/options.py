"""Parser settings."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_DEPTH = 64
DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True)
class ParserOptions:
    """Knobs for a single parse call.

    ``max_depth`` bounds how deeply arrays and objects may nest inside one
    value; ``encoding`` is used by ``parse_from_source`` when reading files.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth}")
