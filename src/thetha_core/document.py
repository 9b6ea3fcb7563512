"""Document — the final output of a ThethaCore parse."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from .values import Value, to_python


Section = dict[str, Value]


@dataclass(frozen=True)
class Document:
    """Holds every section of a successfully parsed source.

    ``sections`` maps a canonical section path (``"database"``,
    ``"database/advanced"``) to that section's key/value map. A Document is
    only ever handed out fully built; parse failures raise instead.
    """

    sections: dict[str, Section] = field(default_factory=dict)

    # -- Convenience accessors ------------------------------------------

    def section(self, path: str) -> Section:
        """Return the key/value map for *path* (``KeyError`` if absent)."""
        return self.sections[path]

    def get(self, path: str, key: str, default: Value | None = None) -> Value | None:
        return self.sections.get(path, {}).get(key, default)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """Plain-Python view of the whole document."""
        return {
            path: {key: to_python(value) for key, value in entries.items()}
            for path, entries in self.sections.items()
        }

    def __contains__(self, path: object) -> bool:
        return path in self.sections

    def __iter__(self) -> Iterator[str]:
        return iter(self.sections)

    def __len__(self) -> int:
        return len(self.sections)
