"""Value types for ThethaCore."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass
class VString:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class VInteger:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class VFloat:
    value: float

    def __str__(self) -> str:
        return repr(self.value)


@dataclass
class VBool:
    value: bool

    def __str__(self) -> str:
        return "True" if self.value else "False"


@dataclass
class VList:
    items: list["Value"] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.items) + "]"


@dataclass
class VDict:
    # dict equality ignores order; insertion order is kept for display
    entries: dict[str, "Value"] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.entries)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k} == {v}" for k, v in self.entries.items()) + "}"


class _Null:
    """Singleton for the ``Null`` literal."""

    _instance: "_Null | None" = None

    def __new__(cls) -> "_Null":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "Null"


Null = _Null()

Value = Union[VString, VInteger, VFloat, VBool, VList, VDict, _Null]


def to_python(value: Value) -> Any:
    """Convert a Value tree into plain Python objects.

    ``VList`` becomes ``list``, ``VDict`` becomes ``dict`` and ``Null``
    becomes ``None``; scalars are unwrapped.
    """
    if isinstance(value, _Null):
        return None
    if isinstance(value, VList):
        return [to_python(v) for v in value.items]
    if isinstance(value, VDict):
        return {k: to_python(v) for k, v in value.entries.items()}
    if isinstance(value, (VString, VInteger, VFloat, VBool)):
        return value.value
    raise TypeError(f"not a ThethaCore value: {value!r}")
