"""Component models: value kinds and capability protocols.

Capability protocols are optional interfaces that component values (or the
components themselves) can implement to take part in custom equality and
constant locking.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable


class ValueKind(Enum):
    """Dynamic kind of a component value, used for structural comparison."""

    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()  # None
    OBJECT = auto()  # Mappings, sequences, plain instances
    FUNCTION = auto()  # Any callable, classes included
    UNDEFINED = auto()  # Key not present at all

    @property
    def is_primitive(self) -> bool:
        """Whether values of this kind can be stored as constants."""
        return self in _PRIMITIVE_KINDS


_PRIMITIVE_KINDS = frozenset(
    {ValueKind.STRING, ValueKind.NUMBER, ValueKind.BOOLEAN, ValueKind.NULL}
)


class _Missing:
    """Sentinel type for absent keys."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@runtime_checkable
class Equatable(Protocol):
    """Value with its own notion of equality against arbitrary values."""

    def equals(self, other: Any) -> bool: ...


@runtime_checkable
class Lockable(Protocol):
    """Mapping able to hold write-locked (constant) entries."""

    def define_constant(self, key: str, value: Any) -> None: ...

    def is_locked(self, key: str) -> bool: ...

    def locked_keys(self) -> frozenset[str]: ...
