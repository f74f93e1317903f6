"""Record: a mapping with a prototype link and write-locked entries.

Usage:
    base = Record({"greet": lambda: "hi"})
    user = Record({"name": "jsmith"}, prototype=base)

    user["greet"]          # inherited from base
    list(user)             # ["name"], own keys only

    user.define_constant("MAX_AGE", 99)
    user["MAX_AGE"] = 1    # silently ignored
    del user["MAX_AGE"]    # silently ignored
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

from objectdecorator.core.component.models import MISSING

logger = logging.getLogger(__name__)


class Record(MutableMapping[str, Any]):
    """Mutable string-keyed mapping with inherited keys and constants.

    Lookup (``record[key]``, ``key in record``, ``get``) falls back to the
    prototype chain. Iteration, ``len`` and the key/item/value views cover
    own keys only.

    Locked keys ignore assignment and deletion without raising.

    Args:
        data: Initial own entries.
        prototype: Mapping that inherited lookups delegate to.
        **kwargs: Additional initial own entries.
    """

    __slots__ = ("_data", "_locked", "_prototype")

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        /,
        *,
        prototype: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        self._data: dict[str, Any] = {}
        self._locked: set[str] = set()
        self._prototype = prototype
        if data is not None:
            self.update(data)
        if kwargs:
            self.update(kwargs)

    @property
    def prototype(self) -> Mapping[str, Any] | None:
        """Mapping that inherited lookups delegate to."""
        return self._prototype

    def __getitem__(self, key: str) -> Any:
        if key in self._data:
            return self._data[key]
        if self._prototype is not None and key in self._prototype:
            return self._prototype[key]
        raise KeyError(key)

    def __setitem__(self, key: str, value: Any) -> None:
        if key in self._locked:
            logger.debug("Ignored write to constant %r", key)
            return
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        if key in self._locked:
            logger.debug("Ignored delete of constant %r", key)
            return
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        if key in self._data:
            return True
        return self._prototype is not None and key in self._prototype

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        if self._prototype is None:
            return f"Record({self._data!r})"
        return f"Record({self._data!r}, prototype={self._prototype!r})"

    def own(self, key: str) -> bool:
        """Check if key is stored on this record rather than inherited."""
        return key in self._data

    def chain_items(self) -> Iterator[tuple[str, Any]]:
        """Iterate own items, then inherited items not shadowed by a nearer key.

        Yields:
            (key, value) pairs across the whole prototype chain.
        """
        seen: set[str] = set()
        for key, value in self._data.items():
            seen.add(key)
            yield key, value
        if self._prototype is None:
            return
        if isinstance(self._prototype, Record):
            inherited = self._prototype.chain_items()
        else:
            inherited = iter(self._prototype.items())
        for key, value in inherited:
            if key not in seen:
                seen.add(key)
                yield key, value

    def pop(self, key: str, default: Any = MISSING) -> Any:
        """Remove an own key and return its value.

        Inherited keys are never removed; they return ``default`` like
        absent keys do. A locked key returns its value and stays in place.

        Raises:
            KeyError: If key is not owned and no default was given.
        """
        if key in self._data:
            value = self._data[key]
            del self[key]
            return value
        if default is MISSING:
            raise KeyError(key)
        return default

    def popitem(self) -> tuple[str, Any]:
        """Remove and return the most recently inserted unlocked item.

        Raises:
            KeyError: If every own key is locked or the record is empty.
        """
        for key in reversed(self._data):
            if key not in self._locked:
                return key, self._data.pop(key)
        raise KeyError("popitem(): no unlocked keys in record")

    def clear(self) -> None:
        """Remove every own key that is not locked."""
        for key in [k for k in self._data if k not in self._locked]:
            del self._data[key]

    def define_constant(self, key: str, value: Any) -> None:
        """Store value under key and lock it against writes and deletes.

        Redefining an existing constant is ignored.

        Args:
            key: Entry name, used as given.
            value: Value to lock in.
        """
        if key in self._locked:
            logger.debug("Ignored redefinition of constant %r", key)
            return
        self._data[key] = value
        self._locked.add(key)
        logger.debug("Defined constant %r=%r", key, value)

    def is_locked(self, key: str) -> bool:
        """Check if key holds a constant."""
        return key in self._locked

    def locked_keys(self) -> frozenset[str]:
        """Names of every constant on this record."""
        return frozenset(self._locked)
