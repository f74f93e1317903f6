"""Decorator: chainable operations over one wrapped mapping.

Usage:
    # Mixins
    decorate(user).extend(defaults, overrides).augment(fallbacks)

    # Enumeration
    doubled = decorate({"a": 1, "b": 2}).map(lambda v, k, c: v * 2)
    strings = decorate(user).filter(lambda v, k, c: isinstance(v, str))

    # Set-like
    decorate(a).difference(b)
    decorate(a).intersection(b)

    # Duck-typing
    if decorate(user).get_spec().like(other):
        ...

    # Constants (component must be a Record)
    decorate(Record()).constant("max_age", 99)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from objectdecorator.config import DecoratorSettings, get_settings
from objectdecorator.core.component import (
    MISSING,
    Equatable,
    Lockable,
    Record,
    chain_values,
    is_primitive,
    own_mapping,
    prototype_of,
    strict_equals,
)
from objectdecorator.core.spec import Specification
from objectdecorator.core.types import Callback, Component


class InvalidConstantError(ValueError):
    """Raised when a constant is given a non-primitive value."""

    def __init__(self, key: str, value: Any) -> None:
        self.key = key
        self.value = value
        super().__init__(f"A constant must be a string or a primitive: {key}:{value!r}")


class Decorator:
    """Wrapper exposing mixin, enumeration and comparison operations.

    The component is shared with the caller, never copied: mutating
    operations change it in place and return self for chaining.

    Args:
        component: Mapping to operate on.
        settings: Behaviour settings; environment defaults when None.
    """

    __slots__ = ("_component", "_settings")

    def __init__(self, component: Component, settings: DecoratorSettings | None = None) -> None:
        self._component = component
        self._settings = settings if settings is not None else get_settings()

    @property
    def component(self) -> Component:
        """The wrapped mapping."""
        return self._component

    @property
    def settings(self) -> DecoratorSettings:
        """Settings in effect for this decorator."""
        return self._settings

    def unwrap(self) -> Component:
        """Return the wrapped mapping."""
        return self._component

    def __repr__(self) -> str:
        return f"Decorator({self._component!r})"

    # Mixins

    def extend(self, *sources: Mapping[str, Any] | None) -> Decorator:
        """Copy every own entry of each source into the component.

        Sources are applied in order, so later sources win. None sources are
        skipped.

        Args:
            *sources: Mappings to mix in.

        Returns:
            Self, for chaining.
        """
        cmp = self._component
        for source in sources:
            if source is None:
                continue
            for key, value in own_mapping(source).items():
                cmp[key] = value
        return self

    def augment(self, source: Mapping[str, Any] | None) -> Decorator:
        """Mix in entries only where the component's value is None or absent.

        Existing values are kept even when falsy (``False``, ``0``, ``""``).

        Args:
            source: Mapping to mix in.

        Returns:
            Self, for chaining.
        """
        if source is None:
            return self
        cmp = self._component
        for key, value in own_mapping(source).items():
            if cmp.get(key) is None:
                cmp[key] = value
        return self

    def override(self, source: Mapping[str, Any] | None) -> Decorator:
        """Mix in entries only for keys the component already has.

        Membership decides, not value: keys holding None are overridden, keys
        the component lacks are never introduced.

        Args:
            source: Mapping to mix in.

        Returns:
            Self, for chaining.
        """
        if source is None:
            return self
        cmp = self._component
        for key, value in own_mapping(source).items():
            if key in cmp:
                cmp[key] = value
        return self

    # Accessors

    def has(self, *keys: str) -> bool:
        """Check if every key maps to a truthy value.

        A key holding a falsy value counts as missing. With no keys this is
        vacuously true.
        """
        cmp = self._component
        for key in keys:
            if not cmp.get(key):
                return False
        return True

    def add(self, key: str, value: Any) -> Decorator:
        """Set component[key] to value. Returns self."""
        self._component[key] = value
        return self

    def remove(self, key: str) -> Any:
        """Delete key from the component.

        Args:
            key: Key to delete.

        Returns:
            The value stored before deletion, or None if key was absent.
        """
        cmp = self._component
        value = cmp.get(key)
        cmp.pop(key, None)
        return value

    def contains(self, value: Any) -> bool:
        """Check if value is held by the component, inherited keys included.

        A stored value matches when it is strictly equal to value, or when it
        implements Equatable and its ``equals(value)`` returns True.
        """
        for stored in chain_values(self._component):
            if strict_equals(stored, value):
                return True
            if (
                not isinstance(stored, type)
                and isinstance(stored, Equatable)
                and stored.equals(value)
            ):
                return True
        return False

    def get_prototype(self) -> Any:
        """Return the object the component delegates inherited lookups to."""
        return prototype_of(self._component)

    def constant(self, key: str, value: Any) -> Decorator:
        """Install a write-locked entry on the component.

        The key is normalised by ``settings.constant_key_case`` (upper case
        by default). Later writes and deletes of it are silently ignored.

        Args:
            key: Constant name before normalisation.
            value: String, number, boolean or None.

        Returns:
            Self, for chaining.

        Raises:
            InvalidConstantError: If value is not a primitive.
            TypeError: If the component cannot lock entries.
        """
        if not is_primitive(value):
            raise InvalidConstantError(key, value)
        cmp = self._component
        if not isinstance(cmp, Lockable):
            raise TypeError(
                f"{type(cmp).__name__} cannot hold constants. "
                f"Did you forget to wrap the data in a Record?"
            )
        name = self._settings.constant_name(key)
        cmp.define_constant(name, value)
        return self

    # Enumeration

    def for_each(self, callback: Callback) -> Decorator:
        """Call ``callback(value, key, component)`` for each own entry.

        Entries are visited in insertion order over a snapshot taken before
        the first call.

        Returns:
            Self, for chaining.
        """
        cmp = self._component
        for key, value in list(own_mapping(cmp).items()):
            callback(value, key, cmp)
        return self

    def map(self, callback: Callback) -> dict[str, Any]:
        """Build a new dict of ``key -> callback(value, key, component)``.

        The component is left unchanged.
        """
        cmp = self._component
        return {key: callback(value, key, cmp) for key, value in list(own_mapping(cmp).items())}

    def filter(self, callback: Callback) -> dict[str, Any]:
        """Build a new dict of the entries the callback accepts.

        An entry is kept only when the callback returns exactly ``True``;
        other truthy results exclude it.

        Args:
            callback: Predicate receiving (value, key, component).

        Returns:
            New dict with the accepted entries.
        """
        cmp = self._component
        return {
            key: value
            for key, value in list(own_mapping(cmp).items())
            if callback(value, key, cmp) is True
        }

    def size(self) -> int:
        """Number of own keys in the component."""
        return len(own_mapping(self._component))

    def values(self) -> list[Any]:
        """Own values in iteration order; empty for an empty or None component."""
        if self._component is None:
            return []
        return list(own_mapping(self._component).values())

    # Set-like

    def difference(self, other: Mapping[str, Any]) -> dict[str, Any]:
        """Compute the entries where other differs from the component.

        Starts from a shallow copy of the component. For each own key of
        other, the key is dropped when both hold strictly equal values and
        otherwise set to other's value.

        Args:
            other: Mapping to compare against.

        Returns:
            New dict with component-only entries plus other's differing or
            new entries.
        """
        mine = dict(own_mapping(self._component))
        result = dict(mine)
        for key, value in own_mapping(other).items():
            if key in mine and strict_equals(mine[key], value):
                del result[key]
            else:
                result[key] = value
        return result

    def intersection(self, other: Mapping[str, Any]) -> dict[str, Any]:
        """Entries of the component strictly equal to other's value at the same key."""
        return {
            key: value
            for key, value in own_mapping(self._component).items()
            if strict_equals(value, other.get(key, MISSING))
        }

    # Duck-typing and copies

    def get_spec(self) -> Specification:
        """Return a Specification referencing (not copying) the component."""
        return Specification(self._component)

    def copy(self) -> Decorator:
        """Create a decorator over a shallow copy of the component.

        A Record copies into a new Record with the same prototype; any other
        mapping copies into a dict. Nested values stay shared.

        Returns:
            New Decorator with the same settings.
        """
        cmp = self._component
        if not isinstance(cmp, Record):
            return Decorator({}, self._settings).extend(cmp)

        target = Record(prototype=cmp.prototype)
        duplicate = Decorator(target, self._settings).extend(cmp)
        if self._settings.copy_constants:
            for key in cmp.locked_keys():
                target.define_constant(key, cmp[key])
        return duplicate


def decorate(component: Component, settings: DecoratorSettings | None = None) -> Decorator:
    """Wrap a mapping in a Decorator.

    Args:
        component: Mapping to operate on. Shared, not copied.
        settings: Behaviour settings; environment defaults when None.

    Returns:
        New Decorator over component.
    """
    return Decorator(component, settings)
