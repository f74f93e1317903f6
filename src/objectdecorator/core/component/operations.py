"""Pure functions over component values and host mappings.

These are stateless helpers that classify values into kinds, compare them
strictly, and resolve the own/inherited split of the mappings a Decorator
can wrap (plain mappings, ChainMap, Record).
"""

from __future__ import annotations

import numbers
from collections import ChainMap
from collections.abc import Iterator, Mapping
from typing import Any

from objectdecorator.core.component.models import MISSING, ValueKind
from objectdecorator.core.component.record import Record


def kind_of(value: Any) -> ValueKind:
    """Classify a value into its ValueKind.

    Order matters: bool is checked before numbers, and strings before
    callables.

    Args:
        value: Any value, or MISSING for an absent key.

    Returns:
        The kind tag of the value.
    """
    if value is MISSING:
        return ValueKind.UNDEFINED
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, numbers.Number):
        return ValueKind.NUMBER
    if callable(value):
        return ValueKind.FUNCTION
    return ValueKind.OBJECT


def is_primitive(value: Any) -> bool:
    """Check if value is a string, number, boolean or None."""
    return kind_of(value).is_primitive


def strict_equals(a: Any, b: Any) -> bool:
    """Compare two values without cross-kind coercion.

    Values of different kinds are never equal (so ``1`` and ``True`` differ).
    Objects and functions compare by identity, primitives by value.

    Args:
        a: First value.
        b: Second value.

    Returns:
        True if the values are strictly equal, False otherwise.
    """
    kind = kind_of(a)
    if kind is not kind_of(b):
        return False
    if kind in (ValueKind.OBJECT, ValueKind.FUNCTION):
        return a is b
    return bool(a == b)


def own_mapping(component: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return the mapping holding only the keys owned directly by component.

    Args:
        component: Plain mapping, ChainMap, or Record.

    Returns:
        For a ChainMap its first map, otherwise the component itself (Record
        iterates own keys only).
    """
    if isinstance(component, ChainMap):
        return component.maps[0]
    return component


def chain_values(component: Mapping[str, Any]) -> Iterator[Any]:
    """Iterate over own and inherited values, shadowed keys yielded once."""
    if isinstance(component, Record):
        for _, value in component.chain_items():
            yield value
    else:
        # ChainMap iteration already covers every map in the chain
        yield from component.values()


def prototype_of(component: Mapping[str, Any]) -> Any:
    """Return the object a component delegates inherited lookups to.

    Args:
        component: Plain mapping, ChainMap, or Record.

    Returns:
        The Record's prototype, the ChainMap's parents (None for a single
        map), or the component's class for any other mapping.
    """
    if isinstance(component, Record):
        return component.prototype
    if isinstance(component, ChainMap):
        return component.parents if len(component.maps) > 1 else None
    return type(component)
