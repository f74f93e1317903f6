"""Core functionalities: value kinds, protocols, Record and Specification.

Architecture Note:
    core/ contains the building blocks with no knowledge of the Decorator:
    pure functions over values and mappings, plus the Record mapping type.
    For the chainable wrapper, see decorator/.
"""

from objectdecorator.core.component import (
    MISSING,
    Equatable,
    Lockable,
    Record,
    ValueKind,
    chain_values,
    is_primitive,
    kind_of,
    own_mapping,
    prototype_of,
    strict_equals,
)
from objectdecorator.core.spec import Specification, shape_covers
from objectdecorator.core.types import Callback, Component

__all__ = [
    # Types
    "Callback",
    "Component",
    # Component
    "MISSING",
    "ValueKind",
    "Equatable",
    "Lockable",
    "Record",
    "kind_of",
    "is_primitive",
    "strict_equals",
    "own_mapping",
    "chain_values",
    "prototype_of",
    # Spec
    "Specification",
    "shape_covers",
]
