"""Component functionality: value kinds, protocols, Record, and operations."""

from objectdecorator.core.component.models import (
    MISSING,
    Equatable,
    Lockable,
    ValueKind,
)
from objectdecorator.core.component.operations import (
    chain_values,
    is_primitive,
    kind_of,
    own_mapping,
    prototype_of,
    strict_equals,
)
from objectdecorator.core.component.record import Record

__all__ = [
    # Models
    "MISSING",
    "ValueKind",
    "Equatable",
    "Lockable",
    # Record
    "Record",
    # Operations
    "kind_of",
    "is_primitive",
    "strict_equals",
    "own_mapping",
    "chain_values",
    "prototype_of",
]
