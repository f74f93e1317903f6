"""Specification functionality: structural (duck-typing) comparison."""

from objectdecorator.core.spec.models import Specification
from objectdecorator.core.spec.operations import shape_covers

__all__ = [
    # Models
    "Specification",
    # Operations
    "shape_covers",
]
