"""objectdecorator: mixins, set operations and duck-typing over mappings.

Usage:
    from objectdecorator import Record, decorate

    user = {"id": "jsmith", "age": 32, "title": None}
    decorate(user).augment({"title": "Developer"}).override({"age": 33})

    decorate(user).difference({"id": "jsmith", "age": 40})  # {"age": 40, "title": "Developer"}
    decorate(user).get_spec().like({"id": "pjones", "age": 45, "title": "QA"})

    settings = Record()
    decorate(settings).constant("max_age", 99)
    settings["MAX_AGE"] = 1  # ignored, still 99
"""

__version__ = "0.1.0"

# Configuration
from objectdecorator.config import DecoratorSettings, get_settings

# Core primitives
from objectdecorator.core import (
    Equatable,
    Lockable,
    Record,
    Specification,
    ValueKind,
    kind_of,
    strict_equals,
)

# Decorator
from objectdecorator.decorator import Decorator, InvalidConstantError, decorate

__all__ = [
    # Version
    "__version__",
    # Core
    "ValueKind",
    "Equatable",
    "Lockable",
    "Record",
    "Specification",
    "kind_of",
    "strict_equals",
    # Decorator
    "Decorator",
    "InvalidConstantError",
    "decorate",
    # Config
    "DecoratorSettings",
    "get_settings",
]
