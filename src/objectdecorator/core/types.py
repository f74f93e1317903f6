"""Core type definitions for objectdecorator."""

from collections.abc import Callable, MutableMapping
from typing import Any, TypeAlias

Component: TypeAlias = MutableMapping[str, Any]
"""Any mutable string-keyed mapping a Decorator can wrap."""

Callback: TypeAlias = Callable[[Any, str, Component], Any]
"""Iteration callback receiving (value, key, component), in that order.

Used by ``for_each``, ``map`` and ``filter``. A ``filter`` callback only keeps
an entry when it returns exactly ``True``.
"""
