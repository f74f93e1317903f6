"""Decorator: the chainable wrapper and its factory."""

from objectdecorator.decorator.decorator import Decorator, InvalidConstantError, decorate

__all__ = [
    "Decorator",
    "InvalidConstantError",
    "decorate",
]
