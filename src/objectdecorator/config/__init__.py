"""Configuration module using Pydantic Settings.

Provides typed configuration for decorators with environment variable support.

Usage:
    from objectdecorator.config import DecoratorSettings

    settings = DecoratorSettings(constant_key_case="lower")
"""

from objectdecorator.config.settings import DecoratorSettings, KeyCase, get_settings

__all__ = [
    "DecoratorSettings",
    "KeyCase",
    "get_settings",
]
