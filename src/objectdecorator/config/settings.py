"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for decorators.

Usage:
    from objectdecorator.config import DecoratorSettings

    # Load from environment variables (OBJECTDECORATOR_*)
    settings = DecoratorSettings()

    # Or override with explicit values
    settings = DecoratorSettings(constant_key_case="preserve")
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

KeyCase = Literal["upper", "lower", "preserve"]


class DecoratorSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for Decorator behaviour.

    Attributes:
        constant_key_case: How ``constant`` normalises key names.
        copy_constants: Whether ``copy`` re-locks constants of a Record
            in the new record instead of copying them as plain entries.

    Environment Variables:
        OBJECTDECORATOR_CONSTANT_KEY_CASE
        OBJECTDECORATOR_COPY_CONSTANTS
    """

    model_config = SettingsConfigDict(
        env_prefix="OBJECTDECORATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    constant_key_case: KeyCase = "upper"
    copy_constants: bool = False

    def constant_name(self, key: str) -> str:
        """Normalise a constant key according to ``constant_key_case``."""
        if self.constant_key_case == "upper":
            return key.upper()
        if self.constant_key_case == "lower":
            return key.lower()
        return key


@lru_cache(maxsize=1)
def get_settings() -> DecoratorSettings:
    """Access the process-wide default settings, read once from the environment.

    Returns:
        The shared DecoratorSettings instance.
    """
    return DecoratorSettings()
