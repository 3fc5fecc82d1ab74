"""
Exceptions raised while building and normalizing Easy Image settings.
"""

from __future__ import annotations

from typing import Iterable, List, Optional


class EasyImageError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(EasyImageError):
    """Raised when raw configuration cannot be turned into settings."""


class InvalidConfigKeyError(ConfigurationError):
    """
    Raised when raw configuration contains keys outside the allow-list.

    All offending keys are collected so they can be fixed in one go.
    """

    def __init__(self, keys: Iterable[str], owner: Optional[str] = None):
        self.keys: List[str] = list(keys)
        self.owner = owner or "Easy Image settings"
        super().__init__(
            f"Cannot specify the following on {self.owner}: {', '.join(self.keys)}"
        )


class InvalidConfigValueError(ConfigurationError):
    """Raised when a configuration value fails type or range validation."""


class UnknownTransformSetError(EasyImageError, KeyError):
    """Raised when a transform set is requested that was never configured."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown transform set: '{self.name}'"
