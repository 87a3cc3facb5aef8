"""Errors raised while loading releasecheck settings."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Base for settings that cannot be used as given."""


class InvalidConfigurationError(ConfigurationError):
    """An environment variable is set but its value cannot be used."""

    def __init__(self, name: str, value: str, expected: str) -> None:
        super().__init__(f"{name}={value!r} is not {expected}")
        self.name = name
        self.value = value
