"""Environment variable loaders for configuration."""

from __future__ import annotations

import os

from .errors import InvalidConfigurationError


def env_or_default(name: str, default: str) -> str:
    """Return an environment variable, falling back when it is unset or blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def env_positive_float(name: str, default: float) -> float:
    """Parse a positive number such as a timeout in seconds, or use ``default``."""

    raw = env_or_default(name, "")
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise InvalidConfigurationError(name, raw, "a number") from None
    if value <= 0:
        raise InvalidConfigurationError(name, raw, "a positive number")
    return value
