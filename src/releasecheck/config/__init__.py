"""Application configuration helpers."""

from __future__ import annotations

from releasecheck.common.logging import configure_logging

from .applemusic import AppleMusicConfig, get_apple_music_config
from .env import env_or_default, env_positive_float
from .errors import ConfigurationError, InvalidConfigurationError
from .http_resilience import RateLimit, ResilienceConfig
from .links import DeepLinkConfig, get_deep_link_config
from .musicbrainz import MusicBrainzConfig, get_musicbrainz_config

__all__ = [
    "AppleMusicConfig",
    "ConfigurationError",
    "DeepLinkConfig",
    "InvalidConfigurationError",
    "MusicBrainzConfig",
    "RateLimit",
    "ResilienceConfig",
    "configure_logging",
    "env_or_default",
    "env_positive_float",
    "get_apple_music_config",
    "get_deep_link_config",
    "get_musicbrainz_config",
]
