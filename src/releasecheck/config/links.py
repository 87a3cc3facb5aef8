"""Companion tool link configuration."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_or_default
from .musicbrainz import DEFAULT_MUSICBRAINZ_SITE, get_musicbrainz_config

DEFAULT_HARMONY_BASE = "http://localhost:5220/release"
DEFAULT_MAGIC_ISRC_BASE = "https://magicisrc.kepstin.ca/"


@dataclass(frozen=True, slots=True)
class DeepLinkConfig:
    harmony_base: str = DEFAULT_HARMONY_BASE
    magic_isrc_base: str = DEFAULT_MAGIC_ISRC_BASE
    registry_site: str = DEFAULT_MUSICBRAINZ_SITE


def get_deep_link_config() -> DeepLinkConfig:
    """Link bases from the environment; release links point at the configured registry site."""

    return DeepLinkConfig(
        harmony_base=env_or_default("HARMONY_BASE", DEFAULT_HARMONY_BASE),
        magic_isrc_base=env_or_default("MAGIC_ISRC_BASE", DEFAULT_MAGIC_ISRC_BASE),
        registry_site=get_musicbrainz_config().site_url,
    )
