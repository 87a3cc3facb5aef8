"""Apple Music catalog configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_or_default, env_positive_float
from .http_resilience import ResilienceConfig

DEFAULT_APPLE_MUSIC_API_URL = "https://amp-api.music.apple.com/v1"
DEFAULT_APPLE_MUSIC_SITE = "https://music.apple.com"


@dataclass(frozen=True, slots=True)
class AppleMusicConfig:
    resilience: ResilienceConfig
    site_url: str = DEFAULT_APPLE_MUSIC_SITE
    token: str | None = None


def get_apple_music_config() -> AppleMusicConfig:
    base_url = env_or_default("APPLE_MUSIC_API_URL", DEFAULT_APPLE_MUSIC_API_URL).rstrip("/")
    site_url = env_or_default("APPLE_MUSIC_SITE", DEFAULT_APPLE_MUSIC_SITE).rstrip("/")
    token = env_or_default("APPLE_MUSIC_TOKEN", "") or None
    resilience = ResilienceConfig(
        name="applemusic",
        base_url=base_url,
        timeout_seconds=env_positive_float("APPLE_MUSIC_TIMEOUT", 15.0),
        default_headers={"Accept": "application/json", "Origin": site_url},
    )
    return AppleMusicConfig(resilience=resilience, site_url=site_url, token=token)
