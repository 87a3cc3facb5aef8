"""MusicBrainz configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from releasecheck import __version__

from .env import env_or_default, env_positive_float
from .http_resilience import RateLimit, ResilienceConfig

DEFAULT_MUSICBRAINZ_SITE = "https://musicbrainz.org"
DEFAULT_MUSICBRAINZ_CONTACT = "https://github.com/"


@dataclass(frozen=True, slots=True)
class MusicBrainzConfig:
    resilience: ResilienceConfig
    site_url: str = DEFAULT_MUSICBRAINZ_SITE


def musicbrainz_user_agent(app_name: str, contact: str) -> str:
    return f"{app_name} ({contact})"


def get_musicbrainz_config() -> MusicBrainzConfig:
    site_url = env_or_default("MUSICBRAINZ_SITE", DEFAULT_MUSICBRAINZ_SITE).rstrip("/")
    base_url = env_or_default("MUSICBRAINZ_BASE_URL", f"{site_url}/ws/2")
    app_name = env_or_default("MUSICBRAINZ_APP_NAME", f"releasecheck/{__version__}")
    contact = env_or_default("MUSICBRAINZ_CONTACT", DEFAULT_MUSICBRAINZ_CONTACT)

    resilience = ResilienceConfig(
        name="musicbrainz",
        base_url=base_url,
        timeout_seconds=env_positive_float("MUSICBRAINZ_TIMEOUT", 30.0),
        ratelimit=RateLimit(max_calls=1, per_seconds=1.0),
        default_headers={
            "User-Agent": musicbrainz_user_agent(app_name, contact),
            "Accept": "application/json",
        },
    )

    return MusicBrainzConfig(resilience=resilience, site_url=site_url)
