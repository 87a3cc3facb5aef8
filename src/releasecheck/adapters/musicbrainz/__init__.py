"""MusicBrainz registry adapter."""

from __future__ import annotations

from .client import DEFAULT_RELEASE_INC, MusicBrainzClient
from .fetcher import MusicBrainzReleaseResolver
from .translator import translate_release, translate_search_hit

__all__ = [
    "DEFAULT_RELEASE_INC",
    "MusicBrainzClient",
    "MusicBrainzReleaseResolver",
    "translate_release",
    "translate_search_hit",
]
