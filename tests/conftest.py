from __future__ import annotations

import pytest

from releasecheck.adapters.http_resilience import ResilienceConfig
from releasecheck.config.links import DeepLinkConfig
from releasecheck.config.musicbrainz import MusicBrainzConfig
from releasecheck.domain.deep_links import DeepLinkBuilder
from tests.support.builders import load_json


@pytest.fixture
def album_payload() -> dict[str, object]:
    return load_json("applemusic/album.json")


@pytest.fixture
def music_video_payload() -> dict[str, object]:
    return load_json("applemusic/music_video.json")


@pytest.fixture
def search_payload() -> dict[str, object]:
    return load_json("musicbrainz/search.json")


@pytest.fixture
def release_payload() -> dict[str, object]:
    return load_json("musicbrainz/release.json")


@pytest.fixture
def musicbrainz_config() -> MusicBrainzConfig:
    return MusicBrainzConfig(
        resilience=ResilienceConfig(
            name="musicbrainz",
            base_url="https://mb.example/ws/2",
            default_headers={"User-Agent": "releasecheck-tests/1.0 (tests@example.com)"},
        ),
        site_url="https://mb.example",
    )


@pytest.fixture
def link_builder() -> DeepLinkBuilder:
    return DeepLinkBuilder(
        DeepLinkConfig(
            harmony_base="https://harmony.example/release",
            magic_isrc_base="https://magicisrc.example/",
            registry_site="https://mb.example",
        )
    )
