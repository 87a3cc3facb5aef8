from __future__ import annotations

import asyncio

import httpx
import pytest

from releasecheck.adapters.applemusic import AppleMusicCatalogFetcher, catalog_path
from releasecheck.config.applemusic import AppleMusicConfig
from releasecheck.config.http_resilience import ResilienceConfig
from releasecheck.domain.errors import CatalogFetchError
from releasecheck.domain.model import CatalogEntry, EntryType
from tests.support.builders import make_client_factory

ALBUM_ENTRY = CatalogEntry(country="us", entry_type=EntryType.ALBUM, id="1440833098")


@pytest.fixture
def apple_config() -> AppleMusicConfig:
    return AppleMusicConfig(
        resilience=ResilienceConfig(
            name="applemusic",
            base_url="https://api.example/v1",
            default_headers={"Origin": "https://music.example"},
        ),
        site_url="https://music.example",
    )


def test_catalog_path_uses_plural_collection() -> None:
    video = CatalogEntry(country="gb", entry_type=EntryType.MUSIC_VIDEO, id="1520000001")

    assert catalog_path(ALBUM_ENTRY) == "catalog/us/albums/1440833098"
    assert catalog_path(video) == "catalog/gb/music-videos/1520000001"


def test_fetch_sends_bearer_token(
    apple_config: AppleMusicConfig,
    album_payload: dict[str, object],
) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=album_payload)

    fetcher = AppleMusicCatalogFetcher(apple_config, make_client_factory(handler))

    albums = asyncio.run(fetcher(ALBUM_ENTRY, token="ey.token"))

    assert [album.name for album in albums] == ["Harbour Lights"]
    request = seen[0]
    assert request.url.path == "/v1/catalog/us/albums/1440833098"
    assert request.headers["Authorization"] == "Bearer ey.token"
    assert request.headers["Origin"] == "https://music.example"


@pytest.mark.parametrize(
    ("response", "message"),
    [
        (httpx.Response(401), "failed"),
        (httpx.Response(200, text="not json"), "not JSON"),
        (httpx.Response(200, json={"errors": []}), "Unexpected catalog payload"),
        (httpx.Response(200, json={"data": [{"id": "1"}]}), "Malformed"),
    ],
)
def test_fetch_failures_raise_catalog_error(
    apple_config: AppleMusicConfig,
    response: httpx.Response,
    message: str,
) -> None:
    fetcher = AppleMusicCatalogFetcher(apple_config, make_client_factory(lambda _request: response))

    with pytest.raises(CatalogFetchError, match=message):
        asyncio.run(fetcher(ALBUM_ENTRY, token="ey.token"))


def test_invalid_tracks_raise_catalog_error(apple_config: AppleMusicConfig) -> None:
    payload = {
        "data": [
            {
                "type": "albums",
                "relationships": {"tracks": {"data": [{"attributes": {"trackNumber": -1}}]}},
            }
        ]
    }
    fetcher = AppleMusicCatalogFetcher(
        apple_config, make_client_factory(lambda _request: httpx.Response(200, json=payload))
    )

    with pytest.raises(CatalogFetchError, match="invalid tracks"):
        asyncio.run(fetcher(ALBUM_ENTRY, token="ey.token"))
