"""HTTP-level checks for the MusicBrainz client."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import httpx
import pytest

from releasecheck.adapters.musicbrainz.client import MusicBrainzClient
from releasecheck.domain.errors import RegistryDetailError, RegistrySearchError
from tests.support.builders import make_client_factory

if TYPE_CHECKING:
    from releasecheck.adapters.http_resilience import ResilienceConfig, ResilientClient
    from releasecheck.config.musicbrainz import MusicBrainzConfig


def test_search_by_barcode_sends_query_and_user_agent(
    musicbrainz_config: MusicBrainzConfig,
    search_payload: dict[str, object],
) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=search_payload)

    client = MusicBrainzClient(
        config=musicbrainz_config,
        client_factory=make_client_factory(handler),
    )

    result = asyncio.run(client.search_releases_by_barcode("0602577310455"))

    assert len(result.releases) == 2
    request = seen[0]
    assert request.url.path == "/ws/2/release/"
    assert request.url.params["query"] == "barcode:0602577310455"
    assert request.url.params["fmt"] == "json"
    assert request.headers["User-Agent"] == "releasecheck-tests/1.0 (tests@example.com)"


def test_fetch_release_requests_detail_includes(
    musicbrainz_config: MusicBrainzConfig,
    release_payload: dict[str, object],
) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=release_payload)

    client = MusicBrainzClient(
        config=musicbrainz_config,
        client_factory=make_client_factory(handler),
    )

    release = asyncio.run(client.fetch_release(mbid="4b1e6b4a-55f8-4c3d-9d2e-0f3a7c1d2e11"))

    assert release.title == "Harbour Lights"
    assert seen[0].url.path == "/ws/2/release/4b1e6b4a-55f8-4c3d-9d2e-0f3a7c1d2e11"
    assert seen[0].url.params["inc"] == "recordings+isrcs+labels+artist-credits"


def test_server_error_raises_search_error(musicbrainz_config: MusicBrainzConfig) -> None:
    client = MusicBrainzClient(
        config=musicbrainz_config,
        client_factory=make_client_factory(lambda _request: httpx.Response(503)),
    )

    with pytest.raises(RegistrySearchError):
        asyncio.run(client.search_releases_by_barcode("123"))


def test_network_error_raises_detail_error(musicbrainz_config: MusicBrainzConfig) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = MusicBrainzClient(
        config=musicbrainz_config,
        client_factory=make_client_factory(handler),
    )

    with pytest.raises(RegistryDetailError):
        asyncio.run(client.fetch_release(mbid="mbid"))


def test_invalid_json_raises_search_error(musicbrainz_config: MusicBrainzConfig) -> None:
    client = MusicBrainzClient(
        config=musicbrainz_config,
        client_factory=make_client_factory(lambda _request: httpx.Response(200, text="<html>")),
    )

    with pytest.raises(RegistrySearchError, match="invalid JSON"):
        asyncio.run(client.search_releases_by_barcode("123"))


def test_malformed_release_raises_detail_error(musicbrainz_config: MusicBrainzConfig) -> None:
    client = MusicBrainzClient(
        config=musicbrainz_config,
        client_factory=make_client_factory(
            lambda _request: httpx.Response(200, json={"id": "mbid"})
        ),
    )

    with pytest.raises(RegistryDetailError, match="Malformed"):
        asyncio.run(client.fetch_release(mbid="mbid"))


def test_session_reuses_one_connection(
    musicbrainz_config: MusicBrainzConfig,
    search_payload: dict[str, object],
) -> None:
    created: list[ResilientClient] = []
    inner = make_client_factory(lambda _request: httpx.Response(200, json=search_payload))

    def factory(resilience: ResilienceConfig) -> ResilientClient:
        session = inner(resilience)
        created.append(session)
        return session

    client = MusicBrainzClient(config=musicbrainz_config, client_factory=factory)

    async def run() -> None:
        async with client:
            await client.search_releases_by_barcode("1")
            await client.search_releases_by_barcode("2")

    asyncio.run(run())

    assert len(created) == 1
