"""MusicBrainz API client."""

from __future__ import annotations

from contextlib import asynccontextmanager
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from releasecheck.adapters.http_resilience import default_client_factory
from releasecheck.domain.errors import RegistryDetailError, RegistryError, RegistrySearchError

from .schema import MBRelease, MBReleaseSearch

if TYPE_CHECKING:
    from collections.abc import AsyncIterator
    from types import TracebackType

    from releasecheck.adapters.http_resilience import ClientFactory, ResilientClient
    from releasecheck.config.musicbrainz import MusicBrainzConfig

log = getLogger(__name__)

RELEASE_ENDPOINT = "release"
DEFAULT_RELEASE_INC = (
    "recordings",
    "isrcs",
    "labels",
    "artist-credits",
)


class MusicBrainzClient:
    """Low-level HTTP client for the MusicBrainz release endpoints.

    Each call is a single attempt. Transport, status and payload failures are
    raised as ``RegistrySearchError`` or ``RegistryDetailError``; deciding what
    an unresolved release means is left to the caller.

    Use the client as an async context manager to share one connection (and its
    rate limiter) across calls; otherwise every call opens its own.
    """

    def __init__(
        self,
        *,
        config: MusicBrainzConfig,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resilience
        self._client_factory = client_factory or default_client_factory
        self._session: ResilientClient | None = None

    async def __aenter__(self) -> MusicBrainzClient:
        if self._session is None:
            self._session = self._client_factory(self._resilience)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._session is not None:
            session, self._session = self._session, None
            await session.aclose()

    async def search_releases(
        self,
        *,
        query: str,
    ) -> MBReleaseSearch:
        params: dict[str, str] = {"query": query, "fmt": "json"}

        payload = await self._get_json(
            path=f"{RELEASE_ENDPOINT}/",
            params=params,
            error_type=RegistrySearchError,
        )
        try:
            return MBReleaseSearch.model_validate(payload)
        except ValueError as exc:
            raise RegistrySearchError(f"Malformed MusicBrainz search payload: {exc}") from exc

    async def search_releases_by_barcode(self, barcode: str) -> MBReleaseSearch:
        return await self.search_releases(query=f"barcode:{barcode}")

    async def fetch_release(self, *, mbid: str) -> MBRelease:
        params: dict[str, str] = {"fmt": "json", "inc": "+".join(DEFAULT_RELEASE_INC)}

        payload = await self._get_json(
            path=f"{RELEASE_ENDPOINT}/{mbid}",
            params=params,
            error_type=RegistryDetailError,
        )
        try:
            return MBRelease.model_validate(payload)
        except ValueError as exc:
            raise RegistryDetailError(f"Malformed MusicBrainz release {mbid}: {exc}") from exc

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[ResilientClient]:
        if self._session is not None:
            yield self._session
            return
        async with self._client_factory(self._resilience) as client:
            yield client

    async def _get_json(
        self,
        *,
        path: str,
        params: dict[str, str],
        error_type: type[RegistryError],
    ) -> dict[str, object]:
        if self._resilience.base_url is None:
            raise error_type("Missing MusicBrainz base_url in resilience configuration")

        try:
            async with self._client() as client:
                log.debug("MusicBrainz GET %s %s", path, params)
                response = await client.get(path, params=params)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as exc:
            raise error_type(f"MusicBrainz request failed: {exc}") from exc
        except ValueError as exc:
            raise error_type(f"MusicBrainz returned invalid JSON: {exc}") from exc

        if not isinstance(payload, dict):
            raise error_type("Unexpected MusicBrainz response payload")
        return payload

