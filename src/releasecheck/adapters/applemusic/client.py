"""HTTP client for the Apple Music catalog API."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from releasecheck.adapters.http_resilience import ClientFactory, default_client_factory
from releasecheck.config.applemusic import AppleMusicConfig, get_apple_music_config
from releasecheck.domain.errors import CatalogFetchError

from .schema import CatalogResponse
from .translator import normalize_catalog_response

if TYPE_CHECKING:
    from releasecheck.domain.model import Album, CatalogEntry
    from releasecheck.domain.ports.fetching import CatalogFetcher

log = getLogger(__name__)


def catalog_path(entry: CatalogEntry) -> str:
    return f"catalog/{entry.country}/{entry.entry_type.collection}/{entry.id}"


@dataclass(slots=True)
class AppleMusicCatalogFetcher:
    config: AppleMusicConfig = field(default_factory=get_apple_music_config)
    client_factory: ClientFactory = field(default=default_client_factory)

    async def __call__(self, entry: CatalogEntry, *, token: str) -> list[Album]:
        payload = await self.fetch_catalog(entry, token=token)
        try:
            albums = normalize_catalog_response(payload)
        except ValueError as exc:
            raise CatalogFetchError(f"Catalog entry {entry.id} has invalid tracks: {exc}") from exc
        log.info("Catalog entry %s yielded %s album(s)", entry.id, len(albums))
        return albums

    async def fetch_catalog(self, entry: CatalogEntry, *, token: str) -> CatalogResponse:
        path = catalog_path(entry)
        headers = {"Authorization": f"Bearer {token}"}
        try:
            async with self.client_factory(self.config.resilience) as client:
                response = await client.get(path, headers=headers)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as exc:
            raise CatalogFetchError(f"Catalog request for {path} failed: {exc}") from exc
        except ValueError as exc:
            raise CatalogFetchError(f"Catalog response for {path} is not JSON: {exc}") from exc

        if not isinstance(payload, dict) or "data" not in payload:
            raise CatalogFetchError(f"Unexpected catalog payload for {path}")
        try:
            return CatalogResponse.model_validate(payload)
        except ValueError as exc:
            raise CatalogFetchError(f"Malformed catalog payload for {path}: {exc}") from exc


if TYPE_CHECKING:
    _fetcher_check: CatalogFetcher = AppleMusicCatalogFetcher()
