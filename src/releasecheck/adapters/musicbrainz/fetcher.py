"""Registry lookups with the unresolved-on-failure policy.

Every lookup is a single best-effort call. Failures are logged and reported as
``None`` so that a registry outage only ever degrades the indicators.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Protocol

from releasecheck.config.musicbrainz import get_musicbrainz_config
from releasecheck.domain.errors import RegistryError

from .client import MusicBrainzClient
from .translator import translate_release, translate_search_hit

if TYPE_CHECKING:
    from types import TracebackType

    from releasecheck.config.musicbrainz import MusicBrainzConfig
    from releasecheck.domain.model import ExternalRelease, ReleaseSummary
    from releasecheck.domain.ports.fetching import ReleaseResolver

    from .schema import MBRelease, MBReleaseSearch

log = getLogger(__name__)


class ReleaseLookupClient(Protocol):
    async def __aenter__(self) -> ReleaseLookupClient: ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...

    async def search_releases_by_barcode(self, barcode: str) -> MBReleaseSearch: ...

    async def fetch_release(self, *, mbid: str) -> MBRelease: ...


def _default_client(config: MusicBrainzConfig) -> MusicBrainzClient:
    return MusicBrainzClient(config=config)


@dataclass(slots=True)
class MusicBrainzReleaseResolver:
    config: MusicBrainzConfig = field(default_factory=get_musicbrainz_config)
    client: ReleaseLookupClient | None = None

    def _lookup_client(self) -> ReleaseLookupClient:
        if self.client is None:
            self.client = _default_client(self.config)
        return self.client

    async def search_by_identifier(self, barcode: str) -> ReleaseSummary | None:
        """Return the first release matching ``barcode``, or ``None``."""

        try:
            results = await self._lookup_client().search_releases_by_barcode(barcode)
        except RegistryError as exc:
            log.warning("MusicBrainz search failed for barcode %s: %s", barcode, exc)
            return None
        if not results.releases:
            log.info("MusicBrainz search returned no releases for barcode %s", barcode)
            return None
        if len(results.releases) > 1:
            log.debug(
                "MusicBrainz returned %s releases for barcode %s, using the first",
                len(results.releases),
                barcode,
            )
        return translate_search_hit(results.releases[0])

    async def fetch_release_detail(self, release_id: str) -> ExternalRelease | None:
        try:
            payload = await self._lookup_client().fetch_release(mbid=release_id)
        except RegistryError as exc:
            log.warning("MusicBrainz release fetch failed for %s: %s", release_id, exc)
            return None
        return translate_release(payload)

    async def resolve_release(self, barcode: str) -> ExternalRelease | None:
        """Search by barcode, then fetch the full document of the first hit."""

        async with self._lookup_client():
            summary = await self.search_by_identifier(barcode)
            if summary is None:
                return None
            return await self.fetch_release_detail(summary.id)


if TYPE_CHECKING:
    _resolver_check: ReleaseResolver = MusicBrainzReleaseResolver()
