"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from releasecheck.adapters.applemusic import AppleMusicCatalogFetcher
from releasecheck.adapters.musicbrainz import MusicBrainzReleaseResolver
from releasecheck.config.links import get_deep_link_config
from releasecheck.domain.deep_links import DeepLinkBuilder, ToolLinks
from releasecheck.domain.reconciliation import reconcile

if TYPE_CHECKING:
    from releasecheck.domain.model import Album, CatalogEntry, ExternalRelease
    from releasecheck.domain.ports import (
        CatalogFetcher,
        ClipboardReader,
        PageContext,
        ReleaseResolver,
        TokenProvider,
    )
    from releasecheck.domain.reconciliation import IndicatorReport

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReleaseCheckResult:
    """Outcome of one reconciliation run for a catalog page."""

    entry: CatalogEntry
    albums: tuple[Album, ...]
    release: ExternalRelease | None
    indicators: IndicatorReport | None
    links: ToolLinks

    @property
    def album(self) -> Album:
        return self.albums[0]


async def fetch_albums_async(
    page: PageContext,
    tokens: TokenProvider,
    *,
    catalog_fetcher: CatalogFetcher | None = None,
) -> tuple[CatalogEntry, list[Album]] | None:
    """Resolve the page, obtain a token and fetch its catalog albums.

    Returns ``None`` when the page is not a catalog album or music video, or
    when the catalog yields no albums. No registry call is made.
    """

    entry = page.resolve_entry()
    if entry is None:
        log.info("Page is not a catalog album or music video, skipping")
        return None

    token = await tokens.get_bearer_token()
    effective_fetcher = catalog_fetcher or AppleMusicCatalogFetcher()
    albums = await effective_fetcher(entry, token=token)
    if not albums:
        log.info("Catalog entry %s returned no albums", entry.id)
        return None
    return entry, albums


def fetch_album(
    page: PageContext,
    tokens: TokenProvider,
    *,
    catalog_fetcher: CatalogFetcher | None = None,
) -> Album | None:
    """Primary album of ``page`` without touching the registry."""

    fetched = asyncio.run(fetch_albums_async(page, tokens, catalog_fetcher=catalog_fetcher))
    return fetched[1][0] if fetched else None


async def check_release_async(
    page: PageContext,
    tokens: TokenProvider,
    *,
    catalog_fetcher: CatalogFetcher | None = None,
    resolver: ReleaseResolver | None = None,
    link_builder: DeepLinkBuilder | None = None,
) -> ReleaseCheckResult | None:
    """Run one reconciliation for ``page``.

    Returns ``None`` when the page is not a catalog album or music video, or
    when the catalog yields no albums. ``AuthError`` and ``CatalogFetchError``
    propagate; registry failures only leave the release unresolved.
    """

    fetched = await fetch_albums_async(page, tokens, catalog_fetcher=catalog_fetcher)
    if fetched is None:
        return None
    entry, albums = fetched

    album = albums[0]
    release: ExternalRelease | None = None
    if album.barcode:
        effective_resolver = resolver or MusicBrainzReleaseResolver()
        release = await effective_resolver.resolve_release(album.barcode)
        log.info(
            "Registry lookup for barcode %s: %s",
            album.barcode,
            release.id if release else "unresolved",
        )

    builder = link_builder or DeepLinkBuilder(get_deep_link_config())
    return ReleaseCheckResult(
        entry=entry,
        albums=tuple(albums),
        release=release,
        indicators=reconcile(album, release),
        links=builder.tool_links(album),
    )


def check_release(
    page: PageContext,
    tokens: TokenProvider,
    *,
    catalog_fetcher: CatalogFetcher | None = None,
    resolver: ReleaseResolver | None = None,
    link_builder: DeepLinkBuilder | None = None,
) -> ReleaseCheckResult | None:
    """Synchronous wrapper around :func:`check_release_async`."""

    return asyncio.run(
        check_release_async(
            page,
            tokens,
            catalog_fetcher=catalog_fetcher,
            resolver=resolver,
            link_builder=link_builder,
        )
    )


async def supplemented_links_async(
    album: Album,
    reader: ClipboardReader,
    *,
    link_builder: DeepLinkBuilder | None = None,
) -> ToolLinks:
    """Build tool links enriched with an interactively supplied release MBID.

    This is a user-triggered command; the identifier is read afresh on every
    call and never reaches the reconciliation engine.
    """

    mbid = await reader.read_identifier()
    if not mbid:
        log.info("No release MBID supplied, building links without one")
    builder = link_builder or DeepLinkBuilder(get_deep_link_config())
    return builder.tool_links(album, mbid)


def supplemented_links(
    album: Album,
    reader: ClipboardReader,
    *,
    link_builder: DeepLinkBuilder | None = None,
) -> ToolLinks:
    return asyncio.run(supplemented_links_async(album, reader, link_builder=link_builder))
