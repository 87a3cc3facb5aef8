"""Ports for fetching catalog and registry data."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from releasecheck.domain.model import Album, CatalogEntry, ExternalRelease, ReleaseSummary


@runtime_checkable
class CatalogFetcher(Protocol):
    """Fetches and normalises one catalog entry; raises ``CatalogFetchError``."""

    async def __call__(self, entry: CatalogEntry, *, token: str) -> list[Album]: ...


@runtime_checkable
class ReleaseResolver(Protocol):
    """Registry lookups that degrade every failure to ``None``."""

    async def search_by_identifier(self, barcode: str) -> ReleaseSummary | None: ...

    async def fetch_release_detail(self, release_id: str) -> ExternalRelease | None: ...

    async def resolve_release(self, barcode: str) -> ExternalRelease | None: ...


__all__ = ["CatalogFetcher", "ReleaseResolver"]
