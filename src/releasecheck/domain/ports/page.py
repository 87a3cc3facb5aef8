"""Ports for the page-side collaborators of a reconciliation run."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from releasecheck.domain.model import CatalogEntry


@runtime_checkable
class PageContext(Protocol):
    """Derives catalog coordinates from the page being inspected."""

    def resolve_entry(self) -> CatalogEntry | None:
        """Return the coordinates, or ``None`` when the page is not applicable."""
        ...


@runtime_checkable
class TokenProvider(Protocol):
    async def get_bearer_token(self) -> str:
        """Return the catalog bearer token or raise ``AuthError``."""
        ...


@runtime_checkable
class ClipboardReader(Protocol):
    async def read_identifier(self) -> str:
        """Return a registry identifier, or ``""`` on failure or absence."""
        ...
