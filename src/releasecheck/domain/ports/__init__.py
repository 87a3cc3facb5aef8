"""Domain ports."""

from __future__ import annotations

from .fetching import CatalogFetcher, ReleaseResolver
from .page import ClipboardReader, PageContext, TokenProvider

__all__ = [
    "CatalogFetcher",
    "ClipboardReader",
    "PageContext",
    "ReleaseResolver",
    "TokenProvider",
]
