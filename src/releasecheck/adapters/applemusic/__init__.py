"""Apple Music catalog adapter."""

from __future__ import annotations

from .client import AppleMusicCatalogFetcher, catalog_path
from .page import ScriptTokenProvider, StaticTokenProvider, UrlPageContext
from .schema import CatalogResponse
from .translator import normalize_catalog_response

__all__ = [
    "AppleMusicCatalogFetcher",
    "CatalogResponse",
    "ScriptTokenProvider",
    "StaticTokenProvider",
    "UrlPageContext",
    "catalog_path",
    "normalize_catalog_response",
]
