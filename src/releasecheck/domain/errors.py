"""Error taxonomy for a reconciliation run.

``AuthError`` and ``CatalogFetchError`` abort the whole run. Registry errors are
raised by the low-level MusicBrainz client and recovered by the registry fetcher,
which degrades them to an unresolved release.
"""

from __future__ import annotations


class ReleaseCheckError(RuntimeError):
    """Base class for releasecheck failures."""


class AuthError(ReleaseCheckError):
    """Raised when no catalog bearer token can be obtained."""


class CatalogFetchError(ReleaseCheckError):
    """Raised when the primary catalog lookup fails to fetch or parse."""


class RegistryError(ReleaseCheckError):
    """Raised when the metadata registry returns an unusable response."""


class RegistrySearchError(RegistryError):
    """Raised when the barcode search against the registry fails."""


class RegistryDetailError(RegistryError):
    """Raised when fetching the full registry release document fails."""


__all__ = [
    "AuthError",
    "CatalogFetchError",
    "RegistryDetailError",
    "RegistryError",
    "RegistrySearchError",
    "ReleaseCheckError",
]
