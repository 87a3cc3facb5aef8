"""Domain model for catalog albums and registry releases."""

from __future__ import annotations

from .catalog import Album, CatalogEntry, EntryType, Track, compute_different_dates
from .primitives import (
    Barcode,
    CatalogId,
    CatalogNumber,
    CountryCode,
    DateString,
    DurationMs,
    Isrc,
    Mbid,
)
from .registry import (
    ArtistCredit,
    ExternalRelease,
    ExternalTrack,
    LabelInfo,
    Medium,
    ReleaseSummary,
    credit_string,
)

__all__ = [
    "Album",
    "ArtistCredit",
    "Barcode",
    "CatalogEntry",
    "CatalogId",
    "CatalogNumber",
    "CountryCode",
    "DateString",
    "DurationMs",
    "EntryType",
    "ExternalRelease",
    "ExternalTrack",
    "Isrc",
    "LabelInfo",
    "Mbid",
    "Medium",
    "ReleaseSummary",
    "Track",
    "compute_different_dates",
    "credit_string",
]
