"""Domain primitives: scalar aliases shared by catalog and registry records."""

from __future__ import annotations

type CountryCode = str
type CatalogId = str
type CatalogNumber = str
type Barcode = str
type Mbid = str
type Isrc = str
type DurationMs = int
type DateString = str  # Format: YYYY-MM-DD, possibly truncated
