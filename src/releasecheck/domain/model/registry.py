"""Registry (MusicBrainz) release documents in domain terms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .primitives import Barcode, CatalogNumber, DateString, DurationMs, Isrc, Mbid


@dataclass(frozen=True, slots=True)
class ArtistCredit:
    name: str
    join_phrase: str = ""


@dataclass(frozen=True, slots=True)
class LabelInfo:
    label_name: str | None = None
    catalog_number: CatalogNumber | None = None


@dataclass(frozen=True, slots=True)
class ExternalTrack:
    position: int | None
    title: str
    artist_credit: tuple[ArtistCredit, ...] = field(default_factory=tuple)
    isrcs: frozenset[Isrc] = field(default_factory=frozenset)
    length: DurationMs | None = None


@dataclass(frozen=True, slots=True)
class Medium:
    tracks: tuple[ExternalTrack, ...] = field(default_factory=tuple)
    position: int | None = None


@dataclass(frozen=True, slots=True)
class ReleaseSummary:
    """First hit of a registry barcode search."""

    id: Mbid
    title: str | None = None
    barcode: Barcode | None = None


@dataclass(frozen=True, slots=True)
class ExternalRelease:
    id: Mbid
    title: str
    artist_credit: tuple[ArtistCredit, ...] = field(default_factory=tuple)
    date: DateString | None = None
    label_info: tuple[LabelInfo, ...] = field(default_factory=tuple)
    barcode: Barcode | None = None
    media: tuple[Medium, ...] = field(default_factory=tuple)

    def flattened_tracks(self) -> tuple[ExternalTrack, ...]:
        """All tracks in medium order, then in order within each medium."""

        return tuple(track for medium in self.media for track in medium.tracks)

    @property
    def track_count(self) -> int:
        return sum(len(medium.tracks) for medium in self.media)

    @property
    def has_multiple_media(self) -> bool:
        return len(self.media) > 1


def credit_string(credits: Iterable[ArtistCredit]) -> str:
    """Render an artist credit the way the registry displays it."""

    return "".join(credit.name + credit.join_phrase for credit in credits)
