"""Canonical catalog records built from the catalog provider."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .primitives import Barcode, CatalogId, CountryCode, DateString, DurationMs, Isrc


class EntryType(StrEnum):
    ALBUM = "album"
    MUSIC_VIDEO = "music-video"

    @property
    def collection(self) -> str:
        """Plural path segment used by the catalog API (``albums``, ``music-videos``)."""

        return f"{self.value}s"


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """Catalog coordinates of the page being inspected."""

    country: CountryCode
    entry_type: EntryType
    id: CatalogId


@dataclass(frozen=True, slots=True)
class Track:
    name: str
    artist: str
    disc: int
    track: int
    composer: str | None = None
    isrc: Isrc | None = None
    release_date: DateString | None = None
    duration: DurationMs | None = None

    def __post_init__(self) -> None:
        if self.disc < 1 or self.track < 1:
            raise ValueError(f"Track position must be positive, got {self.disc}.{self.track}")
        if self.duration is not None and self.duration < 0:
            raise ValueError(f"Track duration must be non-negative, got {self.duration}")


@dataclass(frozen=True, slots=True)
class Album:
    """One catalog entry; tracks keep the order the provider supplied."""

    name: str
    artist: str
    release_date: DateString | None
    label: str | None = None
    barcode: Barcode | None = None
    is_mastered_for_itunes: bool | None = None
    audio_traits: tuple[str, ...] | None = None
    copyright: str | None = None
    tracks: tuple[Track, ...] = field(default_factory=tuple)
    different_dates: bool = False

    @classmethod
    def build(
        cls,
        *,
        name: str,
        artist: str,
        release_date: DateString | None,
        tracks: Iterable[Track] = (),
        label: str | None = None,
        barcode: Barcode | None = None,
        is_mastered_for_itunes: bool | None = None,
        audio_traits: tuple[str, ...] | None = None,
        copyright: str | None = None,  # noqa: A002
    ) -> Album:
        """Create an album, deriving ``different_dates`` from its tracks."""

        track_tuple = tuple(tracks)
        return cls(
            name=name,
            artist=artist,
            release_date=release_date,
            label=label,
            barcode=barcode or None,
            is_mastered_for_itunes=is_mastered_for_itunes,
            audio_traits=audio_traits,
            copyright=copyright,
            tracks=track_tuple,
            different_dates=compute_different_dates(release_date, track_tuple),
        )

    @property
    def has_multiple_discs(self) -> bool:
        return any(track.disc != 1 for track in self.tracks)

    @property
    def has_composers(self) -> bool:
        return any(track.composer is not None for track in self.tracks)

    @property
    def track_count(self) -> int:
        return len(self.tracks)


def compute_different_dates(
    release_date: DateString | None,
    tracks: Iterable[Track],
) -> bool:
    """Report whether track release dates disagree with the album date.

    Two passes: any track date differing from the album date sets the flag, and
    the flag is cleared again when no track carries a date at all, so uniformly
    absent track dates never count as a discrepancy.
    """

    different = False
    tracks_have_dates = False
    for track in tracks:
        if track.release_date != release_date:
            different = True
        if track.release_date:
            tracks_have_dates = True

    if not tracks_have_dates:
        different = False
    return different
