"""Translate MusicBrainz payloads into registry domain records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from releasecheck.domain.model import (
    ArtistCredit,
    ExternalRelease,
    ExternalTrack,
    LabelInfo,
    Medium,
    ReleaseSummary,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .schema import MBArtistCredit, MBLabelInfo, MBMedium, MBRelease, MBReleaseSearchHit, MBTrack


def translate_search_hit(hit: MBReleaseSearchHit) -> ReleaseSummary:
    return ReleaseSummary(id=hit.id, title=hit.title, barcode=hit.barcode or None)


def translate_release(release: MBRelease) -> ExternalRelease:
    return ExternalRelease(
        id=release.id,
        title=release.title,
        artist_credit=_artist_credits(release.artist_credit),
        date=release.date or None,
        label_info=tuple(_label_info(entry) for entry in release.label_info),
        barcode=release.barcode or None,
        media=tuple(_medium(medium) for medium in release.media),
    )


def _medium(medium: MBMedium) -> Medium:
    return Medium(
        position=medium.position,
        tracks=tuple(_track(track) for track in medium.tracks),
    )


def _track(track: MBTrack) -> ExternalTrack:
    recording = track.recording
    credits = track.artist_credit or (recording.artist_credit if recording else [])
    return ExternalTrack(
        position=track.position,
        title=track.title,
        artist_credit=_artist_credits(credits),
        isrcs=frozenset(recording.isrcs) if recording else frozenset(),
        length=track.length,
    )


def _artist_credits(credits: Iterable[MBArtistCredit]) -> tuple[ArtistCredit, ...]:
    return tuple(
        ArtistCredit(name=credit.name, join_phrase=credit.join_phrase or "") for credit in credits
    )


def _label_info(entry: MBLabelInfo) -> LabelInfo:
    return LabelInfo(
        label_name=entry.label.name if entry.label else None,
        catalog_number=entry.catalog_number or None,
    )
