"""Compare a catalog album with its resolved registry release.

The engine is a total function of ``(Album, ExternalRelease | None)``: it never
raises and holds no state between calls. Track correspondence is positional,
matching the flattened registry track list against the album's track order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .indicators import Indicator, IndicatorName, IndicatorReport

if TYPE_CHECKING:
    from collections.abc import Sequence

    from releasecheck.domain.model import Album, ExternalRelease, ExternalTrack, Track

LENGTH_TOLERANCE_MS = 2000


def reconcile(album: Album, release: ExternalRelease | None) -> IndicatorReport | None:
    """Return the indicator report, or ``None`` when the album has no barcode."""

    if not album.barcode:
        return None

    on_registry = release is not None
    all_isrcs = release is not None and all_tracks_have_isrcs(release)
    trackcount = release is not None and track_counts_match(album, release)
    tracklengths = (
        release is not None
        and trackcount
        and track_lengths_match(album.tracks, release.flattened_tracks())
    )

    values = (
        (IndicatorName.ON_REGISTRY, on_registry),
        (IndicatorName.GTIN, on_registry),
        (IndicatorName.ALL_ISRCS, all_isrcs),
        (IndicatorName.TRACKCOUNT, trackcount),
        (IndicatorName.TRACKLENGTHS, tracklengths),
    )
    return IndicatorReport(
        indicators=tuple(
            Indicator(name=name, applicable=True, passed=passed) for name, passed in values
        )
    )


def all_tracks_have_isrcs(release: ExternalRelease) -> bool:
    return all(track.isrcs for track in release.flattened_tracks())


def track_counts_match(album: Album, release: ExternalRelease) -> bool:
    return album.track_count == release.track_count


def track_lengths_match(
    local_tracks: Sequence[Track],
    external_tracks: Sequence[ExternalTrack],
    *,
    tolerance_ms: int = LENGTH_TOLERANCE_MS,
) -> bool:
    """Every local duration must sit within ``tolerance_ms`` of its positional peer."""

    for index, local in enumerate(local_tracks):
        if index >= len(external_tracks):
            return False
        external = external_tracks[index]
        if not local.duration or not external.length:
            return False
        if abs(local.duration - external.length) > tolerance_ms:
            return False
    return True
