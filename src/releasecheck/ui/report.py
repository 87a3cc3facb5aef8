"""Plain-text rendering of a reconciliation result."""

from __future__ import annotations

from typing import TYPE_CHECKING

from releasecheck.domain.model import credit_string
from releasecheck.domain.reconciliation import IndicatorName

if TYPE_CHECKING:
    from collections.abc import Sequence

    from releasecheck.app import ReleaseCheckResult
    from releasecheck.domain.deep_links import DeepLinkBuilder
    from releasecheck.domain.model import Album, ExternalRelease
    from releasecheck.domain.reconciliation import IndicatorReport

CHECK_MARK = "✓"
CROSS_MARK = "✗"
SEPARATOR = " · "

INDICATOR_LABELS: dict[IndicatorName, str] = {
    IndicatorName.ON_REGISTRY: "On MB",
    IndicatorName.GTIN: "GTIN",
    IndicatorName.ALL_ISRCS: "All ISRCs",
    IndicatorName.TRACKCOUNT: "Trackcount",
    IndicatorName.TRACKLENGTHS: "Tracklengths",
}


def format_duration(ms: int | None) -> str:
    """Format milliseconds as ``m:ss``; missing or zero durations render empty."""

    if not ms:
        return ""
    total_seconds = ms // 1000
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes}:{seconds:02d}"


def render_indicators(report: IndicatorReport | None) -> str:
    if report is None:
        return ""
    return SEPARATOR.join(
        f"{CHECK_MARK if indicator.passed else CROSS_MARK}{INDICATOR_LABELS[indicator.name]}"
        for indicator in report
    )


def render_badge(result: ReleaseCheckResult, builder: DeepLinkBuilder) -> list[str]:
    """Summary lines: barcode and label, tool links, registry indicators."""

    album = result.album
    head = [part for part in (f"UPC: {album.barcode}" if album.barcode else None, album.label) if part]
    lines = [SEPARATOR.join(head)] if head else []
    if album.barcode:
        lines.append(f"Harmony: {result.links.harmony}")
        lines.append(f"MagicISRC: {result.links.magic_isrc}")
    if result.release is not None:
        lines.append(f"MusicBrainz: {builder.registry_release_url(result.release.id)}")
    indicators = render_indicators(result.indicators)
    if indicators:
        lines.append(indicators)
    return lines


def render_details(result: ReleaseCheckResult, builder: DeepLinkBuilder) -> list[str]:
    lines: list[str] = []
    for album in result.albums:
        lines.extend(_album_details(album, builder))
        lines.append("")

    if result.release is not None:
        lines.extend(_release_details(result.release, builder))
    elif result.album.barcode:
        lines.append("Not found on MusicBrainz")
    return lines


def _album_details(album: Album, builder: DeepLinkBuilder) -> list[str]:
    release_line = f"Release Date: {album.release_date or ''}"
    if album.different_dates:
        release_line += " (Some track dates differ)"
    lines = [album.name, album.artist, release_line]
    if album.label is not None:
        lines.append(f"Label: {album.label}")
    if album.barcode is not None:
        lines.append(f"Barcode: {album.barcode}")
    if album.is_mastered_for_itunes is not None:
        lines.append(f"Mastered for iTunes: {str(album.is_mastered_for_itunes).lower()}")
    if album.audio_traits is not None:
        lines.append(f"Audio: {','.join(album.audio_traits)}")
    if album.copyright is not None:
        lines.append(f"Copyright: {album.copyright}")
    lines.append(f"Tracks: {album.track_count}")
    lines.append(f"Submit to MagicISRC: {builder.isrc_tool_url(album.tracks)}")

    header = ["Track", "Title", "Artist"]
    if album.has_composers:
        header.append("Composer")
    header.extend(["ISRC", "Length"])
    if album.different_dates:
        header.append("Date")

    rows: list[list[str]] = []
    for track in album.tracks:
        number = f"{track.disc}.{track.track}" if album.has_multiple_discs else str(track.track)
        row = [number, track.name, track.artist]
        if album.has_composers:
            row.append(track.composer or "")
        row.extend([track.isrc or "", format_duration(track.duration)])
        if album.different_dates:
            date = track.release_date or ""
            row.append(f"*{date}" if track.release_date != album.release_date else date)
        rows.append(row)
    lines.extend(render_table(header, rows))
    return lines


def _release_details(release: ExternalRelease, builder: DeepLinkBuilder) -> list[str]:
    lines = ["MusicBrainz Release", f"{release.title} <{builder.registry_release_url(release.id)}>"]
    if release.artist_credit:
        lines.append(credit_string(release.artist_credit))
    if release.date:
        lines.append(f"Release Date: {release.date}")
    if release.label_info:
        label = release.label_info[0]
        parts = [label.label_name] if label.label_name else []
        if label.catalog_number:
            parts.append(f"Cat#: {label.catalog_number}")
        if parts:
            lines.append(f"Label: {SEPARATOR.join(parts)}")
    if release.barcode:
        lines.append(f"Barcode: {release.barcode}")

    if release.media:
        rows: list[list[str]] = []
        for disc_index, medium in enumerate(release.media, start=1):
            for track in medium.tracks:
                position = "" if track.position is None else str(track.position)
                number = f"{disc_index}.{position}" if release.has_multiple_media else position
                rows.append(
                    [
                        number,
                        track.title,
                        credit_string(track.artist_credit),
                        ", ".join(sorted(track.isrcs)),
                        format_duration(track.length),
                    ]
                )
        lines.extend(render_table(["Track", "Title", "Artist", "ISRC", "Length"], rows))
    return lines


def render_table(header: Sequence[str], rows: Sequence[Sequence[str]]) -> list[str]:
    widths = [len(column) for column in header]
    for row in rows:
        widths = [max(width, len(cell)) for width, cell in zip(widths, row, strict=True)]

    def line(cells: Sequence[str]) -> str:
        return " | ".join(cell.ljust(width) for cell, width in zip(cells, widths, strict=True)).rstrip()

    return [line(header), "-+-".join("-" * width for width in widths), *(line(row) for row in rows)]
