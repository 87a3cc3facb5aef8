from __future__ import annotations

import pytest

from releasecheck.adapters.applemusic import normalize_catalog_response
from releasecheck.adapters.musicbrainz.schema import MBRelease
from releasecheck.adapters.musicbrainz.translator import translate_release
from releasecheck.app import ReleaseCheckResult
from releasecheck.domain.deep_links import DeepLinkBuilder
from releasecheck.domain.model import Album, CatalogEntry, EntryType, ExternalRelease, Track
from releasecheck.domain.reconciliation import reconcile
from releasecheck.ui.report import (
    format_duration,
    render_badge,
    render_details,
    render_indicators,
    render_table,
)
from tests.support.builders import make_album, make_release

ENTRY = CatalogEntry(country="us", entry_type=EntryType.ALBUM, id="1440833098")
MBID = "4b1e6b4a-55f8-4c3d-9d2e-0f3a7c1d2e11"


def _result(
    album: Album, release: ExternalRelease | None, builder: DeepLinkBuilder
) -> ReleaseCheckResult:
    return ReleaseCheckResult(
        entry=ENTRY,
        albums=(album,),
        release=release,
        indicators=reconcile(album, release),
        links=builder.tool_links(album),
    )


@pytest.fixture
def matched_result(
    album_payload: dict[str, object],
    release_payload: dict[str, object],
    link_builder: DeepLinkBuilder,
) -> ReleaseCheckResult:
    album = normalize_catalog_response(album_payload)[0]
    release = translate_release(MBRelease.model_validate(release_payload))
    return _result(album, release, link_builder)


@pytest.mark.parametrize(
    ("ms", "expected"),
    [(200000, "3:20"), (61000, "1:01"), (59999, "0:59"), (0, ""), (None, "")],
)
def test_format_duration(ms: int | None, expected: str) -> None:
    assert format_duration(ms) == expected


def test_render_badge_for_matched_release(
    matched_result: ReleaseCheckResult, link_builder: DeepLinkBuilder
) -> None:
    lines = render_badge(matched_result, link_builder)

    assert lines[0] == "UPC: 0602577310455 · Tidewater Records"
    assert lines[1] == f"Harmony: {matched_result.links.harmony}"
    assert lines[2] == (
        "MagicISRC: https://magicisrc.example/?isrc1=GBUM71900001&isrc2=GBUM71900002"
        "&isrc3=GBUM71900003"
    )
    assert lines[3] == f"MusicBrainz: https://mb.example/release/{MBID}"
    assert lines[4] == "✓On MB · ✓GTIN · ✓All ISRCs · ✓Trackcount · ✓Tracklengths"


def test_render_badge_for_unresolved_release(link_builder: DeepLinkBuilder) -> None:
    result = _result(make_album([200000], barcode="123"), None, link_builder)

    lines = render_badge(result, link_builder)

    assert lines[0] == "UPC: 123"
    assert not any(line.startswith("MusicBrainz:") for line in lines)
    assert lines[-1] == "✗On MB · ✗GTIN · ✗All ISRCs · ✗Trackcount · ✗Tracklengths"


def test_render_badge_without_barcode_has_no_links(link_builder: DeepLinkBuilder) -> None:
    result = _result(make_album([200000], barcode=None), None, link_builder)

    assert render_badge(result, link_builder) == []
    assert render_indicators(result.indicators) == ""


def test_render_indicators_marks_failures(link_builder: DeepLinkBuilder) -> None:
    album = make_album([200000, 180000])
    report = reconcile(album, make_release([200000]))

    assert render_indicators(report) == "✓On MB · ✓GTIN · ✓All ISRCs · ✗Trackcount · ✗Tracklengths"


def test_render_details_lists_both_sides(
    matched_result: ReleaseCheckResult, link_builder: DeepLinkBuilder
) -> None:
    lines = render_details(matched_result, link_builder)

    assert lines[:3] == ["Harbour Lights", "The Lanterns", "Release Date: 2019-03-08"]
    assert "Mastered for iTunes: true" in lines
    assert "Audio: lossless,lossy-stereo" in lines
    assert "Tracks: 3" in lines
    header = next(line for line in lines if line.startswith("Track"))
    assert "Composer" in header
    assert "Date" not in header
    assert any(line.startswith("2.1 ") and "Breakwater (Live)" in line for line in lines)
    assert "MusicBrainz Release" in lines
    assert f"Harbour Lights <https://mb.example/release/{MBID}>" in lines
    assert "Label: Tidewater Records · Cat#: TWR-0042" in lines
    assert any("The Lanterns feat. Mara Quay" in line for line in lines)
    assert any("GBUM71900003, GBUM71900103" in line for line in lines)


def test_render_details_marks_differing_dates(link_builder: DeepLinkBuilder) -> None:
    base = make_album([200000, 180000])
    tracks = (
        base.tracks[0],
        Track(
            name="Track 2",
            artist="Artist",
            disc=1,
            track=2,
            release_date="2019-05-05",
            duration=180000,
        ),
    )
    album = Album.build(name="Album", artist="Artist", release_date="2020-01-01", tracks=tracks)
    lines = render_details(_result(album, None, link_builder), link_builder)

    assert "Release Date: 2020-01-01 (Some track dates differ)" in lines
    header = next(line for line in lines if line.startswith("Track"))
    assert header.rstrip().endswith("Date")
    assert any(line.endswith("*2019-05-05") for line in lines)
    assert lines[-1] == ""


def test_render_details_reports_missing_release(link_builder: DeepLinkBuilder) -> None:
    lines = render_details(_result(make_album([200000]), None, link_builder), link_builder)

    assert lines[-1] == "Not found on MusicBrainz"


def test_render_table_pads_columns() -> None:
    assert render_table(["A", "Bb"], [["xx", "y"]]) == ["A  | Bb", "---+---", "xx | y"]
