from __future__ import annotations

import pytest

from releasecheck.domain.model import (
    Album,
    ArtistCredit,
    EntryType,
    Track,
    compute_different_dates,
    credit_string,
)
from tests.support.builders import make_release


def _track(number: int, *, release_date: str | None, disc: int = 1) -> Track:
    return Track(name=f"T{number}", artist="A", disc=disc, track=number, release_date=release_date)


def test_different_dates_set_when_a_track_date_differs() -> None:
    tracks = [_track(1, release_date="2020-01-01"), _track(2, release_date="2019-06-01")]

    assert compute_different_dates("2020-01-01", tracks) is True


def test_different_dates_false_when_all_track_dates_match() -> None:
    tracks = [_track(1, release_date="2020-01-01"), _track(2, release_date="2020-01-01")]

    assert compute_different_dates("2020-01-01", tracks) is False


@pytest.mark.parametrize("album_date", ["2020-01-01", None, ""])
def test_different_dates_false_when_no_track_carries_a_date(album_date: str | None) -> None:
    tracks = [_track(1, release_date=None), _track(2, release_date=None)]

    assert compute_different_dates(album_date, tracks) is False


def test_different_dates_counts_undated_track_once_another_track_is_dated() -> None:
    tracks = [_track(1, release_date="2020-01-01"), _track(2, release_date=None)]

    assert compute_different_dates("2020-01-01", tracks) is True


def test_album_build_derives_different_dates_and_keeps_track_order() -> None:
    tracks = [
        _track(2, release_date="2021-01-01", disc=2),
        _track(1, release_date="2020-01-01"),
    ]

    album = Album.build(name="X", artist="Y", release_date="2020-01-01", tracks=tracks)

    assert album.different_dates is True
    assert [(track.disc, track.track) for track in album.tracks] == [(2, 2), (1, 1)]
    assert album.has_multiple_discs is True
    assert album.has_composers is False
    assert album.track_count == 2


def test_album_build_treats_blank_barcode_as_absent() -> None:
    album = Album.build(name="X", artist="Y", release_date=None, barcode="")

    assert album.barcode is None
    assert album.tracks == ()


@pytest.mark.parametrize(("disc", "number"), [(0, 1), (1, 0)])
def test_track_rejects_non_positive_positions(disc: int, number: int) -> None:
    with pytest.raises(ValueError, match="positive"):
        Track(name="T", artist="A", disc=disc, track=number)


def test_track_rejects_negative_duration() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        Track(name="T", artist="A", disc=1, track=1, duration=-1)


def test_flattened_tracks_follow_medium_then_position_order() -> None:
    release = make_release([1000, 2000], [3000])

    flattened = release.flattened_tracks()

    assert [track.length for track in flattened] == [1000, 2000, 3000]
    assert release.track_count == 3
    assert release.has_multiple_media is True


def test_credit_string_joins_names_and_phrases() -> None:
    credits = (ArtistCredit("The Lanterns", " feat. "), ArtistCredit("Mara Quay"))

    assert credit_string(credits) == "The Lanterns feat. Mara Quay"


def test_entry_type_collection_is_plural_path_segment() -> None:
    assert EntryType.ALBUM.collection == "albums"
    assert EntryType.MUSIC_VIDEO.collection == "music-videos"
