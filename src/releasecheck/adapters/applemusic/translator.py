"""Normalise Apple Music catalog payloads into canonical albums."""

from __future__ import annotations

from typing import TYPE_CHECKING

from releasecheck.domain.model import Album, Track

from .schema import ALBUMS_TYPE, MUSIC_VIDEOS_TYPE, CatalogResponse

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .schema import CatalogResource, SongResource


def normalize_catalog_response(payload: CatalogResponse | Mapping[str, object]) -> list[Album]:
    """Build albums from a catalog response.

    Album resources come first, in payload order, followed by one synthetic
    single-track album per music video.
    """

    response = (
        payload if isinstance(payload, CatalogResponse) else CatalogResponse.model_validate(payload)
    )
    albums = [_album(resource) for resource in response.data if resource.type == ALBUMS_TYPE]
    albums.extend(
        _music_video(resource) for resource in response.data if resource.type == MUSIC_VIDEOS_TYPE
    )
    return albums


def _album(resource: CatalogResource) -> Album:
    attributes = resource.attributes
    relationship = resource.relationships.tracks if resource.relationships else None
    tracks = [_track(song) for song in relationship.data] if relationship else []
    return Album.build(
        name=attributes.name,
        artist=attributes.artist_name,
        release_date=attributes.release_date,
        label=attributes.record_label,
        barcode=attributes.upc,
        is_mastered_for_itunes=attributes.is_mastered_for_itunes,
        audio_traits=tuple(attributes.audio_traits) if attributes.audio_traits is not None else None,
        copyright=attributes.copyright,
        tracks=tracks,
    )


def _track(song: SongResource) -> Track:
    attributes = song.attributes
    return Track(
        name=attributes.name,
        artist=attributes.artist_name,
        composer=attributes.composer_name,
        disc=attributes.disc_number or 1,
        track=attributes.track_number or 1,
        isrc=attributes.isrc,
        release_date=attributes.release_date,
        duration=attributes.duration_in_millis,
    )


def _music_video(resource: CatalogResource) -> Album:
    attributes = resource.attributes
    video_track = Track(
        name=attributes.name,
        artist=attributes.artist_name,
        disc=1,
        track=1,
        isrc=attributes.isrc,
        release_date=attributes.release_date,
        duration=attributes.duration_in_millis,
    )
    # a single video never reports differing dates
    return Album(
        name=attributes.name,
        artist=attributes.artist_name,
        release_date=attributes.release_date,
        tracks=(video_track,),
        different_dates=False,
    )
