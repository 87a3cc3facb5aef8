"""Minimal Pydantic models for the Apple Music catalog API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

ALBUMS_TYPE = "albums"
MUSIC_VIDEOS_TYPE = "music-videos"


class AppleMusicBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class SongAttributes(AppleMusicBaseModel):
    name: str = ""
    artist_name: str = Field(default="", alias="artistName")
    composer_name: str | None = Field(default=None, alias="composerName")
    disc_number: int | None = Field(default=None, alias="discNumber")
    track_number: int | None = Field(default=None, alias="trackNumber")
    isrc: str | None = None
    release_date: str | None = Field(default=None, alias="releaseDate")
    duration_in_millis: int | None = Field(default=None, alias="durationInMillis")


class SongResource(AppleMusicBaseModel):
    id: str | None = None
    type: str | None = None
    attributes: SongAttributes = Field(default_factory=SongAttributes)


class TrackRelationship(AppleMusicBaseModel):
    data: list[SongResource] = Field(default_factory=list["SongResource"])


class Relationships(AppleMusicBaseModel):
    tracks: TrackRelationship | None = None


class CatalogAttributes(AppleMusicBaseModel):
    name: str = ""
    artist_name: str = Field(default="", alias="artistName")
    release_date: str | None = Field(default=None, alias="releaseDate")
    record_label: str | None = Field(default=None, alias="recordLabel")
    upc: str | None = None
    is_mastered_for_itunes: bool | None = Field(default=None, alias="isMasteredForItunes")
    audio_traits: list[str] | None = Field(default=None, alias="audioTraits")
    copyright: str | None = None
    isrc: str | None = None
    duration_in_millis: int | None = Field(default=None, alias="durationInMillis")


class CatalogResource(AppleMusicBaseModel):
    id: str | None = None
    type: str
    attributes: CatalogAttributes = Field(default_factory=CatalogAttributes)
    relationships: Relationships | None = None


class CatalogResponse(AppleMusicBaseModel):
    data: list[CatalogResource] = Field(default_factory=list["CatalogResource"])
