"""MusicBrainz response schemas for release search and lookup."""

from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

log = logging.getLogger(__name__)

type MBId = str
type MBDate = str  # Format: YYYY-MM-DD, YYYY-MM or YYYY


class MusicBrainzBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    _logged_extra_keys: ClassVar[set[str]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = {f"{type(self).__name__}.{key}" for key in extras}.difference(
            self._logged_extra_keys
        )
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.debug("MusicBrainz unmodeled keys: %s", ", ".join(sorted(new_keys)))


class MBArtist(MusicBrainzBaseModel):
    id: MBId | None = None
    name: str
    sort_name: str | None = Field(default=None, alias="sort-name")
    disambiguation: str | None = None


class MBArtistCredit(MusicBrainzBaseModel):
    name: str
    join_phrase: str | None = Field(default=None, alias="joinphrase")
    artist: MBArtist | None = None


class MBLabel(MusicBrainzBaseModel):
    id: MBId | None = None
    name: str
    sort_name: str | None = Field(default=None, alias="sort-name")


class MBLabelInfo(MusicBrainzBaseModel):
    catalog_number: str | None = Field(default=None, alias="catalog-number")
    label: MBLabel | None = None


class MBRecording(MusicBrainzBaseModel):
    id: MBId
    title: str
    length: int | None = Field(default=None, description="Length in ms")
    isrcs: list[str] = Field(default_factory=list)
    video: bool | None = None
    disambiguation: str | None = None
    artist_credit: list[MBArtistCredit] = Field(
        default_factory=list["MBArtistCredit"], alias="artist-credit"
    )


class MBTrack(MusicBrainzBaseModel):
    id: MBId | None = None
    position: int | None = None
    number: str | None = None
    title: str
    length: int | None = Field(default=None, description="Length in ms")
    recording: MBRecording | None = None
    artist_credit: list[MBArtistCredit] = Field(
        default_factory=list["MBArtistCredit"], alias="artist-credit"
    )


class MBMedium(MusicBrainzBaseModel):
    position: int | None = None
    format: str | None = None
    title: str | None = None
    track_count: int | None = Field(default=None, alias="track-count")
    track_offset: int | None = Field(default=None, alias="track-offset")
    tracks: list[MBTrack] = Field(default_factory=list["MBTrack"])


class MBRelease(MusicBrainzBaseModel):
    id: MBId
    title: str
    status: str | None = None
    date: MBDate | None = None
    country: str | None = None
    barcode: str | None = None
    disambiguation: str | None = None
    artist_credit: list[MBArtistCredit] = Field(
        default_factory=list["MBArtistCredit"], alias="artist-credit"
    )
    label_info: list[MBLabelInfo] = Field(
        default_factory=list["MBLabelInfo"], alias="label-info"
    )
    media: list[MBMedium] = Field(default_factory=list["MBMedium"])


class MBReleaseSearchHit(MusicBrainzBaseModel):
    id: MBId
    title: str | None = None
    score: int | None = None
    barcode: str | None = None
    date: MBDate | None = None
    country: str | None = None


class MBReleaseSearch(MusicBrainzBaseModel):
    created: str | None = None
    count: int | None = None
    offset: int | None = None
    releases: list[MBReleaseSearchHit] = Field(default_factory=list["MBReleaseSearchHit"])
