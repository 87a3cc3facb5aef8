"""URL builders for the companion correction tools.

Both builders emit a stable parameter set: absent values are serialised as
empty strings rather than dropped, since the receiving tools read parameters by
name and position.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from urllib.parse import quote, urlencode

from releasecheck.config.links import DeepLinkConfig

if TYPE_CHECKING:
    from collections.abc import Sequence

    from releasecheck.domain.model import Album, Track

HARMONY_LINKED_SERVICES = ("deezer", "itunes", "spotify", "tidal", "beatport")


@dataclass(frozen=True, slots=True)
class ToolLinks:
    harmony: str
    magic_isrc: str


@dataclass(frozen=True, slots=True)
class DeepLinkBuilder:
    config: DeepLinkConfig = field(default_factory=DeepLinkConfig)

    def registry_tool_url(self, gtin: str | None, mbid: str | None = None) -> str:
        """Harmony release lookup URL for ``gtin``, optionally pinned to a release MBID."""

        params: list[tuple[str, str]] = [
            ("url", ""),
            ("gtin", gtin or ""),
            ("region", ""),
            ("musicbrainz", mbid or ""),
        ]
        params.extend((service, "") for service in HARMONY_LINKED_SERVICES)
        return f"{self.config.harmony_base}?{urlencode(params)}"

    def isrc_tool_url(self, tracks: Sequence[Track], mbid: str | None = None) -> str:
        """MagicISRC submission URL with one ``isrcN`` parameter per track."""

        params = "&".join(
            f"isrc{index}={quote(track.isrc or '', safe='')}"
            for index, track in enumerate(tracks, start=1)
        )
        url = f"{self.config.magic_isrc_base}?{params}"
        if mbid:
            url = f"{url}&mbid={quote(mbid, safe='')}"
        return url

    def registry_release_url(self, release_id: str) -> str:
        return f"{self.config.registry_site}/release/{release_id}"

    def tool_links(self, album: Album, mbid: str | None = None) -> ToolLinks:
        return ToolLinks(
            harmony=self.registry_tool_url(album.barcode, mbid),
            magic_isrc=self.isrc_tool_url(album.tracks, mbid),
        )
