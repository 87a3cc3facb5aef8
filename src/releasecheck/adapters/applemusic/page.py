"""Page-side collaborators: catalog coordinates and the bearer token."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING
from urllib.parse import urljoin, urlsplit

import httpx
from bs4 import BeautifulSoup

from releasecheck.adapters.http_resilience import (
    ClientFactory,
    ResilienceConfig,
    default_client_factory,
)
from releasecheck.domain.errors import AuthError
from releasecheck.domain.model import CatalogEntry, EntryType

if TYPE_CHECKING:
    from releasecheck.domain.ports.page import PageContext, TokenProvider

log = getLogger(__name__)

TOKEN_PATTERN = re.compile(r"""("|')(ey.*?)\1""")
_DIGITS = re.compile(r"^\d+$")


@dataclass(frozen=True, slots=True)
class UrlPageContext:
    """Resolve catalog coordinates from a catalog page URL.

    ``https://music.apple.com/us/album/some-title/1440833098`` yields country
    ``us``, entry type ``album`` and id ``1440833098``; the id is the last
    all-digit path segment.
    """

    url: str

    def resolve_entry(self) -> CatalogEntry | None:
        parts = urlsplit(self.url).path.split("/")
        if len(parts) < 3:
            return None
        country, raw_type = parts[1], parts[2]
        try:
            entry_type = EntryType(raw_type)
        except ValueError:
            return None
        entry_id = next((part for part in reversed(parts) if _DIGITS.match(part)), None)
        if not country or entry_id is None:
            return None
        return CatalogEntry(country=country, entry_type=entry_type, id=entry_id)


@dataclass(frozen=True, slots=True)
class StaticTokenProvider:
    token: str | None

    async def get_bearer_token(self) -> str:
        if not self.token or not self.token.strip():
            raise AuthError("No catalog bearer token configured")
        return self.token.strip()


def _page_resilience() -> ResilienceConfig:
    return ResilienceConfig(name="applemusic-page", timeout_seconds=15.0)


@dataclass(slots=True)
class ScriptTokenProvider:
    """Scrape the bearer token embedded in the page's crossorigin script bundle."""

    page_url: str
    resilience: ResilienceConfig = field(default_factory=_page_resilience)
    client_factory: ClientFactory = field(default=default_client_factory)

    async def get_bearer_token(self) -> str:
        try:
            async with self.client_factory(self.resilience) as client:
                page = await client.get(self.page_url)
                page.raise_for_status()
                script_url = find_config_script(page.text, base_url=str(page.url))
                if script_url is None:
                    raise AuthError(f"No crossorigin script found on {self.page_url}")
                script = await client.get(script_url)
                script.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise AuthError(f"Error getting catalog token: {exc}") from exc

        token = extract_token(script.text)
        if token is None:
            raise AuthError(f"No token found in {script_url}")
        log.debug("Extracted catalog token from %s", script_url)
        return token


def find_config_script(html: str, *, base_url: str) -> str | None:
    soup = BeautifulSoup(html, "html.parser")
    for script in soup.find_all("script"):
        if not script.has_attr("crossorigin"):
            continue
        src = script.get("src")
        if isinstance(src, str) and src:
            return urljoin(base_url, src)
    return None


def extract_token(source: str) -> str | None:
    match = TOKEN_PATTERN.search(source)
    return match.group(2) if match else None


if TYPE_CHECKING:
    _page_check: PageContext = UrlPageContext("")
    _token_check: TokenProvider = StaticTokenProvider(None)
