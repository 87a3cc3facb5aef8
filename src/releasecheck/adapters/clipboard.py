"""Supplementary identifier sourced interactively from clipboard-like text."""

from __future__ import annotations

import inspect
import re
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from releasecheck.domain.ports.page import ClipboardReader

log = getLogger(__name__)

MBID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)

TextSource = Callable[[], str | None | Awaitable[str | None]]


def extract_mbid(text: str | None) -> str:
    """Return the first MBID found in ``text``, or ``""``."""

    match = MBID_PATTERN.search((text or "").strip())
    return match.group(0) if match else ""


@dataclass(frozen=True, slots=True)
class TextClipboardReader:
    """Read an MBID from a text source; every failure yields ``""``.

    The source is called afresh on each read so nothing is cached.
    """

    source: TextSource

    async def read_identifier(self) -> str:
        try:
            text = self.source()
            if inspect.isawaitable(text):
                text = await text
        except Exception as exc:  # noqa: BLE001
            log.warning("Could not read identifier from clipboard source: %s", exc)
            return ""
        return extract_mbid(text)


if TYPE_CHECKING:
    _reader_check: ClipboardReader = TextClipboardReader(lambda: "")
