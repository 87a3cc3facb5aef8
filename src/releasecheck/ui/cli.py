# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from releasecheck.adapters.applemusic import (
    ScriptTokenProvider,
    StaticTokenProvider,
    UrlPageContext,
)
from releasecheck.adapters.clipboard import TextClipboardReader
from releasecheck.app import check_release, fetch_album, supplemented_links
from releasecheck.config import (
    ConfigurationError,
    configure_logging,
    get_apple_music_config,
    get_deep_link_config,
)
from releasecheck.domain.deep_links import DeepLinkBuilder
from releasecheck.domain.errors import ReleaseCheckError

from .report import render_badge, render_details

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from releasecheck.domain.ports import TokenProvider

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Cross-check an Apple Music release against MusicBrainz"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (default: %(default)s)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Show barcode, indicators and tool links")
    check.add_argument("url", help="Apple Music album or music-video URL")
    check.add_argument("--token", type=str, help="Catalog bearer token (skips page scraping)")
    check.add_argument(
        "--details",
        action="store_true",
        help="Also print the full track listing of both sides",
    )

    links = subparsers.add_parser(
        "links",
        help="Print Harmony/MagicISRC links enriched with a release MBID",
    )
    links.add_argument("url", help="Apple Music album or music-video URL")
    links.add_argument("--token", type=str, help="Catalog bearer token (skips page scraping)")
    source = links.add_mutually_exclusive_group()
    source.add_argument(
        "--mbid-text",
        type=str,
        help="Text containing a MusicBrainz release MBID (e.g. a pasted URL)",
    )
    source.add_argument(
        "--mbid-stdin",
        action="store_true",
        help="Read the text containing the MBID from standard input",
    )

    return parser.parse_args(list(argv))


def _token_provider(url: str, token: str | None) -> TokenProvider:
    configured = token or get_apple_music_config().token
    if configured:
        return StaticTokenProvider(configured)
    return ScriptTokenProvider(page_url=url)


def _run_check(args: argparse.Namespace, builder: DeepLinkBuilder) -> int:
    result = check_release(
        UrlPageContext(args.url),
        _token_provider(args.url, args.token),
        link_builder=builder,
    )
    if result is None:
        log.error("No catalog album found for %s", args.url)
        return 2
    for line in render_badge(result, builder):
        print(line)
    if args.details:
        print()
        for line in render_details(result, builder):
            print(line)
    return 0


def _run_links(args: argparse.Namespace, builder: DeepLinkBuilder) -> int:
    album = fetch_album(UrlPageContext(args.url), _token_provider(args.url, args.token))
    if album is None:
        log.error("No catalog album found for %s", args.url)
        return 2
    if not album.barcode:
        log.error("Catalog album %s has no barcode, no tool links to build", album.name)
        return 2
    if args.mbid_stdin:
        reader = TextClipboardReader(sys.stdin.read)
    else:
        text = args.mbid_text
        reader = TextClipboardReader(lambda: text)
    links = supplemented_links(album, reader, link_builder=builder)
    print(f"Harmony+: {links.harmony}")
    print(f"MagicISRC+: {links.magic_isrc}")
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    signal(SIGINT, sigint_handler)
    load_dotenv()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=parsed_args.log_level)
    except ValueError:
        configure_logging()
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        builder = DeepLinkBuilder(get_deep_link_config())
        if parsed_args.command == "check":
            code = _run_check(parsed_args, builder)
        elif parsed_args.command == "links":
            code = _run_links(parsed_args, builder)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except (ReleaseCheckError, ConfigurationError) as exc:
        log.error("%s: %s", type(exc).__name__, exc)  # noqa: TRY400
        sys.exit(1)
    except Exception:
        log.exception("Fatal error during release check")
        sys.exit(1)

    if code:
        sys.exit(code)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


if __name__ == "__main__":
    main()
