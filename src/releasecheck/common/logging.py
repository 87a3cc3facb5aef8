"""Shared logging helpers for releasecheck."""

from __future__ import annotations

import logging

NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(*, level: int | str = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger once for CLI output.

    ``level`` accepts either a numeric level or a level name such as ``"DEBUG"``.
    Transport libraries are held at WARNING unless DEBUG is requested, so request
    lines do not drown the report. Pass ``force=True`` to reconfigure in tests.
    """

    numeric_level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    transport_level = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)
