"""Cross-check catalog releases against MusicBrainz and link the correction tools."""

from __future__ import annotations

from importlib import metadata

__all__ = ["__version__"]

try:
    __version__ = metadata.version("releasecheck")
except metadata.PackageNotFoundError:
    # running from a source checkout
    __version__ = "0.0.0+local"
