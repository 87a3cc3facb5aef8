"""Release reconciliation: indicator computation for catalog albums."""

from __future__ import annotations

from .engine import (
    LENGTH_TOLERANCE_MS,
    all_tracks_have_isrcs,
    reconcile,
    track_counts_match,
    track_lengths_match,
)
from .indicators import INDICATOR_ORDER, Indicator, IndicatorName, IndicatorReport

__all__ = [
    "INDICATOR_ORDER",
    "LENGTH_TOLERANCE_MS",
    "Indicator",
    "IndicatorName",
    "IndicatorReport",
    "all_tracks_have_isrcs",
    "reconcile",
    "track_counts_match",
    "track_lengths_match",
]
