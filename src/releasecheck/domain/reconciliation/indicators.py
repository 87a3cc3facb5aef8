"""Indicator records produced by the reconciliation engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class IndicatorName(StrEnum):
    """Indicator names in their fixed display order."""

    ON_REGISTRY = "OnRegistry"
    GTIN = "GTIN"
    ALL_ISRCS = "AllISRCs"
    TRACKCOUNT = "Trackcount"
    TRACKLENGTHS = "Tracklengths"


INDICATOR_ORDER: tuple[IndicatorName, ...] = tuple(IndicatorName)


@dataclass(frozen=True, slots=True)
class Indicator:
    name: IndicatorName
    applicable: bool
    passed: bool


@dataclass(frozen=True, slots=True)
class IndicatorReport:
    """Ordered indicator list for one album."""

    indicators: tuple[Indicator, ...]

    def __iter__(self) -> Iterator[Indicator]:
        return iter(self.indicators)

    def __len__(self) -> int:
        return len(self.indicators)

    def by_name(self) -> dict[IndicatorName, Indicator]:
        return {indicator.name: indicator for indicator in self.indicators}

    def passed(self, name: IndicatorName) -> bool:
        return self.by_name()[name].passed

    @property
    def names(self) -> tuple[IndicatorName, ...]:
        return tuple(indicator.name for indicator in self.indicators)
