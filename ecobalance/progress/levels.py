"""
Progress tiers: score bands and display metadata.

Bands (score, lower bound inclusive):
  beginner   [0, 30)
  aware      [30, 55)
  conscious  [55, 80)
  hero       [80, 100]
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ecobalance.taxonomy.lifestyle import ProgressLevel


@dataclass(frozen=True)
class LevelBand:
    level: ProgressLevel
    floor: float
    width: float

    def progress(self, score: float) -> float:
        """Progress within this band, clamped to ``[0, 100]``."""
        pct = (score - self.floor) / self.width * 100.0
        return max(0.0, min(100.0, pct))


# Ascending; the first band whose upper edge exceeds the score wins.
LEVEL_BANDS: tuple[LevelBand, ...] = (
    LevelBand(ProgressLevel.BEGINNER,  floor=0.0,  width=30.0),
    LevelBand(ProgressLevel.AWARE,     floor=30.0, width=25.0),
    LevelBand(ProgressLevel.CONSCIOUS, floor=55.0, width=25.0),
    LevelBand(ProgressLevel.HERO,      floor=80.0, width=20.0),
)


@dataclass(frozen=True)
class LevelInfo:
    name: str
    description: str


LEVEL_INFO: Mapping[ProgressLevel, LevelInfo] = MappingProxyType({
    ProgressLevel.BEGINNER:  LevelInfo("Climate Beginner", "Just starting your sustainability journey"),
    ProgressLevel.AWARE:     LevelInfo("Climate Aware", "Understanding your impact"),
    ProgressLevel.CONSCIOUS: LevelInfo("Climate Conscious", "Making meaningful changes"),
    ProgressLevel.HERO:      LevelInfo("Climate Hero", "Leading by example"),
})


def band_for_score(score: float) -> LevelBand:
    for band in LEVEL_BANDS[:-1]:
        if score < band.floor + band.width:
            return band
    return LEVEL_BANDS[-1]
