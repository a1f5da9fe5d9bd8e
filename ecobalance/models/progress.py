"""
Progress and achievement models shown on the achievements page.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ecobalance.taxonomy.lifestyle import ProgressLevel


class Badge(BaseModel):
    """A named achievement.

    Attributes:
        id: Stable badge identifier, e.g. ``"energy-saver"``.
        name: Display name.
        description: What the user has to do to earn it.
        icon: Single emoji used by the presentation layer.
        earned: Whether the badge is currently earned.
        progress: Progress toward earning it, ``0``–``100``.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    icon: str
    earned: bool
    progress: float = Field(ge=0.0, le=100.0)


class UserProgress(BaseModel):
    """Tier, streak and badge state derived from one assessment.

    Attributes:
        level: Score-band tier.
        level_progress: Progress through the current band, ``0``–``100``.
        streak: Consecutive days with an assessment.
        total_saved: kg CO2e saved relative to the first assessment.
        badges: Badge catalog in display order.
    """

    model_config = ConfigDict(frozen=True)

    level: ProgressLevel
    level_progress: float = Field(ge=0.0, le=100.0)
    streak: int = Field(ge=0)
    total_saved: float = Field(ge=0.0)
    badges: list[Badge]

    def earned_badges(self) -> list[Badge]:
        return [b for b in self.badges if b.earned]
