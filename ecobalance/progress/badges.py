"""
Badge catalog.

Category badges are earned when a monthly category total is strictly below
a fixed threshold. Their progress is::

    min(100, threshold / max(value, 1) × 100)

The ``max(value, 1)`` floor keeps progress finite when a category is zero
(a cyclist's transport emissions, for instance).
"""

from __future__ import annotations

from dataclasses import dataclass

from ecobalance.models.emissions import EmissionsBreakdown
from ecobalance.models.progress import Badge
from ecobalance.taxonomy.lifestyle import EmissionCategory

STREAK_TARGET_DAYS = 7


@dataclass(frozen=True)
class CategoryBadge:
    """A badge earned by keeping one monthly category under a threshold."""

    id:          str
    name:        str
    description: str
    icon:        str
    category:    EmissionCategory
    threshold:   float

    def evaluate(self, monthly: EmissionsBreakdown) -> Badge:
        value = getattr(monthly, self.category.value)
        return Badge(
            id=self.id,
            name=self.name,
            description=self.description,
            icon=self.icon,
            earned=value < self.threshold,
            progress=guarded_progress(self.threshold, value),
        )


CATEGORY_BADGES: tuple[CategoryBadge, ...] = (
    CategoryBadge(
        id="energy-saver",
        name="Energy Saver",
        description="Keep energy emissions below 50kg/month",
        icon="⚡",
        category=EmissionCategory.ENERGY,
        threshold=50.0,
    ),
    CategoryBadge(
        id="eco-commuter",
        name="Eco Commuter",
        description="Keep transport emissions below 20kg/month",
        icon="🚲",
        category=EmissionCategory.TRANSPORT,
        threshold=20.0,
    ),
    CategoryBadge(
        id="green-eater",
        name="Green Eater",
        description="Keep food emissions below 40kg/month",
        icon="🥗",
        category=EmissionCategory.FOOD,
        threshold=40.0,
    ),
    CategoryBadge(
        id="appliance-ace",
        name="Appliance Ace",
        description="Keep appliance emissions below 40kg/month",
        icon="🔌",
        category=EmissionCategory.APPLIANCES,
        threshold=40.0,
    ),
    CategoryBadge(
        id="mindful-shopper",
        name="Mindful Shopper",
        description="Keep shopping emissions below 30kg/month",
        icon="🛍️",
        category=EmissionCategory.SHOPPING,
        threshold=30.0,
    ),
    CategoryBadge(
        id="waste-warrior",
        name="Waste Warrior",
        description="Keep waste emissions below 10kg/month",
        icon="♻️",
        category=EmissionCategory.WASTE,
        threshold=10.0,
    ),
)


def guarded_progress(threshold: float, value: float) -> float:
    """Progress toward a below-threshold goal, always in ``[0, 100]``."""
    return min(100.0, threshold / max(value, 1.0) * 100.0)


def first_steps_badge() -> Badge:
    """Always earned: the user has completed an assessment."""
    return Badge(
        id="first-steps",
        name="First Steps",
        description="Complete your first carbon assessment",
        icon="👣",
        earned=True,
        progress=100.0,
    )


def streak_badge(streak: int, progress: float | None = None) -> Badge:
    """Week Warrior badge for logging on consecutive days.

    Args:
        streak:   Consecutive days with an assessment.
        progress: Explicit progress override (used for the no-history
                  placeholder); derived from ``streak`` when None.
    """
    if progress is None:
        progress = min(100.0, streak / STREAK_TARGET_DAYS * 100.0)
    return Badge(
        id="week-streak",
        name="Week Warrior",
        description="Log data for 7 consecutive days",
        icon="🔥",
        earned=streak >= STREAK_TARGET_DAYS,
        progress=progress,
    )


def badge_ids() -> list[str]:
    """Catalog order of every badge id."""
    return [b.id for b in CATEGORY_BADGES] + ["first-steps", "week-streak"]
