"""
Progress evaluator: derives ``UserProgress`` from one ``CalculatedEmissions``.

Streak and total saved
----------------------
Without history the evaluator reports the fixed placeholders the app has
always shown (3-day streak, 45 kg saved, Week Warrior at 30%). When the
caller passes the stored assessment history the values are derived from it:

  streak      = consecutive calendar days, ending at the latest entry,
                that each have an entry
  total_saved = max(0, first entry's monthly total − current monthly total)

History is an explicit argument, so the evaluator stays pure.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Optional, Sequence

from ecobalance.models.emissions import CalculatedEmissions
from ecobalance.models.progress import UserProgress
from ecobalance.models.snapshot import HistoryEntry
from ecobalance.progress.badges import CATEGORY_BADGES, first_steps_badge, streak_badge
from ecobalance.progress.levels import band_for_score

logger = logging.getLogger(__name__)

PLACEHOLDER_STREAK = 3
PLACEHOLDER_TOTAL_SAVED = 45.0
PLACEHOLDER_STREAK_PROGRESS = 30.0


def calculate_progress(
    emissions: CalculatedEmissions,
    history: Optional[Sequence[HistoryEntry]] = None,
) -> UserProgress:
    """Compute tier, badges, streak and savings.

    Args:
        emissions: Result of ``calculate_emissions()``.
        history:   Stored assessment history, any order. ``None`` selects the
                   placeholder streak and savings values.

    Returns:
        ``UserProgress`` with the badge catalog in display order.
    """
    band = band_for_score(emissions.score)

    if history is None:
        streak = PLACEHOLDER_STREAK
        total_saved = PLACEHOLDER_TOTAL_SAVED
        week_badge = streak_badge(streak, progress=PLACEHOLDER_STREAK_PROGRESS)
    else:
        streak = consecutive_day_streak(history)
        total_saved = total_saved_since_first(history, emissions.monthly.total)
        week_badge = streak_badge(streak)

    badges = [b.evaluate(emissions.monthly) for b in CATEGORY_BADGES]
    badges.append(first_steps_badge())
    badges.append(week_badge)

    progress = UserProgress(
        level=band.level,
        level_progress=band.progress(emissions.score),
        streak=streak,
        total_saved=round(total_saved, 2),
        badges=badges,
    )
    logger.debug(
        "Progress: level=%s level_progress=%.1f streak=%d earned=%d",
        progress.level, progress.level_progress, streak, len(progress.earned_badges()),
    )
    return progress


def consecutive_day_streak(history: Sequence[HistoryEntry]) -> int:
    """Count consecutive days ending at the most recent entry."""
    days = {entry.assessed_on for entry in history}
    if not days:
        return 0
    current = max(days)
    streak = 0
    while current in days:
        streak += 1
        current -= timedelta(days=1)
    return streak


def total_saved_since_first(
    history: Sequence[HistoryEntry],
    current_monthly_total: float,
) -> float:
    """kg CO2e/month below the earliest recorded total, never negative."""
    if not history:
        return 0.0
    first = min(history, key=lambda e: e.assessed_on)
    return max(0.0, first.monthly_total - current_monthly_total)
