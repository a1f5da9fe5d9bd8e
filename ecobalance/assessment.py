"""
Assessment runner: the three engine calls bundled in dependency order.

    inputs ──► calculate_emissions ──► generate_recommendations
                         │
                         └───────────► calculate_progress

This is what callers run whenever ``UserInputs`` changes. Nothing is
patched incrementally and nothing is kept between calls; the returned
``Assessment`` is owned by the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ecobalance.emissions.calculator import calculate_emissions
from ecobalance.models.emissions import CalculatedEmissions
from ecobalance.models.inputs import UserInputs
from ecobalance.models.progress import UserProgress
from ecobalance.models.recommendation import Recommendation
from ecobalance.models.snapshot import HistoryEntry
from ecobalance.progress.evaluator import calculate_progress
from ecobalance.recommendations.generator import MAX_RECOMMENDATIONS, generate_recommendations

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Assessment:
    """Everything derived from one ``UserInputs`` record.

    Attributes:
        inputs:          The inputs the assessment was computed from.
        emissions:       Emissions breakdown, score, level and cost.
        recommendations: Ordered, capped recommendation list.
        progress:        Tier, badges, streak and savings.
    """

    inputs:          UserInputs
    emissions:       CalculatedEmissions
    recommendations: list[Recommendation]
    progress:        UserProgress

    def history_entry(self, assessed_on: date) -> HistoryEntry:
        """Summarise this assessment as a history row for ``assessed_on``."""
        return summarize(self.emissions, assessed_on)


def summarize(emissions: CalculatedEmissions, assessed_on: date) -> HistoryEntry:
    """Build the per-day history row for one emissions result."""
    return HistoryEntry(
        assessed_on=assessed_on,
        monthly_total=round(emissions.monthly.total, 3),
        score=emissions.score,
        level=emissions.level,
    )


def run_assessment(
    inputs: UserInputs,
    history: Optional[Sequence[HistoryEntry]] = None,
    max_recommendations: int = MAX_RECOMMENDATIONS,
) -> Assessment:
    """Run the full engine for one set of inputs.

    Args:
        inputs:              Full ``UserInputs`` record.
        history:             Optional stored history for streak / savings.
        max_recommendations: Cap for the recommendation list.

    Returns:
        A new ``Assessment``.
    """
    emissions = calculate_emissions(inputs)
    recommendations = generate_recommendations(inputs, emissions, limit=max_recommendations)
    progress = calculate_progress(emissions, history=history)

    logger.info(
        "Assessment: %.1f kg CO2e/month | score %d (%s) | tier %s | %d recommendation(s)",
        emissions.monthly.total,
        emissions.score,
        emissions.level,
        progress.level,
        len(recommendations),
    )
    return Assessment(
        inputs=inputs,
        emissions=emissions,
        recommendations=recommendations,
        progress=progress,
    )
