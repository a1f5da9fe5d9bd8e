"""
Recommendation generator: evaluates the rule catalog against one
``UserInputs`` + ``CalculatedEmissions`` pair.

Policy (order matters)
----------------------
1. Walk ``RULES`` in catalog order; append every rule whose predicate holds.
2. Append the catch-all tip.
3. Truncate to ``limit``.

The list is never re-sorted by impact or savings. With ``limit`` or more
matching rules the catch-all tip is cut off; that is intended.
"""

from __future__ import annotations

import logging

from ecobalance.models.emissions import CalculatedEmissions
from ecobalance.models.inputs import UserInputs
from ecobalance.models.recommendation import Recommendation
from ecobalance.recommendations.rules import CATCH_ALL_RULE, RULES, RecommendationRule

logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 5


def matching_rules(
    inputs: UserInputs,
    emissions: CalculatedEmissions,
) -> list[RecommendationRule]:
    """Return catalog rules (excluding the catch-all) that apply, in order."""
    return [rule for rule in RULES if rule.applies(inputs, emissions)]


def generate_recommendations(
    inputs: UserInputs,
    emissions: CalculatedEmissions,
    limit: int = MAX_RECOMMENDATIONS,
) -> list[Recommendation]:
    """Build the ordered, capped recommendation list.

    Args:
        inputs:    Full ``UserInputs`` the emissions were computed from.
        emissions: Result of ``calculate_emissions(inputs)``.
        limit:     Maximum number of recommendations returned.

    Returns:
        At most ``limit`` ``Recommendation`` objects in catalog order.
        Deterministic for identical arguments.

    Raises:
        ValueError: If ``limit`` is less than 1.
    """
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}.")

    matched = matching_rules(inputs, emissions)
    recs = [rule.build(inputs, emissions) for rule in matched]
    recs.append(CATCH_ALL_RULE.build(inputs, emissions))

    logger.debug(
        "Recommendations: %d rule(s) matched, returning %d (limit %d)",
        len(matched), min(len(recs), limit), limit,
    )
    return recs[:limit]
