"""
Emissions output models.

``EmissionsBreakdown`` holds the six category totals for one time horizon
plus their sum. ``CalculatedEmissions`` bundles the daily, weekly and
monthly breakdowns with the score, level and cost estimate.

Horizon convention: the monthly breakdown is canonical. Weekly figures are
``monthly / 4`` and daily figures ``monthly / 30``. This is a fixed display
convention, not a calendar model.

All models are frozen. Outputs are recomputed in full whenever the inputs
change, never patched.
"""

from __future__ import annotations

import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ecobalance.taxonomy.lifestyle import EmissionCategory, EmissionLevel

_TOTAL_REL_TOL = 1e-6


class EmissionsBreakdown(BaseModel):
    """Per-category kg CO2e for one time horizon.

    Attributes:
        energy: Electricity + LPG.
        transport: Weekly travel.
        food: Meals.
        appliances: Household appliance usage.
        shopping: Clothing, electronics and deliveries.
        waste: Landfill, recycling and composting.
        total: Sum of the six categories.
    """

    model_config = ConfigDict(frozen=True)

    energy: float = Field(ge=0.0)
    transport: float = Field(ge=0.0)
    food: float = Field(ge=0.0)
    appliances: float = Field(ge=0.0)
    shopping: float = Field(ge=0.0)
    waste: float = Field(ge=0.0)
    total: float = Field(ge=0.0)

    @model_validator(mode="after")
    def validate_total(self) -> "EmissionsBreakdown":
        expected = self.category_sum()
        if not math.isclose(self.total, expected, rel_tol=_TOTAL_REL_TOL, abs_tol=1e-9):
            raise ValueError(
                f"total ({self.total}) must equal the sum of categories ({expected})."
            )
        return self

    @classmethod
    def from_categories(
        cls,
        energy: float,
        transport: float,
        food: float,
        appliances: float,
        shopping: float,
        waste: float,
    ) -> "EmissionsBreakdown":
        """Build a breakdown with ``total`` computed from the categories."""
        return cls(
            energy=energy,
            transport=transport,
            food=food,
            appliances=appliances,
            shopping=shopping,
            waste=waste,
            total=energy + transport + food + appliances + shopping + waste,
        )

    def category_sum(self) -> float:
        return (
            self.energy + self.transport + self.food
            + self.appliances + self.shopping + self.waste
        )

    def by_category(self) -> dict[EmissionCategory, float]:
        """Return the six category values keyed by ``EmissionCategory``."""
        return {cat: getattr(self, cat.value) for cat in EmissionCategory}

    def scaled(self, divisor: float) -> "EmissionsBreakdown":
        """Return a new breakdown with every category divided by ``divisor``."""
        return EmissionsBreakdown.from_categories(
            **{cat.value: value / divisor for cat, value in self.by_category().items()}
        )


class CostEstimate(BaseModel):
    """Monthly household energy outlay and what could be saved.

    Attributes:
        monthly_cost: Electricity bill plus LPG cylinder spend.
        potential_savings: Fixed share of ``monthly_cost`` that typical
            efficiency measures recover.
    """

    model_config = ConfigDict(frozen=True)

    monthly_cost: float = Field(ge=0.0)
    potential_savings: float = Field(ge=0.0)


class CalculatedEmissions(BaseModel):
    """Full result of one emissions calculation.

    Attributes:
        daily: Monthly breakdown divided by 30.
        weekly: Monthly breakdown divided by 4.
        monthly: Canonical monthly breakdown.
        score: Sustainability score in ``[0, 100]``; higher is better.
        level: Benchmark classification of the monthly total.
        cost_estimate: Monthly cost and potential savings.
    """

    model_config = ConfigDict(frozen=True)

    daily: EmissionsBreakdown
    weekly: EmissionsBreakdown
    monthly: EmissionsBreakdown
    score: int = Field(ge=0, le=100)
    level: EmissionLevel
    cost_estimate: CostEstimate

    def breakdown_for(self, horizon: str) -> Optional[EmissionsBreakdown]:
        """Look up a breakdown by horizon name (``daily``/``weekly``/``monthly``)."""
        return {
            "daily": self.daily,
            "weekly": self.weekly,
            "monthly": self.monthly,
        }.get(horizon)
