"""
Recommendation output model.

Recommendations are derived, never stored: they are regenerated from the
current inputs and emissions on every call. Only the rule ``id`` strings are
stable across recalculations.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ecobalance.taxonomy.lifestyle import EmissionCategory, ImpactLevel


class Recommendation(BaseModel):
    """One actionable suggestion to reduce emissions.

    Attributes:
        id: Stable rule identifier, e.g. ``"transport-carpool"``.
        category: Emission category the tip addresses.
        title: Short headline.
        description: One or two sentences of explanation.
        impact: Expected impact bucket.
        savings_kg: Estimated monthly kg CO2e avoided.
        savings_money: Estimated monthly money saved, when meaningful.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    category: EmissionCategory
    title: str
    description: str
    impact: ImpactLevel
    savings_kg: float = Field(ge=0.0)
    savings_money: Optional[float] = None

    @field_validator("title", "description")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("title and description must not be empty.")
        return v.strip()
