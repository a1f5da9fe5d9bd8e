"""
Persisted snapshot models.

``InputSnapshot`` is what the persistence layer stores for a profile: the
last full ``UserInputs`` record plus when it was saved. ``HistoryEntry`` is
one row of the per-day assessment history used to derive streaks and total
savings.

Both are owned by the persistence collaborator; the engine only ever sees
``UserInputs`` and (optionally) a list of ``HistoryEntry``.
"""

from __future__ import annotations

from datetime import date, datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ecobalance.models.inputs import UserInputs
from ecobalance.taxonomy.lifestyle import EmissionLevel


class InputSnapshot(BaseModel):
    """Last known inputs for a profile.

    Attributes:
        profile: Profile key, e.g. ``"default"``.
        inputs: Full ``UserInputs`` record.
        last_updated: UTC datetime of the save.
    """

    model_config = ConfigDict(frozen=True)

    profile: str
    inputs: UserInputs
    last_updated: datetime

    @field_validator("profile")
    @classmethod
    def validate_profile(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("profile must not be empty.")
        return v

    @field_validator("last_updated")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


class HistoryEntry(BaseModel):
    """One day's assessment summary.

    Attributes:
        assessed_on: Calendar date (UTC) of the assessment.
        monthly_total: Monthly kg CO2e at that time.
        score: Sustainability score at that time.
        level: Emission level at that time.
    """

    model_config = ConfigDict(frozen=True)

    assessed_on: date
    monthly_total: float = Field(ge=0.0)
    score: int = Field(ge=0, le=100)
    level: EmissionLevel
