"""
Tests for ecobalance/models/inputs.py and ecobalance/models/snapshot.py.

What we test
------------
UserInputs:
  - Defaults describe the typical household.
  - Negative numbers clamp to 0; meals clamp to [0, 21]; recycling to [0, 100].
  - Wrong types and unknown enum values raise ValidationError.
  - Models are frozen.

merge_inputs():
  - Top-level and nested section updates.
  - Unknown keys and dicts for scalar fields raise ValueError.
  - Merged values are re-clamped.

InputSnapshot / HistoryEntry:
  - Profile must be non-empty; naive timestamps become UTC.
  - Score and monthly_total bounds.
"""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from ecobalance.models.inputs import (
    ApplianceUsage,
    ShoppingHabits,
    UserInputs,
    WasteHabits,
    merge_inputs,
)
from ecobalance.models.snapshot import HistoryEntry, InputSnapshot
from ecobalance.taxonomy.lifestyle import DietType, EmissionLevel, TransportMode


# ── UserInputs ────────────────────────────────────────────────────────────────

class TestUserInputsDefaults:
    def test_defaults(self):
        inputs = UserInputs()
        assert inputs.electricity == 250.0
        assert inputs.lpg_cylinders == 1.0
        assert inputs.transport_mode == TransportMode.CAR
        assert inputs.weekly_distance == 100.0
        assert inputs.diet_type == DietType.MIXED
        assert inputs.non_veg_meals_per_week == 7.0
        assert inputs.appliances.has_refrigerator is True
        assert inputs.waste.recycling_percent == 20.0

    def test_from_plain_dict(self):
        inputs = UserInputs.model_validate(
            {"transport_mode": "bicycle", "diet_type": "vegetarian", "waste": {"composting": True}}
        )
        assert inputs.transport_mode == TransportMode.BICYCLE
        assert inputs.waste.composting is True
        assert inputs.waste.waste_per_week == 5.0

    def test_frozen(self):
        inputs = UserInputs()
        with pytest.raises(ValidationError):
            inputs.electricity = 10.0


class TestClamping:
    def test_negative_top_level(self):
        inputs = UserInputs(electricity=-5, electricity_cost=-1, lpg_cylinders=-2, weekly_distance=-9)
        assert inputs.electricity == 0.0
        assert inputs.electricity_cost == 0.0
        assert inputs.lpg_cylinders == 0.0
        assert inputs.weekly_distance == 0.0

    @pytest.mark.parametrize("raw, expected", [(-3, 0.0), (10, 10.0), (40, 21.0)])
    def test_meals(self, raw, expected):
        assert UserInputs(non_veg_meals_per_week=raw).non_veg_meals_per_week == expected

    @pytest.mark.parametrize("raw, expected", [(-10, 0.0), (55, 55.0), (150, 100.0)])
    def test_recycling_percent(self, raw, expected):
        assert WasteHabits(recycling_percent=raw).recycling_percent == expected

    def test_sections(self):
        assert ApplianceUsage(tv_hours_per_day=-1).tv_hours_per_day == 0.0
        assert ShoppingHabits(online_orders_per_month=-4).online_orders_per_month == 0.0
        assert WasteHabits(waste_per_week=-2).waste_per_week == 0.0


class TestInvalid:
    def test_unknown_transport_mode(self):
        with pytest.raises(ValidationError):
            UserInputs(transport_mode="hovercraft")

    def test_wrong_type(self):
        with pytest.raises(ValidationError):
            UserInputs(electricity="lots")


# ── merge_inputs ──────────────────────────────────────────────────────────────

class TestMergeInputs:
    def test_top_level(self):
        merged = merge_inputs(UserInputs(), {"electricity": 120})
        assert merged.electricity == 120.0
        assert merged.weekly_distance == 100.0

    def test_nested_keeps_siblings(self):
        current = UserInputs(waste=WasteHabits(waste_per_week=9, composting=False))
        merged = merge_inputs(current, {"waste": {"composting": True}})
        assert merged.waste.composting is True
        assert merged.waste.waste_per_week == 9.0

    def test_does_not_mutate_current(self):
        current = UserInputs()
        merge_inputs(current, {"electricity": 1})
        assert current.electricity == 250.0

    def test_reclamps(self):
        merged = merge_inputs(UserInputs(), {"non_veg_meals_per_week": 99})
        assert merged.non_veg_meals_per_week == 21.0

    def test_enum_by_value(self):
        merged = merge_inputs(UserInputs(), {"transport_mode": "public_transit"})
        assert merged.transport_mode == TransportMode.PUBLIC_TRANSIT

    def test_unknown_top_level_key(self):
        with pytest.raises(ValueError, match="Unknown input field 'solar_panels'"):
            merge_inputs(UserInputs(), {"solar_panels": 4})

    def test_unknown_nested_key(self):
        with pytest.raises(ValueError, match="Unknown input field 'waste.glass'"):
            merge_inputs(UserInputs(), {"waste": {"glass": 1}})

    def test_dict_for_scalar(self):
        with pytest.raises(ValueError, match="is not a section"):
            merge_inputs(UserInputs(), {"electricity": {"kwh": 10}})

    def test_bad_enum_raises_validation_error(self):
        with pytest.raises(ValidationError):
            merge_inputs(UserInputs(), {"diet_type": "carnivore"})


# ── Snapshot models ───────────────────────────────────────────────────────────

class TestInputSnapshot:
    def test_naive_timestamp_becomes_utc(self):
        snap = InputSnapshot(
            profile="home", inputs=UserInputs(), last_updated=datetime(2026, 1, 2, 3, 4, 5)
        )
        assert snap.last_updated.tzinfo == timezone.utc

    def test_profile_stripped(self):
        snap = InputSnapshot(
            profile="  home ", inputs=UserInputs(), last_updated=datetime.now(timezone.utc)
        )
        assert snap.profile == "home"

    def test_empty_profile_rejected(self):
        with pytest.raises(ValidationError):
            InputSnapshot(profile="   ", inputs=UserInputs(), last_updated=datetime.now(timezone.utc))


class TestHistoryEntry:
    def test_valid(self):
        entry = HistoryEntry(
            assessed_on=date(2026, 5, 1), monthly_total=120.5, score=76, level="good"
        )
        assert entry.level == EmissionLevel.GOOD

    @pytest.mark.parametrize("score", [-1, 101])
    def test_score_bounds(self, score):
        with pytest.raises(ValidationError):
            HistoryEntry(
                assessed_on=date(2026, 5, 1), monthly_total=1.0, score=score, level="good"
            )

    def test_negative_total_rejected(self):
        with pytest.raises(ValidationError):
            HistoryEntry(
                assessed_on=date(2026, 5, 1), monthly_total=-1.0, score=50, level="good"
            )
