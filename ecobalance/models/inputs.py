"""
User-entered lifestyle data: the single input record of the engine.

``UserInputs`` is always a *full* record: the engine never merges partial
updates. Callers that edit one field at a time (the CLI ``update`` command,
a form) build the next full record with ``merge_inputs()``.

Sanitising policy
-----------------
Numeric fields are never rejected for being out of range. Instead:
  - negative values are clamped to ``0``;
  - ``non_veg_meals_per_week`` is clamped to ``[0, 21]``;
  - ``recycling_percent`` is clamped to ``[0, 100]``.

This keeps every downstream category total non-negative without the engine
having to raise. Wrong *types* and non-finite numbers (``inf``, ``nan``) still
raise ``pydantic.ValidationError``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from ecobalance.taxonomy.lifestyle import DietType, TransportMode

MEALS_PER_WEEK = 21


def _non_negative(v: float) -> float:
    return v if v > 0 else 0.0


class ApplianceUsage(BaseModel):
    """Household appliance usage.

    Attributes:
        ac_hours_per_day: Air-conditioner running hours per day.
        has_refrigerator: Whether a refrigerator runs 24 h a day.
        washing_machine_cycles_per_week: Washing-machine loads per week.
        water_heater_minutes_per_day: Electric water-heater minutes per day.
        tv_hours_per_day: Television hours per day.
        microwave_uses_per_week: Microwave uses per week.
        dishwasher_cycles_per_week: Dishwasher loads per week.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    ac_hours_per_day: float = 0.0
    has_refrigerator: bool = True
    washing_machine_cycles_per_week: float = 3.0
    water_heater_minutes_per_day: float = 0.0
    tv_hours_per_day: float = 2.0
    microwave_uses_per_week: float = 3.0
    dishwasher_cycles_per_week: float = 0.0

    @field_validator(
        "ac_hours_per_day",
        "washing_machine_cycles_per_week",
        "water_heater_minutes_per_day",
        "tv_hours_per_day",
        "microwave_uses_per_week",
        "dishwasher_cycles_per_week",
    )
    @classmethod
    def clamp_non_negative(cls, v: float) -> float:
        return _non_negative(v)


class ShoppingHabits(BaseModel):
    """Consumption habits.

    Attributes:
        clothing_items_per_month: New clothing items bought per month.
        electronics_per_year: New electronic devices bought per year.
        online_orders_per_month: Delivered online-order packages per month.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    clothing_items_per_month: float = 2.0
    electronics_per_year: float = 1.0
    online_orders_per_month: float = 4.0

    @field_validator(
        "clothing_items_per_month",
        "electronics_per_year",
        "online_orders_per_month",
    )
    @classmethod
    def clamp_non_negative(cls, v: float) -> float:
        return _non_negative(v)


class WasteHabits(BaseModel):
    """Household waste handling.

    Attributes:
        waste_per_week: Kilograms of household waste per week.
        recycling_percent: Share of that waste that is recycled, 0–100.
        composting: Whether organic waste is composted.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    waste_per_week: float = 5.0
    recycling_percent: float = 20.0
    composting: bool = False

    @field_validator("waste_per_week")
    @classmethod
    def clamp_non_negative(cls, v: float) -> float:
        return _non_negative(v)

    @field_validator("recycling_percent")
    @classmethod
    def clamp_percent(cls, v: float) -> float:
        return min(100.0, _non_negative(v))


class UserInputs(BaseModel):
    """Complete set of self-reported lifestyle data for one household.

    Defaults describe a typical urban household and are used when no
    snapshot has been stored yet.

    Attributes:
        electricity: Electricity use in kWh per month.
        electricity_cost: Electricity bill per month (currency units).
        lpg_cylinders: LPG cylinders used per month (may be fractional).
        transport_mode: Primary mode of weekly travel.
        weekly_distance: Kilometres travelled per week.
        diet_type: Broad diet pattern.
        non_veg_meals_per_week: Non-vegetarian meals per week (0–21).
            Ignored when ``diet_type`` is vegetarian.
        appliances: Appliance usage section.
        shopping: Shopping habits section.
        waste: Waste handling section.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    electricity: float = 250.0
    electricity_cost: float = 2000.0
    lpg_cylinders: float = 1.0
    transport_mode: TransportMode = TransportMode.CAR
    weekly_distance: float = 100.0
    diet_type: DietType = DietType.MIXED
    non_veg_meals_per_week: float = 7.0
    appliances: ApplianceUsage = ApplianceUsage()
    shopping: ShoppingHabits = ShoppingHabits()
    waste: WasteHabits = WasteHabits()

    @field_validator("electricity", "electricity_cost", "lpg_cylinders", "weekly_distance")
    @classmethod
    def clamp_non_negative(cls, v: float) -> float:
        return _non_negative(v)

    @field_validator("non_veg_meals_per_week")
    @classmethod
    def clamp_meals(cls, v: float) -> float:
        return min(float(MEALS_PER_WEEK), _non_negative(v))


def merge_inputs(current: UserInputs, updates: dict[str, Any]) -> UserInputs:
    """Apply a partial update to a full ``UserInputs`` record.

    Nested sections (``appliances``, ``shopping``, ``waste``) are merged
    key-by-key, so ``{"waste": {"composting": True}}`` keeps the stored
    ``waste_per_week``. The merged dict is re-validated, which re-applies
    clamping.

    Args:
        current: The full record to start from.
        updates: Partial dict in the same shape as ``UserInputs.model_dump()``.

    Returns:
        A new, validated ``UserInputs``.

    Raises:
        ValueError: If ``updates`` names a field ``UserInputs`` does not have.
        pydantic.ValidationError: If a merged value has the wrong type or is
            not finite.
    """
    base = current.model_dump()
    _check_known_keys(base, updates, prefix="")
    return UserInputs.model_validate(_deep_merge(base, updates))


def _check_known_keys(base: dict[str, Any], updates: dict[str, Any], prefix: str) -> None:
    for key, val in updates.items():
        if key not in base:
            raise ValueError(f"Unknown input field '{prefix}{key}'.")
        if isinstance(val, dict):
            if not isinstance(base[key], dict):
                raise ValueError(f"Input field '{prefix}{key}' is not a section.")
            _check_known_keys(base[key], val, prefix=f"{prefix}{key}.")


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result
