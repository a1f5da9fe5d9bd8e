"""
Emissions calculator: converts a ``UserInputs`` record into a
``CalculatedEmissions`` record.

Category formulas (monthly basis)
---------------------------------
energy      = kWh × 0.82 + cylinders × 14.2 kg × 2.98
transport   = km/week × 4 × mode_factor
food        = (non_veg × 2.5 + (21 − non_veg) × 0.5) × 4
              non_veg is 0 for vegetarians regardless of the stored count
appliances  = (daily × 7 + weekly_cycles) × 4
              daily  = AC h × f + fridge 24 h × f + TV h × f + heater min/60 × f
              weekly = washer × f + microwave × f + dishwasher × f
shopping    = clothing × f + electronics/12 × f + orders × f
waste       = (landfill × f + recycled × f + composted × f) × 4
              recycled  = kg × recycling% / 100
              composted = kg × 0.2 when composting (pre-recycling amount)
              landfill  = max(0, kg − recycled − composted)

Aggregation
-----------
weekly = monthly / 4 and daily = monthly / 30 for every category and the
total. Score = clamp(round((1 − total / 500) × 100), 0, 100). Level is the
first benchmark cutoff the monthly total does not exceed.

Every function here is pure: no I/O, no shared state, bounded time.
"""

from __future__ import annotations

import logging
import math

from ecobalance.emissions import factors as f
from ecobalance.models.emissions import CalculatedEmissions, CostEstimate, EmissionsBreakdown
from ecobalance.models.inputs import MEALS_PER_WEEK, UserInputs
from ecobalance.taxonomy.lifestyle import DietType, EmissionLevel

logger = logging.getLogger(__name__)


def calculate_emissions(inputs: UserInputs) -> CalculatedEmissions:
    """Compute the full emissions record for one set of inputs.

    Args:
        inputs: Full, validated ``UserInputs``.

    Returns:
        ``CalculatedEmissions`` with daily/weekly/monthly breakdowns, score,
        level and cost estimate. Never raises for a valid ``UserInputs``.
    """
    monthly = EmissionsBreakdown.from_categories(
        energy=energy_monthly(inputs),
        transport=transport_monthly(inputs),
        food=food_weekly(inputs) * f.WEEKS_PER_MONTH,
        appliances=appliances_weekly(inputs) * f.WEEKS_PER_MONTH,
        shopping=shopping_monthly(inputs),
        waste=waste_weekly(inputs) * f.WEEKS_PER_MONTH,
    )

    result = CalculatedEmissions(
        daily=monthly.scaled(f.DAYS_PER_MONTH),
        weekly=monthly.scaled(f.WEEKS_PER_MONTH),
        monthly=monthly,
        score=score_from_total(monthly.total),
        level=classify_level(monthly.total),
        cost_estimate=estimate_cost(inputs),
    )
    logger.debug(
        "Emissions: monthly_total=%.2f score=%d level=%s",
        monthly.total, result.score, result.level,
    )
    return result


# ── Category helpers ──────────────────────────────────────────────────────────

def energy_monthly(inputs: UserInputs) -> float:
    electricity = inputs.electricity * f.ELECTRICITY_KG_PER_KWH
    lpg = inputs.lpg_cylinders * f.LPG_KG_PER_CYLINDER * f.LPG_KG_CO2E_PER_KG
    return electricity + lpg


def transport_monthly(inputs: UserInputs) -> float:
    return inputs.weekly_distance * f.WEEKS_PER_MONTH * f.TRANSPORT_KG_PER_KM[inputs.transport_mode]


def effective_non_veg_meals(inputs: UserInputs) -> float:
    """Non-veg meals per week that actually count.

    The stored ``non_veg_meals_per_week`` is inert for vegetarians.
    """
    if inputs.diet_type == DietType.VEGETARIAN:
        return 0.0
    return inputs.non_veg_meals_per_week


def food_weekly(inputs: UserInputs) -> float:
    non_veg = effective_non_veg_meals(inputs)
    veg = MEALS_PER_WEEK - non_veg
    return non_veg * f.NON_VEG_MEAL_KG + veg * f.VEG_MEAL_KG


def water_heater_daily(inputs: UserInputs) -> float:
    return inputs.appliances.water_heater_minutes_per_day / 60.0 * f.WATER_HEATER_KG_PER_HOUR


def appliances_daily(inputs: UserInputs) -> float:
    a = inputs.appliances
    fridge = f.FRIDGE_HOURS_PER_DAY * f.FRIDGE_KG_PER_HOUR if a.has_refrigerator else 0.0
    return (
        a.ac_hours_per_day * f.AC_KG_PER_HOUR
        + fridge
        + a.tv_hours_per_day * f.TV_KG_PER_HOUR
        + water_heater_daily(inputs)
    )


def appliances_weekly(inputs: UserInputs) -> float:
    a = inputs.appliances
    return (
        appliances_daily(inputs) * f.DAYS_PER_WEEK
        + a.washing_machine_cycles_per_week * f.WASHING_MACHINE_KG_PER_CYCLE
        + a.microwave_uses_per_week * f.MICROWAVE_KG_PER_USE
        + a.dishwasher_cycles_per_week * f.DISHWASHER_KG_PER_CYCLE
    )


def shopping_monthly(inputs: UserInputs) -> float:
    s = inputs.shopping
    return (
        s.clothing_items_per_month * f.CLOTHING_KG_PER_ITEM
        + s.electronics_per_year / f.MONTHS_PER_YEAR * f.ELECTRONICS_KG_PER_DEVICE
        + s.online_orders_per_month * f.ONLINE_ORDER_KG_PER_PACKAGE
    )


def waste_streams(inputs: UserInputs) -> tuple[float, float, float]:
    """Split weekly waste into ``(landfill, recycled, composted)`` kg.

    Compost is taken from the pre-recycling amount, so recycled + composted
    can exceed the total; landfill is clamped at zero in that case.
    """
    w = inputs.waste
    recycled = w.waste_per_week * w.recycling_percent / 100.0
    composted = w.waste_per_week * f.COMPOST_SHARE if w.composting else 0.0
    landfill = max(0.0, w.waste_per_week - recycled - composted)
    return landfill, recycled, composted


def waste_weekly(inputs: UserInputs) -> float:
    landfill, recycled, composted = waste_streams(inputs)
    return (
        landfill * f.LANDFILL_KG_PER_KG
        + recycled * f.RECYCLED_KG_PER_KG
        + composted * f.COMPOSTED_KG_PER_KG
    )


# ── Score, level, cost ────────────────────────────────────────────────────────

def score_from_total(monthly_total: float) -> int:
    """Map a monthly total to a 0–100 score (higher is better)."""
    # A sum of huge finite inputs can overflow to inf.
    if not math.isfinite(monthly_total):
        return 0
    # Round half up.
    raw = math.floor((1.0 - monthly_total / f.HIGH_THRESHOLD) * 100.0 + 0.5)
    return int(max(0, min(100, raw)))


def classify_level(monthly_total: float) -> EmissionLevel:
    for cutoff, level in f.LEVEL_CUTOFFS:
        if monthly_total <= cutoff:
            return level
    return EmissionLevel.HIGH


def estimate_cost(inputs: UserInputs) -> CostEstimate:
    monthly_cost = inputs.electricity_cost + inputs.lpg_cylinders * f.LPG_CYLINDER_PRICE
    return CostEstimate(
        monthly_cost=monthly_cost,
        potential_savings=monthly_cost * f.POTENTIAL_SAVINGS_RATE,
    )
