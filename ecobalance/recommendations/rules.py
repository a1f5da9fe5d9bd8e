"""
Recommendation rule catalog.

Each ``RecommendationRule`` pairs a predicate with a factory. The catalog is
an ordered tuple: the generator evaluates rules in this order and keeps
every match in this order. Order is priority: put the rule you most want
users to see first.

Savings
-------
Most rules carry a flat monthly ``savings_kg`` estimate. Rules whose benefit
scales with the user's own behaviour compute it from the relevant slice of
their emissions instead (carpooling saves 40% of *their* transport
emissions, not a fixed amount).

Diet rules read ``effective_non_veg_meals()``, never the raw field, so a
vegetarian with a stale non-veg meal count gets no meat-related advice.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from ecobalance.emissions import factors as f
from ecobalance.emissions.calculator import effective_non_veg_meals, water_heater_daily
from ecobalance.models.emissions import CalculatedEmissions
from ecobalance.models.inputs import UserInputs
from ecobalance.models.recommendation import Recommendation
from ecobalance.taxonomy.lifestyle import (
    ACTIVE_OR_SHARED_MODES,
    DietType,
    EmissionCategory,
    ImpactLevel,
    TransportMode,
)

Predicate = Callable[[UserInputs, CalculatedEmissions], bool]
SavingsFn = Callable[[UserInputs, CalculatedEmissions], float]


@dataclass(frozen=True)
class RecommendationRule:
    """One conditional tip in the catalog.

    Attributes:
        id:            Stable identifier, copied to ``Recommendation.id``.
        category:      Emission category the tip addresses.
        title:         Headline.
        description:   Explanation shown under the headline.
        impact:        Expected impact bucket.
        predicate:     Returns True when the tip applies.
        savings_kg:    Monthly kg CO2e avoided, from inputs and emissions.
        savings_money: Flat monthly money saved, or None.
    """

    id:            str
    category:      EmissionCategory
    title:         str
    description:   str
    impact:        ImpactLevel
    predicate:     Predicate
    savings_kg:    SavingsFn
    savings_money: Optional[float] = None

    def applies(self, inputs: UserInputs, emissions: CalculatedEmissions) -> bool:
        return self.predicate(inputs, emissions)

    def build(self, inputs: UserInputs, emissions: CalculatedEmissions) -> Recommendation:
        return Recommendation(
            id=self.id,
            category=self.category,
            title=self.title,
            description=self.description,
            impact=self.impact,
            savings_kg=round(max(0.0, self.savings_kg(inputs, emissions)), 2),
            savings_money=self.savings_money,
        )


def _flat(kg: float) -> SavingsFn:
    return lambda inputs, emissions: kg


def _always(inputs: UserInputs, emissions: CalculatedEmissions) -> bool:
    return True


# ── Savings helpers ───────────────────────────────────────────────────────────

def _heater_monthly(inputs: UserInputs) -> float:
    return water_heater_daily(inputs) * f.DAYS_PER_WEEK * f.WEEKS_PER_MONTH


def _clothing_monthly(inputs: UserInputs) -> float:
    return inputs.shopping.clothing_items_per_month * f.CLOTHING_KG_PER_ITEM


def _orders_monthly(inputs: UserInputs) -> float:
    return inputs.shopping.online_orders_per_month * f.ONLINE_ORDER_KG_PER_PACKAGE


# ── Catalog ───────────────────────────────────────────────────────────────────

RULES: tuple[RecommendationRule, ...] = (
    RecommendationRule(
        id="energy-led",
        category=EmissionCategory.ENERGY,
        title="Switch to LED lighting",
        description=(
            "LED bulbs use 75% less energy than incandescent bulbs. "
            "A small change that adds up over time."
        ),
        impact=ImpactLevel.MEDIUM,
        predicate=lambda i, e: i.electricity > 200,
        savings_kg=_flat(15.0),
        savings_money=200.0,
    ),
    RecommendationRule(
        id="energy-ac",
        category=EmissionCategory.ENERGY,
        title="Optimize AC usage",
        description=(
            "Setting your AC to 24°C instead of 20°C can reduce its energy use "
            "by 24%. Your comfort, less carbon."
        ),
        impact=ImpactLevel.HIGH,
        predicate=lambda i, e: i.electricity > 300,
        savings_kg=_flat(40.0),
        savings_money=500.0,
    ),
    RecommendationRule(
        id="transport-carpool",
        category=EmissionCategory.TRANSPORT,
        title="Try carpooling twice a week",
        description=(
            "Sharing rides just 2 days a week can cut your transport emissions "
            "by 40%. Plus, it's social!"
        ),
        impact=ImpactLevel.HIGH,
        predicate=lambda i, e: i.transport_mode == TransportMode.CAR and i.weekly_distance > 50,
        savings_kg=lambda i, e: e.monthly.transport * 0.4,
        savings_money=1000.0,
    ),
    RecommendationRule(
        id="transport-public",
        category=EmissionCategory.TRANSPORT,
        title="Public transport for short trips",
        description=(
            "Using metro or bus for trips under 10 km can significantly reduce "
            "your carbon footprint."
        ),
        impact=ImpactLevel.MEDIUM,
        predicate=lambda i, e: i.transport_mode not in ACTIVE_OR_SHARED_MODES,
        savings_kg=_flat(20.0),
        savings_money=500.0,
    ),
    RecommendationRule(
        id="food-meatless",
        category=EmissionCategory.FOOD,
        title="Try Meatless Mondays",
        description=(
            "Going vegetarian just one day a week reduces your food carbon "
            "footprint by 14%. Delicious and sustainable!"
        ),
        impact=ImpactLevel.MEDIUM,
        predicate=lambda i, e: effective_non_veg_meals(i) > 7,
        savings_kg=lambda i, e: e.monthly.food * 0.14,
    ),
    RecommendationRule(
        id="food-swap",
        category=EmissionCategory.FOOD,
        title="Swap beef for chicken",
        description="Chicken produces 5x less CO2 than beef. A simple swap for a big impact.",
        impact=ImpactLevel.HIGH,
        predicate=lambda i, e: i.diet_type == DietType.NON_VEGETARIAN,
        savings_kg=_flat(25.0),
    ),
    RecommendationRule(
        id="appliances-water-heater",
        category=EmissionCategory.APPLIANCES,
        title="Cut water-heater time",
        description=(
            "Heat water only when you need it and keep showers short. "
            "A timer or a solar heater takes most of the load off the grid."
        ),
        impact=ImpactLevel.MEDIUM,
        predicate=lambda i, e: i.appliances.water_heater_minutes_per_day > 30,
        savings_kg=lambda i, e: _heater_monthly(i) * 0.3,
        savings_money=300.0,
    ),
    RecommendationRule(
        id="shopping-clothing",
        category=EmissionCategory.SHOPPING,
        title="Buy fewer, better clothes",
        description=(
            "Each new garment carries around 10 kg of CO2e. Choosing durable or "
            "second-hand pieces halves your clothing footprint."
        ),
        impact=ImpactLevel.MEDIUM,
        predicate=lambda i, e: i.shopping.clothing_items_per_month > 4,
        savings_kg=lambda i, e: _clothing_monthly(i) * 0.5,
        savings_money=1500.0,
    ),
    RecommendationRule(
        id="shopping-deliveries",
        category=EmissionCategory.SHOPPING,
        title="Bundle your online orders",
        description=(
            "Grouping purchases into one weekly delivery cuts packaging and "
            "last-mile trips."
        ),
        impact=ImpactLevel.LOW,
        predicate=lambda i, e: i.shopping.online_orders_per_month > 8,
        savings_kg=lambda i, e: _orders_monthly(i) * 0.3,
    ),
    RecommendationRule(
        id="waste-recycling",
        category=EmissionCategory.WASTE,
        title="Recycle more of your waste",
        description=(
            "Separating paper, plastic, glass and metal keeps them out of "
            "landfill, where waste emits five times more."
        ),
        impact=ImpactLevel.MEDIUM,
        predicate=lambda i, e: i.waste.waste_per_week > 0 and i.waste.recycling_percent < 50,
        savings_kg=lambda i, e: e.monthly.waste * 0.3,
    ),
    RecommendationRule(
        id="waste-composting",
        category=EmissionCategory.WASTE,
        title="Start composting kitchen scraps",
        description=(
            "About a fifth of household waste is organic. Composting it at home "
            "avoids landfill methane and feeds your plants."
        ),
        impact=ImpactLevel.LOW,
        predicate=lambda i, e: not i.waste.composting and i.waste.waste_per_week > 3,
        savings_kg=_flat(6.0),
    ),
)

CATCH_ALL_RULE = RecommendationRule(
    id="general-unplug",
    category=EmissionCategory.ENERGY,
    title="Unplug idle electronics",
    description=(
        "Electronics on standby can account for 10% of home energy use. "
        "Unplug when not in use."
    ),
    impact=ImpactLevel.LOW,
    predicate=_always,
    savings_kg=_flat(8.0),
    savings_money=100.0,
)


def rule_ids() -> list[str]:
    """Catalog order of rule ids, catch-all last."""
    return [r.id for r in RULES] + [CATCH_ALL_RULE.id]


def get_rule(rule_id: str) -> RecommendationRule:
    """Look up a catalog rule by id.

    Raises:
        KeyError: If no rule has that id.
    """
    for rule in (*RULES, CATCH_ALL_RULE):
        if rule.id == rule_id:
            return rule
    raise KeyError(f"Unknown recommendation rule '{rule_id}'.")
