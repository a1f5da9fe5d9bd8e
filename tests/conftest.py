"""
Shared pytest fixtures for the EcoBalance test suite.

Provides:
  - ``in_memory_db``: A fresh in-memory SQLite connection with the schema
    applied. Created anew for each test that requests it.
  - Sample ``UserInputs`` records used across test modules.
  - ``make_emissions``: factory for hand-built ``CalculatedEmissions`` so
    progress tests can pin an exact score / category value.
"""

from __future__ import annotations

import sqlite3
from typing import Callable, Generator

import pytest

from ecobalance.db.schema import apply_schema
from ecobalance.models.emissions import CalculatedEmissions, CostEstimate, EmissionsBreakdown
from ecobalance.models.inputs import ApplianceUsage, ShoppingHabits, UserInputs, WasteHabits
from ecobalance.taxonomy.lifestyle import DietType, EmissionLevel, TransportMode


# ── Database fixture ──────────────────────────────────────────────────────────

@pytest.fixture
def in_memory_db() -> Generator[sqlite3.Connection, None, None]:
    """Yield a fresh in-memory SQLite connection with the schema applied."""
    conn = sqlite3.connect(":memory:")
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON;")
    apply_schema(conn)
    yield conn
    conn.close()


# ── Sample inputs ─────────────────────────────────────────────────────────────

@pytest.fixture
def default_inputs() -> UserInputs:
    """Built-in defaults: 250 kWh, 1 cylinder, car 100 km/week, mixed diet (7 non-veg)."""
    return UserInputs()


@pytest.fixture
def green_inputs() -> UserInputs:
    """A very low-footprint household that walks and eats vegetarian.

    The stale ``non_veg_meals_per_week=14`` must be ignored.
    Monthly: energy 32.8, food 42.0, everything else 0 → total 74.8, score 85.
    """
    return UserInputs(
        electricity=40,
        electricity_cost=300,
        lpg_cylinders=0,
        transport_mode=TransportMode.WALKING,
        weekly_distance=0,
        diet_type=DietType.VEGETARIAN,
        non_veg_meals_per_week=14,
        appliances=ApplianceUsage(
            ac_hours_per_day=0,
            has_refrigerator=False,
            washing_machine_cycles_per_week=0,
            water_heater_minutes_per_day=0,
            tv_hours_per_day=0,
            microwave_uses_per_week=0,
            dishwasher_cycles_per_week=0,
        ),
        shopping=ShoppingHabits(
            clothing_items_per_month=0,
            electronics_per_year=0,
            online_orders_per_month=0,
        ),
        waste=WasteHabits(waste_per_week=0, recycling_percent=0, composting=False),
    )


@pytest.fixture
def heavy_inputs() -> UserInputs:
    """A household that triggers every conditional recommendation rule."""
    return UserInputs(
        electricity=350,
        lpg_cylinders=2,
        transport_mode=TransportMode.CAR,
        weekly_distance=200,
        diet_type=DietType.NON_VEGETARIAN,
        non_veg_meals_per_week=14,
        appliances=ApplianceUsage(ac_hours_per_day=6, water_heater_minutes_per_day=45),
        shopping=ShoppingHabits(clothing_items_per_month=6, online_orders_per_month=10),
        waste=WasteHabits(waste_per_week=8, recycling_percent=10, composting=False),
    )


# ── Emissions factory ─────────────────────────────────────────────────────────

@pytest.fixture
def make_emissions() -> Callable[..., CalculatedEmissions]:
    """Return a factory building ``CalculatedEmissions`` from monthly values."""

    def _make(
        score: int = 50,
        level: EmissionLevel = EmissionLevel.AVERAGE,
        energy: float = 100.0,
        transport: float = 50.0,
        food: float = 60.0,
        appliances: float = 30.0,
        shopping: float = 20.0,
        waste: float = 5.0,
    ) -> CalculatedEmissions:
        monthly = EmissionsBreakdown.from_categories(
            energy=energy,
            transport=transport,
            food=food,
            appliances=appliances,
            shopping=shopping,
            waste=waste,
        )
        return CalculatedEmissions(
            daily=monthly.scaled(30),
            weekly=monthly.scaled(4),
            monthly=monthly,
            score=score,
            level=level,
            cost_estimate=CostEstimate(monthly_cost=1000.0, potential_savings=200.0),
        )

    return _make
