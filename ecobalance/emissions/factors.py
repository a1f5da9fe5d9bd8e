"""
Fixed emission factors and benchmarks (kg CO2e per unit of activity).

These are illustrative constants, not a regulatory factor database. The
electricity factor is the Indian grid average; everything else is a round
figure in the range published by common household calculators.

All constants are module-level and immutable so the calculator stays a pure
function of its inputs.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ecobalance.taxonomy.lifestyle import EmissionLevel, TransportMode

# ── Energy ────────────────────────────────────────────────────────────────────
ELECTRICITY_KG_PER_KWH = 0.82
LPG_KG_CO2E_PER_KG = 2.98
LPG_KG_PER_CYLINDER = 14.2
LPG_CYLINDER_PRICE = 900.0        # currency units per refill

# ── Transport (per km) ────────────────────────────────────────────────────────
TRANSPORT_KG_PER_KM: Mapping[TransportMode, float] = MappingProxyType({
    TransportMode.CAR:              0.21,
    TransportMode.MOTORBIKE:        0.05,
    TransportMode.PUBLIC_TRANSIT:   0.089,
    TransportMode.ELECTRIC_VEHICLE: 0.053,
    TransportMode.BICYCLE:          0.0,
    TransportMode.WALKING:          0.0,
})

# ── Food (per meal) ───────────────────────────────────────────────────────────
VEG_MEAL_KG = 0.5
NON_VEG_MEAL_KG = 2.5

# ── Appliances ────────────────────────────────────────────────────────────────
AC_KG_PER_HOUR = 1.23
FRIDGE_KG_PER_HOUR = 0.04
FRIDGE_HOURS_PER_DAY = 24
TV_KG_PER_HOUR = 0.08
WATER_HEATER_KG_PER_HOUR = 1.64
WASHING_MACHINE_KG_PER_CYCLE = 0.6
MICROWAVE_KG_PER_USE = 0.05
DISHWASHER_KG_PER_CYCLE = 1.0

# ── Shopping ──────────────────────────────────────────────────────────────────
CLOTHING_KG_PER_ITEM = 10.0
ELECTRONICS_KG_PER_DEVICE = 70.0
ONLINE_ORDER_KG_PER_PACKAGE = 0.5

# ── Waste (per kg of waste) ───────────────────────────────────────────────────
LANDFILL_KG_PER_KG = 0.5
RECYCLED_KG_PER_KG = 0.1
COMPOSTED_KG_PER_KG = 0.05
COMPOST_SHARE = 0.2               # of the pre-recycling weekly amount

# ── Horizons ──────────────────────────────────────────────────────────────────
WEEKS_PER_MONTH = 4
DAYS_PER_MONTH = 30
DAYS_PER_WEEK = 7
MONTHS_PER_YEAR = 12

# ── Benchmarks (monthly kg CO2e) ──────────────────────────────────────────────
# Upper bounds, checked in ascending order; first match wins.
LEVEL_CUTOFFS: tuple[tuple[float, EmissionLevel], ...] = (
    (100.0, EmissionLevel.EXCELLENT),
    (200.0, EmissionLevel.GOOD),
    (350.0, EmissionLevel.AVERAGE),
)
HIGH_THRESHOLD = 500.0            # monthly total at which score reaches 0

POTENTIAL_SAVINGS_RATE = 0.20
