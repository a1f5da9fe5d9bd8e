"""
Lifestyle taxonomy for household footprint assessment.

Every enumerated choice a user can make on the input form, plus the
discrete buckets the engine classifies results into:

  - ``TransportMode``    — primary weekly commute mode.
  - ``DietType``         — broad diet pattern.
  - ``EmissionCategory`` — the six breakdown categories.
  - ``ImpactLevel``      — how much a recommendation is expected to help.
  - ``EmissionLevel``    — monthly-total classification (benchmark cutoffs).
  - ``ProgressLevel``    — score-band tier shown on the progress page.

Usage example::

    from ecobalance.taxonomy.lifestyle import TransportMode, DietType

    mode = TransportMode.PUBLIC_TRANSIT
    diet = DietType.VEGETARIAN

This module has NO imports from any other ``ecobalance`` package.
"""

from enum import StrEnum


class TransportMode(StrEnum):
    """Primary mode of weekly travel."""

    CAR = "car"
    """Petrol/diesel passenger car."""

    MOTORBIKE = "motorbike"
    """Two-wheeler with a combustion engine."""

    PUBLIC_TRANSIT = "public_transit"
    """Bus, metro, suburban rail."""

    ELECTRIC_VEHICLE = "electric_vehicle"
    """Battery electric car; emissions come from grid charging."""

    BICYCLE = "bicycle"
    """Zero-emission active travel."""

    WALKING = "walking"
    """Zero-emission active travel."""


class DietType(StrEnum):
    """Broad diet pattern. Vegetarians have no non-veg meals by definition."""

    VEGETARIAN = "vegetarian"
    MIXED = "mixed"
    NON_VEGETARIAN = "non_vegetarian"


class EmissionCategory(StrEnum):
    """The six categories every breakdown is split into."""

    ENERGY = "energy"
    TRANSPORT = "transport"
    FOOD = "food"
    APPLIANCES = "appliances"
    SHOPPING = "shopping"
    WASTE = "waste"


class ImpactLevel(StrEnum):
    """Expected impact of acting on a recommendation."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class EmissionLevel(StrEnum):
    """Monthly-total classification against fixed benchmark cutoffs."""

    EXCELLENT = "excellent"
    GOOD = "good"
    AVERAGE = "average"
    HIGH = "high"


class ProgressLevel(StrEnum):
    """Score-band tier, lowest to highest."""

    BEGINNER = "beginner"
    AWARE = "aware"
    CONSCIOUS = "conscious"
    HERO = "hero"


# Modes that never get "switch to public transport" advice.
ACTIVE_OR_SHARED_MODES: frozenset[TransportMode] = frozenset({
    TransportMode.PUBLIC_TRANSIT,
    TransportMode.WALKING,
    TransportMode.BICYCLE,
})
