"""
EcoBalance — household carbon footprint engine.

Public engine API (all pure functions)::

    from ecobalance import UserInputs, calculate_emissions
    from ecobalance import generate_recommendations, calculate_progress

    inputs = UserInputs(electricity=180, transport_mode="public_transit")
    emissions = calculate_emissions(inputs)
    recs = generate_recommendations(inputs, emissions)
    progress = calculate_progress(emissions)

``run_assessment()`` runs all three in order.
"""

from ecobalance.assessment import Assessment, run_assessment
from ecobalance.emissions.calculator import calculate_emissions
from ecobalance.models.inputs import UserInputs, merge_inputs
from ecobalance.progress.evaluator import calculate_progress
from ecobalance.recommendations.generator import generate_recommendations

__version__ = "0.1.0"

__all__ = [
    "Assessment",
    "UserInputs",
    "calculate_emissions",
    "calculate_progress",
    "generate_recommendations",
    "merge_inputs",
    "run_assessment",
]
