"""Pydantic models and enums for the pace calculator."""

from pace_calculator.models.distances import DistanceUnit, StandardDistance
from pace_calculator.models.results import PaceResult, RaceProjection

__all__ = [
    # Units and distances
    "DistanceUnit",
    "StandardDistance",
    # Results
    "PaceResult",
    "RaceProjection",
]
