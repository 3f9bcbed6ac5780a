"""Pydantic models for calculator results."""

from pydantic import BaseModel

from pace_calculator.models.distances import DistanceUnit, StandardDistance


class PaceResult(BaseModel):
    """Pace computed from a distance and an elapsed time."""

    distance_km: float
    distance_miles: float
    input_unit: DistanceUnit
    time_seconds: int
    time_text: str  # the time token as given, echoed in output
    seconds_per_km: float
    seconds_per_mile: float

    class Config:
        """Pydantic configuration."""

        use_enum_values = True


class RaceProjection(BaseModel):
    """Projected finish time for one standard race distance."""

    distance: StandardDistance
    seconds_per_km: float
    time_seconds: float

    @property
    def name(self) -> str:
        return self.distance.label

    @property
    def distance_km(self) -> float:
        return self.distance.km
