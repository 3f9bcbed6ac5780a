"""
Unit conversions, pace calculation and race time projection.

All pace arithmetic is done in seconds per kilometer. Distance mode and pace
mode each have their own miles constant; they are kept apart so both modes
reproduce their established outputs.
"""

import math

from loguru import logger

from pace_calculator.errors import InvalidNumberError
from pace_calculator.models.distances import DistanceUnit, StandardDistance
from pace_calculator.models.results import PaceResult, RaceProjection
from pace_calculator.utils.parsing import parse_distance, parse_pace, parse_time

# Distance mode
KM_TO_MILES = 0.62137119
MILES_TO_KM = 1.609

# Pace mode: seconds per mile -> seconds per km
MILE_PACE_TO_KM_PACE = 0.62137119223733

OUT_OF_RANGE = "values small enough to calculate with"


def _require_finite(token: str, *values: float) -> None:
    if not all(math.isfinite(value) for value in values):
        raise InvalidNumberError(token, token, OUT_OF_RANGE)


def km_to_miles(km: float) -> float:
    """Convert kilometers to miles (distance mode)."""
    return km * KM_TO_MILES


def miles_to_km(miles: float) -> float:
    """Convert miles to kilometers (distance mode)."""
    return miles * MILES_TO_KM


def convert_to_per_km(per_mile: float) -> float:
    """Convert a pace in seconds per mile to seconds per kilometer."""
    return per_mile * MILE_PACE_TO_KM_PACE


def distance_pair(value: float, unit: DistanceUnit) -> tuple[float, float]:
    """Return (km, miles) for a distance given in either unit."""
    if unit == DistanceUnit.MILES:
        return miles_to_km(value), value
    return value, km_to_miles(value)


def calculate_pace(distance: str, time: str) -> PaceResult:
    """
    Compute pace per kilometer and per mile from a distance and a time.

    Args:
        distance: Distance token, e.g. "10k", "26.2m", "marathon"
        time: Time token, e.g. "1h05m10s" or "45:00"

    Returns:
        PaceResult with both distances and both paces
    """
    value, unit = parse_distance(distance)
    dist_km, dist_miles = distance_pair(value, unit)
    seconds = parse_time(time)
    per_km = seconds / dist_km
    per_mile = seconds / dist_miles
    _require_finite(f"{distance} {time}", dist_km, dist_miles, per_km, per_mile)

    result = PaceResult(
        distance_km=dist_km,
        distance_miles=dist_miles,
        input_unit=unit,
        time_seconds=seconds,
        time_text=time,
        seconds_per_km=per_km,
        seconds_per_mile=per_mile,
    )
    logger.debug(
        f"{dist_km:.3f} km in {seconds}s: {result.seconds_per_km:.2f}s/km, "
        f"{result.seconds_per_mile:.2f}s/mile"
    )
    return result


def pace_per_km(pace: str) -> float:
    """Parse a pace token and return seconds per kilometer."""
    seconds, unit = parse_pace(pace)
    per_km = convert_to_per_km(seconds) if unit == DistanceUnit.MILES else float(seconds)
    # the longest race must still have a finite finish time
    _require_finite(pace, max(distance.km for distance in StandardDistance) * per_km)
    return per_km


def get_race_times(seconds_per_km: float) -> dict[StandardDistance, float]:
    """Projected finish time in seconds for every standard distance."""
    return {distance: distance.km * seconds_per_km for distance in StandardDistance}


def project_races(seconds_per_km: float) -> list[RaceProjection]:
    """Projected finish times in display order (50k first, 5k last)."""
    times = get_race_times(seconds_per_km)
    return [
        RaceProjection(distance=distance, seconds_per_km=seconds_per_km, time_seconds=times[distance])
        for distance in StandardDistance
    ]
