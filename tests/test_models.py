"""Tests for units, standard distances and result models."""

import pytest

from pace_calculator.models import DistanceUnit, RaceProjection, StandardDistance


def test_distance_unit_from_suffix():
    assert DistanceUnit.from_suffix("k") is DistanceUnit.KILOMETERS
    assert DistanceUnit.from_suffix("m") is DistanceUnit.MILES
    with pytest.raises(ValueError):
        DistanceUnit.from_suffix("x")


def test_distance_unit_display():
    assert str(DistanceUnit.KILOMETERS) == "km"
    assert str(DistanceUnit.MILES) == "miles"


def test_exactly_five_standard_distances():
    assert len(StandardDistance) == 5
    assert StandardDistance.MARATHON.km == 42.2
    assert StandardDistance.HALF_MARATHON.label == "Half-Marathon"


def test_race_projection_properties():
    projection = RaceProjection(
        distance=StandardDistance.FIVE_K, seconds_per_km=240.0, time_seconds=1200.0
    )

    assert projection.name == "5k"
    assert projection.distance_km == 5.0
