"""Distance units and the fixed set of race distances."""

from enum import Enum


class DistanceUnit(str, Enum):
    """Unit a distance or pace token is expressed in."""

    MILES = "miles"
    KILOMETERS = "km"

    @classmethod
    def from_suffix(cls, suffix: str) -> "DistanceUnit":
        """Map a trailing token letter ('k' or 'm') to a unit."""
        if suffix == "k":
            return cls.KILOMETERS
        if suffix == "m":
            return cls.MILES
        raise ValueError(f"Unknown unit suffix: {suffix!r}")

    def __str__(self) -> str:
        return self.value


class StandardDistance(Enum):
    """Race distances shown in the projection table, in display order."""

    FIFTY_K = ("50k", 50.0)
    MARATHON = ("Marathon", 42.2)
    HALF_MARATHON = ("Half-Marathon", 21.1)
    TEN_K = ("10k", 10.0)
    FIVE_K = ("5k", 5.0)

    def __init__(self, label: str, km: float):
        self.label = label
        self.km = km
