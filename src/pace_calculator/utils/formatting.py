"""Formatting utilities for durations, paces and race tables."""

import math

from pace_calculator.models.results import PaceResult, RaceProjection

DEFAULT_NAME_WIDTH = 15


def format_duration(seconds: float) -> str:
    """
    Convert seconds to a compact string such as '3h05m12s', '7m30s' or '01s'.

    Minutes are zero-padded only after an hours part; seconds are always
    two digits. Fractions of a second are dropped. Zero gives ''.
    """
    out = ""
    rest = seconds
    hours = 0
    if rest >= 3600:
        hours = math.floor(rest / 3600)
        out += f"{hours}h"
        rest -= hours * 3600

    minutes = math.floor(rest / 60)
    if hours >= 1 or minutes >= 1:
        if hours >= 1:
            out += f"{minutes:02d}m"
        else:
            out += f"{minutes}m"
        rest -= minutes * 60

    if rest >= 1:
        out += f"{math.floor(rest):02d}s"
    return out


def format_distance_report(result: PaceResult) -> list[str]:
    """Render a distance-mode result as output lines."""
    return [
        f"{result.distance_km:.2f} km / {result.distance_miles:.2f} miles in {result.time_text}:",
        f"\t{format_duration(result.seconds_per_km)} / km",
        f"\t{format_duration(result.seconds_per_mile)} / mile",
    ]


def format_race_table(
    projections: list[RaceProjection], name_width: int = DEFAULT_NAME_WIDTH
) -> list[str]:
    """Render projected race times as output lines, one per distance."""
    lines = ["At that pace:"]
    for projection in projections:
        lines.append(f"\t{projection.name:<{name_width}}{format_duration(projection.time_seconds)}")
    return lines
