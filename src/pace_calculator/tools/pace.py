"""MCP tools for pace calculations and race projections."""

import math
from typing import Any

from pace_calculator.converter import calculate_pace as compute_pace
from pace_calculator.converter import pace_per_km, project_races
from pace_calculator.errors import PaceInputError
from pace_calculator.utils.formatting import format_duration


def register_pace_tools(mcp):
    """Register pace-related MCP tools."""

    @mcp.tool()
    def calculate_pace(distance: str, time: str) -> dict[str, Any]:
        """
        Calculate running pace from a distance and a finish time.

        Args:
            distance: Distance such as "10k", "26.2m", "marathon" or "half"
            time: Time such as "1h05m10s", "45m", or "7:30" (minutes:seconds)

        Returns:
            Dictionary with distance in km and miles and pace per km and per mile
        """
        try:
            result = compute_pace(distance, time)
        except PaceInputError as e:
            return {"error": str(e)}

        return {
            "data": {
                "distance_km": round(result.distance_km, 3),
                "distance_miles": round(result.distance_miles, 3),
                "time_seconds": result.time_seconds,
                "seconds_per_km": result.seconds_per_km,
                "seconds_per_mile": result.seconds_per_mile,
                "pace_per_km": format_duration(result.seconds_per_km),
                "pace_per_mile": format_duration(result.seconds_per_mile),
            }
        }

    @mcp.tool()
    def project_race_times(pace: str) -> dict[str, Any]:
        """
        Project finish times for 50k, marathon, half marathon, 10k and 5k.

        Args:
            pace: Pace as minutes:seconds followed by 'k' (per km) or 'm' (per mile),
                  e.g. "4:30k" or "7:00m"

        Returns:
            Dictionary with the pace in seconds per km and one entry per race
        """
        try:
            seconds_per_km = pace_per_km(pace)
        except PaceInputError as e:
            return {"error": str(e)}

        races = [
            {
                "name": projection.name,
                "distance_km": projection.distance_km,
                "time_seconds": projection.time_seconds,
                "time": format_duration(projection.time_seconds),
            }
            for projection in project_races(seconds_per_km)
        ]
        return {"data": {"seconds_per_km": seconds_per_km, "races": races}}

    @mcp.tool()
    def format_seconds(seconds: float) -> dict[str, Any]:
        """
        Format a number of seconds the way the calculator prints times.

        Args:
            seconds: Non-negative number of seconds

        Returns:
            Dictionary containing the formatted string, e.g. "3h05m12s"
        """
        if not math.isfinite(seconds):
            return {"error": "seconds must be a finite number"}
        if seconds < 0:
            return {"error": "seconds must not be negative"}
        return {"data": format_duration(seconds)}
