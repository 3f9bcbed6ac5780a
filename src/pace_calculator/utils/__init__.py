"""Parsing and formatting helpers for the pace calculator."""

from pace_calculator.utils.formatting import (
    format_distance_report,
    format_duration,
    format_race_table,
)
from pace_calculator.utils.parsing import (
    expand_distance_alias,
    parse_distance,
    parse_pace,
    parse_time,
    split_unit,
)

__all__ = [
    "format_duration",
    "format_distance_report",
    "format_race_table",
    "parse_time",
    "expand_distance_alias",
    "split_unit",
    "parse_distance",
    "parse_pace",
]
