#!/usr/bin/env python3
"""
Running pace calculator.

Two modes, picked by the number of arguments:

    pace 4:30k          pace mode: projected times for standard races
    pace 10k 45m        distance mode: pace per km and per mile
"""

import argparse
from typing import Optional

from loguru import logger

from pace_calculator.config import load_settings
from pace_calculator.converter import calculate_pace, pace_per_km, project_races
from pace_calculator.errors import PaceInputError
from pace_calculator.logger import setup_logger
from pace_calculator.utils.formatting import (
    DEFAULT_NAME_WIDTH,
    format_distance_report,
    format_race_table,
)

USAGE = """\
pace has two modes: pace and distance.
DISTANCE MODE: `pace 10k 1h`
Usage: pace [distance] [time]
distance:
\tnumber followed by 'k' for kilometers, e.g. 10k
\tnumber followed by 'm' for miles, e.g. 26.2m
\tspecial word 'marathon' or 'half'
time:
\tnumber followed by 'h' for hours
\tnumber followed by 'm' for minutes
\thh:mm format, e.g. 3:30
PACE MODE: `pace 4:30k`
Usage: pace [pace]
pace:
\tmin:secs followed by 'k' for per kilometer, e.g. 5:30k
\tmins:secs followed by 'm' for per mile, e.g. 7:00m"""


def usage() -> None:
    """Print the two-mode usage text."""
    print(USAGE)


def do_pace(pace: str, name_width: int = DEFAULT_NAME_WIDTH) -> None:
    """Print projected race times for a pace token such as '4:30k'."""
    seconds_per_km = pace_per_km(pace)
    for line in format_race_table(project_races(seconds_per_km), name_width):
        print(line)


def do_distance(
    distance: str, time: str, races: bool = False, name_width: int = DEFAULT_NAME_WIDTH
) -> None:
    """Print pace per km and per mile for a distance covered in a time."""
    result = calculate_pace(distance, time)
    for line in format_distance_report(result):
        print(line)

    if races:
        for line in format_race_table(project_races(result.seconds_per_km), name_width):
            print(line)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the pace command."""
    parser = argparse.ArgumentParser(
        prog="pace",
        description="Convert between running pace, time and distance",
    )
    parser.add_argument(
        "args",
        nargs="*",
        metavar="ARG",
        help="Either a pace (e.g. 4:30k) or a distance and a time (e.g. 10k 45m)",
    )
    parser.add_argument(
        "--races",
        action="store_true",
        help="In distance mode, also show projected race times at the computed pace",
    )
    parser.add_argument(
        "--env-file",
        help="Path to .env file with calculator settings",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main function for the pace command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings(args.env_file)
    setup_logger("DEBUG" if args.verbose else settings.log_level)

    try:
        if len(args.args) == 1:
            do_pace(args.args[0], settings.name_width)
        elif len(args.args) == 2:
            do_distance(args.args[0], args.args[1], args.races, settings.name_width)
        else:
            usage()
    except PaceInputError as e:
        logger.info(f"Rejected input {e.token!r}: {type(e).__name__}")
        print(e)
        return 1

    return 0


if __name__ == "__main__":
    exit(main())
