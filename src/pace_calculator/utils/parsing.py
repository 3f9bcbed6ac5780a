"""
Parsing of the human-friendly tokens accepted on the command line.

Times look like ``1h05m10s`` (every part optional, trailing ``s`` optional)
or ``7:30`` (minutes:seconds). Distances are a decimal number followed by a
unit letter, ``k`` or ``m``, or one of the words ``marathon`` and ``half``.
Paces are a time followed by a unit letter, e.g. ``4:30k`` or ``7:00m``.
"""

import math
import re

from loguru import logger

from pace_calculator.errors import InvalidNumberError, InvalidUnitError, TimeFormatError
from pace_calculator.models.distances import DistanceUnit

DISTANCE_ALIASES = {
    "marathon": "42.2k",
    "half": "21.1k",
}

TIME_GRAMMAR = "a time such as 1h05m10s or 7:30"
TIME_RANGE = "a time small enough to calculate with"
DISTANCE_GRAMMAR = "a distance such as 10k, 26.2m, marathon or half"

_INTEGER_RE = re.compile(r"[0-9]+")
_DECIMAL_RE = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")


def _parse_int(segment: str, token: str, expected: str) -> int:
    if not _INTEGER_RE.fullmatch(segment):
        raise InvalidNumberError(token, segment, expected)
    try:
        return int(segment)
    except ValueError as err:
        raise InvalidNumberError(token, segment, expected) from err


def _check_range(total: int, token: str) -> int:
    try:
        float(total)
    except OverflowError as err:
        raise InvalidNumberError(token, token, TIME_RANGE) from err
    return total


def parse_time(token: str) -> int:
    """
    Parse a duration token into a whole number of seconds.

    Args:
        token: Duration such as "1h05m10s", "10m", "45", or "7:30"

    Returns:
        Total seconds

    Raises:
        TimeFormatError: Colon form without exactly two parts
        InvalidNumberError: A segment is not a non-negative integer
    """
    if ":" in token:
        parts = token.split(":")
        if len(parts) != 2:
            raise TimeFormatError(token)
        minutes = _parse_int(parts[0], token, "minutes in mm:ss")
        seconds = _parse_int(parts[1], token, "seconds in mm:ss")
        return _check_range(minutes * 60 + seconds, token)

    if not token:
        raise InvalidNumberError(token, token, TIME_GRAMMAR)

    total = 0
    rest = token
    if "h" in rest:
        hours, _, rest = rest.partition("h")
        total += _parse_int(hours, token, "whole hours before 'h'") * 3600
    if "m" in rest:
        minutes, _, rest = rest.partition("m")
        total += _parse_int(minutes, token, "whole minutes before 'm'") * 60
    if "s" in rest:
        rest, _, trailing = rest.partition("s")
        if trailing:
            raise InvalidNumberError(token, trailing, "nothing after the trailing 's'")
    if rest:
        total += _parse_int(rest, token, "whole seconds")

    logger.debug(f"Parsed time {token!r} as {total}s")
    return _check_range(total, token)


def expand_distance_alias(token: str) -> str:
    """Replace 'marathon' and 'half' by their kilometer distances."""
    return DISTANCE_ALIASES.get(token, token)


def split_unit(token: str, kind: str = "distance") -> tuple[str, DistanceUnit]:
    """
    Split a token into its numeric prefix and trailing unit letter.

    Args:
        token: Token ending in 'k' or 'm'
        kind: What the token describes, used in the error message

    Returns:
        Tuple of (prefix, unit)

    Raises:
        InvalidUnitError: The last character is not 'k' or 'm'
    """
    try:
        unit = DistanceUnit.from_suffix(token[-1:])
    except ValueError as err:
        raise InvalidUnitError(token, kind) from err
    return token[:-1], unit


def parse_distance(token: str) -> tuple[float, DistanceUnit]:
    """
    Parse a distance token.

    Args:
        token: Distance such as "10k", "26.2m", "marathon" or "half"

    Returns:
        Tuple of (distance in the token's unit, unit)
    """
    expanded = expand_distance_alias(token)
    prefix, unit = split_unit(expanded, "distance")
    if not _DECIMAL_RE.fullmatch(prefix):
        raise InvalidNumberError(token, prefix, DISTANCE_GRAMMAR)
    value = float(prefix)
    if not math.isfinite(value):
        raise InvalidNumberError(token, prefix, "a distance small enough to calculate with")
    if value <= 0:
        raise InvalidNumberError(token, prefix, "a distance greater than zero")

    logger.debug(f"Parsed distance {token!r} as {value} {unit}")
    return value, unit


def parse_pace(token: str) -> tuple[int, DistanceUnit]:
    """
    Parse a pace token.

    Args:
        token: Pace such as "4:30k" (per kilometer) or "7:00m" (per mile)

    Returns:
        Tuple of (seconds per unit, unit)
    """
    prefix, unit = split_unit(token, "pace")
    try:
        seconds = parse_time(prefix)
    except InvalidNumberError as err:
        raise InvalidNumberError(token, err.segment, err.expected) from err
    except TimeFormatError as err:
        raise TimeFormatError(token) from err
    logger.debug(f"Parsed pace {token!r} as {seconds}s per {unit}")
    return seconds, unit
