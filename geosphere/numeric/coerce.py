"""Parsing of loosely typed numeric input at the API boundary.

Coordinates, radii, bearings and distances may arrive as numbers or as
numeric strings. ``parse_number`` turns such a value into either
``Parsed(value)`` or ``Invalid(raw, reason)``; the ``coerce_*`` helpers then
collapse ``Invalid`` into NaN, which the formulas propagate instead of
raising.
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Any

from geosphere.unit import Kilometer, Meter, Radian, UnitFloat, to_degrees

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Parsed:
    """A successfully parsed number."""

    value: float


@dataclass(frozen=True)
class Invalid:
    """Input that is neither a real number nor a finite numeric string."""

    raw: Any
    reason: str


ParseResult = Parsed | Invalid


def parse_number(value: Any) -> ParseResult:
    """Parse a real number or a numeric string.

    Real numbers (including NaN and infinities) pass through unchanged.
    Strings are trimmed and must spell a finite decimal number. Booleans,
    ``None``, containers and every other type are rejected.

    Example:
        >>> parse_number(" 51.5 ")
        Parsed(value=51.5)
        >>> parse_number("north")
        Invalid(raw='north', reason='not a number')
    """
    if isinstance(value, bool):
        return Invalid(value, "boolean")
    if isinstance(value, numbers.Real):
        return Parsed(float(value))
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return Invalid(value, "empty string")
        if "_" in text:
            return Invalid(value, "not a number")
        try:
            number = float(text)
        except ValueError:
            return Invalid(value, "not a number")
        if not math.isfinite(number):
            return Invalid(value, "not finite")
        return Parsed(number)
    return Invalid(value, f"unsupported type {type(value).__name__}")


def coerce_float(value: Any) -> float:
    """Return the parsed value of ``value``, or NaN if it is invalid."""
    result = parse_number(value)
    if isinstance(result, Invalid):
        logger.debug("treating %r as NaN: %s", result.raw, result.reason)
        return math.nan
    return result.value


def coerce_degrees(value: Any) -> float:
    """Like ``coerce_float``, but also accepts angle units (``Degree``, ``Latitude``, ...)."""
    if isinstance(value, Radian):
        return to_degrees(float(value))
    if isinstance(value, UnitFloat):
        logger.debug("treating %r as NaN: not an angle", value)
        return math.nan
    return coerce_float(value)


def coerce_kilometers(value: Any) -> float:
    """Like ``coerce_float``, but also accepts length units (``Meter``, ``Kilometer``, ...)."""
    if isinstance(value, UnitFloat) and Meter.same_family(type(value)):
        return value.to(Kilometer)
    if isinstance(value, UnitFloat):
        logger.debug("treating %r as NaN: not a length", value)
        return math.nan
    return coerce_float(value)
