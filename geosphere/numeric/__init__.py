"""Numeric boundary helpers.

Components:
    parse_number: Number / numeric string → ``Parsed`` or ``Invalid``
    coerce_float: Like parse_number, collapsing ``Invalid`` to NaN
    coerce_degrees, coerce_kilometers: Also accept angle / length units
    to_precision_fixed: Significant-digit rendering, fixed-point only
    to_fixed: Fixed-decimal rendering, half-up
    format_number: Shortest rendering of a number
"""

from .coerce import (
    Invalid,
    Parsed,
    ParseResult,
    coerce_degrees,
    coerce_float,
    coerce_kilometers,
    parse_number,
)
from .precision import format_number, to_fixed, to_precision_fixed

__all__ = [
    "Parsed",
    "Invalid",
    "ParseResult",
    "parse_number",
    "coerce_float",
    "coerce_degrees",
    "coerce_kilometers",
    "to_precision_fixed",
    "to_fixed",
    "format_number",
]
