"""Degrees / minutes / seconds rendering of coordinates.

Example:
    >>> fmt = DmsFormatter()
    >>> fmt.format_latitude(51.5136)
    '51°30′49″N'
    >>> fmt.format_longitude(-0.0983, "dm")
    '000°05.90′W'
    >>> fmt.format_latitude(51.5136, "d", 2)
    '51.51°N'
"""

from __future__ import annotations

import math

from geosphere.numeric import to_fixed

DEGREE = "°"
PRIME = "′"
DOUBLE_PRIME = "″"
MISSING = "–"

# decimals of the smallest unit when none are requested
DEFAULT_DECIMALS = {"d": 4, "dm": 2, "dms": 0}


def _pad_degrees(text: str) -> str:
    """Zero-pad the integer part of ``text`` to three digits."""
    whole = text.split(".", 1)[0]
    return "0" * max(0, 3 - len(whole)) + text


def _pad_two(text: str) -> str:
    whole = text.split(".", 1)[0]
    return "0" * max(0, 2 - len(whole)) + text


def to_dms(degrees: float, fmt: str = "dms", dp: int | None = None) -> str | None:
    """Render the magnitude of ``degrees`` as d / dm / dms text.

    Unknown formats fall back to ``"dms"``. Degrees are padded to three
    digits, minutes and seconds to two.

    Returns:
        str | None: The rendering, or ``None`` for NaN.
    """
    if math.isnan(degrees):
        return None
    if fmt not in DEFAULT_DECIMALS:
        fmt = "dms"
    if dp is None:
        dp = DEFAULT_DECIMALS[fmt]

    degrees = abs(degrees)
    if fmt == "d":
        return _pad_degrees(to_fixed(degrees, dp)) + DEGREE

    if fmt == "dm":
        minutes = float(to_fixed(degrees * 60, dp))  # round to dp before splitting
        d = math.floor(minutes / 60)
        m = to_fixed(minutes % 60, dp)
        return f"{d:03d}{DEGREE}{_pad_two(m)}{PRIME}"

    seconds = float(to_fixed(degrees * 3600, dp))
    d = math.floor(seconds / 3600)
    m = math.floor(seconds / 60) % 60
    s = to_fixed(seconds % 60, dp)
    return f"{d:03d}{DEGREE}{m:02d}{PRIME}{_pad_two(s)}{DOUBLE_PRIME}"


class DmsFormatter:
    """Default ``CoordinateFormatter``: hemisphere-suffixed d / dm / dms text.

    Latitudes drop the leading pad digit (``51°30′49″N``), longitudes keep
    all three (``000°05′54″W``). NaN renders as an en dash.
    """

    def format_latitude(self, value: float, fmt: str = "dms", dp: int | None = None) -> str:
        text = to_dms(value, fmt, dp)
        if text is None:
            return MISSING
        return text[1:] + ("S" if value < 0 else "N")

    def format_longitude(self, value: float, fmt: str = "dms", dp: int | None = None) -> str:
        text = to_dms(value, fmt, dp)
        if text is None:
            return MISSING
        return text + ("W" if value < 0 else "E")

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
