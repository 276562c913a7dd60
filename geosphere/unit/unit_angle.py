"""Angular units and degree/radian helpers.

Angles are stored in radians (the SI unit) by the ``Radian``/``Degree``
unit classes. The spherical formulas themselves work on plain floats or
numpy arrays, so this module also exposes the bare conversions they use.

Classes:
    Radian: Base angular unit in radians (SI unit).
    Degree: Angular unit in degrees.

Functions:
    to_radians: Degrees to radians, ``x * π / 180``.
    to_degrees: Radians to degrees, ``x * 180 / π``.
    wrap_360: Fold a bearing in degrees into [0, 360).
    wrap_pi: Fold a longitude in radians into [-π, π).

Example:
    >>> heading = Degree(45)
    >>> print(heading)  # "45.0 °"
    >>> print(float(heading))  # 0.7853981633974483 (radians)
    >>> to_degrees(pi)  # 180.0
"""

from __future__ import annotations

from math import pi

import numpy as np

from geosphere.config import BASE_TYPE

from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Angular unit: Radian (SI base unit for angles)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"


class Degree(Radian):
    """Angular unit: Degree, 1/360 of a full turn.

    Bearings handed to ``GeoPoint`` may be given as a ``Degree`` (or any other
    angle unit) instead of a plain number of degrees.

    Example:
        >>> bearing = Degree(90)  # due east
        >>> bearing.to(Radian)  # 1.5707963267948966
    """

    SCALE_TO_SI = pi / 180
    SYMBOL = "°"


Angle = Radian | Degree


def to_radians(degrees: BASE_TYPE) -> BASE_TYPE:
    """Convert numeric degrees to radians."""
    return degrees * pi / 180


def to_degrees(radians: BASE_TYPE) -> BASE_TYPE:
    """Convert radians to numeric (signed) degrees."""
    return radians * 180 / pi


def wrap_360(degrees: BASE_TYPE) -> BASE_TYPE:
    """Fold a bearing given in degrees into [0, 360)."""
    with np.errstate(invalid="ignore"):
        return (degrees + 360) % 360


def wrap_pi(radians: BASE_TYPE) -> BASE_TYPE:
    """Fold a longitude given in radians into [-π, π)."""
    with np.errstate(invalid="ignore"):
        return (radians + 3 * pi) % (2 * pi) - pi
