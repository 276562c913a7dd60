"""Great-circle formulas on a sphere.

All functions take and return radians and accept either plain numbers or
NumPy arrays (``BASE_TYPE``), broadcasting element-wise. They run under
NumPy's IEEE semantics: NaN input yields NaN output, and out-of-domain
intermediates (``arccos`` of 1 + ε, division by zero) produce NaN or
infinities instead of raising.

References:
    Haversine formula: R. W. Sinnott, "Virtues of the Haversine",
    Sky and Telescope, vol 68, no 2, 1984.
    Bearing / destination: Ed Williams, Aviation Formulary.
"""

from __future__ import annotations

import numpy as np

from geosphere.config import BASE_TYPE
from geosphere.unit import wrap_pi


def haversine(lat1: BASE_TYPE, lon1: BASE_TYPE, lat2: BASE_TYPE, lon2: BASE_TYPE) -> BASE_TYPE:
    """Angular distance between two points, in radians.

    ``a = sin²(Δφ/2) + cos φ1 · cos φ2 · sin²(Δλ/2)``,
    ``c = 2 · atan2(√a, √(1−a))``.
    """
    with np.errstate(all="ignore"):
        dlat = np.subtract(lat2, lat1)
        dlon = np.subtract(lon2, lon1)
        a = np.sin(dlat / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2) ** 2
        return 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))


def initial_bearing(lat1: BASE_TYPE, lon1: BASE_TYPE, lat2: BASE_TYPE, lon2: BASE_TYPE) -> BASE_TYPE:
    """Initial bearing from point 1 to point 2, in radians within (-π, π]."""
    with np.errstate(all="ignore"):
        dlon = np.subtract(lon2, lon1)
        y = np.sin(dlon) * np.cos(lat2)
        x = np.cos(lat1) * np.sin(lat2) - np.sin(lat1) * np.cos(lat2) * np.cos(dlon)
        return np.arctan2(y, x)


def midpoint(
    lat1: BASE_TYPE, lon1: BASE_TYPE, lat2: BASE_TYPE, lon2: BASE_TYPE
) -> tuple[BASE_TYPE, BASE_TYPE]:
    """Midpoint of the great-circle segment, as ``(lat, lon)`` radians.

    The longitude is not normalised.
    """
    with np.errstate(all="ignore"):
        dlon = np.subtract(lon2, lon1)
        bx = np.cos(lat2) * np.cos(dlon)
        by = np.cos(lat2) * np.sin(dlon)

        lat3 = np.arctan2(
            np.sin(lat1) + np.sin(lat2),
            np.sqrt((np.cos(lat1) + bx) * (np.cos(lat1) + bx) + by * by),
        )
        lon3 = lon1 + np.arctan2(by, np.cos(lat1) + bx)
        return lat3, lon3


def destination(
    lat1: BASE_TYPE, lon1: BASE_TYPE, bearing: BASE_TYPE, angular_distance: BASE_TYPE
) -> tuple[BASE_TYPE, BASE_TYPE]:
    """Point reached from ``(lat1, lon1)`` along a great circle.

    Args:
        lat1, lon1: Start point (radians).
        bearing: Initial bearing (radians clockwise from north).
        angular_distance: Distance travelled divided by the body radius.

    Returns:
        tuple: ``(lat, lon)`` in radians, longitude folded into [-π, π).
    """
    with np.errstate(all="ignore"):
        lat2 = np.arcsin(
            np.sin(lat1) * np.cos(angular_distance)
            + np.cos(lat1) * np.sin(angular_distance) * np.cos(bearing)
        )
        lon2 = lon1 + np.arctan2(
            np.sin(bearing) * np.sin(angular_distance) * np.cos(lat1),
            np.cos(angular_distance) - np.sin(lat1) * np.sin(lat2),
        )
        return lat2, wrap_pi(lon2)
