"""Rhumb-line (loxodrome) formulas on a sphere.

A rhumb line keeps a constant compass bearing and is a straight line on a
Mercator projection. Like ``great_circle``, every function works in radians
on numbers or NumPy arrays and propagates NaN instead of raising.
"""

from __future__ import annotations

from math import pi

import numpy as np

from geosphere.config import BASE_TYPE
from geosphere.unit import wrap_pi

# below this Δψ the line is treated as running due east or west
MIN_MERCATOR_DELTA = 1e-12


def _scalar_or_array(values):
    """Unwrap 0-d arrays produced by ``np.where`` on scalar input."""
    return values[()] if isinstance(values, np.ndarray) else values


def mercator_delta(lat1: BASE_TYPE, lat2: BASE_TYPE) -> BASE_TYPE:
    """Difference of Mercator-projected latitudes, ``ln(tan(φ2/2+π/4) / tan(φ1/2+π/4))``."""
    with np.errstate(all="ignore"):
        return np.log(np.tan(np.divide(lat2, 2) + pi / 4) / np.tan(np.divide(lat1, 2) + pi / 4))


def stretch_factor(dlat: BASE_TYPE, dphi: BASE_TYPE, lat1: BASE_TYPE) -> BASE_TYPE:
    """Ratio ``q = Δφ / Δψ``, or ``cos φ1`` on an east-west line.

    On an east-west line both differences are 0 or rounding residue such as
    ``d·cos(π/2)``, so ``Δψ`` below ``MIN_MERCATOR_DELTA`` (or NaN, past a
    pole) takes the limit ``cos φ1``.
    """
    with np.errstate(all="ignore"):
        ratio = np.divide(dlat, dphi)
        return _scalar_or_array(np.where(np.abs(dphi) > MIN_MERCATOR_DELTA, ratio, np.cos(lat1)))


def rhumb_distance(lat1: BASE_TYPE, lon1: BASE_TYPE, lat2: BASE_TYPE, lon2: BASE_TYPE) -> BASE_TYPE:
    """Angular length of the rhumb line between two points, in radians.

    Longitude differences over 180° take the shorter way across the
    antimeridian.
    """
    with np.errstate(all="ignore"):
        dlat = np.subtract(lat2, lat1)
        dlon = np.abs(np.subtract(lon2, lon1))
        dphi = mercator_delta(lat1, lat2)
        q = stretch_factor(dlat, dphi, lat1)
        dlon = _scalar_or_array(np.where(dlon > pi, 2 * pi - dlon, dlon))
        return np.sqrt(dlat * dlat + q * q * dlon * dlon)


def rhumb_bearing(lat1: BASE_TYPE, lon1: BASE_TYPE, lat2: BASE_TYPE, lon2: BASE_TYPE) -> BASE_TYPE:
    """Constant bearing of the rhumb line from point 1 to point 2, radians in (-π, π]."""
    with np.errstate(all="ignore"):
        dlon = np.subtract(lon2, lon1)
        dphi = mercator_delta(lat1, lat2)
        # cross the antimeridian when that is shorter
        wrapped = np.where(dlon > 0, -(2 * pi - dlon), 2 * pi + dlon)
        dlon = _scalar_or_array(np.where(np.abs(dlon) > pi, wrapped, dlon))
        return np.arctan2(dlon, dphi)


def rhumb_destination(
    lat1: BASE_TYPE, lon1: BASE_TYPE, bearing: BASE_TYPE, angular_distance: BASE_TYPE
) -> tuple[BASE_TYPE, BASE_TYPE]:
    """Point reached from ``(lat1, lon1)`` along a rhumb line.

    A path running past a pole is reflected back: ``φ2 = sign(φ2)·(π − |φ2|)``.
    The reflection happens after the longitude change has been worked out
    from the unreflected latitude.

    Returns:
        tuple: ``(lat, lon)`` in radians, longitude folded into [-π, π).
    """
    with np.errstate(all="ignore"):
        lat2 = lat1 + angular_distance * np.cos(bearing)
        dlat = lat2 - lat1
        dphi = mercator_delta(lat1, lat2)
        q = stretch_factor(dlat, dphi, lat1)
        dlon = angular_distance * np.sin(bearing) / q

        past_pole = np.abs(lat2) > pi / 2
        lat2 = _scalar_or_array(np.where(past_pole, np.sign(lat2) * (pi - np.abs(lat2)), lat2))
        return lat2, wrap_pi(lon1 + dlon)
