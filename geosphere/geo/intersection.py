"""Intersection of two great-circle paths given by start point and bearing.

See Ed Williams, Aviation Formulary, "Intersecting radials".

Three configurations have no unique answer and yield ``None`` from
``intersection``: the two start points coincide, the two paths run along
the same great circle (infinitely many intersections), or the paths head
apart so that the crossing is ambiguous. ``solve_intersection`` reports which
of these occurred.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from math import pi
from typing import TYPE_CHECKING, Any

import numpy as np

from geosphere.numeric import coerce_degrees
from geosphere.unit import to_degrees, to_radians, wrap_pi

if TYPE_CHECKING:
    from .geo_point import GeoPoint

logger = logging.getLogger(__name__)


class IntersectionKind(Enum):
    """Outcome of an intersection solve."""

    POINT = "point"
    COINCIDENT = "coincident"
    INFINITE = "infinite"
    AMBIGUOUS = "ambiguous"


@dataclass(frozen=True)
class IntersectionResult:
    """Kind of outcome plus the intersection point (``None`` unless kind is POINT)."""

    kind: IntersectionKind
    point: GeoPoint | None = None

    def __bool__(self) -> bool:
        return self.point is not None


def classify_crossing(alpha1: float, alpha2: float) -> IntersectionKind:
    """Classify the triangle angles at the two start points.

    Args:
        alpha1: Angle 2-1-3 at the first point (radians).
        alpha2: Angle 1-2-3 at the second point (radians).
    """
    sin1, sin2 = np.sin(alpha1), np.sin(alpha2)
    if sin1 == 0 and sin2 == 0:
        return IntersectionKind.INFINITE
    if sin1 * sin2 < 0:
        return IntersectionKind.AMBIGUOUS
    return IntersectionKind.POINT


def solve_intersection(p1: GeoPoint, bearing1: Any, p2: GeoPoint, bearing2: Any) -> IntersectionResult:
    """Intersect the path leaving ``p1`` on ``bearing1`` with the one leaving ``p2`` on ``bearing2``.

    Bearings are degrees clockwise from north (number, numeric string or
    angle unit); anything else becomes NaN and yields a NaN point.

    Returns:
        IntersectionResult: ``POINT`` with the crossing (default radius), or a
        degenerate kind with no point.
    """
    from .geo_point import GeoPoint

    brng13 = to_radians(coerce_degrees(bearing1))
    brng23 = to_radians(coerce_degrees(bearing2))
    lat1, lon1 = to_radians(p1.latitude), to_radians(p1.longitude)
    lat2, lon2 = to_radians(p2.latitude), to_radians(p2.longitude)
    dlat, dlon = lat2 - lat1, lon2 - lon1

    with np.errstate(all="ignore"):
        dist12 = 2 * np.arcsin(
            np.sqrt(
                np.sin(dlat / 2) * np.sin(dlat / 2)
                + np.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2) * np.sin(dlon / 2)
            )
        )
        if dist12 == 0:
            logger.debug("no intersection: %s and %s coincide", p1, p2)
            return IntersectionResult(IntersectionKind.COINCIDENT)

        # initial / final bearings between the two points
        brng_a = np.arccos(
            (np.sin(lat2) - np.sin(lat1) * np.cos(dist12)) / (np.sin(dist12) * np.cos(lat1))
        )
        if np.isnan(brng_a):
            brng_a = 0.0  # rounding pushed the cosine past 1
        brng_b = np.arccos(
            (np.sin(lat1) - np.sin(lat2) * np.cos(dist12)) / (np.sin(dist12) * np.cos(lat2))
        )

        if np.sin(lon2 - lon1) > 0:
            brng12 = brng_a
            brng21 = 2 * pi - brng_b
        else:
            brng12 = 2 * pi - brng_a
            brng21 = brng_b

        alpha1 = (brng13 - brng12 + pi) % (2 * pi) - pi  # angle 2-1-3
        alpha2 = (brng21 - brng23 + pi) % (2 * pi) - pi  # angle 1-2-3

        kind = classify_crossing(alpha1, alpha2)
        if kind is not IntersectionKind.POINT:
            logger.debug("no intersection: %s paths from %s and %s", kind.value, p1, p2)
            return IntersectionResult(kind)

        alpha3 = np.arccos(
            -np.cos(alpha1) * np.cos(alpha2) + np.sin(alpha1) * np.sin(alpha2) * np.cos(dist12)
        )
        dist13 = np.arctan2(
            np.sin(dist12) * np.sin(alpha1) * np.sin(alpha2),
            np.cos(alpha2) + np.cos(alpha1) * np.cos(alpha3),
        )
        lat3 = np.arcsin(
            np.sin(lat1) * np.cos(dist13) + np.cos(lat1) * np.sin(dist13) * np.cos(brng13)
        )
        dlon13 = np.arctan2(
            np.sin(brng13) * np.sin(dist13) * np.cos(lat1),
            np.cos(dist13) - np.sin(lat1) * np.sin(lat3),
        )
        lon3 = wrap_pi(lon1 + dlon13)

    point = GeoPoint(float(to_degrees(lon3)), float(to_degrees(lat3)), formatter=p1.formatter)
    return IntersectionResult(IntersectionKind.POINT, point)


def intersection(p1: GeoPoint, bearing1: Any, p2: GeoPoint, bearing2: Any) -> GeoPoint | None:
    """Crossing point of two paths, or ``None`` if there is no unique one."""
    return solve_intersection(p1, bearing1, p2, bearing2).point
