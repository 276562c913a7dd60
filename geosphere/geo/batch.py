"""Vectorised great-circle distances over many points.

``distance_matrix`` replaces a double loop of ``distance_km_to`` calls with a
single broadcast haversine over NumPy arrays.

Example:
    >>> depots = [GeoPoint(-0.0983, 51.5136), GeoPoint(2.3522, 48.8566)]
    >>> drops = [GeoPoint(-0.0015, 51.4778)]
    >>> distance_matrix(depots, drops).shape
    (2, 1)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from geosphere.numeric import coerce_kilometers
from geosphere.unit import to_radians

from . import great_circle
from .geo_point import GeoPoint


def _coordinates(points: Sequence[GeoPoint]) -> tuple[np.ndarray, np.ndarray]:
    """Latitude and longitude columns of ``points``, in radians."""
    lat = np.array([point.latitude for point in points], dtype="float64")
    lon = np.array([point.longitude for point in points], dtype="float64")
    return to_radians(lat), to_radians(lon)


def distance_matrix(
    origins: Sequence[GeoPoint],
    destinations: Sequence[GeoPoint],
    radius: Any = None,
) -> np.ndarray:
    """Haversine distances in kilometres between every origin and destination.

    Args:
        origins: Row points.
        destinations: Column points.
        radius: Sphere radius in km (or a length unit). Defaults to the
            radius of the first origin.

    Returns:
        np.ndarray: Shape ``(len(origins), len(destinations))``; element
        ``[i][j]`` is the distance from origin i to destination j. NaN where
        either point is invalid.
    """
    if radius is None:
        radius = origins[0].radius if len(origins) else np.nan
    radius_km = coerce_kilometers(radius)

    lat1, lon1 = _coordinates(origins)
    lat2, lon2 = _coordinates(destinations)
    angles = great_circle.haversine(lat1[:, None], lon1[:, None], lat2[None, :], lon2[None, :])
    return radius_km * np.asarray(angles).reshape(len(origins), len(destinations))


def path_length(points: Sequence[GeoPoint], radius: Any = None) -> float:
    """Total great-circle length in kilometres of the polyline through ``points``.

    Fewer than two points give 0.0.
    """
    if len(points) < 2:
        return 0.0
    if radius is None:
        radius = points[0].radius
    lat, lon = _coordinates(points)
    legs = great_circle.haversine(lat[:-1], lon[:-1], lat[1:], lon[1:])
    return float(coerce_kilometers(radius) * np.sum(legs))
