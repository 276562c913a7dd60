"""Spherical-Earth geodesy for latitude/longitude points.

geosphere computes distances, bearings, midpoints, destination points and
path intersections on a sphere, along great circles and along rhumb lines.
A spherical model is accurate to about 0.3%, which is why distances are
reported with four significant digits.

Package Layout:
    geosphere.geo:
        • GeoPoint: Immutable point with great-circle and rhumb-line methods
        • intersection / solve_intersection: Crossing of two bearing paths
        • distance_matrix / path_length: Vectorised haversine over NumPy arrays

    geosphere.unit:
        • Radian, Degree: Angle units and degree/radian helpers
        • Meter, Kilometer, NauticalMile, Mile: Length units

    geosphere.numeric:
        • parse_number: Number / numeric string → Parsed | Invalid
        • to_precision_fixed: Significant-digit rendering without exponents

    geosphere.format:
        • CoordinateFormatter: Protocol used by GeoPoint for text output
        • DmsFormatter: Degrees / minutes / seconds implementation

    geosphere.config:
        • EARTH_RADIUS_KM and the other shared constants
        • configure_logging: Rich console output for library debug records

Error Model:
    Invalid numeric input never raises. It becomes NaN, NaN propagates
    through the formulas, distances render as ``"NaN"`` and invalid points as
    ``"-,-"``. Intersections with no unique answer return ``None``.

Usage:
    >>> from geosphere import GeoPoint
    >>> from geosphere.unit import NauticalMile
    >>>
    >>> lhr = GeoPoint(-0.4614, 51.4775)
    >>> jfk = GeoPoint(-73.7781, 40.6413)
    >>> lhr.distance_to(jfk)  # km as text, 4 significant digits
    >>> lhr.bearing_to(jfk)  # initial bearing, degrees from north
    >>> lhr.destination_point(270, NauticalMile(100)).to_lng_lat(4)
    >>> GeoPoint.intersection(lhr, 270, jfk, 45)
"""

import logging

from geosphere.geo import (
    GeoPoint,
    IntersectionKind,
    IntersectionResult,
    Latitude,
    Longitude,
    distance_matrix,
    intersection,
    path_length,
    solve_intersection,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "GeoPoint",
    "Latitude",
    "Longitude",
    "intersection",
    "solve_intersection",
    "IntersectionKind",
    "IntersectionResult",
    "distance_matrix",
    "path_length",
]
