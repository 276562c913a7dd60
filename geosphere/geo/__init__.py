"""Spherical geodesy on latitude/longitude points.

Components:
    GeoPoint: Point on a sphere with great-circle and rhumb-line methods
    Latitude: Latitude as a typed degree unit
    Longitude: Longitude as a typed degree unit
    intersection: Crossing point of two paths given by point and bearing
    solve_intersection: Same, reporting why there is no unique crossing
    distance_matrix, path_length: Vectorised haversine distances

Modules:
    great_circle: Haversine, bearing, midpoint and destination formulas
    rhumb: Rhumb-line distance, bearing and destination formulas

Typical Usage:
    >>> from geosphere.geo import GeoPoint
    >>> st_pauls = GeoPoint(-0.0983, 51.5136)
    >>> greenwich = GeoPoint(-0.0015, 51.4778)
    >>> st_pauls.distance_to(greenwich)  # km, 4 significant digits
    '7.794'
    >>> ring = st_pauls.get_square_points(1)  # n, ne, e, es, s, sw, w, wn
"""

from .batch import distance_matrix, path_length
from .geo_point import GeoPoint, Latitude, Longitude
from .intersection import IntersectionKind, IntersectionResult, intersection, solve_intersection

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
