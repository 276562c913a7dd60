"""Geographic point on a sphere and the methods that measure between points.

``GeoPoint`` is an immutable value: every operation returns new numbers or
new points. Coordinates are plain signed degrees; the radius of the sphere is
in kilometres and defaults to the Earth's mean radius, so the same code works
for other spherical bodies.

Invalid input never raises. A coordinate that is not a number or a numeric
string is stored as NaN, and NaN flows through every formula: distances come
back as ``"NaN"``, bearings as ``nan``, points with NaN coordinates.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from geosphere.config import (
    DEFAULT_PRECISION,
    EARTH_RADIUS_KM,
    EMPTY_POINT_TEXT,
    RHUMB_PRECISION,
    SQUARE_BEARINGS,
)
from geosphere.format import CoordinateFormatter, DmsFormatter
from geosphere.numeric import (
    coerce_degrees,
    coerce_kilometers,
    format_number,
    to_fixed,
    to_precision_fixed,
)
from geosphere.unit import Degree, to_degrees, to_radians, wrap_360

from . import great_circle, rhumb


class Latitude(Degree):
    """Latitude in degrees, a unit family of its own.

    Example:
        >>> lat = Latitude(51.5136)
        >>> str(lat)
        '51.5136 °N/S'
    """

    IS_FAMILY_ROOT = True
    SYMBOL = "°N/S"


class Longitude(Degree):
    """Longitude in degrees, a unit family of its own.

    Example:
        >>> lon = Longitude(-0.0983)
        >>> str(lon)
        '-0.0983 °E/W'
    """

    IS_FAMILY_ROOT = True
    SYMBOL = "°E/W"


@dataclass(frozen=True)
class GeoPoint:
    """A location on a sphere, in signed degrees.

    Attributes:
        longitude (float): Degrees east (negative west). Not normalised.
        latitude (float): Degrees north (negative south), -90 to +90.
        radius (float): Radius of the sphere in kilometres.
        formatter (CoordinateFormatter): Renders ``lat(fmt)``, ``lon(fmt)``
            and ``to_string()``. Not part of equality.

    Each of longitude, latitude and radius accepts a number or a numeric
    string (``" 51.5 "``); radius also accepts a length unit such as
    ``NauticalMile(3440)``. Anything else is stored as NaN.

    Example:
        >>> st_pauls = GeoPoint(-0.0983, 51.5136)
        >>> greenwich = GeoPoint(-0.0015, 51.4778)
        >>> st_pauls.distance_to(greenwich)
        '7.794'
        >>> st_pauls.to_string()
        '000°05′54″W, 51°30′49″N'
    """

    longitude: float
    latitude: float
    radius: float = EARTH_RADIUS_KM
    formatter: CoordinateFormatter = field(default_factory=DmsFormatter, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "longitude", coerce_degrees(self.longitude))
        object.__setattr__(self, "latitude", coerce_degrees(self.latitude))
        object.__setattr__(self, "radius", coerce_kilometers(self.radius))

    @classmethod
    def from_deg(cls, lat: float, lon: float, radius: Any = EARTH_RADIUS_KM) -> GeoPoint:
        """Create a point from latitude and longitude in degrees (latitude first).

        Example:
            >>> seoul = GeoPoint.from_deg(37.5665, 126.9780)
        """
        return cls(lon, lat, radius)

    @classmethod
    def from_rad(cls, lat: float, lon: float, radius: Any = EARTH_RADIUS_KM) -> GeoPoint:
        """Create a point from latitude and longitude in radians (latitude first)."""
        return cls(to_degrees(lon), to_degrees(lat), radius)

    @property
    def latitude_unit(self) -> Latitude:
        """Latitude as a typed ``Latitude`` unit."""
        return Latitude(self.latitude)

    @property
    def longitude_unit(self) -> Longitude:
        """Longitude as a typed ``Longitude`` unit."""
        return Longitude(self.longitude)

    def _radians(self) -> tuple[float, float]:
        return to_radians(self.latitude), to_radians(self.longitude)

    def _derive(self, lon_rad: float, lat_rad: float) -> GeoPoint:
        """New point from radians, keeping this point's radius and formatter."""
        return GeoPoint(
            float(to_degrees(lon_rad)),
            float(to_degrees(lat_rad)),
            self.radius,
            self.formatter,
        )

    def _angular(self, distance: Any) -> float:
        """Distance in kilometres as an angle (radians) on this sphere."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return np.divide(coerce_kilometers(distance), self.radius)

    @staticmethod
    def _check_point(other: Any) -> None:
        if not isinstance(other, GeoPoint):
            raise TypeError(f"expected a GeoPoint, got {type(other).__name__}")

    # ------------------------------ Great circle ------------------------------
    def distance_km_to(self, other: GeoPoint) -> float:
        """Great-circle (haversine) distance to ``other`` in kilometres."""
        self._check_point(other)
        lat1, lon1 = self._radians()
        lat2, lon2 = other._radians()
        return float(self.radius * great_circle.haversine(lat1, lon1, lat2, lon2))

    def distance_to(self, other: GeoPoint, precision: int = DEFAULT_PRECISION) -> str:
        """Great-circle distance to ``other`` in kilometres, as text.

        Args:
            other: Destination point.
            precision: Significant digits of the result.

        Returns:
            str: Fixed-point distance, e.g. ``"7.794"``; ``"NaN"`` if either
            point is invalid.
        """
        return to_precision_fixed(self.distance_km_to(other), precision)

    def bearing_to(self, other: GeoPoint) -> float:
        """Initial bearing towards ``other``, degrees clockwise from north in [0, 360)."""
        self._check_point(other)
        lat1, lon1 = self._radians()
        lat2, lon2 = other._radians()
        return float(wrap_360(to_degrees(great_circle.initial_bearing(lat1, lon1, lat2, lon2))))

    def final_bearing_to(self, other: GeoPoint) -> float:
        """Bearing on arrival at ``other``, degrees in [0, 360).

        This is the initial bearing from ``other`` back to this point, turned
        round by 180°.
        """
        self._check_point(other)
        lat1, lon1 = other._radians()
        lat2, lon2 = self._radians()
        back = to_degrees(great_circle.initial_bearing(lat1, lon1, lat2, lon2))
        with np.errstate(invalid="ignore"):
            return float((back + 180) % 360)

    def midpoint_to(self, other: GeoPoint) -> GeoPoint:
        """Half-way point along the great circle to ``other``."""
        self._check_point(other)
        lat1, lon1 = self._radians()
        lat2, lon2 = other._radians()
        lat3, lon3 = great_circle.midpoint(lat1, lon1, lat2, lon2)
        return self._derive(lon3, lat3)

    def destination_point(self, bearing: Any, distance: Any) -> GeoPoint:
        """Point reached after ``distance`` along a great circle starting on ``bearing``.

        Args:
            bearing: Initial bearing in degrees (or an angle unit).
            distance: Distance in kilometres (number, numeric string or
                length unit); anything else gives a NaN point.

        Returns:
            GeoPoint: Destination, longitude normalised to [-180, 180).
        """
        angular = self._angular(distance)
        lat1, lon1 = self._radians()
        lat2, lon2 = great_circle.destination(lat1, lon1, to_radians(coerce_degrees(bearing)), angular)
        return self._derive(lon2, lat2)

    @staticmethod
    def intersection(p1: GeoPoint, bearing1: Any, p2: GeoPoint, bearing2: Any) -> GeoPoint | None:
        """Crossing of the paths leaving ``p1`` on ``bearing1`` and ``p2`` on ``bearing2``.

        Returns ``None`` when the points coincide, the paths share a great
        circle, or the crossing is ambiguous. See
        ``geosphere.geo.intersection.solve_intersection`` to tell these apart.
        """
        from .intersection import intersection

        return intersection(p1, bearing1, p2, bearing2)

    # ------------------------------ Rhumb line ------------------------------
    def rhumb_distance_km_to(self, other: GeoPoint) -> float:
        """Rhumb-line distance to ``other`` in kilometres."""
        self._check_point(other)
        lat1, lon1 = self._radians()
        lat2, lon2 = other._radians()
        return float(self.radius * rhumb.rhumb_distance(lat1, lon1, lat2, lon2))

    def rhumb_distance_to(self, other: GeoPoint) -> str:
        """Rhumb-line distance to ``other`` in kilometres, as 4-significant-digit text."""
        return to_precision_fixed(self.rhumb_distance_km_to(other), RHUMB_PRECISION)

    def rhumb_bearing_to(self, other: GeoPoint) -> float:
        """Constant rhumb-line bearing towards ``other``, degrees in [0, 360)."""
        self._check_point(other)
        lat1, lon1 = self._radians()
        lat2, lon2 = other._radians()
        return float(wrap_360(to_degrees(rhumb.rhumb_bearing(lat1, lon1, lat2, lon2))))

    def rhumb_destination_point(self, bearing: Any, distance: Any) -> GeoPoint:
        """Point reached after ``distance`` km on a constant ``bearing``."""
        angular = self._angular(distance)
        lat1, lon1 = self._radians()
        lat2, lon2 = rhumb.rhumb_destination(lat1, lon1, to_radians(coerce_degrees(bearing)), angular)
        return self._derive(lon2, lat2)

    # ------------------------------ Derived ------------------------------
    def get_square_points(self, distance: Any, as_strings: bool = False) -> dict[str, GeoPoint | str]:
        """Sample the eight compass directions at ``distance`` km around this point.

        Keys are ``n, ne, e, es, s, sw, w, wn``. With ``as_strings`` the
        values are ``"lon,lat"`` strings instead of points.
        """
        points = {
            key: self.destination_point(bearing, distance) for key, bearing in SQUARE_BEARINGS.items()
        }
        if as_strings:
            return {key: point.to_lng_lat() for key, point in points.items()}
        return points

    def in_square(self, southwest: GeoPoint, northeast: GeoPoint) -> bool:
        """True if this point lies in the box spanned by two corners, edges included.

        A plain coordinate comparison: boxes crossing the antimeridian are
        not handled.
        """
        return (
            southwest.latitude <= self.latitude <= northeast.latitude
            and southwest.longitude <= self.longitude <= northeast.longitude
        )

    def to_array(self, fixed_digits: int | None = None) -> list[float]:
        """``[longitude, latitude]``, rounded to ``fixed_digits`` decimals when given."""
        if not fixed_digits:
            return [self.longitude, self.latitude]
        return [float(to_fixed(self.longitude, fixed_digits)), float(to_fixed(self.latitude, fixed_digits))]

    def to_lng_lat(self, fixed_digits: int | None = None) -> str:
        """``"lon,lat"`` text, with ``fixed_digits`` decimals when given."""
        if not fixed_digits:
            return f"{format_number(self.longitude)},{format_number(self.latitude)}"
        return f"{to_fixed(self.longitude, fixed_digits)},{to_fixed(self.latitude, fixed_digits)}"

    # ------------------------------ Formatting ------------------------------
    def lat(self, fmt: str | None = None, dp: int | None = None) -> float | str:
        """Latitude in degrees, or formatted as ``'d'``, ``'dm'`` or ``'dms'``."""
        if fmt is None:
            return self.latitude
        return self.formatter.format_latitude(self.latitude, fmt, dp)

    def lon(self, fmt: str | None = None, dp: int | None = None) -> float | str:
        """Longitude in degrees, or formatted as ``'d'``, ``'dm'`` or ``'dms'``."""
        if fmt is None:
            return self.longitude
        return self.formatter.format_longitude(self.longitude, fmt, dp)

    def to_string(self, fmt: str = "dms", dp: int | None = None) -> str:
        """``"<lon>, <lat>"`` in the given format, or ``"-,-"`` for an invalid point."""
        if math.isnan(self.latitude) or math.isnan(self.longitude):
            return EMPTY_POINT_TEXT
        return (
            f"{self.formatter.format_longitude(self.longitude, fmt, dp)}, "
            f"{self.formatter.format_latitude(self.latitude, fmt, dp)}"
        )

    def __str__(self) -> str:
        return self.to_string()
