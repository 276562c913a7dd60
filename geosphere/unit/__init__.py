"""Type-safe units for angles and lengths.

Architecture:
    - unit_base: ``Unit`` class with family (ROOT) management
    - unit_float: ``UnitFloat``, float units stored in SI scale
    - unit_angle: ``Radian``, ``Degree`` and the degree/radian helpers
    - unit_distance: ``Meter``, ``Kilometer``, ``NauticalMile``, ``Mile``

Unit Families:
    - Angle Family: Radian (root), Degree
    - Length Family: Meter (root), Kilometer, NauticalMile, Mile

Example:
    >>> from geosphere.unit import Degree, Kilometer, Meter
    >>> leg = Kilometer(1.5) + Meter(250)  # 1.75 km
    >>> heading = Degree(45)
    >>> # heading + leg raises TypeError: incompatible units
"""

from .unit_angle import Angle, Degree, Radian, to_degrees, to_radians, wrap_360, wrap_pi
from .unit_base import Unit
from .unit_distance import Kilometer, Length, Meter, Mile, NauticalMile
from .unit_float import UnitFloat

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Angular units
    "Radian",
    "Degree",
    "Angle",
    "to_radians",
    "to_degrees",
    "wrap_360",
    "wrap_pi",
    # Length units
    "Meter",
    "Kilometer",
    "NauticalMile",
    "Mile",
    "Length",
]
