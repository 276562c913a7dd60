"""Float-based units stored in SI scale.

A ``UnitFloat`` is a ``float`` whose value is kept in the SI unit of its
family (radians for angles, metres for lengths) and which only combines with
units of the same family.

Classes:
    UnitFloat: Base class for all float-based units.

Example:
    >>> class Meter(UnitFloat):
    ...     IS_FAMILY_ROOT = True
    ...     SCALE_TO_SI = 1.0
    ...     SYMBOL = "m"
    ...
    >>> class Kilometer(Meter):
    ...     SCALE_TO_SI = 1000.0
    ...     SYMBOL = "km"
    ...
    >>> radius = Kilometer(6371)
    >>> print(radius)  # "6371.0 km"
    >>> print(float(radius))  # 6371000.0 (metres)
"""

from __future__ import annotations

from typing import ClassVar

from .unit_base import Unit

Number = int | float


class UnitFloat(float, Unit):
    """Float stored in SI scale that only mixes with units of its own family.

    Attributes:
        SCALE_TO_SI (ClassVar[float]): Factor from the unit's own scale to SI.
        IS_FAMILY_ROOT (ClassVar[bool]): Marks the root class of a family.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        """Create a unit from a value expressed in the unit's own scale."""
        si_val = float(value) * cls.SCALE_TO_SI
        return float.__new__(cls, si_val)

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Create a unit directly from a value already in SI scale."""
        return float.__new__(cls, si_value)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Return the plain value expressed in ``unit_type``'s scale.

        Raises:
            TypeError: If ``unit_type`` is from another family.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    def as_unit(self, unit_type: type[UnitFloat]) -> UnitFloat:
        """Return the same quantity typed as ``unit_type``."""
        self._check_same_root(unit_type)
        return unit_type.from_si(float(self))

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) + float(other))

    def __mul__(self, k: Number) -> UnitFloat:
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_si(float(self) * float(k))
        raise TypeError(f"cannot scale {type(self).__name__} by {type(k).__name__}")

    def __truediv__(self, k: Number) -> UnitFloat:
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_si(float(self) / float(k))
        raise TypeError(f"cannot divide {type(self).__name__} by {type(k).__name__}")

    def __str__(self) -> str:
        """Value and symbol in the unit's own scale, e.g. ``"45.0 °"``."""
        return f"{self.to(type(self))} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        """Value in the unit's own scale plus its SI value."""
        return f"{self.to(type(self)):g} {type(self).SYMBOL} (= {float(self):g} SI)"
