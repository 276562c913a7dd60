"""Length units for distances and body radii.

All lengths are stored in metres (the SI unit). ``GeoPoint`` itself works in
kilometres, so any ``Length`` handed to it is converted with
``.to(Kilometer)``.

Classes:
    Meter: Base length unit (SI unit).
    Kilometer: 1000 metres.
    NauticalMile: 1852 metres.
    Mile: International statute mile, 1609.344 metres.

Type Aliases:
    Length: Union type for all length units.

Example:
    >>> leg = NauticalMile(60)
    >>> leg.to(Kilometer)  # 111.12
    >>> Kilometer(1) + Meter(250)  # 1.25 km
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Length unit: Meter (SI base unit for length)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    """Length unit: Kilometer, the native distance unit of ``GeoPoint``."""

    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


class NauticalMile(Meter):
    """Length unit: international nautical mile."""

    SCALE_TO_SI = 1852.0
    SYMBOL = "NM"


class Mile(Meter):
    """Length unit: international statute mile."""

    SCALE_TO_SI = 1609.344
    SYMBOL = "mi"


Length = Meter | Kilometer | NauticalMile | Mile
