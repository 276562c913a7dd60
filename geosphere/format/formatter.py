"""Interface of the coordinate formatting collaborator.

``GeoPoint`` does not know how to spell degrees, minutes and seconds; it
delegates ``lat(fmt)``, ``lon(fmt)`` and ``to_string()`` to the formatter it
was built with. Any object with these two methods will do.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CoordinateFormatter(Protocol):
    """Renders signed degrees as latitude / longitude text.

    ``fmt`` is one of ``"d"``, ``"dm"`` or ``"dms"`` (degrees, degrees and
    minutes, degrees minutes and seconds); ``dp`` is the number of decimals
    of the smallest unit, or ``None`` for the formatter's default.
    """

    def format_latitude(self, value: float, fmt: str = "dms", dp: int | None = None) -> str: ...

    def format_longitude(self, value: float, fmt: str = "dms", dp: int | None = None) -> str: ...
