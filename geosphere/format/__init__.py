"""Coordinate text formatting.

Components:
    CoordinateFormatter: Protocol consumed by ``GeoPoint``
    DmsFormatter: Default degrees / minutes / seconds implementation
    to_dms: Unsigned d / dm / dms rendering used by ``DmsFormatter``
"""

from .dms import DmsFormatter, to_dms
from .formatter import CoordinateFormatter

__all__ = ["CoordinateFormatter", "DmsFormatter", "to_dms"]
