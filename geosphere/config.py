"""Global configuration and type definitions for geosphere.

Constants shared by the spherical formulas, plus the numeric type alias the
formula functions accept and the optional console logging setup.

Type Definitions:
    BASE_TYPE: Numeric input accepted by the formula functions. Plain Python
               numbers or NumPy arrays; arrays are processed element-wise so
               whole coordinate columns can be handled in one call.

Constants:
    EARTH_RADIUS_KM: Mean Earth radius used when no radius is given.
    DEFAULT_PRECISION: Significant digits of great-circle distance strings.
    RHUMB_PRECISION: Significant digits of rhumb-line distance strings.
    SQUARE_BEARINGS: Compass labels and bearings sampled by
                     ``GeoPoint.get_square_points``.

Example:
    >>> from geosphere.config import BASE_TYPE, configure_logging
    >>> import numpy as np
    >>> lat: BASE_TYPE = np.array([51.5, 48.8])
    >>> configure_logging("DEBUG")  # render library debug records with rich
"""

import logging

from numpy import ndarray
from rich.logging import RichHandler

BASE_TYPE = int | float | ndarray

# earth's mean radius in km
EARTH_RADIUS_KM = 6371.0

# 4 significant figures reflect the ~0.3% accuracy of a spherical model
DEFAULT_PRECISION = 4
RHUMB_PRECISION = 4

NAN_TEXT = "NaN"
EMPTY_POINT_TEXT = "-,-"

# "es" and "wn" are the established keys, not "se" and "nw"
SQUARE_BEARINGS = {
    "n": 0,
    "ne": 45,
    "e": 90,
    "es": 135,
    "s": 180,
    "sw": 225,
    "w": 270,
    "wn": 315,
}

LOG_FORMAT = "%(name)s: %(message)s"


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Attach a rich console handler to the ``geosphere`` logger.

    Calling it again replaces the previously installed rich handler rather
    than stacking a second one.

    Args:
        level: Logging level name or number.

    Returns:
        logging.Logger: The configured package logger.
    """
    logger = logging.getLogger("geosphere")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(show_path=False, markup=False)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
