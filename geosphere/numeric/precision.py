"""Fixed-point number rendering.

Distances are returned as strings carrying a fixed number of significant
digits, and coordinates are rendered with a fixed number of decimals. Both
use fixed-point notation only, never exponents.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from geosphere.config import NAN_TEXT


def _non_finite_text(value: float) -> str:
    if math.isnan(value):
        return NAN_TEXT
    return "Infinity" if value > 0 else "-Infinity"


def to_precision_fixed(value: float, precision: int) -> str:
    """Format ``value`` with ``precision`` significant digits in fixed-point notation.

    The mantissa is rounded half-up, then the decimal point is placed after
    the number of integer digits of ``|value|``, padding with zeros on either
    side. Exact powers of ten keep their magnitude: ``(10, 4)`` gives
    ``"10.00"``, not the ``"1.0000"`` a ``ceil(log10|value|)`` digit count
    produces.

    Args:
        value: Number to format.
        precision: Number of significant digits in the result.

    Returns:
        str: e.g. ``"1235"`` for ``(1234.5678, 4)``, ``"0.0123"`` for
        ``(0.012345, 3)``, ``"0.0000"`` for ``(0, 4)`` and ``"NaN"`` for NaN.
    """
    value = float(value)
    if not math.isfinite(value):
        return _non_finite_text(value)

    numb = -value if value < 0 else value
    sign = "-" if value < 0 else ""

    # zero has no leading digit
    if numb == 0:
        return "0." + "0" * precision

    exact = Decimal(numb)
    # digits before the decimal point
    scale = exact.adjusted() + 1
    with localcontext() as ctx:
        ctx.prec = max(precision, 1) + 30
        mantissa = exact.scaleb(precision - scale).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    n = str(int(mantissa))
    if len(n) > max(precision, 1):
        # rounding carried into a new digit, e.g. 9.9996 -> 10.00
        scale += 1
        n = n[:-1]
    if scale > 0:
        n = n.ljust(scale, "0")
        if scale < len(n):
            n = n[:scale] + "." + n[scale:]
    else:
        n = "0." + "0" * -scale + n
    return sign + n


def to_fixed(value: float, digits: int) -> str:
    """Format ``value`` with exactly ``digits`` decimals, rounding half-up.

    Rounding works on the exact binary value of the float, so ``1.005``
    (stored as 1.00499...) renders as ``"1.00"``.
    """
    value = float(value)
    if not math.isfinite(value):
        return _non_finite_text(value)
    if value == 0:
        value = 0.0  # drop the sign of -0.0
    quantum = Decimal(1).scaleb(-digits)
    return format(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP), "f")


def format_number(value: float) -> str:
    """Render a number the short way: ``12`` for 12.0, ``51.5`` for 51.5, ``NaN`` for NaN."""
    value = float(value)
    if not math.isfinite(value):
        return _non_finite_text(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)
