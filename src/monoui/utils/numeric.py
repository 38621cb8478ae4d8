"""Floating-point comparison and clamping helpers.

Equality on the geometry types is exact. These helpers back the
``nearly_equals`` predicates and the range clamping done by the
cylindrical color models.
"""

from __future__ import annotations

import math
from decimal import Decimal

# Smallest e such that 1.0 + e != 1.0
DOUBLE_EPSILON = 2.2204460492503131e-16


def are_close(value1: float, value2: float) -> bool:
    """Return True if two doubles are equal within a relative+absolute epsilon.

    The tolerance scales with the magnitude of the operands and has a floor
    of ``10 * DOUBLE_EPSILON`` so values near zero still compare sensibly.

    Args:
        value1: First value.
        value2: Second value.

    Returns:
        True if the values are identical or differ by less than the tolerance.
    """
    # Also catches matching infinities
    if value1 == value2:
        return True
    eps = (abs(value1) + abs(value2) + 10.0) * DOUBLE_EPSILON
    delta = value1 - value2
    return -eps < delta < eps


def is_zero(value: float) -> bool:
    """Return True if value is within 10 epsilon of zero."""
    return abs(value) < 10.0 * DOUBLE_EPSILON


def is_one(value: float) -> bool:
    """Return True if value is within 10 epsilon of one."""
    return abs(value - 1.0) < 10.0 * DOUBLE_EPSILON


def less_than_or_close(value1: float, value2: float) -> bool:
    return value1 < value2 or are_close(value1, value2)


def greater_than_or_close(value1: float, value2: float) -> bool:
    return value1 > value2 or are_close(value1, value2)


def ieee_divide(dividend: float, divisor: float) -> float:
    """Divide with IEEE-754 results for a zero divisor.

    A non-zero dividend gives an infinity signed by both operands; a zero or
    NaN dividend gives NaN.

    Example:
        >>> ieee_divide(1.0, -0.0)
        -inf
    """
    if divisor != 0:
        return dividend / divisor
    if dividend == 0 or math.isnan(dividend):
        return math.nan
    return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp value into ``[minimum, maximum]``.

    NaN orders below every number, so it clamps to ``minimum``.

    Raises:
        ValueError: If minimum is greater than maximum.
    """
    if minimum > maximum:
        raise ValueError(f"minimum ({minimum}) cannot be greater than maximum ({maximum})")
    if math.isnan(value) or value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def format_invariant(value: float) -> str:
    """Format a double with invariant-culture rules.

    Uses the shortest digits that round-trip, ``.`` as the decimal separator
    and no thousands separator. Values whose decimal exponent is below -4 or
    at least 15 switch to scientific form with a signed two-digit exponent.

    Example:
        >>> format_invariant(120.0)
        '120'
        >>> format_invariant(0.25)
        '0.25'
        >>> format_invariant(1e-05)
        '1E-05'
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    shortest = Decimal(repr(value)).normalize()
    sign, digits, exponent = shortest.as_tuple()
    point = len(digits) - 1 + int(exponent)
    if -5 < point < 15:
        return format(shortest, "f")

    mantissa = "".join(str(d) for d in digits)
    if len(mantissa) > 1:
        mantissa = f"{mantissa[0]}.{mantissa[1:]}"
    exponent_sign = "+" if point >= 0 else "-"
    return f"{'-' if sign else ''}{mantissa}E{exponent_sign}{abs(point):02d}"
