# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Angle and number helpers used throughout the ephemeris.

Fractional parts keep the sign of their argument (``frac(-5.5) == -0.5``),
unlike floor-based modulo. Range reduction is a true modulo into [0, r).
"""
import math
from functools import reduce

PI2: float = 2.0 * math.pi
PI_HALF: float = math.pi / 2.0


def frac(x: float) -> float:
    """Fractional part of x, with the sign of x."""
    return math.fmod(x, 1.0)


def frac360(x: float) -> float:
    """Fractional part of x scaled to degrees.

    Used to strip whole revolutions from fast-moving angular terms before
    slow polynomial terms are added.
    """
    return frac(x) * 360.0


def to_range(x: float, r: float) -> float:
    """Reduce x to 0 <= x < r."""
    a = math.fmod(x, r)
    if a < 0:
        a += r
    # a tiny negative x rounds up to r itself
    return 0.0 if a >= r else a


def reduce_deg(x: float) -> float:
    """Reduce x to 0 <= x < 360."""
    return to_range(x, 360.0)


def reduce_rad(x: float) -> float:
    """Reduce x to 0 <= x < 2pi."""
    return to_range(x, PI2)


def polynome(t: float, *terms: float) -> float:
    """Evaluate terms[0] + terms[1]*t + terms[2]*t^2 + ... by Horner's rule."""
    return reduce(lambda acc, b: acc * t + b, reversed(terms))


def dms(x: float, places: int = 3) -> tuple:
    """Split decimal degrees (or hours) into (int, int, float) components.

    Only the first non-zero component carries the sign:
    ``dms(-37.5833...) == (-37, 35, 0.0)`` and ``dms(-1/6) == (0, -10, 0.0)``.
    """
    if places == 1:
        return (x + 0.0,)  # no negative zero
    f = frac(x)
    i = int(x - f)
    if i != 0 and f < 0:
        f = -f
    return (i,) + dms(f * 60.0, places - 1)


def zdms(x: float) -> tuple:
    """Decimal degrees to (zodiac sign 0..11, degrees, minutes, seconds)."""
    d, m, s = dms(x)
    return (d // 30, d % 30, m, s)


def ddd(*vals: float) -> float:
    """Sexagesimal components to decimal; negative if any component is."""
    sign = -1.0 if any(v < 0 for v in vals) else 1.0
    res = reduce(
        lambda acc, b: acc / 60.0 + abs(b),
        reversed(vals[:-1]),
        abs(vals[-1]),
    )
    return res * sign


def diff_angle(a: float, b: float) -> float:
    """b - a in radians, in the range (-pi, pi], across the 0/2pi seam."""
    x = b + PI2 - a if b < a else b - a
    return x - PI2 if x > math.pi else x


def diff_angle_deg(a: float, b: float) -> float:
    """b - a in degrees, in the range (-180, 180], across the 0/360 seam."""
    x = b + 360.0 - a if b < a else b - a
    return x - 360.0 if x > 180.0 else x
