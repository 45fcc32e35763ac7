# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Lunar phases.

Times of New Moon, First Quarter, Full Moon and Last Quarter from the mean
lunation number k and a short periodic correction series in the mean
anomalies of Sun and Moon and the Moon's argument of latitude.

Reference: Jean Meeus, "Astronomical Algorithms", Willmann-Bell, 1991,
Ch. 47 (mean phases referred to 1900).
"""
import math
from enum import Enum

from skychart.domain.ephemeris_contracts import ConfigurationError
from skychart.domain.mathutils import polynome, reduce_deg
from skychart.domain.time_systems import day_of_year, is_leap_year

# Lunations per year
_LUNATIONS_PER_YEAR: float = 12.3685

# Polynomials in (k, t^2, t^3) of the fundamental arguments, degrees
_SUN_ANOMALY = (359.2242, 29.105356080, -0.0000333, -0.00000347)
_MOON_ANOMALY = (306.0253, 385.81691806, 0.0107306, 0.00001236)
_MOON_LATITUDE = (21.2964, 390.67050646, -0.0016528, -0.00000239)


class Quarter(Enum):
    NEW_MOON = "New Moon"
    FIRST_QUARTER = "First Quarter"
    FULL_MOON = "Full Moon"
    LAST_QUARTER = "Last Quarter"

    @property
    def coeff(self) -> float:
        """Fraction of the lunation at which this phase occurs."""
        return _COEFFS[self]


_COEFFS = {
    Quarter.NEW_MOON: 0.0,
    Quarter.FIRST_QUARTER: 0.25,
    Quarter.FULL_MOON: 0.5,
    Quarter.LAST_QUARTER: 0.75,
}


def _new_full_delta(t: float, ms: float, mm: float, f: float) -> float:
    return ((1.734e-1 - 3.93e-4 * t) * math.sin(ms)
            + 2.1e-3 * math.sin(2 * ms)
            - 4.068e-1 * math.sin(mm)
            + 1.61e-2 * math.sin(2 * mm)
            - 4e-4 * math.sin(3 * mm)
            + 1.04e-2 * math.sin(2 * f)
            - 5.1e-3 * math.sin(ms + mm)
            - 7.4e-3 * math.sin(ms - mm)
            + 4e-4 * math.sin(2 * f + ms)
            - 4e-4 * math.sin(2 * f - ms)
            - 6e-4 * math.sin(2 * f + mm)
            + 1e-3 * math.sin(2 * f - mm)
            + 5e-4 * math.sin(ms + 2 * mm))


def _quarter_delta(t: float, ms: float, mm: float, f: float) -> float:
    return ((0.1721 - 0.0004 * t) * math.sin(ms)
            + 0.0021 * math.sin(2 * ms)
            - 0.6280 * math.sin(mm)
            + 0.0089 * math.sin(2 * mm)
            - 0.0004 * math.sin(3 * mm)
            + 0.0079 * math.sin(2 * f)
            - 0.0119 * math.sin(ms + mm)
            - 0.0047 * math.sin(ms - mm)
            + 0.0003 * math.sin(2 * f + ms)
            - 0.0004 * math.sin(2 * f - ms)
            - 0.0006 * math.sin(2 * f + mm)
            + 0.0021 * math.sin(2 * f - mm)
            + 0.0003 * math.sin(ms + 2 * mm)
            + 0.0004 * math.sin(ms - 2 * mm)
            - 0.0003 * math.sin(2 * ms + mm))


def _argument(terms: tuple[float, float, float, float], k: float, t2: float, t3: float) -> float:
    a0, a1, a2, a3 = terms
    return math.radians(reduce_deg(a0 + a1 * k + a2 * t2 + a3 * t3))


def _as_quarter(quarter: Quarter | str) -> Quarter:
    if isinstance(quarter, Quarter):
        return quarter
    try:
        return Quarter(quarter)
    except ValueError:
        try:
            return Quarter[quarter]
        except KeyError:
            raise ConfigurationError(f"Unknown lunar quarter: {quarter!r}") from None


def find_closest(quarter: Quarter | str, year: int, month: int, day: float) -> float:
    """DJD of the lunar phase nearest to a calendar date.

    Args:
        quarter: Phase, as a Quarter or its name ("Full Moon" or "FULL_MOON").
        year, month, day: Civil date to search around.

    Raises:
        ConfigurationError: Unknown quarter name.
    """
    quarter = _as_quarter(quarter)
    n = 366 if is_leap_year(year) else 365
    y = year + day_of_year(year, month, day) / n
    k = math.floor((y - 1900) * _LUNATIONS_PER_YEAR + 0.5) + quarter.coeff

    t = k / 1236.85
    t2 = t * t
    t3 = t2 * t
    c = math.radians(166.56 + (132.87 - 9.173e-3 * t) * t)
    # mean phase
    j = polynome(k, 0.75933, 29.53058868) + 0.0001178 * t2 - 1.55e-07 * t3 + 3.3e-4 * math.sin(c)

    ms = _argument(_SUN_ANOMALY, k, t2, t3)
    mm = _argument(_MOON_ANOMALY, k, t2, t3)
    f = _argument(_MOON_LATITUDE, k, t2, t3)

    if quarter in (Quarter.NEW_MOON, Quarter.FULL_MOON):
        return j + _new_full_delta(t, ms, mm, f)
    w = 0.0028 - 0.0004 * math.cos(ms) + 0.0003 * math.cos(ms)
    delta = _quarter_delta(t, ms, mm, f)
    return j + delta + w if quarter is Quarter.FIRST_QUARTER else j + delta - w
