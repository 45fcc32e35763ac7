# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Calendar and time scales: Julian day numbers, sidereal time, Delta-T.

Day numbers are counted from the epoch 1900 January 0.5 (1899 December 31,
12h UT), referred to as DJD. Add DJD_TO_JD for the standard Julian Date.

Civil years have no year zero: the sequence is ..., -2, -1, 1, 2, ...
(year -1 is 1 BC). The conversion to astronomical numbering is internal.
The Gregorian calendar starts on 1582 October 15.

References:
    Peter Duffett-Smith, "Astronomy With Your Personal Computer",
    Cambridge University Press, 1995.
    Jean Meeus, "Astronomical Algorithms", Willmann-Bell, 1991.
    F. Espenak, J. Meeus, "Five Millennium Canon of Solar Eclipses",
    NASA/TP-2006-214141.
"""
import logging
import math
from datetime import datetime, timedelta, timezone

from skychart.domain.mathutils import ddd, frac, polynome, to_range

_log = logging.getLogger(__name__)

DJD_TO_JD: int = 2415020
DAYS_PER_CENT: int = 36525
SEC_PER_DAY: int = 86400

SOLAR_TO_SIDEREAL: float = 1.002737909350795
_SIDEREAL_TO_SOLAR: float = 0.9972695663
# Sidereal times earlier than this UT (0h03m56s) occur twice a day
_AMBIGUOUS_UTC: float = 0.06552


def _after_gregorian(year: int, month: int, day: float) -> bool:
    return (year, month, day) >= (1582, 10, 15)


def julian_day(year: int, month: int, day: float) -> float:
    """Days since 1900 January 0.5 for a civil calendar date.

    Args:
        year: Civil year, negative for BC, never zero.
        month: 1..12.
        day: Day of month, the fraction giving the time of day (UT).
    """
    y = year + 1 if year < 0 else year
    m = month
    if month < 3:
        m += 12
        y -= 1

    if _after_gregorian(year, month, day):
        a = math.trunc(y / 100)
        b = 2 - a + math.trunc(a / 4)
    else:
        b = 0

    f = 365.25 * y
    c = math.trunc(f - 0.75 if y < 0 else f) - 694025
    e = math.trunc(30.6001 * (m + 1))
    return b + c + e + day - 0.5


def calendar_day(djd: float) -> tuple[int, int, float]:
    """Civil (year, month, fractional day) for a DJD."""
    d = djd + 0.5
    f = frac(d)
    i = math.trunc(d - f)

    if i > -115860:
        a = math.floor(i / 36524.25 + 9.9835726e-1) + 14
        i += 1 + a - math.floor(a / 4)

    b = math.floor(i / 365.25 + 8.02601e-1)
    c = i - math.floor(365.25 * b + 7.50001e-1) + 416
    g = math.floor(c / 30.6001)
    day = c - math.floor(30.6001 * g) + f
    month = g - (13 if g > 13.5 else 1)
    year = b + (1900 if month < 2.5 else 1899)
    if year < 1:
        year -= 1
    return year, month, day


def djd_midnight(djd: float) -> float:
    """DJD of the Greenwich midnight preceding the given moment."""
    f = math.floor(djd)
    return f + (0.5 if abs(djd - f) >= 0.5 else -0.5)


def week_day(djd: float) -> int:
    """Day of the week, 0 = Sunday .. 6 = Saturday."""
    j0 = djd_midnight(djd) + DJD_TO_JD
    return int((j0 + 1.5) % 7)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def day_of_year(year: int, month: int, day: float) -> int:
    """Ordinal day of the year, 1 = January 1."""
    k = 1 if is_leap_year(year) else 2
    return math.floor(275 * month / 9) - k * math.floor((month + 9) / 12) + math.floor(day) - 30


def _long_term(y: float) -> float:
    u = (y - 1820.0) / 100.0
    return -20.0 + 32.0 * u * u


def delta_t(djd: float) -> float:
    """TT - UT in seconds for a DJD in Universal Time.

    Espenak & Meeus polynomial expressions, evaluated at the middle of the
    month. Before -500 and after 2150 the long-term parabola is used.
    """
    year, month, _ = calendar_day(djd)
    y = year + (month - 0.5) / 12.0

    if y < -500 or y > 2150:
        _log.warning("Delta-T for year %.1f is extrapolated", y)
        return _long_term(y)
    if y < 500:
        return polynome(y / 100.0, 10583.6, -1014.41, 33.78311, -5.952053,
                        -0.1798452, 0.022174192, 0.0090316521)
    if y < 1600:
        return polynome((y - 1000.0) / 100.0, 1574.2, -556.01, 71.23472, 0.319781,
                        -0.8503463, -0.005050998, 0.0083572073)
    if y < 1700:
        t = y - 1600.0
        return polynome(t, 120.0, -0.9808, -0.01532, 1.0 / 7129.0)
    if y < 1800:
        t = y - 1700.0
        return polynome(t, 8.83, 0.1603, -0.0059285, 0.00013336, -1.0 / 1174000.0)
    if y < 1860:
        t = y - 1800.0
        return polynome(t, 13.72, -0.332447, 0.0068612, 0.0041116, -0.00037436,
                        0.0000121272, -0.0000001699, 0.000000000875)
    if y < 1900:
        t = y - 1860.0
        return polynome(t, 7.62, 0.5737, -0.251754, 0.01680668, -0.0004473624,
                        1.0 / 233174.0)
    if y < 1920:
        t = y - 1900.0
        return polynome(t, -2.79, 1.494119, -0.0598939, 0.0061966, -0.000197)
    if y < 1941:
        t = y - 1920.0
        return polynome(t, 21.20, 0.84493, -0.076100, 0.0020936)
    if y < 1961:
        t = y - 1950.0
        return polynome(t, 29.07, 0.407, -1.0 / 233.0, 1.0 / 2547.0)
    if y < 1986:
        t = y - 1975.0
        return polynome(t, 45.45, 1.067, -1.0 / 260.0, -1.0 / 718.0)
    if y < 2005:
        t = y - 2000.0
        return polynome(t, 63.86, 0.3345, -0.060374, 0.0017275, 0.000651814,
                        0.00002373599)
    if y < 2050:
        t = y - 2000.0
        return polynome(t, 62.92, 0.32217, 0.005589)
    return _long_term(y) - 0.5628 * (2150.0 - y)


def _t0(djd: float) -> float:
    """Greenwich sidereal time at 0h UT, hours."""
    t = (djd_midnight(djd) - DAYS_PER_CENT) / DAYS_PER_CENT
    return to_range(polynome(t, 6.697374558, 2400.051336, 0.000025862), 24.0)


def local_sidereal(djd: float, lng: float = 0.0) -> float:
    """Local sidereal time in hours.

    Args:
        djd: Julian days since 1900 January 0.5, UT.
        lng: Geographic longitude in degrees, positive west.
    """
    ut = frac(djd - 0.5) * 24.0
    return to_range(_t0(djd) + ut * SOLAR_TO_SIDEREAL - lng / 15.0, 24.0)


def sidereal_to_utc(djd: float, lst: float, lng: float = 0.0) -> tuple[float, bool]:
    """Universal time on the date of djd at which local sidereal time is lst.

    Returns:
        (utc hours, unambiguous). The flag is False when the sidereal time
        occurs twice on that date; the earlier instant is returned.
    """
    gst = to_range(lst + lng / 15.0, 24.0)
    utc = to_range(gst - _t0(djd), 24.0) * _SIDEREAL_TO_SOLAR
    return utc, utc >= _AMBIGUOUS_UTC


def datetime_to_djd(dt: datetime) -> float:
    """DJD for a datetime. Naive datetimes are taken as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    hours = ddd(dt.hour, dt.minute, dt.second + dt.microsecond / 1e6)
    return julian_day(dt.year, dt.month, dt.day + hours / 24.0)


def djd_to_datetime(djd: float) -> datetime:
    """UTC datetime for a DJD, rounded to the microsecond.

    Raises:
        ValueError: The date falls outside the datetime range (years 1-9999).
    """
    year, month, day = calendar_day(djd)
    whole = math.floor(day)
    base = datetime(year, month, whole, tzinfo=timezone.utc)
    return base + timedelta(microseconds=round((day - whole) * SEC_PER_DAY * 1e6))
