# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Celestial coordinate conversions.

Pure spherical-trigonometry rotations between the equatorial, ecliptic and
horizontal frames. All angles are radians.

Frames:
    Equatorial -- right ascension (or hour angle) and declination
    Ecliptic   -- celestial longitude and latitude, referred to the equinox
    Horizontal -- azimuth, measured westward from the South, and altitude

Reference: Peter Duffett-Smith, "Astronomy With Your Personal Computer",
Cambridge University Press, 1995.
"""
import math

from skychart.domain.mathutils import PI2, reduce_rad

_EQU_TO_ECL: int = 1
_ECL_TO_EQU: int = -1


def _equ_ecl(x: float, y: float, eps: float, k: int) -> tuple[float, float]:
    sin_e, cos_e = math.sin(eps), math.cos(eps)
    sin_x = math.sin(x)
    a = math.atan2(sin_x * cos_e + k * (math.tan(y) * sin_e), math.cos(x))
    b = math.asin(math.sin(y) * cos_e - k * (math.cos(y) * sin_e * sin_x))
    return reduce_rad(a), b


def _equ_hor(x: float, y: float, phi: float) -> tuple[float, float]:
    sin_phi, cos_phi = math.sin(phi), math.cos(phi)
    sq = math.sin(y) * sin_phi + math.cos(y) * cos_phi * math.cos(x)
    q = math.asin(sq)
    cp = (math.sin(y) - sin_phi * sq) / (cos_phi * math.cos(q))
    # rounding can push the cosine just outside [-1, 1] near the meridian
    p = math.acos(max(-1.0, min(1.0, cp)))
    if math.sin(x) > 0:
        p = PI2 - p
    return p, q


def equ_to_ecl(ra: float, dec: float, eps: float) -> tuple[float, float]:
    """
    Equatorial to ecliptic coordinates.

    Args:
        ra: Right ascension, radians.
        dec: Declination, radians.
        eps: Obliquity of the ecliptic, radians.

    Returns:
        (longitude in [0, 2pi), latitude).
    """
    return _equ_ecl(ra, dec, eps, _EQU_TO_ECL)


def ecl_to_equ(lon: float, lat: float, eps: float) -> tuple[float, float]:
    """Ecliptic to equatorial coordinates: (right ascension in [0, 2pi), declination)."""
    return _equ_ecl(lon, lat, eps, _ECL_TO_EQU)


def equ_to_hor(ha: float, dec: float, phi: float) -> tuple[float, float]:
    """
    Equatorial to horizontal coordinates.

    Args:
        ha: Local hour angle, radians.
        dec: Declination, radians.
        phi: Geographic latitude, radians.

    Returns:
        (azimuth, altitude); azimuth counted from the South through West.
    """
    return _equ_hor(ha, dec, phi)


def hor_to_equ(az: float, alt: float, phi: float) -> tuple[float, float]:
    """Horizontal to equatorial coordinates: (hour angle, declination).

    The transformation is symmetric, so this is the same rotation as
    equ_to_hor.
    """
    return _equ_hor(az, alt, phi)
