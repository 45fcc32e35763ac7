# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Nutation in longitude and obliquity, and the obliquity of the ecliptic.

The nutation series keeps the thirteen largest terms in longitude and nine
in obliquity, for an accuracy of about one arcsecond. Arguments are the
mean longitudes of the Sun (L) and Moon (L'), their mean anomalies (M, M')
and the longitude of the Moon's ascending node (N).

References:
    Peter Duffett-Smith, "Astronomy With Your Personal Computer",
    Cambridge University Press, 1995.
    Jean Meeus, "Astronomical Algorithms", Willmann-Bell, 1991, Ch. 21.
"""
import numpy as np

from skychart.domain.mathutils import frac360

# Multipliers of (L, M, L', M', N) for each term
_DPSI_MULTS = np.array([
    [0, 0, 0, 0, 1],
    [2, 0, 0, 0, 0],
    [0, 0, 0, 0, 2],
    [0, 0, 2, 0, 0],
    [0, 1, 0, 0, 0],
    [0, 0, 0, 1, 0],
    [2, 1, 0, 0, 0],
    [0, 0, 2, 0, -1],
    [0, 0, 2, 1, 0],
    [2, -1, 0, 0, 0],
    [2, 0, -2, 1, 0],
    [2, 0, 0, 0, -1],
    [0, 0, 2, -1, 0],
], dtype=np.float64)

# Sine amplitudes in arcseconds: constant part and rate per century
_DPSI_COEFFS = np.array([
    [-17.2327, -1.737e-2],
    [-1.2729, -1.3e-4],
    [2.088e-1, 0.0],
    [-2.037e-1, 0.0],
    [1.261e-1, -3.1e-4],
    [6.75e-2, 0.0],
    [-4.97e-2, 1.2e-4],
    [-3.42e-2, 0.0],
    [-2.61e-2, 0.0],
    [2.14e-2, 0.0],
    [-1.49e-2, 0.0],
    [1.24e-2, 0.0],
    [1.14e-2, 0.0],
])

_DEPS_MULTS = np.array([
    [0, 0, 0, 0, 1],
    [2, 0, 0, 0, 0],
    [0, 0, 0, 0, 2],
    [0, 0, 2, 0, 0],
    [2, 1, 0, 0, 0],
    [0, 0, 2, 0, -1],
    [0, 0, 2, 1, 0],
    [2, -1, 0, 0, 0],
    [2, 0, 0, 0, -1],
], dtype=np.float64)

# Cosine amplitudes in arcseconds: constant part and rate per century
_DEPS_COEFFS = np.array([
    [9.21, 9.1e-4],
    [5.522e-1, -2.9e-4],
    [-9.04e-2, 0.0],
    [8.84e-2, 0.0],
    [2.16e-2, 0.0],
    [1.83e-2, 0.0],
    [1.13e-2, 0.0],
    [-9.3e-3, 0.0],
    [-6.6e-3, 0.0],
])


def fundamental_arguments(t: float) -> np.ndarray:
    """(L, M, L', M', N) in radians at t Julian centuries since 1900."""
    t2 = t * t
    return np.radians([
        2.796967e2 + 3.030e-4 * t2 + frac360(1.000021358e2 * t),
        3.584758e2 - 1.500e-4 * t2 + frac360(9.999736056e1 * t),
        2.704342e2 - 1.133e-3 * t2 + frac360(1.336855231e3 * t),
        2.961046e2 + 9.192e-3 * t2 + frac360(1.325552359e3 * t),
        2.591833e2 + 2.078e-3 * t2 - frac360(5.372616667 * t),
    ])


def nutation(t: float) -> tuple[float, float]:
    """Nutation in longitude and in obliquity.

    Args:
        t: Julian centuries since 1900 January 0.5.

    Returns:
        (dpsi, deps) in degrees.
    """
    args = fundamental_arguments(t)
    dpsi = np.sum((_DPSI_COEFFS[:, 0] + _DPSI_COEFFS[:, 1] * t) * np.sin(_DPSI_MULTS @ args))
    deps = np.sum((_DEPS_COEFFS[:, 0] + _DEPS_COEFFS[:, 1] * t) * np.cos(_DEPS_MULTS @ args))
    return float(dpsi) / 3600.0, float(deps) / 3600.0


def obliquity(djd: float, deps: float = 0.0) -> float:
    """Obliquity of the ecliptic in degrees.

    Args:
        djd: Julian days since 1900 January 0.5.
        deps: Nutation in obliquity, degrees. With the default of zero the
            result is the mean obliquity; with the nutation it is the true one.
    """
    t = djd / 36525.0
    c = (((-0.00181 * t) + 0.0059) * t + 46.845) * t
    return 23.45229444 - (c / 3600.0) + deps


def mean_obliquity(djd: float) -> float:
    """Mean obliquity of the ecliptic in degrees."""
    return obliquity(djd)


def true_obliquity(djd: float) -> float:
    """Mean obliquity plus nutation in obliquity, degrees."""
    return obliquity(djd, nutation(djd / 36525.0)[1])
