# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Geocentric position of the Moon and its ascending node.

Truncated lunar theory: the mean elements of the Moon are corrected for
the long-period terms and the periodic series in longitude (50 terms),
latitude (45 terms) and horizontal parallax (30 terms) are summed over
multiples of the Sun's mean anomaly (M), the Moon's mean anomaly (M'),
the mean elongation (D) and the argument of latitude (F). Terms involving
M are scaled by the eccentricity factor E (or E squared).

Accuracy: ~0.003 degree in longitude over 1900-2100.

References:
    Peter Duffett-Smith, "Astronomy With Your Personal Computer",
    Cambridge University Press, 1995.
    Jean Meeus, "Astronomical Algorithms", Willmann-Bell, 1991, Ch. 45 and 47.
"""
import math
from dataclasses import dataclass

import numpy as np

from skychart.domain.mathutils import polynome, reduce_deg, reduce_rad

EARTH_RADIUS_KM: float = 6378.14
AU_KM: float = 149597870.7
J2000_DJD: float = 36525.0  # 2000 January 1.5

# Periods in days of ld, ms, md, de, f and node regression
_PERIODS = np.array([
    27.32158213, 365.2596407, 27.55455094, 29.53058868, 27.21222039, 6798.363307,
])

# --------------------------------------------------------------------------- #
# Periodic terms: coefficient (degrees), power of E, multipliers of M, M', D, F
# --------------------------------------------------------------------------- #

_LONGITUDE_TERMS = np.array([
    [6.28875, 0, 0, 1, 0, 0],
    [1.274018, 0, 0, -1, 2, 0],
    [.658309, 0, 0, 0, 2, 0],
    [.213616, 0, 0, 2, 0, 0],
    [-.185596, 1, 1, 0, 0, 0],
    [-.114336, 0, 0, 0, 0, 2],
    [.058793, 0, 0, -2, 2, 0],
    [.057212, 1, -1, -1, 2, 0],
    [.05332, 0, 0, 1, 2, 0],
    [.045874, 1, -1, 0, 2, 0],
    [.041024, 1, -1, 1, 0, 0],
    [-.034718, 0, 0, 0, 1, 0],
    [-.030465, 1, 1, 1, 0, 0],
    [.015326, 0, 0, 0, 2, -2],
    [-.012528, 0, 0, 1, 0, 2],
    [-.01098, 0, 0, -1, 0, 2],
    [.010674, 0, 0, -1, 4, 0],
    [.010034, 0, 0, 3, 0, 0],
    [.008548, 0, 0, -2, 4, 0],
    [-.00791, 1, 1, -1, 2, 0],
    [-.006783, 1, 1, 0, 2, 0],
    [.005162, 0, 0, 1, -1, 0],
    [.005, 1, 1, 0, 1, 0],
    [.003862, 0, 0, 0, 4, 0],
    [.004049, 1, -1, 1, 2, 0],
    [.003996, 0, 0, 2, 2, 0],
    [.003665, 0, 0, -3, 2, 0],
    [.002695, 1, -1, 2, 0, 0],
    [.002602, 0, 0, 1, -2, -2],
    [.002396, 1, -1, -2, 2, 0],
    [-.002349, 0, 0, 1, 1, 0],
    [.002249, 2, -2, 0, 2, 0],
    [-.002125, 1, 1, 2, 0, 0],
    [-.002079, 2, 2, 0, 0, 0],
    [.002059, 2, -2, -1, 2, 0],
    [-.001773, 0, 0, 1, 2, -2],
    [-.001595, 0, 0, 0, 2, 2],
    [.00122, 1, -1, -1, 4, 0],
    [-.00111, 0, 0, 2, 0, 2],
    [.000892, 0, 0, 1, -3, 0],
    [-.000811, 1, 1, 1, 2, 0],
    [.000761, 1, -1, -2, 4, 0],
    [.000704, 2, -2, 1, -2, 0],
    [.000693, 1, 1, -2, 2, 0],
    [.000598, 1, -1, 0, 2, -2],
    [.00055, 0, 0, 1, 4, 0],
    [.000538, 0, 0, 4, 0, 0],
    [.000521, 1, -1, 0, 4, 0],
    [.000486, 0, 0, 2, -1, 0],
    [.000717, 2, -2, 1, 0, 0],
])

_LATITUDE_TERMS = np.array([
    [5.128189, 0, 0, 0, 0, 1],
    [.280606, 0, 0, 1, 0, 1],
    [.277693, 0, 0, 1, 0, -1],
    [.173238, 0, 0, 0, 2, -1],
    [.055413, 0, 0, -1, 2, 1],
    [.046272, 0, 0, -1, 2, -1],
    [.032573, 0, 0, 0, 2, 1],
    [.017198, 0, 0, 2, 0, 1],
    [.009267, 0, 0, 1, 2, -1],
    [.008823, 0, 0, 2, 0, -1],
    [.008247, 1, -1, 0, 2, -1],
    [.004323, 0, 0, -2, 2, -1],
    [.0042, 0, 0, 1, 2, 1],
    [.003372, 1, -1, 0, -2, 1],
    [.002472, 1, -1, -1, 2, 1],
    [.002222, 1, -1, 0, 2, 1],
    [.002072, 1, -1, -1, 2, -1],
    [.001877, 1, -1, 1, 0, 1],
    [.001828, 0, 0, -1, 4, -1],
    [-.001803, 1, 1, 0, 0, 1],
    [-.00175, 0, 0, 0, 0, 3],
    [.00157, 1, -1, 1, 0, -1],
    [-.001487, 0, 0, 0, 1, 1],
    [-.001481, 1, 1, 1, 0, 1],
    [.001417, 1, -1, -1, 0, 1],
    [.00135, 1, -1, 0, 0, 1],
    [.00133, 0, 0, 0, -1, 1],
    [.001106, 0, 0, 3, 0, 1],
    [.00102, 0, 0, 0, 4, -1],
    [.000833, 0, 0, -1, 4, 1],
    [.000781, 0, 0, 1, 0, -3],
    [.00067, 0, 0, -2, 4, 1],
    [.000606, 0, 0, 0, 2, -3],
    [.000597, 0, 0, 2, 2, -1],
    [.000492, 1, -1, 1, 2, -1],
    [.00045, 0, 0, 2, -2, -1],
    [.000439, 0, 0, 3, 0, -1],
    [.000423, 0, 0, 2, 2, 1],
    [.000422, 0, 0, -3, 2, -1],
    [-.000367, 1, 1, -1, 2, 1],
    [-.000353, 1, 1, 0, 2, 1],
    [.000331, 0, 0, 0, 4, 1],
    [.000317, 1, -1, 1, 2, 1],
    [.000306, 2, -2, 0, 2, -1],
    [-.000283, 0, 0, 1, 0, 3],
])

# Horizontal parallax: cosine terms added to a mean value of 0.950724 degree
_PARALLAX_MEAN: float = .950724
_PARALLAX_TERMS = np.array([
    [.051818, 0, 0, 1, 0, 0],
    [.009531, 0, 0, -1, 2, 0],
    [.007843, 0, 0, 0, 2, 0],
    [.002824, 0, 0, 2, 0, 0],
    [.000857, 0, 0, 1, 2, 0],
    [.000533, 1, -1, 0, 2, 0],
    [.000401, 1, -1, -1, 2, 0],
    [.00032, 1, -1, 1, 0, 0],
    [-.000271, 0, 0, 0, 1, 0],
    [-.000264, 1, 1, 1, 0, 0],
    [-.000198, 0, 0, -1, 0, 2],
    [.000173, 0, 0, 3, 0, 0],
    [.000167, 0, 0, -1, 4, 0],
    [-.000111, 1, 1, 0, 0, 0],
    [.000103, 0, 0, -2, 4, 0],
    [-.000084, 0, 0, 2, -2, 0],
    [-.000083, 1, 1, 0, 2, 0],
    [.000079, 0, 0, 2, 2, 0],
    [.000072, 0, 0, 0, 4, 0],
    [.000064, 1, -1, 1, 2, 0],
    [-.000063, 1, 1, -1, 2, 0],
    [.000041, 1, 1, 0, 1, 0],
    [.000035, 1, -1, 2, 0, 0],
    [-.000033, 0, 0, 3, -2, 0],
    [-.00003, 0, 0, 1, 1, 0],
    [-.000029, 0, 0, 0, -2, 2],
    [-.000029, 1, 1, 2, 0, 0],
    [.000026, 2, -2, 0, 2, 0],
    [-.000023, 0, 0, 1, -2, 2],
    [.000019, 1, -1, -1, 4, 0],
])

# Daily motion in longitude: cosine terms added to the mean rate, degrees/day
_MEAN_DAILY_MOTION: float = 13.176397
_MOTION_TERMS = np.array([
    [1.434006, 0, 0, 1, 0, 0],
    [.251632, 0, 0, -1, 2, 0],
    [.280135, 0, 0, 0, 2, 0],
    [.09742, 0, 0, 2, 0, 0],
    [-.003193, 1, 1, 0, 0, 0],
    [-.052799, 0, 0, 0, 0, 2],
    [.010316, 1, -1, -1, 2, 0],
    [.034848, 0, 0, 1, 2, 0],
    [.018732, 1, -1, 0, 2, 0],
    [.008649, 1, -1, 1, 0, 0],
    [-.007387, 0, 0, 0, 1, 0],
    [-.007471, 1, 1, 1, 0, 0],
    [-.008642, 0, 0, 1, 0, 2],
    [-.002567, 0, 0, -1, 0, 2],
    [.00665, 0, 0, -1, 4, 0],
    [.006864, 0, 0, 3, 0, 0],
    [.003377, 0, 0, -2, 4, 0],
    [-.003003, 1, 1, 0, 2, 0],
    [.003287, 0, 0, 0, 4, 0],
    [.002577, 1, -1, 1, 2, 0],
    [.003523, 0, 0, 2, 2, 0],
])


@dataclass(frozen=True)
class MoonArguments:
    """Corrected mean elements of the Moon at one instant.

    Angles are in radians.
    """
    t: float
    ld: float  # mean longitude
    ms: float  # Sun's mean anomaly
    md: float  # Moon's mean anomaly
    de: float  # mean elongation
    f: float  # argument of latitude
    n: float  # longitude of the ascending node
    c: float  # node-dependent latitude argument
    e: float  # eccentricity factor


@dataclass(frozen=True)
class MoonPosition:
    """True geocentric position of the Moon."""
    l: float  # ecliptic longitude, radians
    b: float  # ecliptic latitude, radians
    d: float  # distance, AU
    hp: float  # horizontal parallax, degrees
    dm: float  # daily motion in longitude, degrees/day


def mean_arguments(djd: float) -> MoonArguments:
    """Mean elements of the Moon corrected for long-period terms."""
    t = djd / 36525.0
    t2 = t * t
    m1, m2, m3, m4, m5, m6 = 360.0 * np.fmod(djd / _PERIODS, 1.0)

    ld = 270.434164 + m1 - (.001133 - .0000019 * t) * t2
    ms = 358.475833 + m2 - (.00015 + .0000033 * t) * t2
    md = 296.104608 + m3 + (.009192 + .0000144 * t) * t2
    de = 350.737486 + m4 - (.001436 - .0000019 * t) * t2
    f = 11.250889 + m5 - (.003211 + .0000003 * t) * t2
    n = 259.183275 - m6 + (.002078 + .0000022 * t) * t2

    sa = math.sin(math.radians(51.2 + 20.2 * t))
    sn = math.sin(math.radians(n))
    b = 346.56 + (132.87 - .0091731 * t) * t
    s = .003964 * math.sin(math.radians(b))
    c = math.radians(n + 275.05 - 2.3 * t)

    ld += .000233 * sa + s + .001964 * sn
    ms -= .001778 * sa
    md += .000817 * sa + s + .002541 * sn
    f += s - .024691 * sn - .004328 * math.sin(c)
    de += .002011 * sa + s + .001964 * sn
    e = 1.0 - (.002495 + 7.52e-06 * t) * t

    return MoonArguments(
        t=t,
        ld=math.radians(ld),
        ms=math.radians(ms),
        md=math.radians(md),
        de=math.radians(de),
        f=math.radians(f),
        n=math.radians(n),
        c=c,
        e=e,
    )


def _series(terms: np.ndarray, args: MoonArguments, trig) -> float:
    """Sum coef * E^k * trig(mults . (M, M', D, F)) over a term table."""
    angles = terms[:, 2:] @ np.array([args.ms, args.md, args.de, args.f])
    return float(np.sum(terms[:, 0] * args.e ** terms[:, 1] * trig(angles)))


def true_position(djd: float) -> MoonPosition:
    """Geocentric ecliptic position of the Moon, mean equinox of date.

    Args:
        djd: Julian days since 1900 January 0.5 (dynamical time).
    """
    args = mean_arguments(djd)

    lam = reduce_rad(args.ld + math.radians(_series(_LONGITUDE_TERMS, args, np.sin)))

    g = _series(_LATITUDE_TERMS, args, np.sin)
    w1 = .0004664 * math.cos(args.n)
    w2 = .0000754 * math.cos(args.c)
    bet = math.radians(g) * (1.0 - w1 - w2)

    hp = _PARALLAX_MEAN + _series(_PARALLAX_TERMS, args, np.cos)
    dist = EARTH_RADIUS_KM / math.sin(math.radians(hp)) / AU_KM

    dm = _MEAN_DAILY_MOTION + _series(_MOTION_TERMS, args, np.cos)

    return MoonPosition(l=lam, b=bet, d=dist, hp=hp, dm=dm)


def _centuries_j2000(djd: float) -> float:
    return (djd - J2000_DJD) / 36525.0


def _mean_node_deg(tc: float) -> float:
    return polynome(tc, 125.0445479, -1934.1362891, 0.0020754,
                    1.0 / 467441.0, -1.0 / 60616000.0)


def mean_node(djd: float) -> float:
    """Longitude of the mean ascending node in radians.

    Meeus (47.7), with T in Julian centuries from J2000.0.
    """
    return math.radians(reduce_deg(_mean_node_deg(_centuries_j2000(djd))))


def true_node(djd: float) -> float:
    """Longitude of the true ascending node in radians.

    Mean node corrected by the five largest periodic terms (Meeus Ch. 47).
    """
    tc = _centuries_j2000(djd)
    t2 = tc * tc
    d = math.radians(297.8501921 + 445267.1114034 * tc - 0.0018819 * t2)
    m = math.radians(357.5291092 + 35999.0502909 * tc - 0.0001536 * t2)
    mp = math.radians(134.9633964 + 477198.8675055 * tc + 0.0087414 * t2)
    f = math.radians(93.2720950 + 483202.0175233 * tc - 0.0036539 * t2)
    om = (_mean_node_deg(tc)
          - 1.4979 * math.sin(2 * (d - f))
          - 0.15 * math.sin(m)
          - 0.1226 * math.sin(2 * d)
          + 0.1176 * math.sin(2 * f)
          + 0.0801 * math.sin(2 * (mp - f)))
    return math.radians(reduce_deg(om))


def node(djd: float, true: bool = True) -> float:
    """Longitude of the Moon's ascending node, true or mean, radians."""
    return true_node(djd) if true else mean_node(djd)
