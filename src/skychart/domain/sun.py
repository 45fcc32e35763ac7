# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Analytical solar ephemeris.

True geocentric longitude of the Sun for the mean equinox of date and the
Earth-Sun distance. The two-body solution of Kepler's equation is corrected
for the perturbations of Venus, Jupiter and the Moon and for the long-period
inequality. Accuracy ~0.01 degree over 1900-2100.

Reference: Peter Duffett-Smith, "Astronomy With Your Personal Computer",
Cambridge University Press, 1995.
"""
import math
from dataclasses import dataclass

import numpy as np

from skychart.domain.kepler import solve_kepler, true_anomaly
from skychart.domain.mathutils import frac360, polynome, reduce_deg, reduce_rad

# Eccentricity of the Earth's orbit: e0 + e1*t + e2*t^2
_ECCENTRICITY = (1.675104e-2, -4.18e-5, -1.26e-7)

# (phase in degrees, revolutions per Julian century) of the perturbing arguments
_PERTURBERS = (
    (153.23, 6.255209472e1),  # Venus
    (216.57, 1.251041894e2),  # Venus, second harmonic
    (312.69, 9.156766028e1),  # Jupiter
    (350.74, 1.236853095e3),  # Moon
    (353.4, 1.831353208e2),  # Jupiter, second harmonic
)

# Amplitudes of the perturbing arguments (Venus, Venus 2, Jupiter, Moon,
# Jupiter 2, long-period inequality) in cosine and sine
_DL_COS = np.array([1.34e-3, 1.54e-3, 2e-3, 0.0, 0.0, 0.0])  # degrees
_DL_SIN = np.array([0.0, 0.0, 0.0, 1.79e-3, 0.0, 1.78e-3])
_DR_COS = np.array([0.0, 0.0, 0.0, 3.076e-5, 0.0, 0.0])  # AU
_DR_SIN = np.array([5.43e-6, 1.575e-5, 1.627e-5, 0.0, 9.27e-6, 0.0])

_PHASES = np.array([p for p, _ in _PERTURBERS])
_RATES = np.array([n for _, n in _PERTURBERS])


@dataclass(frozen=True)
class SunPosition:
    """True geocentric position of the Sun."""
    l: float  # ecliptic longitude, radians
    r: float  # Earth-Sun distance, AU


def mean_longitude(t: float) -> float:
    """Mean longitude of the Sun in degrees, t in Julian centuries since 1900."""
    return reduce_deg(2.7969668e2 + 3.025e-4 * t * t + frac360(1.000021359e2 * t))


def mean_anomaly(t: float) -> float:
    """Mean anomaly of the Sun in degrees, t in Julian centuries since 1900."""
    return reduce_deg(
        3.5847583e2 - (1.5e-4 + 3.3e-6 * t) * t * t + frac360(9.999736042e1 * t)
    )


def true_geocentric(t: float, ms: float | None = None) -> SunPosition:
    """True geocentric longitude and distance of the Sun.

    Args:
        t: Julian centuries since 1900 January 0.5.
        ms: Precomputed mean anomaly in degrees; computed from t when None.

    Returns:
        SunPosition with longitude in radians and distance in AU.
    """
    if ms is None:
        ms = mean_anomaly(t)
    ls = mean_longitude(t)
    ma = math.radians(ms)
    s = polynome(t, *_ECCENTRICITY)
    ea = solve_kepler(s, reduce_rad(ma))
    nu = true_anomaly(s, ea)

    phases = _PHASES.copy()
    phases[3] -= 1.44e-3 * t * t
    args = np.radians(np.append(
        phases + np.fmod(_RATES * t, 1.0) * 360.0,
        231.19 + 20.2 * t,  # long-period inequality
    ))
    cos_args, sin_args = np.cos(args), np.sin(args)
    dl = float(_DL_COS @ cos_args + _DL_SIN @ sin_args)
    dr = float(_DR_COS @ cos_args + _DR_SIN @ sin_args)

    lsn = reduce_rad(nu + math.radians(ls - ms + dl))
    rsn = 1.0000002 * (1.0 - s * math.cos(ea)) + dr
    return SunPosition(l=lsn, r=rsn)
