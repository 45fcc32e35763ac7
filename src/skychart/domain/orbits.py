# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Mean orbital elements of the major planets.

Each element is a polynomial in t, Julian centuries since 1900 January 0.5,
with coefficients referred to the mean equinox of date. Pluto uses fixed
osculating elements of 1984 January 21.

Reference: Peter Duffett-Smith, "Astronomy With Your Personal Computer",
Cambridge University Press, 1995.
"""
import math
from dataclasses import dataclass

from skychart.domain.ephemeris_contracts import ConfigurationError
from skychart.domain.mathutils import frac360, polynome, reduce_deg

# Degrees per day for one revolution per Julian century of the ML[1] term
_DAILY_MOTION_FACTOR: float = 9.856263e-3


@dataclass(frozen=True)
class ElementTable:
    """Polynomial coefficients for one planet.

    ``ml`` always has four terms; the others have as many as published.
    """
    ml: tuple[float, float, float, float]  # mean longitude, degrees
    ph: tuple[float, ...]  # longitude of perihelion, degrees
    ec: tuple[float, ...]  # eccentricity
    inc: tuple[float, ...]  # inclination, degrees
    nd: tuple[float, ...]  # longitude of ascending node, degrees
    sa: float  # semi-major axis, AU
    di: float  # angular diameter at 1 AU, arcseconds
    mg: float  # visual magnitude at 1 AU

    @property
    def daily_motion(self) -> float:
        """Mean daily motion, degrees per day."""
        return self.ml[1] * _DAILY_MOTION_FACTOR + (self.ml[2] + self.ml[3]) / 36525.0


@dataclass(frozen=True)
class OrbitalElements:
    """Orbital elements of a planet assembled for one instant."""
    name: str
    ml: float  # mean longitude, degrees
    dm: float  # mean daily motion, degrees per day
    s: float  # eccentricity
    sa: float  # semi-major axis, AU
    ph: float  # longitude of perihelion, radians
    inc: float  # inclination, radians
    nd: float  # longitude of ascending node, radians


PLANET_NAMES: tuple[str, ...] = (
    "Mercury", "Venus", "Mars", "Jupiter", "Saturn", "Uranus", "Neptune", "Pluto",
)

_TABLES: dict[str, ElementTable] = {
    "Mercury": ElementTable(
        ml=(178.179078, 415.2057519, 3.011e-4, 0.0),
        ph=(75.899697, 1.5554889, 2.947e-4),
        ec=(2.0561421e-1, 2.046e-5, -3e-8),
        inc=(7.002881, 1.8608e-3, -1.83e-5),
        nd=(47.145944, 1.1852083, 1.739e-4),
        sa=3.870986e-1, di=6.74, mg=-0.42,
    ),
    "Venus": ElementTable(
        ml=(342.767053, 162.5533664, 3.097e-4, 0.0),
        ph=(130.163833, 1.4080361, -9.764e-4),
        ec=(6.82069e-3, -4.774e-5, 9.1e-8),
        inc=(3.393631, 1.0058e-3, -1e-6),
        nd=(75.779647, 8.9985e-1, 4.1e-4),
        sa=7.233316e-1, di=16.92, mg=-4.4,
    ),
    "Mars": ElementTable(
        ml=(293.737334, 53.17137642, 3.107e-4, 0.0),
        ph=(3.34218203e2, 1.8407584, 1.299e-4, -1.19e-6),
        ec=(9.33129e-2, 9.2064e-5, -7.7e-8),
        inc=(1.850333, -6.75e-4, 1.26e-5),
        nd=(48.786442, 7.709917e-1, -1.4e-6, -5.33e-6),
        sa=1.5236883, di=9.36, mg=-1.52,
    ),
    "Jupiter": ElementTable(
        ml=(238.049257, 8.434172183, 3.347e-4, -1.65e-6),
        ph=(1.2720972e1, 1.6099617, 1.05627e-3, -3.43e-6),
        ec=(4.833475e-2, 1.6418e-4, -4.676e-7, -1.7e-9),
        inc=(1.308736, -5.6961e-3, 3.9e-6),
        nd=(99.443414, 1.01053, 3.5222e-4, -8.51e-6),
        sa=5.202561, di=196.74, mg=-9.4,
    ),
    "Saturn": ElementTable(
        ml=(266.564377, 3.398638567, 3.245e-4, -5.8e-6),
        ph=(9.1098214e1, 1.9584158, 8.2636e-4, 4.61e-6),
        ec=(5.589232e-2, -3.455e-4, -7.28e-7, 7.4e-10),
        inc=(2.492519, -3.9189e-3, -1.549e-5, 4e-8),
        nd=(112.790414, 8.731951e-1, -1.5218e-4, -5.31e-6),
        sa=9.554747, di=165.6, mg=-8.88,
    ),
    "Uranus": ElementTable(
        ml=(244.19747, 1.194065406, 3.16e-4, -6e-7),
        ph=(1.71548692e2, 1.4844328, 2.372e-4, -6.1e-7),
        ec=(4.63444e-2, -2.658e-5, 7.7e-8),
        inc=(7.72464e-1, 6.253e-4, 3.95e-5),
        nd=(73.477111, 4.986678e-1, 1.3117e-3),
        sa=19.21814, di=65.8, mg=-7.19,
    ),
    "Neptune": ElementTable(
        ml=(84.457994, 6.107942056e-1, 3.205e-4, -6e-7),
        ph=(4.6727364e1, 1.4245744, 3.9082e-4, -6.05e-7),
        ec=(8.99704e-3, 6.33e-6, -2e-9),
        inc=(1.779242, -9.5436e-3, -9.1e-6),
        nd=(130.681389, 1.098935, 2.4987e-4, -4.718e-6),
        sa=30.10957, di=62.2, mg=-6.87,
    ),
    "Pluto": ElementTable(
        ml=(95.3113544, 3.980332167e-1, 0.0, 0.0),
        ph=(224.017,),
        ec=(2.5515e-1,),
        inc=(17.1329,),
        nd=(110.191,),
        sa=39.8151, di=8.2, mg=-1.0,
    ),
}


def element_table(name: str) -> ElementTable:
    """Coefficient table for a planet.

    Raises:
        ConfigurationError: No table for this body.
    """
    try:
        return _TABLES[name]
    except KeyError:
        raise ConfigurationError(f"No orbital elements for body: {name!r}") from None


def mean_longitude(table: ElementTable, t: float) -> float:
    """Mean longitude in degrees at t.

    Whole revolutions are stripped from the linear term before the slow
    quadratic and cubic terms are added.
    """
    ml = table.ml
    return reduce_deg(ml[0] + frac360(ml[1] * t) + (ml[3] * t + ml[2]) * t * t)


def assemble(terms: tuple[float, ...], t: float) -> float:
    """Evaluate an element polynomial at t, reduced to [0, 360)."""
    return reduce_deg(polynome(t, *terms))


def orbital_elements(name: str, t: float) -> OrbitalElements:
    """Assemble the orbital elements of a planet at t (Julian centuries)."""
    table = element_table(name)
    return OrbitalElements(
        name=name,
        ml=mean_longitude(table, t),
        dm=table.daily_motion,
        s=assemble(table.ec, t),
        sa=table.sa,
        ph=math.radians(assemble(table.ph, t)),
        inc=math.radians(assemble(table.inc, t)),
        nd=math.radians(assemble(table.nd, t)),
    )


def mean_anomalies(t: float, dt: float = 0.0) -> dict[str, float]:
    """Mean anomalies of all planets in radians.

    Args:
        t: Julian centuries since 1900 January 0.5.
        dt: Light-time delay in days; each anomaly is taken dt days earlier.
    """
    result: dict[str, float] = {}
    for name in PLANET_NAMES:
        table = _TABLES[name]
        ml = mean_longitude(table, t)
        ph = assemble(table.ph, t)
        result[name] = math.radians(ml - ph - dt * table.daily_motion)
    return result
