# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Astrological house systems.

Quadrant systems (Placidus, Koch, Regiomontanus, Campanus, Topocentric)
divide each quadrant between the angles; they are undefined where the
ecliptic becomes circumpolar, |theta| > 90 - |eps|. Morinus divides the
equator into equal arcs from the meridian. Equal houses are 30 degree
segments from an arbitrary starting longitude.

Usage:
    cusps_of = houses_function(HouseSystem.PLACIDUS)
    cusps = cusps_of(ramc, eps, theta, asc, mc)

Cusps are ecliptic longitudes in radians, index 0 being house I.
"""
import logging
import math
from enum import Enum
from typing import Callable, Sequence

from skychart.domain.ephemeris_contracts import (
    ConfigurationError,
    DomainError,
    NumericalError,
)
from skychart.domain.mathutils import PI_HALF, diff_angle, reduce_rad
from skychart.domain.points import ascendant

_log = logging.getLogger(__name__)

R30, R60, R120, R150 = (math.radians(x) for x in (30, 60, 120, 150))

_HALF_SECOND: float = math.radians(0.5 / 3600.0)

PLACIDUS_TOLERANCE: float = 1e-4  # radians
PLACIDUS_MAX_ITERATIONS: int = 100

# (zero-based cusp index, semi-arc divisor, initial offset from ramc)
_PLACIDUS_ARGS = ((10, 3.0, R30), (11, 1.5, R60), (1, 1.5, R120), (2, 3.0, R150))
# (offset from ramc, latitude multiplier)
_TOPOCENTRIC_ARGS = ((-R60, 1), (-R30, 2), (R30, 2), (R60, 1))


class HouseSystem(Enum):
    PLACIDUS = "Placidus"
    KOCH = "Koch"
    REGIOMONTANUS = "Regiomontanus"
    CAMPANUS = "Campanus"
    TOPOCENTRIC = "Topocentric"
    MORINUS = "Morinus"
    EQUAL = "Equal"


QUADRANT_SYSTEMS = frozenset({
    HouseSystem.PLACIDUS,
    HouseSystem.KOCH,
    HouseSystem.REGIOMONTANUS,
    HouseSystem.CAMPANUS,
    HouseSystem.TOPOCENTRIC,
})


def _check_latitude(eps: float, theta: float) -> None:
    if abs(theta) > PI_HALF - abs(eps):
        raise DomainError(
            f"Quadrant house systems are undefined at latitude "
            f"{math.degrees(theta):.4f} (obliquity {math.degrees(eps):.4f})"
        )


def _assemble(base: Sequence[float], asc: float, mc: float) -> list[float]:
    """Twelve cusps from the angles and intermediate cusps XI, XII, II, III.

    ``base`` holds cusps 11, 12, 2 and 3 (in that order); the opposite
    houses are 180 degrees away.
    """
    return [
        asc,
        base[2],
        base[3],
        reduce_rad(mc + math.pi),
        reduce_rad(base[0] + math.pi),
        reduce_rad(base[1] + math.pi),
        reduce_rad(asc + math.pi),
        reduce_rad(base[2] + math.pi),
        reduce_rad(base[3] + math.pi),
        mc,
        base[0],
        base[1],
    ]


def _placidus_cusp(ramc: float, eps: float, tt: float, n: int, f: float, x0: float) -> float:
    k, r = (-1, ramc) if n in (10, 11) else (1, ramc + math.pi)
    last = x0 + ramc
    for iteration in range(PLACIDUS_MAX_ITERATIONS):
        x = r - k * math.acos(k * math.sin(last) * tt) / f
        if abs(diff_angle(x, last)) <= PLACIDUS_TOLERANCE:
            _log.debug("Placidus cusp index %d converged after %d iterations", n, iteration + 1)
            return reduce_rad(math.atan2(math.sin(x), math.cos(eps) * math.cos(x)))
        last = x
    raise NumericalError(
        f"Placidus cusp index {n} did not converge in {PLACIDUS_MAX_ITERATIONS} iterations"
    )


def placidus(ramc: float, eps: float, theta: float, asc: float, mc: float) -> list[float]:
    """Trisection of the diurnal and nocturnal semi-arcs, found iteratively."""
    _check_latitude(eps, theta)
    tt = math.tan(theta) * math.tan(eps)
    base = [_placidus_cusp(ramc, eps, tt, n, f, x0) for n, f, x0 in _PLACIDUS_ARGS]
    return _assemble(base, asc, mc)


def koch(ramc: float, eps: float, theta: float, asc: float, mc: float) -> list[float]:
    """Birthplace system: trisection of the Midheaven's semi-arc in time."""
    _check_latitude(eps, theta)
    k = math.asin(math.tan(theta) * math.tan(math.asin(math.sin(mc) * math.sin(eps))))
    k1 = k / 3.0
    k2 = k1 * 2.0
    offsets = (-R60 - k2, -R30 - k1, R30 + k1, R60 + k2)
    base = [ascendant(ramc + x, eps, theta) for x in offsets]
    return _assemble(base, asc, mc)


def regiomontanus(ramc: float, eps: float, theta: float, asc: float, mc: float) -> list[float]:
    """Equal division of the celestial equator projected along great circles
    through the north and south points of the horizon."""
    _check_latitude(eps, theta)
    tn_the = math.tan(theta)

    def cusp(h: float) -> float:
        rh = ramc + h
        r = math.atan2(math.sin(h) * tn_the, math.cos(rh))
        return reduce_rad(math.atan2(math.cos(r) * math.tan(rh), math.cos(r + eps)))

    return _assemble([cusp(h) for h in (R30, R60, R120, R150)], asc, mc)


def campanus(ramc: float, eps: float, theta: float, asc: float, mc: float) -> list[float]:
    """Equal division of the prime vertical."""
    _check_latitude(eps, theta)
    sn_the, cs_the = math.sin(theta), math.cos(theta)
    rm90 = ramc + PI_HALF

    def cusp(h: float) -> float:
        sn_h = math.sin(h)
        d = rm90 - math.atan2(math.cos(h), sn_h * cs_the)
        c = math.atan2(math.tan(math.asin(sn_the * sn_h)), math.cos(d))
        return reduce_rad(math.atan2(math.tan(d) * math.cos(c), math.cos(c + eps)))

    return _assemble([cusp(h) for h in (R30, R60, R120, R150)], asc, mc)


def topocentric(ramc: float, eps: float, theta: float, asc: float, mc: float) -> list[float]:
    """Polich-Page system: ascendants for scaled latitudes."""
    _check_latitude(eps, theta)
    tn_the = math.tan(theta)
    base = [
        ascendant(ramc + offset, eps, math.atan2(n * tn_the, 3.0))
        for offset, n in _TOPOCENTRIC_ARGS
    ]
    return _assemble(base, asc, mc)


def morinus(ramc: float, eps: float) -> list[float]:
    """Equator divided in 30 degree arcs from the meridian, projected along
    ecliptic latitude circles."""
    cs_eps = math.cos(eps)
    cusps = []
    for i in range(12):
        r = ramc + R60 + R30 * (i + 1)
        cusps.append(reduce_rad(math.atan2(math.sin(r) * cs_eps, math.cos(r))))
    return cusps


def equal(startx: float = 0.0, startn: int = 0) -> list[float]:
    """Twelve 30 degree houses; cusp number ``startn`` is at ``startx``."""
    cusps = [0.0] * 12
    for i in range(12):
        cusps[(startn + i) % 12] = reduce_rad(startx + R30 * i)
    return cusps


_SYSTEMS: dict[HouseSystem, Callable[..., list[float]]] = {
    HouseSystem.PLACIDUS: placidus,
    HouseSystem.KOCH: koch,
    HouseSystem.REGIOMONTANUS: regiomontanus,
    HouseSystem.CAMPANUS: campanus,
    HouseSystem.TOPOCENTRIC: topocentric,
    HouseSystem.MORINUS: morinus,
    HouseSystem.EQUAL: equal,
}


def houses_function(system: HouseSystem | str) -> Callable[..., list[float]]:
    """Cusp function for a house system.

    Quadrant systems take ``(ramc, eps, theta, asc, mc)``, Morinus takes
    ``(ramc, eps)`` and Equal takes ``(startx=0.0, startn=0)``.

    Raises:
        ConfigurationError: Unknown house system name.
    """
    if not isinstance(system, HouseSystem):
        try:
            system = HouseSystem(system)
        except ValueError:
            raise ConfigurationError(f"Unknown house system: {system!r}") from None
    return _SYSTEMS[system]


def in_house(x: float, cusps: Sequence[float]) -> int:
    """Zero-based number of the house containing longitude x.

    A body within half an arc-second before a cusp counts as being on it.
    """
    r = reduce_rad(x + _HALF_SECOND)
    for i in range(12):
        a = cusps[i]
        b = cusps[(i + 1) % 12]
        if a <= r < b or (a > b and (r >= a or r < b)):
            return i
    raise ValueError(f"Longitude {x} is not inside any house; cusps are malformed")
