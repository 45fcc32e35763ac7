# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Positions of the Sun, Moon, lunar node and planets at one instant.

An Ephemeris is bound to a single moment in dynamical time and computes
positions lazily, once per body. Planet positions are found in two passes:
the first gives the Earth-planet distance, the second repeats the
heliocentric solution for the planet as it was when the light left it.

With ``apparent=True`` longitudes include nutation, and Sun and planets
are corrected for annual aberration. All angles are radians, distances AU.

Reference: Peter Duffett-Smith, "Astronomy With Your Personal Computer",
Cambridge University Press, 1995.
"""
import logging
import math
from dataclasses import dataclass
from typing import Union

from skychart.domain import moon, sun
from skychart.domain.kepler import solve_kepler, true_anomaly
from skychart.domain.mathutils import PI2, diff_angle, reduce_rad
from skychart.domain.moon import MoonPosition
from skychart.domain.nutation import nutation, obliquity
from skychart.domain.orbits import mean_anomalies, orbital_elements
from skychart.domain.perturbations import (
    PerturbationArgs,
    PerturbationResult,
    calculate_perturbations,
)
from skychart.domain.sun import SunPosition

_log = logging.getLogger(__name__)

PLANETS: tuple[str, ...] = (
    "Moon", "Sun", "Mercury", "Venus", "Mars", "Jupiter", "Saturn",
    "Uranus", "Neptune", "Pluto", "Node",
)

INNER_PLANETS = frozenset({"Mercury", "Venus"})

# Light time for 1 AU, days
LIGHT_TIME_PER_AU: float = 5.775518e-3
# Constant of annual aberration, radians
ABERRATION: float = 9.9387e-5


@dataclass(frozen=True)
class HeliocentricPosition:
    """Heliocentric ecliptic coordinates of a planet."""
    l: float  # longitude, radians
    b: float  # latitude, radians
    r: float  # radius vector, AU


@dataclass(frozen=True)
class EclipticPosition:
    """Geocentric ecliptic coordinates."""
    l: float  # longitude, radians
    b: float  # latitude, radians
    d: float  # distance from the Earth, AU (zero where meaningless)


@dataclass(frozen=True)
class PlanetPosition:
    """Heliocentric and geocentric position of a planet."""
    helio: HeliocentricPosition
    geo: EclipticPosition


Position = Union[EclipticPosition, MoonPosition, PlanetPosition]


@dataclass(frozen=True)
class _HelioPass:
    """Intermediate results of one heliocentric pass."""
    ll: float  # projected longitude minus the Earth's longitude
    rpd: float  # projected radius vector
    lpd: float  # projected heliocentric longitude
    spsi: float  # sine of heliocentric latitude
    cpsi: float  # cosine of heliocentric latitude
    rho: float  # distance from the Earth
    lp: float  # orbital longitude
    psi: float  # heliocentric latitude
    rp: float  # radius vector


def geocentric(position: Position) -> EclipticPosition:
    """Geocentric longitude, latitude and distance of any body position."""
    if isinstance(position, PlanetPosition):
        return position.geo
    return EclipticPosition(l=position.l, b=position.b, d=position.d)


class Ephemeris:
    """Body positions at one instant.

    Args:
        djd: Julian days since 1900 January 0.5, dynamical time.
        apparent: Apply nutation and aberration.
        true_node: Report the true rather than the mean lunar node.
    """

    def __init__(self, djd: float, apparent: bool = False, true_node: bool = True) -> None:
        self._djd = djd
        self._t = djd / 36525.0
        self._ms = sun.mean_anomaly(self._t)  # degrees
        self._apparent = apparent
        self._true_node = true_node
        dpsi, deps = nutation(self._t)
        self._dpsi = math.radians(dpsi)
        self._deps = math.radians(deps)
        self._positions: dict[str, Position] = {}
        self._obliquity: float | None = None
        self._sun: SunPosition | None = None
        self._prev: Ephemeris | None = None
        self._next: Ephemeris | None = None

    @property
    def djd(self) -> float:
        return self._djd

    @property
    def t(self) -> float:
        """Julian centuries since 1900 January 0.5."""
        return self._t

    @property
    def apparent(self) -> bool:
        return self._apparent

    @property
    def true_node(self) -> bool:
        return self._true_node

    @property
    def dpsi(self) -> float:
        """Nutation in longitude, radians."""
        return self._dpsi

    @property
    def deps(self) -> float:
        """Nutation in obliquity, radians."""
        return self._deps

    @property
    def obliquity(self) -> float:
        """True obliquity of the ecliptic, radians."""
        if self._obliquity is None:
            self._obliquity = math.radians(obliquity(self._djd, math.degrees(self._deps)))
        return self._obliquity

    @property
    def true_sun(self) -> SunPosition:
        """True geocentric longitude and distance of the Sun."""
        if self._sun is None:
            self._sun = sun.true_geocentric(self._t, self._ms)
        return self._sun

    @property
    def prev(self) -> "Ephemeris":
        """Ephemeris twelve hours earlier, same flags."""
        if self._prev is None:
            self._prev = self._build_instant(self._djd - 0.5)
        return self._prev

    @property
    def next(self) -> "Ephemeris":
        """Ephemeris twelve hours later, same flags."""
        if self._next is None:
            self._next = self._build_instant(self._djd + 0.5)
        return self._next

    def _build_instant(self, djd: float) -> "Ephemeris":
        return Ephemeris(djd, apparent=self._apparent, true_node=self._true_node)

    def get_perturbations(self, name: str, anomalies: dict[str, float],
                          s: float) -> PerturbationResult:
        """Perturbations of a planet given all mean anomalies (radians)
        and its unperturbed eccentricity."""
        args = PerturbationArgs(
            t=self._t, ms=math.radians(self._ms), anomalies=anomalies, s=s,
        )
        return calculate_perturbations(name, args)

    def _earth(self) -> tuple[float, float]:
        sn = self.true_sun
        return sn.l + math.pi, sn.r

    def _helio(self, name: str, s: float, sa: float, ph: float, inc: float,
               nd: float, lg: float, re: float, dt: float = 0.0) -> _HelioPass:
        anomalies = mean_anomalies(self._t, dt)
        pert = self.get_perturbations(name, anomalies, s)
        s += pert.ds
        ma = anomalies[name] + pert.dm
        ea = solve_kepler(s, ma - PI2 * math.floor(ma / PI2))
        nu = true_anomaly(s, ea)
        rp = (sa + pert.da) * (1.0 - s * s) / (1.0 + s * math.cos(nu)) + pert.dr
        lp = nu + ph + (pert.dml - pert.dm)
        lo = lp - nd
        sin_lo = math.sin(lo)
        psi = math.asin(sin_lo * math.sin(inc)) + pert.dhl
        lpd = math.atan2(sin_lo * math.cos(inc), math.cos(lo)) + nd + math.radians(pert.dl)
        cpsi = math.cos(psi)
        rpd = rp * cpsi
        ll = lpd - lg
        rho = math.sqrt(re * re + rp * rp - 2.0 * re * rp * cpsi * math.cos(ll))
        return _HelioPass(ll=ll, rpd=rpd, lpd=lpd, spsi=math.sin(psi), cpsi=cpsi,
                          rho=rho, lp=lp, psi=psi, rp=rp)

    def _calculate_planet(self, name: str) -> PlanetPosition:
        lg, re = self._earth()
        o = orbital_elements(name, self._t)
        h0 = self._helio(name, o.s, o.sa, o.ph, o.inc, o.nd, lg, re)
        h1 = self._helio(name, o.s, o.sa, o.ph, o.inc, o.nd, lg, re,
                         h0.rho * LIGHT_TIME_PER_AU)

        sll = math.sin(h1.ll)
        cll = math.cos(h1.ll)
        if name in INNER_PLANETS:
            lam = math.atan2(-h1.rpd * sll, re - h1.rpd * cll) + lg + math.pi
        else:
            lam = math.atan2(re * sll, h1.rpd - re * cll) + h1.lpd
        bet = math.atan(h1.rpd * h1.spsi * math.sin(lam - h1.lpd) / (h1.cpsi * re * sll))

        if self._apparent:
            lam += self._dpsi
            a = lg + math.pi - lam
            lam -= ABERRATION * math.cos(a) / math.cos(bet)
            bet -= ABERRATION * math.sin(a) * math.sin(bet)

        return PlanetPosition(
            helio=HeliocentricPosition(l=h0.lpd, b=h0.psi, r=h0.rp),
            geo=EclipticPosition(l=reduce_rad(lam), b=bet, d=h0.rho),
        )

    def _calculate_sun(self) -> EclipticPosition:
        lsn, re = self.true_sun.l, self.true_sun.r
        if self._apparent:
            lsn += self._dpsi - math.radians(5.69e-3)
            lt = 1.365 * re  # light time, seconds
            lsn -= math.radians(lt * 15.0 / 3600.0)
        return EclipticPosition(l=reduce_rad(lsn), b=0.0, d=re)

    def _calculate_moon(self) -> MoonPosition:
        pos = moon.true_position(self._djd)
        if not self._apparent:
            return pos
        return MoonPosition(l=reduce_rad(pos.l + self._dpsi), b=pos.b, d=pos.d,
                            hp=pos.hp, dm=pos.dm)

    def _calculate_node(self) -> EclipticPosition:
        return EclipticPosition(l=moon.node(self._djd, self._true_node), b=0.0, d=0.0)

    def get_position(self, name: str) -> Position:
        """Position of a body, computed once and cached.

        Sun and Node give an EclipticPosition, the Moon a MoonPosition and
        planets a PlanetPosition with heliocentric and geocentric parts.

        Raises:
            LookupError: Unknown body name.
        """
        pos = self._positions.get(name)
        if pos is not None:
            return pos
        if name == "Sun":
            pos = self._calculate_sun()
        elif name == "Moon":
            pos = self._calculate_moon()
        elif name == "Node":
            pos = self._calculate_node()
        elif name in PLANETS:
            pos = self._calculate_planet(name)
        else:
            raise LookupError(f"Unknown body: {name!r}")
        _log.debug("Computed %s at DJD %.6f", name, self._djd)
        self._positions[name] = pos
        return pos

    def get_daily_motion(self, name: str) -> float:
        """Geocentric motion in longitude, degrees per day.

        Negative values mean retrograde motion. For the Moon this is the
        analytic rate; for the others the difference between positions
        twelve hours either side, normalised to (-180, 180].
        """
        if name == "Moon":
            return self.get_position(name).dm
        x0 = geocentric(self.prev.get_position(name)).l
        x1 = geocentric(self.next.get_position(name)).l
        return math.degrees(diff_angle(x0, x1))
