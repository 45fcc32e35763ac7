# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Natal chart: planets, sensitive points and house cusps for a moment and place.

Every derived value is computed on first access and kept until an input it
depends on changes:

    date     -- clears everything
    geo      -- clears sidereal time, points and cusps
    options  -- house system clears cusps; orbs method clears aspects;
                apparent/true_node flags clear the ephemeris and planets

Planet houses are looked up against the current cusps on every access.
"""
import logging
import math
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any

from skychart.domain.aspects import AspectMatch, AspectType, BodyLongitude, iter_aspects, orbs_method
from skychart.domain.ephemeris import PLANETS, Ephemeris, geocentric
from skychart.domain.ephemeris_contracts import ConfigurationError, DomainError
from skychart.domain.houses import HouseSystem, houses_function, in_house
from skychart.domain.points import POINTS, ascendant, east_point, midheaven, vertex
from skychart.domain.time_systems import SEC_PER_DAY, datetime_to_djd, delta_t, local_sidereal

_log = logging.getLogger(__name__)

_QUADRANT_HOUSES = ("Placidus", "Koch", "Regiomontanus", "Campanus", "Topocentric")
CHART_HOUSE_SYSTEMS: tuple[str, ...] = _QUADRANT_HOUSES + ("Morinus", "SignCusp", "EqualAsc", "EqualMc")


@dataclass(frozen=True)
class GeoLocation:
    """Observer's place. Longitude is positive west of Greenwich."""
    latitude: float = 55.75  # degrees
    longitude: float = -(37 + 35 / 60.0)  # degrees


@dataclass(frozen=True)
class ChartOptions:
    houses: str = "Placidus"
    orbs_method: str = "Dariot"
    true_node: bool = True
    apparent: bool = True


@dataclass(frozen=True)
class ChartCoords:
    """Geocentric ecliptic coordinates of a chart body."""
    x: float  # longitude, radians
    y: float  # latitude, radians
    z: float  # distance, AU


@dataclass(frozen=True)
class PlanetData:
    name: str
    coords: ChartCoords
    motion: float  # degrees per day, negative when retrograde
    house: int  # zero-based
    aspects: tuple[AspectMatch, ...] = field(default_factory=tuple)

    @property
    def retrograde(self) -> bool:
        return self.motion < 0


def _validate_options(options: ChartOptions) -> None:
    if options.houses not in CHART_HOUSE_SYSTEMS:
        raise ConfigurationError(
            f"Unknown house system: {options.houses!r}; "
            f"expected one of {', '.join(CHART_HOUSE_SYSTEMS)}"
        )
    orbs_method(options.orbs_method)


class Chart:
    """Astrological chart for a moment (UTC) and a place."""

    def __init__(
        self,
        name: str = "New Chart",
        date: datetime | None = None,
        geo: GeoLocation | None = None,
        options: ChartOptions | None = None,
    ) -> None:
        options = options or ChartOptions()
        _validate_options(options)
        self.name = name
        self._date = date or datetime.now(timezone.utc)
        self._geo = geo or GeoLocation()
        self._options = options
        self._djd: float | None = None
        self._delta_t: float | None = None
        self._ephemeris: Ephemeris | None = None
        self._bodies: dict[str, tuple[ChartCoords, float]] | None = None
        self._aspects: dict[str, tuple[AspectMatch, ...]] | None = None
        self._clear_geo_related()

    def _clear_geo_related(self) -> None:
        self._lst: float | None = None
        self._points: dict[str, float] | None = None
        self._cusps: list[float] | None = None

    def _clear_ephemeris(self) -> None:
        self._ephemeris = None
        self._bodies = None
        self._aspects = None

    def _clear_time_related(self) -> None:
        self._djd = None
        self._delta_t = None
        self._clear_ephemeris()
        self._clear_geo_related()

    @property
    def date(self) -> datetime:
        return self._date

    @date.setter
    def date(self, value: datetime) -> None:
        if value != self._date:
            _log.debug("Chart %r: date changed, clearing all derived values", self.name)
            self._date = value
            self._clear_time_related()

    @property
    def geo(self) -> GeoLocation:
        return self._geo

    @geo.setter
    def geo(self, value: GeoLocation) -> None:
        if value != self._geo:
            _log.debug("Chart %r: place changed, clearing sidereal time, points, cusps", self.name)
            self._geo = value
            self._clear_geo_related()

    @property
    def options(self) -> ChartOptions:
        return self._options

    @options.setter
    def options(self, value: ChartOptions) -> None:
        _validate_options(value)
        old = self._options
        self._options = value
        if value.houses != old.houses:
            _log.debug("Chart %r: house system changed to %s", self.name, value.houses)
            self._cusps = None
        if value.apparent != old.apparent or value.true_node != old.true_node:
            _log.debug("Chart %r: ephemeris flags changed", self.name)
            self._clear_ephemeris()
        elif value.orbs_method != old.orbs_method:
            _log.debug("Chart %r: orbs method changed to %s", self.name, value.orbs_method)
            self._aspects = None

    @property
    def djd(self) -> float:
        """Julian days since 1900 January 0.5, Universal Time."""
        if self._djd is None:
            self._djd = datetime_to_djd(self._date)
        return self._djd

    @property
    def delta_t(self) -> float:
        """TT - UT, seconds."""
        if self._delta_t is None:
            self._delta_t = delta_t(self.djd)
        return self._delta_t

    @property
    def lst(self) -> float:
        """Local sidereal time, hours."""
        if self._lst is None:
            self._lst = local_sidereal(self.djd, self._geo.longitude)
        return self._lst

    @property
    def ephemeris(self) -> Ephemeris:
        """Ephemeris in dynamical time for the chart moment."""
        if self._ephemeris is None:
            self._ephemeris = Ephemeris(
                self.djd + self.delta_t / SEC_PER_DAY,
                apparent=self._options.apparent,
                true_node=self._options.true_node,
            )
        return self._ephemeris

    def _compute_bodies(self) -> dict[str, tuple[ChartCoords, float]]:
        if self._bodies is None:
            eph = self.ephemeris
            bodies = {}
            for name in PLANETS:
                pos = geocentric(eph.get_position(name))
                bodies[name] = (ChartCoords(x=pos.l, y=pos.b, z=pos.d), eph.get_daily_motion(name))
            _log.info("Chart %r: positions computed at DJD %.6f", self.name, eph.djd)
            self._bodies = bodies
        return self._bodies

    def _compute_aspects(self) -> dict[str, tuple[AspectMatch, ...]]:
        if self._aspects is None:
            method = orbs_method(self._options.orbs_method)
            longitudes = [
                BodyLongitude(name, math.degrees(coords.x))
                for name, (coords, _) in self._compute_bodies().items()
            ]
            self._aspects = {
                source.name: tuple(iter_aspects(
                    source,
                    [t for t in longitudes if t.name != source.name],
                    method,
                    AspectType.ALL,
                ))
                for source in longitudes
            }
        return self._aspects

    @property
    def planets(self) -> dict[str, PlanetData]:
        """Coordinates, daily motion, house and aspects of every body."""
        bodies = self._compute_bodies()
        aspects = self._compute_aspects()
        cusps = self.cusps
        return {
            name: PlanetData(
                name=name,
                coords=coords,
                motion=motion,
                house=in_house(coords.x, cusps),
                aspects=aspects[name],
            )
            for name, (coords, motion) in bodies.items()
        }

    @property
    def ramc(self) -> float:
        """Right ascension of the meridian, radians."""
        return math.radians(self.lst * 15.0)

    @property
    def points(self) -> dict[str, float]:
        """Ascendant, Midheaven, Vertex and East Point longitudes, radians."""
        if self._points is None:
            ramc = self.ramc
            eps = self.ephemeris.obliquity
            theta = math.radians(self._geo.latitude)
            self._points = {
                "Ascendant": ascendant(ramc, eps, theta),
                "Midheaven": midheaven(ramc, eps),
                "Vertex": vertex(ramc, eps, theta),
                "EastPoint": east_point(ramc, eps),
            }
        return self._points

    @property
    def cusps(self) -> list[float]:
        """Twelve house cusps, radians, index 0 = house I.

        Raises:
            DomainError: A quadrant house system at too high a latitude.
        """
        if self._cusps is None:
            system = self._options.houses
            if system in _QUADRANT_HOUSES:
                try:
                    self._cusps = houses_function(system)(
                        self.ramc,
                        self.ephemeris.obliquity,
                        math.radians(self._geo.latitude),
                        self.points["Ascendant"],
                        self.points["Midheaven"],
                    )
                except DomainError:
                    _log.warning("%s houses are undefined at latitude %.4f",
                                 system, self._geo.latitude)
                    raise
            elif system == "Morinus":
                self._cusps = houses_function(HouseSystem.MORINUS)(
                    self.ramc, self.ephemeris.obliquity,
                )
            else:
                equal = houses_function(HouseSystem.EQUAL)
                if system == "EqualAsc":
                    self._cusps = equal(self.points["Ascendant"])
                elif system == "EqualMc":
                    self._cusps = equal(self.points["Midheaven"], 9)
                else:
                    self._cusps = equal()
        return self._cusps

    def to_dict(self) -> dict[str, Any]:
        """JSON-serialisable snapshot of the chart."""
        eph = self.ephemeris
        planets = {}
        for name, data in self.planets.items():
            planets[name] = {
                "coords": asdict(data.coords),
                "motion": data.motion,
                "house": data.house,
                "aspects": [
                    {
                        "target": m.target,
                        "aspect": m.aspect.name,
                        "arc": m.arc,
                        "delta": m.delta,
                    }
                    for m in data.aspects
                ],
            }
        return {
            "name": self.name,
            "date": self._date.isoformat(),
            "djd": self.djd,
            "delta_t": self.delta_t,
            "lst": self.lst,
            "geo": asdict(self._geo),
            "options": asdict(self._options),
            "obliquity": eph.obliquity,
            "nutation": {"dpsi": eph.dpsi, "deps": eph.deps},
            "planets": planets,
            "points": {name: self.points[name] for name in POINTS},
            "cusps": list(self.cusps),
        }
