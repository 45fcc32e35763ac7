# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Astrological aspects, orbs and stelliums.

An aspect is a characteristic angular separation between two bodies. Whether
a separation counts as an aspect depends on the orbs method:

    Dariot                 -- orb is the mean of the two bodies' moieties
    DeVore                 -- each aspect has a fixed range of arcs
    ClassicWithAspectRatio -- Dariot orbs narrowed for minor and Kepler aspects

Longitudes here are in degrees.
"""
from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Iterable, Iterator, Protocol, Sequence

from skychart.domain.ephemeris_contracts import ConfigurationError
from skychart.domain.mathutils import diff_angle_deg


class AspectType(IntFlag):
    MAJOR = 0x1
    MINOR = 0x2
    KEPLER = 0x4
    ALL = MAJOR | MINOR | KEPLER


class Influence(Enum):
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"


@dataclass(frozen=True)
class Aspect:
    name: str
    brief_name: str
    value: float  # degrees
    influence: Influence
    type_flag: AspectType


CONJUNCTION = Aspect("Conjunction", "cnj", 0.0, Influence.NEUTRAL, AspectType.MAJOR)
VIGINTILE = Aspect("Vigintile", "vgt", 18.0, Influence.NEUTRAL, AspectType.KEPLER)
QUINDECILE = Aspect("Quindecile", "qdc", 24.0, Influence.NEUTRAL, AspectType.KEPLER)
SEMISEXTILE = Aspect("Semisextile", "ssx", 30.0, Influence.POSITIVE, AspectType.MINOR)
DECILE = Aspect("Decile", "dcl", 36.0, Influence.NEUTRAL, AspectType.KEPLER)
SEXTILE = Aspect("Sextile", "sxt", 60.0, Influence.POSITIVE, AspectType.MAJOR)
SEMISQUARE = Aspect("Semisquare", "ssq", 45.0, Influence.NEGATIVE, AspectType.MINOR)
QUINTILE = Aspect("Quintile", "qui", 72.0, Influence.NEUTRAL, AspectType.KEPLER)
SQUARE = Aspect("Square", "sqr", 90.0, Influence.NEGATIVE, AspectType.MAJOR)
TRIDECILE = Aspect("Tridecile", "tdc", 108.0, Influence.POSITIVE, AspectType.MINOR)
TRINE = Aspect("Trine", "tri", 120.0, Influence.POSITIVE, AspectType.MAJOR)
SESQUIQUADRATE = Aspect("Sesquiquadrate", "sqq", 135.0, Influence.NEGATIVE, AspectType.MINOR)
BIQUINTILE = Aspect("Biquintile", "bqu", 144.0, Influence.NEUTRAL, AspectType.KEPLER)
QUINCUNX = Aspect("Quincunx", "qcx", 150.0, Influence.NEGATIVE, AspectType.MINOR)
OPPOSITION = Aspect("Opposition", "opp", 180.0, Influence.NEGATIVE, AspectType.MAJOR)

# Search order; the first of two equally close aspects wins
ASPECTS: tuple[Aspect, ...] = (
    CONJUNCTION, VIGINTILE, QUINDECILE, SEMISEXTILE, DECILE, SEXTILE,
    SEMISQUARE, QUINTILE, SQUARE, TRIDECILE, TRINE,
    SESQUIQUADRATE, BIQUINTILE, QUINCUNX, OPPOSITION,
)


@dataclass(frozen=True)
class BodyLongitude:
    """A named body at an ecliptic longitude in degrees."""
    name: str
    x: float


@dataclass(frozen=True)
class AspectMatch:
    """Closest aspect between a source body and ``target``."""
    target: str
    aspect: Aspect
    arc: float  # separation, degrees in [0, 180]
    delta: float  # |arc - aspect.value|, degrees


class OrbsMethod(Protocol):
    name: str

    def is_aspect(self, src: str, dst: str, aspect: Aspect, arc: float) -> bool:
        ...


class Dariot:
    """Classic orbs of Claude Dariot: mean of the moieties of the two bodies."""

    name = "Classic (Claude Dariot)"
    DEFAULT_MOIETY: float = 4.0
    MOIETIES: dict[str, float] = {
        "Moon": 12.0,
        "Sun": 15.0,
        "Mercury": 7.0,
        "Venus": 7.0,
        "Mars": 8.0,
        "Jupiter": 9.0,
        "Saturn": 9.0,
        "Uranus": 6.0,
        "Neptune": 6.0,
        "Pluto": 5.0,
    }

    def moiety(self, name: str) -> float:
        return self.MOIETIES.get(name, self.DEFAULT_MOIETY)

    def orb(self, src: str, dst: str) -> float:
        return (self.moiety(src) + self.moiety(dst)) / 2.0

    def is_aspect(self, src: str, dst: str, aspect: Aspect, arc: float) -> bool:
        return abs(arc - aspect.value) <= self.orb(src, dst)


class DeVore:
    """Orbs of Nicholas deVore: a fixed arc range for every aspect."""

    name = "By Aspect (Nicholas deVore)"
    RANGES: dict[str, tuple[float, float]] = {
        "Conjunction": (-10.0, 6.0),
        "Vigintile": (17.5, 18.5),
        "Quindecile": (23.5, 24.5),
        "Semisextile": (28.0, 31.0),
        "Decile": (35.5, 36.5),
        "Sextile": (56.0, 63.0),
        "Semisquare": (42.0, 49.0),
        "Quintile": (71.5, 72.5),
        "Square": (84.0, 96.0),
        "Tridecile": (107.5, 108.5),
        "Trine": (113.0, 125.0),
        "Sesquiquadrate": (132.0, 137.0),
        "Biquintile": (143.5, 144.5),
        "Quincunx": (148.0, 151.0),
        "Opposition": (174.0, 186.0),
    }

    def is_aspect(self, src: str, dst: str, aspect: Aspect, arc: float) -> bool:
        lo, hi = self.RANGES[aspect.name]
        return lo <= arc <= hi


class ClassicWithAspectRatio:
    """Dariot orbs scaled down for minor and Kepler aspects."""

    name = "Classic with regard to Aspect type"

    def __init__(self, minor_coeff: float = 0.6, kepler_coeff: float = 0.4) -> None:
        self.minor_coeff = minor_coeff
        self.kepler_coeff = kepler_coeff
        self._classic = Dariot()

    def is_aspect(self, src: str, dst: str, aspect: Aspect, arc: float) -> bool:
        orb = self._classic.orb(src, dst)
        if aspect.type_flag == AspectType.MINOR:
            orb *= self.minor_coeff
        elif aspect.type_flag == AspectType.KEPLER:
            orb *= self.kepler_coeff
        return abs(arc - aspect.value) <= orb


_ORBS_METHODS = {
    "Dariot": Dariot,
    "DeVore": DeVore,
    "ClassicWithAspectRatio": ClassicWithAspectRatio,
}
ORBS_METHOD_NAMES: tuple[str, ...] = tuple(_ORBS_METHODS)


def orbs_method(name: str) -> OrbsMethod:
    """Orbs method by its short name: Dariot, DeVore or ClassicWithAspectRatio.

    Raises:
        ConfigurationError: Unknown name.
    """
    try:
        return _ORBS_METHODS[name]()
    except KeyError:
        raise ConfigurationError(f"Unknown orbs method: {name!r}") from None


def _find_closest(src: str, dst: str, arc: float, method: OrbsMethod,
                  type_flags: AspectType) -> tuple[Aspect, float] | None:
    closest = None
    for aspect in ASPECTS:
        if not type_flags & aspect.type_flag:
            continue
        if method.is_aspect(src, dst, aspect, arc):
            delta = abs(aspect.value - arc)
            if closest is None or closest[1] > delta:
                closest = (aspect, delta)
    return closest


def iter_aspects(
    source: BodyLongitude,
    targets: Iterable[BodyLongitude],
    orbs: OrbsMethod,
    type_flags: AspectType = AspectType.ALL,
) -> Iterator[AspectMatch]:
    """Closest aspect from source to each target, where there is one.

    Targets without an aspect under the given orbs method and type flags
    are skipped.
    """
    for target in targets:
        arc = abs(source.x - target.x)
        if arc > 180.0:
            arc = 360.0 - arc
        closest = _find_closest(source.name, target.name, arc, orbs, type_flags)
        if closest is not None:
            aspect, delta = closest
            yield AspectMatch(target=target.name, aspect=aspect, arc=arc, delta=delta)


def iter_stelliums(positions: Sequence[BodyLongitude],
                   gap: float = 10.0) -> Iterator[list[BodyLongitude]]:
    """Group bodies sorted by longitude into clusters.

    A new group starts wherever the next body is more than ``gap`` degrees
    further along the zodiac.
    """
    group: list[BodyLongitude] = []
    ordered = sorted(positions, key=lambda p: p.x)
    for curr, nxt in zip(ordered, ordered[1:] + [None]):
        group.append(curr)
        if nxt is None or diff_angle_deg(curr.x, nxt.x) > gap:
            yield group
            group = []
