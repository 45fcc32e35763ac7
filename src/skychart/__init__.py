# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Skychart

Astrological chart calculation from analytic ephemerides: geocentric
positions of the Sun, Moon, lunar node and planets (light-time, nutation
and aberration corrected), sidereal time, sensitive points, seven house
systems, aspects with three orbs methods, and lunar phases.
"""

from skychart.domain.ephemeris_contracts import (
    ConfigurationError,
    DomainError,
    NumericalError,
)
from skychart.domain.ephemeris import (
    PLANETS,
    EclipticPosition,
    Ephemeris,
    HeliocentricPosition,
    PlanetPosition,
    geocentric,
)
from skychart.domain.moon import MoonPosition
from skychart.domain.time_systems import (
    calendar_day,
    datetime_to_djd,
    delta_t,
    djd_to_datetime,
    julian_day,
    local_sidereal,
    sidereal_to_utc,
)
from skychart.domain.coordinate_frames import (
    ecl_to_equ,
    equ_to_ecl,
    equ_to_hor,
    hor_to_equ,
)
from skychart.domain.points import (
    POINTS,
    ascendant,
    east_point,
    midheaven,
    vertex,
)
from skychart.domain.houses import (
    HouseSystem,
    houses_function,
    in_house,
)
from skychart.domain.aspects import (
    AspectMatch,
    AspectType,
    BodyLongitude,
    ClassicWithAspectRatio,
    Dariot,
    DeVore,
    iter_aspects,
    iter_stelliums,
)
from skychart.domain.lunation import (
    Quarter,
    find_closest,
)
from skychart.domain.chart import (
    Chart,
    ChartOptions,
    GeoLocation,
    PlanetData,
)

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "DomainError",
    "NumericalError",
    "PLANETS",
    "EclipticPosition",
    "Ephemeris",
    "HeliocentricPosition",
    "PlanetPosition",
    "geocentric",
    "MoonPosition",
    "calendar_day",
    "datetime_to_djd",
    "delta_t",
    "djd_to_datetime",
    "julian_day",
    "local_sidereal",
    "sidereal_to_utc",
    "ecl_to_equ",
    "equ_to_ecl",
    "equ_to_hor",
    "hor_to_equ",
    "POINTS",
    "ascendant",
    "east_point",
    "midheaven",
    "vertex",
    "HouseSystem",
    "houses_function",
    "in_house",
    "AspectMatch",
    "AspectType",
    "BodyLongitude",
    "ClassicWithAspectRatio",
    "Dariot",
    "DeVore",
    "iter_aspects",
    "iter_stelliums",
    "Quarter",
    "find_closest",
    "Chart",
    "ChartOptions",
    "GeoLocation",
    "PlanetData",
]
