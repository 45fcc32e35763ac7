# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Sensitive points of a chart: Midheaven, Ascendant, Vertex and East Point.

Inputs are the right ascension of the meridian (ramc), the obliquity of the
ecliptic (eps) and the geographic latitude (theta), all in radians. Every
function returns an ecliptic longitude in [0, 2pi).
"""
import math

from skychart.domain.mathutils import PI_HALF, reduce_rad

POINTS: tuple[str, ...] = ("Ascendant", "Midheaven", "Vertex", "EastPoint")


def midheaven(ramc: float, eps: float) -> float:
    """Ecliptic longitude of the upper meridian."""
    x = math.atan2(math.tan(ramc), math.cos(eps))
    if x < 0:
        x += math.pi
    if math.sin(ramc) < 0:
        x += math.pi
    return reduce_rad(x)


def ascendant(ramc: float, eps: float, theta: float) -> float:
    """Ecliptic longitude rising on the eastern horizon."""
    return reduce_rad(math.atan2(
        math.cos(ramc),
        -math.sin(ramc) * math.cos(eps) - math.tan(theta) * math.sin(eps),
    ))


def vertex(ramc: float, eps: float, theta: float) -> float:
    """Western intersection of the ecliptic with the prime vertical."""
    return ascendant(ramc + math.pi, eps, PI_HALF - theta)


def east_point(ramc: float, eps: float) -> float:
    """Ascendant at the equator."""
    return reduce_rad(math.atan2(math.cos(ramc), -math.sin(ramc) * math.cos(eps)))
