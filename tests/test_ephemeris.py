# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the Ephemeris: planets, Sun, Moon, node and daily motion."""
import logging
import math

import pytest

from skychart.domain.ephemeris import (
    PLANETS,
    EclipticPosition,
    Ephemeris,
    PlanetPosition,
    geocentric,
)
from skychart.domain.moon import MoonPosition

# ── Geocentric planets, 1984 January 21 ─────────────────────────────

_GEO_1984 = [
    ("Mercury", 275.88530, 1.47425, 0.98587),
    ("Venus", 264.15699, 1.42582, 1.22905),
    ("Mars", 214.98173, 1.67762, 1.41366),
    ("Jupiter", 270.30024, 0.29758, 6.10966),
    ("Saturn", 225.37862, 2.33550, 10.04942),
    ("Uranus", 252.17354, 0.05160, 19.63393),
    ("Neptune", 270.07638, 1.16314, 31.11160),
    ("Pluto", 212.07989, 16.88244, 29.86118),
]


class TestTrueGeocentric:

    @pytest.fixture(scope="class")
    def eph(self):
        return Ephemeris(30700.5)

    @pytest.mark.parametrize("name,lon,lat,dist", _GEO_1984)
    def test_planet(self, eph, name, lon, lat, dist):
        pos = eph.get_position(name)
        assert isinstance(pos, PlanetPosition)
        assert math.degrees(pos.geo.l) == pytest.approx(lon, abs=1e-4)
        assert math.degrees(pos.geo.b) == pytest.approx(lat, abs=1e-4)
        assert pos.geo.d == pytest.approx(dist, abs=1e-4)


class TestDuffettSmithExamples:
    """1984 May 30, geometric positions."""

    @pytest.fixture(scope="class")
    def eph(self):
        return Ephemeris(30830.5)

    @pytest.mark.parametrize("name,helio,geo", [
        ("Mercury", (-34.7722, -6.95147, 0.401741), (45.9319, -2.78797, 0.999897)),
        ("Saturn", (223.9315, 2.33025, 9.865601), (221.2009, 2.56691, 8.956587)),
    ])
    def test_positions(self, eph, name, helio, geo):
        pos = eph.get_position(name)
        assert pos.helio.l == pytest.approx(math.radians(helio[0]), abs=1e-4)
        assert pos.helio.b == pytest.approx(math.radians(helio[1]), abs=1e-4)
        assert pos.helio.r == pytest.approx(helio[2], abs=1e-4)
        assert pos.geo.l == pytest.approx(math.radians(geo[0]), abs=1e-3)
        assert pos.geo.b == pytest.approx(math.radians(geo[1]), abs=1e-3)
        assert pos.geo.d == pytest.approx(geo[2], abs=1e-3)


class TestApparentPlanets:

    def test_mars_and_jupiter(self):
        """Nutation and aberration applied, 1984 January 21."""
        eph = Ephemeris(30700.5, apparent=True)
        mars = eph.get_position("Mars").geo
        jupiter = eph.get_position("Jupiter").geo
        assert math.degrees(mars.l) == pytest.approx(214.97707, abs=1e-4)
        assert math.degrees(mars.b) == pytest.approx(1.67745, abs=1e-4)
        assert math.degrees(jupiter.l) == pytest.approx(270.29112, abs=1e-4)
        assert math.degrees(jupiter.b) == pytest.approx(0.29757, abs=1e-4)


class TestLightTime:

    @pytest.mark.parametrize("djd", range(0, 73051, 7305))
    def test_distance_consistent(self, djd):
        """Geocentric distance obeys the triangle Sun-Earth-planet, 1900-2100."""
        eph = Ephemeris(float(djd))
        for name in PLANETS[2:10]:
            pos = eph.get_position(name)
            assert abs(pos.helio.r - 1.0) - 0.02 <= pos.geo.d <= pos.helio.r + 1.02


# ── Sun and Moon ────────────────────────────────────────────────────

_SUN = [
    (30916.5, 2.635675729656964, 150.9977631883356),
    (30819.10833333333, 1.009348984801347, 57.81531033020392),
    (28804.5, 4.00119704995796, 229.2394659978847),
    (33888.5, 3.48901800235592, 199.89909262556887),
]


class TestSun:

    @pytest.mark.parametrize("djd,true_l,_", _SUN)
    def test_true_longitude(self, djd, true_l, _):
        got = Ephemeris(djd).get_position("Sun")
        assert math.degrees(got.l) == pytest.approx(math.degrees(true_l), abs=1e-3)

    @pytest.mark.parametrize("djd,_,apparent", _SUN)
    def test_apparent_longitude(self, djd, _, apparent):
        got = Ephemeris(djd, apparent=True).get_position("Sun")
        assert math.degrees(got.l) == pytest.approx(apparent, abs=1e-4)

    def test_sun_on_ecliptic(self):
        pos = Ephemeris(30916.5).get_position("Sun")
        assert isinstance(pos, EclipticPosition)
        assert pos.b == 0.0
        assert pos.d == pytest.approx(1.010993800005251, abs=1e-4)


class TestMoon:

    @pytest.mark.parametrize("djd,lon", [
        (23772.99027777778, 310.19998902960941),
        (30735.5, 260.7128333333333),
    ])
    def test_apparent_longitude(self, djd, lon):
        got = Ephemeris(djd, apparent=True).get_position("Moon")
        assert isinstance(got, MoonPosition)
        assert math.degrees(got.l) == pytest.approx(lon, abs=1e-3)


# ── Node ────────────────────────────────────────────────────────────

class TestNode:

    def test_true_and_mean(self):
        true_l = Ephemeris(23772.990277, False, True).get_position("Node").l
        mean_l = Ephemeris(23772.990277, False, False).get_position("Node").l
        assert math.degrees(mean_l) == pytest.approx(80.3117, abs=1e-4)
        assert abs(math.degrees(true_l - mean_l)) <= 3.0


# ── Daily motion ────────────────────────────────────────────────────

class TestDailyMotion:

    @pytest.fixture(scope="class")
    def eph(self):
        return Ephemeris(42165.900896222796)  # 2015 June 12.4

    @pytest.mark.parametrize("name,motion", [
        ("Moon", 14.0721),
        ("Sun", 0.9560),
        ("Mercury", 0.0344),
        ("Venus", 0.9132),
        ("Mars", 0.6832),
        ("Jupiter", 0.1600),
        ("Saturn", -0.0669),
        ("Uranus", 0.0336),
        ("Neptune", -0.0001),
        ("Pluto", -0.0223),
    ])
    def test_motion(self, eph, name, motion):
        assert eph.get_daily_motion(name) == pytest.approx(motion, abs=1e-4)

    def test_neighbours_share_flags(self):
        eph = Ephemeris(42165.9, apparent=True, true_node=False)
        for other in (eph.prev, eph.next):
            assert other.apparent is True
            assert other.true_node is False
        assert eph.next.djd - eph.prev.djd == pytest.approx(1.0)

    def test_node_motion_is_small(self, eph):
        assert abs(eph.get_daily_motion("Node")) < 0.5


# ── Caching and lookup ──────────────────────────────────────────────

class TestGetPosition:

    def test_cached(self):
        eph = Ephemeris(30700.5)
        assert eph.get_position("Mars") is eph.get_position("Mars")

    def test_cache_miss_logged_once(self, caplog):
        eph = Ephemeris(30700.5)
        with caplog.at_level(logging.DEBUG, logger="skychart.domain.ephemeris"):
            eph.get_position("Venus")
            eph.get_position("Venus")
        assert sum("Computed Venus" in r.getMessage() for r in caplog.records) == 1

    def test_unknown_body(self):
        with pytest.raises(LookupError, match="Vulcan"):
            Ephemeris(30700.5).get_position("Vulcan")

    def test_all_bodies(self):
        eph = Ephemeris(30700.5, apparent=True)
        for name in PLANETS:
            pos = geocentric(eph.get_position(name))
            assert 0.0 <= pos.l < 2 * math.pi

    def test_obliquity(self):
        """True obliquity, radians."""
        eph = Ephemeris(23772.990277)
        assert math.degrees(eph.obliquity) == pytest.approx(23.444257239272336, abs=1e-5)
