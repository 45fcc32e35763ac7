# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for house systems and house membership."""
import logging
import math

import pytest

from skychart.domain import houses
from skychart.domain.ephemeris_contracts import (
    ConfigurationError,
    DomainError,
    NumericalError,
)
from skychart.domain.houses import (
    QUADRANT_SYSTEMS,
    HouseSystem,
    equal,
    houses_function,
    in_house,
)

RAMC = math.radians(45.0)
MC = math.radians(47.47)
ASC = math.radians(144.92)
THETA = math.radians(42.0)
EPS = math.radians(23.4523)


class TestQuadrantSystems:

    @pytest.mark.parametrize("system,expected", [
        ("Placidus", (83.21, 116.42, 167.08, 194.39)),
        ("Koch", (87.50, 117.46, 172.43, 200.09)),
        ("Regiomontanus", (86.55, 119.56, 167.79, 193.66)),
        ("Campanus", (77.90, 111.82, 174.04, 200.48)),
        ("Topocentric", (83.04, 116.25, 167.04, 194.43)),
    ])
    def test_intermediate_cusps(self, system, expected):
        """Cusps XI, XII, II and III."""
        cusps = houses_function(system)(RAMC, EPS, THETA, ASC, MC)
        for index, value in zip((10, 11, 1, 2), expected):
            assert math.degrees(cusps[index]) == pytest.approx(value, abs=1e-1)

    @pytest.mark.parametrize("system", sorted(QUADRANT_SYSTEMS, key=lambda s: s.value))
    def test_angles_and_opposites(self, system):
        cusps = houses_function(system)(RAMC, EPS, THETA, ASC, MC)
        assert len(cusps) == 12
        assert cusps[0] == ASC
        assert cusps[9] == MC
        for i in range(6):
            diff = (cusps[i + 6] - cusps[i]) % (2 * math.pi)
            assert diff == pytest.approx(math.pi)

    @pytest.mark.parametrize("system", sorted(QUADRANT_SYSTEMS, key=lambda s: s.value))
    def test_polar_latitude_raises(self, system):
        with pytest.raises(DomainError, match="undefined at latitude"):
            houses_function(system)(RAMC, EPS, math.radians(70.0), ASC, MC)

    def test_placidus_no_convergence(self, monkeypatch):
        monkeypatch.setattr(houses, "PLACIDUS_MAX_ITERATIONS", 1)
        with pytest.raises(NumericalError, match="did not converge"):
            houses_function(HouseSystem.PLACIDUS)(RAMC, EPS, THETA, ASC, MC)

    def test_placidus_logs_iterations(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="skychart.domain.houses"):
            houses_function(HouseSystem.PLACIDUS)(RAMC, EPS, THETA, ASC, MC)
        assert "converged" in caplog.text


class TestMorinus:

    def test_cusps(self):
        expected = (74.321099, 106.882333, 138.021622, 166.706990,
                    194.329719, 223.092245, 254.321099, 286.882333,
                    318.021622, 346.706990, 14.329719, 43.092245)
        cusps = houses_function("Morinus")(math.radians(345.559001), math.radians(23.430827))
        for got, exp in zip(cusps, expected):
            assert math.degrees(got) == pytest.approx(exp, abs=1e-2)


class TestEqual:

    def test_sign_cusps(self):
        cusps = equal()
        for i, got in enumerate(cusps):
            assert math.degrees(got) == pytest.approx(30.0 * i, abs=1e-5)

    def test_from_ascendant(self):
        expected = (110, 140, 170, 200, 230, 260, 290, 320, 350, 20, 50, 80)
        for got, exp in zip(equal(math.radians(110.0)), expected):
            assert math.degrees(got) == pytest.approx(exp, abs=1e-5)

    def test_from_midheaven(self):
        """Cusp X at 20 degrees gives the same houses as Asc at 110."""
        expected = (110, 140, 170, 200, 230, 260, 290, 320, 350, 20, 50, 80)
        for got, exp in zip(houses_function("Equal")(math.radians(20.0), 9), expected):
            assert math.degrees(got) == pytest.approx(exp, abs=1e-5)


class TestHousesFunction:

    def test_by_enum_and_name(self):
        assert houses_function(HouseSystem.KOCH) is houses_function("Koch")

    def test_unknown_name(self):
        with pytest.raises(ConfigurationError, match="Porphyry"):
            houses_function("Porphyry")


_PLACIDUS_CUSPS = (110.1572788, 123.8606431, 140.6604438, 164.3171029, 201.3030337,
                   251.6072499, 290.1572788, 303.8606431, 320.6604438, 344.3171029,
                   21.3030337, 71.6072499)
_KOCH_CUSPS = (110.1572788, 128.7319594, 146.5218115, 164.3171029, 233.9641006,
               268.2927967, 290.1572788, 308.7319594, 326.5218115, 344.3171029,
               53.9641006, 88.2927967)


class TestInHouse:

    @pytest.mark.parametrize("cusps,x,house", [
        (_PLACIDUS_CUSPS, 312.4208864, 7),
        (_PLACIDUS_CUSPS, 310.2063276, 7),
        (_PLACIDUS_CUSPS, 297.0782202, 6),
        (_PLACIDUS_CUSPS, 295.2089981, 6),
        (_PLACIDUS_CUSPS, 177.9665740, 3),
        (_PLACIDUS_CUSPS, 46.9285345, 10),
        (_PLACIDUS_CUSPS, 334.6014315, 8),
        (_PLACIDUS_CUSPS, 164.0317672, 2),
        (_PLACIDUS_CUSPS, 229.9100725, 4),
        (_PLACIDUS_CUSPS, 165.8252621, 3),
        (_KOCH_CUSPS, 312.4208864, 7),
        (_KOCH_CUSPS, 310.2063276, 7),
        (_KOCH_CUSPS, 297.0782202, 6),
        (_KOCH_CUSPS, 295.2089981, 6),
        (_KOCH_CUSPS, 177.9665740, 3),
        (_KOCH_CUSPS, 46.9285345, 9),
        (_KOCH_CUSPS, 334.6014315, 8),
        (_KOCH_CUSPS, 164.0317672, 2),
        (_KOCH_CUSPS, 229.9100725, 3),
        (_KOCH_CUSPS, 165.8252621, 3),
    ])
    def test_in_house(self, cusps, x, house):
        assert in_house(math.radians(x), [math.radians(c) for c in cusps]) == house

    def test_across_zero(self):
        """House XI spans 0 Aries in the Placidus chart."""
        cusps = [math.radians(c) for c in _PLACIDUS_CUSPS]
        assert in_house(math.radians(359.0), cusps) == 9
        assert in_house(math.radians(1.0), cusps) == 9

    def test_on_cusp_belongs_to_next_house(self):
        cusps = equal()
        assert in_house(math.radians(30.0), cusps) == 1

    def test_half_second_before_cusp(self):
        """A body a fraction of an arc-second short of a cusp is on it."""
        cusps = equal()
        assert in_house(math.radians(30.0 - 0.1 / 3600), cusps) == 1

    def test_malformed_cusps(self):
        with pytest.raises(ValueError, match="malformed"):
            in_house(1.0, [0.5] * 12)
