# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for planetary perturbations of the mean elements."""
import math

import pytest

from skychart.domain.ephemeris_contracts import ConfigurationError
from skychart.domain.orbits import mean_anomalies, orbital_elements
from skychart.domain.perturbations import (
    NO_PERTURBATION,
    PerturbationArgs,
    aux_sun,
    calculate_perturbations,
)
from skychart.domain.sun import mean_anomaly

T_1984 = 30700.5 / 36525

# dl, dr, dml, ds, dm, da, dhl
_EXPECTED = {
    "Mercury": (-0.00137, -0.00001, 0.0, 0.0, 0.0, 0.0, 0.0),
    "Venus": (-0.00296, -0.00002, 0.0, 0.0, 0.0, 0.0, 0.0),
    "Mars": (0.00559, -0.00002, 0.00023, 0.0, 0.00023, 0.0, 0.0),
    "Jupiter": (0.0, 0.0, 0.00069, -0.00044, -0.02062, 0.00020, 0.0),
    "Saturn": (0.0, 0.0, -0.00004, -0.00469, -0.02854, 0.01638, -0.00005),
    "Uranus": (-0.03708, -0.02201, -0.01396, 0.00097, 0.02726, -0.00138, 0.00002),
    "Neptune": (-0.00004, -0.03142, 0.00953, -0.00041, 0.07023, 0.00314, 0.0),
    "Pluto": (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
}


def _args(name: str) -> PerturbationArgs:
    return PerturbationArgs(
        t=T_1984,
        ms=math.radians(mean_anomaly(T_1984)),
        anomalies=mean_anomalies(T_1984),
        s=orbital_elements(name, T_1984).s,
    )


class TestCalculatePerturbations:

    @pytest.mark.parametrize("name", list(_EXPECTED))
    def test_values(self, name):
        """Corrections for 1984 January 21."""
        got = calculate_perturbations(name, _args(name))
        fields = (got.dl, got.dr, got.dml, got.ds, got.dm, got.da, got.dhl)
        for value, expected in zip(fields, _EXPECTED[name]):
            assert value == pytest.approx(expected, abs=1e-4)

    def test_pluto_is_unperturbed(self):
        assert calculate_perturbations("Pluto", _args("Pluto")) is NO_PERTURBATION

    def test_unknown_body(self):
        with pytest.raises(ConfigurationError, match="Sun"):
            calculate_perturbations("Sun", _args("Mars"))


class TestAuxSun:

    def test_six_angles(self):
        assert len(aux_sun(T_1984)) == 6

    def test_first_argument(self):
        """x1 = t/5 + 0.1."""
        assert aux_sun(T_1984)[0] == pytest.approx(T_1984 / 5 + 0.1)
