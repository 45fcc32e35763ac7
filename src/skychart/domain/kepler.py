# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Kepler's equation for elliptical orbits.

Newton-Raphson solution of M = E - e sin E, starting from E0 = M, and the
eccentric-to-true anomaly conversion.

Reference: Peter Duffett-Smith, "Astronomy With Your Personal Computer",
Cambridge University Press, 1995.
"""
import logging
import math

from skychart.domain.ephemeris_contracts import NumericalError

_log = logging.getLogger(__name__)

KEPLER_TOLERANCE: float = 1e-7  # radians
KEPLER_MAX_ITERATIONS: int = 50


def solve_kepler(s: float, m: float) -> float:
    """Eccentric anomaly for eccentricity s (< 1) and mean anomaly m.

    Args:
        s: Orbital eccentricity, 0 <= s < 1.
        m: Mean anomaly in radians.

    Returns:
        Eccentric anomaly in radians.

    Raises:
        NumericalError: No convergence within KEPLER_MAX_ITERATIONS.
    """
    ea = m
    for iteration in range(KEPLER_MAX_ITERATIONS):
        dla = ea - s * math.sin(ea) - m
        if abs(dla) < KEPLER_TOLERANCE:
            _log.debug("Kepler converged after %d iterations (e=%.6f)", iteration, s)
            return ea
        ea -= dla / (1.0 - s * math.cos(ea))
    raise NumericalError(
        f"Kepler equation did not converge in {KEPLER_MAX_ITERATIONS} "
        f"iterations (e={s}, M={m})"
    )


def true_anomaly(s: float, ea: float) -> float:
    """True anomaly in radians from eccentricity s and eccentric anomaly ea."""
    return 2.0 * math.atan(math.sqrt((1.0 + s) / (1.0 - s)) * math.tan(ea / 2.0))
