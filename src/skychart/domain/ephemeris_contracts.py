# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Error taxonomy shared by the ephemeris, house and chart modules.

Every computation in the domain layer is deterministic: a failure on a
given input fails identically on retry, so errors are raised straight to
the caller and never retried or swallowed.
"""


class ConfigurationError(ValueError):
    """Requested an identifier (body, house system, orbs method) with no model."""


class NumericalError(ArithmeticError):
    """An iterative solver did not converge within its iteration cap."""


class DomainError(ValueError):
    """A computation is undefined for the given input (e.g. polar latitudes)."""
