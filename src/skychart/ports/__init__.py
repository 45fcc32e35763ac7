# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for chart file I/O.

Adapters implement these to handle different file formats.
"""
from typing import Protocol, runtime_checkable

from skychart.domain.chart import Chart


@runtime_checkable
class ChartReader(Protocol):
    """Port for reading chart input data."""

    def read_chart(self, path: str) -> Chart:
        """Read a chart description (name, date, place, options) from a file."""
        ...
