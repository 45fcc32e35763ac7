# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for chart export.

Adapters implement this to write a computed chart in various formats
(JSON, CSV).
"""
from typing import Protocol, runtime_checkable

from skychart.domain.chart import Chart


@runtime_checkable
class ChartExporter(Protocol):
    """Port for exporting chart data to file."""

    def export(self, chart: Chart, path: str) -> int:
        """
        Export a chart to a file.

        Args:
            chart: Chart to export; positions are computed on demand.
            path: Output file path.

        Returns:
            Number of bodies exported.
        """
        ...
