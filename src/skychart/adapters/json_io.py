# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON chart file I/O adapter.

Reads chart descriptions and writes computed charts in JSON format.

Input format:
    {
      "name": "Example",
      "date": "1965-02-01T11:46:00+00:00",
      "geo": {"latitude": 55.75, "longitude": -37.58},
      "options": {"houses": "Koch", "orbs_method": "DeVore"}
    }

Every key is optional; missing values take the Chart defaults.
"""
import json
import logging
from datetime import datetime, timezone
from typing import Any

from skychart.domain.chart import Chart, ChartOptions, GeoLocation
from skychart.domain.ephemeris_contracts import ConfigurationError
from skychart.ports import ChartReader
from skychart.ports.export import ChartExporter

_log = logging.getLogger(__name__)


def parse_date(text: str) -> datetime:
    """ISO-8601 date/time; a value without offset is taken as UTC."""
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


class JsonChartReader(ChartReader):
    """Reads chart descriptions from JSON files."""

    def read_chart(self, path: str) -> Chart:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
        return self.chart_from_dict(data)

    def chart_from_dict(self, data: dict[str, Any]) -> Chart:
        """
        Build a Chart from a parsed JSON mapping.

        Raises:
            ConfigurationError: Unknown keys in ``geo`` or ``options``.
            ValueError: Malformed date.
        """
        try:
            geo = GeoLocation(**data['geo']) if 'geo' in data else None
            options = ChartOptions(**data['options']) if 'options' in data else None
        except TypeError as e:
            raise ConfigurationError(f"Invalid chart description: {e}") from None
        date = parse_date(data['date']) if 'date' in data else None
        return Chart(
            name=data.get('name', 'New Chart'),
            date=date,
            geo=geo,
            options=options,
        )


class JsonChartExporter(ChartExporter):
    """Writes the full chart snapshot (Chart.to_dict) to a JSON file."""

    def export(self, chart: Chart, path: str) -> int:
        data = chart.to_dict()
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        _log.info("Wrote chart %r to %s", chart.name, path)
        return len(data['planets'])
