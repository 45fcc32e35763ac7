# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV chart exporter.

Exports one row per chart body with its geocentric ecliptic position.
External dependencies (csv, file I/O) are confined to this adapter.
"""
import csv
import logging
import math

from skychart.domain.chart import Chart
from skychart.domain.mathutils import zdms
from skychart.ports.export import ChartExporter

_log = logging.getLogger(__name__)

ZODIAC: tuple[str, ...] = (
    'Aries', 'Taurus', 'Gemini', 'Cancer', 'Leo', 'Virgo',
    'Libra', 'Scorpio', 'Sagittarius', 'Capricorn', 'Aquarius', 'Pisces',
)

_HEADER = [
    'name', 'lon_deg', 'lat_deg', 'dist_au', 'sign', 'dms',
    'motion_deg_per_day', 'retrograde', 'house',
]


def format_zodiac(lon_deg: float) -> tuple[str, str]:
    """Zodiac sign name and ``DD°MM'SS"`` position within the sign."""
    sign, d, m, s = zdms(lon_deg)
    return ZODIAC[int(sign)], f'{int(d):02d}°{int(m):02d}\'{int(s):02d}"'


class CsvChartExporter(ChartExporter):
    """Exports chart body positions to CSV."""

    def export(self, chart: Chart, path: str) -> int:
        planets = chart.planets
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_HEADER)

            for name, data in planets.items():
                lon_deg = math.degrees(data.coords.x)
                sign, pos = format_zodiac(lon_deg)
                writer.writerow([
                    name,
                    f'{lon_deg:.6f}',
                    f'{math.degrees(data.coords.y):.6f}',
                    f'{data.coords.z:.6f}',
                    sign,
                    pos,
                    f'{data.motion:.4f}',
                    data.retrograde,
                    data.house + 1,
                ])

        _log.info("Wrote %d bodies of chart %r to %s", len(planets), chart.name, path)
        return len(planets)
