# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for chart calculation.

Usage:
    # Chart for now at the default place (Moscow)
    skychart

    # Given moment and place, Koch houses, deVore orbs
    skychart --date 1965-02-01T11:46:00Z --lat 55.75 --lon -37.58 \\
        --houses Koch --orbs DeVore

    # Chart read from a JSON description
    skychart --input chart.json

    # Export and lunar phases
    skychart --date 2019-08-21 --export-json chart.json --export-csv chart.csv
    skychart --date 2019-08-21 --phases
"""
import argparse
import logging
import math
import sys
from dataclasses import replace

from skychart.adapters.csv_exporter import CsvChartExporter, format_zodiac
from skychart.adapters.json_io import JsonChartExporter, JsonChartReader, parse_date
from skychart.domain.aspects import ORBS_METHOD_NAMES
from skychart.domain.chart import CHART_HOUSE_SYSTEMS, Chart, GeoLocation
from skychart.domain.lunation import Quarter, find_closest
from skychart.domain.points import POINTS
from skychart.domain.time_systems import calendar_day, djd_to_datetime

_ROMAN = ("I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X", "XI", "XII")


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_chart(args: argparse.Namespace) -> Chart:
    """Chart from an input file and/or command-line overrides."""
    chart = JsonChartReader().read_chart(args.input) if args.input else Chart()

    if args.date:
        chart.date = parse_date(args.date)

    if args.lat is not None or args.lon is not None:
        geo = chart.geo
        chart.geo = GeoLocation(
            latitude=geo.latitude if args.lat is None else args.lat,
            longitude=geo.longitude if args.lon is None else args.lon,
        )

    overrides = {}
    if args.houses:
        overrides['houses'] = args.houses
    if args.orbs:
        overrides['orbs_method'] = args.orbs
    if args.mean_node:
        overrides['true_node'] = False
    if args.true_position:
        overrides['apparent'] = False
    if overrides:
        chart.options = replace(chart.options, **overrides)
    return chart


def format_longitude(x: float) -> str:
    """Longitude in radians as ``Sign DD°MM'SS"``."""
    sign, pos = format_zodiac(math.degrees(x))
    return f"{sign:<11} {pos}"


def format_motion(motion: float) -> str:
    """Daily motion in degrees, flagged R when retrograde."""
    flag = "R" if motion < 0 else " "
    return f"{motion:+9.4f} {flag}"


def print_chart(chart: Chart) -> None:
    """Print positions, sensitive points and house cusps."""
    opts = chart.options
    print(f"{chart.name}")
    print(f"  Date:       {chart.date.isoformat()}")
    print(f"  Place:      lat {chart.geo.latitude:.4f}, lon {chart.geo.longitude:.4f} (west positive)")
    print(f"  DJD {chart.djd:.6f}, Delta-T {chart.delta_t:.1f}s, LST {chart.lst:.6f}h")
    print(f"  Houses: {opts.houses}, orbs: {opts.orbs_method}")
    print()
    print(f"{'Body':<8} {'Longitude':<22} {'Latitude':>10} {'Motion':>14} {'House':>6}")
    for name, data in chart.planets.items():
        print(
            f"{name:<8} {format_longitude(data.coords.x):<22} "
            f"{math.degrees(data.coords.y):>+10.4f} "
            f"{format_motion(data.motion):>14} {_ROMAN[data.house]:>6}"
        )
    print()
    for name in POINTS:
        print(f"{name:<10} {format_longitude(chart.points[name])}")
    print()
    for i, cusp in enumerate(chart.cusps):
        print(f"{_ROMAN[i]:>4} {format_longitude(cusp)}")


def print_phases(chart: Chart) -> None:
    """Print the lunar quarters closest to the chart date."""
    year, month, day = calendar_day(chart.djd)
    print()
    for quarter in Quarter:
        djd = find_closest(quarter, year, month, day)
        print(f"{quarter.value:<14} {djd_to_datetime(djd).strftime('%Y-%m-%d %H:%M')} UT")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Calculate an astrological chart: planets, houses and aspects"
    )
    parser.add_argument(
        '--input', '-i',
        help="Path to a chart description JSON (name, date, geo, options)"
    )
    parser.add_argument(
        '--date', '-d',
        help="ISO-8601 date and time; UTC when no offset is given (default: now)"
    )
    parser.add_argument(
        '--verbose', '-v', action='count', default=0,
        help="Increase log verbosity (-v info, -vv debug)"
    )

    place_group = parser.add_argument_group('place')
    place_group.add_argument(
        '--lat', type=float,
        help="Geographic latitude, degrees north (default: 55.75)"
    )
    place_group.add_argument(
        '--lon', type=float,
        help="Geographic longitude, degrees, positive WEST (default: -37.58)"
    )

    options_group = parser.add_argument_group('options')
    options_group.add_argument(
        '--houses', choices=CHART_HOUSE_SYSTEMS,
        help="House system (default: Placidus)"
    )
    options_group.add_argument(
        '--orbs', choices=ORBS_METHOD_NAMES,
        help="Orbs method for aspects (default: Dariot)"
    )
    options_group.add_argument(
        '--mean-node', action='store_true', default=False,
        help="Use the mean lunar node instead of the true node"
    )
    options_group.add_argument(
        '--true-position', action='store_true', default=False,
        help="Geometric positions without nutation and aberration"
    )
    options_group.add_argument(
        '--phases', action='store_true', default=False,
        help="Also print the lunar quarters nearest to the date"
    )

    export_group = parser.add_argument_group('export')
    export_group.add_argument(
        '--export-json',
        help="Export the full chart as JSON"
    )
    export_group.add_argument(
        '--export-csv',
        help="Export body positions as CSV"
    )

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        chart = build_chart(args)
        print_chart(chart)
        if args.phases:
            print_phases(chart)

        if args.export_json:
            n = JsonChartExporter().export(chart, args.export_json)
            print(f"Exported {n} bodies to {args.export_json} (JSON)")

        if args.export_csv:
            n = CsvChartExporter().export(chart, args.export_csv)
            print(f"Exported {n} bodies to {args.export_csv} (CSV)")

    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename}", file=sys.stderr)
        sys.exit(1)
    except (ValueError, LookupError, ArithmeticError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
