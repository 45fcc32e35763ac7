# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the command-line interface."""
import csv
import json

import pytest

from skychart.cli import format_motion, main

BIRTH_ARGS = ["--date", "1965-02-01T11:46:00Z"]


class TestCliChart:

    def test_prints_chart(self, capsys):
        main(BIRTH_ARGS)
        out = capsys.readouterr().out
        assert "DJD 23772.990" in out
        assert "Houses: Placidus, orbs: Dariot" in out
        for name in ("Moon", "Sun", "Pluto", "Node", "Ascendant", "Midheaven"):
            assert name in out
        assert "Aquarius" in out

    def test_place_and_options(self, capsys):
        main(BIRTH_ARGS + ["--lat", "40.0", "--lon", "74.0",
                           "--houses", "Koch", "--orbs", "DeVore", "--mean-node"])
        out = capsys.readouterr().out
        assert "lat 40.0000, lon 74.0000" in out
        assert "Houses: Koch, orbs: DeVore" in out

    def test_phases(self, capsys):
        main(["--date", "2019-08-21", "--phases"])
        out = capsys.readouterr().out
        assert "New Moon" in out
        assert "2019-08-30" in out
        assert "Last Quarter" in out

    def test_input_file(self, tmp_path, capsys):
        path = tmp_path / "chart.json"
        path.write_text(json.dumps({"name": "From file", "date": "1965-02-01T11:46:00Z"}))
        main(["--input", str(path)])
        assert "From file" in capsys.readouterr().out


class TestCliExport:

    def test_export_json_and_csv(self, tmp_path, capsys):
        json_path = tmp_path / "chart.json"
        csv_path = tmp_path / "chart.csv"
        main(BIRTH_ARGS + ["--export-json", str(json_path), "--export-csv", str(csv_path)])
        out = capsys.readouterr().out
        assert f"Exported 11 bodies to {json_path} (JSON)" in out
        assert f"Exported 11 bodies to {csv_path} (CSV)" in out
        assert json.loads(json_path.read_text())["name"] == "New Chart"
        with open(csv_path, newline="") as f:
            assert len(list(csv.reader(f))) == 12


class TestCliErrors:
    """Errors exit with status 1 and a message on stderr."""

    def test_missing_input_file(self, tmp_path, capsys):
        missing = str(tmp_path / "nonexistent.json")
        with pytest.raises(SystemExit) as exc_info:
            main(["--input", missing])
        assert exc_info.value.code == 1
        assert "File not found" in capsys.readouterr().err

    def test_malformed_date(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--date", "yesterday"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_polar_latitude(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(BIRTH_ARGS + ["--lat", "80"])
        assert exc_info.value.code == 1
        assert "undefined at latitude" in capsys.readouterr().err

    def test_unknown_house_system_rejected_by_argparse(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(BIRTH_ARGS + ["--houses", "Porphyry"])
        assert exc_info.value.code == 2


class TestFormatMotion:

    def test_direct(self):
        assert format_motion(0.956) == "  +0.9560  "

    def test_retrograde(self):
        assert format_motion(-0.0669).endswith("R")
