"""Integration tests for multi-format export from the CLI."""

from __future__ import annotations

import csv
import json
from pathlib import Path

from typer.testing import CliRunner

from fences.cli.main import app


runner = CliRunner()

KRAAL = ["-s", "3.6", "-s", "3.6@90", "-s", "gate@90", "-s", "3.6@90", "-s", "2.4@90"]


class TestMultiFormatExport:
    """Tests for --output-formats."""

    def test_single_format(self, tmp_path: Path) -> None:
        """One format writes one file named after the project."""
        result = runner.invoke(
            app,
            ["quote", *KRAAL, "--output-formats", "bom", "--output-dir", str(tmp_path),
             "--project-name", "kraal"],
        )
        assert result.exit_code == 0
        bom = tmp_path / "kraal_bom.csv"
        assert bom.exists()
        rows = list(csv.reader(bom.read_text().splitlines()))
        assert rows[0][0] == "item"
        assert rows[-1][0] == "TOTAL"
        assert "BOM:" in result.output

    def test_all_formats(self, tmp_path: Path) -> None:
        """'all' writes every registered format."""
        result = runner.invoke(
            app, ["quote", *KRAAL, "--output-formats", "all", "--output-dir", str(tmp_path)]
        )
        assert result.exit_code == 0
        assert (tmp_path / "fence_bom.csv").exists()
        data = json.loads((tmp_path / "fence_json.json").read_text())
        assert len(data["segments"]) == 5
        assert data["bill_of_materials"]["gate_count"] == 1

    def test_unknown_format(self, tmp_path: Path) -> None:
        """Unknown formats exit with code 1 and list the available ones."""
        result = runner.invoke(
            app, ["quote", "-s", "2.4", "--output-formats", "json,dxf", "--output-dir", str(tmp_path)]
        )
        assert result.exit_code == 1
        assert "Unknown formats: dxf" in result.output
        assert "Available formats: bom, json" in result.output
        assert not (tmp_path / "fence_json.json").exists()
