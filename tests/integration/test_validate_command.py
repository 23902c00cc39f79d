"""Integration tests for the validate CLI command.

These tests run the validate command end-to-end: clean files, load and
schema errors, fencing advisories and exit codes.
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from fences.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_config(self, runner: CliRunner, write_config) -> None:
        """A clean configuration exits with code 0."""
        path = write_config(
            {
                "schema_version": "1.0",
                "fence": {"height": 1.2, "rail_spacing": 0.3, "overlap": 0.15},
                "pricing": {"post": 150, "gate": 1200},
            }
        )
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 0
        assert "Validation passed. Configuration is valid." in result.output

    def test_empty_config(self, runner: CliRunner, write_config) -> None:
        """An empty document is the default fence."""
        result = runner.invoke(app, ["validate", str(write_config({}))])
        assert result.exit_code == 0

    def test_file_not_found(self, runner: CliRunner, tmp_path: Path) -> None:
        """Non-existent file should fail with exit code 1."""
        result = runner.invoke(app, ["validate", str(tmp_path / "nonexistent.json")])
        assert result.exit_code == 1
        assert "Config file not found" in result.output
        assert "Validation failed: 1 error(s)" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner, write_config) -> None:
        """Invalid JSON should fail with exit code 1."""
        result = runner.invoke(app, ["validate", str(write_config("{not json"))])
        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Validation failed" in result.output

    def test_unknown_field_rejected(self, runner: CliRunner, write_config) -> None:
        """Unknown fields should cause validation failure."""
        result = runner.invoke(app, ["validate", str(write_config({"fence": {"colour": "red"}}))])
        assert result.exit_code == 1
        assert "fence.colour" in result.output

    def test_out_of_range_value(self, runner: CliRunner, write_config) -> None:
        """Schema violations show the path and value."""
        result = runner.invoke(
            app, ["validate", str(write_config({"fence": {"rail_spacing": -0.3}}))]
        )
        assert result.exit_code == 1
        assert "fence.rail_spacing" in result.output
        assert "got -0.3" in result.output

    def test_valid_config_with_warnings(self, runner: CliRunner, write_config) -> None:
        """Valid config with advisories should have exit code 2."""
        path = write_config({"fence": {"height": 0.05}})
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 2
        assert "warning  fence.height" in result.output
        assert "Validation passed with 2 warning(s)" in result.output

    def test_pricing_warning_has_no_suggestion(self, runner: CliRunner, write_config) -> None:
        """Warnings without a suggestion print only their message."""
        path = write_config({"pricing": {"pole_3_6": 50}})
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 2
        assert "pricing.pole_3_6" in result.output
        assert "hint:" not in result.output

    def test_every_schema_error_listed(self, runner: CliRunner, write_config) -> None:
        """Each invalid field is reported as its own error."""
        path = write_config({"fence": {"height": -1, "overlap": 5}})
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 1
        assert "error    fence.height" in result.output
        assert "error    fence.overlap" in result.output
        assert "Validation failed: 2 error(s), 0 warning(s)" in result.output
