"""Unit tests for configuration advisories."""

from pathlib import Path

import pytest

from fences.application.config import (
    ConfigError,
    ProjectConfiguration,
    ValidationResult,
    config_error_result,
    load_config,
    load_config_from_dict,
    validate_config,
)


def _config(**sections) -> ProjectConfiguration:
    return ProjectConfiguration.model_validate(sections)


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_exit_codes(self) -> None:
        """0 clean, 2 warnings only, 1 errors."""
        result = ValidationResult()
        assert result.exit_code == 0
        result.add_warning("fence.height", "unusual")
        assert result.exit_code == 2
        assert result.is_valid
        result.add_error("fence.height", "bad", value=-1)
        assert result.exit_code == 1
        assert not result.is_valid

    def test_merge(self) -> None:
        """merge combines errors and warnings."""
        first = ValidationResult().add_warning("a", "w")
        second = ValidationResult().add_error("b", "e")
        merged = first.merge(second)
        assert merged is first
        assert len(merged.warnings) == 1
        assert len(merged.errors) == 1


class TestFenceAdvisories:
    """Tests for the fence advisories."""

    def test_defaults_are_clean(self) -> None:
        """The default configuration raises no warnings."""
        result = validate_config(ProjectConfiguration())
        assert result.warnings == []
        assert result.exit_code == 0

    def test_unusual_height(self) -> None:
        """Heights outside 0.9-2.4m are flagged."""
        result = validate_config(_config(fence={"height": 3.0}))
        assert [w.path for w in result.warnings] == ["fence.height"]

    def test_unusual_rail_spacing(self) -> None:
        """Spacing outside 0.1-0.6m is flagged."""
        result = validate_config(_config(fence={"rail_spacing": 0.05}))
        assert "fence.rail_spacing" in [w.path for w in result.warnings]

    def test_large_overlap(self) -> None:
        """Overlap above 0.5m is flagged."""
        result = validate_config(_config(fence={"overlap": 0.8}))
        assert [w.path for w in result.warnings] == ["fence.overlap"]

    def test_no_rails(self) -> None:
        """A fence lower than the bottom rail warns that no rails fit."""
        result = validate_config(_config(fence={"height": 0.05}))
        messages = [w.message for w in result.warnings]
        assert any("no rails" in message for message in messages)

    def test_single_rail(self) -> None:
        """Spacing larger than the usable height leaves a single rail."""
        result = validate_config(_config(fence={"height": 0.9, "rail_spacing": 1.0}))
        messages = [w.message for w in result.warnings]
        assert any("single rail" in message for message in messages)


class TestPricingAdvisories:
    """Tests for the pricing advisories."""

    def test_longer_pole_cheaper(self) -> None:
        """A longer pole priced below a shorter one is flagged."""
        result = validate_config(_config(pricing={"pole_2_4": 70.0}))
        assert [w.path for w in result.warnings] == ["pricing.pole_2_4"]


class TestConfigErrorResult:
    """Tests for turning load failures into validation errors."""

    def test_schema_errors_become_field_errors(self) -> None:
        """Each schema violation is one blocking error with its value."""
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"fence": {"rail_spacing": -0.3, "colour": "red"}})
        result = config_error_result(exc_info.value)
        assert not result.is_valid
        assert result.exit_code == 1
        assert result.warnings == []
        by_path = {error.path: error for error in result.errors}
        assert by_path["fence.rail_spacing"].value == -0.3
        assert "fence.colour" in by_path

    def test_json_syntax_error(self, tmp_path: Path) -> None:
        """Malformed JSON is one error carrying the line and column."""
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        result = config_error_result(exc_info.value)
        assert len(result.errors) == 1
        assert result.errors[0].path.startswith("line 1, column")
        assert result.errors[0].message.startswith("Invalid JSON syntax")

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file is reported against its path."""
        path = tmp_path / "missing.json"
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        result = config_error_result(exc_info.value)
        assert [error.path for error in result.errors] == [str(path)]
        assert "not found" in result.errors[0].message
