"""Pytest configuration and shared fixtures for fence tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from fences.application import DesignController, QuoteDesignCommand
from fences.domain import Design, FenceConfig, SegmentKind


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end tests through the CLI or API")


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def default_config() -> FenceConfig:
    """Default configuration: 1.2m high, 0.3m rail spacing, 0.15m overlap."""
    return FenceConfig()


@pytest.fixture
def zero_overlap_config() -> FenceConfig:
    """Configuration without joint overlap, so effective lengths equal raw lengths."""
    return FenceConfig(overlap=0.0)


@pytest.fixture
def triangle_design(zero_overlap_config: FenceConfig) -> Design:
    """Equilateral triangle of three 2.4m sections that closes on itself."""
    return (
        Design(config=zero_overlap_config)
        .append(SegmentKind.STANDARD, 2.4)
        .append(SegmentKind.STANDARD, 2.4, turn_angle=120)
        .append(SegmentKind.STANDARD, 2.4, turn_angle=120)
    )


# =============================================================================
# Application fixtures
# =============================================================================


@pytest.fixture
def controller() -> DesignController:
    """Fresh design controller with the default configuration."""
    return DesignController()


@pytest.fixture
def quote_command() -> QuoteDesignCommand:
    """QuoteDesignCommand with the default bill calculator."""
    return QuoteDesignCommand()


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[Any, str], Path]:
    """Write configuration data to a JSON file in a temporary directory.

    Strings are written as-is so tests can produce malformed JSON.
    """

    def _write(data: Any, name: str = "fence.json") -> Path:
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
