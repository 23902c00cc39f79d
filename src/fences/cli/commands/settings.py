"""Configuration loading shared by the fences CLI commands."""

from pathlib import Path

import typer

from fences.application.config import (
    ConfigError,
    ProjectConfiguration,
    config_to_fence_config,
    load_config,
    merge_config_with_cli,
    validate_config,
)
from fences.domain import FenceConfig


def load_fence_config(
    config_file: Path | None,
    *,
    height: float | None = None,
    rail_spacing: float | None = None,
    overlap: float | None = None,
    output_format: str | None = None,
) -> tuple[FenceConfig, ProjectConfiguration]:
    """Load, merge and convert the project configuration.

    Without a config file the defaults are used. CLI overrides are applied
    on top in both cases, and advisories are printed as warnings.

    Returns:
        The domain FenceConfig and the merged ProjectConfiguration.

    Raises:
        typer.Exit: With code 1 if the configuration cannot be used.
    """
    try:
        config = load_config(config_file) if config_file is not None else ProjectConfiguration()
        config = merge_config_with_cli(
            config,
            height=height,
            rail_spacing=rail_spacing,
            overlap=overlap,
            output_format=output_format,
        )
        fence_config = config_to_fence_config(config)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except ValueError as e:
        typer.echo(f"Error: Invalid option value: {e}", err=True)
        raise typer.Exit(code=1)

    for warning in validate_config(config).warnings:
        typer.echo(f"Warning: {warning.path}: {warning.message}", err=True)

    return fence_config, config
