"""Validate command for checking configuration files."""

from pathlib import Path
from typing import Annotated

import typer

from fences.application.config import (
    ConfigError,
    ValidationResult,
    config_error_result,
    load_config,
    validate_config,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a fence configuration file.

    Unreadable files, JSON syntax errors and schema violations are errors.
    Unusual but allowed values (height, rail spacing, overlap, pole prices)
    are warnings.

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but has warnings

    Example:
        fences validate kraal.json
    """
    typer.echo(f"Validating {config_file}...")
    try:
        result = validate_config(load_config(config_file))
    except ConfigError as e:
        result = config_error_result(e)

    for error in result.errors:
        typer.echo(f"  error    {error.path}: {error.message}", err=True)
        if error.value is not None:
            typer.echo(f"           got {error.value!r}", err=True)
    for warning in result.warnings:
        typer.echo(f"  warning  {warning.path}: {warning.message}")
        if warning.suggestion:
            typer.echo(f"           hint: {warning.suggestion}")

    typer.echo(summarize(result), err=not result.is_valid)
    raise typer.Exit(code=result.exit_code)


def summarize(result: ValidationResult) -> str:
    """One-line verdict for a validation result."""
    if not result.is_valid:
        return (
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)"
        )
    if result.has_warnings:
        return f"Validation passed with {len(result.warnings)} warning(s)"
    return "Validation passed. Configuration is valid."
