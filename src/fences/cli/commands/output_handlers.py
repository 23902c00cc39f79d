"""Multi-format export handling for the fences CLI."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import typer

if TYPE_CHECKING:
    from fences.application.dtos import DesignSnapshot

from fences.infrastructure.exporters import ExporterRegistry, ExportManager

__all__ = [
    "handle_multi_format_export",
    "parse_output_formats",
]


def parse_output_formats(output_formats_str: str) -> list[str]:
    """Parse a comma-separated format list, or "all".

    Raises:
        typer.Exit: If any format is not registered.
    """
    if output_formats_str.lower() == "all":
        return ExporterRegistry.available_formats()

    formats = [f.strip().lower() for f in output_formats_str.split(",") if f.strip()]
    available = ExporterRegistry.available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)
    return formats


def handle_multi_format_export(
    output_formats_str: str,
    output_dir: Path | None,
    project_name: str,
    snapshot: DesignSnapshot,
) -> dict[str, Path]:
    """Handle multi-format export via the --output-formats option.

    Args:
        output_formats_str: Comma-separated format list or "all".
        output_dir: Output directory for exported files. Defaults to ".".
        project_name: Project name for file naming.
        snapshot: The quoted design to export.

    Returns:
        Mapping of format name to written file path.
    """
    formats = parse_output_formats(output_formats_str)
    if not formats:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)

    manager = ExportManager(output_dir or Path("."))
    try:
        files = manager.export_all(formats, snapshot, project_name)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("\nExported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")

    return files
