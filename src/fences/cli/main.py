"""Typer CLI for fence and kraal design."""

from pathlib import Path
from typing import Annotated

import typer

from fences.application import QuoteDesignCommand, SegmentInput
from fences.cli.commands import (
    design_command,
    handle_multi_format_export,
    load_fence_config,
    validate_command,
)
from fences.infrastructure import (
    BillOfMaterialsFormatter,
    CatalogFormatter,
    ElevationFormatter,
    JsonExporter,
    PlanFormatter,
)

OUTPUT_FORMATS = ("text", "json", "plan")

app = typer.Typer(
    name="fences",
    help="Design pole fences and kraals and estimate their material cost.",
)

app.command(name="validate")(validate_command)
app.command(name="design")(design_command)


@app.command()
def quote(
    segments: Annotated[
        list[str] | None,
        typer.Option(
            "--segment",
            "-s",
            help="Segment as <length>[@<turn>] or gate[@<turn>], e.g. 2.4@90. Repeatable.",
        ),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", help="Fence height in meters"),
    ] = None,
    rail_spacing: Annotated[
        float | None,
        typer.Option("--rail-spacing", help="Vertical gap between rails in meters"),
    ] = None,
    overlap: Annotated[
        float | None,
        typer.Option("--overlap", help="Length lost per pole joint in meters"),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: text, json, plan"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the report to this file"),
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats: json,bom (or 'all')",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for multi-format export"),
    ] = None,
    project_name: Annotated[
        str,
        typer.Option("--project-name", help="Project name for output file naming"),
    ] = "fence",
) -> None:
    """Quote a fence from a list of segments.

    Segments are appended in order. A turn applies to the segment it is
    attached to; the first segment is always laid along the starting heading.
    When using --config, CLI options override config file values.

    Examples:
        fences quote -s 2.4 -s 2.4@120 -s 2.4@120
        fences quote -s 3.6 -s gate@90 --overlap 0.2 --format json
        fences quote --config kraal.json -s 2.4 -s 2.4@90 --output-formats all --output-dir ./out
    """
    if output_format is not None and output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Error: Unknown format '{output_format}'. "
            f"Choose from: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    fence_config, config = load_fence_config(
        config_file,
        height=height,
        rail_spacing=rail_spacing,
        overlap=overlap,
        output_format=output_format,
    )

    try:
        inputs = [SegmentInput.from_token(token) for token in segments or []]
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    result = QuoteDesignCommand().execute(inputs, fence_config)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    snapshot = result.snapshot
    if output_formats:
        handle_multi_format_export(output_formats, output_dir, project_name, snapshot)
        return

    resolved_format = config.output.format.value
    if resolved_format == "json":
        report = JsonExporter().format(snapshot)
    elif resolved_format == "plan":
        report = "\n\n".join(
            [
                PlanFormatter().format(snapshot.design, snapshot.geometry),
                ElevationFormatter().format(snapshot.elevation),
            ]
        )
    else:
        report = BillOfMaterialsFormatter().format(snapshot.bill)

    if output_file is not None:
        output_file.write_text(report + "\n", encoding="utf-8")
        typer.echo(f"Report written to: {output_file}")
    else:
        typer.echo(report)


@app.command()
def catalog(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
) -> None:
    """Show catalog pole lengths, gate width and unit prices.

    Example:
        fences catalog --config kraal.json
    """
    fence_config, _ = load_fence_config(config_file)
    typer.echo(CatalogFormatter().format(fence_config))


if __name__ == "__main__":
    app()
