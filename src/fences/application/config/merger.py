"""Merging of CLI overrides into a loaded configuration.

Precedence is CLI args > config values > defaults. Only non-None CLI
arguments override configuration values.
"""

from typing import Any

from fences.application.config.schema import ProjectConfiguration


def merge_config_with_cli(
    config: ProjectConfiguration,
    *,
    height: float | None = None,
    rail_spacing: float | None = None,
    overlap: float | None = None,
    output_format: str | None = None,
) -> ProjectConfiguration:
    """Merge CLI arguments with configuration values.

    Args:
        config: The base ProjectConfiguration to merge with
        height: Override for fence.height (if not None)
        rail_spacing: Override for fence.rail_spacing (if not None)
        overlap: Override for fence.overlap (if not None)
        output_format: Override for output.format (if not None)

    Returns:
        A new, re-validated ProjectConfiguration with merged values

    Raises:
        pydantic.ValidationError: If an override is out of range.

    Example:
        >>> merged = merge_config_with_cli(ProjectConfiguration(), overlap=0.2)
        >>> merged.fence.overlap
        0.2
    """
    data: dict[str, Any] = config.model_dump(mode="json")

    fence_overrides = {
        "height": height,
        "rail_spacing": rail_spacing,
        "overlap": overlap,
    }
    for key, value in fence_overrides.items():
        if value is not None:
            data["fence"][key] = value

    if output_format is not None:
        data["output"]["format"] = output_format

    return ProjectConfiguration.model_validate(data)
