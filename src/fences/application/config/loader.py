"""Configuration file loader with error reporting.

Loads JSON fence configuration files and turns file system errors, JSON
syntax errors and schema violations into a single ConfigError type with
a readable message.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from fences.application.config.schema import ProjectConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("fence", "height"))
        'fence.height'
        >>> _format_json_path(("segments", 0, "length"))
        'segments[0].length'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Flatten a Pydantic ValidationError into path/message/value dictionaries."""
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        value = detail.get("value")
        if value is not None and not isinstance(value, dict):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def load_config(path: Path) -> ProjectConfiguration:
    """Load and validate a fence configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated ProjectConfiguration instance

    Raises:
        ConfigError: If the file cannot be loaded or validated. The
            error_type attribute tells the failure apart:
            - "file_not_found": File does not exist
            - "permission_denied" / "file_read_error": File cannot be read
            - "json_parse": Invalid JSON syntax
            - "validation": Schema validation failed
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    logger.debug(f"Loaded configuration from {path}")
    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> ProjectConfiguration:
    """Load and validate a fence configuration from a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data, None)


def _validate(data: Any, path: Path | None) -> ProjectConfiguration:
    try:
        return ProjectConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )
