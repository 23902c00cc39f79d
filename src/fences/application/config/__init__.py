"""Configuration schema and loading for fence projects.

Public API:
    - ProjectConfiguration: Root configuration model
    - FenceSettingsConfig / PricingConfig / ClosureConfig / OutputConfig
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - merge_config_with_cli: Apply CLI overrides to a configuration
    - config_to_fence_config: Convert configuration to the domain FenceConfig
    - validate_config: Run advisory checks
    - config_error_result: Report a load failure as validation errors
    - ConfigError: Exception for configuration errors

Example:
    >>> from pathlib import Path
    >>> from fences.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("kraal.json"))
    ...     print(f"Fence height: {config.fence.height}m")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from fences.application.config.adapter import (
    config_to_fence_config,
    config_to_price_list,
)
from fences.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from fences.application.config.merger import merge_config_with_cli
from fences.application.config.schema import (
    SUPPORTED_VERSIONS,
    ClosureConfig,
    FenceSettingsConfig,
    OutputConfig,
    OutputFormat,
    PricingConfig,
    ProjectConfiguration,
)
from fences.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    config_error_result,
    validate_config,
)

__all__ = [
    "ClosureConfig",
    "ConfigError",
    "FenceSettingsConfig",
    "OutputConfig",
    "OutputFormat",
    "PricingConfig",
    "ProjectConfiguration",
    "SUPPORTED_VERSIONS",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_error_result",
    "config_to_fence_config",
    "config_to_price_list",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "validate_config",
]
