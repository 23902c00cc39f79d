"""CLI command implementations for the fences application.

This package contains subcommands for the fences CLI, including:
- validate: Validate a configuration file
- design: Interactive, one-section-at-a-time design session
"""

from fences.cli.commands.design import DesignSession, design_command
from fences.cli.commands.output_handlers import handle_multi_format_export
from fences.cli.commands.settings import load_fence_config
from fences.cli.commands.validate import validate_command

__all__ = [
    "DesignSession",
    "design_command",
    "handle_multi_format_export",
    "load_fence_config",
    "validate_command",
]
