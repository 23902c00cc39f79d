"""Validation results and fencing advisory checks.

Schema validation only rejects impossible values. The advisories here flag
values that are allowed but unusual for a pole fence, so a user can catch a
typo before buying material.
"""

from dataclasses import dataclass, field
from typing import Any

from fences.application.config.loader import ConfigError
from fences.application.config.schema import ProjectConfiguration
from fences.domain.value_objects import RAIL_GROUND_CLEARANCE

# Typical ranges for a farm pole fence, in meters
TYPICAL_HEIGHT_RANGE: tuple[float, float] = (0.9, 2.4)
TYPICAL_RAIL_SPACING_RANGE: tuple[float, float] = (0.1, 0.6)
MAX_TYPICAL_OVERLAP: float = 0.5


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "fence.height")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking advisory.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 warnings only."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_fence_advisories(config: ProjectConfiguration) -> ValidationResult:
    """Check fence dimensions against typical pole-fence practice."""
    result = ValidationResult()
    fence = config.fence

    low, high = TYPICAL_HEIGHT_RANGE
    if not low <= fence.height <= high:
        result.add_warning(
            path="fence.height",
            message=f"Fence height {fence.height}m is outside the usual {low}-{high}m range",
            suggestion="Check the height is in meters",
        )

    low, high = TYPICAL_RAIL_SPACING_RANGE
    if not low <= fence.rail_spacing <= high:
        result.add_warning(
            path="fence.rail_spacing",
            message=f"Rail spacing {fence.rail_spacing}m is outside the usual {low}-{high}m range",
        )

    if fence.overlap > MAX_TYPICAL_OVERLAP:
        result.add_warning(
            path="fence.overlap",
            message=f"Overlap {fence.overlap}m is more than {MAX_TYPICAL_OVERLAP}m per joint",
            suggestion="A joint usually overlaps 0.1-0.2m",
        )

    usable_height = fence.height - RAIL_GROUND_CLEARANCE
    if usable_height < 0:
        result.add_warning(
            path="fence.height",
            message="Fence is lower than the bottom rail clearance; no rails will be billed",
        )
    elif usable_height < fence.rail_spacing:
        result.add_warning(
            path="fence.rail_spacing",
            message="Rail spacing exceeds the fence height; each section gets a single rail",
            suggestion="Reduce rail_spacing to stack more rails",
        )

    return result


def check_pricing_advisories(config: ProjectConfiguration) -> ValidationResult:
    """Flag price lists where a longer pole is cheaper than a shorter one."""
    result = ValidationResult()
    pricing = config.pricing
    ordered = [
        ("pricing.pole_1_8", pricing.pole_1_8),
        ("pricing.pole_2_4", pricing.pole_2_4),
        ("pricing.pole_3_6", pricing.pole_3_6),
    ]
    for (_, shorter), (path, longer) in zip(ordered, ordered[1:]):
        if longer < shorter:
            result.add_warning(
                path=path,
                message=f"Price {longer} is lower than the shorter pole's price {shorter}",
            )
    return result


def validate_config(config: ProjectConfiguration) -> ValidationResult:
    """Run every advisory check against a schema-valid configuration."""
    result = ValidationResult()
    result.merge(check_fence_advisories(config))
    result.merge(check_pricing_advisories(config))
    return result


def config_error_result(error: ConfigError) -> ValidationResult:
    """Report a configuration that could not be loaded as blocking errors.

    Schema violations become one error per offending field; unreadable files
    and JSON syntax errors become a single error each.

    Args:
        error: The failure raised by load_config or load_config_from_dict.

    Returns:
        ValidationResult with at least one error and no warnings.
    """
    result = ValidationResult()
    if error.error_type == "validation" and error.details:
        for detail in error.details:
            result.add_error(
                path=detail.get("path") or "(root)",
                message=detail.get("message", "Invalid value"),
                value=detail.get("value"),
            )
    elif error.error_type == "json_parse" and error.details:
        for detail in error.details:
            result.add_error(
                path=f"line {detail['line']}, column {detail['column']}",
                message=f"Invalid JSON syntax: {detail['message']}",
            )
    else:
        result.add_error(path=str(error.path or "(config)"), message=error.message)
    return result
