"""Pydantic models for fence configuration files.

Every section is optional; an empty document (apart from the schema
version) yields the default fence.
"""

from enum import Enum

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from fences.domain.value_objects import (
    DEFAULT_CLOSURE_TOLERANCE,
    DEFAULT_MIN_CLOSED_SEGMENTS,
    MIN_CATALOG_LENGTH,
)

# Supported schema versions for configuration files
# Version 1.0: Fence dimensions, pricing and output format
# Version 1.1: Added closure settings
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})


class OutputFormat(str, Enum):
    """Console output formats."""

    TEXT = "text"
    JSON = "json"
    PLAN = "plan"


class FenceSettingsConfig(BaseModel):
    """Physical fence parameters.

    Attributes:
        height: Above-ground fence height in meters.
        rail_spacing: Vertical gap between rails in meters.
        overlap: Length lost at each pole joint in meters.
        pole_diameter_mm: Rail pole diameter in millimeters (display only).
        post_diameter_mm: Post diameter in millimeters (display only).
    """

    model_config = ConfigDict(extra="forbid")

    height: float = Field(default=1.2, gt=0, le=5.0)
    rail_spacing: float = Field(default=0.3, gt=0, le=5.0)
    overlap: float = Field(default=0.15, ge=0, lt=MIN_CATALOG_LENGTH)
    pole_diameter_mm: float = Field(default=100.0, gt=0, le=500.0)
    post_diameter_mm: float = Field(default=150.0, gt=0, le=500.0)


class PricingConfig(BaseModel):
    """Unit prices.

    Attributes:
        post: Price of one upright post.
        gate: Price of one gate.
        pole_1_8: Price of one 1.8m pole.
        pole_2_4: Price of one 2.4m pole.
        pole_3_6: Price of one 3.6m pole.
        currency_symbol: Symbol used when printing costs.
    """

    model_config = ConfigDict(extra="forbid")

    post: float = Field(default=150.0, ge=0)
    gate: float = Field(default=1200.0, ge=0)
    pole_1_8: float = Field(default=80.0, ge=0)
    pole_2_4: float = Field(default=110.0, ge=0)
    pole_3_6: float = Field(default=160.0, ge=0)
    currency_symbol: str = Field(default="$", min_length=1, max_length=5)


class ClosureConfig(BaseModel):
    """Closed-loop detection settings.

    Attributes:
        tolerance: Largest gap in meters between the end of the run and the
            start for the fence to count as closed.
        min_segments: Fewest segments that can form a closed loop.
    """

    model_config = ConfigDict(extra="forbid")

    tolerance: float = Field(default=DEFAULT_CLOSURE_TOLERANCE, gt=0, le=5.0)
    min_segments: int = Field(default=DEFAULT_MIN_CLOSED_SEGMENTS, ge=1, le=100)


class OutputConfig(BaseModel):
    """Console output settings."""

    model_config = ConfigDict(extra="forbid")

    format: OutputFormat = OutputFormat.TEXT


class ProjectConfiguration(BaseModel):
    """Root configuration model for a fence project.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        fence: Physical fence parameters
        pricing: Unit prices
        closure: Closed-loop detection settings (v1.1+)
        output: Output format configuration

    Example:
        >>> config = ProjectConfiguration(
        ...     schema_version="1.0",
        ...     fence=FenceSettingsConfig(height=1.5),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    fence: FenceSettingsConfig = Field(default_factory=FenceSettingsConfig)
    pricing: PricingConfig = Field(default_factory=PricingConfig)
    closure: ClosureConfig = Field(default_factory=ClosureConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

