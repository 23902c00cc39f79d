"""Conversion of validated configuration models into domain objects."""

from fences.application.config.schema import ProjectConfiguration
from fences.domain import FenceConfig, PoleLength, PriceList


def config_to_price_list(config: ProjectConfiguration) -> PriceList:
    """Build the domain price list from the pricing section."""
    pricing = config.pricing
    return PriceList(
        post=pricing.post,
        gate=pricing.gate,
        poles={
            PoleLength.SHORT: pricing.pole_1_8,
            PoleLength.MEDIUM: pricing.pole_2_4,
            PoleLength.LONG: pricing.pole_3_6,
        },
    )


def config_to_fence_config(config: ProjectConfiguration) -> FenceConfig:
    """Convert a validated ProjectConfiguration into a FenceConfig.

    Args:
        config: Validated configuration model.

    Returns:
        FenceConfig domain value object.
    """
    fence = config.fence
    return FenceConfig(
        fence_height=fence.height,
        rail_spacing=fence.rail_spacing,
        overlap=fence.overlap,
        prices=config_to_price_list(config),
        currency_symbol=config.pricing.currency_symbol,
        pole_diameter_mm=fence.pole_diameter_mm,
        post_diameter_mm=fence.post_diameter_mm,
        closure_tolerance=config.closure.tolerance,
        min_closed_segments=config.closure.min_segments,
    )
