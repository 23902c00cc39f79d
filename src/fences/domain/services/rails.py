"""Rail layout rules shared by the bill of materials and the elevation view."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ..value_objects import POST_HEIGHT_FACTOR, RAIL_GROUND_CLEARANCE

if TYPE_CHECKING:
    from ..config import FenceConfig

__all__ = ["post_height", "rail_heights", "rails_per_section"]


def rails_per_section(config: FenceConfig) -> int:
    """Number of horizontal rails stacked in one fence section.

    The lowest rail sits RAIL_GROUND_CLEARANCE above ground and the rest
    follow every rail_spacing meters up to the fence height. Fences lower
    than the ground clearance get no rails.
    """
    count = math.floor((config.fence_height - RAIL_GROUND_CLEARANCE) / config.rail_spacing) + 1
    return max(0, count)


def rail_heights(config: FenceConfig) -> list[float]:
    """Height above ground of each rail, lowest first."""
    return [
        RAIL_GROUND_CLEARANCE + index * config.rail_spacing
        for index in range(rails_per_section(config))
    ]


def post_height(config: FenceConfig) -> float:
    """Recommended post length, including the buried part."""
    return config.fence_height * POST_HEIGHT_FACTOR
