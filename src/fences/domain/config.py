"""Fence configuration value objects.

The configuration is replaced as a whole whenever a setting changes.
Segments hold on to their raw length and turn; only the effective length
depends on the configuration (through the join overlap).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping

from .value_objects import (
    DEFAULT_CLOSURE_TOLERANCE,
    DEFAULT_MIN_CLOSED_SEGMENTS,
    MIN_CATALOG_LENGTH,
    PoleLength,
)

__all__ = ["DEFAULT_POLE_PRICES", "FenceConfig", "PriceList"]


DEFAULT_POLE_PRICES: Mapping[PoleLength, float] = MappingProxyType(
    {
        PoleLength.SHORT: 80.0,
        PoleLength.MEDIUM: 110.0,
        PoleLength.LONG: 160.0,
    }
)


def _default_pole_prices() -> dict[PoleLength, float]:
    return dict(DEFAULT_POLE_PRICES)


@dataclass(frozen=True)
class PriceList:
    """Unit prices for everything the bill of materials can contain.

    Attributes:
        post: Price of one upright post.
        gate: Price of one gate.
        poles: Price of one standard pole, keyed by catalog length. Must
            cover every catalog length.
    """

    post: float = 150.0
    gate: float = 1200.0
    poles: Mapping[PoleLength, float] = field(default_factory=_default_pole_prices)

    def __post_init__(self) -> None:
        if self.post < 0 or self.gate < 0:
            raise ValueError("Prices cannot be negative")
        missing = [pole.label for pole in PoleLength if pole not in self.poles]
        if missing:
            raise ValueError(f"Missing pole prices for: {', '.join(missing)}")
        if any(price < 0 for price in self.poles.values()):
            raise ValueError("Prices cannot be negative")
        # Read-only, in catalog order.
        object.__setattr__(
            self,
            "poles",
            MappingProxyType({pole: float(self.poles[pole]) for pole in PoleLength}),
        )

    def __hash__(self) -> int:
        return hash((self.post, self.gate, tuple(self.poles.items())))

    def pole_price(self, pole: PoleLength) -> float:
        """Price of a single pole of the given catalog length."""
        return self.poles[pole]


@dataclass(frozen=True)
class FenceConfig:
    """Physical and pricing parameters for a fence design.

    Attributes:
        fence_height: Nominal above-ground fence height in meters.
        rail_spacing: Vertical gap between horizontal rails in meters.
        overlap: Length lost at each pole-to-pole joint in meters.
        prices: Unit prices for posts, gates and poles.
        currency_symbol: Symbol used when displaying costs.
        pole_diameter_mm: Rail pole diameter, used by renderers only.
        post_diameter_mm: Post diameter, used by renderers only.
        closure_tolerance: Maximum distance in meters between the end of the
            run and the origin for the design to count as a closed loop.
        min_closed_segments: Fewest segments that can form a closed loop.
    """

    fence_height: float = 1.2
    rail_spacing: float = 0.3
    overlap: float = 0.15
    prices: PriceList = field(default_factory=PriceList)
    currency_symbol: str = "$"
    pole_diameter_mm: float = 100.0
    post_diameter_mm: float = 150.0
    closure_tolerance: float = DEFAULT_CLOSURE_TOLERANCE
    min_closed_segments: int = DEFAULT_MIN_CLOSED_SEGMENTS

    def __post_init__(self) -> None:
        if not all(
            math.isfinite(value)
            for value in (self.fence_height, self.rail_spacing, self.overlap, self.closure_tolerance)
        ):
            raise ValueError("Fence dimensions must be finite numbers")
        if self.fence_height <= 0:
            raise ValueError("Fence height must be positive")
        if self.rail_spacing <= 0:
            raise ValueError("Rail spacing must be positive")
        if self.overlap < 0:
            raise ValueError("Overlap cannot be negative")
        if self.overlap >= MIN_CATALOG_LENGTH:
            raise ValueError(
                f"Overlap must be shorter than the shortest pole ({MIN_CATALOG_LENGTH}m)"
            )
        if self.pole_diameter_mm <= 0 or self.post_diameter_mm <= 0:
            raise ValueError("Diameters must be positive")
        if self.closure_tolerance <= 0:
            raise ValueError("Closure tolerance must be positive")
        if self.min_closed_segments < 1:
            raise ValueError("min_closed_segments must be at least 1")

    def with_changes(self, **changes: Any) -> "FenceConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)
