"""Bill of materials and cost estimation for fence designs."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..config import FenceConfig, PriceList
from ..value_objects import PoleLength, SegmentKind
from .rails import post_height, rails_per_section

if TYPE_CHECKING:
    from ..entities import FenceSegment

__all__ = [
    "BillOfMaterials",
    "BillOfMaterialsCalculator",
    "LineItem",
    "compute_bill_of_materials",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineItem:
    """One purchasable line of the bill.

    Attributes:
        description: What is being bought.
        quantity: How many units.
        unit_price: Price per unit.
    """

    description: str
    quantity: int
    unit_price: float

    @property
    def total(self) -> float:
        return self.quantity * self.unit_price


@dataclass(frozen=True)
class BillOfMaterials:
    """Quantities and cost for a fence design.

    Attributes:
        segment_count: Number of segments in the design.
        total_length: Sum of effective segment lengths in meters.
        is_closed_loop: Whether the design was treated as a closed loop.
        rails_per_section: Rails stacked in every standard section.
        pole_counts: Standard sections per catalog length.
        pole_requirement: Poles to buy per catalog length (sections x rails).
        gate_count: Number of gates.
        total_posts: Upright posts needed.
        post_height: Recommended post length in meters.
        post_cost: Cost of all posts.
        gate_cost: Cost of all gates.
        pole_costs: Cost of the poles per catalog length.
        currency_symbol: Symbol for displaying costs.
        prices: Unit prices the costs were computed with.
    """

    segment_count: int
    total_length: float
    is_closed_loop: bool
    rails_per_section: int
    pole_counts: dict[PoleLength, int]
    pole_requirement: dict[PoleLength, int]
    gate_count: int
    total_posts: int
    post_height: float
    post_cost: float
    gate_cost: float
    pole_costs: dict[PoleLength, float]
    currency_symbol: str = "$"
    prices: PriceList = field(default_factory=PriceList)

    @property
    def total_poles(self) -> int:
        """Total poles to buy across all catalog lengths."""
        return sum(self.pole_requirement.values())

    @property
    def total_cost(self) -> float:
        return self.post_cost + self.gate_cost + sum(self.pole_costs.values())

    @property
    def is_empty(self) -> bool:
        return self.segment_count == 0

    def line_items(self) -> list[LineItem]:
        """Non-empty purchase lines: posts, gates, then poles by length."""
        items: list[LineItem] = []
        if self.total_posts:
            items.append(LineItem("Upright post", self.total_posts, self.prices.post))
        if self.gate_count:
            items.append(LineItem("Gate", self.gate_count, self.prices.gate))
        for pole, quantity in self.pole_requirement.items():
            if quantity:
                items.append(LineItem(f"{pole.label} pole", quantity, self.prices.pole_price(pole)))
        return items


class BillOfMaterialsCalculator:
    """Derives purchase quantities and cost from a design.

    Every standard section uses one pole of its catalog length per rail, so
    the pole requirement is the section count multiplied by the rails per
    section. Gates are bought whole and use no rails. Posts stand at every
    segment boundary; an open run needs one extra terminal post while a
    closed loop shares its first post.
    """

    def calculate(
        self,
        segments: Sequence[FenceSegment],
        config: FenceConfig,
        is_closed_loop: bool,
    ) -> BillOfMaterials:
        """Compute the bill for a segment sequence.

        Args:
            segments: Segments in design order.
            config: Fence configuration with heights and prices.
            is_closed_loop: Closure flag from the plan geometry.

        Returns:
            BillOfMaterials with quantities and cost breakdown.
        """
        total_length = sum(segment.effective_length for segment in segments)

        pole_counts: dict[PoleLength, int] = {pole: 0 for pole in PoleLength}
        gate_count = 0
        for segment in segments:
            if segment.kind == SegmentKind.GATE:
                gate_count += 1
            else:
                pole_counts[PoleLength.from_meters(segment.raw_length)] += 1

        rails = rails_per_section(config)
        pole_requirement = {pole: count * rails for pole, count in pole_counts.items()}

        if not segments:
            total_posts = 0
        else:
            total_posts = len(segments) + (0 if is_closed_loop else 1)

        prices = config.prices
        pole_costs = {
            pole: quantity * prices.pole_price(pole)
            for pole, quantity in pole_requirement.items()
        }

        bill = BillOfMaterials(
            segment_count=len(segments),
            total_length=total_length,
            is_closed_loop=is_closed_loop,
            rails_per_section=rails,
            pole_counts=pole_counts,
            pole_requirement=pole_requirement,
            gate_count=gate_count,
            total_posts=total_posts,
            post_height=post_height(config),
            post_cost=total_posts * prices.post,
            gate_cost=gate_count * prices.gate,
            pole_costs=pole_costs,
            currency_symbol=config.currency_symbol,
            prices=prices,
        )
        logger.debug(
            f"Bill for {len(segments)} segments: {total_posts} posts, "
            f"{bill.total_poles} poles, {gate_count} gates, cost {bill.total_cost:.2f}"
        )
        return bill


def compute_bill_of_materials(
    segments: Sequence[FenceSegment],
    config: FenceConfig,
    is_closed_loop: bool,
) -> BillOfMaterials:
    """Compute the bill of materials for a segment sequence."""
    return BillOfMaterialsCalculator().calculate(segments, config, is_closed_loop)
