"""Text and JSON formatters for fence designs."""

from __future__ import annotations

import json
from typing import Any

from fences.application.dtos import DesignSnapshot
from fences.domain import (
    GATE_WIDTH,
    BillOfMaterials,
    Design,
    ElevationProfile,
    FenceConfig,
    FenceGeometry,
    PoleLength,
)


def _money(symbol: str, amount: float) -> str:
    return f"{symbol}{amount:,.2f}"


class BillOfMaterialsFormatter:
    """Formats a bill of materials as a plain-text report."""

    def format(self, bill: BillOfMaterials) -> str:
        if bill.is_empty:
            return "The kraal is empty. Add poles to start designing."

        symbol = bill.currency_symbol
        lines = [
            "MATERIAL BILL",
            "=" * 60,
            f"Total length:        {bill.total_length:.2f}m",
            f"Segments:            {bill.segment_count}"
            + (" (closed loop)" if bill.is_closed_loop else " (open run)"),
            f"Rails per section:   {bill.rails_per_section}",
            f"Post height (rec.):  {bill.post_height:.2f}m",
            "",
            f"{'Item':<20} {'Qty':>6} {'Unit':>12} {'Total':>14}",
            "-" * 60,
        ]
        for item in bill.line_items():
            lines.append(
                f"{item.description:<20} {item.quantity:>6} "
                f"{_money(symbol, item.unit_price):>12} {_money(symbol, item.total):>14}"
            )
        lines.append("-" * 60)
        lines.append(f"{'ESTIMATED COST':<40} {_money(symbol, bill.total_cost):>19}")
        return "\n".join(lines)


class PlanFormatter:
    """Formats the resolved plan geometry as a segment table."""

    def format(self, design: Design, geometry: FenceGeometry) -> str:
        if not geometry.positions:
            return "No segments in design."

        lines = [
            "PLAN",
            "=" * 78,
            f"{'#':<4} {'Section':<8} {'Turn':>7} {'Heading':>8} "
            f"{'Start (x, y)':>20} {'End (x, y)':>20}",
            "-" * 78,
        ]
        for segment, position in zip(design.segments, geometry.positions):
            start = f"({position.start.x:.2f}, {position.start.y:.2f})"
            end = f"({position.end.x:.2f}, {position.end.y:.2f})"
            lines.append(
                f"{position.index + 1:<4} {segment.label:<8} {segment.turn_angle:>7.1f} "
                f"{position.heading:>8.1f} {start:>20} {end:>20}"
            )
        lines.append("-" * 78)
        bbox = geometry.bounding_box
        lines.append(f"Footprint: {bbox.width:.2f}m x {bbox.height:.2f}m")
        status = "closed loop" if geometry.is_closed_loop else "open run"
        lines.append(f"Closure gap: {geometry.closure_gap:.3f}m ({status})")
        return "\n".join(lines)


class ElevationFormatter:
    """Formats the unfolded side view as stations and rail heights."""

    def format(self, profile: ElevationProfile) -> str:
        if not profile.stations:
            return "No segments in design."

        heights = ", ".join(f"{h:.2f}m" for h in profile.rail_heights) or "none"
        lines = [
            "ELEVATION",
            "=" * 50,
            f"Fence height: {profile.fence_height:.2f}m  Post length: {profile.post_height:.2f}m",
            f"Rail heights: {heights}",
            "-" * 50,
        ]
        for station in profile.stations:
            lines.append(
                f"{station.label:<8} {station.start:>8.2f}m -> {station.end:>8.2f}m"
            )
        posts = ", ".join(f"{s:.2f}" for s in profile.post_stations)
        lines.append("-" * 50)
        lines.append(f"Posts at: {posts}")
        return "\n".join(lines)


class CatalogFormatter:
    """Formats the purchasable catalog with current prices."""

    def format(self, config: FenceConfig) -> str:
        symbol = config.currency_symbol
        lines = [
            "CATALOG",
            "=" * 40,
            f"{'Item':<20} {'Price':>12}",
            "-" * 40,
        ]
        for pole in PoleLength:
            lines.append(
                f"{pole.label + ' pole':<20} {_money(symbol, config.prices.pole_price(pole)):>12}"
            )
        lines.append(f"{f'Gate ({GATE_WIDTH:g}m)':<20} {_money(symbol, config.prices.gate):>12}")
        lines.append(f"{'Upright post':<20} {_money(symbol, config.prices.post):>12}")
        lines.append("-" * 40)
        lines.append(f"Joint overlap: {config.overlap:.2f}m")
        return "\n".join(lines)


class JsonExporter:
    """Serializes a design snapshot to JSON."""

    def to_dict(self, snapshot: DesignSnapshot) -> dict[str, Any]:
        """Convert a snapshot into plain JSON-compatible data."""
        design = snapshot.design
        geometry = snapshot.geometry
        bill = snapshot.bill
        config = design.config
        bbox = geometry.bounding_box
        return {
            "config": {
                "fence_height": config.fence_height,
                "rail_spacing": config.rail_spacing,
                "overlap": config.overlap,
                "currency_symbol": config.currency_symbol,
            },
            "segments": [
                {
                    "id": segment.id,
                    "kind": segment.kind.value,
                    "raw_length": segment.raw_length,
                    "effective_length": segment.effective_length,
                    "turn_angle": segment.turn_angle,
                    "start": [position.start.x, position.start.y],
                    "end": [position.end.x, position.end.y],
                    "heading": position.heading,
                }
                for segment, position in zip(design.segments, geometry.positions)
            ],
            "geometry": {
                "bounding_box": {
                    "min_x": bbox.min_x,
                    "min_y": bbox.min_y,
                    "max_x": bbox.max_x,
                    "max_y": bbox.max_y,
                },
                "is_closed_loop": geometry.is_closed_loop,
                "closure_gap": geometry.closure_gap,
            },
            "bill_of_materials": {
                "total_length": bill.total_length,
                "total_posts": bill.total_posts,
                "rails_per_section": bill.rails_per_section,
                "pole_requirement": {
                    f"{pole.value:g}": qty for pole, qty in bill.pole_requirement.items()
                },
                "gate_count": bill.gate_count,
                "post_height": bill.post_height,
                "total_cost": bill.total_cost,
            },
            "elevation": {
                "rail_heights": list(snapshot.elevation.rail_heights),
                "post_stations": list(snapshot.elevation.post_stations),
            },
        }

    def format(self, snapshot: DesignSnapshot) -> str:
        return json.dumps(self.to_dict(snapshot), indent=2)
