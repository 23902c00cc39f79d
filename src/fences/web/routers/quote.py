"""Design quoting and plan geometry endpoints."""

from typing import Any

from fastapi import APIRouter

from fences.application import DesignSnapshot, SegmentInput
from fences.application.config import (
    ProjectConfiguration,
    config_to_fence_config,
    load_config_from_dict,
)
from fences.domain import FenceConfig
from fences.web.dependencies import QuoteCommandDep
from fences.web.exceptions import QuoteError
from fences.web.schemas.common import PointSchema
from fences.web.schemas.requests import QuoteRequest
from fences.web.schemas.responses import (
    BillOfMaterialsSchema,
    BoundingBoxSchema,
    ElevationSchema,
    GeometrySchema,
    LineItemSchema,
    QuoteResponseSchema,
    SegmentPositionSchema,
)

router = APIRouter(tags=["quote"])


def request_fence_config(config: dict[str, Any] | None) -> FenceConfig:
    """Build the domain configuration for a request.

    Raises:
        ConfigError: If the supplied configuration is invalid.
    """
    project = load_config_from_dict(config) if config is not None else ProjectConfiguration()
    return config_to_fence_config(project)


def quote_request(request: QuoteRequest, command: QuoteCommandDep) -> DesignSnapshot:
    """Replay the requested segments and return the resulting snapshot.

    Raises:
        QuoteError: If any segment is invalid.
    """
    fence_config = request_fence_config(request.config)
    inputs = [
        SegmentInput(kind=segment.kind.value, length=segment.length, turn=segment.turn)
        for segment in request.segments
    ]
    output = command.execute(inputs, fence_config)
    if not output.is_valid:
        raise QuoteError(output.errors)
    return output.snapshot


def _geometry_to_schema(snapshot: DesignSnapshot) -> GeometrySchema:
    geometry = snapshot.geometry
    bbox = geometry.bounding_box
    segments = [
        SegmentPositionSchema(
            index=position.index,
            id=segment.id,
            kind=segment.kind.value,
            label=segment.label,
            raw_length=segment.raw_length,
            effective_length=segment.effective_length,
            turn_angle=segment.turn_angle,
            heading=position.heading,
            start=PointSchema(x=position.start.x, y=position.start.y),
            end=PointSchema(x=position.end.x, y=position.end.y),
        )
        for segment, position in zip(snapshot.design.segments, geometry.positions)
    ]
    return GeometrySchema(
        segments=segments,
        bounding_box=BoundingBoxSchema(
            min_x=bbox.min_x,
            min_y=bbox.min_y,
            max_x=bbox.max_x,
            max_y=bbox.max_y,
            width=bbox.width,
            height=bbox.height,
        ),
        is_closed_loop=geometry.is_closed_loop,
        closure_gap=geometry.closure_gap,
        total_length=snapshot.bill.total_length,
    )


def _bill_to_schema(snapshot: DesignSnapshot) -> BillOfMaterialsSchema:
    bill = snapshot.bill
    return BillOfMaterialsSchema(
        segment_count=bill.segment_count,
        total_length=bill.total_length,
        rails_per_section=bill.rails_per_section,
        total_posts=bill.total_posts,
        post_height=bill.post_height,
        gate_count=bill.gate_count,
        pole_counts={f"{pole.value:g}": n for pole, n in bill.pole_counts.items()},
        pole_requirement={
            f"{pole.value:g}": n for pole, n in bill.pole_requirement.items()
        },
        line_items=[
            LineItemSchema(
                item=item.description,
                quantity=item.quantity,
                unit_price=item.unit_price,
                total=item.total,
            )
            for item in bill.line_items()
        ],
        post_cost=bill.post_cost,
        gate_cost=bill.gate_cost,
        pole_cost=sum(bill.pole_costs.values()),
        total_cost=bill.total_cost,
        currency_symbol=bill.currency_symbol,
    )


def _elevation_to_schema(snapshot: DesignSnapshot) -> ElevationSchema:
    profile = snapshot.elevation
    return ElevationSchema(
        fence_height=profile.fence_height,
        post_height=profile.post_height,
        rail_heights=list(profile.rail_heights),
        post_stations=list(profile.post_stations),
        total_length=profile.total_length,
    )


@router.post("/quote", response_model=QuoteResponseSchema)
async def quote_design(
    request: QuoteRequest,
    command: QuoteCommandDep,
) -> QuoteResponseSchema:
    """Quote a fence design: plan geometry, bill of materials and elevation.

    Args:
        request: Segments in design order and optional configuration.
        command: Injected QuoteDesignCommand.

    Returns:
        Geometry, bill of materials and elevation data.

    Raises:
        QuoteError: If any segment is invalid (422).
        ConfigError: If the configuration is invalid (422).
    """
    snapshot = quote_request(request, command)
    return QuoteResponseSchema(
        geometry=_geometry_to_schema(snapshot),
        bill_of_materials=_bill_to_schema(snapshot),
        elevation=_elevation_to_schema(snapshot),
    )


@router.post("/geometry", response_model=GeometrySchema)
async def resolve_design_geometry(
    request: QuoteRequest,
    command: QuoteCommandDep,
) -> GeometrySchema:
    """Resolve the plan geometry of a design without pricing it."""
    return _geometry_to_schema(quote_request(request, command))
