"""Domain layer - core fence geometry and quantity logic."""

from .config import DEFAULT_POLE_PRICES, FenceConfig, PriceList
from .entities import Design, FenceSegment
from .services import (
    BillOfMaterials,
    BillOfMaterialsCalculator,
    ElevationProfile,
    FenceGeometry,
    GeometryResolver,
    LineItem,
    build_elevation,
    compute_bill_of_materials,
    rail_heights,
    rails_per_section,
    resolve_geometry,
)
from .value_objects import (
    CATALOG_LENGTHS,
    GATE_WIDTH,
    BoundingBox2D,
    Point2D,
    PoleLength,
    SegmentKind,
    SegmentPosition,
)

__all__ = [
    "BillOfMaterials",
    "BillOfMaterialsCalculator",
    "BoundingBox2D",
    "CATALOG_LENGTHS",
    "DEFAULT_POLE_PRICES",
    "Design",
    "ElevationProfile",
    "FenceConfig",
    "FenceGeometry",
    "FenceSegment",
    "GATE_WIDTH",
    "GeometryResolver",
    "LineItem",
    "Point2D",
    "PoleLength",
    "PriceList",
    "SegmentKind",
    "SegmentPosition",
    "build_elevation",
    "compute_bill_of_materials",
    "rail_heights",
    "rails_per_section",
    "resolve_geometry",
]
