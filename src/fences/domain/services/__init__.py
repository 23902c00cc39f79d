"""Domain services for fence geometry and material estimation."""

from .bill_of_materials import (
    BillOfMaterials,
    BillOfMaterialsCalculator,
    LineItem,
    compute_bill_of_materials,
)
from .geometry import (
    ElevationProfile,
    ElevationStation,
    FenceGeometry,
    GeometryResolver,
    build_elevation,
    resolve_geometry,
)
from .rails import post_height, rail_heights, rails_per_section

__all__ = [
    "BillOfMaterials",
    "BillOfMaterialsCalculator",
    "ElevationProfile",
    "ElevationStation",
    "FenceGeometry",
    "GeometryResolver",
    "LineItem",
    "build_elevation",
    "compute_bill_of_materials",
    "post_height",
    "rail_heights",
    "rails_per_section",
    "resolve_geometry",
]
