"""Infrastructure layer - formatters and exporters."""

from .exporters import (
    BomExporter,
    DesignJsonExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
)
from .formatters import (
    BillOfMaterialsFormatter,
    CatalogFormatter,
    ElevationFormatter,
    JsonExporter,
    PlanFormatter,
)

__all__ = [
    "BillOfMaterialsFormatter",
    "BomExporter",
    "CatalogFormatter",
    "DesignJsonExporter",
    "ElevationFormatter",
    "Exporter",
    "ExportManager",
    "ExporterRegistry",
    "JsonExporter",
    "PlanFormatter",
]
