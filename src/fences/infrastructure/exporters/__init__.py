"""Exporter framework for fence design quotes.

Registered exporters:
- bom: Bill of materials as CSV (text and JSON on request)
- json: Full quote with segments, plan geometry, elevation data and bill

Usage:
    manager = ExportManager(output_dir=Path("./output"))
    manager.export_all(["bom", "json"], snapshot, project_name="kraal")
"""

from fences.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)

# Import exporters to trigger registration
from fences.infrastructure.exporters.bom import BomExporter
from fences.infrastructure.exporters.json_exporter import DesignJsonExporter

__all__ = [
    "BomExporter",
    "DesignJsonExporter",
    "Exporter",
    "ExportManager",
    "ExporterRegistry",
]
