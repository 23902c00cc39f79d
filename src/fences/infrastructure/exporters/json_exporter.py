"""JSON exporter for complete design quotes."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from fences.infrastructure.exporters.base import ExporterRegistry
from fences.infrastructure.formatters import JsonExporter

if TYPE_CHECKING:
    from fences.application.dtos import DesignSnapshot


@ExporterRegistry.register("json")
class DesignJsonExporter:
    """Writes segments, plan geometry, elevation data and the bill as JSON."""

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self) -> None:
        self._json = JsonExporter()

    def export(self, snapshot: DesignSnapshot, path: Path) -> None:
        path.write_text(self.export_string(snapshot), encoding="utf-8")

    def export_string(self, snapshot: DesignSnapshot) -> str:
        return self._json.format(snapshot)
