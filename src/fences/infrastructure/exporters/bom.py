"""Bill of Materials exporter.

Writes the purchase list (posts, gates, poles per catalog length) as CSV
with unit and line costs and a closing total row.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from fences.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from fences.application.dtos import DesignSnapshot

CSV_HEADER = ("item", "quantity", "unit_price", "total")


@ExporterRegistry.register("bom")
class BomExporter:
    """Exports the bill of materials of a design as CSV."""

    format_name: ClassVar[str] = "bom"
    file_extension: ClassVar[str] = "csv"

    def export(self, snapshot: DesignSnapshot, path: Path) -> None:
        path.write_text(self.export_string(snapshot), encoding="utf-8")

    def export_string(self, snapshot: DesignSnapshot) -> str:
        bill = snapshot.bill
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for item in bill.line_items():
            writer.writerow(
                [item.description, item.quantity, f"{item.unit_price:.2f}", f"{item.total:.2f}"]
            )
        writer.writerow(["TOTAL", "", "", f"{bill.total_cost:.2f}"])
        return buffer.getvalue()
