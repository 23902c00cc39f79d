"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fences.application.dtos import DesignSnapshot


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Attributes:
        format_name: Name of the export format (e.g., "json", "bom").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, snapshot: DesignSnapshot, path: Path) -> None:
        """Write the snapshot to a file."""
        ...

    def export_string(self, snapshot: DesignSnapshot) -> str:
        """Render the snapshot as a string."""
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Registry of exporter classes keyed by format name.

    Example:
        @ExporterRegistry.register("json")
        class DesignJsonExporter:
            format_name = "json"
            file_extension = "json"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str):
        """Decorator to register an exporter class under a format name."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Exports a snapshot to several formats in one output directory.

    Attributes:
        output_dir: Directory where exported files are written.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        snapshot: DesignSnapshot,
        project_name: str = "fence",
    ) -> dict[str, Path]:
        """Export to every listed format.

        Files are named "{project_name}_{format}.{ext}".

        Returns:
            Mapping of format name to written file path.

        Raises:
            KeyError: If any format is not registered.
            OSError: If file operations fail.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name in formats:
            exporter = ExporterRegistry.get(format_name)()
            filepath = self.output_dir / f"{project_name}_{format_name}.{exporter.file_extension}"
            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(snapshot, filepath)
            results[format_name] = filepath

        return results
