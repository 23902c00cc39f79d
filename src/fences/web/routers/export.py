"""Export format endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from fences.infrastructure.exporters import ExporterRegistry
from fences.web.dependencies import QuoteCommandDep
from fences.web.exceptions import UnsupportedFormatError
from fences.web.routers.quote import quote_request
from fences.web.schemas.requests import QuoteRequest
from fences.web.schemas.responses import ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])

MEDIA_TYPES = {
    "json": "application/json",
    "csv": "text/csv",
}


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/{format_name}")
async def export_design(
    format_name: str,
    request: QuoteRequest,
    command: QuoteCommandDep,
) -> Response:
    """Quote a design and return it in the requested export format.

    Raises:
        UnsupportedFormatError: If no exporter is registered for the format (400).
    """
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    snapshot = quote_request(request, command)
    exporter = ExporterRegistry.get(format_name)()
    extension = exporter.file_extension
    return Response(
        content=exporter.export_string(snapshot),
        media_type=MEDIA_TYPES.get(extension, "text/plain"),
        headers={
            "Content-Disposition": f'attachment; filename="fence_{format_name}.{extension}"'
        },
    )
