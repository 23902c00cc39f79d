"""API routers for the REST API."""

from fences.web.routers.catalog import router as catalog_router
from fences.web.routers.export import router as export_router
from fences.web.routers.quote import router as quote_router
from fences.web.routers.validate import router as validate_router

__all__ = [
    "catalog_router",
    "export_router",
    "quote_router",
    "validate_router",
]
