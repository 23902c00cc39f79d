"""FastAPI REST API for fence design.

Exposes quoting, plan geometry, configuration validation, catalog and
export endpoints.

Usage:
    uvicorn fences.web:app --reload
"""

from fences.web.app import app, create_app

__all__ = ["app", "create_app"]
