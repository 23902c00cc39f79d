"""Catalog endpoint."""

from fastapi import APIRouter

from fences.domain import GATE_WIDTH, FenceConfig, PoleLength
from fences.web.schemas.responses import CatalogPoleSchema, CatalogSchema

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("", response_model=CatalogSchema)
async def get_catalog() -> CatalogSchema:
    """List catalog pole lengths, gate width and default prices."""
    config = FenceConfig()
    return CatalogSchema(
        poles=[
            CatalogPoleSchema(
                length=pole.value,
                label=pole.label,
                price=config.prices.pole_price(pole),
            )
            for pole in PoleLength
        ],
        gate_width=GATE_WIDTH,
        gate_price=config.prices.gate,
        post_price=config.prices.post,
        currency_symbol=config.currency_symbol,
        overlap=config.overlap,
    )
