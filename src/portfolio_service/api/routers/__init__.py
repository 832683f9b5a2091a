"""API routers package."""

from portfolio_service.api.routers.buckets import router as buckets_router
from portfolio_service.api.routers.positions import router as positions_router
from portfolio_service.api.routers.dates import router as dates_router

__all__ = [
    "buckets_router",
    "positions_router",
    "dates_router",
]
