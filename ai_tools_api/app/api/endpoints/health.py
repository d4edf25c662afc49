"""Health check endpoint."""

from fastapi import APIRouter, Depends

from ai_tools_api.app.core.storage import (
    Catalog,
    FavoritesStore,
    get_catalog,
    get_favorites_store,
)
from ai_tools_api.app.schemas.health import HealthStatus
from ai_tools_api.app.services.health_service import HealthService

router = APIRouter()


@router.get("/health", response_model=HealthStatus)
@router.get("/health/", response_model=HealthStatus, include_in_schema=False)
async def health(
    catalog: Catalog = Depends(get_catalog),
    store: FavoritesStore = Depends(get_favorites_store),
) -> HealthStatus:
    """Report service status along with catalog and favorites counts."""
    return await HealthService.status(catalog, store)
