"""Service reporting liveness and collection sizes."""

from ai_tools_api.app.core.storage import Catalog, FavoritesStore, utc_timestamp
from ai_tools_api.app.schemas.health import HealthStatus


class HealthService:
    @classmethod
    async def status(cls, catalog: Catalog, store: FavoritesStore) -> HealthStatus:
        return HealthStatus(
            status="OK",
            timestamp=utc_timestamp(),
            tools_count=len(catalog),
            favorites_count=len(store),
        )
