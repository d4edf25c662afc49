"""
Top‑level router for the API.

Aggregates the resource routers under their prefixes.  When new
resources are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import favorites, health, tools

router = APIRouter()

router.include_router(tools.router, prefix="/api/tools", tags=["tools"])
router.include_router(favorites.router, prefix="/api/favorites", tags=["favorites"])
# The health router defines its own "/health" path; it is not part of /api.
router.include_router(health.router, tags=["health"])
