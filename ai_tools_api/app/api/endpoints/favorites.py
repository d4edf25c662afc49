"""
Favorites endpoints.

Clients add a catalog tool to favorites by its ``toolId``, list their
favorites (each joined with its tool) and remove a favorite by the
``id`` returned when it was created.  Error responses have the form
``{"error": "<message>"}``.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, status

from ai_tools_api.app.core.errors import APIError, Internal
from ai_tools_api.app.core.storage import (
    Catalog,
    FavoritesStore,
    get_catalog,
    get_favorites_store,
)
from ai_tools_api.app.schemas.favorite import (
    FavoriteCreate,
    FavoriteCreated,
    FavoriteWithTool,
    MessageResponse,
)
from ai_tools_api.app.services.favorite_service import FavoriteService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=FavoriteCreated, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=FavoriteCreated, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def add_favorite(
    payload: FavoriteCreate,
    catalog: Catalog = Depends(get_catalog),
    store: FavoritesStore = Depends(get_favorites_store),
) -> FavoriteCreated:
    """Add a tool to favorites.

    Returns HTTP 404 if the tool does not exist and HTTP 400 if the
    body is invalid or the tool is already in favorites.
    """
    try:
        favorite = await FavoriteService.add_favorite(catalog, store, payload.tool_id)
    except APIError:
        raise
    except Exception as exc:
        logger.exception("Error adding to favorites")
        raise Internal() from exc
    return FavoriteCreated(message="Tool added to favorites successfully", favorite=favorite)


@router.get("", response_model=List[FavoriteWithTool])
@router.get("/", response_model=List[FavoriteWithTool], include_in_schema=False)
async def list_favorites(
    catalog: Catalog = Depends(get_catalog),
    store: FavoritesStore = Depends(get_favorites_store),
) -> List[FavoriteWithTool]:
    """Return all favorites with tool details, oldest first."""
    try:
        return await FavoriteService.list_favorites(catalog, store)
    except APIError:
        raise
    except Exception as exc:
        logger.exception("Error fetching favorites")
        raise Internal() from exc


@router.delete("/{favorite_id}", response_model=MessageResponse)
@router.delete("/{favorite_id}/", response_model=MessageResponse, include_in_schema=False)
async def remove_favorite(
    favorite_id: str,
    store: FavoritesStore = Depends(get_favorites_store),
) -> MessageResponse:
    """Remove a favorite by its ID.  Returns HTTP 404 if it does not exist."""
    try:
        await FavoriteService.remove_favorite(store, favorite_id)
    except APIError:
        raise
    except Exception as exc:
        logger.exception("Error removing favorite")
        raise Internal() from exc
    return MessageResponse(message="Favorite removed successfully")
