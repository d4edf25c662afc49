"""
Service layer for the favorites list.

Adding a favorite runs its checks in a fixed order: the ``toolId`` is
validated first, then the referenced tool must exist in the catalog,
and only then is the list scanned for a duplicate.  A duplicate is
reported as ``Conflict`` which the API maps to HTTP 400, matching what
existing clients expect.

Favorites are not re‑validated after creation.  When a favorite's tool
cannot be resolved while listing, the entry is returned with
``tool`` set to ``None``.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, List

from ai_tools_api.app.core.errors import Conflict, InvalidArgument, NotFound
from ai_tools_api.app.core.storage import Catalog, FavoritesStore, utc_timestamp
from ai_tools_api.app.schemas.favorite import (
    INVALID_TOOL_ID_MESSAGE,
    FavoriteRead,
    FavoriteWithTool,
)

logger = logging.getLogger(__name__)


class FavoriteService:
    """Service class for managing favorites."""

    @staticmethod
    def _validate_tool_id(tool_id: Any) -> int:
        # bool is a subclass of int and must not pass as an identifier;
        # 0 counts as missing, any other integer goes on to the lookup
        if isinstance(tool_id, bool) or not isinstance(tool_id, int) or tool_id == 0:
            raise InvalidArgument(INVALID_TOOL_ID_MESSAGE)
        return tool_id

    @classmethod
    async def add_favorite(cls, catalog: Catalog, store: FavoritesStore, tool_id: Any) -> FavoriteRead:
        """Add the tool ``tool_id`` to favorites and return the new entry.

        Raises
        ------
        InvalidArgument
            ``tool_id`` is missing, not an integer, or ``0``.
        NotFound
            No tool with ``tool_id`` exists in the catalog.
        Conflict
            The tool is already in favorites.
        """
        tool_id = cls._validate_tool_id(tool_id)
        if catalog.get(tool_id) is None:
            logger.warning("Attempt to favorite unknown tool %s", tool_id)
            raise NotFound("Tool not found")

        with store.lock:
            if store.find_by_tool_id(tool_id) is not None:
                logger.warning("Tool %s is already in favorites", tool_id)
                raise Conflict("Tool is already in favorites")
            favorite = FavoriteRead(
                id=str(uuid.uuid4()),
                tool_id=tool_id,
                added_at=utc_timestamp(),
            )
            store.append(favorite)
        logger.info("Added favorite %s for tool %s", favorite.id, tool_id)
        return favorite

    @classmethod
    async def list_favorites(cls, catalog: Catalog, store: FavoritesStore) -> List[FavoriteWithTool]:
        """Return all favorites in insertion order, each joined with its tool."""
        return [
            FavoriteWithTool(
                id=favorite.id,
                tool_id=favorite.tool_id,
                added_at=favorite.added_at,
                tool=catalog.get(favorite.tool_id),
            )
            for favorite in store.all()
        ]

    @classmethod
    async def remove_favorite(cls, store: FavoritesStore, favorite_id: str) -> None:
        """Delete the favorite with ``favorite_id``.

        Raises ``NotFound`` if no such favorite exists, including when it
        has already been removed.
        """
        if not store.remove(favorite_id):
            raise NotFound("Favorite not found")
        logger.info("Removed favorite %s", favorite_id)
