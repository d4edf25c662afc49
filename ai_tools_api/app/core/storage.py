"""
In‑memory storage for the tool catalog and the favorites list.

Nothing is persisted: the catalog is rebuilt from ``SEED_TOOLS`` and the
favorites list starts empty every time an application is created.  Both
collections are owned by the FastAPI application (``app.state``) and
handed to route handlers through the ``get_catalog`` and
``get_favorites_store`` dependencies, so tests can build a fresh app
with clean state.

The favorites store guards its contents with a re‑entrant lock.  Code
performing a check‑then‑act sequence (such as rejecting duplicates
before inserting) must hold ``store.lock`` for the whole sequence.
"""

import threading
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Iterator, List, Optional

from fastapi import FastAPI, Request

from ai_tools_api.app.schemas.favorite import FavoriteRead
from ai_tools_api.app.schemas.tool import ToolRead


SEED_TOOLS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "name": "ChatGPT",
        "category": "Writing",
        "url": "https://chat.openai.com",
        "excerpt": "Your AI Assistant for content creation",
        "tags": ["AI Assistant", "Research", "Blog"],
    },
    {
        "id": 2,
        "name": "Midjourney",
        "category": "Design",
        "url": "https://midjourney.com",
        "excerpt": "AI image generation tool",
        "tags": ["Art", "Design", "Creative"],
    },
    {
        "id": 3,
        "name": "Grammarly",
        "category": "Writing",
        "url": "https://grammarly.com",
        "excerpt": "AI-powered writing assistant",
        "tags": ["Grammar", "Writing", "Editing"],
    },
    {
        "id": 4,
        "name": "DALL-E",
        "category": "Design",
        "url": "https://openai.com/dall-e-2",
        "excerpt": "AI system that creates realistic images from text descriptions",
        "tags": ["Art", "AI", "Image Generation"],
    },
    {
        "id": 5,
        "name": "Jasper",
        "category": "Writing",
        "url": "https://jasper.ai",
        "excerpt": "AI content generator for marketing teams",
        "tags": ["Marketing", "Content", "Copywriting"],
    },
]


def utc_timestamp() -> str:
    """Return the current UTC time as ISO‑8601 with milliseconds, e.g.
    ``2025-01-01T12:00:00.000Z``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Catalog:
    """Read‑only, ordered collection of tools."""

    def __init__(self, tools: Iterable[ToolRead]) -> None:
        self._tools = tuple(tools)
        ids = [tool.id for tool in self._tools]
        if len(ids) != len(set(ids)):
            raise ValueError("Tool ids must be unique within the catalog")

    @classmethod
    def from_seed(cls, seed: Optional[Iterable[Dict[str, Any]]] = None) -> "Catalog":
        rows = SEED_TOOLS if seed is None else seed
        return cls(ToolRead(**row) for row in rows)

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[ToolRead]:
        return iter(self._tools)

    def all(self) -> List[ToolRead]:
        return list(self._tools)

    def get(self, tool_id: int) -> Optional[ToolRead]:
        return next((tool for tool in self._tools if tool.id == tool_id), None)

    def categories(self) -> List[str]:
        """Distinct categories in first‑seen order."""
        seen: List[str] = []
        for tool in self._tools:
            if tool.category not in seen:
                seen.append(tool.category)
        return seen


class FavoritesStore:
    """Mutable, insertion‑ordered list of favorites."""

    def __init__(self) -> None:
        self._items: List[FavoriteRead] = []
        self.lock = threading.RLock()

    def __len__(self) -> int:
        with self.lock:
            return len(self._items)

    def all(self) -> List[FavoriteRead]:
        """Return a snapshot of the stored favorites."""
        with self.lock:
            return list(self._items)

    def find_by_tool_id(self, tool_id: int) -> Optional[FavoriteRead]:
        with self.lock:
            return next((fav for fav in self._items if fav.tool_id == tool_id), None)

    def append(self, favorite: FavoriteRead) -> None:
        with self.lock:
            self._items.append(favorite)

    def remove(self, favorite_id: str) -> bool:
        """Remove the favorite with ``favorite_id``.

        Returns ``True`` if an entry was removed, ``False`` otherwise.
        """
        with self.lock:
            for index, favorite in enumerate(self._items):
                if favorite.id == favorite_id:
                    del self._items[index]
                    return True
            return False


def init_storage(app: FastAPI) -> None:
    """Attach a freshly seeded catalog and an empty favorites store to ``app``."""
    app.state.catalog = Catalog.from_seed()
    app.state.favorites = FavoritesStore()


def get_catalog(request: Request) -> Catalog:
    """FastAPI dependency returning the application's catalog."""
    return request.app.state.catalog


def get_favorites_store(request: Request) -> FavoritesStore:
    """FastAPI dependency returning the application's favorites store."""
    return request.app.state.favorites
