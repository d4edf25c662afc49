"""Unit tests for the service layer, run directly against in-memory storage."""

from __future__ import annotations

import threading

import pytest

from ai_tools_api.app.core.errors import Conflict, InvalidArgument, NotFound
from ai_tools_api.app.core.storage import Catalog
from ai_tools_api.app.services.favorite_service import FavoriteService
from ai_tools_api.app.services.health_service import HealthService
from ai_tools_api.app.services.tool_service import ToolService


@pytest.mark.asyncio
async def test_list_tools_without_category(catalog):
    tools = await ToolService.list_tools(catalog)

    assert [tool.id for tool in tools] == [1, 2, 3, 4, 5]


@pytest.mark.asyncio
async def test_list_tools_by_category(catalog):
    tools = await ToolService.list_tools(catalog, category="DeSiGn")

    assert [tool.name for tool in tools] == ["Midjourney", "DALL-E"]


@pytest.mark.asyncio
async def test_get_tool(catalog):
    assert (await ToolService.get_tool(catalog, 3)).name == "Grammarly"
    assert await ToolService.get_tool(catalog, 99) is None


@pytest.mark.asyncio
async def test_add_favorite_appends_to_store(catalog, store):
    favorite = await FavoriteService.add_favorite(catalog, store, 2)

    assert favorite.tool_id == 2
    assert store.all() == [favorite]


@pytest.mark.asyncio
@pytest.mark.parametrize("tool_id", [None, "2", 2.0, True, False, 0])
async def test_add_favorite_validates_tool_id(catalog, store, tool_id):
    with pytest.raises(InvalidArgument):
        await FavoriteService.add_favorite(catalog, store, tool_id)

    assert len(store) == 0


@pytest.mark.asyncio
async def test_add_favorite_unknown_tool(catalog, store):
    with pytest.raises(NotFound) as excinfo:
        await FavoriteService.add_favorite(catalog, store, 6)

    assert excinfo.value.status_code == 404
    assert excinfo.value.message == "Tool not found"


@pytest.mark.asyncio
async def test_negative_tool_id_fails_lookup_not_validation(catalog, store):
    with pytest.raises(NotFound):
        await FavoriteService.add_favorite(catalog, store, -1)

    assert len(store) == 0


@pytest.mark.asyncio
async def test_add_favorite_duplicate_is_conflict_with_400(catalog, store):
    await FavoriteService.add_favorite(catalog, store, 1)

    with pytest.raises(Conflict) as excinfo:
        await FavoriteService.add_favorite(catalog, store, 1)

    assert excinfo.value.status_code == 400
    assert len(store) == 1


@pytest.mark.asyncio
async def test_existence_is_checked_before_uniqueness(store):
    # A favorite for tool 7 exists but tool 7 is not in this catalog.
    full = Catalog.from_seed(
        [{"id": 7, "name": "Temp", "category": "Misc", "url": "https://temp", "excerpt": "", "tags": []}]
    )
    await FavoriteService.add_favorite(full, store, 7)

    with pytest.raises(NotFound):
        await FavoriteService.add_favorite(Catalog.from_seed(), store, 7)


@pytest.mark.asyncio
async def test_list_favorites_resolves_tools(catalog, store):
    await FavoriteService.add_favorite(catalog, store, 4)

    [entry] = await FavoriteService.list_favorites(catalog, store)

    assert entry.tool is not None
    assert entry.tool.name == "DALL-E"


@pytest.mark.asyncio
async def test_remove_favorite(catalog, store):
    favorite = await FavoriteService.add_favorite(catalog, store, 5)

    await FavoriteService.remove_favorite(store, favorite.id)

    assert len(store) == 0
    with pytest.raises(NotFound):
        await FavoriteService.remove_favorite(store, favorite.id)


@pytest.mark.asyncio
async def test_health_status(catalog, store):
    await FavoriteService.add_favorite(catalog, store, 1)

    health = await HealthService.status(catalog, store)

    assert health.status == "OK"
    assert health.tools_count == 5
    assert health.favorites_count == 1


def test_concurrent_adds_of_same_tool_insert_once(catalog, store):
    import asyncio

    errors = []
    barrier = threading.Barrier(8)

    def worker() -> None:
        barrier.wait()
        try:
            asyncio.run(FavoriteService.add_favorite(catalog, store, 1))
        except Conflict as exc:
            errors.append(exc)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(store) == 1
    assert len(errors) == 7
