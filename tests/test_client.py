"""Tests for the ``requests`` based API client.

The client is driven against an in-process application by passing the
FastAPI ``TestClient`` as its session.
"""

from __future__ import annotations

import pytest
import requests

from ai_tools_api.client import AIToolsAPI, AIToolsAPIError


@pytest.fixture
def api(client) -> AIToolsAPI:
    return AIToolsAPI(base_url="http://testserver/", session=client)


def test_list_tools(api):
    assert len(api.list_tools()) == 5
    assert [tool["name"] for tool in api.list_tools(category="writing")] == ["ChatGPT", "Grammarly", "Jasper"]


def test_favorites_roundtrip(api):
    favorite = api.add_favorite(2)
    assert favorite["toolId"] == 2

    [entry] = api.list_favorites()
    assert entry["id"] == favorite["id"]
    assert entry["tool"]["name"] == "Midjourney"

    assert api.remove_favorite(favorite["id"]) == "Favorite removed successfully"
    assert api.health()["favoritesCount"] == 0


def test_error_responses_raise_with_server_message(api):
    api.add_favorite(1)

    with pytest.raises(AIToolsAPIError) as duplicate:
        api.add_favorite(1)
    with pytest.raises(AIToolsAPIError) as missing:
        api.remove_favorite("nope")

    assert duplicate.value.status_code == 400
    assert duplicate.value.message == "Tool is already in favorites"
    assert missing.value.status_code == 404
    assert str(missing.value) == "404: Favorite not found"


def test_transport_failure_raises_without_status():
    class BrokenSession:
        def request(self, **kwargs):
            raise requests.ConnectionError("connection refused")

    api = AIToolsAPI(base_url="http://localhost:1", session=BrokenSession())

    with pytest.raises(AIToolsAPIError) as excinfo:
        api.health()

    assert excinfo.value.status_code is None
    assert "connection refused" in str(excinfo.value)
