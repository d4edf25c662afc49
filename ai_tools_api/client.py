"""AI Tools API client.

A thin wrapper around the HTTP interface of the AI Tools API, built on
the ``requests`` library.  The client exposes one method per
operation:

* :meth:`AIToolsAPI.list_tools` – list catalog tools, optionally by category.
* :meth:`AIToolsAPI.add_favorite` – add a tool to favorites.
* :meth:`AIToolsAPI.list_favorites` – list favorites with tool details.
* :meth:`AIToolsAPI.remove_favorite` – remove a favorite.
* :meth:`AIToolsAPI.health` – fetch the service health status.

Methods return the decoded JSON body on success.  Any HTTP error status
or transport failure raises :class:`AIToolsAPIError`, which carries the
status code (``None`` for transport failures) and the ``error`` message
sent by the server.

Any object with a ``requests.Session`` compatible ``request`` method
may be passed as ``session``; tests use this to drive the client
against an in‑process application.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)


class AIToolsAPIError(Exception):
    """Raised when the API returns an error or cannot be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.status_code}: {self.message}"


class AIToolsAPI:
    """Client for interacting with the AI Tools API."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:3000",
        session: Optional[Any] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``. On failure,
            ``data`` is ``None`` and ``error`` is a dictionary with keys
            ``status_code`` and ``message`` describing the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            try:
                body = response.json()
                if isinstance(body, dict):
                    message = body.get("error") or body.get("detail") or str(body)
                else:
                    message = str(body)
            except ValueError:
                message = response.text
            if not message:
                message = f"HTTP {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}

        if response.content:
            return response.json(), None
        return None, None

    def _call(self, method: str, path: str, **kwargs: Any) -> Any:
        data, error = self._request(method, path, **kwargs)
        if error is not None:
            raise AIToolsAPIError(error["message"], status_code=error["status_code"])
        return data

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def list_tools(self, category: Optional[str] = None) -> List[Dict[str, Any]]:
        """Return catalog tools, optionally only those in ``category``."""
        params = {"category": category} if category else None
        return self._call("GET", "/api/tools", params=params)

    def add_favorite(self, tool_id: int) -> Dict[str, Any]:
        """Add ``tool_id`` to favorites and return the created favorite."""
        data = self._call("POST", "/api/favorites", json_body={"toolId": tool_id})
        return data["favorite"]

    def list_favorites(self) -> List[Dict[str, Any]]:
        return self._call("GET", "/api/favorites")

    def remove_favorite(self, favorite_id: str) -> str:
        """Remove a favorite and return the server's confirmation message."""
        data = self._call("DELETE", f"/api/favorites/{favorite_id}")
        return data["message"]

    def health(self) -> Dict[str, Any]:
        return self._call("GET", "/health")
