"""
Error types raised by the service layer.

Every error carries the HTTP status code it maps to and a short,
user‑facing message.  The application installs a single exception
handler for ``APIError`` (see ``main.py``) which renders the error as
``{"error": message}``; handlers therefore never build error responses
themselves.
"""

from fastapi import status


class APIError(Exception):
    """Base class for errors that are reported to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidArgument(APIError):
    """Malformed or missing request input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class NotFound(APIError):
    """A referenced tool or favorite does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class Conflict(APIError):
    """The request would violate a uniqueness constraint.

    Reported with HTTP 400 rather than 409 to stay compatible with
    existing clients of the favorites endpoint.
    """

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Conflict"


class Internal(APIError):
    """Unexpected fault while handling a request."""
