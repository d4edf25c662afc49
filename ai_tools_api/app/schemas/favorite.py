"""
Pydantic schemas for favorites.

A favorite links a catalog tool to the user's list.  Clients send only
the tool identifier; the server assigns the favorite ``id`` and the
``addedAt`` timestamp.  When favorites are listed, each entry is
joined with the referenced tool.
"""

from typing import Optional

from pydantic import BaseModel, Field, StrictInt

from .tool import ToolRead

INVALID_TOOL_ID_MESSAGE = "toolId is required and must be a number"


class FavoriteCreate(BaseModel):
    """Schema for adding a tool to favorites.

    ``toolId`` must be a JSON integer under exactly that key.  Booleans,
    floats and numeric strings are rejected rather than coerced.  ``0``
    passes here and is refused by ``FavoriteService``.
    """

    tool_id: StrictInt = Field(..., alias="toolId", examples=[1])


class FavoriteRead(BaseModel):
    """Schema for a stored favorite."""

    id: str = Field(..., examples=["3b241101-e2bb-4255-8caf-4136c566a962"])
    tool_id: int = Field(..., alias="toolId", examples=[1])
    added_at: str = Field(..., alias="addedAt", examples=["2025-01-01T12:00:00.000Z"])

    model_config = {
        "populate_by_name": True,
        "frozen": True,
    }


class FavoriteWithTool(FavoriteRead):
    """A favorite together with the tool it references.

    ``tool`` is ``None`` when the referenced tool is not in the catalog.
    """

    tool: Optional[ToolRead] = None


class FavoriteCreated(BaseModel):
    """Response body for a successfully added favorite."""

    message: str
    favorite: FavoriteRead


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str
