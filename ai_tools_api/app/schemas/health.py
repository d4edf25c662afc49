"""Pydantic schema for the health check response."""

from pydantic import BaseModel, Field


class HealthStatus(BaseModel):
    status: str = Field("OK", examples=["OK"])
    timestamp: str
    tools_count: int = Field(..., alias="toolsCount")
    favorites_count: int = Field(..., alias="favoritesCount")

    model_config = {
        "populate_by_name": True,
    }
