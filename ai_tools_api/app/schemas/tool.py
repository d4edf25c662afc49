"""
Pydantic models for catalog tools.

Tools are seeded when the application starts and never change
afterwards, so the model is frozen.
"""

from typing import List

from pydantic import BaseModel, Field


class ToolRead(BaseModel):
    """Schema for a single AI tool in the catalog."""

    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["ChatGPT"])
    category: str = Field(..., examples=["Writing"])
    url: str = Field(..., examples=["https://chat.openai.com"])
    excerpt: str = Field(..., examples=["Your AI Assistant for content creation"])
    tags: List[str] = Field(default_factory=list, examples=[["AI Assistant", "Research", "Blog"]])

    model_config = {
        "frozen": True,
    }
