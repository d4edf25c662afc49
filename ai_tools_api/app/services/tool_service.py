"""
Service layer for the tool catalog.

The catalog is read‑only; this service only filters and looks up
tools.  Category filtering is an exact, case‑insensitive comparison;
there is no partial or fuzzy matching.
"""

import logging
from typing import List, Optional

from ai_tools_api.app.core.storage import Catalog
from ai_tools_api.app.schemas.tool import ToolRead


class ToolService:
    """Service class for querying catalog tools."""

    @classmethod
    async def list_tools(cls, catalog: Catalog, category: Optional[str] = None) -> List[ToolRead]:
        """Return catalog tools, optionally restricted to one category.

        Without a ``category`` (or with an empty one) every tool is
        returned in catalog order.  Otherwise only tools whose category
        equals ``category`` ignoring case are returned, order preserved.
        An unknown category yields an empty list.
        """
        logger = logging.getLogger(__name__)
        if not category:
            return catalog.all()
        wanted = category.lower()
        tools = [tool for tool in catalog if tool.category.lower() == wanted]
        logger.debug("Category %r matched %d tool(s)", category, len(tools))
        return tools

    @classmethod
    async def get_tool(cls, catalog: Catalog, tool_id: int) -> Optional[ToolRead]:
        """Retrieve a single tool by its ID, or ``None`` if absent."""
        return catalog.get(tool_id)
