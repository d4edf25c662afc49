"""
Tool catalog endpoints.

The catalog is read‑only, so only a list route is exposed.  Clients may
narrow the list with the ``category`` query parameter.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ai_tools_api.app.core.errors import APIError, Internal
from ai_tools_api.app.core.storage import Catalog, get_catalog
from ai_tools_api.app.schemas.tool import ToolRead
from ai_tools_api.app.services.tool_service import ToolService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[ToolRead])
@router.get("/", response_model=List[ToolRead], include_in_schema=False)
async def list_tools(
    category: Optional[str] = Query(None, description="Return only tools in this category (case-insensitive)"),
    catalog: Catalog = Depends(get_catalog),
) -> List[ToolRead]:
    """Return AI tools, optionally filtered by category.

    Filtering is an exact match ignoring case; an unknown category
    returns an empty list.
    """
    try:
        return await ToolService.list_tools(catalog, category=category)
    except APIError:
        raise
    except Exception as exc:
        logger.exception("Error fetching tools")
        raise Internal() from exc
