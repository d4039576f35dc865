"""
GIF routes
"""
from fastapi import APIRouter, Depends, Query
from typing import Optional

from ...application.services import RelayService
from ...dependencies import get_relay_service
from ...config import settings
from ...schemas import ErrorResponse


router = APIRouter(prefix="/api", tags=["GIFs"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get("/trending", responses=ERROR_RESPONSES)
async def trending(
    limit: str = Query(str(settings.DEFAULT_PAGE_SIZE), description="Items per page, forwarded to Giphy"),
    offset: str = Query("0", description="Items to skip, forwarded to Giphy"),
    relay: RelayService = Depends(get_relay_service),
):
    """
    Get trending GIFs

    Returns the Giphy payload unchanged (`data`, `pagination`, `meta`).
    """
    return await relay.fetch_trending(limit, offset)


@router.get("/search", responses=ERROR_RESPONSES)
async def search(
    q: Optional[str] = Query(None, description="Search query (required)"),
    limit: str = Query(str(settings.DEFAULT_PAGE_SIZE), description="Items per page, forwarded to Giphy"),
    offset: str = Query("0", description="Items to skip, forwarded to Giphy"),
    relay: RelayService = Depends(get_relay_service),
):
    """
    Search GIFs

    - **q**: Search query; an empty or missing query is rejected with 400
    """
    return await relay.search_media(q, limit, offset)
