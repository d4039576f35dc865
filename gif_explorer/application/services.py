"""
Application services - Relay logic between the API layer and Giphy
"""
from typing import Any, Dict
import logging

from ..exceptions import InvalidRequest, UpstreamFailure
from ..infrastructure.giphy_client import GiphyClient

logger = logging.getLogger(__name__)

TRENDING_FAILED = "Failed to fetch trending GIFs"
SEARCH_FAILED = "Failed to search GIFs"
QUERY_REQUIRED = "Search query is required"


class RelayService:
    """Stateless relay: every call is one upstream request"""

    def __init__(self, giphy_client: GiphyClient):
        self.giphy = giphy_client

    async def fetch_trending(self, limit, offset) -> Dict[str, Any]:
        """
        Get a page of trending GIFs

        Args:
            limit: Page size, forwarded unchanged
            offset: Page offset, forwarded unchanged

        Returns:
            The upstream payload, verbatim

        Raises:
            UpstreamFailure: If the upstream call fails for any reason
        """
        payload = await self.giphy.trending(limit, offset)
        if payload is None:
            logger.error("Error fetching trending GIFs")
            raise UpstreamFailure(TRENDING_FAILED)
        return payload

    async def search_media(self, query, limit, offset) -> Dict[str, Any]:
        """
        Search GIFs

        Only a missing or empty query is rejected; whitespace is forwarded.

        Raises:
            InvalidRequest: If the query is missing
            UpstreamFailure: If the upstream call fails for any reason
        """
        if not query:
            raise InvalidRequest(QUERY_REQUIRED)

        payload = await self.giphy.search(query, limit, offset)
        if payload is None:
            logger.error("Error searching GIFs")
            raise UpstreamFailure(SEARCH_FAILED)
        return payload
