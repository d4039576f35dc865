"""
HTTP client for the Giphy media API
"""
import httpx
from typing import Optional, Dict, Any
import logging

from ..config import settings

logger = logging.getLogger(__name__)


class GiphyClient:
    """Forwards trending/search queries to Giphy with the server-held key"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = settings.GIPHY_KEY if api_key is None else api_key
        self.base_url = (base_url or settings.GIPHY_BASE_URL).rstrip("/")
        self.timeout = httpx.Timeout(timeout if timeout is not None else settings.UPSTREAM_TIMEOUT)
        self.transport = transport
        self.client: Optional[httpx.AsyncClient] = None

    async def start(self):
        """Initialize HTTP client"""
        self.client = httpx.AsyncClient(timeout=self.timeout, transport=self.transport)
        logger.info("Giphy client initialized")

    async def stop(self):
        """Close HTTP client"""
        if self.client:
            await self.client.aclose()
            self.client = None
            logger.info("Giphy client closed")

    async def _get(self, endpoint: str, params: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        GET an upstream endpoint

        The key travels in the query string, so only the endpoint name is
        ever logged.

        Returns:
            Decoded JSON body, or None on any failure
        """
        if not self.client:
            logger.error("Giphy client not initialized")
            return None

        url = f"{self.base_url}/{endpoint}"
        try:
            response = await self.client.get(
                url,
                params={"api_key": self.api_key, **params},
            )
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Giphy {endpoint} returned HTTP {e.response.status_code}")
            return None
        except httpx.RequestError as e:
            logger.error(f"Giphy {endpoint} request failed: {type(e).__name__}")
            return None
        except ValueError:
            logger.error(f"Giphy {endpoint} returned a non-JSON body")
            return None

    async def trending(self, limit, offset) -> Optional[Dict[str, Any]]:
        """Get a page of trending GIFs"""
        return await self._get("trending", {"limit": limit, "offset": offset})

    async def search(self, query: str, limit, offset) -> Optional[Dict[str, Any]]:
        """Search GIFs"""
        return await self._get("search", {"q": query, "limit": limit, "offset": offset})


# Global Giphy client instance
giphy_client = GiphyClient()


async def get_giphy_client() -> GiphyClient:
    """Dependency for getting Giphy client instance"""
    return giphy_client
