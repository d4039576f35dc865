"""
HTTP client for the relay's /api endpoints
"""
import httpx
from pydantic import ValidationError
from typing import List, Optional
import logging

from ..config import settings
from ..domain.models import PAGE_SIZE
from ..schemas import MediaItem, PagedResult

logger = logging.getLogger(__name__)


class RelayClientError(Exception):
    """The relay could not be reached or answered with an error"""


class RelayClient:
    """Fetches pages of GIFs from the relay"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = (base_url or settings.RELAY_API_URL).rstrip("/")
        self.client = client
        self._owns_client = client is None

    async def start(self):
        """Initialize HTTP client"""
        if self.client is None:
            self.client = httpx.AsyncClient()
            self._owns_client = True
        logger.info(f"Relay client using {self.base_url}")

    async def stop(self):
        """Close HTTP client if this instance created it"""
        if self.client and self._owns_client:
            await self.client.aclose()
            self.client = None

    async def _get_page(self, endpoint: str, params: dict) -> List[MediaItem]:
        if self.client is None:
            raise RelayClientError("Relay client not initialized")

        try:
            response = await self.client.get(f"{self.base_url}/{endpoint}", params=params)
            response.raise_for_status()
            return PagedResult.model_validate(response.json()).data
        except httpx.HTTPStatusError as e:
            raise RelayClientError(
                f"Relay {endpoint} returned HTTP {e.response.status_code}"
            ) from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise RelayClientError(f"Relay {endpoint} unreachable: {e}") from e
        except (ValueError, ValidationError) as e:
            raise RelayClientError(f"Relay {endpoint} returned an unexpected body") from e

    async def trending(self, offset: int = 0, limit: int = PAGE_SIZE) -> List[MediaItem]:
        """Get one page of trending GIFs"""
        return await self._get_page("trending", {"limit": limit, "offset": offset})

    async def search(self, query: str, offset: int = 0, limit: int = PAGE_SIZE) -> List[MediaItem]:
        """Get one page of search results"""
        return await self._get_page("search", {"q": query, "limit": limit, "offset": offset})
