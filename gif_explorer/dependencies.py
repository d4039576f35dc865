"""
FastAPI dependencies for GIF Explorer
"""
from fastapi import Depends

from .infrastructure.giphy_client import GiphyClient, get_giphy_client
from .application.services import RelayService


async def get_relay_service(
    giphy: GiphyClient = Depends(get_giphy_client)
) -> RelayService:
    """Get relay service dependency"""
    return RelayService(giphy)
