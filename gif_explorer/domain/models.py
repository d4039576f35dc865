"""
Domain models - Browsing session state
"""
from dataclasses import dataclass
from typing import Optional, Tuple
from enum import Enum

from ..config import settings
from ..schemas import MediaItem

PAGE_SIZE = settings.DEFAULT_PAGE_SIZE


class BrowseMode(str, Enum):
    """What the result list is showing"""
    TRENDING = "trending"
    SEARCH = "search"


@dataclass(frozen=True)
class Session:
    """
    Accumulated state of one browsing/search context

    ``generation`` identifies the context: it changes whenever the list is
    reset, so responses to requests issued under an older generation can be
    recognised and dropped.
    """
    mode: BrowseMode = BrowseMode.TRENDING
    query: str = ""
    offset: int = 0
    items: Tuple[MediaItem, ...] = ()
    has_more: bool = True
    loading: bool = False
    generation: int = 0

    @property
    def endpoint(self) -> str:
        """Relay endpoint serving the current mode"""
        return "search" if self.mode == BrowseMode.SEARCH else "trending"


@dataclass(frozen=True)
class Selection:
    """At most one item picked for the detail view"""
    item: Optional[MediaItem] = None

    @property
    def is_empty(self) -> bool:
        return self.item is None
