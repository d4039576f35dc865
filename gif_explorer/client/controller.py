"""
Session controller - drives the GIF grid from search input and scrolling
"""
import asyncio
from typing import Optional, Set
import logging

from ..config import settings
from ..domain.models import BrowseMode, Session, Selection, PAGE_SIZE
from ..schemas import MediaItem
from .debounce import Debouncer
from .relay_client import RelayClient, RelayClientError
from .session import (
    apply_failure,
    apply_page,
    clear_search,
    is_current,
    request_next_page,
    start_query,
)
from .signals import ScrollSentinel, Signal

logger = logging.getLogger(__name__)


class SessionController:
    """
    Owns the browsing Session and the Selection

    All methods must be called from the event loop thread. Fetches run as
    tasks on that loop; ``join`` waits for the ones in flight.
    """

    def __init__(
        self,
        relay: RelayClient,
        sentinel: Optional[ScrollSentinel] = None,
        debounce_seconds: Optional[float] = None,
        page_size: int = PAGE_SIZE,
    ):
        self.relay = relay
        self.page_size = page_size
        self.session = Session()
        self.selection = Selection()
        self.search_input = ""
        self.changed = Signal("session_changed")

        if debounce_seconds is None:
            debounce_seconds = settings.SEARCH_DEBOUNCE_SECONDS
        self._debouncer = Debouncer(debounce_seconds, self._settle_query)

        self.sentinel = sentinel or ScrollSentinel()
        self.sentinel.connect(self._on_sentinel)

        self._tasks: Set[asyncio.Task] = set()

    # Input

    def start(self) -> asyncio.Task:
        """Load the first trending page"""
        return self._reset(start_query(self.session, ""))

    def set_query(self, text: str):
        """Record raw search input; the fetch happens once typing settles"""
        self.search_input = text
        self._debouncer.schedule(text)

    def clear(self) -> asyncio.Task:
        """Drop the query and reload trending from page 0"""
        self.search_input = ""
        self._debouncer.cancel()
        return self._reset(clear_search(self.session))

    def load_more(self) -> Optional[asyncio.Task]:
        """
        Fetch the next page for the current mode and query

        Returns:
            The fetch task, or None when there is nothing more to load or a
            fetch is already running
        """
        advanced = request_next_page(self.session, self.page_size)
        if advanced is None:
            return None
        self._set(advanced)
        return self._spawn(advanced)

    def select(self, item: MediaItem):
        self.selection = Selection(item)
        self.changed.emit(self)

    def deselect(self):
        self.selection = Selection()
        self.changed.emit(self)

    # Lifecycle

    async def join(self):
        """Wait until no fetch is in flight"""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def close(self):
        """Cancel pending work and close the relay client"""
        self._debouncer.cancel()
        self.sentinel.disconnect(self._on_sentinel)
        for task in list(self._tasks):
            task.cancel()
        await asyncio.gather(*list(self._tasks), return_exceptions=True)
        await self.relay.stop()

    # Internals

    def _settle_query(self, query: str):
        if query == self.session.query:
            return
        self._reset(start_query(self.session, query))

    def _on_sentinel(self, intersecting: bool):
        if intersecting:
            self.load_more()

    def _reset(self, session: Session) -> asyncio.Task:
        self._set(session)
        return self._spawn(session)

    def _set(self, session: Session):
        self.session = session
        self.changed.emit(self)

    def _spawn(self, session: Session) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(
            self._fetch(session.mode, session.query, session.offset, session.generation)
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _fetch(self, mode: BrowseMode, query: str, offset: int, generation: int):
        try:
            if mode == BrowseMode.SEARCH:
                page = await self.relay.search(query, offset=offset, limit=self.page_size)
            else:
                page = await self.relay.trending(offset=offset, limit=self.page_size)
        except RelayClientError as e:
            logger.error(f"Error fetching GIFs: {e}")
            self._fail(generation)
            return
        except Exception:
            logger.exception("Unexpected error fetching GIFs")
            self._fail(generation)
            return

        if not is_current(self.session, generation):
            logger.debug(f"Dropping stale {mode.value} page at offset {offset}")
            return

        self._set(apply_page(self.session, page, offset, self.page_size))

    def _fail(self, generation: int):
        if is_current(self.session, generation):
            self._set(apply_failure(self.session))
