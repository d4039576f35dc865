"""
Pure transitions over the browsing Session

Every function returns a new Session; nothing here performs I/O.
"""
from dataclasses import replace
from typing import Optional, Sequence

from ..domain.models import BrowseMode, Session, PAGE_SIZE
from ..schemas import MediaItem


def start_query(session: Session, query: str) -> Session:
    """Reset to page 0 for a settled query (empty or blank means trending)"""
    mode = BrowseMode.SEARCH if query.strip() else BrowseMode.TRENDING
    return replace(
        session,
        mode=mode,
        query=query,
        offset=0,
        items=(),
        loading=True,
        generation=session.generation + 1,
    )


def clear_search(session: Session) -> Session:
    """Drop the query and go back to trending from page 0"""
    return replace(
        session,
        mode=BrowseMode.TRENDING,
        query="",
        offset=0,
        items=(),
        loading=True,
        generation=session.generation + 1,
    )


def request_next_page(session: Session, page_size: int = PAGE_SIZE) -> Optional[Session]:
    """
    Advance the cursor by one page

    Returns:
        The loading session for the next offset, or None if another page
        must not be requested (nothing more, or a fetch is in flight)
    """
    if not session.has_more or session.loading:
        return None
    return replace(session, offset=session.offset + page_size, loading=True)


def apply_page(
    session: Session,
    page: Sequence[MediaItem],
    offset: int,
    page_size: int = PAGE_SIZE,
) -> Session:
    """Replace (offset 0) or extend the list with a fetched page"""
    if offset == 0:
        items = tuple(page)
    else:
        items = session.items + tuple(page)
    return replace(
        session,
        items=items,
        has_more=len(page) == page_size,
        loading=False,
    )


def apply_failure(session: Session) -> Session:
    """A failed fetch only stops loading; has_more keeps its last value"""
    return replace(session, loading=False)


def is_current(session: Session, generation: int) -> bool:
    """Whether a response issued under ``generation`` still belongs here"""
    return session.generation == generation
