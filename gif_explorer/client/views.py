"""
ViewModels for the GIF grid and detail panel.

Plain data with display formatting already applied, so any rendering layer
(or a test) can consume the controller state without knowing about MediaItem.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from ..domain.models import Session, Selection
from ..schemas import MediaItem

LOADING_TEXT = "Loading more GIFs..."
EXHAUSTED_TEXT = "No more GIFs to load"
SOURCE_FALLBACK_LABEL = "External Link"


@dataclass
class GridCell:
    """ViewModel for one GIF in the grid."""

    key: str  # id plus position; the same GIF may appear twice
    item_id: str
    title: str
    image_url: Optional[str]
    is_last: bool = False  # carries the scroll sentinel


@dataclass
class GridVM:
    """ViewModel for the header and the grid."""

    cells: List[GridCell] = field(default_factory=list)
    search_input: str = ""
    show_clear: bool = False
    selected_title: Optional[str] = None
    status_text: str = ""


@dataclass
class Action:
    """A link button in the detail panel."""

    label: str
    href: str


@dataclass
class DetailVM:
    """ViewModel for the detail panel."""

    title: str
    preview_url: Optional[str]
    rating: str
    creator: Optional[str] = None
    source_url: Optional[str] = None
    source_label: Optional[str] = None
    uploaded: Optional[str] = None
    trending_since: Optional[str] = None
    actions: List[Action] = field(default_factory=list)


def format_date(value: Optional[str]) -> Optional[str]:
    """Render an upstream timestamp as M/D/YYYY, or return it unchanged"""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return value
    return f"{parsed.month}/{parsed.day}/{parsed.year}"


def status_text(session: Session) -> str:
    """Footer line under the grid"""
    if session.loading:
        return LOADING_TEXT
    if not session.has_more and session.items:
        return EXHAUSTED_TEXT
    return ""


def build_grid(session: Session, selection: Selection, search_input: str = "") -> GridVM:
    """Header and grid cells for the current session"""
    last = len(session.items) - 1
    cells = [
        GridCell(
            key=f"{item.id}-{index}",
            item_id=item.id,
            title=item.title,
            image_url=item.rendition_url("fixed_height"),
            is_last=index == last,
        )
        for index, item in enumerate(session.items)
    ]
    return GridVM(
        cells=cells,
        search_input=search_input,
        show_clear=bool(search_input),
        selected_title=None if selection.is_empty else selection.item.title,
        status_text=status_text(session),
    )


def build_detail(item: MediaItem) -> DetailVM:
    """Detail panel for one item"""
    original = item.rendition_url("original")
    detail = DetailVM(
        title=item.title,
        preview_url=original,
        rating=item.rating.upper(),
        creator=item.username or None,
        uploaded=format_date(item.import_datetime),
    )
    if item.source:
        detail.source_url = item.source
        detail.source_label = item.source_tld or SOURCE_FALLBACK_LABEL
    if item.is_trending:
        detail.trending_since = format_date(item.trending_datetime)

    detail.actions.append(Action("View on Giphy", item.url))
    if original:
        detail.actions.append(Action("Download Original", original))
    return detail


def detail_for(selection: Selection) -> Optional[DetailVM]:
    """Detail panel for the current selection, if any"""
    if selection.is_empty:
        return None
    return build_detail(selection.item)
