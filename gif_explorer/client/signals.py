"""
Synchronous signals the controller subscribes to
"""
from typing import Callable, List
import logging

logger = logging.getLogger(__name__)


class Signal:
    """Observer list; a failing subscriber is logged and does not stop the others"""

    def __init__(self, name: str = "Signal"):
        self.name = name
        self._subscribers: List[Callable] = []

    def connect(self, callback: Callable):
        """Connect a callback to this signal"""
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def disconnect(self, callback: Callable):
        """Disconnect a callback from this signal"""
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def emit(self, *args, **kwargs):
        """Call every subscriber with the given arguments"""
        for subscriber in list(self._subscribers):
            try:
                subscriber(*args, **kwargs)
            except Exception:
                logger.exception(f"Signal '{self.name}' subscriber {subscriber!r} failed")


class ScrollSentinel(Signal):
    """
    Stand-in for the element after the last grid cell

    The rendering layer calls ``notify`` whenever the sentinel's visibility
    changes; subscribers receive ``intersecting`` as a bool.
    """

    def __init__(self):
        super().__init__("scroll_sentinel")

    def notify(self, intersecting: bool = True):
        self.emit(intersecting)
