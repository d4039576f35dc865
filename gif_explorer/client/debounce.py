"""
Debounced scheduling on the running asyncio loop
"""
import asyncio
from typing import Any, Callable, Optional


class Debouncer:
    """
    Runs ``callback`` once input has been quiet for ``delay`` seconds

    Each ``schedule`` call cancels the pending call, so only the last value
    scheduled within the window reaches the callback.
    """

    def __init__(self, delay: float, callback: Callable[[Any], Any]):
        self.delay = delay
        self.callback = callback
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self, value: Any):
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire, value)

    def cancel(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, value: Any):
        self._handle = None
        self.callback(value)
