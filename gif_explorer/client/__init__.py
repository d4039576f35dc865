"""
Browser-side session controller for the GIF Explorer relay
"""
from .controller import SessionController
from .debounce import Debouncer
from .relay_client import RelayClient, RelayClientError
from .signals import ScrollSentinel

__all__ = [
    "SessionController",
    "Debouncer",
    "RelayClient",
    "RelayClientError",
    "ScrollSentinel",
]
