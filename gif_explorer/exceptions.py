"""
Relay exceptions rendered as ``{"error": message}`` payloads
"""
from fastapi import status
from typing import Optional


class RelayError(Exception):
    """Base error carrying the HTTP status and the client-facing message"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidRequest(RelayError):
    """Request rejected before any upstream call"""

    status_code = status.HTTP_400_BAD_REQUEST


class UpstreamFailure(RelayError):
    """Any network error or non-2xx answer from the media API"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
