"""Custom exceptions for the dragstats data layer."""

from __future__ import annotations


class DragStatsError(Exception):
    """Base exception for all dragstats errors."""


class DragStatsConnectionError(DragStatsError):
    """Raised when a remote season file cannot be reached."""


class DragStatsTimeoutError(DragStatsError):
    """Raised when fetching a remote season file times out."""


class DragStatsAPIError(DragStatsError):
    """Raised when the remote server returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class DragStatsFileError(DragStatsError):
    """Raised when a local season file is missing or unreadable."""


class DragStatsValidationError(DragStatsError):
    """Raised when season data fails CSV or model validation."""
