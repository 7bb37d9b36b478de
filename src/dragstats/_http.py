"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

import httpx

from dragstats.exceptions import (
    DragStatsAPIError,
    DragStatsConnectionError,
    DragStatsTimeoutError,
)

DEFAULT_TIMEOUT = 30.0


def _handle_response(response: httpx.Response) -> str:
    """Validate response status and return the body as text."""
    if response.status_code >= 400:
        raise DragStatsAPIError(
            status_code=response.status_code,
            message=response.text,
        )
    return response.text


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._client = httpx.Client(
            timeout=timeout,
            follow_redirects=True,
            headers={"Accept": "text/csv, text/plain"},
        )

    def get_text(self, url: str) -> str:
        """Perform a GET request and return the response body."""
        try:
            response = self._client.get(url)
        except httpx.ConnectError as exc:
            raise DragStatsConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise DragStatsTimeoutError(str(exc)) from exc
        return _handle_response(response)

    def close(self) -> None:
        self._client.close()
