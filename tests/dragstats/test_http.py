"""Tests for the HTTP transport layer."""

from __future__ import annotations

import httpx
import pytest
import respx

from dragstats._http import SyncTransport
from dragstats.exceptions import (
    DragStatsAPIError,
    DragStatsConnectionError,
    DragStatsTimeoutError,
)
from tests.conftest import SAMPLE_CSV, SEASON_URL


class TestSyncTransport:
    @respx.mock
    def test_get_text_success(self) -> None:
        respx.get(SEASON_URL).mock(return_value=httpx.Response(200, text=SAMPLE_CSV))
        transport = SyncTransport()
        assert transport.get_text(SEASON_URL) == SAMPLE_CSV
        transport.close()

    @respx.mock
    def test_follows_redirect(self) -> None:
        respx.get("https://example.com/old.csv").mock(
            return_value=httpx.Response(302, headers={"Location": SEASON_URL})
        )
        respx.get(SEASON_URL).mock(return_value=httpx.Response(200, text="ok"))
        transport = SyncTransport()
        assert transport.get_text("https://example.com/old.csv") == "ok"
        transport.close()

    @respx.mock
    def test_get_404(self) -> None:
        respx.get(SEASON_URL).mock(return_value=httpx.Response(404, text="Not Found"))
        transport = SyncTransport()
        with pytest.raises(DragStatsAPIError) as exc_info:
            transport.get_text(SEASON_URL)
        assert exc_info.value.status_code == 404
        assert str(exc_info.value) == "HTTP 404: Not Found"
        transport.close()

    @respx.mock
    def test_get_500(self) -> None:
        respx.get(SEASON_URL).mock(
            return_value=httpx.Response(500, text="Internal Server Error")
        )
        transport = SyncTransport()
        with pytest.raises(DragStatsAPIError) as exc_info:
            transport.get_text(SEASON_URL)
        assert exc_info.value.status_code == 500
        transport.close()

    @respx.mock
    def test_connection_error(self) -> None:
        respx.get(SEASON_URL).mock(side_effect=httpx.ConnectError("fail"))
        transport = SyncTransport()
        with pytest.raises(DragStatsConnectionError):
            transport.get_text(SEASON_URL)
        transport.close()

    @respx.mock
    def test_timeout_error(self) -> None:
        respx.get(SEASON_URL).mock(side_effect=httpx.ReadTimeout("timeout"))
        transport = SyncTransport()
        with pytest.raises(DragStatsTimeoutError):
            transport.get_text(SEASON_URL)
        transport.close()
