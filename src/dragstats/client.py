"""Public client for loading season race data."""

from __future__ import annotations

from pathlib import Path

from dragstats._csv import parse_season_csv
from dragstats._http import DEFAULT_TIMEOUT, SyncTransport
from dragstats.exceptions import DragStatsFileError
from dragstats.models.race import RaceRecord

_REMOTE_SCHEMES = ("http://", "https://")


def is_remote_source(source: str | Path) -> bool:
    """Return True if *source* is an HTTP(S) URL rather than a file path."""
    return isinstance(source, str) and source.lower().startswith(_REMOTE_SCHEMES)


class SeasonDataClient:
    """Loads a season CSV from a local path or an HTTP(S) URL.

    Usage:
        with SeasonDataClient() as client:
            races = client.load("data/drag_racing_season_data.csv")
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._transport = SyncTransport(timeout=timeout)

    def __enter__(self) -> SeasonDataClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    def read_text(self, source: str | Path) -> str:
        """Return the raw CSV text behind *source*."""
        if is_remote_source(source):
            return self._transport.get_text(str(source))
        path = Path(source)
        try:
            return path.read_text(encoding="utf-8-sig")
        except OSError as exc:
            raise DragStatsFileError(f"Cannot read season file {path}: {exc}") from exc

    def load(self, source: str | Path) -> list[RaceRecord]:
        """Load and validate every race record from *source*."""
        return parse_season_csv(self.read_text(source))
