"""CSV-backed season repository implementation."""

from __future__ import annotations

import streamlit as st

from dragstats import DragStatsError, DragStatsFileError, RaceRecord, SeasonDataClient

from .base import SeasonDataRepository
from .errors import SeasonDataError
from ..api_logging import log_api_call
from .types import RaceData


def normalize_race(record: RaceRecord) -> RaceData:
    """Convert a RaceRecord model to a RaceData dict with an ISO date string."""
    d = record.model_dump()
    d["date"] = record.date.isoformat()
    d["result"] = record.result.value
    return d  # type: ignore[return-value]


GENERATE_HINT = "Generate a season file with `dragstats-generate --seed 7`."


@st.cache_data(ttl=600)
def _fetch_races(source: str) -> list[RaceData]:
    try:
        with SeasonDataClient() as client:
            return [normalize_race(r) for r in client.load(source)]
    except DragStatsFileError as exc:
        raise SeasonDataError(
            f"Failed to load season data from {source}: {exc}. {GENERATE_HINT}"
        ) from exc
    except DragStatsError as exc:
        raise SeasonDataError(f"Failed to load season data from {source}: {exc}") from exc


class CsvSeasonRepository(SeasonDataRepository):
    """Season data read from a CSV file path or HTTP(S) URL."""

    def __init__(self, source: str) -> None:
        self._source = source

    @log_api_call
    def get_races(self) -> list[RaceData]:
        return _fetch_races(self._source)

    def describe_source(self) -> str:
        return self._source
