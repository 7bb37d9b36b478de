"""Data layer — repository factory and re-exports."""

from __future__ import annotations

from .base import SeasonDataRepository
from .csv_repo import CsvSeasonRepository, normalize_race
from .errors import SeasonDataError
from .source import get_active_source, get_default_source, set_active_source
from .types import RaceData


def get_repository(source: str | None = None) -> SeasonDataRepository:
    """Return a repository for *source*, or for the session's active source."""
    return CsvSeasonRepository(source or get_active_source())


__all__ = [
    "CsvSeasonRepository",
    "RaceData",
    "SeasonDataError",
    "SeasonDataRepository",
    "get_active_source",
    "get_default_source",
    "get_repository",
    "normalize_race",
    "set_active_source",
]
