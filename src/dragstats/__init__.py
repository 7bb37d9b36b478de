"""dragstats — typed season data layer for bracket drag racing."""

from dragstats._csv import CSV_COLUMNS, parse_season_csv, render_season_csv
from dragstats.client import SeasonDataClient, is_remote_source
from dragstats.exceptions import (
    DragStatsAPIError,
    DragStatsConnectionError,
    DragStatsError,
    DragStatsFileError,
    DragStatsTimeoutError,
    DragStatsValidationError,
)
from dragstats.models import RaceRecord, RaceResult

__all__ = [
    "CSV_COLUMNS",
    "DragStatsAPIError",
    "DragStatsConnectionError",
    "DragStatsError",
    "DragStatsFileError",
    "DragStatsTimeoutError",
    "DragStatsValidationError",
    "RaceRecord",
    "RaceResult",
    "SeasonDataClient",
    "is_remote_source",
    "parse_season_csv",
    "render_season_csv",
]

__version__ = "0.1.0"
