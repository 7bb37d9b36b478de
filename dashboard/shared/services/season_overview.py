"""Season dashboard service — headline totals and top-driver charts."""

from __future__ import annotations

from dataclasses import dataclass

from ..api_logging import log_service_call
from ..constants import DRIVER_LEADERBOARD_SIZE
from ..data.base import SeasonDataRepository
from ..data.types import RaceData
from .analysis import DatePerformance, performance_by_date
from .common import LeaderboardEntry, MetricAverage, average_metric
from .leaderboards import average_metric_leaderboard, win_rate_leaderboard


@dataclass(frozen=True)
class SeasonTotals:
    total_races: int
    unique_drivers: int
    average_mph: MetricAverage
    average_et: MetricAverage


class SeasonOverviewService:
    """Encapsulates the business logic behind the season dashboard page."""

    def __init__(self, repo: SeasonDataRepository) -> None:
        self._repo = repo

    @log_service_call
    def load_races(self) -> list[RaceData]:
        return self._repo.get_races()

    @log_service_call
    def compute_totals(self, races: list[RaceData]) -> SeasonTotals:
        """Headline KPIs; averages skip unrecorded runs."""
        return SeasonTotals(
            total_races=len(races),
            unique_drivers=len({race["driver"] for race in races}),
            average_mph=average_metric(races, "eighth_mile_mph"),
            average_et=average_metric(races, "eighth_mile_et"),
        )

    @log_service_call
    def win_rate_chart(
        self, races: list[RaceData], limit: int = DRIVER_LEADERBOARD_SIZE,
    ) -> list[LeaderboardEntry]:
        return win_rate_leaderboard(races, limit=limit)

    @log_service_call
    def reaction_chart(
        self, races: list[RaceData], limit: int = DRIVER_LEADERBOARD_SIZE,
    ) -> list[LeaderboardEntry]:
        return average_metric_leaderboard(races, "reaction_time", limit=limit)

    @log_service_call
    def speed_chart(
        self, races: list[RaceData], limit: int = DRIVER_LEADERBOARD_SIZE,
    ) -> list[LeaderboardEntry]:
        return average_metric_leaderboard(races, "eighth_mile_mph", limit=limit)

    @log_service_call
    def performance_by_date(self, races: list[RaceData]) -> list[DatePerformance]:
        return performance_by_date(races)
