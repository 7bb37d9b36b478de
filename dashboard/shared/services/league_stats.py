"""League-wide statistics service — leaderboards and advanced analyses."""

from __future__ import annotations

from dataclasses import dataclass

from ..api_logging import log_service_call
from ..constants import REACTION_FALSE_READING, STATISTICS_BOARD_SIZE
from ..data.base import SeasonDataRepository
from ..data.types import RaceData
from .analysis import (
    CorrelationPoint,
    HeatMapCell,
    RaceCount,
    RaceNumberPerformance,
    WinFactorAnalysis,
    correlation_points,
    et_heat_map,
    performance_by_race_number,
    race_count_by_date,
    win_factor_analysis,
)
from .common import LeaderboardEntry
from .leaderboards import (
    ImprovementEntry,
    consistency_ranking,
    improvement_ranking,
    most_wins_leaderboard,
    record_leaderboard,
    win_rate_leaderboard,
)


@dataclass(frozen=True)
class LeagueLeaderboards:
    best_et: list[LeaderboardEntry]
    top_speed: list[LeaderboardEntry]
    best_reaction: list[LeaderboardEntry]
    best_sixty_foot: list[LeaderboardEntry]
    most_wins: list[LeaderboardEntry]
    best_win_rate: list[LeaderboardEntry]


@dataclass(frozen=True)
class CorrelationData:
    reaction_vs_et: list[CorrelationPoint]
    sixty_foot_vs_et: list[CorrelationPoint]


@dataclass(frozen=True)
class ImprovementData:
    et: list[ImprovementEntry]
    mph: list[ImprovementEntry]


class LeagueStatisticsService:
    """Encapsulates all business logic for the league statistics page."""

    def __init__(self, repo: SeasonDataRepository) -> None:
        self._repo = repo

    @log_service_call
    def load_races(self) -> list[RaceData]:
        return self._repo.get_races()

    @log_service_call
    def compute_leaderboards(self, races: list[RaceData]) -> LeagueLeaderboards:
        """Top runs per timing metric plus driver win boards."""
        return LeagueLeaderboards(
            best_et=record_leaderboard(races, "eighth_mile_et"),
            top_speed=record_leaderboard(races, "eighth_mile_mph"),
            best_reaction=record_leaderboard(
                races, "reaction_time", floor=REACTION_FALSE_READING,
            ),
            best_sixty_foot=record_leaderboard(races, "sixty_foot_time"),
            most_wins=most_wins_leaderboard(races, limit=STATISTICS_BOARD_SIZE),
            best_win_rate=win_rate_leaderboard(races, limit=STATISTICS_BOARD_SIZE),
        )

    @log_service_call
    def compute_race_counts(self, races: list[RaceData]) -> list[RaceCount]:
        return race_count_by_date(races)

    @log_service_call
    def compute_correlations(self, races: list[RaceData]) -> CorrelationData:
        return CorrelationData(
            reaction_vs_et=correlation_points(races, "reaction_time", "eighth_mile_et"),
            sixty_foot_vs_et=correlation_points(races, "sixty_foot_time", "eighth_mile_et"),
        )

    @log_service_call
    def compute_consistency(self, races: list[RaceData]) -> list[LeaderboardEntry]:
        return consistency_ranking(races, "eighth_mile_et")

    @log_service_call
    def compute_race_number_performance(
        self, races: list[RaceData],
    ) -> list[RaceNumberPerformance]:
        return performance_by_race_number(races)

    @log_service_call
    def compute_heat_map(self, races: list[RaceData]) -> list[HeatMapCell]:
        return et_heat_map(races)

    @log_service_call
    def compute_win_factors(self, races: list[RaceData]) -> WinFactorAnalysis:
        return win_factor_analysis(races)

    @log_service_call
    def compute_improvement(self, races: list[RaceData]) -> ImprovementData:
        return ImprovementData(
            et=improvement_ranking(races, "eighth_mile_et", limit=STATISTICS_BOARD_SIZE),
            mph=improvement_ranking(races, "eighth_mile_mph", limit=STATISTICS_BOARD_SIZE),
        )
