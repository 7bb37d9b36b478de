"""Service layer — season aggregation engine for the drag-racing dashboard."""

from .analysis import (
    CorrelationPoint,
    DatePerformance,
    HeatMapCell,
    RaceCount,
    RaceNumberPerformance,
    WinFactor,
    WinFactorAnalysis,
    correlation_points,
    et_heat_map,
    performance_by_date,
    performance_by_race_number,
    race_count_by_date,
    win_factor_analysis,
)
from .common import (
    LeaderboardEntry,
    MetricAverage,
    filtered_mean,
    group_races,
    metric_value,
    metric_values,
    population_std_dev,
)
from .driver_profile import (
    DriverProfile,
    DriverProfileService,
    NoDriverData,
    RadarProfile,
    build_profile,
    compute_radar_profiles,
)
from .leaderboards import (
    ImprovementEntry,
    average_metric_leaderboard,
    consistency_ranking,
    improvement_ranking,
    most_wins_leaderboard,
    record_leaderboard,
    win_rate_leaderboard,
)
from .league_stats import LeagueStatisticsService
from .season_overview import SeasonOverviewService, SeasonTotals

__all__ = [
    "CorrelationPoint",
    "DatePerformance",
    "DriverProfile",
    "DriverProfileService",
    "HeatMapCell",
    "ImprovementEntry",
    "LeaderboardEntry",
    "LeagueStatisticsService",
    "MetricAverage",
    "NoDriverData",
    "RaceCount",
    "RaceNumberPerformance",
    "RadarProfile",
    "SeasonOverviewService",
    "SeasonTotals",
    "WinFactor",
    "WinFactorAnalysis",
    "average_metric_leaderboard",
    "build_profile",
    "compute_radar_profiles",
    "consistency_ranking",
    "correlation_points",
    "et_heat_map",
    "filtered_mean",
    "group_races",
    "improvement_ranking",
    "metric_value",
    "metric_values",
    "most_wins_leaderboard",
    "performance_by_date",
    "performance_by_race_number",
    "population_std_dev",
    "race_count_by_date",
    "record_leaderboard",
    "win_factor_analysis",
    "win_rate_leaderboard",
]
