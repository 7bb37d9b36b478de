"""Shared dashboard utilities."""

# --- Constants & formatting ---
from .constants import (
    ACCENT_COLOR,
    CHART_COLORS,
    GRID_COLOR,
    LOSS_COLOR,
    PLOTLY_LAYOUT_DEFAULTS,
    SEASON_TITLE,
    WIN_COLOR,
)
from .formatters import (
    format_delta,
    format_percent,
    format_short_name,
    format_speed,
    format_time,
)

# --- Data layer ---
from .data import SeasonDataError, get_active_source, get_repository

# --- Service layer ---
from .services import (
    DriverProfileService,
    LeagueStatisticsService,
    NoDriverData,
    SeasonOverviewService,
)

# --- UI components ---
from .sidebar import render_source_sidebar

__all__ = [
    "ACCENT_COLOR",
    "CHART_COLORS",
    "DriverProfileService",
    "GRID_COLOR",
    "LOSS_COLOR",
    "LeagueStatisticsService",
    "NoDriverData",
    "PLOTLY_LAYOUT_DEFAULTS",
    "SEASON_TITLE",
    "SeasonDataError",
    "SeasonOverviewService",
    "WIN_COLOR",
    "format_delta",
    "format_percent",
    "format_short_name",
    "format_speed",
    "format_time",
    "get_active_source",
    "get_repository",
    "render_source_sidebar",
]
