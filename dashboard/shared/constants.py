"""Shared constants for the drag-racing dashboard."""

from __future__ import annotations

SEASON_TITLE = "Big Dog Automotive 2024 Season"

# Chart palette (dark theme)
CHART_COLORS: list[str] = [
    "#FF5F5F",  # red
    "#38B6FF",  # blue
    "#5EFF5E",  # green
    "#FFDE59",  # yellow
    "#FF66C4",  # pink
    "#9D66FF",  # purple
    "#FF914D",  # orange
    "#87CEEB",  # sky
]

WIN_COLOR = "#5EFF5E"
LOSS_COLOR = "#FF5F5F"
ACCENT_COLOR = "#9D66FF"
GRID_COLOR = "#3F3F5A"

PLOTLY_LAYOUT_DEFAULTS = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font_color="#E4E4E7",
    margin=dict(l=40, r=20, t=40, b=40),
)

# Leaderboard sizes
RECORD_LEADERBOARD_SIZE = 10
DRIVER_LEADERBOARD_SIZE = 6
STATISTICS_BOARD_SIZE = 10

# Minimum samples before a driver is ranked
MIN_RACES_FOR_WIN_RATE = 3
MIN_SAMPLES_FOR_CONSISTENCY = 3
MIN_SAMPLES_FOR_IMPROVEMENT = 4

# Race numbers above this are folded into the last bucket
RACE_NUMBER_CAP = 10

# Readings at or below this are treated as timing glitches on the reaction board
REACTION_FALSE_READING = 0.001

# Scatter marker size when trap speed is missing
DEFAULT_POINT_SIZE = 100.0

# Radar score when every driver shares the same average
RADAR_MIDPOINT = 50.0
