"""Shared fixtures for dashboard tests."""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# ── Mock streamlit before any dashboard imports ──────────────────────────────

_mock_st = MagicMock()
_mock_st.cache_data = lambda **kw: (lambda fn: fn)  # passthrough decorator
_mock_st.session_state = {}
sys.modules.setdefault("streamlit", _mock_st)

# Add dashboard to path so `shared` is importable
_dashboard_dir = str(Path(__file__).resolve().parent.parent.parent / "dashboard")
if _dashboard_dir not in sys.path:
    sys.path.insert(0, _dashboard_dir)


# ── Sample data fixtures ─────────────────────────────────────────────────────


def _make_race(
    driver: str = "Jerry Williams",
    date: str = "2024-03-14",
    race_number: int = 1,
    reaction: float | None = 0.100,
    sixty_foot: float | None = 1.300,
    three_thirty: float | None = 4.500,
    et: float | None = 7.800,
    mph: float | None = 165.0,
    opponent: str = "Bye",
    result: str = "Win",
    car_number: str | None = None,
) -> dict:
    return {
        "driver": driver,
        "car_number": car_number if car_number is not None else str(len(driver)),
        "date": date,
        "race_number": race_number,
        "reaction_time": reaction,
        "sixty_foot_time": sixty_foot,
        "three_thirty_foot_time": three_thirty,
        "eighth_mile_et": et,
        "eighth_mile_mph": mph,
        "opponent": opponent,
        "opponent_car_number": "N/A" if opponent == "Bye" else "0",
        "result": result,
    }


def _make_heat(
    winner: str,
    loser: str,
    date: str = "2024-03-14",
    race_number: int = 1,
    winner_metrics: dict | None = None,
    loser_metrics: dict | None = None,
) -> list[dict]:
    """Both lanes of one decided run."""
    return [
        _make_race(
            winner, date, race_number, opponent=loser, result="Win",
            **(winner_metrics or {}),
        ),
        _make_race(
            loser, date, race_number, opponent=winner, result="Loss",
            **(loser_metrics or {}),
        ),
    ]


@pytest.fixture
def sample_races() -> list[dict]:
    """A small season: three drivers across two event dates.

    Jerry Williams: 3 runs, ET 8.0 / 7.5 / 7.8, 2 wins.
    Mike Anderson:  3 runs, 1 win.
    Kavon Tibbs:    2 runs, 1 win, no reaction times recorded.
    """
    return [
        *_make_heat(
            "Jerry Williams", "Mike Anderson", "2024-03-14", 1,
            winner_metrics=dict(reaction=0.050, et=8.0, mph=160.0),
            loser_metrics=dict(reaction=0.200, et=8.4, mph=150.0),
        ),
        *_make_heat(
            "Kavon Tibbs", "Jerry Williams", "2024-03-14", 2,
            winner_metrics=dict(reaction=None, et=7.4, mph=175.0),
            loser_metrics=dict(reaction=0.150, et=7.5, mph=170.0),
        ),
        *_make_heat(
            "Mike Anderson", "Kavon Tibbs", "2024-04-25", 1,
            winner_metrics=dict(reaction=0.120, et=7.9, mph=158.0),
            loser_metrics=dict(reaction=None, et=8.1, mph=155.0),
        ),
        *_make_heat(
            "Jerry Williams", "Mike Anderson", "2024-04-25", 2,
            winner_metrics=dict(reaction=0.080, et=7.8, mph=166.0),
            loser_metrics=dict(reaction=0.110, et=8.2, mph=152.0),
        ),
    ]


@pytest.fixture
def make_race():
    """Factory fixture for creating race dicts."""
    return _make_race


@pytest.fixture
def make_heat():
    """Factory fixture for creating both lanes of a run."""
    return _make_heat
