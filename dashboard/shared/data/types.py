"""Data contracts for the dashboard data layer."""

from __future__ import annotations

from typing import TypedDict


class RaceData(TypedDict):
    driver: str
    car_number: str
    date: str  # ISO 8601 calendar date
    race_number: int
    reaction_time: float | None
    sixty_foot_time: float | None
    three_thirty_foot_time: float | None
    eighth_mile_et: float | None
    eighth_mile_mph: float | None
    opponent: str
    opponent_car_number: str
    result: str  # "Win", "Loss" or "TBD"
