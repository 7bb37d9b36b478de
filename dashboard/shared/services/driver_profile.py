"""Single-driver profile service — rollup, trend, opponents and radar scores."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from ..api_logging import log_service_call
from ..constants import RADAR_MIDPOINT
from ..data.base import SeasonDataRepository
from ..data.types import RaceData
from .common import (
    LOSS,
    METRIC_FIELDS,
    METRIC_LABELS,
    WIN,
    MetricAverage,
    best_value,
    count_results,
    date_key,
    driver_key,
    filtered_mean,
    group_races,
    lower_is_better,
    metric_values,
    round_metric,
    round_percent,
    safe_percentage,
    summarise_metric,
)


@dataclass(frozen=True)
class MetricRollup:
    field: str
    label: str
    average: float
    best: float
    samples: int


@dataclass(frozen=True)
class TrendPoint:
    date: str
    best_et: float | None
    best_mph: float | None
    best_reaction: float | None
    races: int
    wins: int


@dataclass(frozen=True)
class OpponentRecord:
    opponent: str
    races: int
    wins: int
    losses: int
    win_rate: float


@dataclass(frozen=True)
class DriverProfile:
    driver: str
    car_number: str
    races: int
    wins: int
    losses: int
    win_rate: float
    metrics: tuple[MetricRollup, ...]
    history: tuple[RaceData, ...]
    trend: tuple[TrendPoint, ...]
    opponents: tuple[OpponentRecord, ...]

    def metric(self, field: str) -> MetricRollup:
        for rollup in self.metrics:
            if rollup.field == field:
                return rollup
        raise KeyError(field)


@dataclass(frozen=True)
class NoDriverData:
    """Returned instead of a profile when the driver has no races."""

    driver: str


@dataclass(frozen=True)
class RadarScore:
    metric: str
    value: float


@dataclass(frozen=True)
class RadarProfile:
    driver: str
    scores: tuple[RadarScore, ...]


# ── Pure helpers ─────────────────────────────────────────────────────────────


def list_drivers(races: Sequence[dict]) -> list[str]:
    """Unique driver names, alphabetical."""
    return sorted({race["driver"] for race in races})


def summarise_driver_metrics(driver_races: Sequence[dict]) -> tuple[MetricRollup, ...]:
    """Average and best of each core metric, each with its sample count."""
    rollups = []
    for field in METRIC_FIELDS:
        summary = summarise_metric(metric_values(driver_races, field))
        best = summary.minimum if lower_is_better(field) else summary.maximum
        rollups.append(MetricRollup(
            field=field,
            label=METRIC_LABELS[field],
            average=round_metric(field, summary.mean),
            best=round_metric(field, best),
            samples=summary.samples,
        ))
    return tuple(rollups)


def _best_of_day(day_races: Sequence[dict], field: str) -> float | None:
    values = metric_values(day_races, field)
    if not values:
        return None
    return round_metric(field, best_value(values, field))


def performance_trend(driver_races: Sequence[dict]) -> list[TrendPoint]:
    """Best-of-day ET, MPH and reaction per event date, chronological."""
    points = []
    for event_date, day_races in sorted(group_races(driver_races, date_key).items()):
        wins, _ = count_results(day_races)
        points.append(TrendPoint(
            date=event_date,
            best_et=_best_of_day(day_races, "eighth_mile_et"),
            best_mph=_best_of_day(day_races, "eighth_mile_mph"),
            best_reaction=_best_of_day(day_races, "reaction_time"),
            races=len(day_races),
            wins=wins,
        ))
    return points


def opponent_breakdown(driver_races: Sequence[dict]) -> list[OpponentRecord]:
    """Win/loss record per opponent, most-raced first (ties keep first meeting order)."""
    rows = []
    for opponent, meetings in group_races(driver_races, lambda r: r.get("opponent", "")).items():
        wins = sum(1 for r in meetings if r.get("result") == WIN)
        losses = sum(1 for r in meetings if r.get("result") == LOSS)
        rows.append(OpponentRecord(
            opponent=opponent,
            races=len(meetings),
            wins=wins,
            losses=losses,
            win_rate=round_percent(safe_percentage(wins, len(meetings))),
        ))
    return sorted(rows, key=lambda row: row.races, reverse=True)


def race_history(driver_races: Sequence[dict]) -> list[dict]:
    """Runs newest first: by date, then race number, descending."""
    return sorted(
        driver_races,
        key=lambda r: (r["date"], r.get("race_number") or 0),
        reverse=True,
    )


def build_profile(races: Sequence[dict], driver: str) -> DriverProfile | NoDriverData:
    """Roll up every run of *driver*; NoDriverData when there are none."""
    driver_races = [race for race in races if race["driver"] == driver]
    if not driver_races:
        return NoDriverData(driver=driver)

    wins, losses = count_results(driver_races)
    return DriverProfile(
        driver=driver,
        car_number=driver_races[0].get("car_number", ""),
        races=len(driver_races),
        wins=wins,
        losses=losses,
        win_rate=round_percent(safe_percentage(wins, len(driver_races))),
        metrics=summarise_driver_metrics(driver_races),
        history=tuple(race_history(driver_races)),  # type: ignore[arg-type]
        trend=tuple(performance_trend(driver_races)),
        opponents=tuple(opponent_breakdown(driver_races)),
    )


def _normalise(avg: MetricAverage, low: float, high: float, field: str) -> float:
    if not avg.has_data:
        return 0.0
    if math.isclose(low, high, rel_tol=0.0, abs_tol=1e-12):
        return RADAR_MIDPOINT
    score = (avg.value - low) / (high - low) * 100
    return 100 - score if lower_is_better(field) else score


def compute_radar_profiles(races: Sequence[dict]) -> list[RadarProfile]:
    """Score every driver 0-100 on each metric relative to the field.

    Each axis maps the driver's mean between the lowest and highest driver
    means; time axes are inverted so that 100 is always best. Win rate is
    already a percentage and passes through.
    """
    by_driver = group_races(races, driver_key)
    means = {
        driver: {field: filtered_mean(driver_races, field) for field in METRIC_FIELDS}
        for driver, driver_races in by_driver.items()
    }

    ranges: dict[str, tuple[float, float]] = {}
    for field in METRIC_FIELDS:
        values = [m[field].value for m in means.values() if m[field].has_data]
        ranges[field] = (min(values), max(values)) if values else (0.0, 0.0)

    profiles = []
    for driver, driver_races in by_driver.items():
        scores = [
            RadarScore(
                metric=METRIC_LABELS[field],
                value=round_percent(_normalise(means[driver][field], *ranges[field], field)),
            )
            for field in METRIC_FIELDS
        ]
        wins, _ = count_results(driver_races)
        scores.append(RadarScore(
            metric="Win Rate",
            value=round_percent(safe_percentage(wins, len(driver_races))),
        ))
        profiles.append(RadarProfile(driver=driver, scores=tuple(scores)))
    return profiles


# ── Service ──────────────────────────────────────────────────────────────────


class DriverProfileService:
    """Encapsulates all business logic for the per-driver view."""

    def __init__(self, repo: SeasonDataRepository) -> None:
        self._repo = repo

    @log_service_call
    def load_races(self) -> list[RaceData]:
        return self._repo.get_races()

    @log_service_call
    def list_drivers(self, races: list[RaceData]) -> list[str]:
        return list_drivers(races)

    @log_service_call
    def build_profile(self, races: list[RaceData], driver: str) -> DriverProfile | NoDriverData:
        """Recompute the rollup for *driver*; call again when the selection changes."""
        return build_profile(races, driver)

    @log_service_call
    def radar_profile(self, races: list[RaceData], driver: str) -> RadarProfile | None:
        """Normalised radar scores for *driver*, or None if they never raced."""
        for profile in compute_radar_profiles(races):
            if profile.driver == driver:
                return profile
        return None
