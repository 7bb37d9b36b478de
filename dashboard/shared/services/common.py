"""Shared pure functions for the service layer (no Streamlit dependency).

Every timing or speed value that is absent, zero or negative counts as
"not recorded" and is dropped before any sum, mean, min, max or deviation.
"""

from __future__ import annotations

import statistics
from collections.abc import Callable, Hashable, Iterable, Sequence
from dataclasses import dataclass
from typing import TypeVar

from ..constants import RACE_NUMBER_CAP

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")

TIME_FIELDS: tuple[str, ...] = (
    "reaction_time",
    "sixty_foot_time",
    "three_thirty_foot_time",
    "eighth_mile_et",
)
SPEED_FIELDS: tuple[str, ...] = ("eighth_mile_mph",)
METRIC_FIELDS: tuple[str, ...] = TIME_FIELDS + SPEED_FIELDS

METRIC_LABELS: dict[str, str] = {
    "reaction_time": "Reaction",
    "sixty_foot_time": "60ft",
    "three_thirty_foot_time": "330ft",
    "eighth_mile_et": "1/8 ET",
    "eighth_mile_mph": "1/8 MPH",
}

WIN = "Win"
LOSS = "Loss"


@dataclass(frozen=True)
class MetricAverage:
    value: float
    samples: int

    @property
    def has_data(self) -> bool:
        return self.samples > 0


@dataclass(frozen=True)
class MetricSummary:
    samples: int
    mean: float
    minimum: float
    maximum: float
    std_dev: float


@dataclass(frozen=True)
class LeaderboardEntry:
    rank: int
    driver: str
    car_number: str
    value: float
    date: str | None = None
    opponent: str | None = None
    samples: int | None = None


@dataclass(frozen=True)
class DriverTally:
    driver: str
    car_number: str
    races: int
    wins: int
    losses: int

    @property
    def win_rate(self) -> float:
        return safe_percentage(self.wins, self.races)


# ── Metric catalogue ─────────────────────────────────────────────────────────


def lower_is_better(field: str) -> bool:
    """Return True for time metrics, False for speed metrics."""
    if field in TIME_FIELDS:
        return True
    if field in SPEED_FIELDS:
        return False
    raise ValueError(f"Unknown metric field: {field!r}")


def round_time(value: float) -> float:
    return round(value, 3)


def round_speed(value: float) -> float:
    return round(value, 2)


def round_percent(value: float) -> float:
    return round(value, 1)


def round_metric(field: str, value: float) -> float:
    """Round *value* at the display precision for *field*."""
    return round_time(value) if lower_is_better(field) else round_speed(value)


def safe_percentage(part: float, whole: float) -> float:
    """Return part / whole as a percentage, or 0.0 when *whole* is zero."""
    if not whole:
        return 0.0
    return part / whole * 100


# ── Filtering & grouping ────────────────────────────────────────────────────


def metric_value(race: dict, field: str) -> float | None:
    """Return the recorded value of *field*, or None when missing."""
    value = race.get(field)
    # `not > 0` also rejects NaN
    if value is None or not value > 0:
        return None
    return float(value)


def metric_values(races: Iterable[dict], field: str) -> list[float]:
    """Return recorded values of *field* in input order."""
    values = []
    for race in races:
        value = metric_value(race, field)
        if value is not None:
            values.append(value)
    return values


def group_races(races: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    """Group items by *key*, preserving first-appearance order of keys."""
    groups: dict[K, list[T]] = {}
    for race in races:
        groups.setdefault(key(race), []).append(race)
    return groups


def driver_key(race: dict) -> str:
    return race["driver"]


def date_key(race: dict) -> str:
    return race["date"]


def heat_key(race: dict) -> tuple[str, int]:
    """Key pairing both lanes of one run: (date, race number)."""
    return race["date"], race["race_number"]


def capped_race_number(race: dict, cap: int = RACE_NUMBER_CAP) -> int:
    return min(cap, race.get("race_number") or 0)


# ── Reducers ─────────────────────────────────────────────────────────────────


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean, or 0.0 for an empty sequence."""
    return statistics.mean(values) if values else 0.0


def population_std_dev(values: Sequence[float]) -> float:
    """Standard deviation dividing by N, or 0.0 for an empty sequence."""
    return statistics.pstdev(values) if values else 0.0


def best_value(values: Sequence[float], field: str) -> float:
    """Return min for time metrics, max for speed, or 0.0 if empty."""
    if not values:
        return 0.0
    return min(values) if lower_is_better(field) else max(values)


def summarise_metric(values: Sequence[float]) -> MetricSummary:
    """Summarise already-filtered values; empty input gives all zeros."""
    if not values:
        return MetricSummary(samples=0, mean=0.0, minimum=0.0, maximum=0.0, std_dev=0.0)
    return MetricSummary(
        samples=len(values),
        mean=statistics.mean(values),
        minimum=min(values),
        maximum=max(values),
        std_dev=statistics.pstdev(values),
    )


def filtered_mean(races: Iterable[dict], field: str) -> MetricAverage:
    """Unrounded mean of the recorded values of *field*."""
    values = metric_values(races, field)
    return MetricAverage(value=mean(values), samples=len(values))


def average_metric(races: Iterable[dict], field: str) -> MetricAverage:
    """Mean of *field* rounded at its display precision."""
    avg = filtered_mean(races, field)
    return MetricAverage(value=round_metric(field, avg.value), samples=avg.samples)


def count_results(races: Iterable[dict]) -> tuple[int, int]:
    """Return (wins, losses); TBD results count as neither."""
    wins = losses = 0
    for race in races:
        if race.get("result") == WIN:
            wins += 1
        elif race.get("result") == LOSS:
            losses += 1
    return wins, losses


def tally_drivers(races: Iterable[dict]) -> list[DriverTally]:
    """Per-driver race/win/loss counts in first-appearance order."""
    tallies = []
    for driver, driver_races in group_races(races, driver_key).items():
        wins, losses = count_results(driver_races)
        tallies.append(DriverTally(
            driver=driver,
            car_number=driver_races[0].get("car_number", ""),
            races=len(driver_races),
            wins=wins,
            losses=losses,
        ))
    return tallies


def rank_entries(
    items: Iterable[T],
    key: Callable[[T], float],
    descending: bool,
    limit: int | None,
) -> list[T]:
    """Stable sort by *key*; equal keys keep their input order."""
    ranked = sorted(items, key=key, reverse=descending)
    return ranked if limit is None else ranked[:limit]
