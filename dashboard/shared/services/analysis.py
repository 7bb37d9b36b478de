"""Season-wide analyses: time series, correlation pairs and win factors."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..constants import DEFAULT_POINT_SIZE, RACE_NUMBER_CAP
from .common import (
    LOSS,
    WIN,
    MetricAverage,
    average_metric,
    capped_race_number,
    date_key,
    group_races,
    heat_key,
    lower_is_better,
    metric_value,
    round_percent,
    safe_percentage,
)


@dataclass(frozen=True)
class CorrelationPoint:
    x: float
    y: float
    size: float
    driver: str


@dataclass(frozen=True)
class RaceCount:
    date: str
    count: int


@dataclass(frozen=True)
class DatePerformance:
    date: str
    avg_et: MetricAverage
    avg_mph: MetricAverage
    races: int


@dataclass(frozen=True)
class RaceNumberPerformance:
    race_number: int
    avg_et: MetricAverage
    avg_reaction: MetricAverage
    avg_mph: MetricAverage


@dataclass(frozen=True)
class HeatMapCell:
    date: str
    race_number: int
    avg_et: float
    samples: int


@dataclass(frozen=True)
class WinFactor:
    name: str
    field: str
    count: int
    percentage: float


@dataclass(frozen=True)
class WinFactorAnalysis:
    total_comparisons: int
    factors: tuple[WinFactor, ...]

    def percentage(self, field: str) -> float:
        for factor in self.factors:
            if factor.field == field:
                return factor.percentage
        raise KeyError(field)


WIN_FACTOR_FIELDS: tuple[tuple[str, str], ...] = (
    ("Better Reaction", "reaction_time"),
    ("Better 60ft", "sixty_foot_time"),
    ("Better 330ft", "three_thirty_foot_time"),
    ("Higher MPH", "eighth_mile_mph"),
)


def correlation_points(
    races: Sequence[dict],
    x_field: str,
    y_field: str,
    size_field: str = "eighth_mile_mph",
    default_size: float = DEFAULT_POINT_SIZE,
) -> list[CorrelationPoint]:
    """One scatter point per run where both *x_field* and *y_field* are recorded."""
    points = []
    for race in races:
        x = metric_value(race, x_field)
        y = metric_value(race, y_field)
        if x is None or y is None:
            continue
        size = metric_value(race, size_field)
        points.append(CorrelationPoint(
            x=x,
            y=y,
            size=size if size is not None else default_size,
            driver=race["driver"],
        ))
    return points


def race_count_by_date(races: Sequence[dict]) -> list[RaceCount]:
    """Number of records per event date, chronological."""
    return [
        RaceCount(date=event_date, count=len(day_races))
        for event_date, day_races in sorted(group_races(races, date_key).items())
    ]


def performance_by_date(races: Sequence[dict]) -> list[DatePerformance]:
    """Average ET and MPH per event date, chronological."""
    return [
        DatePerformance(
            date=event_date,
            avg_et=average_metric(day_races, "eighth_mile_et"),
            avg_mph=average_metric(day_races, "eighth_mile_mph"),
            races=len(day_races),
        )
        for event_date, day_races in sorted(group_races(races, date_key).items())
    ]


def performance_by_race_number(
    races: Sequence[dict],
    cap: int = RACE_NUMBER_CAP,
) -> list[RaceNumberPerformance]:
    """Averages per race number (a proxy for time of day), capped at *cap*.

    Buckets without a single recorded ET are dropped.
    """
    buckets = group_races(races, lambda race: capped_race_number(race, cap))
    rows = []
    for race_number in sorted(buckets):
        bucket = buckets[race_number]
        avg_et = average_metric(bucket, "eighth_mile_et")
        if not avg_et.has_data:
            continue
        rows.append(RaceNumberPerformance(
            race_number=race_number,
            avg_et=avg_et,
            avg_reaction=average_metric(bucket, "reaction_time"),
            avg_mph=average_metric(bucket, "eighth_mile_mph"),
        ))
    return rows


def et_heat_map(races: Sequence[dict], cap: int = RACE_NUMBER_CAP) -> list[HeatMapCell]:
    """Average ET per (event date, capped race number) cell with data."""
    cells = []
    for event_date, day_races in sorted(group_races(races, date_key).items()):
        buckets = group_races(day_races, lambda race: capped_race_number(race, cap))
        for race_number in sorted(buckets):
            avg = average_metric(buckets[race_number], "eighth_mile_et")
            if avg.has_data:
                cells.append(HeatMapCell(
                    date=event_date, race_number=race_number,
                    avg_et=avg.value, samples=avg.samples,
                ))
    return cells


def _winner_was_better(winner: dict, loser: dict, field: str) -> bool:
    ours = metric_value(winner, field)
    theirs = metric_value(loser, field)
    if ours is None or theirs is None:
        return False
    return ours < theirs if lower_is_better(field) else ours > theirs


def find_head_to_head(group: Sequence[dict]) -> tuple[dict, dict] | None:
    """Return (winner, loser) for a decided two-lane run, else None."""
    if len(group) != 2:
        return None
    winner = next((r for r in group if r.get("result") == WIN), None)
    loser = next((r for r in group if r.get("result") == LOSS), None)
    if winner is None or loser is None:
        return None
    return winner, loser


def win_factor_analysis(races: Sequence[dict]) -> WinFactorAnalysis:
    """How often the winner of a pairing also held the better raw metric.

    Only (date, race number) groups with exactly one Win and one Loss are
    compared; a metric missing on either side counts as "not better" but the
    pairing stays in the denominator.
    """
    counts = {field: 0 for _, field in WIN_FACTOR_FIELDS}
    total = 0
    for group in group_races(races, heat_key).values():
        pair = find_head_to_head(group)
        if pair is None:
            continue
        total += 1
        winner, loser = pair
        for _, field in WIN_FACTOR_FIELDS:
            if _winner_was_better(winner, loser, field):
                counts[field] += 1

    return WinFactorAnalysis(
        total_comparisons=total,
        factors=tuple(
            WinFactor(
                name=name,
                field=field,
                count=counts[field],
                percentage=round_percent(safe_percentage(counts[field], total)),
            )
            for name, field in WIN_FACTOR_FIELDS
        ),
    )
