"""Ranked slices of the season: record-level and driver-level leaderboards.

Ranking always uses unrounded values; the reported value is rounded at its
display precision afterwards. Ties keep input order (first appearance of the
record, or of the driver for driver-level boards), so rank numbers are
deterministic.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..constants import (
    DRIVER_LEADERBOARD_SIZE,
    MIN_RACES_FOR_WIN_RATE,
    MIN_SAMPLES_FOR_CONSISTENCY,
    MIN_SAMPLES_FOR_IMPROVEMENT,
    RECORD_LEADERBOARD_SIZE,
)
from .common import (
    LeaderboardEntry,
    driver_key,
    filtered_mean,
    group_races,
    lower_is_better,
    mean,
    metric_value,
    metric_values,
    population_std_dev,
    rank_entries,
    round_metric,
    round_percent,
    safe_percentage,
    tally_drivers,
)


@dataclass(frozen=True)
class ImprovementEntry:
    rank: int
    driver: str
    car_number: str
    early_average: float
    late_average: float
    delta: float
    improvement_pct: float
    samples: int


def record_leaderboard(
    races: Sequence[dict],
    field: str,
    limit: int = RECORD_LEADERBOARD_SIZE,
    floor: float = 0.0,
) -> list[LeaderboardEntry]:
    """Best individual runs for *field*, with date and opponent context.

    Runs at or below *floor* are ignored in addition to missing values.
    """
    candidates = [
        (race, value) for race in races
        if (value := metric_value(race, field)) is not None and value > floor
    ]
    ranked = rank_entries(
        candidates, key=lambda c: c[1], descending=not lower_is_better(field), limit=limit,
    )
    return [
        LeaderboardEntry(
            rank=i,
            driver=race["driver"],
            car_number=race.get("car_number", ""),
            value=round_metric(field, value),
            date=race.get("date"),
            opponent=race.get("opponent"),
        )
        for i, (race, value) in enumerate(ranked, start=1)
    ]


def most_wins_leaderboard(
    races: Sequence[dict],
    limit: int = DRIVER_LEADERBOARD_SIZE,
) -> list[LeaderboardEntry]:
    """Drivers ranked by win count; drivers without a win are omitted."""
    tallies = [t for t in tally_drivers(races) if t.wins > 0]
    ranked = rank_entries(tallies, key=lambda t: t.wins, descending=True, limit=limit)
    return [
        LeaderboardEntry(
            rank=i, driver=t.driver, car_number=t.car_number,
            value=t.wins, samples=t.races,
        )
        for i, t in enumerate(ranked, start=1)
    ]


def win_rate_leaderboard(
    races: Sequence[dict],
    limit: int = DRIVER_LEADERBOARD_SIZE,
    min_races: int = MIN_RACES_FOR_WIN_RATE,
) -> list[LeaderboardEntry]:
    """Drivers ranked by win percentage, requiring *min_races* runs."""
    eligible = [t for t in tally_drivers(races) if t.races >= min_races]
    ranked = rank_entries(eligible, key=lambda t: t.win_rate, descending=True, limit=limit)
    return [
        LeaderboardEntry(
            rank=i, driver=t.driver, car_number=t.car_number,
            value=round_percent(t.win_rate), samples=t.races,
        )
        for i, t in enumerate(ranked, start=1)
    ]


def average_metric_leaderboard(
    races: Sequence[dict],
    field: str,
    limit: int = DRIVER_LEADERBOARD_SIZE,
) -> list[LeaderboardEntry]:
    """Drivers ranked by their mean *field*; drivers with no samples are omitted."""
    rows = []
    for driver, driver_races in group_races(races, driver_key).items():
        avg = filtered_mean(driver_races, field)
        if avg.has_data:
            rows.append((driver, driver_races[0].get("car_number", ""), avg))

    ranked = rank_entries(
        rows, key=lambda r: r[2].value, descending=not lower_is_better(field), limit=limit,
    )
    return [
        LeaderboardEntry(
            rank=i, driver=driver, car_number=car_number,
            value=round_metric(field, avg.value), samples=avg.samples,
        )
        for i, (driver, car_number, avg) in enumerate(ranked, start=1)
    ]


def consistency_ranking(
    races: Sequence[dict],
    field: str = "eighth_mile_et",
    limit: int = DRIVER_LEADERBOARD_SIZE,
    min_samples: int = MIN_SAMPLES_FOR_CONSISTENCY,
) -> list[LeaderboardEntry]:
    """Drivers ranked by lowest population standard deviation of *field*."""
    rows = []
    for driver, driver_races in group_races(races, driver_key).items():
        values = metric_values(driver_races, field)
        if len(values) >= min_samples:
            rows.append((
                driver, driver_races[0].get("car_number", ""),
                population_std_dev(values), len(values),
            ))

    ranked = rank_entries(rows, key=lambda r: r[2], descending=False, limit=limit)
    return [
        LeaderboardEntry(
            rank=i, driver=driver, car_number=car_number,
            value=round_metric(field, std_dev), samples=samples,
        )
        for i, (driver, car_number, std_dev, samples) in enumerate(ranked, start=1)
    ]


def improvement_ranking(
    races: Sequence[dict],
    field: str,
    limit: int = DRIVER_LEADERBOARD_SIZE,
    min_samples: int = MIN_SAMPLES_FOR_IMPROVEMENT,
) -> list[ImprovementEntry]:
    """Compare each driver's first two and last two runs of *field*.

    ``delta`` is late minus early, so a time metric improves with a negative
    delta and a speed metric with a positive one. ``improvement_pct`` is
    positive whenever the driver got better. Most improved ranks first.
    """
    times = lower_is_better(field)
    rows = []
    for driver, driver_races in group_races(races, driver_key).items():
        runs = [
            (race["date"], value) for race in driver_races
            if (value := metric_value(race, field)) is not None
        ]
        if len(runs) < min_samples:
            continue

        runs.sort(key=lambda run: run[0])
        early = mean([value for _, value in runs[:2]])
        late = mean([value for _, value in runs[-2:]])
        delta = late - early
        pct = safe_percentage(early - late if times else late - early, early)
        rows.append((driver, driver_races[0].get("car_number", ""), early, late, delta, pct, len(runs)))

    ranked = rank_entries(rows, key=lambda r: r[4], descending=not times, limit=limit)
    return [
        ImprovementEntry(
            rank=i,
            driver=driver,
            car_number=car_number,
            early_average=round_metric(field, early),
            late_average=round_metric(field, late),
            delta=round_metric(field, delta),
            improvement_pct=round_percent(pct),
            samples=samples,
        )
        for i, (driver, car_number, early, late, delta, pct, samples) in enumerate(ranked, start=1)
    ]
