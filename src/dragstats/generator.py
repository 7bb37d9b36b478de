"""Synthetic season generator: single-elimination bracket simulation.

Produces realistic-looking race records for demos and tests. Each event date
is run as an independent knockout bracket: the field is shuffled, padded with
byes up to the next power of two, and paired off round by round until one
driver remains. Lower eighth-mile ET wins a pairing.

Usage:
    dragstats-generate --output data/drag_racing_season_data.csv --seed 7
"""

from __future__ import annotations

import argparse
import datetime
import logging
import math
import random
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from dragstats._csv import render_season_csv
from dragstats.models.race import BYE_CAR_NUMBER, BYE_OPPONENT, RaceRecord, RaceResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Entrant:
    name: str
    car_number: str


DEFAULT_ROSTER: tuple[Entrant, ...] = (
    Entrant("Jerry Williams", "934"),
    Entrant("Mike Anderson", "993"),
    Entrant("Patick Pendergrass", "1X15"),
    Entrant("Kavon Tibbs", "316"),
    Entrant("Tracy Stroop", "396"),
    Entrant("Kevin Beach", "1X37"),
    Entrant("Darrell Morton", "1X17"),
    Entrant("Steve Detwiler", "1X53"),
    Entrant("Angie Tibbs", "518X"),
    Entrant("Derek Dellinger", "DX67"),
    Entrant("Bobby Dunn", "1X3E"),
    Entrant("Pete Saffer", "3X5W"),
    Entrant("Robert Pitcock", "93"),
)

DEFAULT_EVENT_DATES: tuple[datetime.date, ...] = (
    datetime.date(2024, 3, 14),
    datetime.date(2024, 4, 25),
    datetime.date(2024, 5, 16),
    datetime.date(2024, 6, 13),
    datetime.date(2024, 7, 11),
    datetime.date(2024, 8, 22),
    datetime.date(2024, 9, 19),
)

DEFAULT_OUTPUT = Path("data") / "drag_racing_season_data.csv"


def _uniform(rng: random.Random, low: float, span: float, digits: int) -> float:
    return round(rng.random() * span + low, digits)


def generate_run(
    entrant: Entrant,
    opponent: Entrant | None,
    event_date: datetime.date,
    race_number: int,
    rng: random.Random,
    result: RaceResult = RaceResult.TBD,
) -> RaceRecord:
    """Generate one driver's timing slip for a single run."""
    return RaceRecord(
        driver=entrant.name,
        car_number=entrant.car_number,
        date=event_date,
        race_number=race_number,
        reaction_time=_uniform(rng, 0.001, 0.5, 4),
        sixty_foot_time=_uniform(rng, 1.0, 1.5, 4),
        three_thirty_foot_time=_uniform(rng, 4.0, 2.0, 4),
        eighth_mile_et=_uniform(rng, 7.0, 2.0, 4),
        eighth_mile_mph=_uniform(rng, 90.0, 90.0, 2),
        opponent=opponent.name if opponent else BYE_OPPONENT,
        opponent_car_number=opponent.car_number if opponent else BYE_CAR_NUMBER,
        result=result,
    )


def bracket_size(entrants: int) -> int:
    """Smallest power of two that seats *entrants* drivers."""
    if entrants <= 1:
        return 1
    return 2 ** math.ceil(math.log2(entrants))


def simulate_tournament(
    roster: Sequence[Entrant],
    event_date: datetime.date,
    rng: random.Random,
) -> list[RaceRecord]:
    """Run one knockout event and return its race records in running order."""
    field: list[Entrant | None] = list(roster)
    rng.shuffle(field)
    field.extend([None] * (bracket_size(len(field)) - len(field)))

    results: list[RaceRecord] = []
    race_number = 1
    current_round = field

    while len(current_round) > 1:
        next_round: list[Entrant | None] = []
        for i in range(0, len(current_round), 2):
            first, second = current_round[i], current_round[i + 1]

            if first is None or second is None:
                advancing = first or second
                next_round.append(advancing)
                if advancing is not None:
                    results.append(generate_run(
                        advancing, None, event_date, race_number, rng,
                        result=RaceResult.WIN,
                    ))
                    race_number += 1
                continue

            first_run = generate_run(first, second, event_date, race_number, rng)
            second_run = generate_run(second, first, event_date, race_number, rng)

            # ET tie goes to the second lane
            if first_run.eighth_mile_et < second_run.eighth_mile_et:
                first_run = first_run.model_copy(update={"result": RaceResult.WIN})
                second_run = second_run.model_copy(update={"result": RaceResult.LOSS})
                next_round.append(first)
            else:
                first_run = first_run.model_copy(update={"result": RaceResult.LOSS})
                second_run = second_run.model_copy(update={"result": RaceResult.WIN})
                next_round.append(second)

            results.extend([first_run, second_run])
            race_number += 1

        current_round = next_round

    return results


def generate_season(
    roster: Sequence[Entrant] = DEFAULT_ROSTER,
    event_dates: Sequence[datetime.date] = DEFAULT_EVENT_DATES,
    seed: int | None = None,
) -> list[RaceRecord]:
    """Simulate every event of a season; deterministic for a given seed."""
    rng = random.Random(seed)
    season: list[RaceRecord] = []
    for event_date in event_dates:
        season.extend(simulate_tournament(roster, event_date, rng))
    return season


def write_season_csv(records: Sequence[RaceRecord], output: Path) -> Path:
    """Write *records* to *output* as season CSV, creating parent dirs."""
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(render_season_csv(records), encoding="utf-8")
    return output


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate a synthetic bracket drag-racing season CSV",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--output", "-o", type=Path, default=DEFAULT_OUTPUT,
                        help="Destination CSV file")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducibility")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    args = parse_args(argv)

    season = generate_season(seed=args.seed)
    path = write_season_csv(season, args.output)
    logger.info("Total races generated: %d", len(season))
    logger.info("Season written to %s", path)


if __name__ == "__main__":
    main()
