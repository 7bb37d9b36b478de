"""Load a season CSV with dragstats and print a quick per-driver summary."""

import sys
from collections import defaultdict

from dragstats import DragStatsError, RaceResult, SeasonDataClient
from dragstats.generator import DEFAULT_OUTPUT


def main() -> None:
    source = sys.argv[1] if len(sys.argv) > 1 else str(DEFAULT_OUTPUT)

    try:
        with SeasonDataClient() as client:
            races = client.load(source)
    except DragStatsError as exc:
        print(f"Could not load {source}: {exc}")
        print("Generate one first with: dragstats-generate --seed 7")
        return

    print(f"=== {len(races)} runs loaded from {source} ===")

    wins: dict[str, int] = defaultdict(int)
    runs: dict[str, int] = defaultdict(int)
    best_et: dict[str, float] = {}
    for race in races:
        runs[race.driver] += 1
        if race.result is RaceResult.WIN:
            wins[race.driver] += 1
        if race.eighth_mile_et and race.eighth_mile_et > 0:
            best_et[race.driver] = min(best_et.get(race.driver, race.eighth_mile_et), race.eighth_mile_et)

    print(f"\n{'Driver':<22}{'Runs':>6}{'Wins':>6}{'Best ET':>10}")
    for driver in sorted(runs, key=lambda d: wins[d], reverse=True):
        et = f"{best_et[driver]:.3f}" if driver in best_et else "N/A"
        print(f"{driver:<22}{runs[driver]:>6}{wins[driver]:>6}{et:>10}")

    byes = [r for r in races if r.is_bye]
    print(f"\n{len(byes)} bye runs across {len({r.date for r in races})} event dates")


if __name__ == "__main__":
    main()
