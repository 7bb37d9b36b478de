"""dragstats data models."""

from dragstats.models.race import BYE_CAR_NUMBER, BYE_OPPONENT, RaceRecord, RaceResult

__all__ = [
    "BYE_CAR_NUMBER",
    "BYE_OPPONENT",
    "RaceRecord",
    "RaceResult",
]
