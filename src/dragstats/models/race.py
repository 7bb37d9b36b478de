"""Race record model."""

from __future__ import annotations

import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RaceResult(str, Enum):
    """Outcome of a single head-to-head run."""

    WIN = "Win"
    LOSS = "Loss"
    TBD = "TBD"


BYE_OPPONENT = "Bye"
BYE_CAR_NUMBER = "N/A"


class RaceRecord(BaseModel):
    """One driver's side of a completed head-to-head run.

    Timing fields are ``None`` when the timing system did not record them.
    Values of zero or below are accepted here and treated as missing by the
    aggregation layer.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    driver: str = Field(alias="Driver")
    car_number: str = Field(alias="CarNo")
    date: datetime.date = Field(alias="Date")
    race_number: int = Field(alias="RaceNumber")
    reaction_time: float | None = Field(default=None, alias="Reaction")
    sixty_foot_time: float | None = Field(default=None, alias="60ft")
    three_thirty_foot_time: float | None = Field(default=None, alias="330ft")
    eighth_mile_et: float | None = Field(default=None, alias="1/8ET")
    eighth_mile_mph: float | None = Field(default=None, alias="1/8MPH")
    opponent: str = Field(default=BYE_OPPONENT, alias="Opponent")
    opponent_car_number: str = Field(default=BYE_CAR_NUMBER, alias="OpponentCarNo")
    result: RaceResult = Field(default=RaceResult.TBD, alias="WinLoss")

    @field_validator(
        "reaction_time",
        "sixty_foot_time",
        "three_thirty_foot_time",
        "eighth_mile_et",
        "eighth_mile_mph",
        mode="before",
    )
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("car_number", "opponent", "opponent_car_number", mode="before")
    @classmethod
    def _coerce_label(cls, value: object) -> object:
        # Car numbers such as 934 come out of spreadsheets as integers
        if isinstance(value, int):
            return str(value)
        return value

    @property
    def is_bye(self) -> bool:
        """True when the run had no opponent."""
        return self.opponent == BYE_OPPONENT

    @property
    def is_win(self) -> bool:
        return self.result is RaceResult.WIN
