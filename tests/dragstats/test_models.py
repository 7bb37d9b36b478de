"""Tests for the RaceRecord model."""

from __future__ import annotations

import datetime

import pytest
from pydantic import ValidationError

from dragstats.models import BYE_CAR_NUMBER, BYE_OPPONENT, RaceRecord, RaceResult

ROW = {
    "Driver": "Jerry Williams",
    "CarNo": "934",
    "Date": "2024-03-14",
    "RaceNumber": "3",
    "Reaction": "0.1234",
    "60ft": "1.3456",
    "330ft": "4.5678",
    "1/8ET": "7.8912",
    "1/8MPH": "165.43",
    "Opponent": "Mike Anderson",
    "OpponentCarNo": "993",
    "WinLoss": "Win",
}


class TestRaceRecord:
    def test_parse_aliases(self) -> None:
        record = RaceRecord.model_validate(ROW)
        assert record.driver == "Jerry Williams"
        assert record.car_number == "934"
        assert record.date == datetime.date(2024, 3, 14)
        assert record.race_number == 3
        assert record.eighth_mile_et == pytest.approx(7.8912)
        assert record.eighth_mile_mph == pytest.approx(165.43)
        assert record.result is RaceResult.WIN

    def test_populate_by_field_name(self) -> None:
        record = RaceRecord(
            driver="Kavon Tibbs",
            car_number="316",
            date=datetime.date(2024, 4, 25),
            race_number=1,
        )
        assert record.reaction_time is None
        assert record.result is RaceResult.TBD

    def test_blank_metrics_become_none(self) -> None:
        row = {**ROW, "Reaction": "", "1/8MPH": "  "}
        record = RaceRecord.model_validate(row)
        assert record.reaction_time is None
        assert record.eighth_mile_mph is None
        assert record.sixty_foot_time == pytest.approx(1.3456)

    def test_zero_metric_is_kept(self) -> None:
        record = RaceRecord.model_validate({**ROW, "Reaction": "0"})
        assert record.reaction_time == 0.0

    def test_integer_car_number(self) -> None:
        record = RaceRecord.model_validate({**ROW, "CarNo": 934, "OpponentCarNo": 993})
        assert record.car_number == "934"
        assert record.opponent_car_number == "993"

    def test_bye_defaults(self) -> None:
        row = {k: v for k, v in ROW.items() if k not in ("Opponent", "OpponentCarNo")}
        record = RaceRecord.model_validate(row)
        assert record.opponent == BYE_OPPONENT
        assert record.opponent_car_number == BYE_CAR_NUMBER
        assert record.is_bye

    def test_is_win(self) -> None:
        assert RaceRecord.model_validate(ROW).is_win
        assert not RaceRecord.model_validate({**ROW, "WinLoss": "Loss"}).is_win

    def test_invalid_result(self) -> None:
        with pytest.raises(ValidationError):
            RaceRecord.model_validate({**ROW, "WinLoss": "Draw"})

    def test_invalid_date(self) -> None:
        with pytest.raises(ValidationError):
            RaceRecord.model_validate({**ROW, "Date": "not-a-date"})

    def test_frozen(self) -> None:
        record = RaceRecord.model_validate(ROW)
        with pytest.raises(ValidationError):
            record.driver = "Someone Else"  # type: ignore[misc]
