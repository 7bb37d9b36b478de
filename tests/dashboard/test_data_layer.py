"""Tests for shared/data/ — errors, base, CSV repository and source selection."""

from __future__ import annotations

import datetime
from unittest.mock import MagicMock, patch

import pytest

from dragstats import RaceRecord
from shared.data import (
    CsvSeasonRepository,
    SeasonDataError,
    SeasonDataRepository,
    get_repository,
    normalize_race,
)
from shared.data import source as source_mod
from tests.conftest import SAMPLE_CSV


class TestSeasonDataError:
    def test_is_exception(self):
        assert issubclass(SeasonDataError, Exception)

    def test_message(self):
        assert str(SeasonDataError("test message")) == "test message"


class TestSeasonDataRepository:
    def test_cannot_instantiate_abc(self):
        with pytest.raises(TypeError):
            SeasonDataRepository()

    def test_concrete_implementation(self):
        class ConcreteRepo(SeasonDataRepository):
            def get_races(self): return []
            def describe_source(self): return "memory"

        assert ConcreteRepo().get_races() == []

    def test_partial_implementation_fails(self):
        class PartialRepo(SeasonDataRepository):
            def get_races(self): return []

        with pytest.raises(TypeError):
            PartialRepo()


class TestNormalizeRace:
    def test_plain_dict(self):
        record = RaceRecord(
            driver="Jerry Williams",
            car_number="934",
            date=datetime.date(2024, 3, 14),
            race_number=2,
            eighth_mile_et=7.9,
        )
        race = normalize_race(record)
        assert race["date"] == "2024-03-14"
        assert race["result"] == "TBD"
        assert race["eighth_mile_et"] == 7.9
        assert race["reaction_time"] is None
        assert race["opponent"] == "Bye"


class TestCsvSeasonRepository:
    def test_get_races(self, season_file):
        races = CsvSeasonRepository(str(season_file)).get_races()
        assert len(races) == 5
        assert races[0]["driver"] == "Jerry Williams"
        assert races[0]["result"] == "Win"
        assert races[2]["eighth_mile_et"] is None

    def test_describe_source(self):
        assert CsvSeasonRepository("data/season.csv").describe_source() == "data/season.csv"

    def test_missing_file_raises_data_error(self, tmp_path):
        repo = CsvSeasonRepository(str(tmp_path / "missing.csv"))
        with pytest.raises(SeasonDataError, match="missing.csv"):
            repo.get_races()

    def test_missing_file_suggests_generator(self, tmp_path):
        repo = CsvSeasonRepository(str(tmp_path / "drag_racing_season_data.csv"))
        with pytest.raises(SeasonDataError, match="dragstats-generate"):
            repo.get_races()

    def test_invalid_file_has_no_generator_hint(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("a,b\n1,2\n", encoding="utf-8")
        with pytest.raises(SeasonDataError) as exc_info:
            CsvSeasonRepository(str(path)).get_races()
        assert "dragstats-generate" not in str(exc_info.value)

    def test_invalid_file_raises_data_error(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text(SAMPLE_CSV.replace("2024-03-14", "14/03/2024"), encoding="utf-8")
        with pytest.raises(SeasonDataError) as exc_info:
            CsvSeasonRepository(str(path)).get_races()
        assert exc_info.value.__cause__ is not None

    def test_factory_with_explicit_source(self, season_file):
        repo = get_repository(str(season_file))
        assert isinstance(repo, CsvSeasonRepository)
        assert repo.describe_source() == str(season_file)


class TestSourceSelection:
    @pytest.fixture
    def mock_st(self):
        st = MagicMock()
        st.session_state = {}
        with patch.object(source_mod, "st", st):
            yield st

    def test_default_path(self, mock_st, monkeypatch):
        monkeypatch.delenv(source_mod.SOURCE_ENV_VAR, raising=False)
        assert source_mod.get_active_source() == str(source_mod.DEFAULT_DATA_PATH)
        assert source_mod.DEFAULT_DATA_PATH.name == "drag_racing_season_data.csv"

    def test_env_override(self, mock_st, monkeypatch):
        monkeypatch.setenv(source_mod.SOURCE_ENV_VAR, "https://example.com/s.csv")
        assert source_mod.get_active_source() == "https://example.com/s.csv"

    def test_session_wins(self, mock_st, monkeypatch):
        monkeypatch.setenv(source_mod.SOURCE_ENV_VAR, "env.csv")
        source_mod.set_active_source("  picked.csv ")
        assert mock_st.session_state[source_mod.SOURCE_STATE_KEY] == "picked.csv"
        assert source_mod.get_active_source() == "picked.csv"

    def test_blank_session_value_ignored(self, mock_st, monkeypatch):
        monkeypatch.setenv(source_mod.SOURCE_ENV_VAR, "env.csv")
        mock_st.session_state[source_mod.SOURCE_STATE_KEY] = "   "
        assert source_mod.get_active_source() == "env.csv"

    def test_factory_uses_session_source(self, mock_st):
        mock_st.session_state[source_mod.SOURCE_STATE_KEY] = "picked.csv"
        assert get_repository().describe_source() == "picked.csv"
