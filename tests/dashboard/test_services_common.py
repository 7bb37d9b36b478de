"""Tests for shared/services/common.py — pure functions."""

from __future__ import annotations

import math

import pytest

from shared.services.common import (
    METRIC_FIELDS,
    MetricAverage,
    average_metric,
    best_value,
    capped_race_number,
    count_results,
    filtered_mean,
    group_races,
    heat_key,
    lower_is_better,
    mean,
    metric_value,
    metric_values,
    population_std_dev,
    rank_entries,
    round_metric,
    safe_percentage,
    summarise_metric,
    tally_drivers,
)


class TestLowerIsBetter:
    @pytest.mark.parametrize("field", METRIC_FIELDS[:-1])
    def test_times(self, field):
        assert lower_is_better(field) is True

    def test_speed(self):
        assert lower_is_better("eighth_mile_mph") is False

    def test_unknown_field(self):
        with pytest.raises(ValueError, match="Unknown metric"):
            lower_is_better("quarter_mile_et")


class TestMetricValue:
    def test_recorded(self, make_race):
        assert metric_value(make_race(et=7.9), "eighth_mile_et") == 7.9

    @pytest.mark.parametrize("value", [None, 0, 0.0, -1.2, math.nan])
    def test_missing(self, make_race, value):
        assert metric_value(make_race(et=value), "eighth_mile_et") is None

    def test_absent_key(self):
        assert metric_value({"driver": "X"}, "eighth_mile_et") is None

    def test_values_keep_order(self, make_race):
        races = [make_race(et=8.1), make_race(et=None), make_race(et=7.6), make_race(et=0)]
        assert metric_values(races, "eighth_mile_et") == [8.1, 7.6]


class TestReducers:
    def test_mean_empty(self):
        assert mean([]) == 0.0

    def test_std_dev_divides_by_n(self):
        assert population_std_dev([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]) == pytest.approx(2.0)

    def test_std_dev_empty(self):
        assert population_std_dev([]) == 0.0

    def test_best_value(self):
        assert best_value([7.9, 7.5, 8.0], "eighth_mile_et") == 7.5
        assert best_value([150.0, 171.2], "eighth_mile_mph") == 171.2
        assert best_value([], "eighth_mile_et") == 0.0

    def test_summarise_empty(self):
        summary = summarise_metric([])
        assert summary.samples == 0
        assert summary.mean == summary.minimum == summary.maximum == summary.std_dev == 0.0

    def test_summarise(self):
        summary = summarise_metric([8.0, 7.5, 7.8])
        assert summary.samples == 3
        assert summary.mean == pytest.approx(7.7667, abs=1e-4)
        assert summary.minimum == 7.5
        assert summary.maximum == 8.0

    def test_filtered_mean_skips_missing(self, make_race):
        races = [make_race(et=8.0), make_race(et=None), make_race(et=7.0), make_race(et=0)]
        avg = filtered_mean(races, "eighth_mile_et")
        assert avg == MetricAverage(value=7.5, samples=2)

    def test_average_metric_rounds(self, make_race):
        races = [make_race(et=8.0), make_race(et=7.5), make_race(et=7.8)]
        assert average_metric(races, "eighth_mile_et").value == 7.767

    def test_average_metric_no_data(self, make_race):
        avg = average_metric([make_race(reaction=None)], "reaction_time")
        assert avg.value == 0.0
        assert not avg.has_data


class TestRounding:
    def test_time_three_places(self):
        assert round_metric("reaction_time", 0.12345) == 0.123

    def test_speed_two_places(self):
        assert round_metric("eighth_mile_mph", 165.4321) == 165.43

    def test_safe_percentage(self):
        assert safe_percentage(2, 3) == pytest.approx(66.6667, abs=1e-4)
        assert safe_percentage(1, 0) == 0.0


class TestGrouping:
    def test_first_appearance_order(self, make_race):
        races = [make_race("B"), make_race("A"), make_race("B")]
        groups = group_races(races, lambda r: r["driver"])
        assert list(groups) == ["B", "A"]
        assert len(groups["B"]) == 2

    def test_heat_key(self, make_race):
        assert heat_key(make_race(date="2024-05-16", race_number=4)) == ("2024-05-16", 4)

    @pytest.mark.parametrize(("number", "expected"), [(1, 1), (10, 10), (14, 10), (None, 0)])
    def test_capped_race_number(self, make_race, number, expected):
        assert capped_race_number(make_race(race_number=number)) == expected


class TestTallies:
    def test_count_results_ignores_tbd(self, make_race):
        races = [make_race(result="Win"), make_race(result="Loss"), make_race(result="TBD")]
        assert count_results(races) == (1, 1)

    def test_tally_drivers(self, sample_races):
        tallies = {t.driver: t for t in tally_drivers(sample_races)}
        jerry = tallies["Jerry Williams"]
        assert (jerry.races, jerry.wins, jerry.losses) == (3, 2, 1)
        assert jerry.win_rate == pytest.approx(66.6667, abs=1e-4)
        assert list(tallies) == ["Jerry Williams", "Mike Anderson", "Kavon Tibbs"]


class TestRankEntries:
    def test_stable_ties(self):
        items = [("a", 2), ("b", 1), ("c", 2)]
        ranked = rank_entries(items, key=lambda i: i[1], descending=True, limit=None)
        assert [i[0] for i in ranked] == ["a", "c", "b"]

    def test_limit(self):
        ranked = rank_entries(range(10), key=float, descending=False, limit=3)
        assert ranked == [0, 1, 2]
