"""Tests for impact area ranking."""

import pytest

from clim8.services.ranking import (
    percent_of,
    rank_areas,
    round_display,
    round_half_up,
)


def test_rank_areas_sorts_descending_with_percentages() -> None:
    ranked = rank_areas({"transportation": 100.0, "energy": 300.0, "diet": 200.0})

    assert [area.category for area in ranked] == ["energy", "diet", "transportation"]
    assert [area.percent_of_total for area in ranked] == [50.0, 33.3, 16.7]
    assert sum(area.percent_of_total for area in ranked) == pytest.approx(100, abs=0.2)


def test_rank_areas_keeps_declaration_order_for_ties() -> None:
    ranked = rank_areas({"transportation": 50.0, "energy": 50.0, "diet": 80.0})

    assert [area.category for area in ranked] == ["diet", "transportation", "energy"]


def test_rank_areas_zero_total_gives_zero_percentages() -> None:
    ranked = rank_areas({"transportation": 0.0, "energy": 0.0, "diet": 0.0})

    assert [area.category for area in ranked] == ["transportation", "energy", "diet"]
    assert all(area.percent_of_total == 0 for area in ranked)


def test_rank_areas_output_is_non_increasing() -> None:
    ranked = rank_areas({"a": 3.5, "b": 9.25, "c": 0.0, "d": 9.25, "e": 1.0})
    values = [area.absolute_value for area in ranked]

    assert values == sorted(values, reverse=True)


def test_percent_of_guards_zero_total() -> None:
    assert percent_of(10, 0) == 0
    assert percent_of(1, 3) == 33.3


def test_percent_of_rounds_ties_up() -> None:
    assert percent_of(49, 400) == 12.3
    assert percent_of(1, 8) == 12.5
    assert percent_of(float("inf"), float("inf")) == 0


def test_round_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(12.25, 1) == 12.3
    assert round_display(2.4) == 2
    assert round_display(606.0) == 606
