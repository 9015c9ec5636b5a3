import pytest

from game.shooter import GameConfig
from game.shooter.difficulty import (
    DEFAULT_DIFFICULTY,
    FLAT_DIFFICULTY,
    spawn_interval_for_score,
    validate_table,
)


@pytest.mark.parametrize("score, interval", [
    (0, 1000),
    (99, 1000),
    (100, 900),
    (199, 900),
    (200, 800),
    (299, 800),
    (300, 700),
    (399, 700),
    (400, 500),
    (499, 500),
    (500, 300),
    (10_000, 300),
])
def test_default_curve_boundaries(score, interval):
    assert spawn_interval_for_score(score) == interval


def test_default_curve_is_non_increasing():
    intervals = [spawn_interval_for_score(s) for s in range(0, 1000, 10)]
    assert all(a >= b for a, b in zip(intervals, intervals[1:]))


def test_flat_curve_never_changes():
    assert {spawn_interval_for_score(s, FLAT_DIFFICULTY) for s in range(0, 2000, 10)} == {1000}


def test_default_table_is_valid():
    validate_table(DEFAULT_DIFFICULTY)


@pytest.mark.parametrize("table", [
    (),
    ((10, 1000),),
    ((0, 1000), (100, 1200)),
    ((0, 1000), (200, 900), (100, 800)),
    ((0, 0),),
])
def test_invalid_tables_are_rejected(table):
    with pytest.raises(ValueError):
        validate_table(table)


def test_config_validates_its_table():
    with pytest.raises(ValueError):
        GameConfig(difficulty=((0, 500), (100, 600)))
