"""
Difficulty curve: maps the current score to the enemy spawn interval
"""

from typing import Sequence, Tuple

# (minimum score, spawn interval in ms), sorted by score
DifficultyTable = Sequence[Tuple[int, int]]

DEFAULT_DIFFICULTY: DifficultyTable = (
    (0, 1000),
    (100, 900),
    (200, 800),
    (300, 700),
    (400, 500),
    (500, 300),
)

# Earlier revision of the game: one enemy per second regardless of score
FLAT_DIFFICULTY: DifficultyTable = ((0, 1000),)


def spawn_interval_for_score(score: int, table: DifficultyTable = DEFAULT_DIFFICULTY) -> int:
    """Return the spawn interval (ms) of the highest threshold not above score"""
    interval = table[0][1]
    for threshold, value in table:
        if score < threshold:
            break
        interval = value
    return interval


def validate_table(table: DifficultyTable):
    if not table:
        raise ValueError("difficulty table must not be empty")
    if table[0][0] != 0:
        raise ValueError("difficulty table must start at score 0")
    for (s0, i0), (s1, i1) in zip(table, table[1:]):
        if s1 <= s0:
            raise ValueError(f"difficulty thresholds must increase: {s0} then {s1}")
        if i1 > i0:
            raise ValueError(f"spawn interval must not increase with score: {i0} then {i1}")
    for _, interval in table:
        if interval <= 0:
            raise ValueError(f"spawn interval must be positive, got {interval}")
