import pytest

from game.shooter import GameConfig, InputState, ShooterGame


def test_defaults_are_valid():
    config = GameConfig()
    assert config.player_max_x == 360
    assert config.player_y == 550
    assert config.game_over_y == 560


@pytest.mark.parametrize("kwargs", [
    {"width": 0},
    {"height": -600},
    {"player_width": 0},
    {"player_height": 0},
    {"bullet_width": 0},
    {"bullet_height": -1},
    {"enemy_width": 0},
    {"enemy_height": 0},
    {"player_width": 500},
    {"enemy_width": 400},
    {"enemy_width": 399.5},
    {"fire_cooldown_ms": -1},
    {"initial_enemies": -1},
    {"difficulty": ()},
])
def test_invalid_config_is_rejected(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs)


def test_narrowest_spawn_range_still_spawns(clock):
    game = ShooterGame(
        config=GameConfig(enemy_width=399),
        clock=clock,
        seed_initial_enemies=False,
    )

    clock.advance(1000)
    events = game.update(InputState())

    assert events["spawn"] == 1
    assert [(e.x, e.y) for e in game.enemies] == [(0, 50)]
