import logging

from game.shooter import Enemy, InputState, Phase

IDLE = InputState()
FIRE = InputState(fire=True)
RESTART = InputState(restart=True)


def test_initial_run(make_game):
    game = make_game()
    state = game.state

    assert game.phase is Phase.PLAYING
    assert state.score == 0
    assert state.spawn_interval_ms == 1000
    assert state.player.x == 200
    assert state.bullets == []
    assert [(e.x, e.y) for e in state.enemies] == [(0, 50), (80, 50), (160, 50), (240, 50), (320, 50)]


def test_fired_bullet_moves_on_the_same_tick(make_game):
    game = make_game(seed_initial_enemies=False)

    events = game.update(FIRE)

    assert events["shot"] == 1
    assert [(b.x, b.y) for b in game.bullets] == [(215, 532)]


def test_difficulty_is_recomputed_before_spawning(make_game, clock):
    game = make_game(seed_initial_enemies=False)
    game.state.score = 500

    clock.advance(300)
    events = game.update(IDLE)

    assert game.state.spawn_interval_ms == 300
    assert events["spawn"] == 1
    assert game.enemies == [Enemy(x=123, y=50)]


def test_enemy_reaching_the_bottom_ends_the_run(make_game, caplog):
    game = make_game()

    # Enemies start at y=50 and end the run once y > 560
    for _ in range(510):
        events = game.update(IDLE)
    assert not game.is_game_over

    with caplog.at_level(logging.INFO, logger="game.shooter.game"):
        events = game.update(IDLE)

    assert events["game_over"] == 1
    assert game.is_game_over
    assert game.score == 0
    assert [e.y for e in game.enemies] == [561, 560, 560, 560, 560]
    assert "game over" in caplog.text


def test_game_over_freezes_the_field(make_game, clock):
    game = make_game()
    for _ in range(511):
        game.update(IDLE)
    assert game.is_game_over

    enemies_before = [(e.x, e.y) for e in game.enemies]
    for _ in range(100):
        clock.advance(100)
        events = game.update(InputState(left=True, fire=True))
        assert events == {"shot": 0, "kill": 0, "spawn": 0, "culled": 0, "game_over": 0, "restart": 0}

    assert [(e.x, e.y) for e in game.enemies] == enemies_before
    assert game.bullets == []
    assert game.player_x == 200
    assert game.spawner.randint.calls == []


def test_restart_resets_the_run(make_game, clock):
    game = make_game()
    game.update(FIRE)
    game.state.score = 520
    game.state.player.x = 35
    game.state.phase = Phase.GAME_OVER

    clock.advance(5000)
    events = game.update(RESTART)
    state = game.state

    assert events["restart"] == 1
    assert game.phase is Phase.PLAYING
    assert state.score == 0
    assert state.bullets == []
    assert state.enemies == []
    assert state.player.x == 200
    assert state.last_spawn_time == clock.now()
    assert state.last_fire_time is None
    assert state.spawn_interval_ms == 1000


def test_restart_is_ignored_while_playing(make_game):
    game = make_game()
    game.state.score = 30

    events = game.update(RESTART)

    assert events["restart"] == 0
    assert game.score == 30
    assert len(game.enemies) == 5


def test_fire_then_hit_scores_ten(make_game):
    game = make_game(seed_initial_enemies=False)
    target = Enemy(x=200, y=400)
    game.state.enemies.append(target)

    # Bullet spawns at (215, 540) and closes 9 px per tick on the enemy
    game.update(FIRE)
    for _ in range(10):
        events = game.update(IDLE)
        assert events["kill"] == 0
    assert len(game.bullets) == 1

    events = game.update(IDLE)

    assert events["kill"] == 1
    assert game.bullets == []
    assert game.enemies == []
    assert game.score == 10


def test_held_fire_through_the_game_loop(make_game, clock):
    game = make_game(seed_initial_enemies=False)
    shots = 0
    for _ in range(60):
        clock.advance(50)
        shots += game.update(FIRE)["shot"]

    # Fired at t=50, then every 300 ms up to t=3000
    assert shots == 10


def test_spawn_timer_restarts_after_reset(make_game, clock):
    game = make_game(seed_initial_enemies=False)
    game.state.phase = Phase.GAME_OVER
    clock.advance(2000)
    game.update(RESTART)

    clock.advance(999)
    assert game.update(IDLE)["spawn"] == 0
    clock.advance(1)
    assert game.update(IDLE)["spawn"] == 1
