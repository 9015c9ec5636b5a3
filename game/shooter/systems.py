"""
Per-tick systems of the simulation core.

Each system receives the RunState explicitly and mutates it in place; none
of them keeps a reference to it between ticks. The game loop calls them in
a fixed order (see ShooterGame.update).
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from .clock import Clock
from .config import GameConfig
from .difficulty import spawn_interval_for_score
from .entities import Bullet, Enemy
from .state import InputState, Phase, RunState
from .utils import RandInt, clamp, point_in_box

logger = logging.getLogger(__name__)


def update_difficulty(state: RunState, config: GameConfig) -> int:
    """Re-derive the spawn interval from the current score"""
    state.spawn_interval_ms = spawn_interval_for_score(state.score, config.difficulty)
    return state.spawn_interval_ms


def apply_movement(state: RunState, inputs: InputState, config: GameConfig):
    player = state.player
    x = player.x
    if inputs.left and x > 0:
        x -= config.player_speed
    if inputs.right and x < config.player_max_x:
        x += config.player_speed
    player.x = clamp(x, 0.0, config.player_max_x)


class FireController:
    """Appends a bullet while fire is held, at most once per cooldown"""

    def __init__(self, clock: Clock, config: GameConfig):
        self.clock = clock
        self.config = config

    def ready(self, state: RunState) -> bool:
        if state.last_fire_time is None:
            return True
        return self.clock.elapsed_ms(state.last_fire_time) >= self.config.fire_cooldown_ms

    def update(self, state: RunState, inputs: InputState) -> Optional[Bullet]:
        if not inputs.fire or not self.ready(state):
            return None

        cfg = self.config
        bullet = Bullet(
            x=state.player.x + cfg.bullet_x_offset,
            y=cfg.height - cfg.bullet_y_offset,
            width=cfg.bullet_width,
            height=cfg.bullet_height,
        )
        state.bullets.append(bullet)
        state.last_fire_time = self.clock.now()
        return bullet


class MotionIntegrator:
    """Moves bullets up and enemies down by fixed per-tick steps"""

    def __init__(self, config: GameConfig):
        self.config = config

    def advance_bullets(self, state: RunState) -> int:
        """Move bullets; returns how many left the field and were culled"""
        for b in state.bullets:
            b.y -= self.config.bullet_speed

        if not self.config.cull_offscreen_bullets:
            return 0

        before = len(state.bullets)
        state.bullets = [b for b in state.bullets if b.y + b.height >= 0]
        culled = before - len(state.bullets)
        if culled:
            logger.debug("culled %d off-field bullet(s)", culled)
        return culled

    def advance_enemies(self, state: RunState) -> bool:
        """Move enemies in store order; returns True if one crossed the bottom.

        The scan stops at the first enemy past the line, so the enemies
        after it keep their position for this tick.
        """
        limit = self.config.game_over_y
        for e in state.enemies:
            e.y += self.config.enemy_speed
            if e.y > limit:
                state.phase = Phase.GAME_OVER
                return True
        return False

    def step(self, state: RunState) -> Tuple[int, bool]:
        culled = self.advance_bullets(state)
        reached_bottom = self.advance_enemies(state)
        return culled, reached_bottom


def resolve_collisions(state: RunState, config: GameConfig) -> int:
    """Remove bullet/enemy pairs whose bullet corner lies inside the enemy.

    Only the bullet's top-left corner is tested, with strict inequalities.
    For each bullet the first enemy in store order wins. Bullets are
    walked by index and the index always advances, so the bullet that
    shifts into a just-vacated slot is not examined until the next tick.
    Returns the number of kills.
    """
    kills = 0
    bi = 0
    while bi < len(state.bullets):
        b = state.bullets[bi]
        for ei, e in enumerate(state.enemies):
            if point_in_box(b.x, b.y, e.x, e.y, e.width, e.height):
                del state.enemies[ei]
                del state.bullets[bi]
                state.score += config.score_per_kill
                kills += 1
                logger.debug("enemy destroyed at (%.0f, %.0f), score=%d", e.x, e.y, state.score)
                break
        bi += 1
    return kills


class SpawnController:
    """Introduces a new enemy each time the spawn interval elapses"""

    def __init__(self, clock: Clock, randint: RandInt, config: GameConfig):
        self.clock = clock
        self.randint = randint
        self.config = config

    def make_enemy(self) -> Enemy:
        cfg = self.config
        x = float(self.randint(int(cfg.width - cfg.enemy_width)))
        return Enemy(x=x, y=cfg.enemy_spawn_y, width=cfg.enemy_width, height=cfg.enemy_height)

    def update(self, state: RunState) -> Optional[Enemy]:
        if self.clock.elapsed_ms(state.last_spawn_time) < state.spawn_interval_ms:
            return None

        enemy = self.make_enemy()
        state.enemies.append(enemy)
        state.last_spawn_time = self.clock.now()
        logger.debug("spawned enemy at x=%.0f (interval %d ms)", enemy.x, state.spawn_interval_ms)
        return enemy


def seed_enemies(state: RunState, config: GameConfig):
    """Place the opening row of enemies at fixed offsets"""
    for i in range(config.initial_enemies):
        state.enemies.append(Enemy(
            x=i * config.initial_enemy_spacing,
            y=config.enemy_spawn_y,
            width=config.enemy_width,
            height=config.enemy_height,
        ))
