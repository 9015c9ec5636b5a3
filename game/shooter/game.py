"""
ShooterGame - the per-tick state machine of the arcade shooter
---------------------------------------------------------------
Two phases: PLAYING and GAME_OVER. While playing, one tick runs

    difficulty -> movement -> fire -> motion (bullets, then enemies)
    -> collisions -> spawn

in that order, so a bullet fired this tick has not moved yet and
collisions see positions already advanced this tick. The tick that ends
the run stops right after the enemy pass. While game over, the only
thing a tick does is watch for the restart input.

Time and randomness are injected (Clock, uniform integer source) so the
whole run is reproducible under a ManualClock and a seeded source.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from .clock import Clock, MonotonicClock
from .config import GameConfig
from .difficulty import spawn_interval_for_score
from .entities import Player
from .state import InputState, Phase, RunState
from .systems import (
    FireController,
    MotionIntegrator,
    SpawnController,
    apply_movement,
    resolve_collisions,
    seed_enemies,
    update_difficulty,
)
from .utils import RandInt, make_randint

logger = logging.getLogger(__name__)


class ShooterGame:
    """Owns the RunState and drives the systems once per tick"""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        clock: Optional[Clock] = None,
        randint: Optional[RandInt] = None,
        seed_initial_enemies: bool = True,
    ):
        self.config = config or GameConfig()
        self.clock = clock or MonotonicClock()
        self.randint = randint or make_randint()

        self.fire = FireController(self.clock, self.config)
        self.motion = MotionIntegrator(self.config)
        self.spawner = SpawnController(self.clock, self.randint, self.config)

        self.state = self._fresh_state()
        if seed_initial_enemies:
            seed_enemies(self.state, self.config)

    def _fresh_state(self) -> RunState:
        return RunState(
            player=Player(
                x=self.config.width / 2,
                width=self.config.player_width,
                height=self.config.player_height,
            ),
            spawn_interval_ms=spawn_interval_for_score(0, self.config.difficulty),
            last_spawn_time=self.clock.now(),
        )

    # ----------------------------
    # State machine
    # ----------------------------

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def is_game_over(self) -> bool:
        return self.state.is_game_over

    def reset(self):
        """Start a new run: score 0, no entities, timers restarted"""
        old_score = self.state.score
        self.state = self._fresh_state()
        logger.info("run reset (previous score %d)", old_score)

    def update(self, inputs: InputState) -> Dict[str, int]:
        """Advance the simulation by one tick and return the tick's events"""
        events = {"shot": 0, "kill": 0, "spawn": 0, "culled": 0, "game_over": 0, "restart": 0}

        if self.state.is_game_over:
            if inputs.restart:
                self.reset()
                events["restart"] = 1
            return events

        state = self.state
        update_difficulty(state, self.config)
        apply_movement(state, inputs, self.config)

        if self.fire.update(state, inputs) is not None:
            events["shot"] = 1

        culled, reached_bottom = self.motion.step(state)
        events["culled"] = culled
        if reached_bottom:
            events["game_over"] = 1
            logger.info("enemy reached the bottom, game over with score %d", state.score)
            return events

        events["kill"] = resolve_collisions(state, self.config)

        if self.spawner.update(state) is not None:
            events["spawn"] = 1

        return events

    # ----------------------------
    # Read-only accessors for renderers
    # ----------------------------

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def player_x(self) -> float:
        return self.state.player.x

    @property
    def bullets(self):
        return self.state.bullets

    @property
    def enemies(self):
        return self.state.enemies
