"""
ShooterEnv - Gymnasium wrapper around the arcade shooter core
-------------------------------------------------------------
- ShooterGame for simulation, Arcade for optional rendering
- Gymnasium API
- 1 agent that slides left/right and fires (300 ms cooldown)
- Enemies descend from the top; one reaching the bottom ends the episode
- Vector observation: player state + K lowest enemies
- MultiDiscrete action space: [move(3), fire(2)]

Time is simulated: every step advances a ManualClock by dt_ms, so the
cooldown and spawn timers behave exactly as they would at that frame rate
and an episode is reproducible from its seed.

Install:
    pip install gymnasium arcade numpy

Quick test:
    python -m game.shooter.shooter_env
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .clock import ManualClock
from .config import GameConfig
from .difficulty import DEFAULT_DIFFICULTY, FLAT_DIFFICULTY
from .game import ShooterGame
from .state import InputState
from .utils import clamp, numpy_randint

DIFFICULTIES = {
    "default": DEFAULT_DIFFICULTY,
    "flat": FLAT_DIFFICULTY,
}

DEFAULT_REWARDS = {
    "R_KILL": 1.0,       # per enemy destroyed
    "R_SHOT": 0.01,      # per bullet fired (penalty)
    "R_SURVIVE": 0.001,  # per step survived
    "R_GAME_OVER": 5.0,  # enemy reached the bottom (penalty)
}


class ShooterEnv(gym.Env):
    """Arcade shooter environment driven by ShooterGame"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        width: int = 400,
        height: int = 600,
        dt_ms: float = 1000 / 60,
        max_steps: int = 3600,  # 60s at 60 FPS
        k_enemies: int = 5,
        fire_cooldown_ms: int = 300,
        difficulty: str = "default",
        score_cap: int = 1000,
        bullet_cap: int = 20,
        reward_config: Optional[Dict[str, float]] = None,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"]
        if difficulty not in DIFFICULTIES:
            raise ValueError(f"Unknown difficulty: {difficulty}")
        self.render_mode = render_mode

        self.config = GameConfig(
            width=width,
            height=height,
            fire_cooldown_ms=fire_cooldown_ms,
            difficulty=DIFFICULTIES[difficulty],
        )
        self.dt_ms = dt_ms
        self.max_steps = max_steps
        self.k_enemies = k_enemies
        self.score_cap = score_cap
        self.bullet_cap = bullet_cap

        self.rewards = dict(DEFAULT_REWARDS)
        if reward_config:
            self.rewards.update({k: v for k, v in reward_config.items() if k in DEFAULT_REWARDS})

        # move: 0 stay, 1 left, 2 right
        # fire: 0/1
        self.action_space = spaces.MultiDiscrete([3, 2])

        # Player: x(1) fire-ready(1) spawn interval(1) score(1)
        # Each enemy: rel x(1) y(1)
        # Bullets: count(1)
        obs_dim = 4 + (self.k_enemies * 2) + 1
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None

        self.clock: Optional[ManualClock] = None
        self.game: Optional[ShooterGame] = None
        self._step_count = 0
        self._kills = 0
        self._shots = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)

        self._step_count = 0
        self._kills = 0
        self._shots = 0

        self.clock = ManualClock()
        self.game = ShooterGame(
            config=self.config,
            clock=self.clock,
            randint=numpy_randint(self.np_random),
        )

        obs = self._get_obs()
        info = self._get_info()
        return obs, info

    def step(self, action):
        if self.game is None:
            raise RuntimeError("Call reset() before step()")

        move, fire = int(action[0]), int(action[1])
        inputs = InputState(left=move == 1, right=move == 2, fire=fire == 1)

        self.clock.advance(self.dt_ms)
        events = self.game.update(inputs)
        self._kills += events["kill"]
        self._shots += events["shot"]

        reward = self._compute_reward(events)

        terminated = self.game.is_game_over
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        cfg = self.config
        state = self.game.state

        px = state.player.x / max(1e-6, cfg.player_max_x)

        if state.last_fire_time is None or cfg.fire_cooldown_ms == 0:
            ready = 1.0
        else:
            ready = clamp(self.clock.elapsed_ms(state.last_fire_time) / cfg.fire_cooldown_ms, 0.0, 1.0)

        slowest = cfg.difficulty[0][1]
        interval = state.spawn_interval_ms / slowest
        score = clamp(state.score / self.score_cap, 0.0, 1.0)

        obs_parts = [px * 2 - 1, ready * 2 - 1, interval * 2 - 1, score * 2 - 1]

        # Enemies: K closest to the bottom line
        player_cx = state.player.x + cfg.player_width / 2
        enemies_sorted = sorted(state.enemies, key=lambda e: e.y, reverse=True)
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                e = enemies_sorted[i]
                dx = (e.x + e.width / 2 - player_cx) / cfg.width
                y = e.y / cfg.game_over_y
                obs_parts += [clamp(dx, -1, 1), clamp(y * 2 - 1, -1, 1)]
            else:
                obs_parts += [0.0, 0.0]

        bullets = clamp(len(state.bullets) / self.bullet_cap, 0.0, 1.0)
        obs_parts.append(bullets * 2 - 1)

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self, events: Dict[str, int]) -> float:
        r = self.rewards
        reward = 0.0
        reward += r["R_KILL"] * events["kill"]
        reward -= r["R_SHOT"] * events["shot"]
        if events["game_over"]:
            reward -= r["R_GAME_OVER"]
        else:
            reward += r["R_SURVIVE"]
        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        state = self.game.state
        return {
            "score": state.score,
            "kills": self._kills,
            "shots": self._shots,
            "num_enemies": len(state.enemies),
            "num_bullets": len(state.bullets),
            "spawn_interval_ms": state.spawn_interval_ms,
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            # Imported here so headless training never touches a display
            from .render import ShooterWindow
            self._window = ShooterWindow(self.game, title="ShooterEnv - Arcade")

        self._window.game = self.game
        self._window.on_draw()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: int = 42):
    """Run a random episode for testing"""
    env = ShooterEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)

    terminated = False
    truncated = False
    total = 0.0

    print("Running episode...")

    import time
    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

        if render and env._window:
            env._window.dispatch_events()
            env._window.flip()
            time.sleep(1 / 60)

    print(f"Random episode return: {total:.2f}, score: {info['score']}, steps: {info['step']}")

    env.close()
    return total, info


if __name__ == "__main__":
    run_random_episode(render=True)
