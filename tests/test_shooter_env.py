import numpy as np
import pytest

from game.shooter import GameConfig, ShooterEnv
from rl.configs.shooter_config import ENV_CONFIG, REWARD_CONFIGS, env_kwargs
from rl.metrics_callback import MetricsCallback, shot_accuracy
from rl.wrappers import MultiDiscreteToDiscreteWrapper

IDLE = np.array([0, 0])


def test_reset_contract():
    env = ShooterEnv()
    obs, info = env.reset(seed=0)

    assert obs.shape == env.observation_space.shape == (15,)
    assert obs.dtype == np.float32
    assert env.observation_space.contains(obs)
    assert info["score"] == 0
    assert info["num_enemies"] == 5
    assert info["spawn_interval_ms"] == 1000


def test_step_before_reset_raises():
    with pytest.raises(RuntimeError):
        ShooterEnv().step(IDLE)


def test_unknown_difficulty_raises():
    with pytest.raises(ValueError):
        ShooterEnv(difficulty="nightmare")


def test_idle_agent_loses_when_the_opening_row_lands():
    env = ShooterEnv()
    env.reset(seed=3)

    steps = 0
    terminated = truncated = False
    while not (terminated or truncated):
        obs, reward, terminated, truncated, info = env.step(IDLE)
        steps += 1
        assert env.observation_space.contains(obs)

    assert terminated and not truncated
    assert steps == 511
    assert reward == -5.0
    assert info["score"] == 0


def test_same_seed_same_episode():
    rng = np.random.default_rng(0)
    actions = [rng.integers([3, 2]) for _ in range(400)]

    def rollout(seed):
        env = ShooterEnv()
        obs, _ = env.reset(seed=seed)
        trace = [obs]
        for a in actions:
            obs, _, terminated, truncated, _ = env.step(a)
            trace.append(obs)
            if terminated or truncated:
                break
        return np.stack(trace)

    np.testing.assert_array_equal(rollout(11), rollout(11))


def test_firing_costs_shot_penalty():
    env = ShooterEnv(reward_config={"R_SHOT": 0.5, "R_SURVIVE": 0.0})
    env.reset(seed=0)

    _, reward, _, _, info = env.step(np.array([0, 1]))

    assert reward == -0.5
    assert info["shots"] == 1
    assert info["num_bullets"] == 1


def test_env_accepts_training_config():
    env = ShooterEnv(**env_kwargs("marksman"))
    assert env.rewards["R_KILL"] == REWARD_CONFIGS["marksman"]["R_KILL"]
    assert env.config == GameConfig(fire_cooldown_ms=ENV_CONFIG["fire_cooldown_ms"])

    with pytest.raises(ValueError):
        env_kwargs("reckless")


@pytest.mark.parametrize("flat, expected", [(0, [0, 0]), (1, [0, 1]), (3, [1, 1]), (5, [2, 1])])
def test_discrete_wrapper_decodes_actions(flat, expected):
    env = MultiDiscreteToDiscreteWrapper(ShooterEnv())
    assert env.action_space.n == 6
    assert env.action(flat).tolist() == expected


def test_metrics_summary(tmp_path):
    callback = MetricsCallback(log_dir=str(tmp_path), algo_name="ppo", verbose=0)
    callback.record_episode({"episode": {"r": 2.0, "l": 600}, "score": 30, "kills": 3, "shots": 12})
    callback.record_episode({"episode": {"r": 4.0, "l": 900}, "score": 50, "kills": 5, "shots": 4})

    summary = callback.get_summary()
    assert summary["total_episodes"] == 2
    assert summary["mean_reward"] == pytest.approx(3.0)
    assert summary["mean_score"] == pytest.approx(40.0)
    assert summary["best_score"] == 50
    assert summary["accuracy"] == pytest.approx(0.5)


def test_accuracy_without_shots():
    assert shot_accuracy(0, 0) == 0.0


def test_surviving_a_step_earns_survive_reward():
    env = ShooterEnv(reward_config={"R_SURVIVE": 0.25})
    env.reset(seed=0)

    _, reward, terminated, _, _ = env.step(IDLE)

    assert not terminated
    assert reward == 0.25
