"""
Training configuration for the arcade shooter environment
Reward shaping presets, algorithm hyperparameters and training settings
"""

# Environment parameters
ENV_CONFIG = {
    # "render_mode": None,  # Don't render during training
    "width": 400,
    "height": 600,
    "dt_ms": 1000 / 60,
    "max_steps": 3600,  # 60 seconds at 60 FPS
    "k_enemies": 5,
    "fire_cooldown_ms": 300,
    "difficulty": "default",
}

# ==============================================================================
# REWARD SHAPING CONFIGURATIONS
# ==============================================================================

# BASELINE: kills matter, losing the run hurts
REWARD_CONFIG_BASELINE = {
    "name": "baseline",
    "description": "Balanced kill reward and game-over penalty",
    "R_KILL": 1.0,       # Reward per enemy destroyed
    "R_SHOT": 0.01,      # Penalty per bullet fired
    "R_SURVIVE": 0.001,  # Reward per step alive
    "R_GAME_OVER": 5.0,  # Penalty when an enemy reaches the bottom
}

# SURVIVAL: keep the field clear for as long as possible
REWARD_CONFIG_SURVIVAL = {
    "name": "survival",
    "description": "Prioritize staying alive over scoring",
    "R_KILL": 0.5,
    "R_SHOT": 0.0,       # Free shots - spraying is fine
    "R_SURVIVE": 0.01,   # MUCH higher per-step reward
    "R_GAME_OVER": 10.0,
}

# MARKSMAN: reward accuracy
REWARD_CONFIG_MARKSMAN = {
    "name": "marksman",
    "description": "Higher kill reward, shots are expensive",
    "R_KILL": 2.0,
    "R_SHOT": 0.1,       # Missed shots cost
    "R_SURVIVE": 0.0,
    "R_GAME_OVER": 5.0,
}

REWARD_CONFIGS = {
    "baseline": REWARD_CONFIG_BASELINE,
    "survival": REWARD_CONFIG_SURVIVAL,
    "marksman": REWARD_CONFIG_MARKSMAN,
}

# ==============================================================================
# ALGORITHM HYPERPARAMETERS
# ==============================================================================

PPO_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 3e-4,
    "n_steps": 1024,
    "batch_size": 256,
    "n_epochs": 10,
    "gamma": 0.99,
    "gae_lambda": 0.95,
    "clip_range": 0.2,
    "ent_coef": 0.01,
    "vf_coef": 0.5,
    "max_grad_norm": 0.5,
    "verbose": 1,
}

DQN_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 1e-4,
    "buffer_size": 100_000,
    "learning_starts": 1000,
    "batch_size": 128,
    "tau": 1.0,
    "gamma": 0.99,
    "train_freq": 4,
    "gradient_steps": 1,
    "target_update_interval": 1000,
    "exploration_fraction": 0.1,
    "exploration_initial_eps": 1.0,
    "exploration_final_eps": 0.05,
    "verbose": 1,
}

# ==============================================================================
# TRAINING SETTINGS
# ==============================================================================

TRAINING_CONFIG = {
    "total_timesteps": 500_000,
    "save_freq": 10_000,
    "eval_freq": 5_000,
    "log_dir": "./logs",
    "model_dir": "./models",
    "tensorboard_log": "./tensorboard_logs",
}


def env_kwargs(reward_name: str = "baseline") -> dict:
    """ENV_CONFIG plus the reward weights of a named preset"""
    if reward_name not in REWARD_CONFIGS:
        raise ValueError(f"Unknown reward config: {reward_name}")
    weights = {k: v for k, v in REWARD_CONFIGS[reward_name].items() if k.startswith("R_")}
    return {**ENV_CONFIG, "reward_config": weights}
