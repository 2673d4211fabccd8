"""
config.py: Difficulty tables. Each historic game variant is one preset.
"""

from dataclasses import dataclass, fields, replace
from typing import Dict

from . import constants as C
from .data_models import RestartPolicy


@dataclass(frozen=True)
class DifficultyConfig:
    """
    Every tuning constant the simulation reads. Speeds and timers are per tick,
    ratios are fractions of the viewport measured at the moment of use.
    """
    # Scroll speed
    base_speed: float = C.BASE_SPEED
    max_speed: float = C.MAX_SPEED
    speed_increment: float = C.SPEED_INCREMENT

    # Spawning
    base_spawn_interval: int = C.BASE_SPAWN_INTERVAL
    min_spawn_interval: int = C.MIN_SPAWN_INTERVAL
    spawn_interval_decrement: int = C.SPAWN_INTERVAL_DECREMENT
    score_step: int = C.SCORE_STEP

    # Gap geometry
    spacing_ratio: float = C.SPACING_RATIO
    min_spacing: float = C.MIN_SPACING
    margin_ratio: float = C.MARGIN_RATIO
    variation_spacing_ratio: float = C.VARIATION_SPACING_RATIO
    variation_height_ratio: float = C.VARIATION_HEIGHT_RATIO
    obstacle_width_ratio: float = C.OBSTACLE_WIDTH_RATIO
    obstacle_width_max_ratio: float = C.OBSTACLE_WIDTH_MAX_RATIO
    obstacle_width_cap: float = C.OBSTACLE_WIDTH_CAP

    # Actor & physics formulas
    actor_x_ratio: float = C.ACTOR_X_RATIO
    actor_size_ratio: float = C.ACTOR_SIZE_RATIO
    actor_min_size: float = C.ACTOR_MIN_SIZE
    gravity_ratio: float = C.GRAVITY_RATIO
    gravity_min: float = C.GRAVITY_MIN
    jump_ratio: float = C.JUMP_RATIO
    jump_min: float = C.JUMP_MIN
    terminal_velocity_ratio: float = C.TERMINAL_VELOCITY_RATIO

    # Policies
    obstacles_keep_spawn_speed: bool = False
    restart_policy: RestartPolicy = RestartPolicy.PLAY_IMMEDIATELY

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, (int, float)) and not isinstance(value, bool) and value < 0:
                raise ValueError(f"{f.name} must not be negative, got {value}")
        if self.max_speed < self.base_speed:
            raise ValueError("max_speed must be >= base_speed")
        if self.min_spawn_interval < 1:
            raise ValueError("min_spawn_interval must be at least 1 tick")
        if self.min_spawn_interval > self.base_spawn_interval:
            raise ValueError("min_spawn_interval must be <= base_spawn_interval")
        if self.score_step < 1:
            raise ValueError("score_step must be at least 1")
        if self.margin_ratio >= 0.5:
            raise ValueError("margin_ratio must leave room for a gap")

    def with_overrides(self, **changes) -> "DifficultyConfig":
        return replace(self, **changes)


PRESETS: Dict[str, DifficultyConfig] = {
    # The box variant: tightens every 3 points.
    "classic": DifficultyConfig(),
    "steady": DifficultyConfig(score_step=5),
    "marathon": DifficultyConfig(score_step=10, speed_increment=0.5, spawn_interval_decrement=3),
    "rush": DifficultyConfig(base_speed=4.0, max_speed=8.0, base_spawn_interval=75, min_spawn_interval=40, score_step=5),
    "arcade": DifficultyConfig(score_step=3, restart_policy=RestartPolicy.SHOW_START_SCREEN),
}


def get_preset(name: str) -> DifficultyConfig:
    """Returns the named preset or raises KeyError listing the valid names."""
    try:
        return PRESETS[name]
    except KeyError:
        raise KeyError(f"Unknown preset {name!r}; choose one of {', '.join(sorted(PRESETS))}") from None
