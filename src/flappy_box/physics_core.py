"""
physics_core.py: The shared, deterministic kinematic functions and collision logic.
"""

import math
from typing import Iterable, Optional, Tuple

from .config import DifficultyConfig
from .constants import MIN_VIEWPORT_SIZE
from .data_models import Actor, Obstacle, Viewport
from .logger import get_logger

log = get_logger(__name__)


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def sanitize_viewport(width: float, height: float) -> Viewport:
    """Clamps non-finite or too-small surface sizes to MIN_VIEWPORT_SIZE."""
    safe = []
    for name, value in (("width", width), ("height", height)):
        try:
            value = float(value)
        except (TypeError, ValueError):
            value = math.nan
        if not math.isfinite(value) or value < MIN_VIEWPORT_SIZE:
            log.warning("Viewport %s %r clamped to %s", name, value, MIN_VIEWPORT_SIZE)
            value = MIN_VIEWPORT_SIZE
        safe.append(value)
    return Viewport(safe[0], safe[1])


class PhysicsCore:
    """
    Stateless per-tick rules. Every proportional quantity is derived from the
    viewport passed in, never from a cached scale factor.
    """

    def __init__(self, config: Optional[DifficultyConfig] = None):
        self.config = config or DifficultyConfig()

    # ---------- Actor ----------

    def scale_actor(self, actor: Actor, viewport: Viewport):
        """Recomputes the actor's square size and its physics for this viewport."""
        cfg = self.config
        size = max(viewport.min_dimension * cfg.actor_size_ratio, cfg.actor_min_size)
        actor.width = size
        actor.height = size
        actor.gravity = max(viewport.height * cfg.gravity_ratio, cfg.gravity_min)
        actor.jump_impulse = -max(viewport.height * cfg.jump_ratio, cfg.jump_min)
        actor.terminal_velocity = viewport.height * cfg.terminal_velocity_ratio

    def place_actor(self, actor: Actor, viewport: Viewport):
        """Moves the actor to its anchor: fixed horizontal offset, vertical centre."""
        actor.x = viewport.width * self.config.actor_x_ratio
        actor.y = viewport.height / 2

    def apply_gravity_and_movement(self, actor: Actor):
        """
        Advances the actor by one tick: velocity, then position, then the
        terminal-velocity cap and the ceiling clamp.
        """
        actor.velocity += actor.gravity
        actor.y += actor.velocity

        if actor.velocity > actor.terminal_velocity:
            actor.velocity = actor.terminal_velocity

        if actor.y < 0:
            actor.y = 0.0
            actor.velocity = 0.0

    def flap(self, actor: Actor) -> float:
        """Returns the instantaneous velocity after a jump."""
        return actor.jump_impulse

    # ---------- Obstacles ----------

    def obstacle_spacing(self, viewport: Viewport) -> float:
        return max(viewport.height * self.config.spacing_ratio, self.config.min_spacing)

    def obstacle_width(self, viewport: Viewport) -> float:
        cfg = self.config
        return max(
            viewport.width * cfg.obstacle_width_ratio,
            min(viewport.width * cfg.obstacle_width_max_ratio, cfg.obstacle_width_cap),
        )

    def gap_bounds(self, spacing: float, viewport: Viewport) -> Tuple[float, float]:
        """Range of gap tops that keeps the whole gap plus margins on screen."""
        margin = viewport.height * self.config.margin_ratio
        min_top = margin
        max_top = viewport.height - spacing - margin
        if max_top < min_top:
            # Too short for margins: centre the gap instead of inverting the range
            min_top = max_top = max((viewport.height - spacing) / 2, 0.0)
        return min_top, max_top

    def gap_variation(self, spacing: float, viewport: Viewport) -> float:
        cfg = self.config
        return min(spacing * cfg.variation_spacing_ratio, viewport.height * cfg.variation_height_ratio)

    def next_gap_top(self, previous_top: float, spacing: float, viewport: Viewport, rng) -> float:
        """Bounded random walk from the previous obstacle's gap."""
        variation = self.gap_variation(spacing, viewport)
        min_top, max_top = self.gap_bounds(spacing, viewport)
        step = rng.uniform(-variation / 2, variation / 2)
        return clamp(previous_top + step, min_top, max_top)

    # ---------- Collision & scoring ----------

    def hits_floor(self, actor: Actor, viewport: Viewport) -> bool:
        return actor.bottom > viewport.height

    def hits_obstacle(self, actor: Actor, obstacle: Obstacle) -> bool:
        overlaps_x = actor.right > obstacle.x and actor.x < obstacle.right
        outside_gap = actor.y < obstacle.gap_top or actor.bottom > obstacle.gap_bottom
        return overlaps_x and outside_gap

    def check_collision(self, actor: Actor, obstacles: Iterable[Obstacle], viewport: Viewport) -> bool:
        """Checks for collisions with the floor or any obstacle. There is no ceiling."""
        if self.hits_floor(actor, viewport):
            return True
        return any(self.hits_obstacle(actor, o) for o in obstacles)

    def has_passed(self, actor: Actor, obstacle: Obstacle) -> bool:
        return obstacle.right < actor.x

    def is_off_screen(self, obstacle: Obstacle) -> bool:
        return obstacle.right < 0
