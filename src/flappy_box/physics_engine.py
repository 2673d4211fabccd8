"""
physics_engine.py: The single-player world simulation.
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional

from .config import DifficultyConfig
from .constants import (
    DEFAULT_SCREEN_HEIGHT, DEFAULT_SCREEN_WIDTH, DISPLAY_SCORE_STEP, SCORE_PULSE_TICKS
)
from .data_models import (
    Actor, DifficultyState, FrameSnapshot, GameState, Obstacle, ScoreBoard, Viewport,
    snapshot_actor, snapshot_obstacles
)
from .logger import get_logger
from .physics_core import PhysicsCore, sanitize_viewport

log = get_logger(__name__)


@dataclass
class SimulationEngine(PhysicsCore):
    """
    Owns the actor, the obstacle sequence, difficulty and score for one session.
    Inherits kinematics and collision rules from PhysicsCore.

    `rng` only needs a `uniform(a, b)` method; pass a seeded `random.Random`
    for reproducible gap placement.
    """
    config: DifficultyConfig = field(default_factory=DifficultyConfig)
    rng: random.Random = field(default_factory=random.Random)
    viewport: Viewport = field(
        default_factory=lambda: Viewport(DEFAULT_SCREEN_WIDTH, DEFAULT_SCREEN_HEIGHT))

    actor: Actor = field(default_factory=Actor, init=False)
    obstacles: List[Obstacle] = field(default_factory=list, init=False)
    difficulty: DifficultyState = field(init=False)
    scoreboard: ScoreBoard = field(default_factory=ScoreBoard, init=False)
    spawn_timer: int = field(default=0, init=False)
    last_gap_top: float = field(default=0.0, init=False)
    tick_count: int = field(default=0, init=False)
    crashed: bool = field(default=False, init=False)

    def __post_init__(self):
        self.viewport = sanitize_viewport(self.viewport.width, self.viewport.height)
        self.reset()

    @property
    def score(self) -> int:
        return self.scoreboard.score

    def reset(self, viewport: Optional[Viewport] = None):
        """Starts a fresh session, recomputing actor physics from the viewport."""
        if viewport is not None:
            self.viewport = sanitize_viewport(viewport.width, viewport.height)

        self.actor = Actor()
        self.scale_actor(self.actor, self.viewport)
        self.place_actor(self.actor, self.viewport)

        self.obstacles = []
        self.difficulty = DifficultyState(
            speed=self.config.base_speed,
            spawn_interval=self.config.base_spawn_interval,
        )
        self.scoreboard = ScoreBoard()
        self.spawn_timer = 0
        self.last_gap_top = self.viewport.height / 2
        self.tick_count = 0
        self.crashed = False

    def resize(self, width: float, height: float):
        """
        Applies a new surface size. The actor is re-sized, re-anchored and given
        physics for the new height; obstacles keep their world coordinates and
        score/difficulty are untouched.
        """
        self.viewport = sanitize_viewport(width, height)
        self.scale_actor(self.actor, self.viewport)
        self.place_actor(self.actor, self.viewport)
        if self.actor.velocity > self.actor.terminal_velocity:
            self.actor.velocity = self.actor.terminal_velocity

    def jump(self):
        if self.crashed:
            return
        self.actor.velocity = self.flap(self.actor)

    def advance(self) -> bool:
        """
        The per-tick update. Returns True when the actor has collided; after
        that the engine is frozen until reset().
        """
        if self.crashed:
            return True
        self.tick_count += 1

        # 1. Actor
        self.apply_gravity_and_movement(self.actor)

        # 2. Scroll obstacles
        for obstacle in self.obstacles:
            if self.config.obstacles_keep_spawn_speed:
                obstacle.x -= obstacle.speed
            else:
                obstacle.x -= self.difficulty.speed

        # 3. Spawn
        self.spawn_timer += 1
        if self.spawn_timer >= self.difficulty.spawn_interval:
            self._spawn_obstacle()

        # 4. Cleanup
        self.cleanup()

        # 5. Collision
        if self.check_collision(self.actor, self.obstacles, self.viewport):
            self.crashed = True
            log.info("Game over at tick %d, final score %d", self.tick_count, self.score)
            return True

        # 6. Score & difficulty
        self._update_score()
        self._animate_score()
        return False

    def cleanup(self) -> int:
        """Drops obstacles whose trailing edge has left the viewport."""
        before = len(self.obstacles)
        self.obstacles = [o for o in self.obstacles if not self.is_off_screen(o)]
        removed = before - len(self.obstacles)
        if removed:
            log.debug("Removed %d off-screen obstacle(s), %d left", removed, len(self.obstacles))
        return removed

    def _spawn_obstacle(self):
        """Appends a new obstacle at the right edge, its gap walked from the last one."""
        spacing = self.obstacle_spacing(self.viewport)
        gap_top = self.next_gap_top(self.last_gap_top, spacing, self.viewport, self.rng)
        self.obstacles.append(Obstacle(
            x=self.viewport.width,
            width=self.obstacle_width(self.viewport),
            gap_top=gap_top,
            spacing=spacing,
            speed=self.difficulty.speed,
        ))
        self.last_gap_top = gap_top
        self.spawn_timer = 0
        log.debug("New obstacle spawned, total obstacles: %d", len(self.obstacles))

    def _update_score(self):
        for obstacle in self.obstacles:
            if obstacle.passed or not self.has_passed(self.actor, obstacle):
                continue
            obstacle.passed = True
            self.scoreboard.score += 1
            self.scoreboard.pulse = SCORE_PULSE_TICKS
            log.info("Score increased: %d", self.score)

            if self.score % self.config.score_step == 0:
                self._tighten_difficulty()

    def _tighten_difficulty(self):
        cfg = self.config
        diff = self.difficulty
        diff.speed = min(diff.speed + cfg.speed_increment, cfg.max_speed)
        diff.spawn_interval = max(diff.spawn_interval - cfg.spawn_interval_decrement,
                                  cfg.min_spawn_interval)
        log.info("Difficulty increased at score %d: speed=%.1f, interval=%d",
                 self.score, diff.speed, diff.spawn_interval)

        if not diff.maxed and diff.speed >= cfg.max_speed and diff.spawn_interval <= cfg.min_spawn_interval:
            diff.maxed = True
            log.info("Maximum difficulty reached")

    def _animate_score(self):
        board = self.scoreboard
        if board.display_score < board.score:
            board.display_score = min(board.display_score + DISPLAY_SCORE_STEP, float(board.score))
        if board.pulse > 0:
            board.pulse -= 1

    def snapshot(self, state: GameState, state_ticks: int = 0) -> FrameSnapshot:
        """Read-only view of the session for a renderer."""
        return FrameSnapshot(
            state=state,
            tick=self.tick_count,
            state_ticks=state_ticks,
            viewport=self.viewport,
            actor=snapshot_actor(self.actor),
            obstacles=snapshot_obstacles(self.obstacles),
            score=self.scoreboard.score,
            display_score=self.scoreboard.display_score,
            score_pulse=self.scoreboard.pulse,
            speed=self.difficulty.speed,
            spawn_interval=self.difficulty.spawn_interval,
            max_difficulty=self.difficulty.maxed,
            collided=self.crashed,
        )
