"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple


class GameState(str, Enum):
    START = "start"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class RestartPolicy(str, Enum):
    """What a restart input does from the game-over screen."""
    PLAY_IMMEDIATELY = "play_immediately"
    SHOW_START_SCREEN = "show_start_screen"


@dataclass(frozen=True)
class Viewport:
    """Logical drawing surface size in device pixels."""
    width: float
    height: float

    @property
    def min_dimension(self) -> float:
        return min(self.width, self.height)


@dataclass
class Actor:
    """The falling object. Owned by the simulation engine."""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    velocity: float = 0.0

    # Proportional physics, recomputed from the viewport on reset/resize
    gravity: float = 0.0
    jump_impulse: float = 0.0
    terminal_velocity: float = 0.0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass
class Obstacle:
    """A top/bottom barrier pair with a vertical gap."""
    x: float
    width: float
    gap_top: float
    spacing: float
    speed: float                 # Scroll speed captured at spawn time
    passed: bool = False

    @property
    def gap_bottom(self) -> float:
        return self.gap_top + self.spacing

    @property
    def right(self) -> float:
        return self.x + self.width


@dataclass
class DifficultyState:
    speed: float
    spawn_interval: int
    maxed: bool = False


@dataclass
class ScoreBoard:
    """Authoritative score plus the cosmetic values that trail it."""
    score: int = 0
    display_score: float = 0.0
    pulse: int = 0


# ---------- Read-only snapshots handed to renderers ----------

@dataclass(frozen=True)
class ActorSnapshot:
    x: float
    y: float
    width: float
    height: float
    velocity: float


@dataclass(frozen=True)
class ObstacleSnapshot:
    x: float
    width: float
    gap_top: float
    gap_bottom: float
    passed: bool


@dataclass(frozen=True)
class FrameSnapshot:
    """Everything a renderer needs to draw one frame."""
    state: GameState
    tick: int
    state_ticks: int
    viewport: Viewport
    actor: ActorSnapshot
    obstacles: Tuple[ObstacleSnapshot, ...]
    score: int
    display_score: float
    score_pulse: int
    speed: float
    spawn_interval: int
    max_difficulty: bool = False
    collided: bool = False

    def to_dict(self) -> dict:
        """Prepares a minimal, rounded state dictionary for headless consumers."""
        return {
            "state": self.state.value,
            "tick": self.tick,
            "viewport": [round(self.viewport.width, 2), round(self.viewport.height, 2)],
            "actor": {
                "x": round(self.actor.x, 2),
                "y": round(self.actor.y, 2),
                "size": [round(self.actor.width, 2), round(self.actor.height, 2)],
                "v": round(self.actor.velocity, 2),
            },
            "obstacles": [
                {
                    "x": round(o.x, 2),
                    "w": round(o.width, 2),
                    "gap": [round(o.gap_top, 2), round(o.gap_bottom, 2)],
                    "passed": o.passed,
                }
                for o in self.obstacles
            ],
            "score": self.score,
            "difficulty": {"speed": round(self.speed, 2), "interval": self.spawn_interval},
        }


def snapshot_obstacles(obstacles: List[Obstacle]) -> Tuple[ObstacleSnapshot, ...]:
    return tuple(
        ObstacleSnapshot(o.x, o.width, o.gap_top, o.gap_bottom, o.passed)
        for o in obstacles
    )


def snapshot_actor(actor: Actor) -> ActorSnapshot:
    return ActorSnapshot(actor.x, actor.y, actor.width, actor.height, actor.velocity)
