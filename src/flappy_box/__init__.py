"""
flappy_box: a single-screen infinite-runner core with a pygame front end.
"""

from .config import PRESETS, DifficultyConfig, get_preset
from .data_models import FrameSnapshot, GameState, RestartPolicy, Viewport
from .game_state import GameStateMachine
from .physics_core import PhysicsCore
from .physics_engine import SimulationEngine

__all__ = [
    "PRESETS", "DifficultyConfig", "get_preset",
    "FrameSnapshot", "GameState", "RestartPolicy", "Viewport",
    "GameStateMachine", "PhysicsCore", "SimulationEngine",
]
