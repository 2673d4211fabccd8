"""
game_state.py: Start / playing / game-over flow around one SimulationEngine.
"""

from typing import Iterable, List, Optional

from .config import DifficultyConfig
from .data_models import FrameSnapshot, GameState, RestartPolicy, Viewport
from .logger import get_logger
from .physics_engine import SimulationEngine

log = get_logger(__name__)


class GameStateMachine:
    """
    Routes the single input action and drives the engine once per tick.

    Inputs raised between ticks collapse into one action, so a burst of key
    and touch events in the same frame never produces a double jump.
    """

    def __init__(
        self,
        engine: Optional[SimulationEngine] = None,
        *,
        config: Optional[DifficultyConfig] = None,
        rng=None,
        viewport: Optional[Viewport] = None,
        restart_policy: Optional[RestartPolicy] = None,
    ):
        if engine is None:
            kwargs = {}
            if config is not None:
                kwargs["config"] = config
            if rng is not None:
                kwargs["rng"] = rng
            if viewport is not None:
                kwargs["viewport"] = viewport
            engine = SimulationEngine(**kwargs)
        self.engine = engine
        self.restart_policy = restart_policy or engine.config.restart_policy

        self.state = GameState.START
        self.state_ticks = 0
        self._pending_input = False

    def notify_input(self):
        """Edge-triggered user action; idempotent until the next tick consumes it."""
        self._pending_input = True

    def on_viewport_changed(self, width: float, height: float):
        self.engine.resize(width, height)

    def tick(self, input_event: bool = False) -> FrameSnapshot:
        """Advances one frame and returns what the renderer should draw."""
        pressed = input_event or self._pending_input
        self._pending_input = False

        if pressed:
            self._handle_input()

        if self.state is GameState.PLAYING:
            if self.engine.advance():
                self._transition(GameState.GAME_OVER)
        elif self.state is GameState.START:
            self.engine.cleanup()
        # GAME_OVER: frozen until the next input

        self.state_ticks += 1
        return self.snapshot()

    def run(self, inputs: Iterable[bool]) -> List[FrameSnapshot]:
        """Headless driver: one tick per element of `inputs`."""
        return [self.tick(pressed) for pressed in inputs]

    def snapshot(self) -> FrameSnapshot:
        return self.engine.snapshot(self.state, self.state_ticks)

    def _handle_input(self):
        if self.state is GameState.START:
            self._transition(GameState.PLAYING)
            self.engine.jump()
        elif self.state is GameState.PLAYING:
            self.engine.jump()
        elif self.state is GameState.GAME_OVER:
            self.engine.reset()
            log.info("Restart requested")
            if self.restart_policy is RestartPolicy.SHOW_START_SCREEN:
                self._transition(GameState.START)
            else:
                self._transition(GameState.PLAYING)

    def _transition(self, new_state: GameState):
        log.info("State %s -> %s", self.state.value, new_state.value)
        self.state = new_state
        self.state_ticks = 0
