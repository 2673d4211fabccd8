#!/usr/bin/env python3
"""
flappy_client.py

pygame frame driver and renderer. Owns the window, turns raw events into at
most one input per tick, and draws the snapshot returned by the state machine.
"""

import argparse
import math
import random
from typing import Dict, Optional, Sequence

import pygame

from .config import PRESETS, get_preset
from .constants import DEFAULT_SCREEN_HEIGHT, DEFAULT_SCREEN_WIDTH, TICK_RATE
from .data_models import FrameSnapshot, GameState, RestartPolicy, Viewport
from .game_state import GameStateMachine
from .logger import get_logger, setup_logging

log = get_logger(__name__)

INPUT_KEYS = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_UP)

SKY = (135, 206, 235)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GOLD = (255, 215, 0)
ORANGE = (255, 107, 53)
RED = (255, 68, 68)
PIPE_GREEN = (0, 128, 0)
PIPE_BLUE = (0, 0, 255)


class FlappyClient:
    def __init__(self, game: GameStateMachine, width: int, height: int):
        pygame.init()
        self.game = game
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption("Flappy Box")
        self.game.on_viewport_changed(width, height)

        self.clock = pygame.time.Clock()
        self._fonts: Dict[tuple, pygame.font.Font] = {}

    def run(self):
        """The main execution loop: events, one tick, draw."""
        running = True
        while running:
            self.clock.tick(TICK_RATE)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key in INPUT_KEYS:
                    self.game.notify_input()
                elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN):
                    self.game.notify_input()
                elif event.type == pygame.VIDEORESIZE:
                    log.debug("Window resized to %dx%d", event.w, event.h)
                    self.game.on_viewport_changed(event.w, event.h)

            self._draw(self.game.tick())

        pygame.quit()

    # ---------- Rendering ----------

    def _font(self, size: float, bold: bool = False) -> pygame.font.Font:
        key = (int(size), bold)
        if key not in self._fonts:
            font = pygame.font.Font(None, int(size))
            font.set_bold(bold)
            self._fonts[key] = font
        return self._fonts[key]

    def _text(self, text: str, size: float, color, center, bold: bool = False):
        surf = self._font(size, bold).render(text, True, color)
        self.screen.blit(surf, surf.get_rect(center=center))

    def _draw(self, snap: FrameSnapshot):
        screen = self.screen
        screen.fill(SKY)

        if snap.state is GameState.START:
            self._draw_start_screen(snap)
        else:
            self._draw_world(snap)
            self._draw_score(snap)
            if snap.state is GameState.GAME_OVER:
                self._draw_game_over(snap)

        pygame.display.flip()

    def _draw_world(self, snap: FrameSnapshot):
        height = snap.viewport.height
        for pipe in snap.obstacles:
            color = PIPE_BLUE if pipe.passed else PIPE_GREEN
            pygame.draw.rect(self.screen, color, (pipe.x, 0, pipe.width, pipe.gap_top))
            pygame.draw.rect(self.screen, color, (pipe.x, pipe.gap_bottom, pipe.width, height - pipe.gap_bottom))

        a = snap.actor
        pygame.draw.rect(self.screen, GOLD, (a.x, a.y, a.width, a.height))
        pygame.draw.rect(self.screen, ORANGE, (a.x, a.y, a.width, a.height), 2)

    def _draw_score(self, snap: FrameSnapshot):
        size = max(snap.viewport.width * 0.03, 16) * 1.5
        color = WHITE
        if snap.score_pulse > 0:
            size *= 1 + (snap.score_pulse / 30) * 0.3
            color = GOLD
        surf = self._font(size).render(f"Score: {math.floor(snap.display_score)}", True, color)
        self.screen.blit(surf, (snap.viewport.width * 0.02, 10))

    def _draw_start_screen(self, snap: FrameSnapshot):
        w, h = snap.viewport.width, snap.viewport.height
        self._text("FLAPPY BOX", max(w * 0.08, 32) * 1.5, GOLD, (w / 2, h / 3), bold=True)
        self._text("Get Ready to Jump!", max(w * 0.03, 16) * 1.5, WHITE, (w / 2, h / 3 + 50))

        box_y = h / 2 + math.sin(snap.state_ticks * 0.08) * 15
        box = pygame.Rect(0, 0, 50, 50)
        box.center = (int(w / 2), int(box_y))
        pygame.draw.rect(self.screen, GOLD, box)
        pygame.draw.rect(self.screen, ORANGE, box, 3)

        button = pygame.Rect(0, 0, max(w * 0.3, 200), max(h * 0.08, 50))
        button.midtop = (int(w / 2), int(h * 0.7))
        pygame.draw.rect(self.screen, WHITE, button)
        pygame.draw.rect(self.screen, (51, 51, 51), button, 3)
        self._text("TAP TO START", max(w * 0.025, 18) * 1.5, (51, 51, 51), button.center, bold=True)

    def _draw_game_over(self, snap: FrameSnapshot):
        w, h = snap.viewport.width, snap.viewport.height
        overlay = pygame.Surface((int(w), int(h)), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 178))
        self.screen.blit(overlay, (0, 0))

        slide_in = min(snap.state_ticks / 30, 1)
        bounce = 1 + math.sin(snap.state_ticks * 0.1) * 0.1
        title_size = max(w * 0.05, 24) * 1.5 * bounce * slide_in
        if title_size >= 1:
            self._text("GAME OVER", title_size, RED, (w / 2, h / 2 - 50), bold=True)

        if slide_in >= 1:
            restart_size = max(w * 0.03, 16) * 1.5
            self._text(f"Final Score: {snap.score}", restart_size * 1.2, WHITE, (w / 2, h / 2 + 20), bold=True)
            if snap.state_ticks > 30:
                self._text("Tap Anywhere or Press Space to Restart", restart_size, (200, 200, 200),
                           (w / 2, h / 2 + 80))


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Flappy Box.")
    parser.add_argument("--preset", default="classic", choices=sorted(PRESETS),
                        help="Difficulty table to play with.")
    parser.add_argument("--width", type=int, default=DEFAULT_SCREEN_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_SCREEN_HEIGHT)
    parser.add_argument("--seed", type=int, default=None, help="Seed for gap placement.")
    parser.add_argument("--log-level", default="info", help="debug, info, warning or error.")
    parser.add_argument("--back-to-start", action="store_true",
                        help="Return to the start screen after game over instead of replaying.")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None):
    args = _parse_args(argv)
    setup_logging(args.log_level)

    config = get_preset(args.preset)
    if args.back_to_start:
        config = config.with_overrides(restart_policy=RestartPolicy.SHOW_START_SCREEN)

    game = GameStateMachine(
        config=config,
        rng=random.Random(args.seed),
        viewport=Viewport(args.width, args.height),
    )
    log.info("Starting with preset %r", args.preset)
    FlappyClient(game, args.width, args.height).run()


if __name__ == "__main__":
    main()
