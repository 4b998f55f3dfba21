#!/usr/bin/env python3
"""
flappy_client.py

pygame host for Flappy Plane: window, frame clock, input adapter and CLI.
"""

import argparse
import logging
import os
import sqlite3
import sys
from typing import Optional

import pygame

from .constants import DB_FILE, DB_ENV_VAR, RENDER_FPS
from .data_models import GameConfig, InputAction
from .frame_loop import FrameScheduler, GameLoop
from .game_engine import GameEngine
from .logger import setup_logging
from .renderer import Renderer
from .score_db import ScoreStore

log = logging.getLogger(__name__)


def is_action_event(event: pygame.event.Event) -> bool:
    """Maps raw space / click / touch events to the single game action."""
    if event.type == pygame.KEYDOWN:
        return event.key == pygame.K_SPACE
    if event.type == pygame.MOUSEBUTTONDOWN:
        # Touches also arrive as synthesized mouse events; count them once
        return event.button == 1 and not getattr(event, "touch", False)
    return event.type == pygame.FINGERDOWN


def is_quit_event(event: pygame.event.Event) -> bool:
    if event.type == pygame.QUIT:
        return True
    return event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE


class FlappyClient:
    def __init__(self, store: ScoreStore, config: GameConfig = None):
        pygame.init()
        self.config = config or GameConfig()
        self.store = store
        self.player_name = store.get_player_name()

        self.screen = pygame.display.set_mode(
            (self.config.screen_width, self.config.screen_height))
        pygame.display.set_caption(f"Flappy Plane: {self.player_name}")

        # --- Game Logic ---
        self.engine = GameEngine(store, self.player_name, self.config)
        self.renderer = Renderer(self.screen, self.config)
        self.scheduler = FrameScheduler()
        self.loop = GameLoop(self.engine, self.scheduler, self.renderer.draw)

        self.clock = pygame.time.Clock()
        self.running = False

    def handle_event(self, event: pygame.event.Event):
        if is_quit_event(event):
            self.running = False
            return
        if not is_action_event(event):
            return

        action = self.loop.handle_input()
        if action is InputAction.RESTART:
            log.debug("Restart requested")

    def run(self):
        """The main client execution loop: one simulation step per displayed frame."""
        log.info("Welcome, %s. Best score: %d", self.player_name, self.engine.state.player_best_score)
        self.running = True
        self.loop.start()
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)
            if not self.running:
                break

            self.scheduler.run_frame()
            pygame.display.flip()
            self.clock.tick(RENDER_FPS)

        self.loop.stop()
        pygame.quit()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="flappy-plane", description="Flappy Plane arcade game")
    parser.add_argument("--player", help="store a new player name before starting")
    parser.add_argument("--db", default=os.environ.get(DB_ENV_VAR, DB_FILE),
                        help=f"score database file (default: ${DB_ENV_VAR} or {DB_FILE})")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv: Optional[list] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        store = ScoreStore(args.db)
    except sqlite3.Error as e:
        log.error("Could not open score database %s: %s", args.db, e)
        return 1

    with store:
        if args.player:
            store.set_player_name(args.player)
        FlappyClient(store).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
