"""Window and main loop."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

import pygame

from .game import Game

SCREEN_WIDTH = 300
SCREEN_HEIGHT = 600
TARGET_FPS = 60
DARK_BLUE = (44, 44, 127, 255)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="blockfall", description="Falling-block puzzle game.")
    parser.parse_args(argv)

    pygame.display.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("TETRIS")
        clock = pygame.time.Clock()
        game = Game()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    game.handle_input(event.key)
            if not running:
                break
            screen.fill(DARK_BLUE)
            game.draw(screen)
            pygame.display.flip()
            clock.tick(TARGET_FPS)
    finally:
        pygame.display.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())