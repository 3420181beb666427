"""Game state: the grid, the bag of pieces and the falling block."""

from __future__ import annotations

import random

import pygame

from .block import Block, IBlock, JBlock, LBlock, OBlock, SBlock, TBlock, ZBlock
from .grid import Grid


class Game:
    """Holds the grid and the current and next blocks, and applies player moves."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.grid = Grid()
        self.blocks: list[Block] = self.get_all_blocks()
        self.current_block = self.get_random_block()
        self.next_block = self.get_random_block()

    def draw(self, surface) -> None:
        """Paint the grid and the falling block."""
        self.grid.draw(surface)
        self.current_block.draw(surface)

    def get_random_block(self) -> Block:
        """Take a random block from the bag, refilling it when empty."""
        if not self.blocks:
            self.blocks = self.get_all_blocks()
        return self.blocks.pop(self._rng.randrange(len(self.blocks)))

    def get_all_blocks(self) -> list[Block]:
        """Return one fresh block of every kind."""
        return [IBlock(), JBlock(), LBlock(), OBlock(), SBlock(), TBlock(), ZBlock()]

    def _is_block_outside(self) -> bool:
        return any(
            self.grid.is_cell_outside(pos.row, pos.column)
            for pos in self.current_block.get_cell_positions()
        )

    def rotate_block(self) -> None:
        """Rotate the falling block unless that would leave the grid."""
        self.current_block.rotate()
        if self._is_block_outside():
            self.current_block.undo_rotation()

    def handle_input(self, key: int | None) -> None:
        """Apply the move bound to a pressed key; other keys are ignored."""
        actions = {
            pygame.K_LEFT: self.move_block_left,
            pygame.K_RIGHT: self.move_block_right,
            pygame.K_DOWN: self.move_block_down,
            pygame.K_UP: self.rotate_block,
        }
        action = actions.get(key)
        if action is not None:
            action()

    def _try_move(self, rows: int, columns: int) -> None:
        self.current_block.move(rows, columns)
        if self._is_block_outside():
            self.current_block.move(-rows, -columns)

    def move_block_left(self) -> None:
        """Shift the falling block one column left if it stays inside."""
        self._try_move(0, -1)

    def move_block_right(self) -> None:
        """Shift the falling block one column right if it stays inside."""
        self._try_move(0, 1)

    def move_block_down(self) -> None:
        """Shift the falling block one row down if it stays inside."""
        self._try_move(1, 0)