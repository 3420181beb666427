"""Falling pieces and their rotation states."""

from __future__ import annotations

from typing import ClassVar

from .colors import get_cell_colors
from .position import Position

CELL_SIZE = 30

Shape = tuple[tuple[int, int], ...]


class Block:
    """A piece made of cells, with a rotation state and an offset on the grid."""

    block_id: ClassVar[int] = 0
    shapes: ClassVar[tuple[Shape, ...]] = ()
    spawn_offset: ClassVar[tuple[int, int]] = (0, 0)

    def __init__(self) -> None:
        self.cell_size = CELL_SIZE
        self.rotation_state = 0
        self.colors = get_cell_colors()
        self.row_offset = 0
        self.column_offset = 0
        self.id = self.block_id
        self.cells: dict[int, list[Position]] = {
            state: [Position(row, column) for row, column in shape]
            for state, shape in enumerate(self.shapes)
        }
        self.move(*self.spawn_offset)

    def draw(self, surface) -> None:
        """Paint the block's cells onto a drawing surface."""
        color = self.colors[self.id]
        size = self.cell_size
        for pos in self.get_cell_positions():
            surface.fill(color, (pos.column * size + 1, pos.row * size + 1, size - 1, size - 1))

    def move(self, rows: int, columns: int) -> None:
        """Shift the block by the given number of rows and columns."""
        self.row_offset += rows
        self.column_offset += columns

    def get_cell_positions(self) -> list[Position]:
        """Return the grid positions the block currently covers."""
        return [
            Position(pos.row + self.row_offset, pos.column + self.column_offset)
            for pos in self.cells.get(self.rotation_state, [])
        ]

    def rotate(self) -> None:
        """Advance to the next rotation state, wrapping around."""
        self.rotation_state += 1
        if self.rotation_state == len(self.cells):
            self.rotation_state = 0

    def undo_rotation(self) -> None:
        """Step back to the previous rotation state, wrapping around."""
        self.rotation_state -= 1
        if self.rotation_state == -1:
            self.rotation_state = len(self.cells) - 1


class LBlock(Block):
    block_id = 1
    shapes = (
        ((0, 2), (1, 0), (1, 1), (1, 2)),
        ((0, 1), (1, 1), (2, 1), (2, 2)),
        ((1, 0), (1, 1), (1, 2), (2, 0)),
        ((0, 0), (0, 1), (1, 1), (2, 1)),
    )
    spawn_offset = (0, 3)


class JBlock(Block):
    block_id = 2
    shapes = (
        ((0, 0), (1, 0), (1, 1), (1, 2)),
        ((0, 1), (0, 2), (1, 1), (2, 1)),
        ((1, 0), (1, 1), (1, 2), (2, 2)),
        ((0, 1), (1, 1), (2, 0), (2, 1)),
    )
    spawn_offset = (0, 3)


class IBlock(Block):
    block_id = 3
    shapes = (
        ((1, 0), (1, 1), (1, 2), (1, 3)),
        ((0, 2), (1, 2), (2, 2), (3, 2)),
        ((2, 0), (2, 1), (2, 2), (2, 3)),
        ((0, 1), (1, 1), (2, 1), (3, 1)),
    )
    spawn_offset = (-1, 3)


class OBlock(Block):
    block_id = 4
    shapes = (((0, 0), (0, 1), (1, 0), (1, 1)),)
    spawn_offset = (0, 4)


class SBlock(Block):
    block_id = 5
    shapes = (
        ((0, 1), (0, 2), (1, 0), (1, 1)),
        ((0, 1), (1, 1), (1, 2), (2, 2)),
        ((1, 1), (1, 2), (2, 0), (2, 1)),
        ((0, 0), (1, 0), (1, 1), (2, 1)),
    )
    spawn_offset = (0, 3)


class TBlock(Block):
    block_id = 6
    shapes = (
        ((0, 1), (1, 0), (1, 1), (1, 2)),
        ((0, 1), (1, 1), (1, 2), (2, 1)),
        ((1, 0), (1, 1), (1, 2), (2, 1)),
        ((0, 1), (1, 0), (1, 1), (2, 1)),
    )
    spawn_offset = (0, 3)


class ZBlock(Block):
    block_id = 7
    shapes = (
        ((0, 0), (0, 1), (1, 1), (1, 2)),
        ((0, 2), (1, 1), (1, 2), (2, 1)),
        ((1, 0), (1, 1), (2, 1), (2, 2)),
        ((0, 1), (1, 0), (1, 1), (2, 0)),
    )
    spawn_offset = (0, 3)