"""The playing field: a fixed grid of cell values."""

from __future__ import annotations

import sys
from typing import TextIO

from .colors import get_cell_colors


class Grid:
    """A 20 x 10 field of cells, each holding a palette index."""

    def __init__(self) -> None:
        self.num_rows = 20
        self.num_cols = 10
        self.cell_size = 30
        self.grid: list[list[int]] = []
        self.initialize()
        self.colors = get_cell_colors()

    def initialize(self) -> None:
        """Reset every cell to empty."""
        self.grid = [[0] * self.num_cols for _ in range(self.num_rows)]

    def print(self, file: TextIO | None = None) -> None:
        """Write the cell values row by row."""
        out = file if file is not None else sys.stdout
        for row in self.grid:
            out.write("".join(f"{value} " for value in row) + "\n")

    def draw(self, surface) -> None:
        """Paint every cell onto a drawing surface."""
        size = self.cell_size
        for row_index, row in enumerate(self.grid):
            for column_index, value in enumerate(row):
                surface.fill(
                    self.colors[value],
                    (column_index * size + 1, row_index * size + 1, size - 1, size - 1),
                )

    def is_cell_outside(self, row: int, column: int) -> bool:
        """Tell whether a position lies beyond the grid."""
        return not (0 <= row < self.num_rows and 0 <= column < self.num_cols)