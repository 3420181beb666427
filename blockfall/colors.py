"""Palette used to paint grid cells and blocks."""

from __future__ import annotations

Color = tuple[int, int, int, int]

DARK_GREY: Color = (26, 31, 40, 255)
GREEN: Color = (47, 230, 23, 255)
RED: Color = (232, 18, 18, 255)
ORANGE: Color = (226, 116, 17, 255)
YELLOW: Color = (237, 234, 4, 255)
PURPLE: Color = (166, 0, 247, 255)
CYAN: Color = (21, 204, 209, 255)
BLUE: Color = (13, 64, 216, 255)


def get_cell_colors() -> list[Color]:
    """Return the cell palette; index 0 is the empty cell, 1-7 the block kinds."""
    return [DARK_GREY, GREEN, RED, ORANGE, YELLOW, PURPLE, CYAN, BLUE]