"""Row/column coordinates on the playing field."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A cell location given as a row and a column."""

    row: int
    column: int