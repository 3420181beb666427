"""A falling-block puzzle game on a 10 by 20 grid, drawn with pygame."""

__version__ = "0.1.0"

__all__ = ["block", "colors", "game", "grid", "main", "position"]