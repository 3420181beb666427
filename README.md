# blockfall

A small falling-block puzzle game. The seven four-cell pieces (I, J, L, O,
S, T and Z) spawn at the top centre of a 10 by 20 grid, and you steer them
with the arrow keys. The game runs in a 300 by 600 pixel window titled
"TETRIS" at 60 frames per second and is drawn with pygame.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

```
blockfall
```

| Key   | Action                                 |
|-------|----------------------------------------|
| Left  | move the piece one column left         |
| Right | move the piece one column right        |
| Down  | move the piece one row down            |
| Up    | turn the piece to its next orientation |

A move or rotation that would take any cell of the piece off the grid is
ignored. Pieces are drawn from a bag holding one of each of the seven
shapes; each shape comes out once, in random order, before the bag is
refilled. Close the window to quit. The command takes no options besides
`--help`.

## What it does not do

This is the movement core of the game only. Pieces do not fall on their
own, do not land or lock into the grid, and only the grid's edges stop
them. There is no line clearing, no score, no preview of the next piece
and no game over: the current piece stays under your control until the
window is closed.

## Using the pieces in code

The game logic can be driven without opening a window:

```python
import random

from blockfall.game import Game
from blockfall.grid import Grid
from blockfall.block import TBlock

game = Game(rng=random.Random(1))   # rng is optional; seed it for repeatable bags
game.move_block_left()
game.rotate_block()
print(game.current_block.get_cell_positions())

piece = TBlock()
print(piece.get_cell_positions())   # list of Position(row, column)
piece.rotate()
piece.undo_rotation()

grid = Grid()
grid.is_cell_outside(20, 0)         # True: rows run 0..19, columns 0..9
grid.print()                        # writes the cell values as text to stdout
```

- `blockfall.position.Position` is a frozen dataclass with `row` and
  `column`.
- `blockfall.colors.get_cell_colors()` returns the palette as RGBA tuples;
  index 0 is the empty cell and 1 to 7 are the piece kinds.
- `Block` subclasses `LBlock`, `JBlock`, `IBlock`, `OBlock`, `SBlock`,
  `TBlock` and `ZBlock` each carry an `id`, their rotation states in
  `cells`, and `move(rows, columns)`, `rotate()` and `undo_rotation()`.
- `Game.get_random_block()` takes the next piece from the bag and
  `Game.get_all_blocks()` returns a fresh set of all seven.
- `Game.handle_input(key)` takes a pygame key code, so an event loop can
  pass `event.key` from each `KEYDOWN` straight through; other keys are
  ignored.
- `draw(surface)` on `Game`, `Grid` and `Block` paints onto any pygame
  surface.