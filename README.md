# tetrimino

This package is the model layer of a falling-block puzzle game. It holds the playing
field, the seven pieces with their four rotations, and the rules that move, lock and
clear them. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `tetrimino.board`

- `Cell` is an `IntEnum` of what a square can hold. `EMPTY` is 0. The piece kinds
  `I`, `O`, `T`, `S`, `Z`, `J` and `L` are 1 to 7.
- `Board` is a grid `Board.WIDTH` (10) columns wide and `Board.HEIGHT` (28) rows high.
  Row 0 is the top row.
  - `clear()` empties every square.
  - `is_inside(x, y)` returns whether the square lies on the board.
  - `at(x, y)` returns the `Cell` in a square.
  - `set(x, y, cell)` stores a `Cell` in a square.
  - `test_collision(blocks)` returns `True` if any `(x, y)` block lies off the board or
    on a square that is not empty.
  - `lock_piece(blocks, cell)` writes `cell` into every block. It checks all the blocks
    before it writes any of them.
  - `sweep_lines()` removes every full row, moves the rows above it down, fills the top
    with empty rows and returns how many rows it removed.

  `at`, `set` and `lock_piece` raise `IndexError` for coordinates off the board.

### `tetrimino.tetromino`

- `Tetromino(type)` is one piece of the given `Cell` kind. Passing `Cell.EMPTY` raises
  `ValueError`. The piece has the attributes `type`, `x`, `y` and `rotation` (0 to 3),
  and it starts at the spawn point (3, 0) with rotation 0.
  - `move(dx, dy)` shifts its origin.
  - `rotate_cw()` and `rotate_ccw()` turn it a quarter turn. The rotation wraps from 3
    to 0 and from 0 to 3.
  - `reset()` returns it to the spawn point and rotation 0.
  - `blocks()` returns the four `(x, y)` squares it covers on the board.
  - `position()` returns its origin as `(x, y)`.

These methods do not check the board. That is the job of `Game`.

### `tetrimino.game`

- `Game(rng=None)` starts a session on an empty board and spawns a random piece. `rng`
  can be any object with a `randint(a, b)` method, such as a seeded `random.Random`.
  With no `rng`, the game uses a fresh `random.Random()`.
  - `update()` is one tick of gravity. The piece moves down one row. If it cannot move,
    it is locked onto the board, full rows are cleared and a new piece spawns. After
    the game is over, `update()` does nothing.
  - `move_left()`, `move_right()`, `soft_drop()`, `rotate_cw()` and `rotate_ccw()`
    make the move only if it does not collide. Each one returns `True` if it made the
    move. If the move was blocked, it returns `False` and prints a line that begins
    `NON-FATAL ERROR: collision detected` to standard output.
  - `hard_drop()` drops the piece as far as it will go and locks it. The final blocked
    step prints the message above.
  - `current_blocks()` and `current_type()` describe the falling piece.
  - `board` is the `Board`. `game_over` becomes `True` when a newly spawned piece
    collides straight away.

## Example

```python
import random

from tetrimino.board import Board, Cell
from tetrimino.game import Game

game = Game(rng=random.Random(1))
while not game.game_over:
    game.hard_drop()

filled = sum(
    game.board.at(x, y) is not Cell.EMPTY
    for x in range(Board.WIDTH)
    for y in range(Board.HEIGHT)
)
print("game over with", filled, "filled squares")
```

## What it does not do

The package draws nothing, reads no keys and runs no clock. It has no command to start
a game. A front end has to call `update()` on a timer, call the move methods when keys
are pressed, and redraw from `game.board` and `game.current_blocks()`. The package keeps
no score and has no level or speed. `Game` discards the count that `sweep_lines()`
returns.