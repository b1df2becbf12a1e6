"""Falling pieces: their shapes, rotation and position."""

from __future__ import annotations

from tetrimino.board import Cell

Blocks = tuple[tuple[int, int], ...]

SPAWN_X = 3
SPAWN_Y = 0

# Block offsets from the piece origin, for rotations 0, 90, 180 and 270 degrees.
_SHAPES: dict[Cell, tuple[Blocks, Blocks, Blocks, Blocks]] = {
    Cell.I: (
        ((0, 1), (1, 1), (2, 1), (3, 1)),
        ((2, 0), (2, 1), (2, 2), (2, 3)),
        ((0, 2), (1, 2), (2, 2), (3, 2)),
        ((1, 0), (1, 1), (1, 2), (1, 3)),
    ),
    Cell.O: (
        ((1, 0), (2, 0), (1, 1), (2, 1)),
        ((1, 0), (2, 0), (1, 1), (2, 1)),
        ((1, 0), (2, 0), (1, 1), (2, 1)),
        ((1, 0), (2, 0), (1, 1), (2, 1)),
    ),
    Cell.T: (
        ((1, 0), (0, 1), (1, 1), (2, 1)),
        ((1, 0), (1, 1), (2, 1), (1, 2)),
        ((0, 1), (1, 1), (2, 1), (1, 2)),
        ((1, 0), (0, 1), (1, 1), (1, 2)),
    ),
    Cell.S: (
        ((1, 0), (2, 0), (0, 1), (1, 1)),
        ((1, 0), (1, 1), (2, 1), (2, 2)),
        ((1, 1), (2, 1), (0, 2), (1, 2)),
        ((0, 0), (0, 1), (1, 1), (1, 2)),
    ),
    Cell.Z: (
        ((0, 0), (1, 0), (1, 1), (2, 1)),
        ((2, 0), (1, 1), (2, 1), (1, 2)),
        ((0, 1), (1, 1), (1, 2), (2, 2)),
        ((1, 0), (0, 1), (1, 1), (0, 2)),
    ),
    Cell.J: (
        ((0, 0), (0, 1), (1, 1), (2, 1)),
        ((1, 0), (2, 0), (1, 1), (1, 2)),
        ((0, 1), (1, 1), (2, 1), (2, 2)),
        ((1, 0), (1, 1), (0, 2), (1, 2)),
    ),
    Cell.L: (
        ((2, 0), (0, 1), (1, 1), (2, 1)),
        ((1, 0), (1, 1), (1, 2), (2, 2)),
        ((0, 1), (1, 1), (2, 1), (0, 2)),
        ((0, 0), (1, 0), (1, 1), (1, 2)),
    ),
}


class Tetromino:
    """A piece of a given type, with an origin on the board and a rotation 0-3."""

    def __init__(self, type: Cell) -> None:
        type = Cell(type)
        if type is Cell.EMPTY:
            raise ValueError("a tetromino cannot be of type EMPTY")
        self.type = type
        self.x = SPAWN_X
        self.y = SPAWN_Y
        self.rotation = 0

    def __repr__(self) -> str:
        return (
            f"Tetromino({self.type.name}, x={self.x}, y={self.y}, "
            f"rotation={self.rotation})"
        )

    def reset(self) -> None:
        """Return to the spawn position and orientation."""
        self.x = SPAWN_X
        self.y = SPAWN_Y
        self.rotation = 0

    def move(self, dx: int, dy: int) -> None:
        """Shift the origin by (dx, dy)."""
        self.x += dx
        self.y += dy

    def rotate_cw(self) -> None:
        """Turn a quarter clockwise."""
        self.rotation = (self.rotation + 1) % 4

    def rotate_ccw(self) -> None:
        """Turn a quarter counter-clockwise."""
        self.rotation = (self.rotation + 3) % 4

    def blocks(self) -> Blocks:
        """Board coordinates of the piece's four blocks."""
        return tuple(
            (self.x + dx, self.y + dy) for dx, dy in _SHAPES[self.type][self.rotation]
        )

    def position(self) -> tuple[int, int]:
        """The piece origin as (x, y)."""
        return (self.x, self.y)