"""The playing field: a fixed grid of cells that pieces lock into."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum


class Cell(IntEnum):
    """Contents of one grid cell: empty, or the kind of piece that filled it."""

    EMPTY = 0
    I = 1  # noqa: E741
    O = 2  # noqa: E741
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


class Board:
    """A WIDTH x HEIGHT grid of cells, row 0 at the top."""

    WIDTH = 10
    HEIGHT = 28

    def __init__(self) -> None:
        self._grid: list[list[Cell]] = []
        self.clear()

    def clear(self) -> None:
        """Empty every cell."""
        self._grid = [self._empty_row() for _ in range(self.HEIGHT)]

    def is_inside(self, x: int, y: int) -> bool:
        """Return True if (x, y) lies on the board."""
        return 0 <= x < self.WIDTH and 0 <= y < self.HEIGHT

    def at(self, x: int, y: int) -> Cell:
        """Return the cell at (x, y)."""
        self._require_inside(x, y)
        return self._grid[y][x]

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Store ``cell`` at (x, y)."""
        self._require_inside(x, y)
        self._grid[y][x] = Cell(cell)

    def test_collision(self, blocks: Iterable[tuple[int, int]]) -> bool:
        """Return True if any block is off the board or on an occupied cell."""
        return any(
            not self.is_inside(x, y) or self._grid[y][x] is not Cell.EMPTY
            for x, y in blocks
        )

    def lock_piece(self, blocks: Iterable[tuple[int, int]], cell: Cell) -> None:
        """Fix the given blocks onto the board as ``cell``."""
        positions = list(blocks)
        for x, y in positions:
            self._require_inside(x, y)
        for x, y in positions:
            self._grid[y][x] = Cell(cell)

    def sweep_lines(self) -> int:
        """Remove every full row, drop the rows above, and return how many went."""
        kept = [row for row in self._grid if Cell.EMPTY in row]
        cleared = self.HEIGHT - len(kept)
        self._grid = [self._empty_row() for _ in range(cleared)] + kept
        return cleared

    def _empty_row(self) -> list[Cell]:
        return [Cell.EMPTY] * self.WIDTH

    def _require_inside(self, x: int, y: int) -> None:
        if not self.is_inside(x, y):
            raise IndexError(f"coordinates ({x}, {y}) are outside the board")