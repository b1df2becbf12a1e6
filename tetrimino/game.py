"""Game rules: spawning, gravity, player moves, locking and game over."""

from __future__ import annotations

import random
from typing import Protocol

from tetrimino.board import Board, Cell
from tetrimino.tetromino import Blocks, Tetromino

_PIECE_COUNT = 7


class _RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


class Game:
    """A single game session: a board and the piece currently falling."""

    def __init__(self, rng: _RandomSource | None = None) -> None:
        self._rng: _RandomSource = rng if rng is not None else random.Random()
        self._board = Board()
        self._game_over = False
        self._current = Tetromino(Cell.I)
        self._spawn_new_piece()

    @property
    def board(self) -> Board:
        """The playing field."""
        return self._board

    @property
    def game_over(self) -> bool:
        """True once a newly spawned piece had no room."""
        return self._game_over

    def current_blocks(self) -> Blocks:
        """Board coordinates of the falling piece."""
        return self._current.blocks()

    def current_type(self) -> Cell:
        """Type of the falling piece."""
        return self._current.type

    def update(self) -> None:
        """Advance one tick: drop the piece a row, locking it if it cannot fall."""
        if self._game_over:
            return
        if not self._try(lambda: self._current.move(0, 1), lambda: self._current.move(0, -1)):
            self._lock_current_piece()

    def move_left(self) -> bool:
        """Shift the piece one column left; return False if blocked."""
        return self._attempt(
            lambda: self._current.move(-1, 0),
            lambda: self._current.move(1, 0),
            "move left",
        )

    def move_right(self) -> bool:
        """Shift the piece one column right; return False if blocked."""
        return self._attempt(
            lambda: self._current.move(1, 0),
            lambda: self._current.move(-1, 0),
            "move right",
        )

    def soft_drop(self) -> bool:
        """Drop the piece one row; return False if blocked."""
        return self._attempt(
            lambda: self._current.move(0, 1),
            lambda: self._current.move(0, -1),
            "move down",
        )

    def hard_drop(self) -> None:
        """Drop the piece as far as it goes and lock it."""
        while self.soft_drop():
            pass
        self._lock_current_piece()

    def rotate_cw(self) -> bool:
        """Rotate the piece clockwise; return False if blocked."""
        return self._attempt(
            self._current.rotate_cw, self._current.rotate_ccw, "rotate clockwise"
        )

    def rotate_ccw(self) -> bool:
        """Rotate the piece counter-clockwise; return False if blocked."""
        return self._attempt(
            self._current.rotate_ccw,
            self._current.rotate_cw,
            "rotate counter-clockwise",
        )

    def _try(self, do, undo) -> bool:
        do()
        if self._board.test_collision(self._current.blocks()):
            undo()
            return False
        return True

    def _attempt(self, do, undo, action: str) -> bool:
        if self._try(do, undo):
            return True
        print(
            f"NON-FATAL ERROR: collision detected whilst attempting to {action}.",
            flush=True,
        )
        return False

    def _spawn_new_piece(self) -> None:
        self._current = Tetromino(Cell(self._rng.randint(1, _PIECE_COUNT)))
        if self._board.test_collision(self._current.blocks()):
            self._game_over = True

    def _lock_current_piece(self) -> None:
        self._board.lock_piece(self._current.blocks(), self._current.type)
        self._board.sweep_lines()
        self._spawn_new_piece()