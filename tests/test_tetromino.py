import pytest

from tetrimino.board import Cell
from tetrimino.tetromino import Tetromino

PIECES = [c for c in Cell if c is not Cell.EMPTY]


def test_spawn_state():
    piece = Tetromino(Cell.T)
    assert piece.type is Cell.T
    assert piece.position() == (3, 0)
    assert piece.rotation == 0


def test_i_piece_spawn_blocks():
    assert Tetromino(Cell.I).blocks() == ((3, 1), (4, 1), (5, 1), (6, 1))


def test_empty_type_rejected():
    with pytest.raises(ValueError):
        Tetromino(Cell.EMPTY)


@pytest.mark.parametrize("cell", PIECES)
def test_every_orientation_has_four_distinct_blocks(cell):
    piece = Tetromino(cell)
    for _ in range(4):
        assert len(set(piece.blocks())) == 4
        piece.rotate_cw()


@pytest.mark.parametrize("cell", PIECES)
def test_four_clockwise_turns_return_to_start(cell):
    piece = Tetromino(cell)
    start = piece.blocks()
    for _ in range(4):
        piece.rotate_cw()
    assert piece.rotation == 0
    assert piece.blocks() == start


@pytest.mark.parametrize("cell", PIECES)
def test_cw_then_ccw_is_identity(cell):
    piece = Tetromino(cell)
    piece.rotate_cw()
    turned = piece.blocks()
    piece.rotate_cw()
    piece.rotate_ccw()
    assert piece.blocks() == turned
    assert piece.rotation == 1


def test_ccw_from_spawn_wraps_to_three():
    piece = Tetromino(Cell.L)
    piece.rotate_ccw()
    assert piece.rotation == 3


def test_o_piece_is_rotation_invariant():
    piece = Tetromino(Cell.O)
    start = piece.blocks()
    piece.rotate_cw()
    assert piece.blocks() == start
    piece.rotate_cw()
    assert piece.blocks() == start


@pytest.mark.parametrize("cell", PIECES)
def test_move_translates_every_block(cell):
    piece = Tetromino(cell)
    before = piece.blocks()
    piece.move(2, 5)
    after = piece.blocks()
    assert [(ax - bx, ay - by) for (ax, ay), (bx, by) in zip(after, before)] == [
        (2, 5)
    ] * 4
    assert piece.position() == (5, 5)


def test_reset_restores_spawn():
    piece = Tetromino(Cell.S)
    start = piece.blocks()
    piece.move(-2, 10)
    piece.rotate_cw()
    piece.reset()
    assert piece.position() == (3, 0)
    assert piece.rotation == 0
    assert piece.blocks() == start