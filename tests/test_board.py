import pytest

from tetrion import board as board_mod
from tetrion.board import Board, matrix_index
from tetrion.pieces import Tetrimino
from tetrion.shapes import RotationDirection, Shape


def _piece(shape, location):
    piece = Tetrimino(shape)
    piece.set_location(location)
    return piece


def _occupied(board):
    return {
        (row, col)
        for row in range(board_mod.TOTAL_BEGIN_ROW, board_mod.TOTAL_END_ROW)
        for col in range(board_mod.TOTAL_BEGIN_COL, board_mod.TOTAL_END_COL)
        if not board.is_empty((row, col))
    }


def test_matrix_index_round_trip():
    assert matrix_index((0, 0)) == 0
    assert matrix_index((1, 0)) == board_mod.TOTAL_WIDTH
    for row in (0, 5, 39):
        for col in (0, 4, 9):
            assert divmod(matrix_index((row, col)), board_mod.TOTAL_WIDTH) == (row, col)


def test_visible_area_and_skyline():
    assert board_mod.SKYLINE == board_mod.VISIBLE_BEGIN_ROW == 20
    board = Board()
    # O minos occupy rows 1 and 2 of the piece box.
    piece = _piece(Shape.O, (board_mod.SKYLINE - 3, 3))
    assert board.is_above_skyline(piece)
    piece.set_location((board_mod.SKYLINE - 2, 3))
    assert not board.is_above_skyline(piece)
    bottom = _piece(Shape.O, (board_mod.VISIBLE_END_ROW - 3, 3))
    assert board.is_directly_above_surface(bottom)
    assert bottom.lowest_row() == board_mod.TOTAL_END_ROW - 1


def test_new_board_is_empty():
    board = Board()
    assert _occupied(board) == set()
    assert not any(board.is_row_full(r) for r in range(20, 40))


def test_is_empty_outside_matrix_raises():
    with pytest.raises(IndexError):
        Board().is_empty((40, 0))
    with pytest.raises(IndexError):
        Board().is_empty((0, -1))


def test_add_minos_locks_cells():
    board = Board()
    piece = _piece(Shape.O, (30, 3))
    board.add_minos(piece)
    expected = {(30 + r, 3 + c) for r, c in piece.mino_locations()}
    assert _occupied(board) == expected
    for mino in piece.minos:
        assert mino.parent is board
        assert board.mino_at(mino.location) is mino


def test_blocked_by_locked_minos():
    board = Board()
    board.add_minos(_piece(Shape.O, (30, 3)))
    assert board.is_blocked(_piece(Shape.O, (30, 3)))
    assert not board.is_blocked(_piece(Shape.O, (30, 6)))


def test_movement_at_walls():
    board = Board()
    piece = _piece(Shape.O, (30, -1))
    assert not board.is_movement_possible(piece, (0, -1))
    assert board.is_movement_possible(piece, (0, 1))


def test_none_piece():
    board = Board()
    assert board.is_movement_possible(None, (0, 0)) is False
    assert board.is_above_skyline(None) is False
    assert board.final_falling_location(None) == (0, 0)


def test_final_falling_location_lands_on_floor():
    board = Board()
    piece = _piece(Shape.O, (17, 3))
    landing = board.final_falling_location(piece)
    assert landing[1] == 3
    piece.set_location(landing)
    assert board.is_directly_above_surface(piece)
    assert piece.lowest_row() == board_mod.VISIBLE_END_ROW - 1
    piece.set_location((landing[0] - 1, landing[1]))
    assert not board.is_directly_above_surface(piece)


def test_final_falling_location_lands_on_stack():
    board = Board()
    stack = _piece(Shape.O, (17, 3))
    stack.set_location(board.final_falling_location(stack))
    board.add_minos(stack)
    piece = _piece(Shape.O, (17, 3))
    landing = board.final_falling_location(piece)
    piece.set_location(landing)
    assert board.is_directly_above_surface(piece)
    assert not board.is_blocked(piece)
    assert piece.lowest_row() == stack.location[0]


def test_above_skyline():
    board = Board()
    assert board.is_above_skyline(_piece(Shape.O, (17, 3)))
    assert not board.is_above_skyline(_piece(Shape.O, (18, 3)))


def test_rotation_possible_depends_on_room():
    board = Board()
    assert board.is_rotation_possible(_piece(Shape.I, (36, 0)), RotationDirection.CLOCKWISE, (0, 0))
    assert not board.is_rotation_possible(_piece(Shape.I, (37, 0)), RotationDirection.CLOCKWISE, (0, 0))


def test_clear_single_row_drops_above():
    board = Board()
    board.add_minos(_piece(Shape.I, (38, 0)))
    board.add_minos(_piece(Shape.I, (38, 4)))
    square = _piece(Shape.O, (37, 7))
    board.add_minos(square)
    assert board.is_row_full(39)
    cleared = [board.mino_at((39, c)) for c in range(8)]
    board.clear_rows([39])
    assert not board.is_row_full(39)
    assert _occupied(board) == {(39, 8), (39, 9)}
    assert all(m.destroyed for m in cleared)
    assert {m.location for m in square.minos if not m.destroyed} == {(39, 8), (39, 9)}


def test_clear_two_rows_drops_by_two():
    board = Board()
    for location in ((37, 0), (37, 4), (38, 0), (38, 4)):
        board.add_minos(_piece(Shape.I, location))
    board.add_minos(_piece(Shape.O, (37, 7)))
    board.add_minos(_piece(Shape.O, (35, 0)))
    assert board.is_row_full(38) and board.is_row_full(39)
    board.clear_rows([38, 39])
    assert _occupied(board) == {(38, 1), (38, 2), (39, 1), (39, 2)}