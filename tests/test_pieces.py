import pytest

from tetrion import shapes
from tetrion.pieces import (
    MATERIAL_OUTLINE_PATH,
    GhostPiece,
    Mino,
    MinoInfo,
    Tetrimino,
    relative_location,
)
from tetrion.shapes import Facing, RotationDirection, Shape


class _FloorBoard:
    def __init__(self, landing):
        self.landing = landing
        self.calls = 0

    def final_falling_location(self, piece):
        self.calls += 1
        return self.landing


def test_relative_location_origin():
    assert relative_location((0, 0)) == (0.0, 0.0, 0.0)


def test_relative_location_keeps_z():
    assert relative_location((3, 4), 7.5)[2] == 7.5


def test_relative_location_row_and_column_axes():
    assert relative_location((1, 0)) == (0.0, -100.0, 0.0)
    assert relative_location((0, 1)) == (-100.0, 0.0, 0.0)


def test_mino_info_defaults():
    info = MinoInfo()
    assert info.material_path == ""
    assert info.opacity == 1.0
    assert info.translucent_sort_priority == 0


def test_mino_attach_and_detach():
    mino = Mino()
    parent = object()
    mino.attach_to(parent, (2, 5))
    assert mino.parent is parent
    assert mino.location == (2, 5)
    assert mino.relative_location == relative_location((2, 5))
    mino.destroy()
    assert mino.parent is None
    assert mino.destroyed


@pytest.mark.parametrize("shape", list(Shape))
def test_tetrimino_builds_four_minos(shape):
    piece = Tetrimino(shape)
    assert len(piece.minos) == 4
    assert [m.location for m in piece.minos] == list(shapes.mino_locations(shape, Facing.NORTH))
    assert all(m.parent is piece for m in piece.minos)


def test_tetrimino_mino_info():
    piece = Tetrimino(Shape.T)
    info = piece.mino_info()
    assert info.material_path == MATERIAL_OUTLINE_PATH
    assert info.base_color == shapes.shape_info(Shape.T).base_color
    assert info.opacity == 1.0
    assert info.translucent_sort_priority == 1
    assert piece.minos[0].info == info


def test_ghost_mino_info():
    ghost = GhostPiece(Shape.I)
    info = ghost.mino_info()
    assert info.opacity == 0.1
    assert info.translucent_sort_priority == 0
    assert info.base_color == shapes.shape_info(Shape.I).base_color


def test_ghost_without_shape_has_no_minos():
    ghost = GhostPiece()
    assert ghost.minos == []
    with pytest.raises(ValueError):
        ghost.mino_locations()


def test_set_board_places_at_initial_location():
    piece = Tetrimino(Shape.L)
    piece.set_board(_FloorBoard((30, 3)))
    assert piece.location == shapes.initial_location(Shape.L)
    assert piece.relative_location == relative_location(piece.location)


def test_move_by_updates_location_and_relative_location():
    piece = Tetrimino(Shape.S)
    piece.set_location((5, 4))
    piece.move_by((1, -1))
    assert piece.location == (6, 3)
    assert piece.relative_location == relative_location((6, 3))


def test_lowest_row_o_piece():
    piece = Tetrimino(Shape.O)
    assert piece.lowest_row() == 2


def test_lowest_row_follows_downward_move():
    piece = Tetrimino(Shape.J)
    before = piece.lowest_row()
    piece.move_by((1, 0))
    assert piece.lowest_row() == before + 1


def test_rotate_clockwise_changes_facing_and_minos():
    piece = Tetrimino(Shape.T)
    piece.rotate_to(RotationDirection.CLOCKWISE)
    assert piece.facing is Facing.EAST
    assert [m.location for m in piece.minos] == list(shapes.mino_locations(Shape.T, Facing.EAST))


def test_rotate_counter_clockwise_from_north_is_west():
    piece = Tetrimino(Shape.Z)
    piece.rotate_to(RotationDirection.COUNTER_CLOCKWISE)
    assert piece.facing is Facing.WEST


def test_four_rotations_return_to_start():
    piece = Tetrimino(Shape.I)
    start = [m.location for m in piece.minos]
    for _ in range(4):
        piece.rotate_to(RotationDirection.CLOCKWISE)
    assert piece.facing is Facing.NORTH
    assert [m.location for m in piece.minos] == start


def test_srs_offsets_follow_facing():
    piece = Tetrimino(Shape.I)
    piece.rotate_to(RotationDirection.CLOCKWISE)
    assert piece.srs_offsets(RotationDirection.CLOCKWISE) == shapes.srs_offsets(
        Shape.I, Facing.EAST, RotationDirection.CLOCKWISE
    )


def test_rotate_with_offset_rotates_then_moves():
    piece = Tetrimino(Shape.T)
    piece.set_location((10, 4))
    piece.rotate_with_offset(RotationDirection.CLOCKWISE, (0, -1))
    assert piece.facing is Facing.EAST
    assert piece.location == (10, 3)


def test_set_ghost_piece_initializes_ghost():
    board = _FloorBoard((36, 3))
    piece = Tetrimino(Shape.T)
    piece.set_board(board)
    ghost = GhostPiece()
    ghost.hidden = True
    piece.set_ghost_piece(ghost)
    assert ghost.shape is Shape.T
    assert ghost.facing is piece.facing
    assert ghost.location == (36, 3)
    assert ghost.hidden is False


def test_ghost_without_board_is_left_alone():
    piece = Tetrimino(Shape.O)
    ghost = GhostPiece()
    piece.set_ghost_piece(ghost)
    assert piece.ghost is ghost
    assert ghost.shape is None


def test_move_and_rotate_keep_ghost_in_step():
    board = _FloorBoard((36, 3))
    piece = Tetrimino(Shape.L)
    piece.set_board(board)
    ghost = GhostPiece()
    piece.set_ghost_piece(ghost)
    board.landing = (35, 4)
    piece.move_by((0, 1))
    assert ghost.location == (35, 4)
    piece.rotate_to(RotationDirection.CLOCKWISE)
    assert ghost.facing is piece.facing


def test_detach_from_board_clears_links():
    piece = Tetrimino(Shape.T)
    piece.set_board(_FloorBoard((36, 3)))
    piece.set_ghost_piece(GhostPiece())
    piece.detach_from_board()
    assert piece.board is None
    assert piece.ghost is None


def test_detach_minos_releases_every_mino():
    piece = Tetrimino(Shape.S)
    piece.detach_minos()
    assert all(m.parent is None for m in piece.minos)


def test_reinitialize_destroys_old_minos():
    ghost = GhostPiece(Shape.O)
    old = list(ghost.minos)
    ghost.initialize(Shape.I, Facing.EAST)
    assert all(m.destroyed for m in old)
    assert [m.location for m in ghost.minos] == list(shapes.mino_locations(Shape.I, Facing.EAST))