"""The playing matrix: which cells hold locked minos, and where pieces fit."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from tetrion import shapes
from tetrion.pieces import Mino
from tetrion.shapes import MOVE_DOWN, Point, RotationDirection

TOTAL_HEIGHT = 40
TOTAL_WIDTH = 10
TOTAL_BEGIN_ROW = 0
TOTAL_END_ROW = TOTAL_BEGIN_ROW + TOTAL_HEIGHT
TOTAL_BEGIN_COL = 0
TOTAL_END_COL = TOTAL_BEGIN_COL + TOTAL_WIDTH

VISIBLE_HEIGHT = 20
VISIBLE_WIDTH = 10
VISIBLE_BEGIN_ROW = TOTAL_HEIGHT - VISIBLE_HEIGHT
VISIBLE_END_ROW = VISIBLE_BEGIN_ROW + VISIBLE_HEIGHT
VISIBLE_BEGIN_COL = 0
VISIBLE_END_COL = VISIBLE_BEGIN_COL + VISIBLE_WIDTH

SKYLINE = VISIBLE_BEGIN_ROW

SPAWN_ROW = SKYLINE
SPAWN_COL = VISIBLE_BEGIN_COL + 3


def matrix_index(location: Point) -> int:
    """Return the flat index of a matrix ``(row, col)`` location."""
    row, col = location
    return TOTAL_WIDTH * row + col


def _offset(location: Point, delta: Point) -> Point:
    return (location[0] + delta[0], location[1] + delta[1])


class Board:
    """A matrix of cells, each empty or holding a locked mino."""

    def __init__(self) -> None:
        self._cells: List[Optional[Mino]] = [None] * (TOTAL_HEIGHT * TOTAL_WIDTH)

    def _index(self, location: Point) -> int:
        row, col = location
        if not (TOTAL_BEGIN_ROW <= row < TOTAL_END_ROW and TOTAL_BEGIN_COL <= col < TOTAL_END_COL):
            raise IndexError(f"location outside the matrix: {location!r}")
        return matrix_index(location)

    def mino_at(self, location: Point) -> Optional[Mino]:
        """Return the mino locked at ``location``, or None."""
        return self._cells[self._index(location)]

    def _set(self, location: Point, mino: Optional[Mino]) -> None:
        self._cells[self._index(location)] = mino

    def is_empty(self, location: Point) -> bool:
        """Return True if no live mino is locked at ``location``."""
        mino = self.mino_at(location)
        return mino is None or mino.destroyed

    def _locations_possible(self, locals_: Iterable[Point], piece_location: Point) -> bool:
        for local in locals_:
            row, col = _offset(piece_location, local)
            if not (TOTAL_BEGIN_ROW <= row < VISIBLE_END_ROW):
                return False
            if not (VISIBLE_BEGIN_COL <= col < VISIBLE_END_COL):
                return False
            if not self.is_empty((row, col)):
                return False
        return True

    def is_movement_possible(self, piece, movement: Point) -> bool:
        """Return True if ``piece`` fits after moving by ``movement``."""
        if piece is None:
            return False
        return self._locations_possible(piece.mino_locations(), _offset(piece.location, movement))

    def is_directly_above_surface(self, piece) -> bool:
        """Return True if ``piece`` cannot move one row down."""
        return not self.is_movement_possible(piece, shapes.movement_offset(MOVE_DOWN))

    def is_blocked(self, piece) -> bool:
        """Return True if ``piece`` overlaps a locked mino or the matrix edge where it is."""
        return not self.is_movement_possible(piece, (0, 0))

    def is_above_skyline(self, piece) -> bool:
        """Return True if every mino of ``piece`` lies above the skyline."""
        if piece is None:
            return False
        return all(
            piece.location[0] + local_row < SKYLINE
            for local_row, _ in piece.mino_locations()
        )

    def is_rotation_possible(self, piece, direction: RotationDirection, offset: Point) -> bool:
        """Return True if ``piece`` fits after rotating in ``direction`` about ``offset``."""
        if piece is None:
            return False
        new_facing = piece.facing.rotated(int(RotationDirection(direction)))
        locals_ = shapes.mino_locations(piece.shape, new_facing)
        return self._locations_possible(locals_, _offset(piece.location, offset))

    def is_row_full(self, row: int) -> bool:
        """Return True if every visible column of ``row`` holds a mino."""
        return all(
            not self.is_empty((row, col))
            for col in range(VISIBLE_BEGIN_COL, VISIBLE_END_COL)
        )

    def add_minos(self, piece) -> None:
        """Lock the minos of ``piece`` into the matrix where the piece stands."""
        if piece is None:
            return
        for mino, local in zip(piece.minos, piece.mino_locations()):
            location = _offset(piece.location, local)
            mino.attach_to(self, location)
            self._set(location, mino)

    def _clear_row(self, row: int) -> None:
        for col in range(VISIBLE_BEGIN_COL, VISIBLE_END_COL):
            mino = self.mino_at((row, col))
            if mino is not None:
                mino.destroy()
                self._set((row, col), None)

    def _move_row(self, row: int, distance: int) -> None:
        for col in range(VISIBLE_BEGIN_COL, VISIBLE_END_COL):
            old = (row, col)
            if not self.is_empty(old):
                mino = self.mino_at(old)
                new = (row + distance, col)
                mino.set_location(new)
                self._set(new, mino)
                self._set(old, None)

    def clear_rows(self, rows: Sequence[int]) -> None:
        """Remove the given rows, listed top to bottom, and drop the rows above them."""
        rows = list(rows)
        for row in rows:
            self._clear_row(row)
        count = len(rows)
        last_end_row = TOTAL_BEGIN_ROW - 1
        for index in range(count - 1, -1, -1):
            begin = rows[index] - 1
            end = rows[index - 1] if index >= 1 else last_end_row
            for row in range(begin, end, -1):
                self._move_row(row, count - index)

    def final_falling_location(self, piece) -> Point:
        """Return where ``piece`` would land if dropped straight down."""
        if piece is None:
            return (0, 0)
        down = shapes.movement_offset(MOVE_DOWN)
        locals_ = piece.mino_locations()
        location = piece.location
        while self._locations_possible(locals_, _offset(location, down)):
            location = _offset(location, down)
        return location