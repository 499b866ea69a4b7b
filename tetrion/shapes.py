"""Tetrimino shapes, facings and the Super Rotation System tables.

Locations are ``(row, col)`` pairs; a larger row lies lower on the matrix.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Mapping, Optional, Tuple

Point = Tuple[int, int]
Direction = Tuple[float, float]
Color = Tuple[float, float, float, float]

MINO_COUNT = 4

# The skyline row and the column a new piece spawns around.
SPAWN_ROW = 20
SPAWN_COL = 3

# Movement directions in (row, col) space.
MOVE_LEFT: Direction = (0.0, -1.0)
MOVE_RIGHT: Direction = (0.0, 1.0)
MOVE_DOWN: Direction = (1.0, 0.0)


class Shape(Enum):
    """The seven tetrimino shapes, in bag order."""

    O = 0
    I = 1
    T = 2
    L = 3
    J = 4
    S = 5
    Z = 6


class Facing(Enum):
    """The four orientations of a tetrimino."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def rotated(self, steps: int) -> "Facing":
        """Return the facing ``steps`` quarter turns clockwise (negative: counter-clockwise)."""
        return Facing((self.value + int(steps)) % len(Facing))


class RotationDirection(IntEnum):
    """Direction of a rotation, valued as the quarter turns it adds to the facing."""

    COUNTER_CLOCKWISE = -1
    CLOCKWISE = 1


@dataclass(frozen=True)
class ShapeInfo:
    """Static description of one tetrimino shape."""

    mino_locations: Mapping[Facing, Tuple[Point, ...]]
    base_color: Color
    initial_location: Point
    srs_offsets: Mapping[Facing, Mapping[RotationDirection, Tuple[Point, ...]]]


_CCW = RotationDirection.COUNTER_CLOCKWISE
_CW = RotationDirection.CLOCKWISE


def _table(north, east, south, west):
    return {
        Facing.NORTH: north,
        Facing.EAST: east,
        Facing.SOUTH: south,
        Facing.WEST: west,
    }


def _pair(ccw, cw):
    return {_CCW: tuple(ccw), _CW: tuple(cw)}


_O_SRS = _table(*(_pair([(0, 0)], [(0, 0)]) for _ in range(4)))

_I_SRS = _table(
    _pair([(0, 0), (0, -1), (0, 2), (-2, -1), (1, 2)],
          [(0, 0), (0, -2), (0, 1), (1, -2), (-2, 1)]),
    _pair([(0, 0), (0, 2), (0, -1), (-1, 2), (-2, -1)],
          [(0, 0), (0, -1), (0, 2), (-2, -1), (1, 2)]),
    _pair([(0, 0), (0, 1), (0, -2), (2, 1), (-1, -2)],
          [(0, 0), (0, 2), (0, -1), (-1, 2), (2, -1)]),
    _pair([(0, 0), (0, -2), (0, 1), (1, -2), (-2, 1)],
          [(0, 0), (0, 1), (0, -2), (2, 1), (-1, -2)]),
)

_EAST_KICKS = [(0, 0), (0, 1), (1, 1), (-2, 0), (-2, 1)]
_WEST_KICKS = [(0, 0), (0, -1), (1, -1), (-2, 0), (-2, -1)]

_T_SRS = _table(
    _pair([(0, 0), (0, 1), (-1, 1), (2, 1)],
          [(0, 0), (0, -1), (-1, -1), (2, -1)]),
    _pair(_EAST_KICKS, _EAST_KICKS),
    _pair([(0, 0), (0, -1), (2, 0), (2, -1)],
          [(0, 0), (0, 1), (2, 0), (2, 1)]),
    _pair(_WEST_KICKS, _WEST_KICKS),
)

_LEFT_KICKS = [(0, 0), (0, 1), (-1, 1), (2, 0), (2, 1)]
_RIGHT_KICKS = [(0, 0), (0, -1), (-1, -1), (2, 0), (2, -1)]


def _jlsz_srs():
    return _table(
        _pair(_LEFT_KICKS, _RIGHT_KICKS),
        _pair(_EAST_KICKS, _EAST_KICKS),
        _pair(_RIGHT_KICKS, _LEFT_KICKS),
        _pair(_WEST_KICKS, _WEST_KICKS),
    )


def _minos(north, east, south, west):
    return _table(tuple(north), tuple(east), tuple(south), tuple(west))


_DEFAULT_SPAWN: Point = (SPAWN_ROW - 3, SPAWN_COL)

_SHAPE_INFOS: Mapping[Shape, ShapeInfo] = {
    Shape.O: ShapeInfo(
        _minos(*([(1, 1), (1, 2), (2, 1), (2, 2)] for _ in range(4))),
        (1.0, 1.0, 0.0, 1.0),
        _DEFAULT_SPAWN,
        _O_SRS,
    ),
    Shape.I: ShapeInfo(
        _minos(
            [(1, 0), (1, 1), (1, 2), (1, 3)],
            [(0, 2), (1, 2), (2, 2), (3, 2)],
            [(2, 0), (2, 1), (2, 2), (2, 3)],
            [(0, 1), (1, 1), (2, 1), (3, 1)],
        ),
        (0.0, 1.0, 1.0, 1.0),
        (SPAWN_ROW - 2, SPAWN_COL),
        _I_SRS,
    ),
    Shape.T: ShapeInfo(
        _minos(
            [(1, 1), (2, 0), (2, 1), (2, 2)],
            [(1, 1), (2, 1), (2, 2), (3, 1)],
            [(2, 0), (2, 1), (2, 2), (3, 1)],
            [(1, 1), (2, 0), (2, 1), (3, 1)],
        ),
        (0.5, 0.0, 0.5, 1.0),
        _DEFAULT_SPAWN,
        _T_SRS,
    ),
    Shape.L: ShapeInfo(
        _minos(
            [(1, 2), (2, 0), (2, 1), (2, 2)],
            [(1, 1), (2, 1), (3, 1), (3, 2)],
            [(2, 0), (2, 1), (2, 2), (3, 0)],
            [(1, 0), (1, 1), (2, 1), (3, 1)],
        ),
        (1.0, 0.5, 0.0, 1.0),
        _DEFAULT_SPAWN,
        _jlsz_srs(),
    ),
    Shape.J: ShapeInfo(
        _minos(
            [(1, 0), (2, 0), (2, 1), (2, 2)],
            [(1, 1), (1, 2), (2, 1), (3, 1)],
            [(2, 0), (2, 1), (2, 2), (3, 2)],
            [(1, 1), (2, 1), (3, 0), (3, 1)],
        ),
        (0.0, 0.0, 1.0, 1.0),
        _DEFAULT_SPAWN,
        _jlsz_srs(),
    ),
    Shape.S: ShapeInfo(
        _minos(
            [(1, 1), (1, 2), (2, 0), (2, 1)],
            [(1, 1), (2, 1), (2, 2), (3, 2)],
            [(2, 1), (2, 2), (3, 0), (3, 1)],
            [(1, 0), (2, 0), (2, 1), (3, 1)],
        ),
        (0.0, 1.0, 0.0, 1.0),
        _DEFAULT_SPAWN,
        _jlsz_srs(),
    ),
    Shape.Z: ShapeInfo(
        _minos(
            [(1, 0), (1, 1), (2, 1), (2, 2)],
            [(1, 2), (2, 1), (2, 2), (3, 1)],
            [(2, 0), (2, 1), (3, 1), (3, 2)],
            [(1, 1), (2, 0), (2, 1), (3, 0)],
        ),
        (1.0, 0.0, 0.0, 1.0),
        _DEFAULT_SPAWN,
        _jlsz_srs(),
    ),
}


def shape_info(shape) -> ShapeInfo:
    """Return the static description of ``shape``; raise ValueError for an unknown shape."""
    try:
        return _SHAPE_INFOS[Shape(shape)]
    except ValueError:
        raise ValueError(f"unknown tetrimino shape: {shape!r}") from None


def mino_locations(shape, facing) -> Tuple[Point, ...]:
    """Return the four mino locations, local to the piece, for a shape and facing."""
    try:
        facing = Facing(facing)
    except ValueError:
        raise ValueError(f"unknown facing: {facing!r}") from None
    return shape_info(shape).mino_locations[facing]


def srs_offsets(shape, facing, direction) -> Tuple[Point, ...]:
    """Return the rotation point offsets to try, in order, for a rotation."""
    try:
        facing = Facing(facing)
        direction = RotationDirection(direction)
    except ValueError:
        raise ValueError(f"invalid rotation: {facing!r}, {direction!r}") from None
    return shape_info(shape).srs_offsets[facing][direction]


def initial_location(shape) -> Point:
    """Return the matrix location a piece of ``shape`` spawns at."""
    return shape_info(shape).initial_location


def random_shape(rng: Optional[random.Random] = None) -> Shape:
    """Return a uniformly chosen shape."""
    rng = rng or random
    return Shape(rng.randrange(len(Shape)))


def shape_name(shape) -> str:
    """Return the letter naming ``shape``, or "None" if it is not a shape."""
    try:
        return Shape(shape).name
    except ValueError:
        return "None"


def facing_name(facing) -> str:
    """Return the name of ``facing`` ("North", ...), or "None" if it is not a facing."""
    try:
        return Facing(facing).name.capitalize()
    except ValueError:
        return "None"


def movement_offset(direction: Direction) -> Point:
    """Return the whole-cell matrix offset for one step in ``direction``."""
    row, col = direction
    return int(row), int(col)