"""Minos and the tetrimino pieces built from them.

Matrix locations are ``(row, col)`` pairs.
Relative locations are ``(x, y, z)`` vectors in world units.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from tetrion import shapes
from tetrion.shapes import Color, Facing, Point, RotationDirection, Shape, ShapeInfo

Vector = Tuple[float, float, float]

MINO_SCALE = 1.0
UNIT_LENGTH = 100.0 * MINO_SCALE
MATERIAL_OUTLINE_PATH = "/Game/Material/M_MinoOutline"

_WHITE: Color = (1.0, 1.0, 1.0, 1.0)


def relative_location(matrix_location: Point, z: float = 0.0) -> Vector:
    """Convert a matrix location into a relative location in world units."""
    row, col = matrix_location
    return (-UNIT_LENGTH * col, -UNIT_LENGTH * row, float(z))


@dataclass(frozen=True)
class MinoInfo:
    """What a mino looks like: material, colour, opacity and draw priority."""

    material_path: str = ""
    base_color: Color = _WHITE
    opacity: float = 1.0
    translucent_sort_priority: int = 0


@dataclass(eq=False)
class Mino:
    """One block of a tetrimino, placed at a matrix location under a parent."""

    info: MinoInfo = field(default_factory=MinoInfo)
    location: Point = (0, 0)
    z: float = 0.0
    parent: Any = None
    destroyed: bool = False

    @property
    def relative_location(self) -> Vector:
        """The mino's location relative to its parent, in world units."""
        return relative_location(self.location, self.z)

    def set_location(self, location: Point, z: float = 0.0) -> None:
        """Move the mino to ``location`` inside its parent."""
        self.location = (int(location[0]), int(location[1]))
        self.z = float(z)

    def attach_to(self, parent: Any, location: Point, z: float = 0.0) -> None:
        """Attach the mino to ``parent`` at ``location``."""
        self.parent = parent
        self.set_location(location, z)

    def detach(self) -> None:
        """Detach the mino from its parent."""
        self.parent = None

    def destroy(self) -> None:
        """Detach and mark the mino as destroyed."""
        self.detach()
        self.destroyed = True


class TetriminoBase:
    """A piece of four minos with a shape, a facing and a matrix location."""

    MINO_COUNT = shapes.MINO_COUNT

    def __init__(self, shape: Optional[Shape] = None, facing: Facing = Facing.NORTH) -> None:
        self.shape: Optional[Shape] = None
        self.facing: Facing = Facing(facing)
        self.location: Point = (0, 0)
        self.relative_location: Vector = relative_location(self.location)
        self.hidden = False
        self.minos: List[Mino] = []
        if shape is not None:
            self.initialize(shape, facing)

    def __str__(self) -> str:
        return f"{shapes.shape_name(self.shape)} facing {shapes.facing_name(self.facing)}"

    def mino_info(self) -> MinoInfo:
        """Return how this piece's minos look."""
        return MinoInfo()

    @property
    def shape_info(self) -> ShapeInfo:
        """Static description of this piece's shape."""
        return shapes.shape_info(self.shape)

    @property
    def initial_location(self) -> Point:
        """The matrix location this piece's shape spawns at."""
        return shapes.initial_location(self.shape)

    def mino_locations(self):
        """Return the mino locations, local to the piece, for its shape and facing."""
        return shapes.mino_locations(self.shape, self.facing)

    def srs_offsets(self, direction: RotationDirection):
        """Return the rotation point offsets to try for a rotation in ``direction``."""
        return shapes.srs_offsets(self.shape, self.facing, direction)

    def set_location(self, location: Point) -> None:
        """Place the piece at matrix ``location``."""
        self.location = (int(location[0]), int(location[1]))
        self.relative_location = relative_location(self.location)

    def initialize(self, shape: Shape, facing: Facing) -> None:
        """Give the piece a shape and facing and build fresh minos for it."""
        self.shape = Shape(shape)
        self.facing = Facing(facing)
        for mino in self.minos:
            mino.destroy()
        info = self.mino_info()
        self.minos = [Mino(info=info, location=local, parent=self) for local in self.mino_locations()]

    def rotate_by_facing(self, facing: Facing) -> None:
        """Turn the piece to ``facing`` and move its minos accordingly."""
        self.facing = Facing(facing)
        for mino, local in zip(self.minos, self.mino_locations()):
            mino.set_location(local)

    def detach_minos(self) -> None:
        """Release every mino from the piece."""
        for mino in self.minos:
            mino.detach()

    def _add_offset(self, offset: Point) -> None:
        d_row, d_col = int(offset[0]), int(offset[1])
        dx, dy, dz = relative_location((d_row, d_col))
        x, y, z = self.relative_location
        self.relative_location = (x + dx, y + dy, z + dz)
        self.location = (self.location[0] + d_row, self.location[1] + d_col)


class GhostPiece(TetriminoBase):
    """The faint preview of where the piece in play will land."""

    OPACITY = 0.1
    TRANSLUCENT_SORT_PRIORITY = 0

    def mino_info(self) -> MinoInfo:
        """Return the translucent look of the ghost's minos."""
        return MinoInfo(
            MATERIAL_OUTLINE_PATH,
            self.shape_info.base_color,
            self.OPACITY,
            self.TRANSLUCENT_SORT_PRIORITY,
        )


class Tetrimino(TetriminoBase):
    """The piece a player moves, optionally tied to a board and a ghost piece."""

    DEFAULT_FACING = Facing.NORTH
    OPACITY = 1.0
    TRANSLUCENT_SORT_PRIORITY = 1

    def __init__(self, shape: Optional[Shape] = None, facing: Facing = DEFAULT_FACING) -> None:
        self.board: Any = None
        self.ghost: Optional[GhostPiece] = None
        super().__init__(shape, facing)

    def mino_info(self) -> MinoInfo:
        """Return the opaque look of the piece's minos."""
        return MinoInfo(
            MATERIAL_OUTLINE_PATH,
            self.shape_info.base_color,
            self.OPACITY,
            self.TRANSLUCENT_SORT_PRIORITY,
        )

    def _update_ghost_location(self) -> None:
        if self.ghost is not None and self.board is not None:
            self.ghost.set_location(self.board.final_falling_location(self))

    def set_ghost_piece(self, ghost: Optional[GhostPiece]) -> None:
        """Attach a ghost piece that shows where this piece would land."""
        self.ghost = ghost
        if ghost is not None and self.board is not None:
            ghost.initialize(self.shape, self.facing)
            self._update_ghost_location()
            ghost.hidden = False

    def set_board(self, board: Any) -> None:
        """Put the piece on ``board`` at its shape's spawn location."""
        self.board = board
        if board is not None:
            self.set_location(self.initial_location)

    def lowest_row(self) -> int:
        """Return the matrix row of the piece's lowest mino."""
        return self.location[0] + max(row for row, _ in self.mino_locations())

    def detach_from_board(self) -> None:
        """Drop the piece's ties to its board and ghost piece."""
        self.ghost = None
        self.board = None

    def move_by(self, offset: Point) -> None:
        """Move the piece by ``offset`` and keep the ghost piece in step."""
        self._add_offset(offset)
        self._update_ghost_location()

    def rotate_to(self, direction: RotationDirection) -> None:
        """Turn the piece a quarter turn in ``direction``, along with its ghost."""
        new_facing = self.facing.rotated(int(RotationDirection(direction)))
        self.rotate_by_facing(new_facing)
        if self.ghost is not None:
            self.ghost.rotate_by_facing(new_facing)

    def rotate_with_offset(self, direction: RotationDirection, offset: Point) -> None:
        """Rotate in ``direction`` and then shift by the rotation point ``offset``."""
        self.rotate_to(direction)
        self.move_by(offset)