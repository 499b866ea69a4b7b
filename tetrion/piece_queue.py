"""First-in first-out queue of upcoming or held tetriminos."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple

from tetrion.pieces import UNIT_LENGTH, Tetrimino, Vector

SLOT_Y_OFFSET = -(UNIT_LENGTH * 4.0)


def slot_location(index: int) -> Vector:
    """Return the relative location of the queue slot at ``index``."""
    return (0.0, SLOT_Y_OFFSET * index, 0.0)


class PieceQueue:
    """An ordered queue of pieces laid out in a column of slots."""

    def __init__(self, capacity: Optional[int] = None) -> None:
        self.capacity = capacity
        self._pieces: Deque[Tetrimino] = deque()

    def __len__(self) -> int:
        return len(self._pieces)

    def __iter__(self) -> Iterator[Tetrimino]:
        return iter(self._pieces)

    def enqueue(self, piece: Tetrimino) -> None:
        """Add ``piece`` at the back of the queue."""
        if piece is None:
            raise ValueError("cannot enqueue a missing piece")
        self._pieces.append(piece)

    def dequeue(self) -> Optional[Tetrimino]:
        """Remove and return the front piece, or None if the queue is empty."""
        return self._pieces.popleft() if self._pieces else None

    def first(self) -> Optional[Tetrimino]:
        """Return the front piece without removing it, or None."""
        return self._pieces[0] if self._pieces else None

    def last(self) -> Optional[Tetrimino]:
        """Return the back piece without removing it, or None."""
        return self._pieces[-1] if self._pieces else None

    def layout(self) -> List[Tuple[Tetrimino, Vector]]:
        """Move every piece to its slot and return the pieces with their slots."""
        placed = []
        for index, piece in enumerate(self._pieces):
            location = slot_location(index)
            piece.relative_location = location
            placed.append((piece, location))
        return placed