"""Seven-bag generation of tetriminos."""

from __future__ import annotations

import random
from typing import Callable, List, Optional

from tetrion.pieces import Tetrimino
from tetrion.shapes import Facing, Shape


class BagGenerator:
    """Hands out shapes so that every run of seven holds each shape once."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        piece_factory: Callable[[Shape, Facing], Tetrimino] = Tetrimino,
    ) -> None:
        self._rng = rng or random.Random()
        self._piece_factory = piece_factory
        self._bag: List[Shape] = list(Shape)
        self._index = 0
        self._shuffle()

    def _shuffle(self) -> None:
        for i in range(len(self._bag) - 1, 0, -1):
            j = self._rng.randint(0, i)
            self._bag[i], self._bag[j] = self._bag[j], self._bag[i]

    def next_shape(self) -> Shape:
        """Return the next shape from the bag, reshuffling once it is used up."""
        if self._index >= len(self._bag):
            self._index = 0
            self._shuffle()
        shape = self._bag[self._index]
        self._index += 1
        return shape

    def spawn(self) -> Tetrimino:
        """Create a piece whose shape comes from the bag."""
        return self.spawn_by_shape(self.next_shape())

    def spawn_by_shape(self, shape: Shape) -> Tetrimino:
        """Create a piece of ``shape`` in the default facing."""
        return self._piece_factory(Shape(shape), Tetrimino.DEFAULT_FACING)