import pytest

from tetrion.piece_queue import PieceQueue, slot_location
from tetrion.pieces import Tetrimino
from tetrion.shapes import Shape


def _pieces():
    return [Tetrimino(Shape.O), Tetrimino(Shape.I), Tetrimino(Shape.T)]


def test_fifo_order():
    queue = PieceQueue(5)
    pieces = _pieces()
    for piece in pieces:
        queue.enqueue(piece)
    assert [queue.dequeue() for _ in pieces] == pieces
    assert len(queue) == 0


def test_dequeue_empty_returns_none():
    assert PieceQueue().dequeue() is None


def test_first_and_last():
    queue = PieceQueue()
    assert queue.first() is None
    assert queue.last() is None
    pieces = _pieces()
    for piece in pieces:
        queue.enqueue(piece)
    assert queue.first() is pieces[0]
    assert queue.last() is pieces[-1]
    assert len(queue) == 3


def test_enqueue_none_raises():
    with pytest.raises(ValueError):
        PieceQueue().enqueue(None)


def test_slot_location_origin_and_step():
    assert slot_location(0) == (0.0, 0.0, 0.0)
    assert slot_location(1) == (0.0, -400.0, 0.0)


def test_layout_places_pieces_in_slots():
    queue = PieceQueue()
    pieces = _pieces()
    for piece in pieces:
        queue.enqueue(piece)
    placed = queue.layout()
    assert [p for p, _ in placed] == pieces
    for index, (piece, location) in enumerate(placed):
        assert location == slot_location(index)
        assert piece.relative_location == slot_location(index)


def test_layout_after_dequeue_shifts_up():
    queue = PieceQueue()
    pieces = _pieces()
    for piece in pieces:
        queue.enqueue(piece)
    queue.dequeue()
    queue.layout()
    assert pieces[1].relative_location == slot_location(0)
    assert list(queue) == pieces[1:]