"""The rules of play: phases of a turn, movement, rotation, lock down and hold."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from tetrion import shapes, timing
from tetrion.board import VISIBLE_BEGIN_ROW, VISIBLE_END_ROW, Board
from tetrion.generator import BagGenerator
from tetrion.piece_queue import PieceQueue
from tetrion.pieces import GhostPiece, Tetrimino
from tetrion.player_state import GamePlayInfo
from tetrion.shapes import MOVE_DOWN, MOVE_LEFT, MOVE_RIGHT, Direction, RotationDirection
from tetrion.timing import ExtendedPlacement, Phase, TimerHandle, TimerManager

log = logging.getLogger(__name__)

NEXT_QUEUE_SIZE = 5
HOLD_QUEUE_SIZE = 1

_SOFT_DROP_MULTIPLIER = 20.0
_NO_DIRECTION: Direction = (0.0, 0.0)


def is_auto_repeat_movement(direction: Direction) -> bool:
    """Return True if ``direction`` is a sideways move that auto-repeats."""
    return tuple(direction) == MOVE_LEFT or tuple(direction) == MOVE_RIGHT


class PlayManager:
    """Runs one player's matrix: spawning, falling, locking and clearing lines.

    ``game`` is optional; when given it supplies ``current_fall_speed()``,
    ``normal_fall_off``, ``update_game_play(info)`` and ``run_game_over()``.
    """

    def __init__(
        self,
        game: Any = None,
        timers: Optional[TimerManager] = None,
        generator: Any = None,
        sound_player: Optional[Callable[[str], None]] = None,
        next_queue_size: int = NEXT_QUEUE_SIZE,
        hold_queue_size: int = HOLD_QUEUE_SIZE,
    ) -> None:
        self.game = game
        self.timers = timers if timers is not None else TimerManager()
        self.generator = generator
        self._sound_player = sound_player
        self.next_queue_size = next_queue_size
        self.hold_queue_size = hold_queue_size

        self.phase = Phase.NONE
        self.manipulable = False
        self.has_lock_down_since_hold = False
        self.game_over = False
        self.normal_fall_speed = -1.0
        self.movement_direction: Direction = _NO_DIRECTION

        self.board: Optional[Board] = None
        self.ghost: Optional[GhostPiece] = None
        self.piece: Optional[Tetrimino] = None
        self.next_queue: Optional[PieceQueue] = None
        self.hold_queue: Optional[PieceQueue] = None
        self.play_info = GamePlayInfo()
        self.placement = ExtendedPlacement()

        self._auto_repeat: Optional[TimerHandle] = None
        self._normal_fall: Optional[TimerHandle] = None
        self._soft_drop: Optional[TimerHandle] = None
        self._lock_down: Optional[TimerHandle] = None

    # Set-up

    def initialize(self) -> None:
        """Create the board, ghost piece and queues, and fill the next queue."""
        if self.game is not None:
            self.normal_fall_speed = self.game.current_fall_speed()
        self.board = Board()
        self.ghost = GhostPiece()
        if self.generator is None:
            self.generator = BagGenerator()
        self.next_queue = PieceQueue(self.next_queue_size)
        for _ in range(self.next_queue_size):
            self._spawn_into_next_queue()
        self.next_queue.layout()
        self.hold_queue = PieceQueue(self.hold_queue_size)
        self.movement_direction = _NO_DIRECTION

    # Phase flow

    def enter_phase(self, phase: Phase) -> None:
        """Switch to ``phase`` and run it."""
        phase = Phase(phase)
        runners = {
            Phase.GENERATION: self._run_generation,
            Phase.FALLING: self._run_falling,
            Phase.LOCK: self._run_lock,
            Phase.PATTERN: self._run_pattern,
            Phase.ITERATE: self._run_iterate,
            Phase.ANIMATE: self._run_animate,
            Phase.ELIMINATE: self._run_eliminate,
            Phase.COMPLETION: self._run_completion,
        }
        if phase not in runners:
            raise ValueError(f"cannot enter phase {timing.phase_name(phase)}")
        self.phase = phase
        runners[phase]()

    def enter_phase_with_delay(self, phase: Phase, delay: float) -> TimerHandle:
        """Enter ``phase`` once ``delay`` seconds have passed."""
        phase = Phase(phase)
        return self.timers.set_timer(
            lambda: self.enter_phase(phase), delay, timing.PHASE_CHANGE_LOOP
        )

    def _run_generation(self) -> None:
        if self.piece is None:
            self._set_piece(self._pop_next())
        if self.board is None:
            raise RuntimeError("play manager is not initialized")
        if self.board.is_blocked(self.piece):
            log.info("block out: game over")
            self._run_game_over()
            return
        self._move_internal(MOVE_DOWN)
        self.enter_phase(Phase.FALLING)

    def _run_falling(self) -> None:
        self.manipulable = True
        self._set_normal_fall_timer()

    def _run_lock(self) -> None:
        self._lock_down = self.timers.set_timer(
            self._lock_down_now, timing.LOCK_DOWN_DELAY, timing.LOCK_DOWN_LOOP
        )

    def _run_pattern(self) -> None:
        if self.board is not None:
            self.play_info.hit_list.extend(
                row for row in range(VISIBLE_BEGIN_ROW, VISIBLE_END_ROW)
                if self.board.is_row_full(row)
            )
        self.enter_phase(Phase.ITERATE)

    def _run_iterate(self) -> None:
        self.enter_phase(Phase.ANIMATE)

    def _run_animate(self) -> None:
        self.enter_phase(Phase.ELIMINATE)

    def _run_eliminate(self) -> None:
        if self.board is not None:
            self.board.clear_rows(self.play_info.hit_list)
        self.enter_phase(Phase.COMPLETION)

    def _run_completion(self) -> None:
        if self.game is not None:
            self.game.update_game_play(self.play_info)
        self.play_info.reset()
        self.timers.clear(self._normal_fall)
        self.enter_phase_with_delay(Phase.GENERATION, timing.GENERATION_PHASE_DELAY)

    # Player actions

    def start_auto_repeat(self, direction: Direction) -> None:
        """Move once in ``direction`` and keep moving while the key is held."""
        self.movement_direction = (float(direction[0]), float(direction[1]))
        self._move_auto_repeat()
        self._auto_repeat = self.timers.set_timer(
            self._move_auto_repeat,
            timing.AUTO_REPEAT_INTERVAL,
            timing.AUTO_REPEAT_LOOP,
            timing.AUTO_REPEAT_INITIAL_DELAY,
        )

    def end_auto_repeat(self) -> None:
        """Stop the auto-repeating sideways movement."""
        self.timers.clear(self._auto_repeat)
        self.movement_direction = _NO_DIRECTION

    def start_soft_drop(self) -> None:
        """Pause the normal fall and drop quickly instead."""
        self.timers.clear(self._normal_fall)
        self._soft_drop = self.timers.set_timer(
            self._move_down,
            self.normal_fall_speed / _SOFT_DROP_MULTIPLIER,
            timing.SOFT_DROP_LOOP,
            timing.SOFT_DROP_INITIAL_DELAY,
        )

    def end_soft_drop(self) -> None:
        """Stop the soft drop and resume the normal fall."""
        self.timers.clear(self._soft_drop)
        self._set_normal_fall_timer()

    def hard_drop(self) -> bool:
        """Drop the piece in play to where it lands and lock it; return True if done."""
        if not self.manipulable:
            log.debug("hard drop ignored: piece is not manipulable")
            return False
        if self.ghost is not None:
            self.ghost.hidden = True
        if self.ghost is not None and self.piece is not None:
            self.piece.set_location(self.ghost.location)
        self._force_lock_down()
        return True

    def rotate(self, direction: RotationDirection) -> bool:
        """Rotate the piece in play by the Super Rotation System; return True if it turned."""
        if not self.manipulable:
            log.debug("rotation ignored: piece is not manipulable")
            return False
        if self.piece is None or self.board is None:
            return False
        direction = RotationDirection(direction)
        for offset in self.piece.srs_offsets(direction):
            if self.board.is_rotation_possible(self.piece, direction, offset):
                self.piece.rotate_with_offset(direction, offset)
                self._play_sound("Rotation")
                self._run_lock_down_system(True)
                return True
        return False

    def hold(self) -> bool:
        """Swap the piece in play with the held piece; return True if done."""
        if not self.manipulable:
            log.debug("hold ignored: piece is not manipulable")
            return False
        if not self._is_hold_available():
            log.debug("hold ignored: holding is not available")
            return False
        if self.piece is None or self.hold_queue is None:
            raise RuntimeError("play manager is not initialized")
        self.manipulable = False
        from_hold = self.hold_queue.dequeue()
        self.piece.detach_from_board()
        self.piece.rotate_by_facing(Tetrimino.DEFAULT_FACING)
        self.hold_queue.enqueue(self.piece)
        self.hold_queue.layout()
        self.piece = None
        self._set_piece(from_hold)
        self.has_lock_down_since_hold = False
        self.enter_phase(Phase.GENERATION)
        return True

    # Movement

    def _move(self, direction: Direction) -> None:
        if not self.manipulable:
            return
        if self.piece is None:
            raise RuntimeError("no piece in play")
        self._move_internal(direction)

    def _move_auto_repeat(self) -> None:
        self._move(self.movement_direction)

    def _move_down(self) -> None:
        self._move(MOVE_DOWN)

    def _move_internal(self, direction: Direction) -> None:
        if self.board is None:
            raise RuntimeError("play manager is not initialized")
        offset = shapes.movement_offset(direction)
        if self.board.is_movement_possible(self.piece, offset):
            self.piece.move_by(offset)
            if is_auto_repeat_movement(direction):
                self._play_sound("AutoRepeatMovement")
            self._run_lock_down_system(True)
        else:
            self._run_lock_down_system(False)

    # Lock down

    def _is_on_surface(self) -> bool:
        return self.board is not None and self.board.is_directly_above_surface(self.piece)

    def _run_lock_down_system(self, moved_or_rotated: bool) -> None:
        lock_active = self.timers.is_active(self._lock_down)
        if moved_or_rotated:
            row = self.piece.lowest_row()
            if row > self.placement.lowest_row:
                self.placement.lowest_row = row
                self.placement.timer_reset_count = ExtendedPlacement.MAX_TIMER_RESET_COUNT
            if self._is_on_surface():
                if self.placement.timer_reset_count <= 0:
                    self._force_lock_down()
                else:
                    if lock_active:
                        self.placement.timer_reset_count -= 1
                    self.enter_phase(Phase.LOCK)
            elif lock_active:
                self.placement.timer_reset_count -= 1
        elif self._is_on_surface() and not lock_active:
            self.enter_phase(Phase.LOCK)

    def _lock_down_now(self) -> None:
        if self.timers.is_active(self._lock_down):
            self.timers.clear(self._lock_down)
        if not self._is_on_surface():
            return
        self.manipulable = False
        if self.board is None or self.piece is None:
            raise RuntimeError("no piece in play to lock down")
        if self.board.is_above_skyline(self.piece):
            log.warning("lock out: game over")
            self._run_game_over()
            return
        self.piece.detach_minos()
        self.board.add_minos(self.piece)
        self.piece.detach_from_board()
        self.piece = None
        self.has_lock_down_since_hold = True
        self.enter_phase(Phase.PATTERN)

    def _force_lock_down(self) -> None:
        self.timers.clear(self._lock_down)
        self._lock_down_now()

    # Helpers

    def _run_game_over(self) -> None:
        self._play_sound("GameOver")
        self.game_over = True
        self.manipulable = False
        for handle in (self._auto_repeat, self._soft_drop, self._normal_fall, self._lock_down):
            self.timers.clear(handle)
        if self.game is not None:
            self.game.run_game_over()

    def _is_hold_available(self) -> bool:
        empty_hold = self.hold_queue is not None and len(self.hold_queue) == 0
        return empty_hold or self.has_lock_down_since_hold

    def _set_normal_fall_timer(self) -> None:
        if self.game is not None and not getattr(self.game, "normal_fall_off", False):
            self._normal_fall = self.timers.set_timer(
                self._move_down,
                self.normal_fall_speed,
                timing.NORMAL_FALL_LOOP,
                timing.NORMAL_FALL_INITIAL_DELAY,
            )

    def _set_piece(self, piece: Optional[Tetrimino]) -> None:
        self.piece = piece
        if piece is not None:
            piece.set_board(self.board)
            piece.set_ghost_piece(self.ghost)
            self.placement.reset(piece.lowest_row())

    def _pop_next(self) -> Tetrimino:
        if self.next_queue is None:
            raise RuntimeError("play manager is not initialized")
        piece = self.next_queue.dequeue()
        if piece is None:
            raise RuntimeError("next queue is empty")
        self._spawn_into_next_queue()
        self.next_queue.layout()
        return piece

    def _spawn_into_next_queue(self) -> None:
        self.next_queue.enqueue(self.generator.spawn())

    def _play_sound(self, name: str) -> None:
        if self._sound_player is not None:
            self._sound_player(name)