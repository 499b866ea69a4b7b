"""Turns key presses and releases into actions on the play manager."""

from __future__ import annotations

from enum import IntFlag
from typing import Any

from tetrion.shapes import MOVE_LEFT, MOVE_RIGHT, Direction, RotationDirection


class KeyFlags(IntFlag):
    """Keys currently held down."""

    NONE = 0
    LEFT = 1 << 0
    RIGHT = 1 << 1
    SOFT_DROP = 1 << 2


_DIRECTIONS = {
    KeyFlags.LEFT: MOVE_LEFT,
    KeyFlags.RIGHT: MOVE_RIGHT,
}


def direction_for_key(flag: KeyFlags) -> Direction:
    """Return the movement direction of a sideways key; raise ValueError otherwise."""
    try:
        return _DIRECTIONS[KeyFlags(flag)]
    except (KeyError, ValueError):
        raise ValueError(f"not a movement key: {flag!r}") from None


class Controller:
    """Tracks held keys and forwards input to the game's play manager."""

    def __init__(self, game: Any = None) -> None:
        self.game = game
        self.pressed = KeyFlags.NONE

    @property
    def _manager(self):
        return self.game.play_manager if self.game is not None else None

    def is_key_pressed(self, flag: KeyFlags) -> bool:
        """Return True if any of ``flag`` is held down."""
        return bool(self.pressed & flag)

    def is_soft_drop_on(self) -> bool:
        """Return True while the soft drop key is held."""
        return self.is_key_pressed(KeyFlags.SOFT_DROP)

    def _start_movement(self, key: KeyFlags) -> None:
        manager = self._manager
        if manager is None:
            return
        self.pressed |= key
        manager.start_auto_repeat(direction_for_key(key))

    def _end_movement(self, key: KeyFlags) -> None:
        manager = self._manager
        if manager is None:
            return
        both = KeyFlags.LEFT | KeyFlags.RIGHT
        if (self.pressed & both) == both:
            released = direction_for_key(key)
            if tuple(manager.movement_direction) == tuple(released):
                opposite = (-released[0], -released[1])
                manager.start_auto_repeat(opposite)
        else:
            manager.end_auto_repeat()
        self.pressed &= ~key

    def on_move_left_started(self) -> None:
        """Left key pressed."""
        self._start_movement(KeyFlags.LEFT)

    def on_move_left_completed(self) -> None:
        """Left key released."""
        self._end_movement(KeyFlags.LEFT)

    def on_move_right_started(self) -> None:
        """Right key pressed."""
        self._start_movement(KeyFlags.RIGHT)

    def on_move_right_completed(self) -> None:
        """Right key released."""
        self._end_movement(KeyFlags.RIGHT)

    def on_soft_drop_started(self) -> None:
        """Soft drop key pressed."""
        manager = self._manager
        if manager is not None:
            self.pressed |= KeyFlags.SOFT_DROP
            manager.start_soft_drop()

    def on_soft_drop_completed(self) -> None:
        """Soft drop key released."""
        manager = self._manager
        if manager is not None:
            self.pressed &= ~KeyFlags.SOFT_DROP
            manager.end_soft_drop()

    def on_hard_drop_started(self) -> None:
        """Hard drop key pressed."""
        manager = self._manager
        if manager is not None:
            manager.hard_drop()

    def on_rotate_clockwise_started(self) -> None:
        """Clockwise rotation key pressed."""
        manager = self._manager
        if manager is not None:
            manager.rotate(RotationDirection.CLOCKWISE)

    def on_rotate_counter_clockwise_started(self) -> None:
        """Counter-clockwise rotation key pressed."""
        manager = self._manager
        if manager is not None:
            manager.rotate(RotationDirection.COUNTER_CLOCKWISE)

    def on_hold_started(self) -> None:
        """Hold key pressed."""
        manager = self._manager
        if manager is not None:
            manager.hold()