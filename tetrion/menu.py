"""Keyboard focus and navigation in a menu of buttons."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, List, Optional

INVALID_INDEX = -1
DEFAULT_INDEX = 0


class MenuDirection(Enum):
    """Which way a menu key moves the focus."""

    NONE = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


_KEYS = {
    MenuDirection.UP: ("Up", "Gamepad_DPad_Up", "Gamepad_LeftStick_Up"),
    MenuDirection.DOWN: ("Down", "Gamepad_DPad_Down", "Gamepad_LeftStick_Down"),
    MenuDirection.LEFT: ("Left", "Gamepad_DPad_Left", "Gamepad_LeftStick_Left"),
    MenuDirection.RIGHT: ("Right", "Gamepad_DPad_Right", "Gamepad_LeftStick_Right"),
}

_NAMES = {
    MenuDirection.UP: "Up",
    MenuDirection.DOWN: "Down",
    MenuDirection.LEFT: "Left",
    MenuDirection.RIGHT: "Right",
}


def menu_direction(key: str) -> Optional[MenuDirection]:
    """Return the direction ``key`` moves the focus, or None if it is not a move key."""
    for direction, keys in _KEYS.items():
        if key in keys:
            return direction
    return None


def move_delta(direction: MenuDirection) -> int:
    """Return -1 for Up and Left (odd values), +1 otherwise."""
    value = MenuDirection(direction).value
    if value & 1 == 1:
        return -1
    return 1


def direction_name(direction: MenuDirection) -> str:
    """Return the name of a move direction; raise ValueError for NONE."""
    try:
        return _NAMES[MenuDirection(direction)]
    except (KeyError, ValueError):
        raise ValueError(f"not a move direction: {direction!r}") from None


class Menu:
    """A list of buttons of which at most one holds the keyboard focus."""

    def __init__(self, buttons: Iterable[Any] = ()) -> None:
        self.buttons: List[Any] = list(buttons)
        self.focused_index = INVALID_INDEX
        self.button_has_focus = False

    @property
    def focused_button(self) -> Any:
        """The focused button, or None if no button was focused yet."""
        if self.focused_index == INVALID_INDEX:
            return None
        return self.buttons[self.focused_index]

    def blur(self) -> None:
        """Note that the focused button lost keyboard focus to another widget."""
        self.button_has_focus = False

    def focus(self, index: int) -> None:
        """Give the focus to the button at ``index``; missing buttons are skipped."""
        if not 0 <= index < len(self.buttons):
            raise IndexError(f"no menu button at index {index}")
        if self.buttons[index] is not None:
            self.focused_index = index
            self.button_has_focus = True

    def set_default_focus(self) -> None:
        """Focus the first button."""
        self.focus(DEFAULT_INDEX)

    def move_focus(self, delta: int) -> None:
        """Move the focus by ``delta`` buttons, wrapping round at either end."""
        count = len(self.buttons)
        if count == 0:
            raise IndexError("menu has no buttons")
        self.focus((self.focused_index + delta + count) % count)

    def handle_key(self, key: str) -> bool:
        """React to ``key`` and return True if the menu handled it."""
        if self.focused_index == INVALID_INDEX:
            self.set_default_focus()
            return True
        if self.focused_button is not None and not self.button_has_focus:
            self.button_has_focus = True
            return True
        direction = menu_direction(key)
        if direction is not None:
            self.move_focus(move_delta(direction))
            return True
        return False