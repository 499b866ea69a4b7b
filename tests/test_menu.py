import pytest

from tetrion.menu import (
    INVALID_INDEX,
    Menu,
    MenuDirection,
    direction_name,
    menu_direction,
    move_delta,
)


@pytest.mark.parametrize(
    "key,direction",
    [
        ("Up", MenuDirection.UP),
        ("Gamepad_DPad_Up", MenuDirection.UP),
        ("Gamepad_LeftStick_Up", MenuDirection.UP),
        ("Down", MenuDirection.DOWN),
        ("Gamepad_DPad_Down", MenuDirection.DOWN),
        ("Left", MenuDirection.LEFT),
        ("Gamepad_LeftStick_Left", MenuDirection.LEFT),
        ("Right", MenuDirection.RIGHT),
        ("Gamepad_DPad_Right", MenuDirection.RIGHT),
    ],
)
def test_menu_direction(key, direction):
    assert menu_direction(key) is direction


def test_menu_direction_unknown_key():
    assert menu_direction("Enter") is None


def test_move_delta_opposites():
    assert move_delta(MenuDirection.UP) == -move_delta(MenuDirection.DOWN)
    assert move_delta(MenuDirection.LEFT) == -move_delta(MenuDirection.RIGHT)
    assert move_delta(MenuDirection.UP) == -1


@pytest.mark.parametrize(
    "direction,name",
    [
        (MenuDirection.UP, "Up"),
        (MenuDirection.DOWN, "Down"),
        (MenuDirection.LEFT, "Left"),
        (MenuDirection.RIGHT, "Right"),
    ],
)
def test_direction_name(direction, name):
    assert direction_name(direction) == name


def test_direction_name_none_raises():
    with pytest.raises(ValueError):
        direction_name(MenuDirection.NONE)


def test_first_key_focuses_default_button():
    menu = Menu(["start", "option", "exit"])
    assert menu.focused_index == INVALID_INDEX
    assert menu.handle_key("Down") is True
    assert menu.focused_button == "start"


def test_down_moves_to_next_button():
    menu = Menu(["start", "option", "exit"])
    menu.handle_key("Enter")
    assert menu.handle_key("Down") is True
    assert menu.focused_button == "option"


def test_up_from_first_wraps_to_last():
    buttons = ["start", "option", "exit"]
    menu = Menu(buttons)
    menu.set_default_focus()
    menu.handle_key("Up")
    assert menu.focused_button == buttons[-1]


def test_down_from_last_wraps_to_first():
    buttons = ["start", "option", "exit"]
    menu = Menu(buttons)
    menu.focus(len(buttons) - 1)
    menu.handle_key("Gamepad_DPad_Down")
    assert menu.focused_button == buttons[0]


def test_lost_focus_is_restored_without_moving():
    menu = Menu(["a", "b", "c"])
    menu.focus(1)
    menu.blur()
    assert menu.handle_key("Down") is True
    assert menu.focused_button == "b"
    assert menu.button_has_focus is True


def test_unhandled_key():
    menu = Menu(["a", "b"])
    menu.set_default_focus()
    assert menu.handle_key("SpaceBar") is False
    assert menu.focused_button == "a"


def test_move_focus_round_trip():
    menu = Menu(["a", "b", "c", "d"])
    menu.focus(2)
    menu.move_focus(3)
    menu.move_focus(-3)
    assert menu.focused_index == 2


def test_focus_skips_missing_button():
    menu = Menu(["a", None, "c"])
    menu.focus(0)
    menu.focus(1)
    assert menu.focused_index == 0


def test_focus_out_of_range_raises():
    menu = Menu(["a"])
    with pytest.raises(IndexError):
        menu.focus(1)


def test_move_focus_empty_menu_raises():
    with pytest.raises(IndexError):
        Menu().move_focus(1)