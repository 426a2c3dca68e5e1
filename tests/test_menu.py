import pytest

from shellbar.centerbox import Alignment
from shellbar.config import Position
from shellbar.menu import (
    ButtonAnchor,
    KeyboardInteractivity,
    Layer,
    Menu,
    MenuKind,
    MenuSize,
    MenuType,
    SetKeyboardInteractivity,
    SetLayer,
    menu_left_padding,
    menu_vertical_alignment,
)

SURFACE = "surface-1"
ANCHOR = ButtonAnchor(x=500.0, y=10.0, viewport_width=1920.0, viewport_height=1080.0)
OTHER_ANCHOR = ButtonAnchor(x=900.0, y=10.0, viewport_width=1920.0, viewport_height=1080.0)
SETTINGS = MenuType(MenuKind.SETTINGS)
UPDATES = MenuType(MenuKind.UPDATES)

OPEN_COMMANDS = [
    SetLayer(SURFACE, Layer.OVERLAY),
    SetKeyboardInteractivity(SURFACE, KeyboardInteractivity.NONE),
]
CLOSE_COMMANDS = [
    SetLayer(SURFACE, Layer.BACKGROUND),
    SetKeyboardInteractivity(SURFACE, KeyboardInteractivity.NONE),
]


def test_tray_menu_needs_name():
    with pytest.raises(ValueError):
        MenuType(MenuKind.TRAY)
    with pytest.raises(ValueError):
        MenuType(MenuKind.SETTINGS, "nm-applet")


def test_open_sets_info_and_raises_layer():
    menu = Menu(SURFACE)
    assert menu.open(SETTINGS, ANCHOR) == OPEN_COMMANDS
    assert menu.menu_info == (SETTINGS, ANCHOR)


def test_close_when_closed_does_nothing():
    menu = Menu(SURFACE)
    assert menu.close() == []
    assert menu.menu_info is None


def test_close_lowers_layer():
    menu = Menu(SURFACE)
    menu.open(SETTINGS, ANCHOR)
    assert menu.close() == CLOSE_COMMANDS
    assert menu.is_open is False


def test_toggle_opens_then_closes():
    menu = Menu(SURFACE)
    assert menu.toggle(UPDATES, ANCHOR) == OPEN_COMMANDS
    assert menu.toggle(UPDATES, ANCHOR) == CLOSE_COMMANDS
    assert menu.menu_info is None


def test_toggle_other_menu_switches_in_place():
    menu = Menu(SURFACE)
    menu.toggle(UPDATES, ANCHOR)
    assert menu.toggle(SETTINGS, OTHER_ANCHOR) == []
    assert menu.menu_info == (SETTINGS, OTHER_ANCHOR)


def test_toggle_distinguishes_tray_items():
    menu = Menu(SURFACE)
    first = MenuType(MenuKind.TRAY, "first")
    second = MenuType(MenuKind.TRAY, "second")
    menu.toggle(first, ANCHOR)
    assert menu.toggle(second, ANCHOR) == []
    assert menu.menu_info[0] == second


def test_close_if_only_matching():
    menu = Menu(SURFACE)
    menu.open(SETTINGS, ANCHOR)
    assert menu.close_if(UPDATES) == []
    assert menu.is_open
    assert menu.close_if(SETTINGS) == CLOSE_COMMANDS
    assert not menu.is_open
    assert menu.close_if(SETTINGS) == []


def test_keyboard_requests():
    menu = Menu(SURFACE)
    assert menu.request_keyboard() == [
        SetKeyboardInteractivity(SURFACE, KeyboardInteractivity.ON_DEMAND)
    ]
    assert menu.release_keyboard() == [
        SetKeyboardInteractivity(SURFACE, KeyboardInteractivity.NONE)
    ]


def test_menu_sizes():
    assert MenuSize.NORMAL.width() == 250.0
    assert MenuSize.LARGE.width() == 350.0


@pytest.mark.parametrize("size", list(MenuSize))
def test_left_padding_centres_under_button(size):
    padding = menu_left_padding(size, ANCHOR)
    assert padding + size.width() / 2 == ANCHOR.x


def test_left_padding_clamped_to_left_margin():
    anchor = ButtonAnchor(x=10.0, y=0.0, viewport_width=1920.0, viewport_height=1080.0)
    assert menu_left_padding(MenuSize.NORMAL, anchor) == 8.0


def test_left_padding_clamped_to_right_edge():
    anchor = ButtonAnchor(x=1910.0, y=0.0, viewport_width=1920.0, viewport_height=1080.0)
    padding = menu_left_padding(MenuSize.LARGE, anchor)
    assert padding + MenuSize.LARGE.width() + 8.0 == anchor.viewport_width


def test_vertical_alignment_follows_bar():
    assert menu_vertical_alignment(Position.TOP) is Alignment.START
    assert menu_vertical_alignment(Position.BOTTOM) is Alignment.END