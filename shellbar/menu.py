"""Pop-up menu state attached to a bar surface."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum
from typing import Union

from shellbar.centerbox import Alignment
from shellbar.config import Position

_EDGE_MARGIN = 8.0


class MenuKind(Enum):
    UPDATES = "updates"
    SETTINGS = "settings"
    TRAY = "tray"
    MEDIA_PLAYER = "media_player"


@dataclass(frozen=True)
class MenuType:
    """Which menu is shown; tray menus also name the tray item they belong to."""

    kind: MenuKind
    tray_name: str | None = None

    def __post_init__(self) -> None:
        if self.kind is MenuKind.TRAY and self.tray_name is None:
            raise ValueError("a tray menu needs the name of its tray item")
        if self.kind is not MenuKind.TRAY and self.tray_name is not None:
            raise ValueError(f"a {self.kind.value} menu takes no tray name")


@dataclass(frozen=True)
class ButtonAnchor:
    """Where the button that opened a menu sits, and the size of its output."""

    x: float
    y: float
    viewport_width: float
    viewport_height: float


class Layer(Enum):
    BACKGROUND = "background"
    BOTTOM = "bottom"
    TOP = "top"
    OVERLAY = "overlay"


class KeyboardInteractivity(Enum):
    NONE = "none"
    EXCLUSIVE = "exclusive"
    ON_DEMAND = "on_demand"


@dataclass(frozen=True)
class SetLayer:
    surface_id: Hashable
    layer: Layer


@dataclass(frozen=True)
class SetKeyboardInteractivity:
    surface_id: Hashable
    mode: KeyboardInteractivity


Command = Union[SetLayer, SetKeyboardInteractivity]


@dataclass
class Menu:
    """A menu surface; its methods change its state and return the surface commands to run."""

    surface_id: Hashable
    menu_info: tuple[MenuType, ButtonAnchor] | None = None

    @property
    def is_open(self) -> bool:
        return self.menu_info is not None

    def open(self, menu_type: MenuType, anchor: ButtonAnchor) -> list[Command]:
        self.menu_info = (menu_type, anchor)
        return [
            SetLayer(self.surface_id, Layer.OVERLAY),
            SetKeyboardInteractivity(self.surface_id, KeyboardInteractivity.NONE),
        ]

    def close(self) -> list[Command]:
        if self.menu_info is None:
            return []
        self.menu_info = None
        return [
            SetLayer(self.surface_id, Layer.BACKGROUND),
            SetKeyboardInteractivity(self.surface_id, KeyboardInteractivity.NONE),
        ]

    def toggle(self, menu_type: MenuType, anchor: ButtonAnchor) -> list[Command]:
        """Open the menu, close it if the same menu is open, or switch to another one."""
        if self.menu_info is None:
            return self.open(menu_type, anchor)
        current, _ = self.menu_info
        if current == menu_type:
            return self.close()
        self.menu_info = (menu_type, anchor)
        return []

    def close_if(self, menu_type: MenuType) -> list[Command]:
        if self.menu_info is not None and self.menu_info[0] == menu_type:
            return self.close()
        return []

    def request_keyboard(self) -> list[Command]:
        return [SetKeyboardInteractivity(self.surface_id, KeyboardInteractivity.ON_DEMAND)]

    def release_keyboard(self) -> list[Command]:
        return [SetKeyboardInteractivity(self.surface_id, KeyboardInteractivity.NONE)]


class MenuSize(Enum):
    NORMAL = 250.0
    LARGE = 350.0

    def width(self) -> float:
        return self.value


def menu_left_padding(menu_size: MenuSize, anchor: ButtonAnchor) -> float:
    """Left offset that centres the menu under its button while keeping it on screen."""
    size = menu_size.width()
    return min(
        max(anchor.x - size / 2.0, _EDGE_MARGIN),
        anchor.viewport_width - size - _EDGE_MARGIN,
    )


def menu_vertical_alignment(position: Position) -> Alignment:
    """Menus hang from the edge of the screen the bar sits on."""
    return Alignment.START if position is Position.TOP else Alignment.END