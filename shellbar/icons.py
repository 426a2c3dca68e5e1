"""Glyphs of the symbol font used for the bar's icons."""

from __future__ import annotations

from enum import Enum

ICON_FONT = "Symbols Nerd Font"


class Icon(Enum):
    NONE = "none"
    APP_LAUNCHER = "app_launcher"
    CLIPBOARD = "clipboard"
    REFRESH = "refresh"
    NO_UPDATES_AVAILABLE = "no_updates_available"
    UPDATES_AVAILABLE = "updates_available"
    MENU_CLOSED = "menu_closed"
    MENU_OPEN = "menu_open"
    CPU = "cpu"
    MEM = "mem"
    TEMP = "temp"
    SPEAKER0 = "speaker0"
    SPEAKER1 = "speaker1"
    SPEAKER2 = "speaker2"
    SPEAKER3 = "speaker3"
    HEADPHONES0 = "headphones0"
    HEADPHONES1 = "headphones1"
    HEADSET = "headset"
    MIC0 = "mic0"
    MIC1 = "mic1"
    MONITOR_SPEAKER = "monitor_speaker"
    SCREEN_SHARE = "screen_share"
    BATTERY0 = "battery0"
    BATTERY1 = "battery1"
    BATTERY2 = "battery2"
    BATTERY3 = "battery3"
    BATTERY4 = "battery4"
    BATTERY_CHARGING = "battery_charging"
    WIFI0 = "wifi0"
    WIFI1 = "wifi1"
    WIFI2 = "wifi2"
    WIFI3 = "wifi3"
    WIFI4 = "wifi4"
    WIFI5 = "wifi5"
    WIFI_LOCK1 = "wifi_lock1"
    WIFI_LOCK2 = "wifi_lock2"
    WIFI_LOCK3 = "wifi_lock3"
    WIFI_LOCK4 = "wifi_lock4"
    WIFI_LOCK5 = "wifi_lock5"
    ETHERNET = "ethernet"
    VPN = "vpn"
    BLUETOOTH = "bluetooth"
    POWER_SAVER = "power_saver"
    BALANCED = "balanced"
    PERFORMANCE = "performance"
    EYE_OPENED = "eye_opened"
    EYE_CLOSED = "eye_closed"
    LOCK = "lock"
    POWER = "power"
    REBOOT = "reboot"
    SUSPEND = "suspend"
    LOGOUT = "logout"
    RIGHT_ARROW = "right_arrow"
    BRIGHTNESS = "brightness"
    POINT = "point"
    CLOSE = "close"
    VERTICAL_DOTS = "vertical_dots"
    AIRPLANE = "airplane"
    WEBCAM = "webcam"
    SKIP_PREVIOUS = "skip_previous"
    PLAY_PAUSE = "play_pause"
    SKIP_NEXT = "skip_next"
    MUSIC_NOTE = "music_note"

    def glyph(self) -> str:
        """The character that draws this icon in the symbol font."""
        return _GLYPHS[self]


_GLYPHS: dict[Icon, str] = {
    Icon.NONE: "",
    Icon.APP_LAUNCHER: "󱗼",
    Icon.CLIPBOARD: "󰅌",
    Icon.REFRESH: "󰑐",
    Icon.NO_UPDATES_AVAILABLE: "󰗠",
    Icon.UPDATES_AVAILABLE: "󰳛",
    Icon.MENU_CLOSED: "\uf105",
    Icon.MENU_OPEN: "\uf107",
    Icon.CPU: "󰔂",
    Icon.MEM: "󰘚",
    Icon.TEMP: "󰔏",
    Icon.SPEAKER0: "󰸈",
    Icon.SPEAKER1: "󰕿",
    Icon.SPEAKER2: "󰖀",
    Icon.SPEAKER3: "󰕾",
    Icon.HEADPHONES0: "󰟎",
    Icon.HEADPHONES1: "󰋋",
    Icon.HEADSET: "󰋎",
    Icon.MIC0: "󰍭",
    Icon.MIC1: "󰍬",
    Icon.SCREEN_SHARE: "󱒃",
    Icon.MONITOR_SPEAKER: "󰽟",
    Icon.BATTERY0: "󰂃",
    Icon.BATTERY1: "󰁼",
    Icon.BATTERY2: "󰁾",
    Icon.BATTERY3: "󰂀",
    Icon.BATTERY4: "󰁹",
    Icon.BATTERY_CHARGING: "󰂄",
    Icon.WIFI0: "󰤭",
    Icon.WIFI1: "󰤯",
    Icon.WIFI2: "󰤟",
    Icon.WIFI3: "󰤢",
    Icon.WIFI4: "󰤥",
    Icon.WIFI5: "󰤨",
    Icon.WIFI_LOCK1: "󰤬",
    Icon.WIFI_LOCK2: "󰤡",
    Icon.WIFI_LOCK3: "󰤤",
    Icon.WIFI_LOCK4: "󰤧",
    Icon.WIFI_LOCK5: "󰤪",
    Icon.ETHERNET: "󰈀",
    Icon.VPN: "󰖂",
    Icon.BLUETOOTH: "󰂯",
    Icon.POWER_SAVER: "󰾆",
    Icon.BALANCED: "󰾅",
    Icon.PERFORMANCE: "󰓅",
    Icon.EYE_OPENED: "󰈈",
    Icon.EYE_CLOSED: "󰈉",
    Icon.LOCK: "󰌾",
    Icon.POWER: "󰐥",
    Icon.REBOOT: "󰑐",
    Icon.SUSPEND: "󰤄",
    Icon.LOGOUT: "󰗽",
    Icon.RIGHT_ARROW: "󰁔",
    Icon.BRIGHTNESS: "󰃠",
    Icon.POINT: "\uf111",
    Icon.CLOSE: "󰅖",
    Icon.VERTICAL_DOTS: "󰇙",
    Icon.AIRPLANE: "󰀝",
    Icon.WEBCAM: "\uf03d",
    Icon.SKIP_PREVIOUS: "󰒮",
    Icon.PLAY_PAUSE: "󰐎",
    Icon.SKIP_NEXT: "󰒭",
    Icon.MUSIC_NOTE: "󰎇",
}


def icon_text(icon: Icon) -> tuple[str, str]:
    """The text and the font name needed to draw an icon."""
    return icon.glyph(), ICON_FONT