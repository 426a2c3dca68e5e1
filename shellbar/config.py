"""Bar configuration: data model, YAML parsing and file watching."""

from __future__ import annotations

import logging
import os
import threading
import time
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

log = logging.getLogger(__name__)

CONFIG_FILE_NAME = "shellbar.yml"

_U32_MAX = 2**32 - 1
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_MISSING = object()


class ConfigError(ValueError):
    """Raised when a configuration document cannot be understood."""


@dataclass(frozen=True)
class HexColor:
    """An 8-bit-per-channel colour written as ``#RGB``, ``#RGBA``, ``#RRGGBB`` or ``#RRGGBBAA``."""

    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def parse(cls, text: Any) -> HexColor:
        if not isinstance(text, str):
            raise ConfigError(f"expected a hex color string, got {text!r}")
        if not text.startswith("#"):
            raise ConfigError(f"hex color must start with '#': {text!r}")
        digits = text[1:]
        if not digits or not set(digits) <= _HEX_DIGITS:
            raise ConfigError(f"invalid hex digits in color {text!r}")
        if len(digits) in (3, 4):
            digits = "".join(c * 2 for c in digits)
        if len(digits) not in (6, 8):
            raise ConfigError(f"invalid hex color length: {text!r}")
        return cls(*bytes.fromhex(digits))


@dataclass(frozen=True)
class Color:
    """A colour with floating-point channels in the range 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_rgb8(cls, r: int, g: int, b: int) -> Color:
        return cls(r / 255, g / 255, b / 255)


@dataclass(frozen=True)
class Pair:
    """A background colour with the text colour drawn on it."""

    color: Color
    text: Color


def _rgb(color: HexColor) -> Color:
    return Color.from_rgb8(color.r, color.g, color.b)


@dataclass(frozen=True)
class AppearanceColor:
    """A theme colour: a base shade with optional strong, weak and text shades."""

    base: HexColor
    strong: HexColor | None = None
    weak: HexColor | None = None
    text: HexColor | None = None

    @classmethod
    def simple(cls, color: HexColor) -> AppearanceColor:
        return cls(base=color)

    def get_base(self) -> Color:
        return _rgb(self.base)

    def get_text(self) -> Color | None:
        return None if self.text is None else _rgb(self.text)

    def _pair(self, shade: HexColor | None, text_fallback: Color) -> Pair | None:
        if shade is None:
            return None
        text = self.get_text()
        return Pair(_rgb(shade), text_fallback if text is None else text)

    def get_weak_pair(self, text_fallback: Color) -> Pair | None:
        return self._pair(self.weak, text_fallback)

    def get_strong_pair(self, text_fallback: Color) -> Pair | None:
        return self._pair(self.strong, text_fallback)


_PRIMARY = HexColor(250, 179, 135)


@dataclass(frozen=True)
class Appearance:
    background_color: AppearanceColor = AppearanceColor(
        base=HexColor(30, 30, 46),
        strong=HexColor(69, 71, 90),
        weak=HexColor(49, 50, 68),
    )
    primary_color: AppearanceColor = AppearanceColor(
        base=_PRIMARY, text=HexColor(30, 30, 46)
    )
    secondary_color: AppearanceColor = AppearanceColor(
        base=HexColor(17, 17, 27), strong=HexColor(24, 24, 37)
    )
    success_color: AppearanceColor = AppearanceColor(base=HexColor(166, 227, 161))
    danger_color: AppearanceColor = AppearanceColor(
        base=HexColor(243, 139, 168), weak=HexColor(249, 226, 175)
    )
    text_color: AppearanceColor = AppearanceColor(base=HexColor(205, 214, 244))
    workspace_colors: tuple[AppearanceColor, ...] = (
        AppearanceColor(base=_PRIMARY),
        AppearanceColor(base=HexColor(180, 190, 254)),
        AppearanceColor(base=HexColor(203, 166, 247)),
    )
    special_workspace_colors: tuple[AppearanceColor, ...] | None = None


@dataclass(frozen=True)
class UpdatesModuleConfig:
    check_cmd: str
    update_cmd: str


class WorkspaceVisibilityMode(Enum):
    ALL = "All"
    MONITOR_SPECIFIC = "MonitorSpecific"


@dataclass(frozen=True)
class WorkspacesModuleConfig:
    visibility_mode: WorkspaceVisibilityMode = WorkspaceVisibilityMode.ALL
    enable_workspace_filling: bool = False


@dataclass(frozen=True)
class SystemModuleConfig:
    cpu_warn_threshold: int = 60
    cpu_alert_threshold: int = 80
    mem_warn_threshold: int = 70
    mem_alert_threshold: int = 85
    temp_warn_threshold: int = 60
    temp_alert_threshold: int = 80


@dataclass(frozen=True)
class ClockModuleConfig:
    format: str = "%a %d %b %R"


@dataclass(frozen=True)
class SettingsModuleConfig:
    lock_cmd: str | None = None
    audio_sinks_more_cmd: str | None = None
    audio_sources_more_cmd: str | None = None
    wifi_more_cmd: str | None = None
    vpn_more_cmd: str | None = None
    bluetooth_more_cmd: str | None = None


@dataclass(frozen=True)
class MediaPlayerModuleConfig:
    max_title_length: int = 100


class Position(Enum):
    TOP = "Top"
    BOTTOM = "Bottom"


class ModuleName(Enum):
    APP_LAUNCHER = "AppLauncher"
    UPDATES = "Updates"
    CLIPBOARD = "Clipboard"
    WORKSPACES = "Workspaces"
    WINDOW_TITLE = "WindowTitle"
    SYSTEM_INFO = "SystemInfo"
    KEYBOARD_LAYOUT = "KeyboardLayout"
    KEYBOARD_SUBMAP = "KeyboardSubmap"
    TRAY = "Tray"
    CLOCK = "Clock"
    PRIVACY = "Privacy"
    SETTINGS = "Settings"
    MEDIA_PLAYER = "MediaPlayer"


# A module slot holds either one module or a group of modules drawn together.
ModuleDef = ModuleName | tuple[ModuleName, ...]


@dataclass(frozen=True)
class Modules:
    left: tuple[ModuleDef, ...] = (ModuleName.WORKSPACES,)
    center: tuple[ModuleDef, ...] = (ModuleName.WINDOW_TITLE,)
    right: tuple[ModuleDef, ...] = (
        (ModuleName.CLOCK, ModuleName.PRIVACY, ModuleName.SETTINGS),
    )


class OutputMode(Enum):
    ALL = "All"
    ACTIVE = "Active"
    TARGETS = "Targets"


@dataclass(frozen=True)
class Outputs:
    """Which monitors the bar is shown on."""

    mode: OutputMode = OutputMode.ALL
    targets: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.mode is OutputMode.TARGETS and not self.targets:
            raise ConfigError("need non-empty")
        if self.mode is not OutputMode.TARGETS and self.targets:
            raise ConfigError(f"output mode {self.mode.value} takes no targets")


# --- value readers -------------------------------------------------------


def _take(data: Mapping[str, Any], key: str, parse: Callable[[Any], Any], default: Any = _MISSING) -> Any:
    if key not in data:
        if default is _MISSING:
            raise ConfigError(f"missing field `{key}`")
        return default() if callable(default) else default
    try:
        return parse(data[key])
    except ConfigError as exc:
        raise ConfigError(f"{key}: {exc}") from None


def _mapping(value: Any) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigError(f"expected a mapping, got {value!r}")
    return value


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"expected a string, got {value!r}")
    return value


def _boolean(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"expected a boolean, got {value!r}")
    return value


def _integer(low: int, high: int) -> Callable[[Any], int]:
    def parse(value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"expected an integer, got {value!r}")
        if not low <= value <= high:
            raise ConfigError(f"integer {value} out of range {low}..{high}")
        return value

    return parse


_u32 = _integer(0, _U32_MAX)
_i32 = _integer(_I32_MIN, _I32_MAX)


def _optional(parse: Callable[[Any], Any]) -> Callable[[Any], Any]:
    return lambda value: None if value is None else parse(value)


def _sequence(parse: Callable[[Any], Any]) -> Callable[[Any], tuple]:
    def read(value: Any) -> tuple:
        if not isinstance(value, list):
            raise ConfigError(f"expected a sequence, got {value!r}")
        return tuple(parse(item) for item in value)

    return read


def _enum(cls: type[Enum]) -> Callable[[Any], Any]:
    def parse(value: Any) -> Any:
        names = ", ".join(member.value for member in cls)
        if not isinstance(value, str):
            raise ConfigError(f"expected one of {names}, got {value!r}")
        try:
            return cls(value)
        except ValueError:
            raise ConfigError(f"unknown variant `{value}`, expected one of {names}") from None

    return parse


def _appearance_color(value: Any) -> AppearanceColor:
    if isinstance(value, str):
        return AppearanceColor.simple(HexColor.parse(value))
    if isinstance(value, Mapping):
        shade = _optional(HexColor.parse)
        return AppearanceColor(
            base=_take(value, "base", HexColor.parse),
            strong=_take(value, "strong", shade, None),
            weak=_take(value, "weak", shade, None),
            text=_take(value, "text", shade, None),
        )
    raise ConfigError(f"data did not match any variant of AppearanceColor: {value!r}")


def _appearance(value: Any) -> Appearance:
    data = _mapping(value)
    defaults = Appearance()
    return Appearance(
        background_color=_take(data, "backgroundColor", _appearance_color, defaults.background_color),
        primary_color=_take(data, "primaryColor", _appearance_color, defaults.primary_color),
        secondary_color=_take(data, "secondaryColor", _appearance_color, defaults.secondary_color),
        success_color=_take(data, "successColor", _appearance_color, defaults.success_color),
        danger_color=_take(data, "dangerColor", _appearance_color, defaults.danger_color),
        text_color=_take(data, "textColor", _appearance_color, defaults.text_color),
        workspace_colors=_take(
            data, "workspaceColors", _sequence(_appearance_color), defaults.workspace_colors
        ),
        special_workspace_colors=_take(
            data, "specialWorkspaceColors", _optional(_sequence(_appearance_color)), None
        ),
    )


def _updates(value: Any) -> UpdatesModuleConfig:
    data = _mapping(value)
    return UpdatesModuleConfig(
        check_cmd=_take(data, "checkCmd", _string),
        update_cmd=_take(data, "updateCmd", _string),
    )


def _workspaces(value: Any) -> WorkspacesModuleConfig:
    data = _mapping(value)
    return WorkspacesModuleConfig(
        visibility_mode=_take(
            data, "visibilityMode", _enum(WorkspaceVisibilityMode), WorkspaceVisibilityMode.ALL
        ),
        enable_workspace_filling=_take(data, "enableWorkspaceFilling", _boolean, False),
    )


def _system(value: Any) -> SystemModuleConfig:
    data = _mapping(value)
    defaults = SystemModuleConfig()
    return SystemModuleConfig(
        cpu_warn_threshold=_take(data, "cpuWarnThreshold", _u32, defaults.cpu_warn_threshold),
        cpu_alert_threshold=_take(data, "cpuAlertThreshold", _u32, defaults.cpu_alert_threshold),
        mem_warn_threshold=_take(data, "memWarnThreshold", _u32, defaults.mem_warn_threshold),
        mem_alert_threshold=_take(data, "memAlertThreshold", _u32, defaults.mem_alert_threshold),
        temp_warn_threshold=_take(data, "tempWarnThreshold", _i32, defaults.temp_warn_threshold),
        temp_alert_threshold=_take(data, "tempAlertThreshold", _i32, defaults.temp_alert_threshold),
    )


def _clock(value: Any) -> ClockModuleConfig:
    return ClockModuleConfig(format=_take(_mapping(value), "format", _string))


def _settings(value: Any) -> SettingsModuleConfig:
    data = _mapping(value)
    command = _optional(_string)
    return SettingsModuleConfig(
        lock_cmd=_take(data, "lockCmd", command, None),
        audio_sinks_more_cmd=_take(data, "audioSinksMoreCmd", command, None),
        audio_sources_more_cmd=_take(data, "audioSourcesMoreCmd", command, None),
        wifi_more_cmd=_take(data, "wifiMoreCmd", command, None),
        vpn_more_cmd=_take(data, "vpnMoreCmd", command, None),
        bluetooth_more_cmd=_take(data, "bluetoothMoreCmd", command, None),
    )


def _media_player(value: Any) -> MediaPlayerModuleConfig:
    data = _mapping(value)
    return MediaPlayerModuleConfig(
        max_title_length=_take(
            data, "maxTitleLength", _u32, MediaPlayerModuleConfig().max_title_length
        )
    )


_module_name = _enum(ModuleName)


def _module_def(value: Any) -> ModuleDef:
    if isinstance(value, str):
        return _module_name(value)
    if isinstance(value, list):
        return tuple(_module_name(item) for item in value)
    raise ConfigError(f"data did not match any variant of ModuleDef: {value!r}")


def _modules(value: Any) -> Modules:
    data = _mapping(value)
    section = _sequence(_module_def)
    return Modules(
        left=_take(data, "left", section, ()),
        center=_take(data, "center", section, ()),
        right=_take(data, "right", section, ()),
    )


def _outputs(value: Any) -> Outputs:
    if isinstance(value, str):
        if value == OutputMode.ALL.value:
            return Outputs(OutputMode.ALL)
        if value == OutputMode.ACTIVE.value:
            return Outputs(OutputMode.ACTIVE)
        raise ConfigError(f"invalid outputs variant `{value}`")
    if isinstance(value, Mapping) and list(value) == [OutputMode.TARGETS.value]:
        targets = _sequence(_string)(value[OutputMode.TARGETS.value])
        return Outputs(OutputMode.TARGETS, targets)
    raise ConfigError(f"invalid outputs value: {value!r}")


@dataclass(frozen=True)
class Config:
    """The whole bar configuration."""

    log_level: str = "warn"
    position: Position = Position.TOP
    outputs: Outputs = Outputs()
    modules: Modules = Modules()
    app_launcher_cmd: str | None = None
    clipboard_cmd: str | None = None
    truncate_title_after_length: int = 150
    updates: UpdatesModuleConfig | None = None
    workspaces: WorkspacesModuleConfig = WorkspacesModuleConfig()
    system: SystemModuleConfig = SystemModuleConfig()
    clock: ClockModuleConfig = ClockModuleConfig()
    settings: SettingsModuleConfig = SettingsModuleConfig()
    appearance: Appearance = Appearance()
    media_player: MediaPlayerModuleConfig = field(default_factory=MediaPlayerModuleConfig)

    @classmethod
    def from_mapping(cls, data: Any) -> Config:
        """Build a configuration from a decoded document with camelCase keys."""
        data = _mapping(data)
        defaults = cls()
        return cls(
            log_level=_take(data, "logLevel", _string, defaults.log_level),
            position=_take(data, "position", _enum(Position), defaults.position),
            outputs=_take(data, "outputs", _outputs, defaults.outputs),
            modules=_take(data, "modules", _modules, defaults.modules),
            app_launcher_cmd=_take(data, "appLauncherCmd", _optional(_string), None),
            clipboard_cmd=_take(data, "clipboardCmd", _optional(_string), None),
            truncate_title_after_length=_take(
                data, "truncateTitleAfterLength", _u32, defaults.truncate_title_after_length
            ),
            updates=_take(data, "updates", _optional(_updates), None),
            workspaces=_take(data, "workspaces", _workspaces, defaults.workspaces),
            system=_take(data, "system", _system, defaults.system),
            clock=_take(data, "clock", _clock, defaults.clock),
            settings=_take(data, "settings", _settings, defaults.settings),
            appearance=_take(data, "appearance", _appearance, defaults.appearance),
            media_player=_take(data, "mediaPlayer", _media_player, defaults.media_player),
        )


def parse_config(text: str) -> Config:
    """Parse a YAML configuration document; an empty document gives the defaults."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(str(exc)) from exc
    return Config.from_mapping({} if data is None else data)


def default_config_path(home: str | os.PathLike[str]) -> Path:
    """Where the configuration file lives for the given home directory."""
    return Path(home) / ".config" / CONFIG_FILE_NAME


def _resolve_path(path: str | os.PathLike[str] | None) -> Path:
    if path is not None:
        return Path(path)
    home = os.environ.get("HOME")
    if not home:
        raise ConfigError("Could not get HOME environment variable")
    return default_config_path(home)


def read_config(path: str | os.PathLike[str] | None = None) -> Config:
    """Read the configuration file, or return the defaults when it cannot be opened."""
    file_path = _resolve_path(path)
    try:
        raw = file_path.read_bytes()
    except OSError:
        return Config()
    log.info("Reading config file")
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigError(f"config file is not valid UTF-8: {exc}") from exc
    return parse_config(text)


def _stamp(path: Path) -> tuple[int, int, int] | None:
    try:
        info = path.stat()
    except OSError:
        return None
    return info.st_mtime_ns, info.st_size, info.st_ino


def watch_config(
    path: str | os.PathLike[str] | None = None,
    interval: float = 0.5,
    stop: threading.Event | None = None,
) -> Iterator[Config]:
    """Yield a fresh configuration whenever the file is created, changed or removed.

    A removed file yields the defaults; a file that fails to parse is logged
    and skipped. Watching ends when ``stop`` is set.
    """
    file_path = _resolve_path(path)
    initial = _stamp(file_path)

    def changes() -> Iterator[Config]:
        last = initial
        while True:
            if stop is not None:
                if stop.wait(interval):
                    return
            else:
                time.sleep(interval)
            current = _stamp(file_path)
            if current == last:
                continue
            last = current
            if current is None:
                log.info("Config file deleted")
                yield Config()
                continue
            log.info("Config file modified")
            try:
                yield read_config(file_path)
            except ConfigError as exc:
                log.warning("Failed to read config file: %s", exc)

    return changes()