# shellbar

This package holds the parts of a desktop status bar that do not depend on a
GUI toolkit:

- `shellbar.config` reads the YAML configuration file. It checks each value
  and fills in defaults for the bar's position, outputs, modules, module
  settings and colour theme. It can also watch the file for changes.
- `shellbar.icons` maps each of the bar's icons to its glyph in the
  "Symbols Nerd Font".
- `shellbar.centerbox` lays out three children in a row. The left child goes
  at the start and the right child at the end. The middle child is centred on
  the whole box when it fits there. Otherwise it is centred in the gap the
  edge children leave.
- `shellbar.menu` tracks which pop-up menu is open on a surface. It also
  works out where a menu is placed relative to the button that opened it.

## Installation

```
pip install .
```

To install the test dependencies as well, use `pip install .[test]`.

## Configuration

The configuration is a YAML document with camelCase keys. By default it is
read from `~/.config/shellbar.yml`; `default_config_path(home)` returns that
path for a given home directory. Every top-level key is optional:

```yaml
logLevel: warn
position: Top            # or Bottom
outputs: All             # All, Active, or {Targets: [eDP-1, HDMI-A-1]}
modules:
  left: [Workspaces]
  center: [WindowTitle]
  right: [[Clock, Privacy, Settings]]   # a nested list is a group
appLauncherCmd: launcher
truncateTitleAfterLength: 150
updates:
  checkCmd: check-updates
  updateCmd: run-updates
workspaces:
  visibilityMode: All    # or MonitorSpecific
  enableWorkspaceFilling: false
system:
  cpuWarnThreshold: 60
  tempAlertThreshold: 80
clock:
  format: "%a %d %b %R"
mediaPlayer:
  maxTitleLength: 100
appearance:
  primaryColor: "#fab387"
  backgroundColor:
    base: "#1e1e2e"
    strong: "#45475a"
    weak: "#313244"
```

Some sections have fields that must be present once the section itself is
given. Inside `updates`, both `checkCmd` and `updateCmd` are required. Inside
`clock`, `format` is required. When `modules` is given, any side left out of
it (`left`, `center` or `right`) is empty. `Targets` must name at least one
output. Colours are written as `#RGB`, `#RGBA`, `#RRGGBB` or `#RRGGBBAA`. A
colour can be a plain string or a mapping with `base` and, optionally,
`strong`, `weak` and `text`.

```python
from shellbar.config import Config, default_config_path, parse_config, read_config

config = read_config(default_config_path("/home/me"))
print(config.position, config.modules.right)

config = parse_config("position: Bottom\n")
config = Config.from_mapping({"logLevel": "info"})
```

`read_config(path=None)` uses `$HOME` when no path is given. If the file
cannot be opened, it returns the default `Config()`. A document that is
malformed, or that has a value of the wrong type or out of range, raises
`ConfigError` (a subclass of `ValueError`).

On an `AppearanceColor`, `get_base()`, `get_text()`, `get_weak_pair(fallback)`
and `get_strong_pair(fallback)` return `Color` values with channels from
0 to 1. The two pair methods return a `Pair`, or `None` when that shade is
not set.

### Watching the file

`watch_config(path=None, interval=0.5, stop=None)` returns an iterator. It
checks the file's modification time, size and inode every `interval`
seconds, and yields a new `Config` whenever one of them changes. When the
file is deleted it yields the defaults. A file that fails to parse is logged
and skipped. Iteration ends once the `threading.Event` passed as `stop` is
set.

## Icons

```python
from shellbar.icons import Icon, icon_text

Icon.CPU.glyph()          # the glyph character
icon_text(Icon.WIFI3)     # (glyph, "Symbols Nerd Font")
```

## Layout

```python
from shellbar.centerbox import Alignment, Centerbox, FixedChild, Length, Limits, Padding, Size

bar = Centerbox(
    children=(FixedChild(Size(120, 20)), FixedChild(Size(200, 20)), FixedChild(Size(80, 20))),
    spacing=4,
    padding=Padding(4, 4, 4, 4),
    width=Length.fill(),
    height=Length.of(34),
    align_items=Alignment.CENTER,
)
node = bar.layout(Limits(Size(0, 0), Size(1920, 34)))
for child in node.children:
    print(child.x, child.y, child.width, child.height)
```

A `Length` can be `Length.fill(portion)`, `Length.of(amount)` or
`Length.shrink()`. Any object with a `height: Length` attribute and a
`layout(limits) -> Node` method can be a child. `FixedChild` is a ready-made
leaf with a fixed content size.

## Menus

```python
from shellbar.config import Position
from shellbar.menu import (
    ButtonAnchor, Menu, MenuKind, MenuSize, MenuType,
    menu_left_padding, menu_vertical_alignment,
)

anchor = ButtonAnchor(x=1800, y=0, viewport_width=1920, viewport_height=1080)
menu = Menu(surface_id=1)
commands = menu.toggle(MenuType(MenuKind.SETTINGS), anchor)
menu.toggle(MenuType(MenuKind.TRAY, tray_name="network"), anchor)
left = menu_left_padding(MenuSize.LARGE, anchor)
vertical = menu_vertical_alignment(Position.TOP)
```

`open`, `close`, `toggle`, `close_if`, `request_keyboard` and
`release_keyboard` return lists of `SetLayer` and `SetKeyboardInteractivity`
commands for the surface to apply. A list is empty when nothing needs to
change.

## What this package does not do

Nothing here draws a bar or opens a window. The package has no command to
run. It does not include the bar's modules either: workspaces, window title,
system info, tray, clock, privacy, settings, media player and updates. Their
configuration is read, but showing and updating them is left to the
application that uses this package.