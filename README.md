# evtr

`evtr` holds the core of a terminal inspector for Linux evdev input devices
(gamepads, joysticks, touchpads, mice and keyboards):

- a TOML configuration file with validated defaults for sorting, scrolling,
  theme colours, layout percentages and key bindings (`evtr.config`,
  `evtr.config_file`, `evtr.settings`, `evtr.paths`);
- command-line option handling for the configuration (`evtr.cli`);
- key-binding parsing and matching (`evtr.keymap`);
- an input model that tracks absolute axes, relative axes and buttons and
  updates them from input events (`evtr.inputs`, `evtr.buckets`,
  `evtr.collect`, `evtr.input_collection`);
- layout and scroll planning for the monitor screen: header and body split,
  axis sections, buttons sidebar, joystick and d-pad top row, touchpad box
  (`evtr.geometry`, `evtr.split`, `evtr.boxes`, `evtr.scroll`,
  `evtr.monitor_math`).

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Configuration

The configuration is read from, in order:

1. an explicitly given path (which must exist),
2. `$XDG_CONFIG_HOME/evtr/config.toml` when `XDG_CONFIG_HOME` is absolute,
3. `~/.config/evtr/config.toml`.

When no file is found the built-in defaults are used. Every section and key
is optional; missing values fall back to the defaults, and unknown keys are
rejected.

```python
from evtr import config

settings = config.load(None)          # defaults, or the file found on disk
print(config.render_default_config()) # the full default file as TOML

target = config.resolved_write_path(None)
config.write_default_config(target)   # refuses to overwrite an existing file

config.install_runtime(settings)      # make it the active configuration
config.layout().monitor.buttons_per_row
```

A configuration that fails validation raises `evtr.errors.ConfigError`, whose
message names the offending field, for example
`config: layout.monitor.axes_box_percent must be between 1 and 99`.
A file that cannot be read raises `evtr.errors.ExternalError`.

An excerpt of the default file:

```toml
[selector]
sort = "path"
page_scroll_size = 10

[monitor]
page_scroll_steps = 10
startup_focus = "auto"
joystick_invert_y = true
relative_display_range = 1000

[layout.monitor]
buttons_per_row = 3
main_column_percent = 70
joystick_gap = 2
axes_box_percent = 75
joystick_hat_joystick_percent = 70

[keys.selector]
move_up = ["up", "ctrl-p"]
```

Within `keys.selector` and within `keys.monitor` a key may be bound to only
one action; a duplicate is reported as
`duplicate binding in keys.selector: ...`.

### Command-line options

`evtr.cli.initialize(argv)` handles these options and returns a
`StartupAction`:

- `--config PATH`: read config from PATH, or write generated config to PATH;
- `--generate-config`: write a starter config file to the resolved path;
- `--print-config-path`: print the path `--generate-config` would use;
- `--print-default-config`: print the default config TOML.

Each of the last three returns `StartupAction.EXIT`. With none of them the
configuration is loaded, installed as the active one, and
`StartupAction.RUN` is returned.

```python
from evtr.cli import initialize

initialize(["--print-default-config"])
```

## Key bindings

```python
from evtr.keymap import KeyEvent, Modifiers, parse_key_binding

binding = parse_key_binding("shift-g")
binding.display                               # "Shift-G"
binding.matches(KeyEvent("G", Modifiers.SHIFT))  # True
```

Modifiers are `ctrl`, `shift` and `alt`; base keys are `up`, `down`,
`pageup`, `pagedown`, `home`, `end`, `enter`, `esc`, `backspace` or any single
character.

## Input model

```python
from evtr.input_collection import InputCollection
from evtr.inputs import AbsoluteValue, DeviceInput, EventType, InputEvent, kernel_state

inputs = InputCollection(
    absolute=[(0, DeviceInput("abs_x", AbsoluteValue(kernel_state(-10, 10, 0))))],
)
inputs.handle_event(InputEvent(EventType.ABSOLUTE, 0, 7))
inputs.absolute_axis(0)   # AbsoluteAxis(minimum=-10, maximum=10, value=7)
```

`evtr.input_collection.collection_from_device` builds a collection from any
object that follows the `evtr.collect.InputDevice` protocol, and returns the
warnings raised while reading its starting state.

## Layout helpers

```python
from evtr.geometry import Rect, main_layout
from evtr.split import ratio_widths
from evtr.monitor_math import normalize_wrapped

header, body = main_layout(Rect(0, 0, 20, 8))  # Rect(0, 0, 20, 1), Rect(0, 1, 20, 7)
ratio_widths(10, 0, 99)     # (9, 1)
normalize_wrapped(6, 10)    # 0.1
```

`evtr.boxes.box_layout` places the requested panels of a `LayoutRequest`
within an area, and `evtr.scroll.bounds_from_capacities` computes how far
each section may scroll.

## What the package does not do

It has no terminal interface: there is no device selector screen, no drawing
of the monitor screen, and no installed command. It does not open or read
devices under `/dev/input` itself; device access is left to whatever object
is passed in as an `InputDevice`.