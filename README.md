# tilekit

Building blocks for writing a tiling window manager in Python.

tilekit supplies the pieces a window manager is made of: screen geometry,
layout functions that place windows, a hook interface for extending the
manager, and helpers for starting external programs and reading the keymap.

## Installation

```
pip install tilekit
```

To run the test suite:

```
pip install "tilekit[test]"
pytest
```

## Geometry (`tilekit.data_types`)

`Region(x, y, w, h)` is an immutable rectangle: the top left corner plus a
width and height. `Point(x, y)` is an absolute coordinate. All components
must be integers in the unsigned 32 bit range; anything else raises
`TypeError` or `ValueError`.

```python
from tilekit.data_types import Point, Region

screen = Region(0, 0, 100, 100)

screen.values()             # (0, 0, 100, 100)
screen.as_rows(2)           # [Region(0, 0, 100, 50), Region(0, 50, 100, 50)]
screen.as_columns(2)        # [Region(0, 0, 50, 100), Region(50, 0, 50, 100)]
screen.split_at_width(30)   # (Region(0, 0, 30, 100), Region(30, 0, 70, 100))
screen.split_at_height(40)  # (Region(0, 0, 100, 40), Region(0, 40, 100, 60))
screen.scale_w(0.5)         # Region(0, 0, 50, 100)
screen.contains(Region(10, 10, 50, 50))       # True
screen.contains_point(Point(30, 20))          # True
Region(10, 10, 50, 60).centered_in(screen)    # Region(25, 20, 50, 60)
```

`scale_w` and `scale_h` round down. `contains_point` excludes the right and
bottom edges. `as_rows` and `as_columns` return the region unchanged when
asked for one part or fewer.

`centered_in`, `split_at_width` and `split_at_height` raise `PenroseError`
when the request does not fit inside the region.

The module also provides the enums `Change` (`MORE` / `LESS`), `Border`
(`URGENT` / `FOCUSED` / `UNFOCUSED`) and `RelativePosition`
(`LEFT` / `RIGHT` / `ABOVE` / `BELOW`), and `WinType`, built with
`WinType.check_win()`, `WinType.input_only()` or
`WinType.input_output(atom)`.

## Layouts (`tilekit.layout`)

A layout function is called as
`f(clients, focused, monitor_region, max_main, ratio)` and returns a list of
`(client_id, region_or_None)` pairs; `None` means the client is hidden.
Clients only need an `id` attribute.

Built-in layout functions:

- `side_stack`: main area on the left, the rest stacked in a column on the right.
- `bottom_stack`: main area at the top, the rest in a row underneath.
- `monocle`: the focused client gets the whole region, all others are hidden;
  with no focused client it returns an empty list.
- `floating`: assigns no region to any client.

When there are no more clients than `max_main`, or `max_main` is 0,
`side_stack` and `bottom_stack` split the whole region evenly.

`Layout` pairs a layout function with its symbol, a `LayoutConf` and its
`max_main` and `ratio` parameters:

```python
from tilekit.data_types import Change, Region
from tilekit.layout import Layout, LayoutConf, side_stack

layout = Layout("[side]", LayoutConf(), side_stack, max_main=1, ratio=0.6)
layout.update_max_main(Change.MORE)          # never goes below zero
layout.update_main_ratio(Change.LESS, 0.1)   # clamped to [0.0, 1.0]

actions = layout.arrange(clients, None, Region(0, 0, 1000, 600))
```

`LayoutConf` has the flags `floating`, `gapless`, `follow_focus` (all
`False` by default) and `allow_wrapping` (`True` by default).
`Layout.floating("[----]")` gives a floating layout. Two layouts compare
equal when everything but their function matches. The ratio is kept at
single precision. `client_breakdown(clients, n_main)` returns how many
clients go in the main area and how many in the rest.

## Hooks (`tilekit.hooks`)

Subclass `Hook` and override only the trigger points you need: `startup`,
`new_client`, `remove_client`, `client_added_to_workspace`,
`client_name_updated`, `layout_applied`, `layout_change`,
`workspace_change`, `workspaces_updated`, `screen_change`,
`screens_updated`, `randr_notify`, `focus_change` and `event_handled`.
The default methods do nothing.

```python
from tilekit.hooks import Hook, run_hooks

class LogFocus(Hook):
    def __init__(self):
        self.seen = []

    def focus_change(self, wm, id):
        self.seen.append(id)

hooks = [LogFocus(), Hook()]
run_hooks(hooks, "focus_change", wm, 42)   # 1
```

`run_hooks(hooks, trigger, wm, *args)` calls the named method on each hook
in order and returns how many hooks overrode it. An unknown trigger name
raises `ValueError`; an exception from a hook stops the run and propagates.

## Starting programs (`tilekit.helpers`)

```python
from tilekit.helpers import spawn, spawn_with_args, spawn_for_output_lines

spawn("dmenu_run")
spawn_with_args("notify-send", ["hello"])
lines = spawn_for_output_lines("ls", "-1")
```

`spawn` (which splits the command on whitespace) and `spawn_with_args`
start the program with its output discarded and return the
`subprocess.Popen` object. `spawn_for_output` and
`spawn_for_output_with_args` wait for the program and return its standard
output as text. `spawn_for_output_lines` returns that output trimmed and
split into lines. All of them raise `PenroseError` when the program cannot
be started.

`keycodes_from_xmodmap()` reads the system keymap from `xmodmap -pke` and
returns a dict of key names to key codes; `parse_xmodmap_output(text)`
parses text captured earlier. Both raise `PenroseError` on malformed
output.

`logging_error_handler()` returns a callable that logs each error it is
given to the `tilekit` logger.

## What tilekit does not do

tilekit has no connection to an X server, no event loop, no window manager
object, and no client, workspace or screen types. It does not bind keys or
mouse buttons and it does not call hooks by itself. The `wm` and `client`
objects passed to hooks are whatever your own window manager supplies.