# slate

Building blocks for Slate user interfaces that do not depend on a graphical
toolkit. Widgets, dashboards, dashboard cards and the application header bar
are plain Python objects. They form a parent/child tree and report changes
through signals. A front end can render them however it likes.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `slate.enums`

- `Orientation` (`HORIZONTAL`, `VERTICAL`) and `PositionType` (`LEFT`, `RIGHT`,
  `TOP`, `BOTTOM`). Both are `IntEnum`s, and each member's `nick` is its name in
  lower case.
- `ToolkitOrientation` and `ToolkitPosition`, the values used by a rendering
  toolkit, with `orientation_to_toolkit` and `position_type_to_toolkit` to
  convert to them. A value outside the enum raises `ValueError`.
- `orientation_to_string` and `position_type_to_string` return the lower-case
  name.
- `parse_orientation` and `parse_position_type` ignore ASCII case. `None` or an
  unknown name gives `HORIZONTAL` or `LEFT` respectively.

### `slate.utility`

- `signum` returns 1, 0 or -1 and raises `ValueError` for NaN.
  `degrees_to_radians` converts an angle to radians. `degrees_to_positive`
  returns the equivalent angle in the range 0 to 360.
- `RGBA` is a frozen dataclass with `red`, `green`, `blue` and `alpha`.
  `GradientType` is either `RGB` or `HSV`.
- `parse_color` accepts `#rgb`, `#rgba`, `#rrggbb`, `#rrggbbaa` and the longer
  hex forms, `rgb(...)`, `rgba(...)`, `transparent`, and a built-in set of
  colour names. Anything else raises `ValueError`.
- `get_color` returns the parsed colour, or opaque black for `None` or text it
  cannot parse. `hex_to_rgb` returns a `(red, green, blue)` tuple, or `None`.
- `rgb_lerp` and `hsv_lerp` interpolate between two colours. Both need
  `0 <= value1 < value2 <= 1` and `value1 <= value <= value2`, and raise
  `ValueError` otherwise.

### `slate.widget`

- `Signal` provides `connect` (which also works as a decorator), `disconnect`
  and `emit`. `len()` gives the number of connected callbacks.
- `Widget` is a tree node. It has `parent`, `children`, `first_child`,
  `visible`, `tooltip`, CSS classes (`add_css_class`, `remove_css_class`,
  `has_css_class`, `css_classes`), `append`, `prepend`, `remove`, `unparent`,
  and a `notify` signal.
- `Fillable` is a `Widget` with a `fill` property. It defaults to `True` and
  emits `notify("fill")` when it changes.

### `slate.dashboard_card`

`DashboardCard` has these members:

- `title` and `subtitle`; the `title_visible` and `subtitle_visible` flags are
  set for non-empty text.
- `content`, which holds a single widget.
- `loading`, with `spinner_active`.
- Action buttons: `add_action`, `remove_action`, `activate_action`, `actions`
  and `action_names`. Clicking an action emits
  `action_activated(action_name)`.

### `slate.dashboard`

`Dashboard` arranges widgets by identifier in a `Layout`: `"grid"` (the
default), `"flow"` or `"stack"`. Any unknown layout name gives `"grid"`.

- `columns` is between 1 and 12 and defaults to 3.
- `add_widget` replaces any widget that already has the same id.
- Other members: `remove_widget`, `get_widget`, `clear`, `refresh`,
  `widget_ids`, `len()` and `in`.
- `placements()` returns each widget id's `(column, row)`.
- Signals: `widget_added(widget, widget_id)`, `widget_removed(widget_id)` and
  `layout_changed(layout)`.

### `slate.header_bar`

`HeaderBar` has these members:

- `project_title`. `displayed_title` falls back to `"Slate"` when no project
  title is set.
- `project_subtitle`.
- `show_project_actions`.
- Plugin widgets: `add_start_widget`, `add_end_widget` (which inserts at the
  front of the end area), `remove_widget`, `start_widgets` and `end_widgets`.
- `request_close()`, which emits `close_project_requested`.

## Example

```python
from slate.dashboard import Dashboard
from slate.dashboard_card import DashboardCard

dashboard = Dashboard()
card = DashboardCard()
card.title = "Builds"
card.subtitle = "Last 24 hours"
card.add_action("refresh", "view-refresh-symbolic", "Refresh")
card.action_activated.connect(lambda name: print("activated", name))

dashboard.add_widget(card, "builds")
assert dashboard.get_widget("builds") is card
print(dashboard.placements())   # {'builds': (0, 0)}
card.activate_action("refresh")  # prints: activated refresh
```

## What this package does not do

- It draws nothing on screen. There is no window, rendering or event loop, only
  the object model that a front end would display.
- It has no command-line program.
- It has no plugin loading, configuration-file parsing, chart widget or storage.