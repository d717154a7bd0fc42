"""A dashboard container that arranges widgets in a grid, flow or stack."""

from __future__ import annotations

import enum
from typing import Any

from slate.widget import Signal, Widget

__all__ = ["Layout", "Dashboard"]

MIN_COLUMNS = 1
MAX_COLUMNS = 12
DEFAULT_COLUMNS = 3
_SPACING = 12


class Layout(enum.Enum):
    """The ways a dashboard can arrange its widgets."""

    GRID = "grid"
    FLOW = "flow"
    STACK = "stack"

    @classmethod
    def parse(cls, value: str | Layout) -> Layout:
        """Return the layout for a name; unknown names give GRID."""
        if isinstance(value, Layout):
            return value
        if value == "flow":
            return cls.FLOW
        if value == "stack":
            return cls.STACK
        return cls.GRID


class _ScrolledWindow(Widget):
    """Holds at most one child and scrolls it."""

    @property
    def child(self) -> Widget | None:
        return self.first_child

    @child.setter
    def child(self, widget: Widget | None) -> None:
        current = self.first_child
        if current is not None:
            self.remove(current)
        if widget is not None:
            self.append(widget)


class _LayoutContainer(Widget):
    """The container that holds dashboard widgets for one layout type."""

    def __init__(self, layout: Layout, columns: int) -> None:
        super().__init__()
        self.layout = layout
        self.spacing = _SPACING
        self.margins = {"top": _SPACING, "bottom": _SPACING, "start": _SPACING, "end": _SPACING}
        self.max_children_per_line = columns
        self.column_homogeneous = layout is Layout.GRID
        self.row_homogeneous = False
        self._cells: dict[int, tuple[int, int]] = {}

    def attach(self, widget: Widget, column: int, row: int) -> None:
        """Place a widget at a grid cell."""
        self.append(widget)
        self._cells[id(widget)] = (column, row)

    def cell_of(self, widget: Widget, position: int) -> tuple[int, int]:
        if self.layout is Layout.GRID:
            return self._cells[id(widget)]
        if self.layout is Layout.FLOW:
            per_line = self.max_children_per_line
            return (position % per_line, position // per_line)
        return (0, position)

    def remove(self, child: Widget) -> None:
        super().remove(child)
        self._cells.pop(id(child), None)

    def remove_all(self) -> None:
        for child in self.children:
            child.unparent()


class Dashboard(Widget):
    """A container that organises dashboard widgets by identifier.

    Signals: ``widget_added(widget, widget_id)``, ``widget_removed(widget_id)``
    and ``layout_changed(layout)``.
    """

    css_name = "slate-dashboard"

    def __init__(self, *, layout: str | Layout = "grid", columns: int = DEFAULT_COLUMNS,
                 **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.widget_added = Signal("widget-added")
        self.widget_removed = Signal("widget-removed")
        self.layout_changed = Signal("layout-changed")

        self._check_columns(columns)
        self._layout = Layout.GRID
        self._columns = columns
        self._widgets: dict[str, Widget] = {}
        self._needs_refresh = False

        self._scrolled = _ScrolledWindow()
        self.append(self._scrolled)
        self._content: _LayoutContainer | None = None
        self._rebuild_layout()

        if Layout.parse(layout) is not Layout.GRID:
            self.layout = layout

    @staticmethod
    def _check_columns(columns: int) -> None:
        if not MIN_COLUMNS <= columns <= MAX_COLUMNS:
            raise ValueError(f"columns must be between {MIN_COLUMNS} and {MAX_COLUMNS}")

    # Properties

    @property
    def layout(self) -> str:
        """The layout name: "grid", "flow" or "stack"."""
        return self._layout.value

    @layout.setter
    def layout(self, layout_type: str | Layout) -> None:
        if layout_type is None:
            raise ValueError("layout_type must not be None")
        new_layout = Layout.parse(layout_type)
        if new_layout is self._layout:
            return
        self._layout = new_layout
        self._rebuild_layout()
        self.notify.emit("layout")
        name = layout_type.value if isinstance(layout_type, Layout) else layout_type
        self.layout_changed.emit(name)

    @property
    def layout_type(self) -> Layout:
        return self._layout

    @property
    def columns(self) -> int:
        """Number of columns for grid and flow layouts (1 to 12)."""
        return self._columns

    @columns.setter
    def columns(self, columns: int) -> None:
        self._check_columns(columns)
        if columns == self._columns:
            return
        self._columns = columns
        if self._layout is Layout.FLOW and self._content is not None:
            self._content.max_children_per_line = columns
        elif self._layout is Layout.GRID:
            self._rebuild_layout()
        self.notify.emit("columns")

    @property
    def widget_ids(self) -> tuple[str, ...]:
        return tuple(self._widgets)

    def __len__(self) -> int:
        return len(self._widgets)

    def __contains__(self, widget_id: object) -> bool:
        return widget_id in self._widgets

    # Layout handling

    def _rebuild_layout(self) -> None:
        if self._content is not None:
            self._content.remove_all()
            self._scrolled.child = None
            self._content = None
        self._content = _LayoutContainer(self._layout, self._columns)
        self._scrolled.child = self._content
        self.refresh()

    def _place(self, widget: Widget, position: int) -> None:
        assert self._content is not None
        if self._layout is Layout.GRID:
            row, column = divmod(position, self._columns)
            self._content.attach(widget, column, row)
        else:
            self._content.append(widget)

    # Widget management

    def add_widget(self, widget: Widget, widget_id: str) -> None:
        """Add a widget under an identifier, replacing any widget with that id."""
        if not isinstance(widget, Widget):
            raise TypeError("widget must be a Widget")
        if widget_id is None:
            raise ValueError("widget_id must not be None")
        if widget_id in self._widgets:
            self.remove_widget(widget_id)
        self._place(widget, len(self._widgets))
        self._widgets[widget_id] = widget
        self.widget_added.emit(widget, widget_id)

    def remove_widget(self, widget_id: str) -> None:
        """Remove the widget with this identifier; unknown ids are ignored."""
        if widget_id is None:
            raise ValueError("widget_id must not be None")
        widget = self._widgets.pop(widget_id, None)
        if widget is not None:
            widget.unparent()
            self.widget_removed.emit(widget_id)

    def get_widget(self, widget_id: str) -> Widget | None:
        """Return the widget with this identifier, or None."""
        if widget_id is None:
            raise ValueError("widget_id must not be None")
        return self._widgets.get(widget_id)

    def clear(self) -> None:
        """Remove every widget from the dashboard."""
        self._widgets.clear()
        if self._content is not None:
            self._content.remove_all()

    def refresh(self) -> None:
        """Lay out every widget again, in the order they were added."""
        if self._content is None:
            return
        self._content.remove_all()
        for position, widget in enumerate(self._widgets.values()):
            self._place(widget, position)
        self._needs_refresh = False

    def placements(self) -> dict[str, tuple[int, int]]:
        """Return each widget id's (column, row) in the current layout."""
        if self._content is None:
            return {}
        ids = {id(widget): widget_id for widget_id, widget in self._widgets.items()}
        result: dict[str, tuple[int, int]] = {}
        for position, child in enumerate(self._content.children):
            widget_id = ids.get(id(child))
            if widget_id is not None:
                result[widget_id] = self._content.cell_of(child, position)
        return result