"""A minimal widget tree with signals, CSS classes and a fill property."""

from __future__ import annotations

from typing import Any, Callable

__all__ = ["Signal", "Widget", "Fillable"]


class Signal:
    """A list of callbacks invoked in connection order on emit."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._handlers: list[Callable[..., Any]] = []

    def connect(self, callback: Callable[..., Any]) -> Callable[..., Any]:
        """Register a callback and return it, so this works as a decorator."""
        self._handlers.append(callback)
        return callback

    def disconnect(self, callback: Callable[..., Any]) -> None:
        """Remove a callback; raise ValueError if it is not connected."""
        try:
            self._handlers.remove(callback)
        except ValueError:
            raise ValueError(f"callback is not connected to signal {self.name!r}") from None

    def emit(self, *args: Any) -> None:
        """Call every connected callback with the given arguments."""
        for handler in list(self._handlers):
            handler(*args)

    def __len__(self) -> int:
        return len(self._handlers)


class Widget:
    """A node in a widget tree with children, CSS classes and visibility."""

    def __init__(self, *, visible: bool = True, tooltip: str | None = None) -> None:
        self.parent: Widget | None = None
        self.visible = visible
        self.tooltip = tooltip
        self._children: list[Widget] = []
        self._css_classes: list[str] = []
        self.notify = Signal("notify")

    @property
    def children(self) -> tuple[Widget, ...]:
        return tuple(self._children)

    @property
    def first_child(self) -> Widget | None:
        return self._children[0] if self._children else None

    @property
    def css_classes(self) -> tuple[str, ...]:
        return tuple(self._css_classes)

    def add_css_class(self, name: str) -> None:
        if name not in self._css_classes:
            self._css_classes.append(name)

    def remove_css_class(self, name: str) -> None:
        if name in self._css_classes:
            self._css_classes.remove(name)

    def has_css_class(self, name: str) -> bool:
        return name in self._css_classes

    def _adopt(self, child: Widget) -> None:
        if child is self:
            raise ValueError("a widget cannot contain itself")
        if child.parent is not None:
            raise ValueError("widget already has a parent")
        child.parent = self

    def append(self, child: Widget) -> None:
        """Add a child after the existing children."""
        self._adopt(child)
        self._children.append(child)

    def prepend(self, child: Widget) -> None:
        """Add a child before the existing children."""
        self._adopt(child)
        self._children.insert(0, child)

    def remove(self, child: Widget) -> None:
        """Remove a direct child; raise ValueError if it is not one."""
        if child.parent is not self:
            raise ValueError("widget is not a child of this widget")
        self._children.remove(child)
        child.parent = None

    def unparent(self) -> None:
        """Detach this widget from its parent, if it has one."""
        if self.parent is not None:
            self.parent.remove(self)


class Fillable(Widget):
    """A widget that may fill the space available to it; fills by default."""

    def __init__(self, *, fill: bool = True, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._fill = bool(fill)

    @property
    def fill(self) -> bool:
        return self._fill

    @fill.setter
    def fill(self, value: bool) -> None:
        value = bool(value)
        if value != self._fill:
            self._fill = value
            self.notify.emit("fill")