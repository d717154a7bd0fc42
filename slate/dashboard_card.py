"""A card container with a header (title, subtitle, actions) and a content area."""

from __future__ import annotations

from typing import Any, Mapping

from slate.widget import Signal, Widget

__all__ = ["DashboardCard"]


class _Box(Widget):
    """A plain container with an orientation and spacing."""

    def __init__(self, orientation: str, spacing: int = 0, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.orientation = orientation
        self.spacing = spacing
        self.hexpand = False
        self.margins = {"top": 0, "bottom": 0, "start": 0, "end": 0}


class _Label(Widget):
    """A single line of text."""

    def __init__(self, text: str = "", **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.text = text
        self.xalign = 0.5


class _Spinner(Widget):
    """A busy indicator that can be started and stopped."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.spinning = False


class _ActionButton(Widget):
    """An icon button bound to a named action."""

    def __init__(self, action_name: str, icon_name: str, tooltip: str | None) -> None:
        super().__init__(tooltip=tooltip)
        self.action_name = action_name
        self.icon_name = icon_name
        self.clicked = Signal("clicked")

    def click(self) -> None:
        self.clicked.emit()


class DashboardCard(Widget):
    """A card for dashboard components.

    The header holds a title, an optional subtitle, a loading spinner and
    action buttons; below it sits a single content widget.
    """

    css_name = "slate-dashboard-card"

    def __init__(
        self,
        *,
        title: str | None = None,
        subtitle: str | None = None,
        loading: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.action_activated = Signal("action-activated")
        self._title: str | None = None
        self._subtitle: str | None = None
        self._loading = False
        self._actions: dict[str, _ActionButton] = {}

        self._main_box = _Box("vertical", 0)
        self._main_box.add_css_class("card")
        self.append(self._main_box)

        self._header_box = _Box("horizontal", 12)
        self._header_box.margins.update(top=12, bottom=12, start=12, end=12)
        self._main_box.append(self._header_box)

        self._title_box = _Box("vertical", 4)
        self._title_box.hexpand = True
        self._header_box.append(self._title_box)

        self._title_label = _Label()
        self._title_label.add_css_class("title-4")
        self._title_label.xalign = 0.0
        self._title_box.append(self._title_label)

        self._subtitle_label = _Label(visible=False)
        self._subtitle_label.add_css_class("dim-label")
        self._subtitle_label.xalign = 0.0
        self._title_box.append(self._subtitle_label)

        self._actions_box = _Box("horizontal", 6)
        self._header_box.append(self._actions_box)

        self._spinner = _Spinner(visible=False)
        self._actions_box.append(self._spinner)

        self._content_area = _Box("vertical", 0)
        self._content_area.margins.update(start=12, end=12, bottom=12)
        self._main_box.append(self._content_area)

        if title is not None:
            self.title = title
        if subtitle is not None:
            self.subtitle = subtitle
        if loading:
            self.loading = True

    # Title and subtitle

    @property
    def title(self) -> str | None:
        return self._title

    @title.setter
    def title(self, value: str | None) -> None:
        if value == self._title:
            return
        self._title = value
        self._title_label.text = value or ""
        self._title_label.visible = bool(value)
        self.notify.emit("title")

    @property
    def title_visible(self) -> bool:
        return self._title_label.visible

    @property
    def subtitle(self) -> str | None:
        return self._subtitle

    @subtitle.setter
    def subtitle(self, value: str | None) -> None:
        if value == self._subtitle:
            return
        self._subtitle = value
        self._subtitle_label.text = value or ""
        self._subtitle_label.visible = bool(value)
        self.notify.emit("subtitle")

    @property
    def subtitle_visible(self) -> bool:
        return self._subtitle_label.visible

    # Content

    @property
    def content(self) -> Widget | None:
        return self._content_area.first_child

    @content.setter
    def content(self, widget: Widget | None) -> None:
        if widget is not None and not isinstance(widget, Widget):
            raise TypeError("content must be a Widget or None")
        current = self._content_area.first_child
        if current is not None:
            self._content_area.remove(current)
        if widget is not None:
            self._content_area.append(widget)

    # Loading state

    @property
    def loading(self) -> bool:
        return self._loading

    @loading.setter
    def loading(self, value: bool) -> None:
        value = bool(value)
        if value == self._loading:
            return
        self._loading = value
        self._spinner.visible = value
        self._spinner.spinning = value
        self.notify.emit("loading")

    @property
    def spinner_active(self) -> bool:
        return self._spinner.visible and self._spinner.spinning

    # Actions

    @property
    def actions(self) -> Mapping[str, Widget]:
        """The action buttons by action name, in the order they were added."""
        return dict(self._actions)

    @property
    def action_names(self) -> tuple[str, ...]:
        return tuple(self._actions)

    def add_action(self, action_name: str, icon_name: str, tooltip: str | None) -> None:
        """Add an action button to the header, replacing one of the same name."""
        if action_name is None:
            raise ValueError("action_name must not be None")
        if icon_name is None:
            raise ValueError("icon_name must not be None")
        self.remove_action(action_name)

        button = _ActionButton(action_name, icon_name, tooltip)
        button.add_css_class("flat")
        button.add_css_class("circular")
        button.clicked.connect(lambda: self._on_button_clicked(button))

        self._actions[action_name] = button
        self._actions_box.append(button)

    def remove_action(self, action_name: str) -> None:
        """Remove an action button; unknown names are ignored."""
        if action_name is None:
            raise ValueError("action_name must not be None")
        button = self._actions.pop(action_name, None)
        if button is not None:
            self._actions_box.remove(button)

    def activate_action(self, action_name: str) -> None:
        """Click the named action's button; raise KeyError if there is none."""
        try:
            button = self._actions[action_name]
        except KeyError:
            raise KeyError(f"no action named {action_name!r}") from None
        button.click()

    def _on_button_clicked(self, button: _ActionButton) -> None:
        if button.action_name:
            self.action_activated.emit(button.action_name)