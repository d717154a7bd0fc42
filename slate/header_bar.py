"""An application header bar with a project title and plugin extension points."""

from __future__ import annotations

from typing import Any

from slate.widget import Signal, Widget

__all__ = ["HeaderBar"]

DEFAULT_TITLE = "Slate"


class _Box(Widget):
    """A horizontal container with spacing and alignment."""

    def __init__(self, spacing: int = 0, halign: str = "fill", **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.spacing = spacing
        self.halign = halign

    def insert_first(self, child: Widget) -> None:
        self.prepend(child)


class _WindowTitle(Widget):
    """Displays a title and an optional subtitle."""

    def __init__(self, title: str, subtitle: str | None = None) -> None:
        super().__init__()
        self.title = title
        self.subtitle = subtitle


class _Button(Widget):
    """An icon button with a clicked signal."""

    def __init__(self, icon_name: str, tooltip: str | None = None) -> None:
        super().__init__(tooltip=tooltip)
        self.icon_name = icon_name
        self.has_frame = True
        self.clicked = Signal("clicked")

    def click(self) -> None:
        self.clicked.emit()


class _Bar(Widget):
    """The inner bar holding a title widget and start and end packs."""

    def __init__(self) -> None:
        super().__init__()
        self.title_widget: Widget | None = None
        self.start: list[Widget] = []
        self.end: list[Widget] = []

    def set_title_widget(self, widget: Widget) -> None:
        self.title_widget = widget

    def pack_start(self, widget: Widget) -> None:
        self.append(widget)
        self.start.append(widget)

    def pack_end(self, widget: Widget) -> None:
        self.append(widget)
        self.end.append(widget)


class HeaderBar(Widget):
    """A header bar showing the current project with slots for plugin widgets.

    The ``close_project_requested`` signal is emitted, with no arguments,
    when the user asks to close the current project.
    """

    css_name = "slate-header-bar"

    def __init__(
        self,
        *,
        project_title: str | None = None,
        project_subtitle: str | None = None,
        show_project_actions: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.close_project_requested = Signal("close-project-requested")
        self._project_title: str | None = None
        self._project_subtitle: str | None = None
        self._show_project_actions = False

        self._bar = _Bar()
        self.append(self._bar)

        self._window_title = _WindowTitle(DEFAULT_TITLE)
        self._bar.set_title_widget(self._window_title)

        self._start_box = _Box(6, halign="start")
        self._bar.pack_start(self._start_box)

        self._end_box = _Box(6, halign="end")
        self._project_actions_box = _Box(6)

        self._close_button = _Button("window-close-symbolic", tooltip="Close Project")
        self._close_button.has_frame = False
        self._close_button.clicked.connect(self._on_close_clicked)

        self._project_actions_box.append(self._close_button)
        self._end_box.append(self._project_actions_box)
        self._bar.pack_end(self._end_box)

        if project_title is not None:
            self.project_title = project_title
        if project_subtitle is not None:
            self.project_subtitle = project_subtitle
        if show_project_actions:
            self.show_project_actions = True

    # Project title and subtitle

    @property
    def project_title(self) -> str | None:
        return self._project_title

    @project_title.setter
    def project_title(self, title: str | None) -> None:
        if title == self._project_title:
            return
        self._project_title = title
        self._window_title.title = title if title is not None else DEFAULT_TITLE
        self.notify.emit("project-title")

    @property
    def project_subtitle(self) -> str | None:
        return self._project_subtitle

    @project_subtitle.setter
    def project_subtitle(self, subtitle: str | None) -> None:
        if subtitle == self._project_subtitle:
            return
        self._project_subtitle = subtitle
        self._window_title.subtitle = subtitle
        self.notify.emit("project-subtitle")

    @property
    def displayed_title(self) -> str:
        """The title the bar shows: the project title, or the default."""
        return self._window_title.title

    @property
    def displayed_subtitle(self) -> str | None:
        return self._window_title.subtitle

    # Project actions

    @property
    def show_project_actions(self) -> bool:
        return self._show_project_actions

    @show_project_actions.setter
    def show_project_actions(self, show: bool) -> None:
        show = bool(show)
        if show == self._show_project_actions:
            return
        self._show_project_actions = show
        self._project_actions_box.visible = show
        self.notify.emit("show-project-actions")

    # Plugin widgets

    @property
    def start_widgets(self) -> tuple[Widget, ...]:
        return self._start_box.children

    @property
    def end_widgets(self) -> tuple[Widget, ...]:
        """Plugin widgets at the end, excluding the project actions."""
        return tuple(child for child in self._end_box.children
                     if child is not self._project_actions_box)

    @staticmethod
    def _check_widget(widget: Widget) -> None:
        if not isinstance(widget, Widget):
            raise TypeError("widget must be a Widget")

    def add_start_widget(self, widget: Widget) -> None:
        """Add a widget after the existing widgets at the start of the bar."""
        self._check_widget(widget)
        self._start_box.append(widget)

    def add_end_widget(self, widget: Widget) -> None:
        """Add a widget at the front of the end area, before the project actions."""
        self._check_widget(widget)
        self._end_box.insert_first(widget)

    def remove_widget(self, widget: Widget) -> None:
        """Remove a plugin widget; widgets not added to the bar are ignored."""
        self._check_widget(widget)
        parent = widget.parent
        if parent is self._start_box or parent is self._end_box:
            parent.remove(widget)

    def request_close(self) -> None:
        """Act as if the close-project button were clicked."""
        self._close_button.click()

    def _on_close_clicked(self) -> None:
        self.close_project_requested.emit()