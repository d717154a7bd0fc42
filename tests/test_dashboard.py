import pytest

from slate.dashboard import Dashboard, Layout
from slate.dashboard_card import DashboardCard
from slate.widget import Widget


def test_dashboard_creation_defaults():
    dashboard = Dashboard()
    assert dashboard.columns == 3
    assert dashboard.layout == "grid"
    assert dashboard.layout_type is Layout.GRID


def test_dashboard_widget_management():
    dashboard = Dashboard()
    card = DashboardCard()
    dashboard.add_widget(card, "test-card")
    assert dashboard.get_widget("test-card") is card
    dashboard.remove_widget("test-card")
    assert dashboard.get_widget("test-card") is None
    assert card.parent is None


def test_dashboard_layout_types():
    dashboard = Dashboard()
    dashboard.layout = "grid"
    assert dashboard.layout == "grid"
    dashboard.layout = "flow"
    assert dashboard.layout == "flow"
    dashboard.layout = "stack"
    assert dashboard.layout == "stack"


def test_unknown_layout_falls_back_to_grid_and_reports_given_name():
    dashboard = Dashboard(layout="flow")
    seen = []
    dashboard.layout_changed.connect(seen.append)
    dashboard.layout = "bogus"
    assert dashboard.layout == "grid"
    assert seen == ["bogus"]


def test_setting_same_layout_emits_nothing():
    dashboard = Dashboard()
    seen = []
    dashboard.layout_changed.connect(seen.append)
    dashboard.notify.connect(seen.append)
    dashboard.layout = "grid"
    assert seen == []


def test_layout_change_notifies():
    dashboard = Dashboard()
    seen = []
    dashboard.notify.connect(seen.append)
    dashboard.layout = Layout.STACK
    assert seen == ["layout"]


def test_columns_range():
    dashboard = Dashboard()
    with pytest.raises(ValueError):
        dashboard.columns = 0
    with pytest.raises(ValueError):
        dashboard.columns = 13
    dashboard.columns = 12
    assert dashboard.columns == 12


def test_constructor_rejects_bad_columns():
    with pytest.raises(ValueError):
        Dashboard(columns=20)


def test_grid_placements():
    dashboard = Dashboard(columns=2)
    for name in "abcd":
        dashboard.add_widget(Widget(), name)
    assert dashboard.placements() == {"a": (0, 0), "b": (1, 0), "c": (0, 1), "d": (1, 1)}


def test_changing_columns_relays_grid():
    dashboard = Dashboard()
    for name in "abcd":
        dashboard.add_widget(Widget(), name)
    assert dashboard.placements()["d"] == (0, 1)
    dashboard.columns = 4
    assert dashboard.placements()["d"] == (3, 0)


def test_stack_placements():
    dashboard = Dashboard(layout="stack")
    for name in "abc":
        dashboard.add_widget(Widget(), name)
    assert dashboard.placements() == {"a": (0, 0), "b": (0, 1), "c": (0, 2)}


def test_flow_placements_follow_columns():
    dashboard = Dashboard(layout="flow", columns=2)
    for name in "abc":
        dashboard.add_widget(Widget(), name)
    assert dashboard.placements() == {"a": (0, 0), "b": (1, 0), "c": (0, 1)}
    dashboard.columns = 3
    assert dashboard.placements()["c"] == (2, 0)


def test_layout_switch_keeps_widgets():
    dashboard = Dashboard()
    widgets = [Widget() for _ in range(3)]
    for index, widget in enumerate(widgets):
        dashboard.add_widget(widget, f"w{index}")
    dashboard.layout = "stack"
    assert dashboard.placements() == {"w0": (0, 0), "w1": (0, 1), "w2": (0, 2)}
    assert all(widget.parent is not None for widget in widgets)


def test_refresh_compacts_after_removal():
    dashboard = Dashboard()
    for name in "abc":
        dashboard.add_widget(Widget(), name)
    dashboard.remove_widget("a")
    dashboard.refresh()
    assert dashboard.placements() == {"b": (0, 0), "c": (1, 0)}


def test_add_replaces_same_id():
    dashboard = Dashboard()
    first, second = Widget(), Widget()
    removed = []
    dashboard.widget_removed.connect(removed.append)
    dashboard.add_widget(first, "x")
    dashboard.add_widget(second, "x")
    assert dashboard.get_widget("x") is second
    assert first.parent is None
    assert removed == ["x"]
    assert len(dashboard) == 1


def test_widget_added_signal():
    dashboard = Dashboard()
    seen = []
    dashboard.widget_added.connect(lambda widget, widget_id: seen.append((widget, widget_id)))
    widget = Widget()
    dashboard.add_widget(widget, "one")
    assert seen == [(widget, "one")]


def test_remove_unknown_id_emits_nothing():
    dashboard = Dashboard()
    removed = []
    dashboard.widget_removed.connect(removed.append)
    dashboard.remove_widget("missing")
    assert removed == []


def test_clear_removes_everything():
    dashboard = Dashboard()
    widgets = [Widget(), Widget()]
    dashboard.add_widget(widgets[0], "a")
    dashboard.add_widget(widgets[1], "b")
    dashboard.clear()
    assert len(dashboard) == 0
    assert dashboard.placements() == {}
    assert all(widget.parent is None for widget in widgets)


def test_none_id_rejected():
    dashboard = Dashboard()
    with pytest.raises(ValueError):
        dashboard.add_widget(Widget(), None)
    with pytest.raises(ValueError):
        dashboard.get_widget(None)


def test_non_widget_rejected():
    dashboard = Dashboard()
    with pytest.raises(TypeError):
        dashboard.add_widget("not a widget", "x")
    assert "x" not in dashboard


def test_layout_parse():
    assert Layout.parse("flow") is Layout.FLOW
    assert Layout.parse("stack") is Layout.STACK
    assert Layout.parse("other") is Layout.GRID