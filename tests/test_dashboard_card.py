import pytest

from slate.dashboard_card import DashboardCard
from slate.widget import Widget


def test_card_creation_defaults():
    card = DashboardCard()
    assert isinstance(card, Widget)
    assert card.title is None
    assert card.subtitle is None
    assert card.loading is False
    assert card.content is None
    assert card.css_name == "slate-dashboard-card"


def test_title_and_subtitle():
    card = DashboardCard()
    card.title = "Test Card"
    assert card.title == "Test Card"
    card.subtitle = "Test Subtitle"
    assert card.subtitle == "Test Subtitle"


def test_loading_state():
    card = DashboardCard()
    card.loading = True
    assert card.loading is True
    assert card.spinner_active is True
    card.loading = False
    assert card.loading is False
    assert card.spinner_active is False


def test_subtitle_visibility_follows_text():
    card = DashboardCard()
    assert card.subtitle_visible is False
    card.subtitle = "Sub"
    assert card.subtitle_visible is True
    card.subtitle = ""
    assert card.subtitle_visible is False


def test_title_visibility_follows_text():
    card = DashboardCard()
    card.title = "Hello"
    assert card.title_visible is True
    card.title = None
    assert card.title_visible is False
    assert card.title is None


def test_notify_emitted_only_on_change():
    card = DashboardCard()
    seen = []
    card.notify.connect(seen.append)
    card.title = "A"
    card.title = "A"
    card.subtitle = "B"
    card.loading = True
    card.loading = True
    assert seen == ["title", "subtitle", "loading"]


def test_constructor_keywords():
    card = DashboardCard(title="T", subtitle="S", loading=True)
    assert (card.title, card.subtitle, card.loading) == ("T", "S", True)


def test_content_replace_and_clear():
    card = DashboardCard()
    first = Widget()
    second = Widget()
    card.content = first
    assert card.content is first
    card.content = second
    assert card.content is second
    assert first.parent is None
    card.content = None
    assert card.content is None
    assert second.parent is None


def test_content_rejects_non_widget():
    card = DashboardCard()
    existing = Widget()
    card.content = existing
    with pytest.raises(TypeError):
        card.content = "not a widget"
    assert card.content is existing


def test_add_action_creates_styled_button():
    card = DashboardCard()
    card.add_action("refresh", "view-refresh-symbolic", "Refresh")
    button = card.actions["refresh"]
    assert button.has_css_class("flat")
    assert button.has_css_class("circular")
    assert button.tooltip == "Refresh"
    assert button.icon_name == "view-refresh-symbolic"


def test_activate_action_emits_signal():
    card = DashboardCard()
    received = []
    card.action_activated.connect(received.append)
    card.add_action("refresh", "view-refresh-symbolic", None)
    card.add_action("settings", "emblem-system-symbolic", "Settings")
    card.activate_action("settings")
    card.activate_action("refresh")
    assert received == ["settings", "refresh"]


def test_add_action_replaces_same_name():
    card = DashboardCard()
    card.add_action("go", "icon-a", None)
    old = card.actions["go"]
    card.add_action("go", "icon-b", None)
    assert card.action_names == ("go",)
    assert card.actions["go"].icon_name == "icon-b"
    assert old.parent is None


def test_remove_action():
    card = DashboardCard()
    card.add_action("a", "icon", None)
    card.add_action("b", "icon", None)
    card.remove_action("a")
    assert card.action_names == ("b",)
    card.remove_action("missing")
    assert card.action_names == ("b",)


def test_activate_unknown_action_raises():
    card = DashboardCard()
    with pytest.raises(KeyError):
        card.activate_action("nope")


def test_add_action_requires_names():
    card = DashboardCard()
    with pytest.raises(ValueError):
        card.add_action(None, "icon", None)
    with pytest.raises(ValueError):
        card.add_action("name", None, None)
    assert card.action_names == ()