"""Tests for per-kind toast styling."""

import pytest

pytest.importorskip("tkinter")

from toastqueue.notifications.notification_manager import NotificationKind  # noqa: E402
from toastqueue.ui.theme import KIND_STYLES, Theme, style_for  # noqa: E402


def test_every_kind_has_a_style():
    assert set(KIND_STYLES) == set(NotificationKind)


@pytest.mark.parametrize("kind, icon, accent", [
    ("success", "✓", Theme.ACCENT_GREEN),
    ("warning", "⚠", Theme.ACCENT_YELLOW),
    ("error", "✕", Theme.ACCENT_RED),
    ("info", "ℹ", Theme.ACCENT_BLUE),
])
def test_style_for(kind, icon, accent):
    style = style_for(kind)
    assert style.icon == icon
    assert style.accent == accent


def test_style_for_unknown_kind():
    with pytest.raises(ValueError):
        style_for("fatal")
