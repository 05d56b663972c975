"""
UI Theme - Color definitions and per-kind toast styling
"""

from dataclasses import dataclass
from typing import Dict, Union

from toastqueue.notifications.notification_manager import NotificationKind


class Theme:
    """GitHub-inspired dark theme color palette."""

    # Backgrounds
    BG_PRIMARY = "#0d1117"
    BG_SECONDARY = "#161b22"
    BG_TERTIARY = "#21262d"
    BG_HOVER = "#30363d"

    # Accents
    ACCENT_BLUE = "#58a6ff"
    ACCENT_GREEN = "#3fb950"
    ACCENT_RED = "#f85149"
    ACCENT_YELLOW = "#d29922"

    # Text
    TEXT_PRIMARY = "#e6edf3"
    TEXT_SECONDARY = "#8b949e"
    TEXT_MUTED = "#6e7681"

    # Borders
    BORDER = "#30363d"


@dataclass(frozen=True)
class ToastStyle:
    background: str
    foreground: str
    accent: str
    icon: str


KIND_STYLES: Dict[NotificationKind, ToastStyle] = {
    NotificationKind.SUCCESS: ToastStyle("#12261e", "#aff5b4", Theme.ACCENT_GREEN, "✓"),
    NotificationKind.WARNING: ToastStyle("#272115", "#f8e3a1", Theme.ACCENT_YELLOW, "⚠"),
    NotificationKind.ERROR: ToastStyle("#2d1517", "#ffdcd7", Theme.ACCENT_RED, "✕"),
    NotificationKind.INFO: ToastStyle("#121d2f", "#cae8ff", Theme.ACCENT_BLUE, "ℹ"),
}


def style_for(kind: Union[NotificationKind, str]) -> ToastStyle:
    return KIND_STYLES[NotificationKind.coerce(kind)]
