"""
Notifications Module
====================

Notification model and the store that holds live notifications.
"""

from toastqueue.notifications.notification_manager import (
    NotificationKind,
    StoreEvent,
    Notification,
    NotificationStore,
)

__all__ = [
    "NotificationKind",
    "StoreEvent",
    "Notification",
    "NotificationStore",
]
