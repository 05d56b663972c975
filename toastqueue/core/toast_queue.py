"""
Toast Queue - store plus expiry timers behind one object.

Removal authority is first-remover-wins: a timer that fires after a manual
dismissal finds nothing to remove, and a manual dismissal after expiry
returns False. Neither case is an error.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from toastqueue.config.config_manager import ToastPolicy
from toastqueue.notifications.notification_manager import (
    Listener,
    Notification,
    NotificationKind,
    NotificationStore,
)
from toastqueue.scheduling.dismissal_scheduler import DismissalScheduler
from toastqueue.scheduling.timer_backends import TimerBackend

log = logging.getLogger(__name__)


class ToastQueue:
    """Notifications that may close themselves after a delay."""

    def __init__(
        self,
        backend: TimerBackend,
        policy: Optional[ToastPolicy] = None,
        store: Optional[NotificationStore] = None,
    ):
        self.policy = policy or ToastPolicy()
        self.store = store or NotificationStore()
        self.scheduler = DismissalScheduler(backend)

    # ---- Core operations ---------------------------------------------------
    def enqueue(
        self,
        kind: Union[NotificationKind, str],
        message: str,
        auto_close_after: Optional[int] = None,
    ) -> str:
        if auto_close_after is not None:
            auto_close_after = max(0, auto_close_after)
        notification_id = self.store.enqueue(kind, message, auto_close_after)
        if auto_close_after is not None:
            self.scheduler.arm(notification_id, auto_close_after, self._on_expire)
            # A listener may have dismissed it while the ADDED event was out.
            if notification_id not in self.store:
                self.scheduler.cancel(notification_id)
        self._enforce_limit()
        return notification_id

    def dismiss(self, notification_id: str) -> bool:
        """Manual dismissal, e.g. from a close button."""
        return self._remove(notification_id, "manual")

    def list(self) -> List[Notification]:
        return self.store.list()

    def _on_expire(self, notification_id: str) -> None:
        # The binding is already consumed by the scheduler at this point.
        if self.store.dismiss(notification_id):
            log.debug("Removed %s (timer)", notification_id)
        else:
            log.debug("Timer for %s found nothing to remove", notification_id)

    def _remove(self, notification_id: str, reason: str) -> bool:
        if not self.store.dismiss(notification_id):
            return False
        self.scheduler.cancel(notification_id)
        log.debug("Removed %s (%s)", notification_id, reason)
        return True

    def _enforce_limit(self) -> None:
        limit = self.policy.max_visible
        if limit <= 0:
            return
        snapshot = self.store.list()
        for notif in snapshot[: max(0, len(snapshot) - limit)]:
            self._remove(notif.id, "evicted")

    # ---- Conveniences ------------------------------------------------------
    def notify(self, kind: Union[NotificationKind, str], message: str) -> str:
        """Enqueue using the configured auto-close delay for ``kind``."""
        kind = NotificationKind.coerce(kind)
        return self.enqueue(kind, message, self.policy.auto_close_for(kind))

    def success(self, message: str) -> str:
        return self.notify(NotificationKind.SUCCESS, message)

    def warning(self, message: str) -> str:
        return self.notify(NotificationKind.WARNING, message)

    def error(self, message: str) -> str:
        return self.notify(NotificationKind.ERROR, message)

    def info(self, message: str) -> str:
        return self.notify(NotificationKind.INFO, message)

    def clear(self) -> int:
        """Dismiss everything. Returns how many were removed."""
        return sum(1 for notif in self.store.list() if self._remove(notif.id, "cleared"))

    def shutdown(self) -> None:
        """Cancel every pending timer; live notifications stay put."""
        cancelled = self.scheduler.cancel_all()
        if cancelled:
            log.debug("Cancelled %d pending timer(s) on shutdown", cancelled)

    def add_listener(self, callback: Listener) -> None:
        self.store.add_listener(callback)

    def remove_listener(self, callback: Listener) -> None:
        self.store.remove_listener(callback)

    def __len__(self) -> int:
        return len(self.store)
