"""Notification store: the ordered collection of live toasts."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

log = logging.getLogger(__name__)


class NotificationKind(Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"

    @classmethod
    def coerce(cls, value: Union["NotificationKind", str]) -> "NotificationKind":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(k.value for k in cls)
            raise ValueError(f"Unknown notification kind {value!r}; expected one of: {allowed}") from None


class StoreEvent(Enum):
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class Notification:
    id: str
    kind: NotificationKind
    message: str
    created_at: str
    auto_close_after: Optional[int] = None

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "kind": self.kind.value,
            "message": self.message,
            "created_at": self.created_at,
            "auto_close_after": self.auto_close_after,
        }

    @staticmethod
    def from_dict(data: Dict) -> "Notification":
        return Notification(
            id=data["id"],
            kind=NotificationKind(data["kind"]),
            message=data["message"],
            created_at=data["created_at"],
            auto_close_after=data.get("auto_close_after"),
        )


Listener = Callable[[StoreEvent, Notification], None]


class NotificationStore:
    """Holds live notifications in insertion order.

    The store knows nothing about timers. ``enqueue`` and ``dismiss`` are the
    only mutators; both are atomic and listeners are told about a change only
    after it has been applied.
    """

    def __init__(self) -> None:
        self._notifications: List[Notification] = []
        self._listeners: List[Listener] = []
        self._counter = 0
        self._lock = threading.Lock()

    def _generate_id(self) -> str:
        # Caller holds the lock; the counter alone keeps ids unique.
        self._counter += 1
        return f"notif_{datetime.now(timezone.utc).strftime('%Y%m%d%H%M%S')}_{self._counter}"

    def _now_iso(self) -> str:
        return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def add_listener(self, callback: Listener) -> None:
        """Register a callback invoked as ``callback(event, notification)``."""
        self._listeners.append(callback)

    def remove_listener(self, callback: Listener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _emit(self, event: StoreEvent, notification: Notification) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, notification)
            except Exception:
                log.exception("Listener %r failed on %s for %s", listener, event.value, notification.id)

    def enqueue(
        self,
        kind: Union[NotificationKind, str],
        message: str,
        auto_close_after: Optional[int] = None,
    ) -> str:
        """Append a new notification and return its id."""
        kind = NotificationKind.coerce(kind)
        with self._lock:
            notification = Notification(
                id=self._generate_id(),
                kind=kind,
                message=message,
                created_at=self._now_iso(),
                auto_close_after=auto_close_after,
            )
            self._notifications.append(notification)

        log.debug("Enqueued %s (%s)", notification.id, kind.value)
        self._emit(StoreEvent.ADDED, notification)
        return notification.id

    def dismiss(self, notification_id: str) -> bool:
        """Remove the notification if it is still present.

        Returns False for unknown or already removed ids.
        """
        with self._lock:
            for index, notif in enumerate(self._notifications):
                if notif.id == notification_id:
                    removed = self._notifications.pop(index)
                    break
            else:
                return False

        log.debug("Dismissed %s", notification_id)
        self._emit(StoreEvent.REMOVED, removed)
        return True

    def list(self) -> List[Notification]:
        """Snapshot of live notifications, oldest first."""
        with self._lock:
            return list(self._notifications)

    def get(self, notification_id: str) -> Optional[Notification]:
        with self._lock:
            for notif in self._notifications:
                if notif.id == notification_id:
                    return notif
        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._notifications)

    def __contains__(self, notification_id) -> bool:
        return self.get(notification_id) is not None
