"""Per-notification expiry timers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from toastqueue.scheduling.timer_backends import TimerBackend

log = logging.getLogger(__name__)


class TimerState(Enum):
    PENDING = "pending"
    FIRED = "fired"
    CANCELLED = "cancelled"


@dataclass
class TimerBinding:
    notification_id: str
    delay_ms: int
    on_expire: Callable[[str], None]
    state: TimerState = TimerState.PENDING
    handle: Any = None


class DismissalScheduler:
    """Owns at most one pending expiry timer per notification id.

    A binding leaves PENDING exactly once, either by firing or by being
    cancelled, and is dropped from the table in that same step. Callbacks the
    backend delivers for a binding that is no longer current are ignored.
    """

    def __init__(self, backend: TimerBackend):
        self.backend = backend
        self._bindings: Dict[str, TimerBinding] = {}

    def arm(self, notification_id: str, delay_ms: int, on_expire: Callable[[str], None]) -> TimerBinding:
        """Schedule ``on_expire(notification_id)`` after ``delay_ms``."""
        if notification_id in self._bindings:
            self.cancel(notification_id)

        binding = TimerBinding(notification_id=notification_id, delay_ms=max(0, delay_ms), on_expire=on_expire)
        self._bindings[notification_id] = binding
        binding.handle = self.backend.call_later(binding.delay_ms, lambda: self._fire(binding))
        log.debug("Armed %s for %d ms", notification_id, binding.delay_ms)
        return binding

    def _fire(self, binding: TimerBinding) -> None:
        if binding.state is not TimerState.PENDING:
            return
        if self._bindings.get(binding.notification_id) is not binding:
            return
        binding.state = TimerState.FIRED
        del self._bindings[binding.notification_id]
        log.debug("Timer fired for %s", binding.notification_id)
        binding.on_expire(binding.notification_id)

    def cancel(self, notification_id: str) -> bool:
        """Disarm a pending timer. Fired or unknown ids are a no-op."""
        binding = self._bindings.pop(notification_id, None)
        if binding is None:
            return False
        binding.state = TimerState.CANCELLED
        self.backend.cancel(binding.handle)
        log.debug("Cancelled timer for %s", notification_id)
        return True

    def cancel_all(self) -> int:
        ids = list(self._bindings)
        for notification_id in ids:
            self.cancel(notification_id)
        return len(ids)

    def is_armed(self, notification_id: str) -> bool:
        return notification_id in self._bindings

    def binding(self, notification_id: str) -> Optional[TimerBinding]:
        return self._bindings.get(notification_id)

    def pending_ids(self) -> List[str]:
        return list(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)
