"""
Scheduling Module
=================

Expiry timers for auto-closing notifications and the event-loop backends
they run on.
"""

from toastqueue.scheduling.timer_backends import (
    TimerBackend,
    ManualTimerBackend,
    TkTimerBackend,
    AsyncioTimerBackend,
)

from toastqueue.scheduling.dismissal_scheduler import (
    TimerState,
    TimerBinding,
    DismissalScheduler,
)

__all__ = [
    # Backends
    "TimerBackend",
    "ManualTimerBackend",
    "TkTimerBackend",
    "AsyncioTimerBackend",

    # Scheduler
    "TimerState",
    "TimerBinding",
    "DismissalScheduler",
]
