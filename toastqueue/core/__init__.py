"""
Core Module
===========

The toast queue: notification store and dismissal timers combined.
"""

from toastqueue.core.toast_queue import ToastQueue

__all__ = [
    "ToastQueue",
]
