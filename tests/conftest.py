"""Shared fixtures."""

import pytest

from toastqueue.core.toast_queue import ToastQueue
from toastqueue.notifications.notification_manager import NotificationStore
from toastqueue.scheduling.timer_backends import ManualTimerBackend


@pytest.fixture
def backend():
    return ManualTimerBackend()


@pytest.fixture
def store():
    return NotificationStore()


@pytest.fixture
def queue(backend):
    return ToastQueue(backend)


@pytest.fixture
def events(queue):
    """Records (event, id) pairs emitted by the queue's store."""
    seen = []
    queue.add_listener(lambda event, notif: seen.append((event, notif.id)))
    return seen
