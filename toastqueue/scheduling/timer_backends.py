"""
Timer backends - the event loops a DismissalScheduler can run on.

All delays are in milliseconds. ``cancel`` must be safe to call with a
handle whose callback already ran.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional


class TimerBackend:
    """Minimal scheduling interface: run a callback later, or don't."""

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> Any:
        raise NotImplementedError

    def cancel(self, handle: Any) -> None:
        raise NotImplementedError


@dataclass(order=True)
class _ManualTimer:
    due: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)


class ManualTimerBackend(TimerBackend):
    """Simulated clock. Time only moves when ``advance`` is called.

    Timers due at the same instant run in the order they were scheduled.
    Cancelled timers are dropped from the heap once they make up half of it.
    """

    def __init__(self, start: float = 0.0):
        self.now = start
        self._queue: List[_ManualTimer] = []
        self._seq = itertools.count()
        self._cancelled = 0

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> _ManualTimer:
        timer = _ManualTimer(due=self.now + max(0, delay_ms), seq=next(self._seq), callback=callback)
        heapq.heappush(self._queue, timer)
        return timer

    def cancel(self, handle: _ManualTimer) -> None:
        if handle.cancelled:
            return
        handle.cancelled = True
        self._cancelled += 1
        while self._queue and self._queue[0].cancelled:
            heapq.heappop(self._queue)
            self._cancelled -= 1
        if self._cancelled * 2 > len(self._queue):
            self._queue = [t for t in self._queue if not t.cancelled]
            heapq.heapify(self._queue)
            self._cancelled = 0

    @property
    def pending_count(self) -> int:
        return len(self._queue) - self._cancelled

    @property
    def queued_count(self) -> int:
        """Heap size, cancelled entries included."""
        return len(self._queue)

    def advance(self, ms: float) -> int:
        """Move the clock forward, running every timer that comes due.

        Returns the number of callbacks that ran.
        """
        target = self.now + ms
        ran = 0
        while self._queue and self._queue[0].due <= target:
            timer = heapq.heappop(self._queue)
            if timer.cancelled:
                self._cancelled -= 1
                continue
            self.now = timer.due
            timer.cancelled = True
            timer.callback()
            ran += 1
        self.now = target
        return ran

    def run_pending(self) -> int:
        """Run whatever is already due without moving the clock."""
        return self.advance(0)


class TkTimerBackend(TimerBackend):
    """Schedules on the tkinter event loop owned by ``widget``."""

    def __init__(self, widget):
        self.widget = widget

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> str:
        return self.widget.after(max(0, int(delay_ms)), callback)

    def cancel(self, handle: str) -> None:
        self.widget.after_cancel(handle)


class AsyncioTimerBackend(TimerBackend):
    """Schedules on an asyncio loop (the running one unless given)."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop or asyncio.get_running_loop()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(max(0, delay_ms) / 1000.0, callback)

    def cancel(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()
