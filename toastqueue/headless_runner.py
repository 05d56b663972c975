"""
Headless Toast Runner
=====================
Plays a scripted notification scenario on a simulated clock and prints the
queue after every step. No display needed.

Usage:
    toastqueue --headless
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from toastqueue.config.config_manager import AppConfig
from toastqueue.core.toast_queue import ToastQueue
from toastqueue.notifications.notification_manager import Notification, StoreEvent
from toastqueue.scheduling.timer_backends import ManualTimerBackend

log = logging.getLogger(__name__)


@dataclass
class ScenarioStep:
    at_ms: int
    action: str  # enqueue | dismiss
    kind: str = "info"
    message: str = ""
    auto_close_after: Optional[int] = None
    target: int = -1  # index into enqueued ids, for dismiss


DEFAULT_SCENARIO: List[ScenarioStep] = [
    ScenarioStep(0, "enqueue", "success", "Saved", None),
    ScenarioStep(0, "enqueue", "error", "Failed", 3000),
    ScenarioStep(500, "enqueue", "info", "New version available", 3000),
    ScenarioStep(1500, "dismiss", target=2),
    ScenarioStep(2000, "enqueue", "warning", "Check your input", 3000),
]


class HeadlessRunner:
    """Drives a ToastQueue from a list of timed steps."""

    def __init__(self, config: Optional[AppConfig] = None, quiet: bool = False):
        self.config = config or AppConfig()
        self.quiet = quiet
        self.backend = ManualTimerBackend()
        self.queue = ToastQueue(self.backend, policy=self.config.toasts)
        self.enqueued: List[str] = []
        self.history: List[Tuple[float, List[Notification]]] = []
        self.queue.add_listener(self._on_event)

    def _log(self, message: str, level: str = "info") -> None:
        if self.quiet and level == "info":
            return
        prefix = {
            "info": "ℹ️ ",
            "added": "➕",
            "removed": "➖",
            "status": "📋",
        }.get(level, "  ")
        print(f"[{self.backend.now:>7.0f} ms] {prefix} {message}")

    def _on_event(self, event: StoreEvent, notification: Notification) -> None:
        level = "added" if event is StoreEvent.ADDED else "removed"
        self._log(f"{notification.kind.value:<8} {notification.message!r} ({notification.id})", level)

    def _snapshot(self) -> None:
        snapshot = self.queue.list()
        self.history.append((self.backend.now, snapshot))
        names = ", ".join(n.message for n in snapshot) or "(empty)"
        self._log(f"{len(snapshot)} live: {names}", "status")

    def _apply(self, step: ScenarioStep) -> None:
        if step.action == "enqueue":
            self.enqueued.append(self.queue.enqueue(step.kind, step.message, step.auto_close_after))
        elif step.action == "dismiss":
            notification_id = self.enqueued[step.target]
            if not self.queue.dismiss(notification_id):
                self._log(f"{notification_id} was already gone")
        else:
            raise ValueError(f"Unknown scenario action {step.action!r}")

    def run(self, steps: Optional[List[ScenarioStep]] = None, settle_ms: int = 5000) -> List[Notification]:
        """Play ``steps`` in time order, then let ``settle_ms`` more elapse."""
        steps = sorted(steps if steps is not None else DEFAULT_SCENARIO, key=lambda s: s.at_ms)
        self._log(f"Running {len(steps)} step(s)")

        for step in steps:
            if step.at_ms > self.backend.now:
                self.backend.advance(step.at_ms - self.backend.now)
            self._apply(step)
            self._snapshot()

        self.backend.advance(settle_ms)
        self._snapshot()
        self.queue.shutdown()
        return self.queue.list()


def main(config: Optional[AppConfig] = None, quiet: bool = False) -> None:
    print("""
╔═══════════════════════════════════════════════════════════════╗
║         TOAST QUEUE - Headless Scenario                       ║
╚═══════════════════════════════════════════════════════════════╝
    """)
    runner = HeadlessRunner(config, quiet=quiet)
    remaining = runner.run()
    print(f"\nDone. {len(remaining)} notification(s) still live.")
