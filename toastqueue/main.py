"""
Toast Queue - Main Entry Point
==============================

Usage:
    toastqueue                      Open the GUI demo
    toastqueue --headless           Play the scripted scenario in the console
    toastqueue --config my.yaml     Use a specific configuration file
"""

from __future__ import annotations

import argparse
import logging
import sys
import tkinter as tk
from pathlib import Path

from toastqueue.config.config_manager import AppConfig, ensure_config
from toastqueue.core.toast_queue import ToastQueue
from toastqueue.notifications.notification_manager import NotificationKind
from toastqueue.scheduling.timer_backends import TkTimerBackend
from toastqueue.ui.components import ToastStack
from toastqueue.ui.theme import Theme

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".toastqueue" / "config.yaml"

# Kinds cycle in a fixed order so the demo is reproducible.
DEMO_KINDS = [
    NotificationKind.SUCCESS,
    NotificationKind.WARNING,
    NotificationKind.ERROR,
    NotificationKind.INFO,
]


class ToastDemoApp(tk.Tk):
    """Small window with buttons that feed a ToastStack."""

    def __init__(self, config: AppConfig):
        super().__init__()
        self.app_config = config
        self.title(config.ui.title)
        self.configure(bg=Theme.BG_PRIMARY, padx=16, pady=16)
        self.minsize(config.ui.width, 300)

        self.queue = ToastQueue(TkTimerBackend(self), policy=config.toasts)
        self._added = 0

        buttons = tk.Frame(self, bg=Theme.BG_PRIMARY)
        buttons.pack(fill=tk.X, pady=(0, 12))
        for text, command in (
            ("Add notification", self._add_auto),
            ("Add persistent", self._add_persistent),
            ("Clear all", self.queue.clear),
        ):
            tk.Button(
                buttons,
                text=text,
                command=command,
                bg=Theme.BG_TERTIARY,
                fg=Theme.TEXT_PRIMARY,
                activebackground=Theme.BG_HOVER,
                activeforeground=Theme.TEXT_PRIMARY,
                relief=tk.FLAT,
                padx=10,
                pady=4,
            ).pack(side=tk.LEFT, padx=(0, 6))

        self.stack = ToastStack(self, self.queue, width=config.ui.width)
        self.stack.pack(fill=tk.BOTH, expand=True)

        self.protocol("WM_DELETE_WINDOW", self._on_close)

    def _next_kind(self) -> NotificationKind:
        kind = DEMO_KINDS[self._added % len(DEMO_KINDS)]
        self._added += 1
        return kind

    def _add_auto(self) -> None:
        kind = self._next_kind()
        self.queue.notify(kind, f"Notification #{self._added} ({kind.value})")

    def _add_persistent(self) -> None:
        kind = self._next_kind()
        self.queue.enqueue(kind, f"Notification #{self._added} stays until closed")

    def _on_close(self) -> None:
        self.queue.shutdown()
        self.destroy()


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Toast notification queue with timed auto-dismissal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--headless", action="store_true", help="Run the scripted scenario without a GUI")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Path to the YAML configuration")
    parser.add_argument("--quiet", action="store_true", help="Headless mode: only print changes and status")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ensure_config(args.config)
    except ValueError as e:
        print(f"Invalid configuration in {args.config}: {e}")
        sys.exit(1)

    if args.headless:
        from toastqueue.headless_runner import main as run_headless
        run_headless(config, quiet=args.quiet)
        return

    try:
        app = ToastDemoApp(config)
    except tk.TclError as e:
        print(f"Could not open a window ({e}). Try --headless.")
        sys.exit(1)
    app.mainloop()


if __name__ == "__main__":
    main()
