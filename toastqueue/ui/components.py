"""
UI Components - tkinter rendering for the toast queue
"""

from __future__ import annotations

import tkinter as tk
from typing import Dict

from toastqueue.core.toast_queue import ToastQueue
from toastqueue.notifications.notification_manager import Notification, StoreEvent
from toastqueue.ui.theme import Theme, style_for


class ToastRow(tk.Frame):
    """One toast: accent bar, icon, message and a close button."""

    def __init__(self, parent, notification: Notification, on_close, wraplength: int = 320):
        style = style_for(notification.kind)
        super().__init__(parent, bg=style.background, highlightthickness=1, highlightbackground=Theme.BORDER)
        self.notification_id = notification.id
        self.on_close = on_close

        tk.Frame(self, bg=style.accent, width=4).pack(side=tk.LEFT, fill=tk.Y)

        tk.Label(
            self,
            text=style.icon,
            font=("Segoe UI", 11, "bold"),
            bg=style.accent,
            fg=Theme.BG_PRIMARY,
            width=2,
        ).pack(side=tk.LEFT, padx=(10, 8), pady=8)

        tk.Label(
            self,
            text=notification.message,
            font=("Segoe UI", 10),
            bg=style.background,
            fg=style.foreground,
            justify=tk.LEFT,
            anchor="w",
            wraplength=wraplength,
        ).pack(side=tk.LEFT, fill=tk.X, expand=True, pady=8)

        self.close_button = tk.Label(
            self,
            text="✕",
            font=("Segoe UI", 10),
            bg=style.background,
            fg=Theme.TEXT_MUTED,
            cursor="hand2",
            padx=10,
        )
        self.close_button.pack(side=tk.RIGHT)
        self.close_button.bind("<Button-1>", lambda e: self.close())
        self.close_button.bind("<Enter>", lambda e: self.close_button.configure(fg=style.foreground))
        self.close_button.bind("<Leave>", lambda e: self.close_button.configure(fg=Theme.TEXT_MUTED))

    def close(self) -> None:
        self.on_close(self.notification_id)


class ToastStack(tk.Frame):
    """Draws the queue's live notifications, oldest at the top.

    Subscribes to the queue and re-syncs from ``queue.list()`` on every store
    event; close buttons call ``queue.dismiss``.
    """

    def __init__(self, parent, queue: ToastQueue, width: int = 420, **kwargs):
        super().__init__(parent, bg=Theme.BG_PRIMARY, **kwargs)
        self.queue = queue
        self.width = width
        self._rows: Dict[str, ToastRow] = {}

        self.empty_label = tk.Label(
            self,
            text="No notifications",
            font=("Segoe UI", 9),
            bg=Theme.BG_PRIMARY,
            fg=Theme.TEXT_MUTED,
            pady=12,
        )

        queue.add_listener(self._on_store_event)
        self.bind("<Destroy>", self._on_destroy)
        self.refresh()

    def _on_store_event(self, event: StoreEvent, notification: Notification) -> None:
        self.refresh()

    def _on_destroy(self, event=None):
        if event is not None and event.widget is not self:
            return
        self.queue.remove_listener(self._on_store_event)

    def refresh(self) -> None:
        snapshot = self.queue.list()
        live_ids = {n.id for n in snapshot}

        for notification_id in list(self._rows):
            if notification_id not in live_ids:
                self._rows.pop(notification_id).destroy()

        # Entries are only ever appended, so new rows go at the bottom.
        for notification in snapshot:
            if notification.id not in self._rows:
                row = ToastRow(self, notification, self.queue.dismiss, wraplength=self.width - 100)
                row.pack(fill=tk.X, pady=(0, 6))
                self._rows[notification.id] = row

        if self._rows:
            self.empty_label.pack_forget()
        else:
            self.empty_label.pack(fill=tk.X)
