"""
Toast Queue - Source Package
============================

Ephemeral notifications with timed auto-dismissal.

Modules:
    - notifications: Notification model and store
    - scheduling: Expiry timers and event-loop backends
    - core: The combined toast queue
    - config: Configuration management
    - ui: tkinter rendering and theme
"""

__version__ = "1.0.0"
__author__ = "Toast Queue Team"
