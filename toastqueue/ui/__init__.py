"""
UI Module
=========

Toast rendering and theme definitions.
"""

from toastqueue.ui.theme import Theme, ToastStyle, KIND_STYLES, style_for
from toastqueue.ui.components import (
    ToastRow,
    ToastStack,
)

__all__ = [
    "Theme",
    "ToastStyle",
    "KIND_STYLES",
    "style_for",
    "ToastRow",
    "ToastStack",
]
