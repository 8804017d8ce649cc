"""UI focus management."""

from flowengine.ui.focus import FocusManager, Focusable

__all__ = [
    "FocusManager",
    "Focusable",
]
