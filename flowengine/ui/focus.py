"""
Focus management for keyboard/gamepad UI navigation.

Tracks which control currently has focus. Menus and the dialogue box use
it to remember and restore the focused control across open/close.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol, runtime_checkable


@runtime_checkable
class Focusable(Protocol):
    """Anything that can receive UI focus (button, slider, choice)."""

    def focus(self) -> bool: ...

    def unfocus(self) -> None: ...


class FocusManager:
    """
    Manages focus state across the UI system.

    Only one control holds focus at a time. Setting focus unfocuses the
    previous holder and notifies `on_focus_changed(old, new)`.
    """

    def __init__(self):
        self._focused: Optional[Focusable] = None

        # Callbacks
        self.on_focus_changed: Optional[
            Callable[[Optional[Focusable], Optional[Focusable]], None]
        ] = None

    @property
    def focused(self) -> Optional[Focusable]:
        """Get currently focused control."""
        return self._focused

    def set_focus(self, widget: Optional[Focusable]) -> bool:
        """
        Set focus to a control.

        Args:
            widget: Control to focus, or None to clear focus

        Returns:
            True if focus changed
        """
        if widget is self._focused:
            return False

        old_focus = self._focused

        if old_focus is not None:
            old_focus.unfocus()

        self._focused = widget
        if widget is not None:
            widget.focus()

        if self.on_focus_changed:
            self.on_focus_changed(old_focus, widget)

        return True

    def clear_focus(self) -> None:
        """Clear all focus."""
        self.set_focus(None)
