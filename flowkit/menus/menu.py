"""
Menu - an overlay panel that can be opened and closed.

The menu's logical state flips synchronously; the visual transition is
fire-and-forget through a MenuTransitions collaborator and only moves the
state from OPENING/CLOSING to OPEN/CLOSED when it completes.

Focus handling waits one tick: a control enabled this frame cannot take
focus yet, and focus restored on close must not race the closing frame.
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Callable, Optional, Protocol

from flowengine.core.errors import require
from flowengine.core.scheduler import ScheduledCall, TickScheduler
from flowengine.ui.focus import Focusable, FocusManager

logger = logging.getLogger(__name__)


class MenuState(Enum):
    """Lifecycle of a menu."""
    CLOSED = auto()
    OPENING = auto()
    OPEN = auto()
    CLOSING = auto()


class MenuTransitions(Protocol):
    """Presentation collaborator that animates menus."""

    def play_open(self, menu: Menu, on_complete: Callable[[], None]) -> None: ...

    def play_close(self, menu: Menu, on_complete: Callable[[], None]) -> None: ...

    def play_show(self, menu: Menu) -> None: ...

    def play_hide(self, menu: Menu) -> None: ...


class InstantTransitions:
    """Transitions that complete immediately (headless, tests)."""

    def play_open(self, menu: Menu, on_complete: Callable[[], None]) -> None:
        on_complete()

    def play_close(self, menu: Menu, on_complete: Callable[[], None]) -> None:
        on_complete()

    def play_show(self, menu: Menu) -> None:
        pass

    def play_hide(self, menu: Menu) -> None:
        pass


class Menu:
    """
    A menu panel with open/close state and focus memory.

    Attributes:
        name: Identifier for logs and lookups
        select_on_open: Control focused one tick after opening
        select_previous_on_close: Remember the control focused when opening
            and focus it again one tick after closing
        hidden: Visually hidden while staying open (covered by another menu)
    """

    def __init__(
        self,
        name: str,
        scheduler: TickScheduler,
        focus: FocusManager,
        transitions: Optional[MenuTransitions] = None,
        select_on_open: Optional[Focusable] = None,
        select_previous_on_close: bool = True,
        start_open: bool = False,
    ):
        require(f"Menu '{name}'", scheduler=scheduler, focus=focus)
        self.name = name
        self.scheduler = scheduler
        self.focus = focus
        self.transitions: MenuTransitions = transitions or InstantTransitions()
        self.select_on_open = select_on_open
        self.select_previous_on_close = select_previous_on_close

        self.state = MenuState.CLOSED
        self.hidden = False

        self._select_on_close: Optional[Focusable] = None
        self._pending_focus: Optional[ScheduledCall] = None
        self._transition_id = 0

        if start_open:
            self.state = MenuState.OPEN
            self._schedule_focus(self._select_on_open_deferred)

    def __repr__(self) -> str:
        return f"Menu({self.name!r}, {self.state.name})"

    @property
    def is_open(self) -> bool:
        """True while opening or open."""
        return self.state in (MenuState.OPENING, MenuState.OPEN)

    def open(self) -> None:
        """Open the menu and start its opening transition."""
        if not self.is_open and self.select_previous_on_close:
            self._select_on_close = self.focus.focused

        self.state = MenuState.OPENING
        self.hidden = False
        self._schedule_focus(self._select_on_open_deferred)

        token = self._next_transition()
        self.transitions.play_open(self, lambda: self._finish(token, MenuState.OPEN))

    def close(self) -> None:
        """Close the menu and start its closing transition."""
        if not self.is_open:
            logger.debug(f"{self!r} is not open.")
            return

        self.state = MenuState.CLOSING
        self._cancel_pending_focus()

        if self.select_previous_on_close and self._select_on_close is not None:
            self._schedule_focus(self._restore_focus_deferred, self._select_on_close)
        self._select_on_close = None

        token = self._next_transition()
        self.transitions.play_close(self, lambda: self._finish(token, MenuState.CLOSED))

    def show(self) -> None:
        """Show a menu that was hidden behind another one."""
        self.hidden = False
        self.transitions.play_show(self)

    def hide(self) -> None:
        """Hide the menu without closing it."""
        self.hidden = True
        self.transitions.play_hide(self)

    def _next_transition(self) -> int:
        self._transition_id += 1
        return self._transition_id

    def _finish(self, token: int, state: MenuState) -> None:
        # A newer open/close supersedes this transition
        if token == self._transition_id:
            self.state = state

    def _schedule_focus(self, callback: Callable[..., None], *args: Focusable) -> None:
        self._cancel_pending_focus()
        self._pending_focus = self.scheduler.call_next_tick(callback, *args)

    def _cancel_pending_focus(self) -> None:
        if self._pending_focus is not None:
            self._pending_focus.cancel()
            self._pending_focus = None

    def _select_on_open_deferred(self) -> None:
        self._pending_focus = None
        if self.is_open and self.select_on_open is not None:
            self.focus.set_focus(self.select_on_open)

    def _restore_focus_deferred(self, target: Focusable) -> None:
        self._pending_focus = None
        if not self.is_open:
            self.focus.set_focus(target)
