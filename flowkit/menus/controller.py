"""
Menu controller - LIFO navigation of nested menus.

The bottom of the stack is usually the base menu (pause or main menu).
Opening it publishes BASE_MENU_OPENING and closing it publishes
BASE_MENU_CLOSED, which the mode controller turns into Pause and Play.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from flowengine.core.actions import Action
from flowengine.core.context import FlowContext
from flowengine.core.errors import require
from flowengine.core.events import FlowEvent
from flowkit.menus.menu import Menu

if TYPE_CHECKING:
    from flowengine.input.handler import InputHandler

logger = logging.getLogger(__name__)


class MenuController:
    """
    Opens and closes nested menus.

    Attributes:
        base_menu: Menu opened/closed by the toggle action
        prevent_base_closing: Refuse to close the base menu when it is the
            last one open (e.g. the main menu)
        hide_previous_menu: Hide the menu underneath when another one opens
        enabled: Whether menu input is processed (set by the mode controller)
    """

    def __init__(
        self,
        context: FlowContext,
        base_menu: Menu,
        prevent_base_closing: Optional[bool] = None,
        hide_previous_menu: Optional[bool] = None,
    ):
        require("MenuController", context=context, base_menu=base_menu)
        self.context = context
        self.events = context.event_bus
        self.base_menu = base_menu

        config = context.config
        self.prevent_base_closing = (
            config.prevent_base_closing if prevent_base_closing is None else prevent_base_closing
        )
        self.hide_previous_menu = (
            config.hide_previous_menu if hide_previous_menu is None else hide_previous_menu
        )

        self.enabled = True
        self._open_menus: list[Menu] = []

    @property
    def open_menus(self) -> tuple[Menu, ...]:
        """Open menus, bottom first."""
        return tuple(self._open_menus)

    @property
    def top(self) -> Optional[Menu]:
        """The most specific open menu."""
        return self._open_menus[-1] if self._open_menus else None

    @property
    def is_base_open(self) -> bool:
        return self.base_menu.is_open

    def start(self) -> None:
        """Track the base menu if it started open (e.g. a main menu)."""
        if self.base_menu.is_open and self.base_menu not in self._open_menus:
            self._open_menus.append(self.base_menu)

    # Menu controls

    def open_menu(self, menu: Menu) -> None:
        """Open a menu on top of the stack."""
        if menu in self._open_menus:
            logger.warning(f"{menu!r} is already open.")
            return

        if menu is self.base_menu:
            self.events.publish(FlowEvent.BASE_MENU_OPENING)

        if self.hide_previous_menu and self._open_menus:
            self._open_menus[-1].hide()

        self._open_menus.append(menu)
        menu.open()

    def close_menu(self) -> Optional[Menu]:
        """
        Close the top menu.

        Returns:
            The closed menu, or None if nothing was closed
        """
        if not self._open_menus:
            return None

        if (
            self.prevent_base_closing
            and len(self._open_menus) == 1
            and self._open_menus[-1] is self.base_menu
        ):
            return None

        closing = self._open_menus.pop()
        closing.close()

        if self.hide_previous_menu and self._open_menus:
            self._open_menus[-1].show()

        if closing is self.base_menu:
            self.events.publish(FlowEvent.BASE_MENU_CLOSED)

        return closing

    def go_back_menu(self) -> Optional[Menu]:
        """Go back one level of nested menus."""
        return self.close_menu()

    def toggle_menu(self) -> None:
        """Open the base menu, or go back one level if it is open."""
        if not self.base_menu.is_open:
            self.open_menu(self.base_menu)
        else:
            self.go_back_menu()

    # Input

    def handle_input(self, input_handler: InputHandler) -> bool:
        """
        Process menu actions for this frame.

        Returns:
            True if an action was handled
        """
        if not self.enabled:
            return False

        if input_handler.is_action_just_pressed(Action.MENU):
            self.toggle_menu()
            return True

        if input_handler.is_action_just_pressed(Action.CANCEL):
            self.go_back_menu()
            return True

        return False
