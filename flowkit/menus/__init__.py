"""Menus and the menu stack."""

from flowkit.menus.menu import Menu, MenuState, MenuTransitions, InstantTransitions
from flowkit.menus.controller import MenuController

__all__ = [
    "Menu",
    "MenuState",
    "MenuTransitions",
    "InstantTransitions",
    "MenuController",
]
