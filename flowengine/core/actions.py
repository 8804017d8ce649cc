"""
Input action definitions.

Actions abstract raw input (keys, buttons) into semantic actions.
Gameplay-flow code checks Actions, never raw keys, so the same menu and
interaction logic works with keyboard and gamepad.

Usage:
    if input.is_action_just_pressed(Action.MENU):
        menus.toggle_menu()
"""

from enum import Enum, auto

import pygame


class Action(Enum):
    """Semantic input actions."""

    # Menu navigation
    MENU_UP = auto()
    MENU_DOWN = auto()
    MENU_LEFT = auto()
    MENU_RIGHT = auto()
    CONFIRM = auto()
    CANCEL = auto()
    MENU = auto()

    # Movement
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    RUN = auto()
    JUMP = auto()

    # Gameplay
    INTERACT = auto()

    # Camera look (gamepad right stick; mouse look uses raw deltas)
    LOOK_UP = auto()
    LOOK_DOWN = auto()
    LOOK_LEFT = auto()
    LOOK_RIGHT = auto()


DEFAULT_KEY_BINDINGS: dict[Action, list[int]] = {
    # Menu
    Action.MENU_UP: [pygame.K_UP, pygame.K_w],
    Action.MENU_DOWN: [pygame.K_DOWN, pygame.K_s],
    Action.MENU_LEFT: [pygame.K_LEFT, pygame.K_a],
    Action.MENU_RIGHT: [pygame.K_RIGHT, pygame.K_d],
    Action.CONFIRM: [pygame.K_RETURN, pygame.K_SPACE],
    Action.CANCEL: [pygame.K_BACKSPACE],
    Action.MENU: [pygame.K_ESCAPE, pygame.K_TAB],

    # Movement
    Action.MOVE_UP: [pygame.K_w, pygame.K_UP],
    Action.MOVE_DOWN: [pygame.K_s, pygame.K_DOWN],
    Action.MOVE_LEFT: [pygame.K_a, pygame.K_LEFT],
    Action.MOVE_RIGHT: [pygame.K_d, pygame.K_RIGHT],
    Action.RUN: [pygame.K_LSHIFT, pygame.K_RSHIFT],
    Action.JUMP: [pygame.K_SPACE],

    # Gameplay
    Action.INTERACT: [pygame.K_e],
}

# Gamepad button bindings (SDL controller layout)
DEFAULT_GAMEPAD_BINDINGS: dict[Action, list[int]] = {
    Action.CONFIRM: [0],   # A button
    Action.CANCEL: [1],    # B button
    Action.INTERACT: [2],  # X button
    Action.JUMP: [0],      # A button
    Action.RUN: [4],       # Left bumper
    Action.MENU: [7],      # Start
}

# Gamepad axis bindings (axis_index, threshold, action_positive, action_negative)
DEFAULT_GAMEPAD_AXIS_BINDINGS: list[tuple[int, float, Action, Action]] = [
    (0, 0.5, Action.MOVE_RIGHT, Action.MOVE_LEFT),   # Left stick X
    (1, 0.5, Action.MOVE_DOWN, Action.MOVE_UP),      # Left stick Y
    (2, 0.5, Action.LOOK_RIGHT, Action.LOOK_LEFT),   # Right stick X
    (3, 0.5, Action.LOOK_DOWN, Action.LOOK_UP),      # Right stick Y
]

# D-pad bindings (hat)
DEFAULT_GAMEPAD_HAT_BINDINGS: dict[tuple[int, int], Action] = {
    (0, 1): Action.MENU_UP,
    (0, -1): Action.MENU_DOWN,
    (-1, 0): Action.MENU_LEFT,
    (1, 0): Action.MENU_RIGHT,
}
