"""
Player input - the player-side consumer of gameplay input.

The mode controller switches it on and off; while it is off, interact
presses and look input are ignored.
"""

from __future__ import annotations

import logging
from typing import Optional

from flowengine.core.actions import Action
from flowengine.core.errors import require
from flowengine.input.handler import InputHandler
from flowkit.interaction.selector import InteractionSelector
from flowkit.settings import (
    CONTROLLER_SENSITIVITY_KEY,
    INVERT_Y_KEY,
    MOUSE_SENSITIVITY_KEY,
    SettingsStore,
)

logger = logging.getLogger(__name__)

# Right stick axes
LOOK_AXIS_X = 2
LOOK_AXIS_Y = 3


class PlayerInput:
    """
    Routes gameplay input for the player.

    Usage:
        player = PlayerInput(input_handler, selector, settings)
        modes = ModeController(context, player, menus, dialogue, pointer)

        # Every frame
        player.update()
        yaw, pitch = player.get_look_vector(dt)
    """

    def __init__(
        self,
        input_handler: InputHandler,
        selector: InteractionSelector,
        settings: Optional[SettingsStore] = None,
    ):
        require("PlayerInput", input_handler=input_handler, selector=selector)
        self.input = input_handler
        self.selector = selector
        self.settings = settings or SettingsStore()
        self._input_enabled = True

    @property
    def input_enabled(self) -> bool:
        return self._input_enabled

    def enable_input(self) -> None:
        self._input_enabled = True

    def disable_input(self) -> None:
        self._input_enabled = False

    def update(self) -> None:
        """Handle this frame's gameplay actions."""
        if not self._input_enabled:
            return

        if self.input.is_action_just_pressed(Action.INTERACT):
            self.selector.interact()

    def get_look_vector(self, dt: float) -> tuple[float, float]:
        """
        Camera look input for this frame.

        Mouse deltas are already per frame; stick deflection is scaled by dt.
        Invert-Y only applies to the controller.

        Args:
            dt: Frame delta time in seconds

        Returns:
            (horizontal, vertical) look amount
        """
        if not self._input_enabled:
            return (0.0, 0.0)

        dx, dy = self.input.mouse_delta
        if dx or dy:
            sensitivity = self.settings.get_float(MOUSE_SENSITIVITY_KEY)
            return (dx * sensitivity, dy * sensitivity)

        x = self.input.get_axis(LOOK_AXIS_X)
        y = self.input.get_axis(LOOK_AXIS_Y)
        if not x and not y:
            return (0.0, 0.0)

        scale = dt * self.settings.get_float(CONTROLLER_SENSITIVITY_KEY)
        if self.settings.get_bool(INVERT_Y_KEY):
            y = -y
        return (x * scale, y * scale)
