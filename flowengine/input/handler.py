"""
Input handler with action-based abstraction.

Handles keyboard, mouse movement and gamepad input, translating raw pygame
events into semantic Actions. The handler only records state; which consumer is
allowed to act on it (player, menus, dialogue) is decided by the mode
controller enabling and disabling those consumers.

Usage:
    for event in pygame.event.get():
        input_handler.process_event(event)
    input_handler.update()

    if input_handler.is_action_just_pressed(Action.INTERACT):
        selector.interact()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import pygame

from flowengine.core.actions import (
    Action,
    DEFAULT_KEY_BINDINGS,
    DEFAULT_GAMEPAD_BINDINGS,
    DEFAULT_GAMEPAD_AXIS_BINDINGS,
    DEFAULT_GAMEPAD_HAT_BINDINGS,
)
from flowengine.core.events import EventBus


class InputEvent(Enum):
    """Input-specific events."""
    ACTION_PRESSED = "input.action_pressed"
    ACTION_RELEASED = "input.action_released"
    GAMEPAD_CONNECTED = "input.gamepad_connected"
    GAMEPAD_DISCONNECTED = "input.gamepad_disconnected"


@dataclass
class MouseState:
    """Mouse movement accumulated over the current frame."""
    dx: int = 0
    dy: int = 0


@dataclass
class InputState:
    """Complete input state for current frame."""
    # Action states
    actions_pressed: set[Action] = field(default_factory=set)
    actions_just_pressed: set[Action] = field(default_factory=set)
    actions_just_released: set[Action] = field(default_factory=set)

    # Raw key states
    keys_pressed: set[int] = field(default_factory=set)

    # Mouse
    mouse: MouseState = field(default_factory=MouseState)

    # Gamepad analog values
    axis_values: dict[int, float] = field(default_factory=dict)


class InputHandler:
    """
    Handles all input processing.

    Translates raw pygame events into semantic Actions.
    Supports keyboard, mouse movement and gamepad.
    """

    def __init__(self, event_bus: EventBus | None = None):
        self.event_bus = event_bus

        # Current and previous frame states
        self._state = InputState()
        self._prev_actions: set[Action] = set()

        # Key bindings (action -> list of keys)
        self._key_bindings = {a: list(k) for a, k in DEFAULT_KEY_BINDINGS.items()}
        self._reverse_key_bindings: dict[int, list[Action]] = {}
        self._rebuild_reverse_bindings()

        # Gamepad
        self._gamepads: dict[int, pygame.joystick.JoystickType] = {}
        self._gamepad_bindings = DEFAULT_GAMEPAD_BINDINGS.copy()
        self._gamepad_axis_bindings = list(DEFAULT_GAMEPAD_AXIS_BINDINGS)
        self._gamepad_hat_bindings = DEFAULT_GAMEPAD_HAT_BINDINGS.copy()

        pygame.joystick.init()
        self._refresh_gamepads()

    def _rebuild_reverse_bindings(self) -> None:
        """Build reverse lookup: key -> actions."""
        self._reverse_key_bindings.clear()
        for action, keys in self._key_bindings.items():
            for key in keys:
                self._reverse_key_bindings.setdefault(key, []).append(action)

    def _refresh_gamepads(self) -> None:
        """Refresh connected gamepads."""
        self._gamepads.clear()
        for i in range(pygame.joystick.get_count()):
            joy = pygame.joystick.Joystick(i)
            joy.init()
            self._gamepads[joy.get_instance_id()] = joy

    # Public API

    def is_action_pressed(self, action: Action) -> bool:
        """Check if an action is currently held down."""
        return action in self._state.actions_pressed

    def is_action_just_pressed(self, action: Action) -> bool:
        """Check if an action was just pressed this frame."""
        return action in self._state.actions_just_pressed

    def is_action_just_released(self, action: Action) -> bool:
        """Check if an action was just released this frame."""
        return action in self._state.actions_just_released

    @property
    def mouse_delta(self) -> tuple[int, int]:
        """Get mouse movement since last frame."""
        return (self._state.mouse.dx, self._state.mouse.dy)

    def get_axis(self, axis: int) -> float:
        """Get gamepad axis value (-1 to 1)."""
        return self._state.axis_values.get(axis, 0.0)

    # Key binding management

    def bind_key(self, action: Action, key: int) -> None:
        """Add a key binding for an action."""
        keys = self._key_bindings.setdefault(action, [])
        if key not in keys:
            keys.append(key)
        self._rebuild_reverse_bindings()

    def unbind_key(self, action: Action, key: int) -> None:
        """Remove a key binding for an action."""
        if key in self._key_bindings.get(action, []):
            self._key_bindings[action].remove(key)
        self._rebuild_reverse_bindings()

    def get_bindings(self, action: Action) -> list[int]:
        """Get all key bindings for an action."""
        return self._key_bindings.get(action, []).copy()

    # Frame update

    def process_event(self, event: pygame.event.Event) -> None:
        """Process a pygame event."""
        if event.type == pygame.KEYDOWN:
            self._on_key_down(event.key)

        elif event.type == pygame.KEYUP:
            self._on_key_up(event.key)

        elif event.type == pygame.MOUSEMOTION:
            self._state.mouse.dx += event.rel[0]
            self._state.mouse.dy += event.rel[1]

        elif event.type == pygame.JOYDEVICEADDED:
            self._refresh_gamepads()
            if self.event_bus:
                self.event_bus.publish(InputEvent.GAMEPAD_CONNECTED)

        elif event.type == pygame.JOYDEVICEREMOVED:
            self._refresh_gamepads()
            if self.event_bus:
                self.event_bus.publish(InputEvent.GAMEPAD_DISCONNECTED)

        elif event.type == pygame.JOYBUTTONDOWN:
            self._on_gamepad_button(event.button, True)

        elif event.type == pygame.JOYBUTTONUP:
            self._on_gamepad_button(event.button, False)

        elif event.type == pygame.JOYAXISMOTION:
            self._state.axis_values[event.axis] = event.value
            self._process_axis_actions(event.axis, event.value)

        elif event.type == pygame.JOYHATMOTION:
            self._on_hat_motion(event.value)

    def update(self) -> None:
        """
        Compute edge-triggered action sets for the new frame.

        Call once per frame after all pygame events were processed and
        before any consumer reads input.
        """
        self._state.actions_just_pressed = self._state.actions_pressed - self._prev_actions
        self._state.actions_just_released = self._prev_actions - self._state.actions_pressed

        if self.event_bus:
            for action in self._state.actions_just_pressed:
                self.event_bus.publish(InputEvent.ACTION_PRESSED, action=action)
            for action in self._state.actions_just_released:
                self.event_bus.publish(InputEvent.ACTION_RELEASED, action=action)

        self._prev_actions = self._state.actions_pressed.copy()

    def end_frame(self) -> None:
        """Reset per-frame accumulators after consumers have read them."""
        self._state.mouse.dx = 0
        self._state.mouse.dy = 0

    def _on_key_down(self, key: int) -> None:
        """Handle key press."""
        self._state.keys_pressed.add(key)
        for action in self._reverse_key_bindings.get(key, []):
            self._state.actions_pressed.add(action)

    def _on_key_up(self, key: int) -> None:
        """Handle key release."""
        self._state.keys_pressed.discard(key)

        # Only release an action when no other bound key still holds it
        for action in self._reverse_key_bindings.get(key, []):
            still_pressed = any(
                other != key and other in self._state.keys_pressed
                for other in self._key_bindings.get(action, [])
            )
            if not still_pressed:
                self._state.actions_pressed.discard(action)

    def _on_gamepad_button(self, button: int, pressed: bool) -> None:
        """Handle gamepad button press/release."""
        for action, buttons in self._gamepad_bindings.items():
            if button in buttons:
                if pressed:
                    self._state.actions_pressed.add(action)
                else:
                    self._state.actions_pressed.discard(action)

    def _process_axis_actions(self, axis: int, value: float) -> None:
        """Process axis input into actions."""
        for ax, threshold, pos_action, neg_action in self._gamepad_axis_bindings:
            if ax != axis:
                continue
            if value > threshold:
                self._state.actions_pressed.add(pos_action)
                self._state.actions_pressed.discard(neg_action)
            elif value < -threshold:
                self._state.actions_pressed.add(neg_action)
                self._state.actions_pressed.discard(pos_action)
            else:
                self._state.actions_pressed.discard(pos_action)
                self._state.actions_pressed.discard(neg_action)

    def _on_hat_motion(self, value: tuple[int, int]) -> None:
        """Handle D-pad input."""
        for action in self._gamepad_hat_bindings.values():
            self._state.actions_pressed.discard(action)

        if value in self._gamepad_hat_bindings:
            self._state.actions_pressed.add(self._gamepad_hat_bindings[value])
