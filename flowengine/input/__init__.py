"""Input handling module."""

from flowengine.input.handler import InputHandler, InputState, MouseState, InputEvent
from flowengine.input.pointer import PointerCapture

__all__ = [
    "InputHandler",
    "InputState",
    "MouseState",
    "InputEvent",
    "PointerCapture",
]
