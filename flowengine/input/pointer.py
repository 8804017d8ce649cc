"""
Pointer capture.

In free play the mouse drives the camera: the cursor is hidden and the
pointer is grabbed by the window. Menus need it back.
"""

from __future__ import annotations

import logging

import pygame

logger = logging.getLogger(__name__)


class PointerCapture:
    """Grabs and hides the mouse pointer through pygame."""

    def __init__(self):
        self._captured = False

    @property
    def captured(self) -> bool:
        """True while the pointer is grabbed."""
        return self._captured

    def capture(self) -> None:
        """Grab the pointer and hide the cursor."""
        pygame.event.set_grab(True)
        pygame.mouse.set_visible(False)
        self._captured = True
        logger.debug("Pointer captured")

    def release(self) -> None:
        """Release the pointer and show the cursor."""
        pygame.event.set_grab(False)
        pygame.mouse.set_visible(True)
        self._captured = False
        logger.debug("Pointer released")
