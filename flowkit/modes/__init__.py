"""Gameplay modes and the player-side input consumer."""

from flowkit.modes.controller import Mode, ModeController, PlayerAgent
from flowkit.modes.player import PlayerInput

__all__ = [
    "Mode",
    "ModeController",
    "PlayerAgent",
    "PlayerInput",
]
