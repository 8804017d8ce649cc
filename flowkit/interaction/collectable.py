"""
Collectables - pickups that register themselves in the game state.
"""

from __future__ import annotations

import logging
from typing import Callable

from flowengine.core.errors import require
from flowkit.state.game_state import GameState
from flowkit.state.models import Counter

logger = logging.getLogger(__name__)


class Collectable:
    """
    A pickup worth a fixed amount of one counter.

    Attributes:
        state: Counter id and amount added when collected
        on_collected: Callbacks fired before the state is updated
        is_collected: Set once collected; the caller despawns the object
    """

    def __init__(self, state: Counter, game_state: GameState):
        require("Collectable", state=state, game_state=game_state)
        self.state = state
        self.game_state = game_state
        self.on_collected: list[Callable[[], None]] = []
        self.is_collected = False

    def collect(self) -> bool:
        """
        Collect this pickup.

        Returns:
            True if it was collected now, False if it already was
        """
        if self.is_collected:
            logger.warning(f"Collectable '{self.state.id}' was already collected.")
            return False

        for listener in list(self.on_collected):
            listener()

        self.game_state.add_counter(self.state)
        self.is_collected = True
        return True
