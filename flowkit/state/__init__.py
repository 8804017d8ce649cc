"""Progress state store."""

from flowkit.state.models import Counter, Condition
from flowkit.state.game_state import GameState

__all__ = [
    "Counter",
    "Condition",
    "GameState",
]
