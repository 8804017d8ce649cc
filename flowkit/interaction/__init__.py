"""Interactables, chained interactions and pickups."""

from flowkit.interaction.interactable import Interactable, Interaction, Effect
from flowkit.interaction.collectable import Collectable
from flowkit.interaction.selector import InteractionSelector
from flowkit.interaction.trigger import TriggerRelay, NO_TAG, PLAYER_TAG

__all__ = [
    "Interactable",
    "Interaction",
    "Effect",
    "Collectable",
    "InteractionSelector",
    "TriggerRelay",
    "NO_TAG",
    "PLAYER_TAG",
]
