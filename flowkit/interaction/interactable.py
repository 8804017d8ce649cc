"""
Interactables and their chained interactions.

An Interactable owns an ordered list of Interactions and a single active
reference. Interacting executes the active node, which first arms its
`next` node and then runs its effects. Effects run after arming so an
effect can override which node is active, e.g. a quest hand-in node that
must replace the regular follow-up.

Usage:
    greet = Interaction("greet", effects=[lambda: modes.start_dialogue("npc.greet")])
    idle = Interaction("idle", effects=[lambda: modes.start_dialogue("npc.idle")])
    greet.next = idle

    npc = Interactable("npc", [greet, idle])
    npc.interact()  # greet runs, idle is armed
    npc.interact()  # idle runs
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

logger = logging.getLogger(__name__)

Effect = Callable[[], None]


class Interaction:
    """
    One step in an Interactable's chain.

    Attributes:
        id: Name of the step
        effects: Callables run in order when the step executes
        next: Step armed for the following interact, if any
        owner: Interactable this step belongs to
        on_executed: Callbacks fired after the effects have run
    """

    def __init__(
        self,
        id: str,
        effects: Optional[Iterable[Effect]] = None,
        next: Optional[Interaction] = None,
    ):
        self.id = id
        self.effects: list[Effect] = list(effects or [])
        self.next = next
        self.owner: Optional[Interactable] = None
        self.on_executed: list[Callable[[], None]] = []

    def __repr__(self) -> str:
        return f"Interaction({self.id!r})"

    @property
    def is_active(self) -> bool:
        """True if this is the owner's active step."""
        return self.owner is not None and self.owner.active is self

    def activate(self) -> None:
        """Make this step the owner's active step."""
        if self.owner is None:
            logger.warning(f"{self!r} has no Interactable and cannot be activated.")
            return
        self.owner.activate(self)

    def execute(self) -> None:
        """Arm the next step, run this step's effects, then notify listeners."""
        if self.next is not None:
            self.next.activate()

        for effect in list(self.effects):
            effect()

        for callback in list(self.on_executed):
            callback()


class Interactable:
    """
    A world object the player can interact with.

    Observers register zero-argument callbacks in `on_interacted`,
    `on_selected` and `on_deselected`.
    """

    def __init__(self, id: str, interactions: Optional[Iterable[Interaction]] = None):
        self.id = id
        self.interactions: list[Interaction] = []
        self._active: Optional[Interaction] = None

        self.on_interacted: list[Callable[[], None]] = []
        self.on_selected: list[Callable[[], None]] = []
        self.on_deselected: list[Callable[[], None]] = []

        for interaction in interactions or []:
            self.add_interaction(interaction)

    def __repr__(self) -> str:
        return f"Interactable({self.id!r})"

    @property
    def active(self) -> Optional[Interaction]:
        """The step that the next interact will execute."""
        return self._active

    def add_interaction(self, interaction: Interaction) -> None:
        """Take ownership of an interaction; the first one starts active."""
        if interaction.owner is not None and interaction.owner is not self:
            raise ValueError(f"{interaction!r} already belongs to {interaction.owner!r}")
        interaction.owner = self
        self.interactions.append(interaction)

        if len(self.interactions) == 1:
            self._active = interaction

    def get_interaction(self, interaction_id: str) -> Optional[Interaction]:
        """Find an owned interaction by id."""
        for interaction in self.interactions:
            if interaction.id == interaction_id:
                return interaction
        return None

    def activate(self, interaction: Optional[Interaction]) -> None:
        """
        Make a step the single active one.

        Args:
            interaction: An owned step, or None to leave nothing active
        """
        if interaction is not None and interaction.owner is not self:
            raise ValueError(f"{interaction!r} does not belong to {self!r}")
        self._active = interaction

    def reset(self) -> None:
        """Re-arm the first declared step."""
        self._active = self.interactions[0] if self.interactions else None

    def interact(self) -> None:
        """
        Execute the active step, if any, then notify interacted listeners.

        The executed step stops being active unless its own `next` or one of
        its effects activates it again.
        """
        interaction = self._active
        if interaction is not None:
            self._active = None
            interaction.execute()

        self._fire(self.on_interacted)

    def select(self) -> None:
        """Notify that the player can interact with this object."""
        self._fire(self.on_selected)

    def deselect(self) -> None:
        """Notify that the player can no longer interact with this object."""
        self._fire(self.on_deselected)

    def _fire(self, listeners: list[Callable[[], None]]) -> None:
        for listener in list(listeners):
            listener()
