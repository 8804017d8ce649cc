"""
Interaction selector - tracks the Interactable the player can act on.
"""

from __future__ import annotations

from typing import Optional

from flowkit.interaction.interactable import Interactable


class InteractionSelector:
    """
    Player-side selection of the nearest Interactable.

    The proximity collaborator (trigger volumes, raycasts) reports objects
    coming into and going out of reach; the selector keeps at most one of
    them selected.
    """

    def __init__(self):
        self._selected: Optional[Interactable] = None

    @property
    def selected(self) -> Optional[Interactable]:
        """Currently selected Interactable."""
        return self._selected

    def enter(self, interactable: Optional[Interactable]) -> None:
        """An Interactable came into reach; it replaces any previous one."""
        if interactable is None:
            return

        if self._selected is not None:
            self._selected.deselect()

        self._selected = interactable
        interactable.select()

    def exit(self, interactable: Optional[Interactable]) -> None:
        """An Interactable went out of reach."""
        if interactable is None or interactable is not self._selected:
            return

        self._selected.deselect()
        self._selected = None

    def interact(self) -> bool:
        """
        Interact with the selected Interactable.

        Returns:
            True if something was selected
        """
        if self._selected is None:
            return False
        self._selected.interact()
        return True
