"""
Trigger relay - enter/exit notifications for trigger volumes.

Physics reports overlaps per collider. The relay filters them by tag and,
when several volumes overlap, can collapse them into a single enter on the
first overlap and a single exit on the last.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

NO_TAG = "untagged"
PLAYER_TAG = "player"


class TriggerRelay:
    """
    Relays trigger overlaps to enter/exit callbacks.

    Attributes:
        filter_on_tag: Only react to colliders tagged `react_on`
        react_on: Tag to react on (an empty tag means untagged)
        combine_triggers: Treat overlapping volumes as one
        on_enter: Callbacks receiving the entering collider
        on_exit: Callbacks receiving the exiting collider
    """

    def __init__(
        self,
        react_on: str = PLAYER_TAG,
        filter_on_tag: bool = True,
        combine_triggers: bool = True,
    ):
        self.filter_on_tag = filter_on_tag
        self.react_on = react_on if react_on and react_on.strip() else NO_TAG
        self.combine_triggers = combine_triggers

        self.on_enter: list[Callable[[Any], None]] = []
        self.on_exit: list[Callable[[Any], None]] = []

        self._count = 0

    @property
    def overlap_count(self) -> int:
        """Number of overlapping volumes currently counted."""
        return self._count

    def trigger_enter(self, other: Any, tag: Optional[str] = None) -> bool:
        """
        Report a collider entering a volume.

        Returns:
            True if the enter callbacks fired
        """
        if not self._matches(tag):
            return False

        # Self-heal if enters and exits got out of sync
        self._count = max(self._count + 1, 1)

        if self.combine_triggers and self._count != 1:
            return False

        for listener in list(self.on_enter):
            listener(other)
        return True

    def trigger_exit(self, other: Any, tag: Optional[str] = None) -> bool:
        """
        Report a collider leaving a volume.

        Returns:
            True if the exit callbacks fired
        """
        if not self._matches(tag):
            return False

        self._count = max(self._count - 1, 0)

        if self.combine_triggers and self._count != 0:
            return False

        for listener in list(self.on_exit):
            listener(other)
        return True

    def _matches(self, tag: Optional[str]) -> bool:
        if not self.filter_on_tag:
            return True
        return (tag or NO_TAG) == self.react_on
