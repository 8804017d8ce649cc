"""
Game state - the store of named progress counters.

Every observable mutation publishes one FlowEvent.STATE_CHANGED with no
payload; listeners re-read whatever they need.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Union

from flowengine.core.context import FlowContext
from flowengine.core.errors import require
from flowengine.core.events import FlowEvent
from flowkit.state.models import Condition, Counter

logger = logging.getLogger(__name__)

BatchItem = Union[Counter, tuple[str, int]]


class GameState:
    """
    Ordered collection of Counters, at most one per id.

    Usage:
        state = GameState(context, states=[Counter(id="coins", amount=0)])
        state.add("coins", 3)
        state.check_conditions([Condition(id="coins", amount=2)])  # True
    """

    def __init__(
        self,
        context: FlowContext,
        states: Optional[Iterable[Counter]] = None,
    ):
        require("GameState", context=context)
        self.context = context
        self.events = context.event_bus
        self._states: list[Counter] = []

        for counter in states or []:
            if self.get(counter.id) is not None:
                logger.warning(f"Duplicate initial state '{counter.id}' ignored.")
                continue
            self._states.append(counter.model_copy())

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[Counter]:
        return iter(list(self._states))

    def __contains__(self, state_id: object) -> bool:
        return isinstance(state_id, str) and self.get(state_id) is not None

    def get(self, state_id: str) -> Optional[Counter]:
        """Get the counter with the given id, or None."""
        for state in self._states:
            if state.id == state_id:
                return state
        return None

    def amount_of(self, state_id: str) -> int:
        """Get the amount of a counter, 0 if it does not exist."""
        state = self.get(state_id)
        return state.amount if state is not None else 0

    def add(self, state_id: str, amount: int, notify: bool = True) -> None:
        """
        Create a counter or add to an existing one.

        Args:
            state_id: Id of the counter to create or modify
            amount: Amount to add (may be negative)
            notify: Publish STATE_CHANGED after the change
        """
        if not state_id or not state_id.strip():
            logger.error("Id of state is empty. Make sure to give each state an id.")
            return

        if amount == 0:
            logger.warning(
                f"Trying to add 0 to id '{state_id}'. This will result in no change to the state."
            )
            return

        state = self.get(state_id)
        if state is None:
            self._states.append(Counter(id=state_id, amount=amount))
        else:
            state.amount += amount

        if notify:
            self._notify()

    def add_counter(self, counter: Counter, notify: bool = True) -> None:
        """Add a Counter's amount under its id."""
        self.add(counter.id, counter.amount, notify)

    def add_batch(self, items: Iterable[BatchItem]) -> None:
        """
        Add several counters, publishing a single STATE_CHANGED at the end.

        Items are Counters or (id, amount) tuples. Whether an empty batch
        still notifies is controlled by FlowConfig.notify_empty_batch.
        """
        count = 0
        for item in items:
            if isinstance(item, Counter):
                self.add_counter(item, notify=False)
            else:
                state_id, amount = item
                self.add(state_id, amount, notify=False)
            count += 1

        if count == 0 and not self.context.config.notify_empty_batch:
            return

        self._notify()

    def check_conditions(self, conditions: Iterable[Condition]) -> bool:
        """
        Check conditions against the stored counters.

        All conditions are AND-combined; a condition passes when the stored
        amount (0 if missing) is at least the condition's amount.
        """
        for condition in conditions:
            if self.amount_of(condition.id) < condition.amount:
                return False
        return True

    def _notify(self) -> None:
        self.events.publish(FlowEvent.STATE_CHANGED)
