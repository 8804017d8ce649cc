"""
One-tick deferred continuations.

Some UI actions must wait until the next frame, e.g. focusing a control
that was only enabled this frame. The scheduler queues such callbacks and
hands back a cancellation token so a re-entrant close can drop them.

Usage:
    call = scheduler.call_next_tick(button.focus)
    ...
    call.cancel()  # e.g. the menu closed again before the next frame
"""

from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


class ScheduledCall:
    """Cancellation token for a deferred callback."""

    def __init__(self, callback: Callable[..., Any], args: tuple[Any, ...]):
        self._callback = callback
        self._args = args
        self.cancelled = False
        self.done = False

    @property
    def pending(self) -> bool:
        """True until the call runs or is cancelled."""
        return not (self.cancelled or self.done)

    def cancel(self) -> None:
        """Drop the call if it has not run yet."""
        if not self.done:
            self.cancelled = True

    def run(self) -> None:
        """Run the callback unless cancelled."""
        if not self.pending:
            return
        self.done = True
        self._callback(*self._args)


class TickScheduler:
    """
    Queue of callbacks to run on the next tick.

    Calls scheduled while a tick is running are deferred to the following
    tick, so a continuation always waits for at least one fresh frame.
    """

    def __init__(self):
        self._queue: list[ScheduledCall] = []
        self.ticks = 0

    @property
    def pending(self) -> int:
        """Number of calls still waiting to run."""
        return sum(1 for call in self._queue if call.pending)

    def call_next_tick(self, callback: Callable[..., Any], *args: Any) -> ScheduledCall:
        """
        Schedule a callback for the next tick.

        Args:
            callback: Function to run
            *args: Positional arguments for the callback

        Returns:
            Token that can cancel the call
        """
        call = ScheduledCall(callback, args)
        self._queue.append(call)
        return call

    def tick(self) -> None:
        """Run every call that was queued before this tick started."""
        self.ticks += 1
        due, self._queue = self._queue, []

        for call in due:
            try:
                call.run()
            except Exception:
                logger.exception(f"Error in scheduled call {call._callback!r}")

    def clear(self) -> None:
        """Cancel everything that is still pending."""
        for call in self._queue:
            call.cancel()
        self._queue.clear()
