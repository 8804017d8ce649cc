"""
Flow context and configuration.

The FlowContext is the one object every component receives at
construction. It owns the shared event bus, the simulation clock and the
tick scheduler, plus the configuration that tunes their policies.

Usage:
    config = FlowConfig(prevent_base_closing=True)
    context = FlowContext(config)

    # First thing every frame, before input and drawing
    dt = context.tick(real_dt)
"""

from __future__ import annotations

import logging

from flowengine.core.clock import GameClock
from flowengine.core.events import EventBus
from flowengine.core.scheduler import TickScheduler


class FlowConfig:
    """Configuration for the gameplay-flow core."""

    def __init__(
        self,
        prevent_base_closing: bool = False,
        hide_previous_menu: bool = False,
        notify_empty_batch: bool = True,
        speaker_separator: str = ":",
        escaped_separator: str = "::",
        thought_tag: str = "thought",
        thought_format: str = "<i>{text}</i>",
        log_level: int | str = logging.INFO,
    ):
        if not speaker_separator:
            raise ValueError("speaker_separator must not be empty")
        if speaker_separator not in escaped_separator:
            raise ValueError("escaped_separator must contain speaker_separator")

        # Menus
        self.prevent_base_closing = prevent_base_closing
        self.hide_previous_menu = hide_previous_menu

        # State store
        self.notify_empty_batch = notify_empty_batch

        # Dialogue line parsing
        self.speaker_separator = speaker_separator
        self.escaped_separator = escaped_separator
        self.thought_tag = thought_tag
        self.thought_format = thought_format

        # Logging
        self.log_level = log_level


class FlowContext:
    """
    Shared runtime services.

    Attributes:
        config: FlowConfig in effect
        event_bus: Bus for all flow broadcasts
        clock: Simulation clock (paused in Pause mode)
        scheduler: One-tick deferred continuations
    """

    def __init__(
        self,
        config: FlowConfig | None = None,
        event_bus: EventBus | None = None,
        clock: GameClock | None = None,
        scheduler: TickScheduler | None = None,
    ):
        self.config = config or FlowConfig()
        self.event_bus = event_bus or EventBus()
        self.clock = clock or GameClock()
        self.scheduler = scheduler or TickScheduler()

    def tick(self, real_dt: float) -> float:
        """
        Advance one frame.

        The scheduler runs on real frames so deferred UI work still happens
        while the clock is paused. Call this at the start of the frame,
        before input handling and drawing: work deferred during frame N
        then runs at the top of frame N+1, after frame N was drawn.

        Returns:
            Scaled delta time for simulation systems
        """
        dt = self.clock.advance(real_dt)
        self.scheduler.tick()
        return dt


def configure_logging(config: FlowConfig | None = None) -> None:
    """Apply basic logging configuration for demos and tools."""
    level = (config or FlowConfig()).log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
