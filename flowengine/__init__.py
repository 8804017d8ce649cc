"""
Flow Engine

Runtime plumbing for gameplay-flow orchestration: a typed event bus, a
scaled simulation clock, a one-tick scheduler, input actions and UI focus.

Quick Start:
    from flowengine import FlowContext, FlowConfig, FlowEvent

    context = FlowContext(FlowConfig(prevent_base_closing=True))
    context.event_bus.subscribe(FlowEvent.STATE_CHANGED, on_state_changed)

    while running:
        dt = context.tick(real_dt)
"""

__version__ = "0.1.0"

from flowengine.core import (
    FlowContext,
    FlowConfig,
    configure_logging,
    EventBus,
    Event,
    FlowEvent,
    GameClock,
    TickScheduler,
    ScheduledCall,
    FlowError,
    MissingCollaboratorError,
    SceneDataError,
    Action,
)

from flowengine.input import InputHandler, PointerCapture
from flowengine.ui import FocusManager, Focusable

__all__ = [
    # Context
    "FlowContext",
    "FlowConfig",
    "configure_logging",
    # Events
    "EventBus",
    "Event",
    "FlowEvent",
    # Time
    "GameClock",
    "TickScheduler",
    "ScheduledCall",
    # Errors
    "FlowError",
    "MissingCollaboratorError",
    "SceneDataError",
    # Input
    "InputHandler",
    "PointerCapture",
    "Action",
    # UI
    "FocusManager",
    "Focusable",
]
