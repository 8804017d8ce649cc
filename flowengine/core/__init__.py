"""
Core runtime module.

Exports:
- FlowContext, FlowConfig: Shared services and configuration
- EventBus, Event, FlowEvent: Event system
- GameClock: Scaled simulation clock
- TickScheduler, ScheduledCall: One-tick deferred continuations
- FlowError, MissingCollaboratorError, SceneDataError: Wiring errors
- Action: Input actions
"""

from flowengine.core.events import EventBus, Event, FlowEvent
from flowengine.core.clock import GameClock
from flowengine.core.scheduler import TickScheduler, ScheduledCall
from flowengine.core.context import FlowContext, FlowConfig, configure_logging
from flowengine.core.errors import (
    FlowError,
    MissingCollaboratorError,
    SceneDataError,
    require,
)
from flowengine.core.actions import Action

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
    "require",
    # Input
    "Action",
]
