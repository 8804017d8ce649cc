"""
Mode controller - the global gameplay mode.

Each mode is a fixed combination of four effects:

| Mode     | Clock   | Pointer  | Player input | Menu input |
|----------|---------|----------|--------------|------------|
| Play     | running | captured | enabled      | enabled    |
| Dialogue | running | captured | disabled     | disabled   |
| Cutscene | running | captured | disabled     | disabled   |
| Pause    | frozen  | released | disabled     | enabled    |

Entering a mode always applies all four effects, whatever the current
mode is.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Optional, Protocol

from flowengine.core.context import FlowContext
from flowengine.core.errors import require
from flowengine.core.events import Event, FlowEvent
from flowengine.input.pointer import PointerCapture
from flowkit.menus.controller import MenuController

if TYPE_CHECKING:
    from flowkit.dialogue.engine import DialogueEngine

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Global gameplay mode."""
    PLAY = "play"
    DIALOGUE = "dialogue"
    CUTSCENE = "cutscene"
    PAUSE = "pause"


class PlayerAgent(Protocol):
    """Player capability the mode controller switches on and off."""

    def enable_input(self) -> None: ...

    def disable_input(self) -> None: ...


class ModeController:
    """
    Applies gameplay modes and reacts to menu and dialogue events.

    Usage:
        modes = ModeController(context, player, menus, dialogue, pointer)
        modes.start()  # enters Play
    """

    def __init__(
        self,
        context: FlowContext,
        player: PlayerAgent,
        menus: MenuController,
        dialogue: DialogueEngine,
        pointer: PointerCapture,
    ):
        require(
            "ModeController",
            context=context,
            player=player,
            menus=menus,
            dialogue=dialogue,
            pointer=pointer,
        )
        self.context = context
        self.events = context.event_bus
        self.clock = context.clock
        self.player = player
        self.menus = menus
        self.dialogue = dialogue
        self.pointer = pointer

        self._mode: Optional[Mode] = None
        self._started = False

    @property
    def mode(self) -> Optional[Mode]:
        """Last applied mode (None before start)."""
        return self._mode

    def start(self) -> None:
        """Hook up to menu and dialogue events and enter Play."""
        if not self._started:
            self.events.subscribe(FlowEvent.BASE_MENU_OPENING, self._on_base_menu_opening)
            self.events.subscribe(FlowEvent.BASE_MENU_CLOSED, self._on_base_menu_closed)
            self.events.subscribe(FlowEvent.DIALOGUE_CLOSED, self._on_dialogue_closed)
            self._started = True
        self.enter_play_mode()

    def shutdown(self) -> None:
        """Unhook from events."""
        if not self._started:
            return
        self.events.unsubscribe(FlowEvent.BASE_MENU_OPENING, self._on_base_menu_opening)
        self.events.unsubscribe(FlowEvent.BASE_MENU_CLOSED, self._on_base_menu_closed)
        self.events.unsubscribe(FlowEvent.DIALOGUE_CLOSED, self._on_dialogue_closed)
        self._started = False

    # Modes

    def enter_play_mode(self) -> None:
        self._apply(Mode.PLAY, clock_running=True, capture_pointer=True,
                    player_input=True, menu_input=True)

    def enter_dialogue_mode(self) -> None:
        self._apply(Mode.DIALOGUE, clock_running=True, capture_pointer=True,
                    player_input=False, menu_input=False)

    def enter_cutscene_mode(self) -> None:
        self._apply(Mode.CUTSCENE, clock_running=True, capture_pointer=True,
                    player_input=False, menu_input=False)

    def enter_pause_mode(self) -> None:
        self._apply(Mode.PAUSE, clock_running=False, capture_pointer=False,
                    player_input=False, menu_input=True)

    def start_dialogue(self, path: str) -> None:
        """Enter Dialogue mode and start the dialogue at `path`."""
        if not path or not path.strip():
            logger.warning("No dialogue path defined.")
            return
        self.enter_dialogue_mode()
        self.dialogue.start_dialogue(path)

    def _apply(
        self,
        mode: Mode,
        clock_running: bool,
        capture_pointer: bool,
        player_input: bool,
        menu_input: bool,
    ) -> None:
        if clock_running:
            self.clock.time_scale = 1.0
        else:
            self.clock.pause()

        if capture_pointer:
            self.pointer.capture()
        else:
            self.pointer.release()

        if player_input:
            self.player.enable_input()
        else:
            self.player.disable_input()

        self.menus.enabled = menu_input

        previous, self._mode = self._mode, mode
        if previous != mode:
            logger.info(f"Mode changed: {previous.value if previous else None} -> {mode.value}")
        self.events.publish(FlowEvent.MODE_CHANGED, mode=mode)

    # Event handlers

    def _on_base_menu_opening(self, event: Event) -> None:
        self.enter_pause_mode()

    def _on_base_menu_closed(self, event: Event) -> None:
        self.enter_play_mode()

    def _on_dialogue_closed(self, event: Event) -> None:
        self.enter_play_mode()
