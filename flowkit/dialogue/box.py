"""
Dialogue box - headless presentation model for dialogue lines.

Holds what a renderer needs to draw the box (speaker, text, choices and
the continue prompt) and turns player actions into bus events for the
dialogue engine.
"""

from __future__ import annotations

import logging
from typing import Optional

from flowengine.core.context import FlowContext
from flowengine.core.errors import require
from flowengine.core.events import FlowEvent
from flowengine.core.scheduler import ScheduledCall
from flowengine.ui.focus import FocusManager
from flowkit.dialogue.models import Choice, DialogueLine

logger = logging.getLogger(__name__)


class DialogueControl:
    """A focusable control of the dialogue box (continue prompt or choice)."""

    def __init__(self, label: str, choice: Optional[Choice] = None):
        self.label = label
        self.choice = choice
        self.focused = False

    def __repr__(self) -> str:
        return f"DialogueControl({self.label!r})"

    def focus(self) -> bool:
        self.focused = True
        return True

    def unfocus(self) -> None:
        self.focused = False


class DialogueBox:
    """
    Presentation side of a dialogue.

    Attributes:
        visible: Whether the box is shown
        speaker: Name shown in the speaker plate ("" hides it)
        text: Text of the current line
        choices: One control per offered choice
        show_continue: Whether the continue prompt is shown
        continue_control: Control focused for lines without choices
    """

    def __init__(self, context: FlowContext, focus: FocusManager):
        require("DialogueBox", context=context, focus=focus)
        self.context = context
        self.events = context.event_bus
        self.scheduler = context.scheduler
        self.focus = focus

        self.visible = False
        self.speaker = ""
        self.text = ""
        self.choices: list[DialogueControl] = []
        self.show_continue = False
        self.continue_control = DialogueControl("continue")

        self._pending_focus: Optional[ScheduledCall] = None

    # Presentation

    def open(self) -> None:
        """Show an empty box."""
        self._clear()
        self.visible = True

    def close(self) -> None:
        """Hide the box and drop focus."""
        self._cancel_pending_focus()
        self.visible = False
        self.focus.clear_focus()

    def display_line(self, line: DialogueLine) -> None:
        """Show a line and its choices."""
        if line.speaker is not None:
            self.speaker = line.speaker
        self.text = line.text

        self.choices = [DialogueControl(choice.text, choice) for choice in line.choices]
        self.show_continue = not line.has_choices

        # Controls created this frame can only take focus on the next one
        target = self.choices[0] if self.choices else self.continue_control
        self._cancel_pending_focus()
        self._pending_focus = self.scheduler.call_next_tick(self._focus_deferred, target)

    # Player actions

    def press_continue(self) -> None:
        """The continue prompt was activated."""
        if not self.show_continue:
            logger.debug("Continue pressed while choices are shown.")
            return
        self.events.publish(FlowEvent.DIALOGUE_CONTINUE_PRESSED)

    def select_choice(self, index: int) -> None:
        """A choice control was activated."""
        if not 0 <= index < len(self.choices):
            logger.warning(f"No choice at index {index}.")
            return
        self.events.publish(
            FlowEvent.DIALOGUE_CHOICE_SELECTED, index=self.choices[index].choice.index
        )

    def _clear(self) -> None:
        self._cancel_pending_focus()
        self.speaker = ""
        self.text = ""
        self.choices = []
        self.show_continue = False

    def _cancel_pending_focus(self) -> None:
        if self._pending_focus is not None:
            self._pending_focus.cancel()
            self._pending_focus = None

    def _focus_deferred(self, target: DialogueControl) -> None:
        self._pending_focus = None
        if self.visible:
            self.focus.set_focus(target)
