"""
Dialogue engine - drives a branching script through the dialogue UI.

Handles:
- Opening/closing the presentation around a script path
- Pulling lines from the interpreter, skipping empty ones
- Parsing speaker/text and attaching the current choices
- Continue / choice protocol with the presentation
- Script-callable functions bound to the game state
- Interpreter error reporting (never ends the dialogue)
"""

from __future__ import annotations

import logging
from typing import Optional

from flowengine.core.context import FlowContext
from flowengine.core.errors import require
from flowengine.core.events import Event, FlowEvent
from flowkit.dialogue.interpreter import (
    DialoguePresentation,
    ErrorSeverity,
    ScriptInterpreter,
)
from flowkit.dialogue.models import Choice, DialogueLine, DialogueState
from flowkit.dialogue.parser import parse_line
from flowkit.state.game_state import GameState

logger = logging.getLogger(__name__)

# Names of the functions scripts can call
EVENT_FUNCTION = "Event"
GET_STATE_FUNCTION = "Get_State"
ADD_STATE_FUNCTION = "Add_State"


class DialogueEngine:
    """
    Runs dialogues from a script interpreter.

    Usage:
        engine = DialogueEngine(context, game_state, interpreter, dialogue_box,
                                script=Path("story.json").read_bytes())
        engine.start_dialogue("village.elder")
    """

    def __init__(
        self,
        context: FlowContext,
        game_state: GameState,
        interpreter: ScriptInterpreter,
        presentation: DialoguePresentation,
        script: Optional[bytes] = None,
    ):
        require(
            "DialogueEngine",
            context=context,
            game_state=game_state,
            interpreter=interpreter,
            presentation=presentation,
        )
        self.context = context
        self.config = context.config
        self.events = context.event_bus
        self.game_state = game_state
        self.interpreter = interpreter
        self.presentation = presentation

        self._state = DialogueState.IDLE
        self._presented: Optional[DialogueLine] = None

        interpreter.set_error_handler(self._on_script_error)
        interpreter.bind_external_function(EVENT_FUNCTION, self._script_event)
        interpreter.bind_external_function(GET_STATE_FUNCTION, self._get_state)
        interpreter.bind_external_function(ADD_STATE_FUNCTION, self._add_state)

        if script is not None:
            self.load_script(script)

        self.events.subscribe(FlowEvent.DIALOGUE_CONTINUE_PRESSED, self._on_continue_event)
        self.events.subscribe(FlowEvent.DIALOGUE_CHOICE_SELECTED, self._on_choice_event)

    @property
    def state(self) -> DialogueState:
        return self._state

    @property
    def is_active(self) -> bool:
        """Check if a dialogue is currently running."""
        return self._state not in (DialogueState.IDLE, DialogueState.CLOSING)

    @property
    def presented_line(self) -> Optional[DialogueLine]:
        """Line currently shown by the presentation."""
        return self._presented

    def load_script(self, source: bytes) -> None:
        """Load compiled script data into the interpreter."""
        self.interpreter.load_script(source)

    def shutdown(self) -> None:
        """Detach from the bus and the interpreter."""
        self.events.unsubscribe(FlowEvent.DIALOGUE_CONTINUE_PRESSED, self._on_continue_event)
        self.events.unsubscribe(FlowEvent.DIALOGUE_CHOICE_SELECTED, self._on_choice_event)
        self.interpreter.set_error_handler(None)

    # Dialogue lifecycle

    def start_dialogue(self, path: str) -> None:
        """
        Start a dialogue at a script path (knot.stitch).

        Args:
            path: Script location to jump to
        """
        if not path or not path.strip():
            logger.warning("No dialogue path defined.")
            return

        if self.is_active:
            logger.warning(f"Dialogue already running, jumping to '{path}'.")
        else:
            self._open()

        self.interpreter.jump_to(path)
        self.advance()

    def advance(self) -> None:
        """
        Show the next line, or close the dialogue at the end of the script.
        """
        if self._state in (DialogueState.IDLE, DialogueState.CLOSING):
            logger.warning("Cannot advance: no dialogue is running.")
            return

        while True:
            if self._is_at_end():
                self._close()
                return

            if self.interpreter.can_continue:
                raw = self.interpreter.continue_line()
                # Empty lines are never shown
                if not raw or not raw.strip():
                    continue
                line = parse_line(raw, self.interpreter.current_tags, self.config)
            else:
                line = DialogueLine()
            break

        line.choices = [
            Choice(text=choice.text, index=i)
            for i, choice in enumerate(self.interpreter.current_choices)
        ]

        self._presented = line
        self._state = (
            DialogueState.AWAITING_CHOICE if line.has_choices else DialogueState.PRESENTING
        )
        self.presentation.display_line(line)

    def on_continue_pressed(self) -> None:
        """The player wants the next line."""
        if self._state != DialogueState.PRESENTING:
            logger.warning(f"Continue ignored in dialogue state {self._state.name}.")
            return
        self.advance()

    def on_choice_selected(self, index: int) -> None:
        """The player picked a choice of the presented line."""
        if self._state != DialogueState.AWAITING_CHOICE or self._presented is None:
            logger.warning(f"Choice ignored in dialogue state {self._state.name}.")
            return

        if not 0 <= index < len(self._presented.choices):
            logger.warning(
                f"Choice index {index} out of range ({len(self._presented.choices)} choices)."
            )
            return

        self.interpreter.choose_choice(index)
        self.advance()

    def _open(self) -> None:
        self._state = DialogueState.OPEN
        self.presentation.open()
        self.events.publish(FlowEvent.DIALOGUE_OPENED)

    def _close(self) -> None:
        self._state = DialogueState.CLOSING
        self._presented = None
        self.presentation.close()
        self._state = DialogueState.IDLE
        self.events.publish(FlowEvent.DIALOGUE_CLOSED)

    def _is_at_end(self) -> bool:
        return not self.interpreter.can_continue and len(self.interpreter.current_choices) == 0

    # Presentation events

    def _on_continue_event(self, event: Event) -> None:
        self.on_continue_pressed()

    def _on_choice_event(self, event: Event) -> None:
        self.on_choice_selected(event.get("index", -1))

    # Script bindings

    def _script_event(self, name: str) -> None:
        self.events.publish(FlowEvent.SCRIPT_EVENT, name=name)

    def _get_state(self, state_id: str) -> int:
        return self.game_state.amount_of(state_id)

    def _add_state(self, state_id: str, amount: int) -> None:
        self.game_state.add(state_id, int(amount))

    def _on_script_error(self, message: str, severity: ErrorSeverity) -> None:
        if severity == ErrorSeverity.WARNING:
            logger.warning(message)
        elif severity == ErrorSeverity.ERROR:
            logger.error(message)
