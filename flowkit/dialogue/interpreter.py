"""
Collaborator contracts for the dialogue engine.

The narrative-script interpreter and the dialogue presentation are
supplied by the game. The engine only relies on the members below.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Callable, Collection, Optional, Protocol, Sequence

from flowkit.dialogue.models import DialogueLine


class ErrorSeverity(Enum):
    """Severity of an interpreter-reported error."""
    AUTHOR = auto()   # Informational, left by the script author
    WARNING = auto()
    ERROR = auto()


ErrorHandler = Callable[[str, ErrorSeverity], None]


class ScriptChoice(Protocol):
    """A choice as reported by the interpreter."""

    text: str


class ScriptInterpreter(Protocol):
    """Embedded branching-script runtime."""

    @property
    def can_continue(self) -> bool: ...

    @property
    def current_choices(self) -> Sequence[ScriptChoice]: ...

    @property
    def current_tags(self) -> Collection[str]: ...

    def load_script(self, source: bytes) -> None: ...

    def jump_to(self, path: str) -> None: ...

    def continue_line(self) -> str: ...

    def choose_choice(self, index: int) -> None: ...

    def set_error_handler(self, handler: Optional[ErrorHandler]) -> None: ...

    def bind_external_function(self, name: str, func: Callable[..., Any]) -> None: ...


class DialoguePresentation(Protocol):
    """
    Dialogue UI surface.

    Publishes FlowEvent.DIALOGUE_CONTINUE_PRESSED and
    FlowEvent.DIALOGUE_CHOICE_SELECTED(index=...) when the player acts.
    """

    def open(self) -> None: ...

    def close(self) -> None: ...

    def display_line(self, line: DialogueLine) -> None: ...
