"""Dialogue flow: script-driven lines, choices and their presentation."""

from flowkit.dialogue.models import DialogueState, DialogueLine, Choice
from flowkit.dialogue.parser import parse_line
from flowkit.dialogue.interpreter import (
    ErrorSeverity,
    ErrorHandler,
    ScriptChoice,
    ScriptInterpreter,
    DialoguePresentation,
)
from flowkit.dialogue.engine import DialogueEngine
from flowkit.dialogue.box import DialogueBox, DialogueControl
from flowkit.dialogue.trigger import DialogueTrigger

__all__ = [
    "DialogueState",
    "DialogueLine",
    "Choice",
    "parse_line",
    "ErrorSeverity",
    "ErrorHandler",
    "ScriptChoice",
    "ScriptInterpreter",
    "DialoguePresentation",
    "DialogueEngine",
    "DialogueBox",
    "DialogueControl",
    "DialogueTrigger",
]
