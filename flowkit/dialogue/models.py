"""
Dialogue data - one presented line and its choices.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional


class DialogueState(Enum):
    """State of the dialogue flow."""
    IDLE = auto()
    OPEN = auto()
    PRESENTING = auto()
    AWAITING_CHOICE = auto()
    CLOSING = auto()


@dataclass
class Choice:
    """A choice offered by the script; `index` is passed back when chosen."""
    text: str
    index: int


@dataclass
class DialogueLine:
    """
    A single line handed to the presentation.

    Attributes:
        speaker: None keeps the previous speaker, "" clears it
        text: Line text (may carry presentation markup)
        choices: Choices offered after this line
    """
    speaker: Optional[str] = None
    text: str = ""
    choices: list[Choice] = field(default_factory=list)

    @property
    def has_choices(self) -> bool:
        return len(self.choices) > 0
