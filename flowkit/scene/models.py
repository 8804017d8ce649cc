"""
Scene definitions loaded from JSON.

A scene declares its initial progress counters and its interactables,
each with an ordered chain of interactions and their effects.
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from flowkit.state.models import Counter


class AddStateEffect(BaseModel):
    """Add `amount` to the counter `id`."""

    model_config = ConfigDict(extra='forbid')

    type: Literal["add_state"]
    id: str
    amount: int = 1


class StartDialogueEffect(BaseModel):
    """Start the dialogue at `path`."""

    model_config = ConfigDict(extra='forbid')

    type: Literal["start_dialogue"]
    path: str


class ActivateEffect(BaseModel):
    """Make a sibling interaction the active one."""

    model_config = ConfigDict(extra='forbid')

    type: Literal["activate"]
    interaction: str


class ScriptEventEffect(BaseModel):
    """Publish a named script event."""

    model_config = ConfigDict(extra='forbid')

    type: Literal["event"]
    name: str


EffectDef = Annotated[
    Union[AddStateEffect, StartDialogueEffect, ActivateEffect, ScriptEventEffect],
    Field(discriminator="type"),
]


class InteractionDef(BaseModel):
    model_config = ConfigDict(extra='forbid')

    id: str
    next: Optional[str] = None
    effects: list[EffectDef] = Field(default_factory=list)


class InteractableDef(BaseModel):
    model_config = ConfigDict(extra='forbid')

    id: str
    interactions: list[InteractionDef] = Field(default_factory=list)


class SceneDef(BaseModel):
    """A whole scene: initial counters and interactables."""

    model_config = ConfigDict(extra='forbid')

    id: str = ""
    states: list[Counter] = Field(default_factory=list)
    interactables: list[InteractableDef] = Field(default_factory=list)
