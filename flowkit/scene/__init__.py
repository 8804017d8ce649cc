"""Scene data: initial counters and interactables loaded from JSON."""

from flowkit.scene.models import (
    SceneDef,
    InteractableDef,
    InteractionDef,
    EffectDef,
    AddStateEffect,
    StartDialogueEffect,
    ActivateEffect,
    ScriptEventEffect,
)
from flowkit.scene.schema import SCENE_SCHEMA
from flowkit.scene.loader import SceneLoader, build_interactables

__all__ = [
    "SceneDef",
    "InteractableDef",
    "InteractionDef",
    "EffectDef",
    "AddStateEffect",
    "StartDialogueEffect",
    "ActivateEffect",
    "ScriptEventEffect",
    "SCENE_SCHEMA",
    "SceneLoader",
    "build_interactables",
]
