"""
Scene loader.

Loads scene JSON, validates it against SCENE_SCHEMA and builds the
runtime Interactables with their effects bound to the game's services.

Usage:
    scene = SceneLoader().load_file("data/scenes/village.json")
    game_state = GameState(context, scene.states)
    interactables = build_interactables(scene, game_state, modes, context.event_bus)
"""

from __future__ import annotations

import json
import logging
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

import jsonschema
import pydantic

from flowengine.core.errors import MissingCollaboratorError, SceneDataError
from flowengine.core.events import EventBus, FlowEvent
from flowkit.dialogue.trigger import DialogueTrigger
from flowkit.interaction.interactable import Effect, Interactable, Interaction
from flowkit.scene.models import (
    ActivateEffect,
    AddStateEffect,
    InteractableDef,
    SceneDef,
    ScriptEventEffect,
    StartDialogueEffect,
)
from flowkit.scene.schema import SCENE_SCHEMA
from flowkit.state.game_state import GameState

if TYPE_CHECKING:
    from flowkit.modes.controller import ModeController

logger = logging.getLogger(__name__)


class SceneLoader:
    """Loads and validates scene definitions."""

    def __init__(self, schema: Optional[dict[str, Any]] = None):
        self.schema = schema or SCENE_SCHEMA

    def load_file(self, path: Path | str) -> SceneDef:
        """
        Load a scene from a JSON file.

        Raises:
            SceneDataError: If the file is not valid scene JSON
        """
        path = Path(path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise SceneDataError(f"Invalid JSON in {path}: {e}") from e

        scene = self.load_dict(data, source=str(path))
        logger.info(
            f"Loaded scene '{scene.id}' from {path}: "
            f"{len(scene.states)} states, {len(scene.interactables)} interactables."
        )
        return scene

    def load_dict(self, data: Any, source: str = "<dict>") -> SceneDef:
        """
        Validate already-parsed scene data.

        Raises:
            SceneDataError: On schema violations, unknown `next` or
                `activate` references, or duplicate ids
        """
        try:
            jsonschema.validate(instance=data, schema=self.schema)
        except jsonschema.ValidationError as e:
            raise SceneDataError(f"Validation error in {source}: {e.message}") from e

        try:
            scene = SceneDef.model_validate(data)
        except pydantic.ValidationError as e:
            raise SceneDataError(f"Invalid scene data in {source}: {e}") from e

        self._check_references(scene, source)
        return scene

    def _check_references(self, scene: SceneDef, source: str) -> None:
        seen_interactables: set[str] = set()
        for interactable in scene.interactables:
            if interactable.id in seen_interactables:
                raise SceneDataError(f"Duplicate interactable '{interactable.id}' in {source}")
            seen_interactables.add(interactable.id)

            ids = [interaction.id for interaction in interactable.interactions]
            duplicates = {i for i in ids if ids.count(i) > 1}
            if duplicates:
                raise SceneDataError(
                    f"Duplicate interaction ids {sorted(duplicates)} "
                    f"in '{interactable.id}' ({source})"
                )

            for interaction in interactable.interactions:
                if interaction.next is not None and interaction.next not in ids:
                    raise SceneDataError(
                        f"Interaction '{interactable.id}.{interaction.id}' has unknown "
                        f"next '{interaction.next}' ({source})"
                    )
                for effect in interaction.effects:
                    if isinstance(effect, ActivateEffect) and effect.interaction not in ids:
                        raise SceneDataError(
                            f"Interaction '{interactable.id}.{interaction.id}' activates "
                            f"unknown interaction '{effect.interaction}' ({source})"
                        )


def build_interactables(
    scene: SceneDef,
    game_state: GameState,
    modes: Optional[ModeController],
    event_bus: EventBus,
) -> dict[str, Interactable]:
    """
    Create the runtime Interactables of a scene.

    Args:
        scene: Validated scene definition
        game_state: Store targeted by add_state effects
        modes: Mode controller used by start_dialogue effects
        event_bus: Bus for script events

    Returns:
        Interactables by id
    """
    return {
        definition.id: _build_interactable(definition, game_state, modes, event_bus)
        for definition in scene.interactables
    }


def _build_interactable(
    definition: InteractableDef,
    game_state: GameState,
    modes: Optional[ModeController],
    event_bus: EventBus,
) -> Interactable:
    interactable = Interactable(
        definition.id,
        [Interaction(interaction.id) for interaction in definition.interactions],
    )

    for interaction_def in definition.interactions:
        interaction = interactable.get_interaction(interaction_def.id)
        if interaction_def.next is not None:
            interaction.next = interactable.get_interaction(interaction_def.next)

        for effect in interaction_def.effects:
            interaction.effects.append(
                _bind_effect(effect, interactable, game_state, modes, event_bus)
            )

    return interactable


def _bind_effect(
    effect: Any,
    interactable: Interactable,
    game_state: GameState,
    modes: Optional[ModeController],
    event_bus: EventBus,
) -> Effect:
    if isinstance(effect, AddStateEffect):
        return partial(game_state.add, effect.id, effect.amount)

    if isinstance(effect, StartDialogueEffect):
        if modes is None:
            raise MissingCollaboratorError(f"Interactable '{interactable.id}'", "modes")
        return DialogueTrigger(effect.path, modes).start

    if isinstance(effect, ActivateEffect):
        return partial(interactable.activate, interactable.get_interaction(effect.interaction))

    if isinstance(effect, ScriptEventEffect):
        return partial(event_bus.publish, FlowEvent.SCRIPT_EVENT, name=effect.name)

    raise SceneDataError(f"Unsupported effect {effect!r}")
