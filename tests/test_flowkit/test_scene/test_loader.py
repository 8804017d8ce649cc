import json

import pytest

from flowengine.core.errors import MissingCollaboratorError, SceneDataError
from flowengine.core.events import FlowEvent
from flowkit.scene.loader import SceneLoader, build_interactables
from flowkit.scene.models import AddStateEffect, StartDialogueEffect
from flowkit.state.game_state import GameState


VILLAGE = {
    "id": "village",
    "states": [
        {"id": "coins", "amount": 2},
    ],
    "interactables": [
        {
            "id": "elder",
            "interactions": [
                {
                    "id": "greet",
                    "next": "idle",
                    "effects": [
                        {"type": "start_dialogue", "path": "elder.greet"},
                        {"type": "add_state", "id": "met_elder"},
                    ],
                },
                {
                    "id": "idle",
                    "next": "idle",
                    "effects": [{"type": "start_dialogue", "path": "elder.idle"}],
                },
            ],
        },
        {
            "id": "chest",
            "interactions": [
                {
                    "id": "open",
                    "effects": [
                        {"type": "add_state", "id": "coins", "amount": 10},
                        {"type": "event", "name": "chest_opened"},
                    ],
                },
            ],
        },
    ],
}


class Modes:
    def __init__(self):
        self.paths = []

    def start_dialogue(self, path):
        self.paths.append(path)


@pytest.fixture
def loader():
    return SceneLoader()


def test_load_dict(loader):
    scene = loader.load_dict(VILLAGE)

    assert scene.id == "village"
    assert scene.states[0].amount == 2
    elder = scene.interactables[0]
    assert [i.id for i in elder.interactions] == ["greet", "idle"]
    effects = elder.interactions[0].effects
    assert isinstance(effects[0], StartDialogueEffect)
    assert isinstance(effects[1], AddStateEffect)
    assert effects[1].amount == 1


def test_load_file(loader, tmp_path):
    path = tmp_path / "village.json"
    path.write_text(json.dumps(VILLAGE), encoding="utf-8")

    scene = loader.load_file(path)

    assert len(scene.interactables) == 2


def test_invalid_json_file(loader, tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SceneDataError):
        loader.load_file(path)


def test_unknown_next_is_rejected(loader):
    data = {
        "interactables": [
            {"id": "door", "interactions": [{"id": "open", "next": "close"}]},
        ],
    }

    with pytest.raises(SceneDataError, match="unknown next 'close'"):
        loader.load_dict(data)


def test_unknown_activate_target_is_rejected(loader):
    data = {
        "interactables": [
            {"id": "door", "interactions": [
                {"id": "open", "effects": [{"type": "activate", "interaction": "lock"}]},
            ]},
        ],
    }

    with pytest.raises(SceneDataError):
        loader.load_dict(data)


def test_duplicate_interaction_ids_are_rejected(loader):
    data = {
        "interactables": [
            {"id": "door", "interactions": [{"id": "open"}, {"id": "open"}]},
        ],
    }

    with pytest.raises(SceneDataError, match="Duplicate interaction"):
        loader.load_dict(data)


def test_duplicate_interactables_are_rejected(loader):
    data = {"interactables": [{"id": "door"}, {"id": "door"}]}

    with pytest.raises(SceneDataError, match="Duplicate interactable"):
        loader.load_dict(data)


@pytest.mark.parametrize("data", [
    {"states": [{"id": "coins", "amount": "lots"}]},
    {"interactables": [{"id": "door", "interactions": [{"id": "open", "effects": [{"type": "explode"}]}]}]},
    {"unexpected": True},
])
def test_schema_violations_are_rejected(loader, data):
    with pytest.raises(SceneDataError):
        loader.load_dict(data)


def test_build_interactables(context, event_bus, recorder, loader):
    scene = loader.load_dict(VILLAGE)
    game_state = GameState(context, scene.states)
    modes = Modes()
    event_bus.subscribe(FlowEvent.SCRIPT_EVENT, recorder, weak=False)

    interactables = build_interactables(scene, game_state, modes, event_bus)
    elder = interactables["elder"]
    chest = interactables["chest"]

    elder.interact()
    elder.interact()
    elder.interact()
    assert modes.paths == ["elder.greet", "elder.idle", "elder.idle"]
    assert game_state.amount_of("met_elder") == 1

    chest.interact()
    chest.interact()
    assert game_state.amount_of("coins") == 12
    assert recorder.events[0]["name"] == "chest_opened"


def test_activate_effect_overrides_next(context, event_bus, loader):
    scene = loader.load_dict({
        "interactables": [
            {"id": "guard", "interactions": [
                {"id": "block", "next": "block", "effects": [
                    {"type": "add_state", "id": "asked"},
                    {"type": "activate", "interaction": "pass"},
                ]},
                {"id": "pass"},
            ]},
        ],
    })
    game_state = GameState(context)

    guard = build_interactables(scene, game_state, None, event_bus)["guard"]
    guard.interact()

    assert guard.active.id == "pass"


def test_dialogue_effect_needs_modes(context, event_bus, loader):
    scene = loader.load_dict(VILLAGE)

    with pytest.raises(MissingCollaboratorError):
        build_interactables(scene, GameState(context), None, event_bus)
