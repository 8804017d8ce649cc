from types import SimpleNamespace

import pygame
import pytest

from flowengine.input.handler import InputHandler
from flowkit.interaction.interactable import Interactable, Interaction
from flowkit.interaction.selector import InteractionSelector
from flowkit.modes.player import LOOK_AXIS_X, LOOK_AXIS_Y, PlayerInput
from flowkit.settings import (
    CONTROLLER_SENSITIVITY_KEY,
    INVERT_Y_KEY,
    MOUSE_SENSITIVITY_KEY,
    SettingsStore,
)


@pytest.fixture
def input_handler(mock_pygame):
    return InputHandler()


@pytest.fixture
def npc_log():
    return []


@pytest.fixture
def selector(npc_log):
    selector = InteractionSelector()
    selector.enter(Interactable("npc", [Interaction("talk", effects=[lambda: npc_log.append("talk")])]))
    return selector


def press_interact(input_handler):
    input_handler.process_event(SimpleNamespace(type=pygame.KEYDOWN, key=pygame.K_e))
    input_handler.update()


def test_interact_routes_to_selector(input_handler, selector, npc_log):
    player = PlayerInput(input_handler, selector)
    press_interact(input_handler)

    player.update()

    assert npc_log == ["talk"]


def test_disabled_input_ignores_interact(input_handler, selector, npc_log):
    player = PlayerInput(input_handler, selector)
    player.disable_input()
    press_interact(input_handler)

    player.update()

    assert not player.input_enabled
    assert npc_log == []


def test_mouse_look_uses_mouse_sensitivity(input_handler, selector):
    settings = SettingsStore({MOUSE_SENSITIVITY_KEY: 2.0})
    player = PlayerInput(input_handler, selector, settings)
    input_handler.process_event(SimpleNamespace(type=pygame.MOUSEMOTION, pos=(0, 0), rel=(3, 4)))

    assert player.get_look_vector(0.5) == (6.0, 8.0)


def test_controller_look_scales_and_inverts(input_handler, selector):
    settings = SettingsStore({CONTROLLER_SENSITIVITY_KEY: 2.0})
    player = PlayerInput(input_handler, selector, settings)
    input_handler._state.axis_values[LOOK_AXIS_X] = 0.5
    input_handler._state.axis_values[LOOK_AXIS_Y] = 0.25

    assert player.get_look_vector(0.5) == (0.5, -0.25)


def test_controller_look_without_invert(input_handler, selector):
    settings = SettingsStore({INVERT_Y_KEY: 0})
    player = PlayerInput(input_handler, selector, settings)
    input_handler._state.axis_values[LOOK_AXIS_Y] = 0.5

    assert player.get_look_vector(1.0) == (0.0, 0.5)


def test_look_is_zero_while_disabled(input_handler, selector):
    player = PlayerInput(input_handler, selector)
    input_handler.process_event(SimpleNamespace(type=pygame.MOUSEMOTION, pos=(0, 0), rel=(3, 4)))
    player.disable_input()

    assert player.get_look_vector(1.0) == (0.0, 0.0)

    player.enable_input()
    assert player.get_look_vector(1.0) == (3.0, 4.0)
