from types import SimpleNamespace

import pygame

from flowengine.core.actions import Action
from flowengine.input.handler import InputEvent, InputHandler
from flowengine.input.pointer import PointerCapture


def key_down(key):
    return SimpleNamespace(type=pygame.KEYDOWN, key=key)


def key_up(key):
    return SimpleNamespace(type=pygame.KEYUP, key=key)


def test_action_state(mock_pygame):
    handler = InputHandler()
    handler._state.actions_pressed.add(Action.MOVE_UP)

    assert handler.is_action_pressed(Action.MOVE_UP)
    assert not handler.is_action_pressed(Action.MOVE_DOWN)


def test_just_pressed_lasts_one_frame(mock_pygame):
    handler = InputHandler()

    handler.process_event(key_down(pygame.K_e))
    handler.update()
    assert handler.is_action_just_pressed(Action.INTERACT)

    handler.update()
    assert handler.is_action_pressed(Action.INTERACT)
    assert not handler.is_action_just_pressed(Action.INTERACT)

    handler.process_event(key_up(pygame.K_e))
    handler.update()
    assert handler.is_action_just_released(Action.INTERACT)


def test_action_held_by_second_key(mock_pygame):
    handler = InputHandler()

    handler.process_event(key_down(pygame.K_ESCAPE))
    handler.process_event(key_down(pygame.K_TAB))
    handler.process_event(key_up(pygame.K_ESCAPE))
    handler.update()

    assert handler.is_action_pressed(Action.MENU)


def test_actions_published(mock_pygame, event_bus, recorder):
    handler = InputHandler(event_bus)
    event_bus.subscribe(InputEvent.ACTION_PRESSED, recorder, weak=False)

    handler.process_event(key_down(pygame.K_e))
    handler.update()

    assert recorder.count == 1
    assert recorder.events[0]["action"] == Action.INTERACT


def test_mouse_delta_accumulates_until_end_frame(mock_pygame):
    handler = InputHandler()

    handler.process_event(SimpleNamespace(type=pygame.MOUSEMOTION, pos=(10, 10), rel=(3, -1)))
    handler.process_event(SimpleNamespace(type=pygame.MOUSEMOTION, pos=(12, 9), rel=(2, -1)))

    assert handler.mouse_delta == (5, -2)

    handler.end_frame()
    assert handler.mouse_delta == (0, 0)


def test_mouse_buttons_carry_no_state(mock_pygame):
    handler = InputHandler()

    handler.process_event(SimpleNamespace(type=pygame.MOUSEBUTTONDOWN, button=1, pos=(4, 4)))
    handler.update()

    assert handler.mouse_delta == (0, 0)
    assert not handler._state.actions_pressed
    assert not hasattr(handler, "mouse_pos")
    assert not hasattr(handler, "is_key_pressed")


def test_rebinding(mock_pygame):
    handler = InputHandler()

    handler.bind_key(Action.INTERACT, pygame.K_f)
    assert pygame.K_f in handler.get_bindings(Action.INTERACT)

    handler.unbind_key(Action.INTERACT, pygame.K_e)
    handler.process_event(key_down(pygame.K_e))
    handler.update()
    assert not handler.is_action_pressed(Action.INTERACT)


def test_pointer_capture(mock_pygame):
    pointer = PointerCapture()

    pointer.capture()
    assert pointer.captured
    mock_pygame.event.set_grab.assert_called_with(True)
    mock_pygame.mouse.set_visible.assert_called_with(False)

    pointer.release()
    assert not pointer.captured
    mock_pygame.event.set_grab.assert_called_with(False)
    mock_pygame.mouse.set_visible.assert_called_with(True)
