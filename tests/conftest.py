import os
import sys
from dataclasses import dataclass
from unittest.mock import MagicMock, patch

import pytest

# Ensure flowengine/flowkit can be imported
sys.path.append(os.getcwd())


@pytest.fixture(autouse=True)
def mock_pygame():
    """
    Global mock for pygame to allow headless testing.
    Autoused for all tests to prevent accidental window creation or grabs.
    """
    with patch('pygame.init'), \
         patch('pygame.display'), \
         patch('pygame.event'), \
         patch('pygame.time'), \
         patch('pygame.joystick'), \
         patch('pygame.key'), \
         patch('pygame.mouse'):

        import pygame
        pygame.time.get_ticks = MagicMock(return_value=0)
        pygame.joystick.get_count = MagicMock(return_value=0)

        yield pygame


@pytest.fixture
def config():
    from flowengine.core.context import FlowConfig
    return FlowConfig()


@pytest.fixture
def context(config):
    """Fresh FlowContext for each test."""
    from flowengine.core.context import FlowContext
    return FlowContext(config)


@pytest.fixture
def event_bus(context):
    return context.event_bus


@pytest.fixture
def game_state(context):
    from flowkit.state.game_state import GameState
    return GameState(context)


@pytest.fixture
def focus():
    from flowengine.ui.focus import FocusManager
    return FocusManager()


@pytest.fixture
def recorder():
    """Callable that records the events it receives."""
    return EventRecorder()


class EventRecorder:
    def __init__(self):
        self.events = []

    def __call__(self, event):
        self.events.append(event)

    @property
    def count(self):
        return len(self.events)


class Control:
    """Minimal focusable control."""

    def __init__(self, name):
        self.name = name
        self.focused = False

    def __repr__(self):
        return f"Control({self.name!r})"

    def focus(self):
        self.focused = True
        return True

    def unfocus(self):
        self.focused = False


@pytest.fixture
def make_control():
    return Control


# Dialogue fakes

@dataclass
class FakeChoice:
    text: str


class FakeInterpreter:
    """
    Scripted stand-in for a narrative-script runtime.

    A knot is a list of steps:
    - "text" or ("text", ["tag", ...]) produces a line
    - {"choices": [("Yes", [steps...]), ("No", [steps...])]} offers choices;
      the chosen branch runs, then the rest of the knot
    - a callable receives the interpreter and produces an empty line
    """

    def __init__(self, knots=None):
        self.knots = knots or {}
        self.functions = {}
        self.error_handler = None
        self.loaded = []
        self.jumps = []
        self.chosen = []
        self._pending = []
        self._choices = []
        self._branches = []
        self._tags = []

    @property
    def can_continue(self):
        return bool(self._pending) and not self._choices

    @property
    def current_choices(self):
        return list(self._choices)

    @property
    def current_tags(self):
        return list(self._tags)

    def load_script(self, source):
        self.loaded.append(source)

    def jump_to(self, path):
        self.jumps.append(path)
        self._choices = []
        self._pending = list(self.knots.get(path, []))
        self._settle()

    def continue_line(self):
        step = self._pending.pop(0)
        self._tags = []
        if callable(step):
            step(self)
            text = ""
        elif isinstance(step, tuple):
            text, self._tags = step[0], list(step[1])
        else:
            text = step
        self._settle()
        return text

    def choose_choice(self, index):
        self.chosen.append(index)
        branch = self._branches[index]
        self._choices = []
        self._branches = []
        self._pending = list(branch) + self._pending
        self._settle()

    def set_error_handler(self, handler):
        self.error_handler = handler

    def bind_external_function(self, name, func):
        self.functions[name] = func

    def call(self, name, *args):
        return self.functions[name](*args)

    def report(self, message, severity):
        if self.error_handler:
            self.error_handler(message, severity)

    def _settle(self):
        if self._pending and isinstance(self._pending[0], dict):
            options = self._pending.pop(0)["choices"]
            self._choices = [FakeChoice(text) for text, _ in options]
            self._branches = [steps for _, steps in options]


class RecordingPresentation:
    """Presentation that records every call."""

    def __init__(self):
        self.calls = []
        self.lines = []

    def open(self):
        self.calls.append("open")

    def close(self):
        self.calls.append("close")

    def display_line(self, line):
        self.calls.append("display")
        self.lines.append(line)


@pytest.fixture
def make_interpreter():
    return FakeInterpreter


@pytest.fixture
def presentation():
    return RecordingPresentation()


# Mode controller fakes

class RecordingPlayer:
    def __init__(self):
        self.input_enabled = True

    def enable_input(self):
        self.input_enabled = True

    def disable_input(self):
        self.input_enabled = False


@pytest.fixture
def player():
    return RecordingPlayer()
