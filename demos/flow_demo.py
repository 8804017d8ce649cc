"""
Flow Demo: Gameplay Flow Orchestration

Demonstrates:
- Scene data loaded from JSON (interactables, chained interactions)
- Mode controller (Play / Dialogue / Pause)
- Dialogue engine driving the dialogue box, with choices and script functions
- Nested menus with ESC (toggle) and BACKSPACE (back)
- Game state counters and script events on the event bus

Controls:
- 1 / 2: walk up to the elder / the chest
- E: interact
- SPACE: continue dialogue, 1-9: pick a choice
- ESC: pause menu, S (paused): settings, BACKSPACE: back

Run: python -m demos.flow_demo
"""

import json
import logging
import shlex
from pathlib import Path

import pygame

from flowengine.core import FlowConfig, FlowContext, FlowEvent, configure_logging
from flowengine.input import InputHandler, PointerCapture
from flowengine.ui import FocusManager
from flowkit.dialogue import DialogueBox, DialogueEngine, ErrorSeverity
from flowkit.interaction import InteractionSelector
from flowkit.menus import Menu, MenuController
from flowkit.modes import Mode, ModeController, PlayerInput
from flowkit.scene import SceneLoader, build_interactables
from flowkit.settings import SettingsStore
from flowkit.state import GameState

logger = logging.getLogger("demos.flow_demo")

DATA_DIR = Path(__file__).parent / "data"


# ============================================================================
# SCRIPT INTERPRETER (demo only)
# ============================================================================

class KnotChoice:
    def __init__(self, text: str):
        self.text = text


class KnotInterpreter:
    """
    Tiny interpreter for the demo story format.

    A story maps knot paths to steps:
    - "Speaker: text #tag" is a line with optional tags
    - "~Function arg ..." calls a bound function
    - {"choices": [[text, [steps...]], ...]} offers choices
    """

    def __init__(self):
        self._knots: dict = {}
        self._functions: dict = {}
        self._error_handler = None
        self._pending: list = []
        self._choices: list[KnotChoice] = []
        self._branches: list = []
        self._tags: list[str] = []

    @property
    def can_continue(self) -> bool:
        return bool(self._pending) and not self._choices

    @property
    def current_choices(self) -> list[KnotChoice]:
        return list(self._choices)

    @property
    def current_tags(self) -> list[str]:
        return list(self._tags)

    def load_script(self, source: bytes) -> None:
        self._knots = json.loads(source)

    def jump_to(self, path: str) -> None:
        if path not in self._knots:
            self._report(f"Unknown knot '{path}'", ErrorSeverity.ERROR)
        self._choices = []
        self._pending = list(self._knots.get(path, []))
        self._settle()

    def continue_line(self) -> str:
        step = self._pending.pop(0)
        self._tags = []

        if step.startswith("~"):
            name, *args = shlex.split(step[1:])
            self._call(name, [int(a) if a.lstrip("-").isdigit() else a for a in args])
            text = ""
        else:
            text, *tags = step.split(" #")
            self._tags = [tag.strip() for tag in tags]

        self._settle()
        return text

    def choose_choice(self, index: int) -> None:
        branch = self._branches[index]
        self._choices = []
        self._branches = []
        self._pending = list(branch) + self._pending
        self._settle()

    def set_error_handler(self, handler) -> None:
        self._error_handler = handler

    def bind_external_function(self, name: str, func) -> None:
        self._functions[name] = func

    def _call(self, name: str, args: list) -> None:
        func = self._functions.get(name)
        if func is None:
            self._report(f"Unbound function '{name}'", ErrorSeverity.WARNING)
            return
        func(*args)

    def _settle(self) -> None:
        if self._pending and isinstance(self._pending[0], dict):
            options = self._pending.pop(0)["choices"]
            self._choices = [KnotChoice(text) for text, _ in options]
            self._branches = [steps for _, steps in options]

    def _report(self, message: str, severity: ErrorSeverity) -> None:
        if self._error_handler:
            self._error_handler(message, severity)


# ============================================================================
# DEMO
# ============================================================================

class FlowDemo:
    """Wires the flow systems together and runs a pygame loop."""

    def __init__(self):
        pygame.init()
        self.screen = pygame.display.set_mode((800, 600))
        pygame.display.set_caption("Narrative Flow - Demo")
        self.font = pygame.font.Font(None, 28)
        self.clock = pygame.time.Clock()

        config = FlowConfig(hide_previous_menu=True, log_level=logging.DEBUG)
        configure_logging(config)
        self.context = FlowContext(config)
        self.events = self.context.event_bus

        self.focus = FocusManager()
        self.input = InputHandler(self.events)

        scene = SceneLoader().load_file(DATA_DIR / "village.json")
        self.game_state = GameState(self.context, scene.states)

        self.box = DialogueBox(self.context, self.focus)
        self.dialogue = DialogueEngine(
            self.context,
            self.game_state,
            KnotInterpreter(),
            self.box,
            script=(DATA_DIR / "village_story.json").read_bytes(),
        )

        self.pause_menu = Menu("pause", self.context.scheduler, self.focus)
        self.settings_menu = Menu("settings", self.context.scheduler, self.focus)
        self.menus = MenuController(self.context, self.pause_menu)

        self.selector = InteractionSelector()
        self.player = PlayerInput(self.input, self.selector, SettingsStore())

        self.modes = ModeController(
            self.context, self.player, self.menus, self.dialogue, PointerCapture()
        )
        self.interactables = build_interactables(
            scene, self.game_state, self.modes, self.events
        )

        self.events.subscribe(FlowEvent.SCRIPT_EVENT, self.on_script_event)
        self.modes.start()
        self.running = True

    def on_script_event(self, event) -> None:
        logger.info(f"Script event: {event['name']}")

    def handle_key(self, key: int) -> None:
        mode = self.modes.mode

        if mode == Mode.PLAY:
            if key == pygame.K_1:
                self.selector.enter(self.interactables["elder"])
            elif key == pygame.K_2:
                self.selector.enter(self.interactables["chest"])

        elif mode == Mode.DIALOGUE:
            if key == pygame.K_SPACE:
                self.box.press_continue()
            elif pygame.K_1 <= key <= pygame.K_9:
                self.box.select_choice(key - pygame.K_1)

        elif mode == Mode.PAUSE:
            if key == pygame.K_s and self.menus.top is self.pause_menu:
                self.menus.open_menu(self.settings_menu)
            elif key == pygame.K_q:
                self.running = False

    def run(self) -> None:
        while self.running:
            real_dt = self.clock.tick(60) / 1000.0
            self.context.tick(real_dt)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                self.input.process_event(event)
                if event.type == pygame.KEYDOWN:
                    self.handle_key(event.key)

            self.input.update()
            self.menus.handle_input(self.input)
            self.player.update()

            self.draw()
            self.input.end_frame()

        self.modes.shutdown()
        self.dialogue.shutdown()
        pygame.quit()

    def draw(self) -> None:
        self.screen.fill((20, 24, 32))

        selected = self.selector.selected.id if self.selector.selected else "-"
        self.text(f"Mode: {self.modes.mode.value}", 20, 20)
        self.text(f"Coins: {self.game_state.amount_of('coins')}", 20, 50)
        self.text(f"Well quest: {self.game_state.amount_of('quest.well')}", 20, 80)
        self.text(f"Selected: {selected}   (1: elder, 2: chest, E: interact)", 20, 110)

        if self.box.visible:
            pygame.draw.rect(self.screen, (40, 40, 70), (20, 400, 760, 180))
            if self.box.speaker:
                self.text(self.box.speaker, 40, 410, (255, 220, 120))
            self.text(self.box.text, 40, 445)
            for i, control in enumerate(self.box.choices):
                marker = ">" if control.focused else " "
                self.text(f"{marker} {i + 1}. {control.label}", 60, 480 + i * 28)
            if self.box.show_continue:
                self.text("[SPACE]", 680, 545, (160, 160, 160))

        for depth, menu in enumerate(self.menus.open_menus):
            if menu.hidden:
                continue
            x = 200 + depth * 40
            y = 150 + depth * 40
            pygame.draw.rect(self.screen, (60, 60, 60), (x, y, 400, 200))
            self.text(menu.name.upper(), x + 20, y + 20)
            if menu is self.pause_menu:
                self.text("S: settings  Q: quit  ESC: resume", x + 20, y + 60)
            else:
                self.text("BACKSPACE: back", x + 20, y + 60)

        pygame.display.flip()

    def text(self, value: str, x: int, y: int, color=(230, 230, 230)) -> None:
        self.screen.blit(self.font.render(value, True, color), (x, y))


def main():
    """Run the flow demo."""
    FlowDemo().run()


if __name__ == "__main__":
    main()
