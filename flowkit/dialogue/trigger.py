"""
Dialogue trigger - starts a dialogue from a world object.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from flowengine.core.errors import require

if TYPE_CHECKING:
    from flowkit.modes.controller import ModeController

logger = logging.getLogger(__name__)


class DialogueTrigger:
    """
    Starts the dialogue at `path` through the mode controller.

    Usually wired as an interaction effect or a trigger-zone listener:
        interaction.effects.append(DialogueTrigger("elder.greeting", modes).start)
    """

    def __init__(self, path: str, modes: ModeController):
        require("DialogueTrigger", modes=modes)
        self.path = path
        self.modes = modes

    def start(self) -> None:
        if not self.path or not self.path.strip():
            logger.warning("No dialogue path defined.")
            return
        self.modes.start_dialogue(self.path)
