"""
Dialogue line parser.

Script output encodes the speaker in front of a separator:

```
Alice: Hello there.
Just narration without a speaker.
Clock: It is 12::30.        <- "::" is a literal ":"
```
"""

from __future__ import annotations

import logging
from typing import Collection, Optional

from flowengine.core.context import FlowConfig
from flowkit.dialogue.models import DialogueLine

logger = logging.getLogger(__name__)

# Stand-in for escaped separators while splitting
_PLACEHOLDER = "\x00"


def parse_line(
    raw: str,
    tags: Optional[Collection[str]] = None,
    config: Optional[FlowConfig] = None,
) -> DialogueLine:
    """
    Parse a raw script line into a DialogueLine without choices.

    Args:
        raw: Line text as produced by the interpreter
        tags: Tags attached to the line
        config: Separator, escape and thought-tag settings

    Returns:
        DialogueLine with speaker None when the line names no speaker
    """
    config = config or FlowConfig()
    separator = config.speaker_separator

    escaped = raw.replace(config.escaped_separator, _PLACEHOLDER)
    parts = escaped.split(separator)

    speaker: Optional[str]
    if len(parts) == 1:
        speaker = None
        text = parts[0]
    else:
        if len(parts) > 2:
            logger.warning(
                f"Dialogue line was split at more {separator} than expected. "
                f"Please make sure to use {config.escaped_separator} for {separator} "
                f"inside text: {raw!r}"
            )
        speaker = _restore(parts[0], separator).strip()
        text = separator.join(parts[1:])

    text = _restore(text, separator).strip()

    if tags and config.thought_tag in tags:
        text = config.thought_format.format(text=text)

    return DialogueLine(speaker=speaker, text=text)


def _restore(value: str, separator: str) -> str:
    return value.replace(_PLACEHOLDER, separator)
