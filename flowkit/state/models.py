"""
Progress data - named counters and required minimums.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Counter(BaseModel):
    """
    A named integer progress value.

    Attributes:
        id: Unique name within the GameState
        amount: Signed value, no bounds enforced
    """

    model_config = ConfigDict(validate_assignment=True, extra='forbid')

    id: str
    amount: int = 0


class Condition(BaseModel):
    """
    A required minimum for a counter.

    Passes when the counter's amount (0 if absent) is >= `amount`.
    """

    model_config = ConfigDict(frozen=True, extra='forbid')

    id: str
    amount: int = 1
