"""Size budget check with a sticky one-cycle pause."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

GuardAction = Literal["purge-and-pause", "proceed"]

PURGE_AND_PAUSE: GuardAction = "purge-and-pause"
PROCEED: GuardAction = "proceed"


@dataclass(frozen=True)
class GuardDecision:
    action: GuardAction
    next_paused: bool


def evaluate(
    serialized_length: int, max_size: int | None, currently_paused: bool
) -> GuardDecision:
    """Decide what a persist cycle should do with a payload of this length.

    An oversized payload only trips the guard when not already paused. While
    paused the cycle proceeds (even when still oversized) and clears the pause.
    """
    if max_size is not None and serialized_length > max_size and not currently_paused:
        return GuardDecision(action=PURGE_AND_PAUSE, next_paused=True)
    return GuardDecision(action=PROCEED, next_paused=False)


__all__ = ["GuardAction", "GuardDecision", "PROCEED", "PURGE_AND_PAUSE", "evaluate"]
