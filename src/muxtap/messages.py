"""Friendly messages shown when the user backs out of a picker."""

import random
from typing import Callable, Sequence

CANCEL_MESSAGES = [
    "Nothing picked, nothing changed.",
    "Cancelled. Your sessions are right where you left them.",
    "Maybe next time.",
    "No selection, no harm done.",
    "Backed out cleanly.",
    "All quiet on the tmux front.",
]


def cancel_message(choose: Callable[[Sequence[str]], str] = random.choice) -> str:
    """Pick one of CANCEL_MESSAGES; tests pass a deterministic chooser."""
    return choose(CANCEL_MESSAGES)
