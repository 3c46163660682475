"""Session name allocation.

Session names are "<base> - S<NN>" where NN is one past the highest sequence
currently held by a live session with the same base.

PUBLIC API:
  - sanitize_session_name: Replace characters tmux treats as target separators
  - allocate_session_name: Compute next sequenced name from a list of sessions
  - next_session_name: Allocate against the live server
"""

import re
from typing import Iterable

from .session import list_sessions

RESERVED_CHARS = ".:"
SEQUENCE_WIDTH = 2


def sanitize_session_name(name: str) -> str:
    """Replace '.' and ':' with '_'.

    Both are separators in session:window.pane, so a session name containing
    them cannot be targeted unambiguously.
    """
    for char in RESERVED_CHARS:
        name = name.replace(char, "_")
    return name


def allocate_session_name(base_name: str, running_sessions: Iterable[str]) -> str:
    """Compute the next free sequenced session name for base_name.

    Args:
        base_name: Desired base, sanitized before use.
        running_sessions: Names of live sessions (may be empty).

    Returns:
        "<base> - S01" when no session uses the base yet, otherwise the highest
        existing sequence plus one, zero padded to at least two digits.
    """
    base = sanitize_session_name(base_name)
    pattern = re.compile(rf"^{re.escape(base)} - S(\d+)$")

    sequences = [int(m.group(1)) for m in map(pattern.match, running_sessions) if m]
    next_seq = max(sequences) + 1 if sequences else 1

    return f"{base} - S{next_seq:0{SEQUENCE_WIDTH}d}"


def next_session_name(base_name: str) -> str:
    """Allocate a name against the sessions live right now.

    Call immediately before spawning; nothing reserves the name.
    """
    return allocate_session_name(base_name, list_sessions())
