"""Session management for tmux.

PUBLIC API:
  - list_sessions: Get all tmux session names
  - session_exists: Check if session exists
  - create_session: Create detached session at a directory
  - attach_or_switch: Attach (outside tmux) or switch client (inside tmux)
  - rename_session: Rename a session
  - spawn_and_attach: Create session and move the client to it
"""

import logging
from typing import List

from .core import STABLE_FORMAT, is_inside_tmux, parse_stable_line, run_tmux, run_tmux_attached
from .exceptions import SessionNotFoundError, TmuxError
from ..types import StableIdentifier

logger = logging.getLogger(__name__)


def list_sessions() -> List[str]:
    """Get all tmux session names in tmux listing order.

    Returns:
        Session names, empty when no server is running.
    """
    code, out, _ = run_tmux(["list-sessions", "-F", "#{session_name}"])

    if code != 0 or not out.strip():
        return []

    return [line for line in out.split("\n") if line]


def session_exists(name: str) -> bool:
    """Check if session exists (exact name match)."""
    code, _, _ = run_tmux(["has-session", "-t", f"={name}"])
    return code == 0


def create_session(name: str, start_dir: str) -> StableIdentifier:
    """Create new detached session.

    Args:
        name: Session name.
        start_dir: Working directory for the first pane.

    Returns:
        Stable identifier of the session's first pane.

    Raises:
        TmuxError: If tmux refuses (e.g. duplicate name).
    """
    args = ["new-session", "-d", "-s", name, "-c", start_dir, "-P", "-F", STABLE_FORMAT]
    code, stdout, stderr = run_tmux(args)
    if code != 0:
        raise TmuxError(f"Failed to create session {name!r}: {stderr.strip()}")

    pane = parse_stable_line(stdout.strip("\n"))
    logger.info(f"Created session {name!r} at {start_dir} ({pane.pane_id})")
    return pane


def attach_or_switch(target: str) -> None:
    """Move the invoking client to target.

    Inside tmux the current client is switched; outside, a new client attaches
    on this terminal and blocks until it detaches.

    Args:
        target: Any tmux target, e.g. "=proj - S01" or "=proj - S01:1.0".
    """
    if is_inside_tmux():
        code, _, stderr = run_tmux(["switch-client", "-t", target])
        if code != 0:
            raise TmuxError(f"Failed to switch to {target}: {stderr.strip()}")
        return

    code = run_tmux_attached(["attach-session", "-t", target])
    if code != 0:
        raise TmuxError(f"Failed to attach to {target}")


def rename_session(old: str, new: str) -> None:
    """Rename a session.

    Raises:
        SessionNotFoundError: If old no longer exists.
        TmuxError: If tmux refuses the new name.
    """
    if not session_exists(old):
        raise SessionNotFoundError(f"Session not found: {old}")

    code, _, stderr = run_tmux(["rename-session", "-t", f"={old}", new])
    if code != 0:
        raise TmuxError(f"Failed to rename {old!r} to {new!r}: {stderr.strip()}")
    logger.info(f"Renamed session {old!r} to {new!r}")


def spawn_and_attach(session_name: str, working_directory: str) -> StableIdentifier:
    """Create a detached session and immediately move the client there.

    The caller validates working_directory first.
    """
    pane = create_session(session_name, working_directory)
    attach_or_switch(f"={session_name}")
    return pane
