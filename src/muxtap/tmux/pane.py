"""Window and pane operations."""

import logging
from typing import List

from .core import is_missing_target, run_tmux
from .exceptions import PaneNotFoundError, TmuxError
from ..types import StableIdentifier

logger = logging.getLogger(__name__)


def _list_indexes(args: List[str]) -> List[int]:
    code, stdout, _ = run_tmux(args)
    if code != 0:
        return []

    indexes = []
    for line in stdout.split("\n"):
        if not line.strip():
            continue
        try:
            indexes.append(int(line))
        except ValueError:
            logger.warning(f"Skipping malformed index line: {line!r}")
    return sorted(indexes)


def list_windows(session: str) -> List[int]:
    """List window display indexes of a session, ascending.

    Returns an empty list if the session is gone.
    """
    return _list_indexes(["list-windows", "-t", f"={session}", "-F", "#{window_index}"])


def list_panes(session: str, window: int) -> List[int]:
    """List pane display indexes of session:window, ascending.

    Returns an empty list if the window is gone.
    """
    return _list_indexes(["list-panes", "-t", f"={session}:{window}", "-F", "#{pane_index}"])


def kill_pane(pane: StableIdentifier) -> None:
    """Kill a pane by its stable ID.

    Raises:
        PaneNotFoundError: If the pane no longer exists.
        TmuxError: On any other tmux failure.
    """
    code, _, stderr = run_tmux(["kill-pane", "-t", pane.pane_id])
    if code == 0:
        logger.info(f"Killed pane {pane.pane_id} ({pane.session} {pane.window_id})")
        return

    if is_missing_target(stderr):
        raise PaneNotFoundError(f"Pane not found: {pane.pane_id}")
    raise TmuxError(f"Failed to kill pane {pane.pane_id}: {stderr.strip()}")
