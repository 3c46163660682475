"""Topology enumeration - session/window/pane walk.

PUBLIC API:
  - enumerate_panes: Snapshot of all panes as display identifiers
  - format_candidates: Picker lines for a snapshot
"""

import logging
from typing import List, Optional, Sequence

from .tmux import list_panes, list_sessions, list_windows
from .types import DisplayIdentifier

logger = logging.getLogger(__name__)


def enumerate_panes() -> List[DisplayIdentifier]:
    """Walk the live server: sessions, then windows, then panes.

    The result is a point-in-time snapshot. Indices may shift as soon as
    anything is removed, so it is only good for showing to the user.

    Returns:
        One DisplayIdentifier per pane in traversal order
    """
    panes = []
    for session in list_sessions():
        for window in list_windows(session):
            indexes = list_panes(session, window)
            if not indexes:
                logger.debug(f"Window {session}:{window} has no panes, skipping")
                continue
            panes.extend(DisplayIdentifier(session, window, pane) for pane in indexes)
    return panes


def format_candidates(panes: Sequence[DisplayIdentifier], current: Optional[DisplayIdentifier] = None) -> List[str]:
    """Picker lines for panes, with the invoking pane moved to the top."""
    ordered = list(panes)
    if current in ordered:
        ordered.remove(current)
        ordered.insert(0, current)
    return [str(pane) for pane in ordered]
