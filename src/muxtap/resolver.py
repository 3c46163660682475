"""Target resolver - act on picked display identifiers safely.

Display identifiers picked by the user go stale as soon as a sibling pane or
window is removed (tmux renumbers what follows it). Kills therefore resolve
each target to its stable pane ID immediately before killing it, walk targets
from the highest index down so a kill never shifts a target still pending,
and leave the invoking pane for last so the controlling client survives until
the rest of the batch is done.

PUBLIC API:
  - kill_targets: Kill picked panes
  - rename_targets: Rename the distinct sessions of picked panes
  - switch_target: Move the client to the first picked pane
  - resolve_and_act: Dispatch an action over a selection
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from .tmux import attach_or_switch, kill_pane, rename_session, resolve_display_identifier, sanitize_session_name
from .tmux.exceptions import PaneNotFoundError, SessionNotFoundError
from .types import Action, DisplayIdentifier, StableIdentifier

logger = logging.getLogger(__name__)

type RenamePrompt = Callable[[str], Optional[str]]
type ActionResult = Optional[List[StableIdentifier] | List[Tuple[str, str]] | DisplayIdentifier]


def _unique(items: Sequence) -> list:
    seen = set()
    ordered = []
    for item in items:
        if item not in seen:
            seen.add(item)
            ordered.append(item)
    return ordered


def kill_order(selected: Sequence[DisplayIdentifier]) -> List[DisplayIdentifier]:
    """Order targets so no kill renumbers a target still to come.

    Removing pane N only shifts panes above N in the same window, and removing
    window N only shifts windows above N, so going from the highest
    (window, pane) down keeps every pending display index valid.
    """
    return sorted(_unique(selected), key=lambda d: (d.session, d.window, d.pane), reverse=True)


def _kill(pane: StableIdentifier) -> bool:
    try:
        kill_pane(pane)
    except PaneNotFoundError:
        logger.debug(f"Pane {pane.pane_id} already gone")
        return False
    return True


def kill_targets(
    selected: Sequence[DisplayIdentifier], current_pane: Optional[StableIdentifier]
) -> List[StableIdentifier]:
    """Kill the picked panes.

    Args:
        selected: Display identifiers picked by the user, any order
        current_pane: The pane muxtap was invoked from, None outside tmux

    Returns:
        Stable identifiers actually killed, in kill order. The invoking pane,
        if picked, is always last.
    """
    killed = []
    kill_self = False

    for display in kill_order(selected):
        # Resolve right before the kill; an earlier snapshot may be stale.
        pane = resolve_display_identifier(display)
        if pane is None:
            logger.debug(f"Nothing at {display} any more, skipping")
            continue

        if current_pane is not None and pane.pane_id == current_pane.pane_id:
            kill_self = True
            continue

        if _kill(pane):
            killed.append(pane)

    if kill_self and current_pane is not None and _kill(current_pane):
        killed.append(current_pane)

    return killed


def rename_targets(selected: Sequence[DisplayIdentifier], prompt: RenamePrompt) -> List[Tuple[str, str]]:
    """Rename each distinct session referenced by the selection.

    Args:
        selected: Display identifiers picked by the user
        prompt: Called once per distinct session (first-seen order) with the
            current name; returns the new name, or None/empty to skip

    Returns:
        (old, new) pairs that were applied
    """
    renamed = []
    for session in _unique([display.session for display in selected]):
        answer = prompt(session)
        if not answer or not answer.strip():
            logger.debug(f"Rename of {session!r} skipped")
            continue

        new_name = sanitize_session_name(answer.strip())
        if new_name == session:
            continue

        try:
            rename_session(session, new_name)
        except SessionNotFoundError:
            logger.debug(f"Session {session!r} already gone")
            continue
        renamed.append((session, new_name))

    return renamed


def switch_target(selected: Sequence[DisplayIdentifier]) -> Optional[DisplayIdentifier]:
    """Attach or switch to the first picked pane.

    Switching does not renumber anything, so the display identifier is used
    directly.
    """
    if not selected:
        return None

    target = selected[0]
    attach_or_switch(target.target)
    return target


def resolve_and_act(
    selected: Sequence[DisplayIdentifier],
    action: Action,
    current_pane: Optional[StableIdentifier],
    prompt: Optional[RenamePrompt] = None,
) -> ActionResult:
    """Run action over selected.

    Returns:
        What the action did: killed panes for kill, (old, new) pairs for
        rename, the switched-to pane for switch. An empty selection does
        nothing and returns None.
    """
    if not selected:
        return None

    logger.debug(f"{action} on {len(selected)} target(s)")
    if action == "kill":
        return kill_targets(selected, current_pane)
    elif action == "rename":
        if prompt is None:
            raise ValueError("rename needs a prompt")
        return rename_targets(selected, prompt)
    elif action == "switch":
        return switch_target(selected)
    else:
        raise ValueError(f"Unknown action: {action}")
