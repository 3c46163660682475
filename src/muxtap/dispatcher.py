"""Action dispatcher - the two interactive flows behind the CLI.

PUBLIC API:
  - action_for_key: Map an fzf expect key to an action
  - ask_new_name: Default interactive rename prompt
  - manage_sessions: Pick panes and switch/rename/kill
  - create_session_from_directory: Pick a directory and spawn a session there
"""

import logging
from typing import Optional, Tuple

from rich.console import Console
from rich.prompt import Prompt

from .config import check_source, get_config
from .directories import pick_directory, session_base_name, validate_directory
from .errors import NoSessionsError, UsageError, UserCancelled
from .picker import pick
from .resolver import ActionResult, RenamePrompt, resolve_and_act
from .tmux import get_display_state, next_session_name, spawn_and_attach
from .topology import enumerate_panes, format_candidates
from .types import Action, DisplayIdentifier

logger = logging.getLogger(__name__)

KEY_ACTIONS: dict[str, Action] = {
    "": "switch",
    "enter": "switch",
    "ctrl-r": "rename",
    "ctrl-x": "kill",
}
EXPECT_KEYS = ("ctrl-r", "ctrl-x")
MANAGE_HEADER = "enter: switch | ctrl-r: rename session | ctrl-x: kill pane | tab: mark"
PANE_PREVIEW = "tmux capture-pane -ep -t ={}"

_console = Console(stderr=True)


def action_for_key(key: str) -> Action:
    """Map a captured fzf key to an action.

    Raises:
        UsageError: If key is not bound.
    """
    try:
        return KEY_ACTIONS[key]
    except KeyError:
        raise UsageError(f"Unbound key: {key}")


def ask_new_name(session: str) -> Optional[str]:
    """Prompt on the terminal for a session's new name."""
    return Prompt.ask(f"Rename [bold]{session}[/bold] to", default=session, console=_console)


def manage_sessions(prompt: RenamePrompt = ask_new_name) -> Tuple[Action, ActionResult]:
    """Pick panes and switch to, rename or kill them.

    Returns:
        The action taken and what it did (see resolve_and_act)

    Raises:
        NoSessionsError: No panes on the server
        UserCancelled: Picker aborted
    """
    panes = enumerate_panes()
    if not panes:
        raise NoSessionsError("No tmux sessions running")

    state = get_display_state()
    header = MANAGE_HEADER
    if state:
        header = f"{MANAGE_HEADER}\ncurrent: {state.display}"

    result = pick(
        format_candidates(panes, state.display if state else None),
        prompt="pane> ",
        header=header,
        multi=True,
        expect=EXPECT_KEYS,
        preview=PANE_PREVIEW,
        preview_window="right:60%" if state and state.zoomed else "down:50%",
    )
    if result is None:
        raise UserCancelled("No pane picked")

    action = action_for_key(result.key)
    selected = [DisplayIdentifier.parse(line) for line in result.lines]
    logger.debug(f"Picked {action}: {', '.join(map(str, selected))}")

    return action, resolve_and_act(selected, action, state.stable if state else None, prompt=prompt)


def create_session_from_directory(
    directory: Optional[str] = None, source: Optional[str] = None, root: Optional[str] = None
) -> str:
    """Spawn a sequenced session at directory, picking one if not given.

    Returns:
        The new session's name

    Raises:
        UsageError: Unknown source
        ValidationError: Directory missing
        UserCancelled: Picker aborted
    """
    config = get_config()
    source = check_source(source or config.source)
    root = root or config.root

    path = validate_directory(directory) if directory else pick_directory(source, root)

    # Allocate as late as possible to keep the collision window small.
    name = next_session_name(session_base_name(path))
    spawn_and_attach(name, str(path))
    return name
