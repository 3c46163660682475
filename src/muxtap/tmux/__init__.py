"""Pure tmux operations - shared utilities for all muxtap modules.

PUBLIC API:
  - run_tmux: Run tmux command and return result
  - is_inside_tmux: Check if running inside a tmux client
  - get_display_state: Current location and zoom flag of the invoking client
  - list_sessions: List live session names
  - list_windows: List window indexes of a session
  - list_panes: List pane indexes of a window
  - kill_pane: Kill pane by stable ID
  - resolve_display_identifier: Resolve session:window.pane to stable IDs
  - create_session: Create detached session
  - attach_or_switch: Move the client to a target
  - rename_session: Rename a session
  - spawn_and_attach: Create session and move the client to it
  - sanitize_session_name: Strip target separators from a name
  - allocate_session_name: Next sequenced session name
  - next_session_name: Next sequenced session name against the live server
"""

from .core import run_tmux, is_inside_tmux, get_display_state

from .pane import list_windows, list_panes, kill_pane

from .resolution import resolve_display_identifier

from .session import (
    list_sessions,
    session_exists,
    create_session,
    attach_or_switch,
    rename_session,
    spawn_and_attach,
)

from .names import sanitize_session_name, allocate_session_name, next_session_name

__all__ = [
    "run_tmux",
    "is_inside_tmux",
    "get_display_state",
    "list_windows",
    "list_panes",
    "kill_pane",
    "resolve_display_identifier",
    "list_sessions",
    "session_exists",
    "create_session",
    "attach_or_switch",
    "rename_session",
    "spawn_and_attach",
    "sanitize_session_name",
    "allocate_session_name",
    "next_session_name",
]
