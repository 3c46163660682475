"""Manage command - switch to, rename or kill existing panes."""

from ..app import app
from ..dispatcher import manage_sessions
from ..errors import MuxTapError, UserCancelled, exit_with_error, print_notice
from ..messages import cancel_message


@app.command(
    display="text",
    typer={"name": "manage", "help": "Switch to, rename or kill running sessions and panes"},
    fastmcp={"enabled": False},
)
def manage(state) -> str:
    """Pick one or more panes across all sessions and act on them.

    Keys: enter switches to the first pick, ctrl-r renames the sessions of
    all picks, ctrl-x kills all picked panes.
    """
    try:
        action, result = manage_sessions()
    except UserCancelled:
        print_notice(cancel_message())
        return ""
    except MuxTapError as e:
        exit_with_error(str(e))

    if action == "kill":
        return f"Killed {len(result)} pane(s)"
    if action == "rename":
        return f"Renamed {len(result)} session(s)"
    return ""
