"""New command - spawn a session from a picked directory."""

from typing import Optional

from ..app import app
from ..dispatcher import create_session_from_directory
from ..errors import MuxTapError, UserCancelled, exit_with_error, print_notice
from ..messages import cancel_message


@app.command(
    display="text",
    typer={"name": "new", "help": "Create a new tmux session in a picked directory"},
    fastmcp={"enabled": False},
)
def new(state, directory: Optional[str] = None, source: Optional[str] = None, root: Optional[str] = None) -> str:
    """Create a new tmux session rooted at a directory.

    Session names are the directory's basename plus a sequence number
    ("proj - S01", "proj - S02", ...), so picking the same directory twice
    never collides.

    Args:
        directory: Use this directory instead of picking one
        source: Where candidates come from: "fd" (walk of root) or "zoxide"
        root: Directory walked by the fd source (default: home)

    Examples:
        muxtap new
        muxtap new --source zoxide
        muxtap new --root ~/src
        muxtap new --directory ~/src/muxtap
    """
    try:
        name = create_session_from_directory(directory, source, root)
    except UserCancelled:
        print_notice(cancel_message())
        return ""
    except MuxTapError as e:
        exit_with_error(str(e))

    return f"Session: {name}"
