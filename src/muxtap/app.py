"""muxtap ReplKit2 application - tmux session launcher and manager.

Both commands are plain CLI subcommands (`muxtap new`, `muxtap manage`)
built on ReplKit2's Typer integration.
"""

from dataclasses import dataclass

from replkit2 import App


@dataclass
class MuxTapState:
    """Application state for muxtap.

    Empty on purpose: every invocation re-reads the live tmux server and
    nothing survives between commands.
    """

    pass


# Must be created before command imports for decorator registration
app = App("muxtap", MuxTapState)


# Command imports trigger @app.command decorator registration
from .commands import new  # noqa: E402, F401
from .commands import manage  # noqa: E402, F401
